"""Food image nutrition analyzer: relay API, static bundle and Python client."""

__version__ = "1.0.0"
