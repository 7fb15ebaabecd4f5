"""Static file serving for the browser bundle."""

import errno
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


MIME_TYPES = {
    ".html": "text/html",
    ".js": "text/javascript",
    ".css": "text/css",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
}
DEFAULT_MIME_TYPE = "application/octet-stream"

INDEX_DOCUMENT = "index.html"
NOT_FOUND_BODY = b"<h1>404 - File Not Found</h1>"


@dataclass(frozen=True)
class StaticAsset:
    """Result of serving a path."""

    status_code: int
    content_type: str
    body: bytes


def content_type_for(path: str | Path) -> str:
    """Resolve a content type from the file extension."""
    return MIME_TYPES.get(Path(path).suffix.lower(), DEFAULT_MIME_TYPE)


class StaticAssetServer:
    """Serves files from a fixed asset root."""

    def __init__(self, root: str | Path):
        self.root = Path(root).resolve()

    def resolve(self, path: str) -> Path | None:
        """
        Map a request path to a file under the root.

        Returns None for paths that escape the root.
        """
        relative = path.lstrip("/")
        if not relative:
            relative = INDEX_DOCUMENT

        candidate = (self.root / relative).resolve()
        if candidate != self.root and self.root not in candidate.parents:
            return None
        return candidate

    def serve(self, path: str) -> StaticAsset:
        """
        Read the file behind ``path``.

        Returns:
            200 with the file bytes, 404 if missing, 500 on any other read error
        """
        file_path = self.resolve(path)
        if file_path is None:
            logger.warning(f"Rejected path outside asset root: {path}")
            return _not_found()

        try:
            body = file_path.read_bytes()
        except FileNotFoundError:
            return _not_found()
        except OSError as e:
            code = errno.errorcode.get(e.errno, "UNKNOWN") if e.errno else "UNKNOWN"
            logger.error(f"Failed to read {file_path}: {code}")
            return StaticAsset(
                status_code=500,
                content_type="text/plain",
                body=f"Server Error: {code}".encode("utf-8"),
            )

        return StaticAsset(
            status_code=200,
            content_type=content_type_for(file_path),
            body=body,
        )


def _not_found() -> StaticAsset:
    return StaticAsset(status_code=404, content_type="text/html", body=NOT_FOUND_BODY)
