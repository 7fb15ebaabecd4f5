"""Chat-completions inference client used by the analysis relay."""

from .groq_client import GroqChatClient, get_inference_client
from .prompts import FOOD_ANALYSIS_PROMPT, build_analysis_request

__all__ = [
    "FOOD_ANALYSIS_PROMPT",
    "GroqChatClient",
    "build_analysis_request",
    "get_inference_client",
]
