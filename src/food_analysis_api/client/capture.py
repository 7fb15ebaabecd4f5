"""Image selection state for the analysis client."""

import base64
import logging
import mimetypes
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)

MAX_IMAGE_BYTES = 10 * 1024 * 1024  # 10 MB

INVALID_TYPE_MESSAGE = "Please select an image file (JPG, PNG, JPEG)"
TOO_LARGE_MESSAGE = "File size too large. Maximum 10MB allowed."


class CaptureError(Exception):
    """User-visible image selection error."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CaptureIntent(str, Enum):
    """How the file picker is opened."""

    CAMERA = "camera"
    GALLERY = "gallery"

    def picker_attributes(self) -> dict[str, str]:
        """Attributes to set on the file input before opening it."""
        if self is CaptureIntent.CAMERA:
            return {"capture": "environment", "accept": "image/*"}
        return {}


class View(str, Enum):
    """Which part of the UI is visible."""

    UPLOAD = "upload"
    PREVIEW = "preview"
    RESULT = "result"


@dataclass(frozen=True)
class UploadedImage:
    """An image chosen by the user."""

    content: bytes
    mime_type: str
    name: str = ""

    @property
    def size(self) -> int:
        return len(self.content)

    @classmethod
    def from_path(cls, path: str | Path) -> "UploadedImage":
        """Load a file, guessing its MIME type from the extension."""
        path = Path(path)
        mime_type, _ = mimetypes.guess_type(path.name)
        return cls(
            content=path.read_bytes(),
            mime_type=mime_type or "application/octet-stream",
            name=path.name,
        )


def validate_image_type(mime_type: str) -> None:
    if "image" not in (mime_type or ""):
        raise CaptureError(INVALID_TYPE_MESSAGE)


def validate_image_size(size: int) -> None:
    if size > MAX_IMAGE_BYTES:
        raise CaptureError(TOO_LARGE_MESSAGE)


class CaptureSession:
    """
    Selected image plus the UI state around it.

    ``select`` and ``reset`` are the only transitions that touch the
    selection; the analysis client toggles ``loading`` and ``error``.
    """

    def __init__(self) -> None:
        self.image: UploadedImage | None = None
        self.image_base64: str | None = None
        self.preview_uri: str | None = None
        self.view = View.UPLOAD
        self.error: str | None = None
        self.loading = False
        self.result: str | None = None

    @property
    def trigger_enabled(self) -> bool:
        """Whether the analyze control accepts clicks."""
        return not self.loading

    def show_error(self, message: str) -> None:
        self.error = message

    def clear_error(self) -> None:
        self.error = None

    def select(self, image: UploadedImage) -> str:
        """
        Validate and hold an image.

        Returns:
            The base64 payload (data URI without its prefix)

        Raises:
            CaptureError: If the type is not an image or the file is too large
        """
        try:
            validate_image_type(image.mime_type)
            validate_image_size(image.size)
        except CaptureError as e:
            self.show_error(e.message)
            raise

        encoded = base64.b64encode(image.content).decode("ascii")
        self.image = image
        self.preview_uri = f"data:{image.mime_type};base64,{encoded}"
        self.image_base64 = self.preview_uri.split(",", 1)[1]
        self.view = View.PREVIEW
        self.clear_error()

        logger.debug(f"Selected {image.name or 'image'} ({image.size} bytes)")
        return self.image_base64

    def show_result(self, text: str) -> None:
        self.result = text
        self.view = View.RESULT

    def reset(self) -> None:
        """Drop the selection and return to the upload view."""
        self.image = None
        self.image_base64 = None
        self.preview_uri = None
        self.result = None
        self.view = View.UPLOAD
        self.clear_error()
        self.loading = False
