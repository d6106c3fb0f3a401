"""
Photo preview for the human doing the triage.
"""

from enum import Enum
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from .constants import JPG_EXTENSIONS, PNG_EXTENSIONS, get_logger


class PreviewFormat(Enum):
    """Decoder to use for a photo, resolved once per file from its extension."""

    PNG = "PNG"
    JPEG = "JPEG"
    UNSUPPORTED = None

    @classmethod
    def from_path(cls, file_path: Path) -> "PreviewFormat":
        ext = file_path.suffix.lower()
        if ext in PNG_EXTENSIONS:
            return cls.PNG
        if ext in JPG_EXTENSIONS:
            return cls.JPEG
        return cls.UNSUPPORTED


class PhotoPreviewer:
    """Decode a PNG/JPEG with Pillow and hand it to the system image viewer."""

    def __init__(self):
        self.logger = get_logger()

    def show(self, file_path: Path, preview_format: PreviewFormat) -> bool:
        """Render a photo. Returns False if it could not be decoded."""
        if preview_format is PreviewFormat.UNSUPPORTED:
            raise ValueError(f"No preview decoder for {file_path.name}")

        try:
            with Image.open(file_path, formats=[preview_format.value]) as image:
                image.load()
                self.render(image, file_path)
        except (UnidentifiedImageError, OSError) as e:
            self.logger.warning(f"Could not decode {file_path.name} for preview: {e}")
            return False

        self.logger.debug(f"Previewed {file_path} as {preview_format.value}")
        return True

    def render(self, image: Image.Image, file_path: Path) -> None:
        image.show(title=file_path.name)
