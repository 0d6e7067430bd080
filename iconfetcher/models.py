"""Data models for icon resolution"""

from io import BytesIO
from typing import Optional

from PIL import Image as PILImage
from PIL import UnidentifiedImageError
from pydantic import BaseModel, ConfigDict, Field

from iconfetcher.constants import APPLE_TOUCH_ICON
from iconfetcher.exceptions import ImageDecodeFailed


class IconCandidate(BaseModel):
    """A URL that may serve the site's icon, with the metadata used to rank it."""

    model_config = ConfigDict(frozen=True)

    href: str = Field(description="Absolute https URL of the candidate")
    rel: str = Field(
        description="Classification: the `rel` of a scanned link, or the filename of a "
        "conventional path"
    )
    size: int = Field(default=0, description="Declared pixel dimension, 0 when unknown")
    data: Optional[bytes] = Field(default=None, description="Payload, set once fetched")

    @property
    def is_apple_touch_icon(self) -> bool:
        """Whether this candidate is classified as an Apple touch icon."""
        return APPLE_TOUCH_ICON in self.rel

    def with_data(self, data: bytes) -> "IconCandidate":
        """Return a populated copy carrying the fetched payload."""
        return self.model_copy(update={"data": data})


class HeadDocument(BaseModel):
    """The raw page retrieved to look for declared icons."""

    url: str
    text: str
    encoding: str


class ResolvedIcon(BaseModel):
    """Decoded image of the selected candidate."""

    href: str
    content: bytes
    content_type: str = Field(description="MIME type derived from the decoded image format")
    width: int
    height: int

    @classmethod
    def from_candidate(cls, candidate: IconCandidate) -> "ResolvedIcon":
        """Decode the candidate payload, raising ImageDecodeFailed if it isn't an image."""
        if not candidate.data:
            raise ImageDecodeFailed(f"No payload fetched for {candidate.href}")
        try:
            with PILImage.open(BytesIO(candidate.data)) as img:
                img.load()
                content_type = img.get_format_mimetype() or "image/unknown"
                width, height = img.size
        except (UnidentifiedImageError, OSError, ValueError) as e:
            raise ImageDecodeFailed(f"Payload at {candidate.href} is not an image: {e}") from e

        return cls(
            href=candidate.href,
            content=candidate.data,
            content_type=content_type,
            width=width,
            height=height,
        )

    def open(self) -> PILImage.Image:
        """Open and return a PIL Image object"""
        image = PILImage.open(BytesIO(self.content))
        image.load()
        return image

    def get_dimensions(self) -> tuple[int, int]:
        """Get image dimensions."""
        return self.width, self.height
