"""Upload placement model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from richtext.schemas.nodes import UploadNode


class UploadSpec(BaseModel):
    """An uploaded media item and the heading it should follow.

    Attributes:
        url: Public address of the stored media.
        alt: Description text for the image.
        width: Pixel width, if known.
        height: Pixel height, if known.
        media_id: Identifier assigned by the media store.
        insert_after_heading: Text of the heading the media belongs under.
            Blank means "append at the end of the document".
    """

    url: str
    alt: str = ""
    width: int | None = Field(default=None, ge=1)
    height: int | None = Field(default=None, ge=1)
    media_id: str | int | None = None
    insert_after_heading: str = ""

    def to_node(self) -> UploadNode:
        return UploadNode(
            url=self.url,
            alt=self.alt,
            width=self.width,
            height=self.height,
            media_id=self.media_id,
        )
