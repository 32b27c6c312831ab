from pydantic import BaseModel

from tgtypes.model.attachment.photo_size import PhotoSize


class Animation(BaseModel):
    """https://core.telegram.org/bots/api#animation"""
    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumbnail: PhotoSize | None = None
    file_name: str | None = None
    mime_type: str | None = None
    file_size: int | None = None
