from pydantic import BaseModel

from tgtypes.model.attachment.photo_size import PhotoSize


class Sticker(BaseModel):
    """https://core.telegram.org/bots/api#sticker"""
    file_id: str
    file_unique_id: str
    type: str = "regular"
    width: int
    height: int
    is_animated: bool
    is_video: bool = False
    thumbnail: PhotoSize | None = None
    emoji: str | None = None
    set_name: str | None = None
    file_size: int | None = None
