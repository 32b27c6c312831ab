from pydantic import BaseModel

from tgtypes.model.attachment.photo_size import PhotoSize


class Video(BaseModel):
    """https://core.telegram.org/bots/api#video"""
    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumbnail: PhotoSize | None = None
    file_name: str | None = None
    mime_type: str | None = None
    file_size: int | None = None


class VideoNote(BaseModel):
    """https://core.telegram.org/bots/api#videonote"""
    file_id: str
    file_unique_id: str
    length: int  # diameter of the round video
    duration: int
    thumbnail: PhotoSize | None = None
    file_size: int | None = None
