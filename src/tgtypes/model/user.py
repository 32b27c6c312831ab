from pydantic import BaseModel

from tgtypes.model.attachment.photo_size import PhotoSize


class User(BaseModel):
    """https://core.telegram.org/bots/api#user"""
    id: int
    is_bot: bool
    first_name: str
    last_name: str | None = None
    username: str | None = None
    language_code: str | None = None
    is_premium: bool | None = None
    can_join_groups: bool | None = None  # only returned by getMe
    can_read_all_group_messages: bool | None = None  # only returned by getMe
    supports_inline_queries: bool | None = None  # only returned by getMe

    @property
    def full_name(self) -> str:
        if self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.first_name


class UserProfilePhotos(BaseModel):
    """https://core.telegram.org/bots/api#userprofilephotos"""
    total_count: int
    photos: list[list[PhotoSize]]  # up to 4 sizes per photo
