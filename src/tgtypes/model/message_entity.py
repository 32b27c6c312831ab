from pydantic import BaseModel

from tgtypes.model.user import User


class MessageEntity(BaseModel):
    """https://core.telegram.org/bots/api#messageentity"""
    type: str
    offset: int  # in UTF-16 code units
    length: int  # in UTF-16 code units
    url: str | None = None
    user: User | None = None
    language: str | None = None  # programming language of the code block
    custom_emoji_id: str | None = None
