from pydantic import BaseModel, ConfigDict, Field

from tgtypes.model.message import Message
from tgtypes.model.user import User


class CallbackQuery(BaseModel):
    """https://core.telegram.org/bots/api#callbackquery"""
    model_config = ConfigDict(populate_by_name = True)

    id: str
    from_user: User = Field(alias = "from")
    message: Message | None = None  # missing when the message is too old
    inline_message_id: str | None = None
    chat_instance: str
    data: str | None = None  # 1-64 bytes
    game_short_name: str | None = None
