from typing import Any, ClassVar

from tgtypes.model.chat_action import ChatAction
from tgtypes.model.markup import ReplyMarkup
from tgtypes.model.message import Message
from tgtypes.model.parse_mode import ParseMode
from tgtypes.request.base import BotApiRequest


class SendMessage(BotApiRequest):
    """https://core.telegram.org/bots/api#sendmessage"""
    method: ClassVar[str] = "sendMessage"
    result_type: ClassVar[Any] = Message

    chat_id: int | str
    message_thread_id: int | None = None  # forum supergroups only
    text: str  # 1-4096 characters after entity parsing
    parse_mode: ParseMode | None = None
    disable_notification: bool | None = None
    protect_content: bool | None = None
    reply_to_message_id: int | None = None
    reply_markup: ReplyMarkup | None = None


class SendChatAction(BotApiRequest):
    """
    https://core.telegram.org/bots/api#sendchataction

    The status shows for 5 seconds or until the next message from the bot arrives.
    """
    method: ClassVar[str] = "sendChatAction"

    chat_id: int | str
    message_thread_id: int | None = None
    action: ChatAction
