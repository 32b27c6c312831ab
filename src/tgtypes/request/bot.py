from typing import Any, ClassVar

from tgtypes.model.bot_command import BotCommand
from tgtypes.model.user import User
from tgtypes.request.base import BotApiRequest


class GetMe(BotApiRequest):
    """https://core.telegram.org/bots/api#getme"""
    method: ClassVar[str] = "getMe"
    result_type: ClassVar[Any] = User


class SetMyCommands(BotApiRequest):
    """https://core.telegram.org/bots/api#setmycommands"""
    method: ClassVar[str] = "setMyCommands"

    commands: list[BotCommand]  # at most 100, an empty list clears the menu
    language_code: str | None = None  # two-letter ISO 639-1, unset applies to all languages


class GetMyCommands(BotApiRequest):
    """https://core.telegram.org/bots/api#getmycommands"""
    method: ClassVar[str] = "getMyCommands"
    result_type: ClassVar[Any] = list[BotCommand]

    language_code: str | None = None


class DeleteMyCommands(BotApiRequest):
    """https://core.telegram.org/bots/api#deletemycommands"""
    method: ClassVar[str] = "deleteMyCommands"

    language_code: str | None = None
