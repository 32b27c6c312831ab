from typing import Any, ClassVar, Self

from tgtypes.model.update import Update
from tgtypes.request.base import BotApiRequest


class GetUpdates(BotApiRequest):
    """https://core.telegram.org/bots/api#getupdates"""
    method: ClassVar[str] = "getUpdates"
    result_type: ClassVar[Any] = list[Update]

    offset: int | None = None  # first update to return, confirms everything before it
    limit: int | None = None  # 1-100
    timeout: int | None = None  # long polling, seconds
    allowed_updates: list[str] | None = None

    @classmethod
    def after(cls, updates: list[Update], timeout: int | None = None) -> Self:
        """Request for the updates following the given batch."""
        if not updates:
            return cls(timeout = timeout)
        return cls(offset = max(update.update_id for update in updates) + 1, timeout = timeout)
