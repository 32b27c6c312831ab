from typing import Any, ClassVar

from tgtypes.model.attachment.file import File
from tgtypes.request.base import BotApiRequest


class GetFile(BotApiRequest):
    """https://core.telegram.org/bots/api#getfile"""
    method: ClassVar[str] = "getFile"
    result_type: ClassVar[Any] = File

    file_id: str
