import json
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict
from pydantic_core import PydanticSerializationError

from tgtypes.model.chat import Chat
from tgtypes.model.decoding import decode
from tgtypes.request.input_file import InputFileBytes, InputFileId, InputFilePath
from tgtypes.util import error_codes, log
from tgtypes.util.errors import InternalError


class BotApiRequest(BaseModel):
    """
    Parameters of a single Bot API method.

    Optional parameters are ``None`` while unset and never reach the wire in that state:
    ``to_payload()`` drops them instead of sending ``null``. Falsy values that were set
    explicitly (``False``, ``0``, ``""``) are sent as they are.

    Length limits and numeric ranges noted on the fields are not checked here;
    Telegram rejects out-of-range values on its own.
    """
    model_config = ConfigDict(populate_by_name = True)

    method: ClassVar[str]
    result_type: ClassVar[Any] = bool

    def upload_fields(self) -> dict[str, InputFilePath | InputFileBytes]:
        return {
            name: value
            for name in type(self).model_fields
            if isinstance(value := getattr(self, name), (InputFilePath, InputFileBytes))
        }

    def to_payload(self) -> dict[str, Any]:
        """JSON body for the method, without the files that need a multipart upload."""
        try:
            payload = self.model_dump(
                mode = "json",
                by_alias = True,
                exclude_none = True,
                exclude = set(self.upload_fields()),
            )
        except PydanticSerializationError as e:
            message = log.e(f"Failed to serialize '{self.method}' parameters", e)
            raise InternalError(message, error_codes.PAYLOAD_ENCODING_FAILED) from e
        for name in type(self).model_fields:
            value = getattr(self, name)
            if isinstance(value, InputFileId):
                payload[name] = value.file_id_or_url
        return payload

    def to_form_fields(self) -> dict[str, str]:
        """Multipart form fields: strings go as they are, everything else JSON-encoded."""
        return {
            key: value if isinstance(value, str) else json.dumps(value)
            for key, value in self.to_payload().items()
        }

    def files(self) -> dict[str, tuple[str, bytes]]:
        return {name: (file.filename, file.read_bytes()) for name, file in self.upload_fields().items()}

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> Self:
        return decode(cls, payload)


class ChatScopedRequest(BotApiRequest):
    """A request whose only parameter is the target chat."""

    chat_id: int | str  # integer id, or '@username' of a channel / supergroup

    @classmethod
    def from_chat(cls, chat: Chat) -> Self:
        return cls(chat_id = chat.id)
