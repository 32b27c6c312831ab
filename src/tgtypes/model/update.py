from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    Discriminator,
    SerializerFunctionWrapHandler,
    Tag,
    model_serializer,
    model_validator,
)

from tgtypes.model.callback_query import CallbackQuery
from tgtypes.model.chat_member_updated import ChatMemberUpdated
from tgtypes.model.inline_query import ChosenInlineResult, InlineQuery
from tgtypes.model.message import Message
from tgtypes.model.poll import Poll, PollAnswer
from tgtypes.model.tagging import UNKNOWN_TAG, ambiguous_variant_error, missing_variant_error, tag_resolver
from tgtypes.util import log


class MessageUpdate(BaseModel):
    kind: Literal["message"] = "message"
    message: Message


class EditedMessageUpdate(BaseModel):
    kind: Literal["edited_message"] = "edited_message"
    edited_message: Message


class ChannelPostUpdate(BaseModel):
    kind: Literal["channel_post"] = "channel_post"
    channel_post: Message


class EditedChannelPostUpdate(BaseModel):
    kind: Literal["edited_channel_post"] = "edited_channel_post"
    edited_channel_post: Message


class InlineQueryUpdate(BaseModel):
    kind: Literal["inline_query"] = "inline_query"
    inline_query: InlineQuery


class ChosenInlineResultUpdate(BaseModel):
    kind: Literal["chosen_inline_result"] = "chosen_inline_result"
    chosen_inline_result: ChosenInlineResult


class CallbackQueryUpdate(BaseModel):
    kind: Literal["callback_query"] = "callback_query"
    callback_query: CallbackQuery


class PollUpdate(BaseModel):
    kind: Literal["poll"] = "poll"
    poll: Poll


class PollAnswerUpdate(BaseModel):
    kind: Literal["poll_answer"] = "poll_answer"
    poll_answer: PollAnswer


class MyChatMemberUpdate(BaseModel):
    kind: Literal["my_chat_member"] = "my_chat_member"
    my_chat_member: ChatMemberUpdated


class ChatMemberUpdate(BaseModel):
    kind: Literal["chat_member"] = "chat_member"
    chat_member: ChatMemberUpdated


class UnknownUpdate(BaseModel):
    """An update kind this library does not know yet, kept raw under its wire key."""
    kind: str
    payload: Any = None


UPDATE_VARIANTS: dict[str, type[BaseModel]] = {
    "message": MessageUpdate,
    "edited_message": EditedMessageUpdate,
    "channel_post": ChannelPostUpdate,
    "edited_channel_post": EditedChannelPostUpdate,
    "inline_query": InlineQueryUpdate,
    "chosen_inline_result": ChosenInlineResultUpdate,
    "callback_query": CallbackQueryUpdate,
    "poll": PollUpdate,
    "poll_answer": PollAnswerUpdate,
    "my_chat_member": MyChatMemberUpdate,
    "chat_member": ChatMemberUpdate,
}

UpdateContent = Annotated[
    Union[
        Annotated[MessageUpdate, Tag("message")],
        Annotated[EditedMessageUpdate, Tag("edited_message")],
        Annotated[ChannelPostUpdate, Tag("channel_post")],
        Annotated[EditedChannelPostUpdate, Tag("edited_channel_post")],
        Annotated[InlineQueryUpdate, Tag("inline_query")],
        Annotated[ChosenInlineResultUpdate, Tag("chosen_inline_result")],
        Annotated[CallbackQueryUpdate, Tag("callback_query")],
        Annotated[PollUpdate, Tag("poll")],
        Annotated[PollAnswerUpdate, Tag("poll_answer")],
        Annotated[MyChatMemberUpdate, Tag("my_chat_member")],
        Annotated[ChatMemberUpdate, Tag("chat_member")],
        Annotated[UnknownUpdate, Tag(UNKNOWN_TAG)],
    ],
    Discriminator(tag_resolver("kind", UPDATE_VARIANTS)),
]


class Update(BaseModel):
    """
    https://core.telegram.org/bots/api#update

    Exactly one of the optional update fields must be populated (null counts as absent).
    Payloads with none of them, or with more than one, are rejected instead of guessed at.
    A single field this library does not know becomes an ``UnknownUpdate``.
    """
    update_id: int
    content: UpdateContent

    @property
    def kind(self) -> str:
        return self.content.kind

    @property
    def message(self) -> Message | None:
        """The message carried by any of the message-like update kinds."""
        match self.content:
            case MessageUpdate(message = message):
                return message
            case EditedMessageUpdate(edited_message = message):
                return message
            case ChannelPostUpdate(channel_post = message):
                return message
            case EditedChannelPostUpdate(edited_channel_post = message):
                return message
            case CallbackQueryUpdate(callback_query = query):
                return query.message
        return None

    @model_validator(mode = "before")
    @classmethod
    def _select_content(cls, data: Any) -> Any:
        if not isinstance(data, dict) or isinstance(data.get("content"), BaseModel):
            return data
        populated = sorted(key for key, value in data.items() if key != "update_id" and value is not None)
        if not populated:
            raise missing_variant_error("Update")
        if len(populated) > 1:
            raise ambiguous_variant_error("Update", populated)

        kind = populated[0]
        if kind in UPDATE_VARIANTS:
            content = {"kind": kind, kind: data[kind]}
        else:
            log.d(f"Update #{data.get('update_id')} has unrecognized kind '{kind}'")
            content = {"kind": kind, "payload": data[kind]}
        return {"update_id": data.get("update_id"), "content": content}

    @model_serializer(mode = "wrap")
    def _flatten_content(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        content = data.pop("content", None)
        if not isinstance(content, dict):
            return data
        kind = content.pop("kind")
        if isinstance(self.content, UnknownUpdate):
            data[kind] = content.get("payload")
        else:
            data[kind] = content.get(kind)
        return data
