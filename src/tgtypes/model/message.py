from typing import Annotated, Any, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    SerializerFunctionWrapHandler,
    Tag,
    model_serializer,
    model_validator,
)

from tgtypes.model.attachment.animation import Animation
from tgtypes.model.attachment.audio import Audio
from tgtypes.model.attachment.document import Document
from tgtypes.model.attachment.photo_size import PhotoSize
from tgtypes.model.attachment.sticker import Sticker
from tgtypes.model.attachment.video import Video, VideoNote
from tgtypes.model.attachment.voice import Voice
from tgtypes.model.chat import Chat
from tgtypes.model.contact import Contact
from tgtypes.model.dice import Dice
from tgtypes.model.location import Location, Venue
from tgtypes.model.markup import InlineKeyboardMarkup
from tgtypes.model.message_entity import MessageEntity
from tgtypes.model.poll import Poll
from tgtypes.model.tagging import UNKNOWN_TAG, tag_resolver
from tgtypes.model.user import User
from tgtypes.util import log
from tgtypes.util.unix_date import UnixDateTime


class TextContent(BaseModel):
    kind: Literal["text"] = "text"
    text: str
    entities: list[MessageEntity] | None = None


class CaptionedContent(BaseModel):
    caption: str | None = None  # 0-1024 characters
    caption_entities: list[MessageEntity] | None = None


class AnimationContent(CaptionedContent):
    kind: Literal["animation"] = "animation"
    animation: Animation


class AudioContent(CaptionedContent):
    kind: Literal["audio"] = "audio"
    audio: Audio


class DocumentContent(CaptionedContent):
    kind: Literal["document"] = "document"
    document: Document


class PhotoContent(CaptionedContent):
    kind: Literal["photo"] = "photo"
    photo: list[PhotoSize]  # same picture in several sizes

    @property
    def largest(self) -> PhotoSize:
        return max(self.photo, key = lambda size: size.width * size.height)


class VideoContent(CaptionedContent):
    kind: Literal["video"] = "video"
    video: Video


class VoiceContent(CaptionedContent):
    kind: Literal["voice"] = "voice"
    voice: Voice


class StickerContent(BaseModel):
    kind: Literal["sticker"] = "sticker"
    sticker: Sticker


class VideoNoteContent(BaseModel):
    kind: Literal["video_note"] = "video_note"
    video_note: VideoNote


class ContactContent(BaseModel):
    kind: Literal["contact"] = "contact"
    contact: Contact


class DiceContent(BaseModel):
    kind: Literal["dice"] = "dice"
    dice: Dice


class PollContent(BaseModel):
    kind: Literal["poll"] = "poll"
    poll: Poll


class VenueContent(BaseModel):
    kind: Literal["venue"] = "venue"
    venue: Venue


class LocationContent(BaseModel):
    kind: Literal["location"] = "location"
    location: Location


class NewChatMembersContent(BaseModel):
    kind: Literal["new_chat_members"] = "new_chat_members"
    new_chat_members: list[User]


class LeftChatMemberContent(BaseModel):
    kind: Literal["left_chat_member"] = "left_chat_member"
    left_chat_member: User


class NewChatTitleContent(BaseModel):
    kind: Literal["new_chat_title"] = "new_chat_title"
    new_chat_title: str


class NewChatPhotoContent(BaseModel):
    kind: Literal["new_chat_photo"] = "new_chat_photo"
    new_chat_photo: list[PhotoSize]


class DeleteChatPhotoContent(BaseModel):
    kind: Literal["delete_chat_photo"] = "delete_chat_photo"
    delete_chat_photo: Literal[True] = True


class GroupChatCreatedContent(BaseModel):
    kind: Literal["group_chat_created"] = "group_chat_created"
    group_chat_created: Literal[True] = True


class SupergroupChatCreatedContent(BaseModel):
    kind: Literal["supergroup_chat_created"] = "supergroup_chat_created"
    supergroup_chat_created: Literal[True] = True


class ChannelChatCreatedContent(BaseModel):
    kind: Literal["channel_chat_created"] = "channel_chat_created"
    channel_chat_created: Literal[True] = True


class MigrateToChatIdContent(BaseModel):
    kind: Literal["migrate_to_chat_id"] = "migrate_to_chat_id"
    migrate_to_chat_id: int


class MigrateFromChatIdContent(BaseModel):
    kind: Literal["migrate_from_chat_id"] = "migrate_from_chat_id"
    migrate_from_chat_id: int


class PinnedMessageContent(BaseModel):
    kind: Literal["pinned_message"] = "pinned_message"
    pinned_message: "Message"


class UnknownContent(BaseModel):
    """Content this library does not recognize; the unclaimed message keys are kept as they arrived."""
    kind: str = UNKNOWN_TAG
    payload: dict[str, Any] = {}


# Telegram sends overlapping keys for some kinds (an animation also comes with a document,
# a venue also comes with a location), so the more specific kind must be checked first.
CONTENT_VARIANTS: dict[str, type[BaseModel]] = {
    "text": TextContent,
    "animation": AnimationContent,
    "audio": AudioContent,
    "document": DocumentContent,
    "photo": PhotoContent,
    "sticker": StickerContent,
    "video": VideoContent,
    "video_note": VideoNoteContent,
    "voice": VoiceContent,
    "contact": ContactContent,
    "dice": DiceContent,
    "poll": PollContent,
    "venue": VenueContent,
    "location": LocationContent,
    "new_chat_members": NewChatMembersContent,
    "left_chat_member": LeftChatMemberContent,
    "new_chat_title": NewChatTitleContent,
    "new_chat_photo": NewChatPhotoContent,
    "delete_chat_photo": DeleteChatPhotoContent,
    "group_chat_created": GroupChatCreatedContent,
    "supergroup_chat_created": SupergroupChatCreatedContent,
    "channel_chat_created": ChannelChatCreatedContent,
    "migrate_to_chat_id": MigrateToChatIdContent,
    "migrate_from_chat_id": MigrateFromChatIdContent,
    "pinned_message": PinnedMessageContent,
}
SHADOWED_KEYS: dict[str, tuple[str, ...]] = {
    "animation": ("document",),
    "venue": ("location",),
}
CONTENT_KINDS = tuple(CONTENT_VARIANTS)

MessageContent = Annotated[
    Union[
        Annotated[TextContent, Tag("text")],
        Annotated[AnimationContent, Tag("animation")],
        Annotated[AudioContent, Tag("audio")],
        Annotated[DocumentContent, Tag("document")],
        Annotated[PhotoContent, Tag("photo")],
        Annotated[StickerContent, Tag("sticker")],
        Annotated[VideoContent, Tag("video")],
        Annotated[VideoNoteContent, Tag("video_note")],
        Annotated[VoiceContent, Tag("voice")],
        Annotated[ContactContent, Tag("contact")],
        Annotated[DiceContent, Tag("dice")],
        Annotated[PollContent, Tag("poll")],
        Annotated[VenueContent, Tag("venue")],
        Annotated[LocationContent, Tag("location")],
        Annotated[NewChatMembersContent, Tag("new_chat_members")],
        Annotated[LeftChatMemberContent, Tag("left_chat_member")],
        Annotated[NewChatTitleContent, Tag("new_chat_title")],
        Annotated[NewChatPhotoContent, Tag("new_chat_photo")],
        Annotated[DeleteChatPhotoContent, Tag("delete_chat_photo")],
        Annotated[GroupChatCreatedContent, Tag("group_chat_created")],
        Annotated[SupergroupChatCreatedContent, Tag("supergroup_chat_created")],
        Annotated[ChannelChatCreatedContent, Tag("channel_chat_created")],
        Annotated[MigrateToChatIdContent, Tag("migrate_to_chat_id")],
        Annotated[MigrateFromChatIdContent, Tag("migrate_from_chat_id")],
        Annotated[PinnedMessageContent, Tag("pinned_message")],
        Annotated[UnknownContent, Tag(UNKNOWN_TAG)],
    ],
    Discriminator(tag_resolver("kind", CONTENT_KINDS)),
]


class Message(BaseModel):
    """
    https://core.telegram.org/bots/api#message

    On the wire the content keys (text, photo, caption, ...) sit next to the envelope keys.
    Here they are grouped into ``content``, a single variant of ``MessageContent``.
    """
    model_config = ConfigDict(populate_by_name = True)

    message_id: int
    message_thread_id: int | None = None
    from_user: User | None = Field(None, alias = "from")
    sender_chat: Chat | None = None
    date: UnixDateTime
    chat: Chat
    forward_from: User | None = None
    forward_from_chat: Chat | None = None
    forward_date: UnixDateTime | None = None
    reply_to_message: Optional["Message"] = None
    edit_date: UnixDateTime | None = None
    media_group_id: str | None = None
    author_signature: str | None = None
    reply_markup: InlineKeyboardMarkup | None = None  # only inline keyboards are attached to messages
    content: MessageContent

    @property
    def kind(self) -> str:
        return self.content.kind

    @property
    def plain_text(self) -> str | None:
        if isinstance(self.content, TextContent):
            return self.content.text
        return getattr(self.content, "caption", None)

    @model_validator(mode = "before")
    @classmethod
    def _group_content(cls, data: Any) -> Any:
        if not isinstance(data, dict) or isinstance(data.get("content"), BaseModel):
            return data
        envelope = dict(data)
        envelope["content"] = cls.__pop_content(envelope)
        return envelope

    @model_serializer(mode = "wrap")
    def _flatten_content(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        content = data.pop("content", None)
        if not isinstance(content, dict):
            return data
        content.pop("kind", None)
        if isinstance(self.content, UnknownContent):
            content = content.get("payload") or {}
        data.update(content)
        return data

    @classmethod
    def __pop_content(cls, envelope: dict[str, Any]) -> dict[str, Any]:
        for kind, variant in CONTENT_VARIANTS.items():
            if envelope.get(kind) is None:
                continue
            content: dict[str, Any] = {"kind": kind}
            for key in variant.model_fields:
                if key != "kind" and key in envelope:
                    content[key] = envelope.pop(key)
            for shadow_key in SHADOWED_KEYS.get(kind, ()):
                envelope.pop(shadow_key, None)
            return content

        envelope_keys = {field.alias or name for name, field in cls.model_fields.items()} | set(cls.model_fields)
        envelope_keys.discard("content")
        unclaimed = {key: envelope.pop(key) for key in list(envelope) if key not in envelope_keys}
        log.t(f"Message #{envelope.get('message_id')} has unrecognized content", sorted(unclaimed))
        return {"kind": UNKNOWN_TAG, "payload": unclaimed}


PinnedMessageContent.model_rebuild()
Message.model_rebuild()
