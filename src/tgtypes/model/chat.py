from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Tag

from tgtypes.model.tagging import UNKNOWN_TAG, tag_resolver


class ChatPhoto(BaseModel):
    """https://core.telegram.org/bots/api#chatphoto"""
    small_file_id: str
    small_file_unique_id: str
    big_file_id: str
    big_file_unique_id: str


class ChatPermissions(BaseModel):
    """https://core.telegram.org/bots/api#chatpermissions"""
    can_send_messages: bool | None = None
    can_send_audios: bool | None = None
    can_send_documents: bool | None = None
    can_send_photos: bool | None = None
    can_send_videos: bool | None = None
    can_send_video_notes: bool | None = None
    can_send_voice_notes: bool | None = None
    can_send_polls: bool | None = None
    can_send_other_messages: bool | None = None
    can_add_web_page_previews: bool | None = None
    can_change_info: bool | None = None
    can_invite_users: bool | None = None
    can_pin_messages: bool | None = None
    can_manage_topics: bool | None = None

    @classmethod
    def read_only(cls) -> "ChatPermissions":
        return cls(
            can_send_messages = False,
            can_send_audios = False,
            can_send_documents = False,
            can_send_photos = False,
            can_send_videos = False,
            can_send_video_notes = False,
            can_send_voice_notes = False,
            can_send_polls = False,
            can_send_other_messages = False,
            can_add_web_page_previews = False,
            can_change_info = False,
            can_invite_users = False,
            can_pin_messages = False,
            can_manage_topics = False,
        )


class PrivateChat(BaseModel):
    """https://core.telegram.org/bots/api#chat (type = private)"""
    id: int
    type: Literal["private"] = "private"
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    bio: str | None = None
    photo: ChatPhoto | None = None

    @property
    def display_name(self) -> str:
        names = [name for name in (self.first_name, self.last_name) if name]
        return " ".join(names) or self.username or str(self.id)


class GroupChat(BaseModel):
    """https://core.telegram.org/bots/api#chat (type = group)"""
    id: int
    type: Literal["group"] = "group"
    title: str
    photo: ChatPhoto | None = None
    invite_link: str | None = None
    permissions: ChatPermissions | None = None

    @property
    def display_name(self) -> str:
        return self.title


class SuperGroupChat(BaseModel):
    """https://core.telegram.org/bots/api#chat (type = supergroup)"""
    id: int
    type: Literal["supergroup"] = "supergroup"
    title: str
    username: str | None = None
    photo: ChatPhoto | None = None
    description: str | None = None
    invite_link: str | None = None
    permissions: ChatPermissions | None = None
    slow_mode_delay: int | None = None  # seconds
    sticker_set_name: str | None = None
    can_set_sticker_set: bool | None = None
    linked_chat_id: int | None = None
    is_forum: bool | None = None

    @property
    def display_name(self) -> str:
        return self.title


class ChannelChat(BaseModel):
    """https://core.telegram.org/bots/api#chat (type = channel)"""
    id: int
    type: Literal["channel"] = "channel"
    title: str
    username: str | None = None
    photo: ChatPhoto | None = None
    description: str | None = None
    invite_link: str | None = None
    linked_chat_id: int | None = None

    @property
    def display_name(self) -> str:
        return self.title


class UnknownChat(BaseModel):
    """Any chat whose type this library does not know yet; all received attributes are kept."""
    model_config = ConfigDict(extra = "allow")

    id: int
    type: str
    title: str | None = None

    @property
    def display_name(self) -> str:
        return self.title or str(self.id)


CHAT_TYPES = ("private", "group", "supergroup", "channel")

Chat = Annotated[
    Union[
        Annotated[PrivateChat, Tag("private")],
        Annotated[GroupChat, Tag("group")],
        Annotated[SuperGroupChat, Tag("supergroup")],
        Annotated[ChannelChat, Tag("channel")],
        Annotated[UnknownChat, Tag(UNKNOWN_TAG)],
    ],
    Discriminator(
        tag_resolver("type", CHAT_TYPES),
        custom_error_type = "missing_chat_type",
        custom_error_message = "Chat payload has no 'type'",
    ),
]
