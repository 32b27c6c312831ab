from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Tag

from tgtypes.model.tagging import UNKNOWN_TAG, tag_resolver
from tgtypes.model.user import User
from tgtypes.util.unix_date import OptionalUnixDateTime


class ChatMemberBase(BaseModel):
    """https://core.telegram.org/bots/api#chatmember"""
    status: str
    user: User

    @property
    def is_present(self) -> bool:
        return True


class ChatMemberOwner(ChatMemberBase):
    """https://core.telegram.org/bots/api#chatmemberowner"""
    status: Literal["creator"] = "creator"
    is_anonymous: bool
    custom_title: str | None = None


class ChatMemberAdministrator(ChatMemberBase):
    """https://core.telegram.org/bots/api#chatmemberadministrator"""
    status: Literal["administrator"] = "administrator"
    can_be_edited: bool
    is_anonymous: bool
    can_manage_chat: bool
    can_delete_messages: bool
    can_manage_video_chats: bool
    can_restrict_members: bool
    can_promote_members: bool
    can_change_info: bool
    can_invite_users: bool
    can_post_stories: bool = False
    can_edit_stories: bool = False
    can_delete_stories: bool = False
    can_post_messages: bool | None = None
    can_edit_messages: bool | None = None
    can_pin_messages: bool | None = None
    can_manage_topics: bool | None = None
    custom_title: str | None = None


class ChatMemberMember(ChatMemberBase):
    """https://core.telegram.org/bots/api#chatmembermember"""
    status: Literal["member"] = "member"
    until_date: OptionalUnixDateTime = None  # subscription expiry


class ChatMemberRestricted(ChatMemberBase):
    """https://core.telegram.org/bots/api#chatmemberrestricted"""
    status: Literal["restricted"] = "restricted"
    is_member: bool
    can_send_messages: bool
    can_send_audios: bool
    can_send_documents: bool
    can_send_photos: bool
    can_send_videos: bool
    can_send_video_notes: bool
    can_send_voice_notes: bool
    can_send_polls: bool
    can_send_other_messages: bool
    can_add_web_page_previews: bool
    can_change_info: bool
    can_invite_users: bool
    can_pin_messages: bool
    can_manage_topics: bool = False
    until_date: OptionalUnixDateTime = None  # None means restricted forever

    @property
    def is_present(self) -> bool:
        return self.is_member


class ChatMemberLeft(ChatMemberBase):
    """https://core.telegram.org/bots/api#chatmemberleft"""
    status: Literal["left"] = "left"

    @property
    def is_present(self) -> bool:
        return False


class ChatMemberBanned(ChatMemberBase):
    """https://core.telegram.org/bots/api#chatmemberbanned"""
    status: Literal["kicked"] = "kicked"
    until_date: OptionalUnixDateTime = None  # None means banned forever

    @property
    def is_present(self) -> bool:
        return False


class ChatMemberUnknown(ChatMemberBase):
    """A member status this library does not know yet; all received attributes are kept."""
    model_config = ConfigDict(extra = "allow")


MEMBER_STATUSES = ("creator", "administrator", "member", "restricted", "left", "kicked")

ChatMember = Annotated[
    Union[
        Annotated[ChatMemberOwner, Tag("creator")],
        Annotated[ChatMemberAdministrator, Tag("administrator")],
        Annotated[ChatMemberMember, Tag("member")],
        Annotated[ChatMemberRestricted, Tag("restricted")],
        Annotated[ChatMemberLeft, Tag("left")],
        Annotated[ChatMemberBanned, Tag("kicked")],
        Annotated[ChatMemberUnknown, Tag(UNKNOWN_TAG)],
    ],
    Discriminator(
        tag_resolver("status", MEMBER_STATUSES),
        custom_error_type = "missing_member_status",
        custom_error_message = "Chat member payload has no 'status'",
    ),
]
