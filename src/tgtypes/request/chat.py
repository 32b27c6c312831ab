from typing import Any, ClassVar, Self

from tgtypes.model.chat import Chat, ChatPermissions
from tgtypes.model.chat_invite_link import ChatInviteLink
from tgtypes.model.chat_member import ChatMember
from tgtypes.request.base import BotApiRequest, ChatScopedRequest
from tgtypes.request.input_file import InputFile
from tgtypes.util.unix_date import UnixDateTime


class KickChatMember(BotApiRequest):
    """
    https://core.telegram.org/bots/api#banchatmember

    Telegram renamed ``kickChatMember`` to ``banChatMember``; the new name is what goes on the wire.
    """
    method: ClassVar[str] = "banChatMember"

    chat_id: int | str
    user_id: int
    # bans longer than 366 days or shorter than 30 seconds are permanent
    until_date: UnixDateTime | None = None
    revoke_messages: bool | None = None  # always True for supergroups and channels


class UnbanChatMember(BotApiRequest):
    """https://core.telegram.org/bots/api#unbanchatmember"""
    method: ClassVar[str] = "unbanChatMember"

    chat_id: int | str
    user_id: int
    only_if_banned: bool = False  # if False, a present member gets removed (and can join again)


class RestrictChatMember(BotApiRequest):
    """https://core.telegram.org/bots/api#restrictchatmember"""
    method: ClassVar[str] = "restrictChatMember"

    chat_id: int | str
    user_id: int
    permissions: ChatPermissions
    use_independent_chat_permissions: bool | None = None
    # restrictions longer than 366 days or shorter than 30 seconds are permanent
    until_date: UnixDateTime | None = None


class PromoteChatMember(BotApiRequest):
    """https://core.telegram.org/bots/api#promotechatmember"""
    method: ClassVar[str] = "promoteChatMember"

    chat_id: int | str
    user_id: int
    is_anonymous: bool | None = None
    can_manage_chat: bool | None = None  # implied by any other administrator privilege
    can_post_messages: bool | None = None  # channels only
    can_edit_messages: bool | None = None  # channels only
    can_delete_messages: bool | None = None
    can_manage_video_chats: bool | None = None
    can_restrict_members: bool | None = None
    can_promote_members: bool | None = None
    can_change_info: bool | None = None
    can_invite_users: bool | None = None
    can_pin_messages: bool | None = None  # supergroups only
    can_manage_topics: bool | None = None  # supergroups only

    @classmethod
    def new(cls, chat_id: int | str, user_id: int) -> Self:
        """Promotion request with every privilege left unset."""
        return cls(chat_id = chat_id, user_id = user_id)


class SetChatAdministratorCustomTitle(BotApiRequest):
    """https://core.telegram.org/bots/api#setchatadministratorcustomtitle"""
    method: ClassVar[str] = "setChatAdministratorCustomTitle"

    chat_id: int | str
    user_id: int
    custom_title: str  # 0-16 characters, emoji are not allowed


class SetChatPermissions(BotApiRequest):
    """https://core.telegram.org/bots/api#setchatpermissions"""
    method: ClassVar[str] = "setChatPermissions"

    chat_id: int | str
    permissions: ChatPermissions
    use_independent_chat_permissions: bool | None = None


class ExportChatInviteLink(ChatScopedRequest):
    """https://core.telegram.org/bots/api#exportchatinvitelink"""
    method: ClassVar[str] = "exportChatInviteLink"
    result_type: ClassVar[Any] = str


class SetChatPhoto(BotApiRequest):
    """https://core.telegram.org/bots/api#setchatphoto"""
    method: ClassVar[str] = "setChatPhoto"

    chat_id: int | str
    photo: InputFile  # must be uploaded, file ids and URLs are refused by Telegram


class DeleteChatPhoto(ChatScopedRequest):
    """https://core.telegram.org/bots/api#deletechatphoto"""
    method: ClassVar[str] = "deleteChatPhoto"


class SetChatTitle(BotApiRequest):
    """https://core.telegram.org/bots/api#setchattitle"""
    method: ClassVar[str] = "setChatTitle"

    chat_id: int | str
    title: str  # 1-255 characters


class SetChatDescription(BotApiRequest):
    """https://core.telegram.org/bots/api#setchatdescription"""
    method: ClassVar[str] = "setChatDescription"

    chat_id: int | str
    description: str | None = None  # 0-255 characters, unset clears the description


class PinChatMessage(BotApiRequest):
    """https://core.telegram.org/bots/api#pinchatmessage"""
    method: ClassVar[str] = "pinChatMessage"

    chat_id: int | str
    message_id: int
    disable_notification: bool = False


class UnpinChatMessage(BotApiRequest):
    """https://core.telegram.org/bots/api#unpinchatmessage"""
    method: ClassVar[str] = "unpinChatMessage"

    chat_id: int | str
    message_id: int | None = None  # unset unpins the most recent pinned message


class UnpinAllChatMessages(ChatScopedRequest):
    """https://core.telegram.org/bots/api#unpinallchatmessages"""
    method: ClassVar[str] = "unpinAllChatMessages"


class LeaveChat(ChatScopedRequest):
    """https://core.telegram.org/bots/api#leavechat"""
    method: ClassVar[str] = "leaveChat"


class GetChat(ChatScopedRequest):
    """https://core.telegram.org/bots/api#getchat"""
    method: ClassVar[str] = "getChat"
    result_type: ClassVar[Any] = Chat


class GetChatAdministrators(ChatScopedRequest):
    """https://core.telegram.org/bots/api#getchatadministrators"""
    method: ClassVar[str] = "getChatAdministrators"
    result_type: ClassVar[Any] = list[ChatMember]


class GetChatMembersCount(ChatScopedRequest):
    """
    https://core.telegram.org/bots/api#getchatmembercount

    Sent under the current method name, ``getChatMemberCount``.
    """
    method: ClassVar[str] = "getChatMemberCount"
    result_type: ClassVar[Any] = int


class GetChatMember(BotApiRequest):
    """https://core.telegram.org/bots/api#getchatmember"""
    method: ClassVar[str] = "getChatMember"
    result_type: ClassVar[Any] = ChatMember

    chat_id: int | str
    user_id: int


class SetChatStickerSet(BotApiRequest):
    """https://core.telegram.org/bots/api#setchatstickerset"""
    method: ClassVar[str] = "setChatStickerSet"

    chat_id: int | str
    sticker_set_name: str


class DeleteChatStickerSet(ChatScopedRequest):
    """https://core.telegram.org/bots/api#deletechatstickerset"""
    method: ClassVar[str] = "deleteChatStickerSet"


class CreateChatInviteLink(BotApiRequest):
    """https://core.telegram.org/bots/api#createchatinvitelink"""
    method: ClassVar[str] = "createChatInviteLink"
    result_type: ClassVar[Any] = ChatInviteLink

    chat_id: int | str
    name: str | None = None  # 0-32 characters
    expire_date: UnixDateTime | None = None
    member_limit: int | None = None  # 1-99999
    creates_join_request: bool | None = None  # can't be combined with member_limit


class EditChatInviteLink(BotApiRequest):
    """https://core.telegram.org/bots/api#editchatinvitelink"""
    method: ClassVar[str] = "editChatInviteLink"
    result_type: ClassVar[Any] = ChatInviteLink

    chat_id: int | str
    invite_link: str
    name: str | None = None  # 0-32 characters
    expire_date: UnixDateTime | None = None
    member_limit: int | None = None  # 1-99999
    creates_join_request: bool | None = None


class RevokeChatInviteLink(BotApiRequest):
    """https://core.telegram.org/bots/api#revokechatinvitelink"""
    method: ClassVar[str] = "revokeChatInviteLink"
    result_type: ClassVar[Any] = ChatInviteLink

    chat_id: int | str
    invite_link: str
