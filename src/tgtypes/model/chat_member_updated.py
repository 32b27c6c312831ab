from pydantic import BaseModel, ConfigDict, Field

from tgtypes.model.chat import Chat
from tgtypes.model.chat_invite_link import ChatInviteLink
from tgtypes.model.chat_member import ChatMember
from tgtypes.model.user import User
from tgtypes.util.unix_date import UnixDateTime


class ChatMemberUpdated(BaseModel):
    """https://core.telegram.org/bots/api#chatmemberupdated"""
    model_config = ConfigDict(populate_by_name = True)

    chat: Chat
    from_user: User = Field(alias = "from")
    date: UnixDateTime
    old_chat_member: ChatMember
    new_chat_member: ChatMember
    invite_link: ChatInviteLink | None = None
    via_chat_folder_invite_link: bool | None = None

    @property
    def joined(self) -> bool:
        return not self.old_chat_member.is_present and self.new_chat_member.is_present

    @property
    def left(self) -> bool:
        return self.old_chat_member.is_present and not self.new_chat_member.is_present
