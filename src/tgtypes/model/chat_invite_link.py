from pydantic import BaseModel

from tgtypes.model.user import User
from tgtypes.util.unix_date import UnixDateTime


class ChatInviteLink(BaseModel):
    """https://core.telegram.org/bots/api#chatinvitelink"""
    invite_link: str
    creator: User
    creates_join_request: bool = False
    is_primary: bool
    is_revoked: bool
    name: str | None = None
    expire_date: UnixDateTime | None = None
    member_limit: int | None = None  # 1-99999
    pending_join_request_count: int | None = None
