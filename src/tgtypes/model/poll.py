from pydantic import BaseModel

from tgtypes.model.message_entity import MessageEntity
from tgtypes.model.user import User
from tgtypes.util.unix_date import UnixDateTime


class PollOption(BaseModel):
    """https://core.telegram.org/bots/api#polloption"""
    text: str
    voter_count: int


class Poll(BaseModel):
    """https://core.telegram.org/bots/api#poll"""
    id: str
    question: str
    options: list[PollOption]
    total_voter_count: int
    is_closed: bool
    is_anonymous: bool
    type: str  # "regular" or "quiz"
    allows_multiple_answers: bool
    correct_option_id: int | None = None
    explanation: str | None = None
    explanation_entities: list[MessageEntity] | None = None
    open_period: int | None = None
    close_date: UnixDateTime | None = None


class PollAnswer(BaseModel):
    """https://core.telegram.org/bots/api#pollanswer"""
    poll_id: str
    user: User | None = None
    option_ids: list[int]  # empty when the vote was retracted
