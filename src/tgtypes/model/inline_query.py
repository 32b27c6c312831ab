from pydantic import BaseModel, ConfigDict, Field

from tgtypes.model.location import Location
from tgtypes.model.user import User


class InlineQuery(BaseModel):
    """https://core.telegram.org/bots/api#inlinequery"""
    model_config = ConfigDict(populate_by_name = True)

    id: str
    from_user: User = Field(alias = "from")
    query: str  # up to 256 characters
    offset: str
    chat_type: str | None = None
    location: Location | None = None


class ChosenInlineResult(BaseModel):
    """https://core.telegram.org/bots/api#choseninlineresult"""
    model_config = ConfigDict(populate_by_name = True)

    result_id: str
    from_user: User = Field(alias = "from")
    location: Location | None = None
    inline_message_id: str | None = None
    query: str
