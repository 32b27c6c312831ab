from typing import Any

from pydantic import BaseModel


class ResponseParameters(BaseModel):
    """https://core.telegram.org/bots/api#responseparameters"""
    migrate_to_chat_id: int | None = None
    retry_after: int | None = None  # seconds


class ApiResponse(BaseModel):
    """https://core.telegram.org/bots/api#making-requests"""
    ok: bool
    result: Any = None
    description: str | None = None
    error_code: int | None = None
    parameters: ResponseParameters | None = None
