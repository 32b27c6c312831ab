from pydantic import BaseModel


class BotCommand(BaseModel):
    """https://core.telegram.org/bots/api#botcommand"""
    command: str  # 1-32 characters: lowercase letters, digits and underscores
    description: str  # 1-256 characters
