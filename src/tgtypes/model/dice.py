from pydantic import BaseModel


class Dice(BaseModel):
    """https://core.telegram.org/bots/api#dice"""
    emoji: str
    value: int  # 1-6 for most emoji, 1-5 for basketball and football, 1-64 for slot machines
