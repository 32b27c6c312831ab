from pydantic import BaseModel


class Contact(BaseModel):
    """https://core.telegram.org/bots/api#contact"""
    phone_number: str
    first_name: str
    last_name: str | None = None
    user_id: int | None = None
    vcard: str | None = None
