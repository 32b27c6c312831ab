from typing import Annotated, Literal, Union

from pydantic import BaseModel, Discriminator, Tag

from tgtypes.model.tagging import presence_resolver


class InlineKeyboardButton(BaseModel):
    """https://core.telegram.org/bots/api#inlinekeyboardbutton"""
    text: str
    url: str | None = None
    callback_data: str | None = None  # 1-64 bytes
    switch_inline_query: str | None = None
    switch_inline_query_current_chat: str | None = None
    pay: bool | None = None  # must be the first button of the first row


class InlineKeyboardMarkup(BaseModel):
    """https://core.telegram.org/bots/api#inlinekeyboardmarkup"""
    inline_keyboard: list[list[InlineKeyboardButton]]

    @classmethod
    def single_row(cls, *buttons: InlineKeyboardButton) -> "InlineKeyboardMarkup":
        return cls(inline_keyboard = [list(buttons)])


class KeyboardButtonPollType(BaseModel):
    """https://core.telegram.org/bots/api#keyboardbuttonpolltype"""
    type: str | None = None  # "quiz", "regular", or unset for any kind


class KeyboardButton(BaseModel):
    """https://core.telegram.org/bots/api#keyboardbutton"""
    text: str
    request_contact: bool | None = None
    request_location: bool | None = None
    request_poll: KeyboardButtonPollType | None = None


class ReplyKeyboardMarkup(BaseModel):
    """https://core.telegram.org/bots/api#replykeyboardmarkup"""
    keyboard: list[list[KeyboardButton]]
    is_persistent: bool | None = None
    resize_keyboard: bool | None = None
    one_time_keyboard: bool | None = None
    input_field_placeholder: str | None = None  # 1-64 characters
    selective: bool | None = None


class ReplyKeyboardRemove(BaseModel):
    """https://core.telegram.org/bots/api#replykeyboardremove"""
    remove_keyboard: Literal[True] = True
    selective: bool | None = None


class ForceReply(BaseModel):
    """https://core.telegram.org/bots/api#forcereply"""
    force_reply: Literal[True] = True
    input_field_placeholder: str | None = None  # 1-64 characters
    selective: bool | None = None


# none of the markups carries a type tag, each is told apart by its one mandatory key
MARKUP_KEYS = ("inline_keyboard", "keyboard", "remove_keyboard", "force_reply")

ReplyMarkup = Annotated[
    Union[
        Annotated[InlineKeyboardMarkup, Tag("inline_keyboard")],
        Annotated[ReplyKeyboardMarkup, Tag("keyboard")],
        Annotated[ReplyKeyboardRemove, Tag("remove_keyboard")],
        Annotated[ForceReply, Tag("force_reply")],
    ],
    Discriminator(
        presence_resolver(MARKUP_KEYS),
        custom_error_type = "unknown_reply_markup",
        custom_error_message = "Reply markup has none of: inline_keyboard, keyboard, remove_keyboard, force_reply",
    ),
]
