from enum import Enum


class ChatAction(Enum):
    """https://core.telegram.org/bots/api#sendchataction"""
    typing = "typing"
    upload_photo = "upload_photo"
    record_video = "record_video"
    upload_video = "upload_video"
    record_voice = "record_voice"
    upload_voice = "upload_voice"
    upload_document = "upload_document"
    choose_sticker = "choose_sticker"
    find_location = "find_location"
    record_video_note = "record_video_note"
    upload_video_note = "upload_video_note"
