from enum import Enum


class ParseMode(Enum):
    """https://core.telegram.org/bots/api#formatting-options"""
    markdown = "Markdown"
    markdown_v2 = "MarkdownV2"
    html = "HTML"
