import unittest
from unittest.mock import Mock, patch

from pydantic import SecretStr
from requests.exceptions import ConnectionError as RequestsConnectionError

from tgtypes.model.chat import SuperGroupChat
from tgtypes.model.chat_member import ChatMemberAdministrator, ChatMemberMember
from tgtypes.model.parse_mode import ParseMode
from tgtypes.model.update import MessageUpdate
from tgtypes.request.bot import GetMe
from tgtypes.request.chat import GetChat, GetChatAdministrators, LeaveChat, PromoteChatMember, SetChatPhoto
from tgtypes.request.input_file import from_bytes
from tgtypes.request.message import SendMessage
from tgtypes.request.updates import GetUpdates
from tgtypes.sdk.telegram_bot_api import TelegramBotAPI
from tgtypes.util import error_codes
from tgtypes.util.errors import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    DecodeError,
    ExternalServiceError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)

TOKEN = "123456:ABCDEF"
USER = {"id": 1, "is_bot": False, "first_name": "Ada"}


def response(body: dict | None, status_code: int = 200) -> Mock:
    mock_response = Mock(status_code = status_code)
    if body is None:
        mock_response.json.side_effect = ValueError("not json")
    else:
        mock_response.json.return_value = body
    return mock_response


class TelegramBotAPITest(unittest.TestCase):

    api: TelegramBotAPI

    def setUp(self):
        self.api = TelegramBotAPI(
            bot_token = SecretStr(TOKEN),
            api_base_url = "https://api.telegram.test/",
            timeout_s = 7,
        )

    @patch("tgtypes.sdk.telegram_bot_api.requests.post")
    def test_execute_sends_json_payload(self, mock_post):
        mock_post.return_value = response({"ok": True, "result": True})

        result = self.api.execute(PromoteChatMember(chat_id = 111, user_id = 222, can_pin_messages = False))

        self.assertTrue(result)
        mock_post.assert_called_once_with(
            f"https://api.telegram.test/bot{TOKEN}/promoteChatMember",
            json = {"chat_id": 111, "user_id": 222, "can_pin_messages": False},
            timeout = 7,
        )

    @patch("tgtypes.sdk.telegram_bot_api.requests.post")
    def test_execute_decodes_model_result(self, mock_post):
        mock_post.return_value = response(
            {"ok": True, "result": {"id": -1001, "type": "supergroup", "title": "Builders", "is_forum": True}},
        )

        chat = self.api.execute(GetChat(chat_id = -1001))

        self.assertIsInstance(chat, SuperGroupChat)
        self.assertTrue(chat.is_forum)

    @patch("tgtypes.sdk.telegram_bot_api.requests.post")
    def test_execute_decodes_list_result(self, mock_post):
        mock_post.return_value = response(
            {
                "ok": True,
                "result": [
                    {"status": "member", "user": USER},
                    {
                        "status": "administrator",
                        "user": {**USER, "id": 2},
                        "can_be_edited": False,
                        "is_anonymous": False,
                        "can_manage_chat": True,
                        "can_delete_messages": True,
                        "can_manage_video_chats": True,
                        "can_restrict_members": True,
                        "can_promote_members": False,
                        "can_change_info": True,
                        "can_invite_users": True,
                    },
                ],
            },
        )

        members = self.api.execute(GetChatAdministrators(chat_id = -1001))

        self.assertIsInstance(members[0], ChatMemberMember)
        self.assertIsInstance(members[1], ChatMemberAdministrator)

    @patch("tgtypes.sdk.telegram_bot_api.requests.post")
    def test_execute_get_me_and_updates(self, mock_post):
        mock_post.side_effect = [
            response({"ok": True, "result": {**USER, "is_bot": True, "can_join_groups": True}}),
            response(
                {
                    "ok": True,
                    "result": [
                        {
                            "update_id": 5,
                            "message": {
                                "message_id": 1,
                                "date": 1_700_000_000,
                                "chat": {"id": 1, "type": "private"},
                                "text": "/start",
                            },
                        },
                    ],
                },
            ),
        ]

        me = self.api.execute(GetMe())
        updates = self.api.execute(GetUpdates(timeout = 0))

        self.assertTrue(me.can_join_groups)
        self.assertIsInstance(updates[0].content, MessageUpdate)
        self.assertEqual(updates[0].message.plain_text, "/start")
        self.assertEqual(mock_post.call_args.kwargs["json"], {"timeout": 0})

    @patch("tgtypes.sdk.telegram_bot_api.requests.post")
    def test_execute_send_message_returns_message(self, mock_post):
        mock_post.return_value = response(
            {
                "ok": True,
                "result": {
                    "message_id": 9,
                    "date": 1_700_000_000,
                    "chat": {"id": 111, "type": "private"},
                    "text": "Vote?",
                    "reply_markup": {"inline_keyboard": [[{"text": "Yes", "callback_data": "yes"}]]},
                },
            },
        )

        sent = self.api.execute(SendMessage(chat_id = 111, text = "Vote?", parse_mode = ParseMode.html))

        self.assertEqual(sent.message_id, 9)
        self.assertEqual(sent.reply_markup.inline_keyboard[0][0].callback_data, "yes")
        self.assertEqual(mock_post.call_args.kwargs["json"], {"chat_id": 111, "text": "Vote?", "parse_mode": "HTML"})

    @patch("tgtypes.sdk.telegram_bot_api.requests.post")
    def test_execute_uploads_files_as_multipart(self, mock_post):
        mock_post.return_value = response({"ok": True, "result": True})

        self.api.execute(SetChatPhoto(chat_id = 111, photo = from_bytes("avatar.png", b"\x89PNG")))

        mock_post.assert_called_once_with(
            f"https://api.telegram.test/bot{TOKEN}/setChatPhoto",
            data = {"chat_id": "111"},
            files = {"photo": ("avatar.png", b"\x89PNG")},
            timeout = 7,
        )

    @patch("tgtypes.sdk.telegram_bot_api.requests.post")
    def test_error_codes_map_to_errors(self, mock_post):
        cases = [
            (400, ValidationError, error_codes.REQUEST_REJECTED),
            (401, AuthenticationError, error_codes.BOT_TOKEN_REJECTED),
            (403, AuthorizationError, error_codes.BOT_FORBIDDEN),
            (404, NotFoundError, error_codes.RESOURCE_NOT_FOUND),
            (500, ExternalServiceError, error_codes.TELEGRAM_API_FAILURE),
        ]
        for status_code, error_type, error_code in cases:
            mock_post.return_value = response(
                {"ok": False, "error_code": status_code, "description": "Nope"},
                status_code = status_code,
            )

            with self.assertRaises(error_type) as context:
                self.api.execute(LeaveChat(chat_id = 1))

            self.assertEqual(context.exception.error_code, error_code)
            self.assertEqual(context.exception.telegram_error_code, status_code)
            self.assertIn("Nope", context.exception.message)

    @patch("tgtypes.sdk.telegram_bot_api.requests.post")
    def test_rate_limit_carries_retry_after(self, mock_post):
        mock_post.return_value = response(
            {
                "ok": False,
                "error_code": 429,
                "description": "Too Many Requests: retry after 14",
                "parameters": {"retry_after": 14},
            },
            status_code = 429,
        )

        with self.assertRaises(RateLimitError) as context:
            self.api.execute(LeaveChat(chat_id = 1))

        self.assertEqual(context.exception.retry_after_s, 14)
        self.assertEqual(context.exception.error_code, error_codes.TELEGRAM_RATE_LIMITED)

    @patch("tgtypes.sdk.telegram_bot_api.requests.post")
    def test_missing_error_code_falls_back_to_http_status(self, mock_post):
        mock_post.return_value = response({"ok": False, "description": "Forbidden"}, status_code = 403)

        with self.assertRaises(AuthorizationError):
            self.api.execute(LeaveChat(chat_id = 1))

    @patch("tgtypes.sdk.telegram_bot_api.requests.post")
    def test_network_failure(self, mock_post):
        mock_post.side_effect = RequestsConnectionError("down")

        with self.assertRaises(ExternalServiceError) as context:
            self.api.execute(LeaveChat(chat_id = 1))

        self.assertEqual(context.exception.error_code, error_codes.TELEGRAM_UNREACHABLE)
        self.assertNotIn(TOKEN, context.exception.message)

    @patch("tgtypes.sdk.telegram_bot_api.requests.post")
    def test_unreadable_responses(self, mock_post):
        for body in (None, {"result": True}, ["ok"]):
            mock_post.return_value = response(body, status_code = 502)

            with self.assertRaises(ExternalServiceError) as context:
                self.api.execute(LeaveChat(chat_id = 1))

            self.assertEqual(context.exception.error_code, error_codes.TELEGRAM_RESPONSE_UNREADABLE)

    @patch("tgtypes.sdk.telegram_bot_api.requests.post")
    def test_unexpected_result_shape(self, mock_post):
        mock_post.return_value = response({"ok": True, "result": {"id": 1}})

        with self.assertRaises(DecodeError):
            self.api.execute(GetChat(chat_id = 1))

    def test_empty_token_is_rejected(self):
        with self.assertRaises(ConfigurationError) as context:
            TelegramBotAPI(bot_token = SecretStr(""))

        self.assertEqual(context.exception.error_code, error_codes.BOT_TOKEN_MISSING)

    def test_missing_configured_token_is_rejected(self):
        with patch("tgtypes.sdk.telegram_bot_api.config") as mock_config:
            mock_config.has_bot_token = False
            mock_config.telegram_bot_token = SecretStr("invalid")

            with self.assertRaises(ConfigurationError):
                TelegramBotAPI()
