import unittest
from datetime import datetime, timezone

from tgtypes.model.chat_member import (
    ChatMember,
    ChatMemberAdministrator,
    ChatMemberBanned,
    ChatMemberLeft,
    ChatMemberMember,
    ChatMemberOwner,
    ChatMemberRestricted,
    ChatMemberUnknown,
)
from tgtypes.model.chat_member_updated import ChatMemberUpdated
from tgtypes.model.decoding import decode
from tgtypes.util.errors import DecodeError

USER = {"id": 1, "is_bot": False, "first_name": "Ada"}


def restricted(is_member: bool, until_date: int = 0) -> dict:
    permissions = {
        key: False
        for key in (
            "can_send_messages",
            "can_send_audios",
            "can_send_documents",
            "can_send_photos",
            "can_send_videos",
            "can_send_video_notes",
            "can_send_voice_notes",
            "can_send_polls",
            "can_send_other_messages",
            "can_add_web_page_previews",
            "can_change_info",
            "can_invite_users",
            "can_pin_messages",
        )
    }
    return {"status": "restricted", "user": USER, "is_member": is_member, "until_date": until_date, **permissions}


class ChatMemberTest(unittest.TestCase):

    def test_owner(self):
        member = decode(ChatMember, {"status": "creator", "user": USER, "is_anonymous": False, "custom_title": "Boss"})

        self.assertIsInstance(member, ChatMemberOwner)
        self.assertEqual(member.custom_title, "Boss")
        self.assertTrue(member.is_present)

    def test_administrator(self):
        member = decode(
            ChatMember,
            {
                "status": "administrator",
                "user": USER,
                "can_be_edited": True,
                "is_anonymous": False,
                "can_manage_chat": True,
                "can_delete_messages": True,
                "can_manage_video_chats": False,
                "can_restrict_members": True,
                "can_promote_members": False,
                "can_change_info": True,
                "can_invite_users": True,
            },
        )

        self.assertIsInstance(member, ChatMemberAdministrator)
        self.assertTrue(member.can_restrict_members)
        self.assertIsNone(member.can_pin_messages)

    def test_member(self):
        member = decode(ChatMember, {"status": "member", "user": USER})

        self.assertIsInstance(member, ChatMemberMember)
        self.assertEqual(member.user.first_name, "Ada")

    def test_restricted_forever(self):
        member = decode(ChatMember, restricted(is_member = True))

        self.assertIsInstance(member, ChatMemberRestricted)
        self.assertIsNone(member.until_date)
        self.assertTrue(member.is_present)

    def test_restricted_until_date(self):
        member = decode(ChatMember, restricted(is_member = False, until_date = 1_700_000_000))

        self.assertEqual(member.until_date, datetime(2023, 11, 14, 22, 13, 20, tzinfo = timezone.utc))
        self.assertFalse(member.is_present)

    def test_left_and_banned(self):
        left = decode(ChatMember, {"status": "left", "user": USER})
        banned = decode(ChatMember, {"status": "kicked", "user": USER, "until_date": 0})

        self.assertIsInstance(left, ChatMemberLeft)
        self.assertIsInstance(banned, ChatMemberBanned)
        self.assertIsNone(banned.until_date)
        self.assertFalse(left.is_present)
        self.assertFalse(banned.is_present)

    def test_unknown_status(self):
        member = decode(ChatMember, {"status": "ghost", "user": USER, "haunts": True})

        self.assertIsInstance(member, ChatMemberUnknown)
        self.assertEqual(member.status, "ghost")
        self.assertEqual(member.model_extra, {"haunts": True})

    def test_missing_status_fails(self):
        with self.assertRaises(DecodeError):
            decode(ChatMember, {"user": USER})

    def test_non_string_status_fails(self):
        with self.assertRaises(DecodeError):
            decode(ChatMember, {"status": {"x": 1}, "user": USER})

        with self.assertRaises(DecodeError):
            decode(ChatMember, {"status": ["member"], "user": USER})

    def test_list_of_members(self):
        members = decode(
            list[ChatMember],
            [
                {"status": "creator", "user": USER, "is_anonymous": True},
                {"status": "member", "user": {**USER, "id": 2}},
            ],
        )

        self.assertEqual([type(member) for member in members], [ChatMemberOwner, ChatMemberMember])


class ChatMemberUpdatedTest(unittest.TestCase):

    def test_join(self):
        updated = decode(
            ChatMemberUpdated,
            {
                "chat": {"id": -100, "type": "group", "title": "Friends"},
                "from": USER,
                "date": 1_700_000_000,
                "old_chat_member": {"status": "left", "user": USER},
                "new_chat_member": {"status": "member", "user": USER},
            },
        )

        self.assertEqual(updated.from_user.id, 1)
        self.assertTrue(updated.joined)
        self.assertFalse(updated.left)

    def test_leave(self):
        updated = decode(
            ChatMemberUpdated,
            {
                "chat": {"id": -100, "type": "group", "title": "Friends"},
                "from": USER,
                "date": 1_700_000_000,
                "old_chat_member": {"status": "member", "user": USER},
                "new_chat_member": {"status": "kicked", "user": USER, "until_date": 0},
            },
        )

        self.assertFalse(updated.joined)
        self.assertTrue(updated.left)
