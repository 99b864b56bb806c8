"""Tests for opening WeChat data directories and reading the contact directory."""

from __future__ import annotations

import json
import sqlite3
from pathlib import Path

import pytest

from tests.conftest import make_msg_db
from wechat_sft.database import (
    WechatDataProvider,
    create_contact_name_map,
    find_message_db_paths,
    load_contacts,
)
from wechat_sft.errors import InvalidInput
from wechat_sft.models import Contact


class TestFindMessageDbPaths:
    def test_ordered_by_shard_number(self, tmp_path: Path) -> None:
        for shard in (10, 2, 0):
            make_msg_db(tmp_path / "Multi" / f"MSG{shard}.db", [])
        (tmp_path / "Multi" / "MSG.db").touch()
        (tmp_path / "Multi" / "MediaMSG0.db").touch()

        paths = find_message_db_paths(tmp_path)

        assert [p.name for p in paths] == ["MSG0.db", "MSG2.db", "MSG10.db"]

    def test_top_level_stores(self, tmp_path: Path) -> None:
        make_msg_db(tmp_path / "MSG0.db", [])
        assert [p.name for p in find_message_db_paths(tmp_path)] == ["MSG0.db"]

    def test_missing_directory(self, tmp_path: Path) -> None:
        assert find_message_db_paths(tmp_path / "nope") == []


class TestProvider:
    def test_open_without_stores_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidInput):
            WechatDataProvider.open(tmp_path)

    def test_open_and_close(self, wechat_dir: Path) -> None:
        provider = WechatDataProvider.open(wechat_dir)
        assert provider.is_open
        assert [s.name for s in provider.msg_dbs] == ["MSG0.db", "MSG1.db"]

        provider.close()
        assert not provider.is_open
        provider.close()

    def test_stores_are_read_only(self, wechat_dir: Path) -> None:
        with WechatDataProvider.open(wechat_dir) as provider:
            with pytest.raises(sqlite3.OperationalError):
                provider.msg_dbs[0].conn.execute("DELETE FROM MSG")

    def test_contacts_from_micromsg(self, wechat_dir: Path) -> None:
        with WechatDataProvider.open(wechat_dir) as provider:
            contacts = provider.get_all_contacts()

        assert {c.user_name: c.display_name for c in contacts} == {
            "wxid_alice": "Alice (work)",
            "wxid_bob": "Bobby",
            "wxid_carol": "wxid_carol",
        }

    def test_no_contact_directory(self, tmp_path: Path) -> None:
        make_msg_db(tmp_path / "MSG0.db", [])
        with WechatDataProvider.open(tmp_path) as provider:
            assert provider.get_all_contacts() == []

    def test_contacts_file_takes_precedence(self, wechat_dir: Path, tmp_path: Path) -> None:
        contacts_file = tmp_path / "contacts.jsonl"
        contacts_file.write_text(
            json.dumps({"user_name": "wxid_alice", "remark": "", "nick_name": "Ali"}) + "\n",
            encoding="utf-8",
        )

        with WechatDataProvider.open(wechat_dir, contacts_file=contacts_file) as provider:
            assert provider.contact_db is None
            contacts = provider.get_all_contacts()

        assert [c.display_name for c in contacts] == ["Ali"]


class TestContacts:
    def test_display_name_precedence(self) -> None:
        assert Contact(user_name="id", remark="R", nick_name="N").display_name == "R"
        assert Contact(user_name="id", remark="", nick_name="N").display_name == "N"
        assert Contact(user_name="id").display_name == "id"

    def test_load_contacts_skips_blank_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "contacts.jsonl"
        path.write_text(
            '{"user_name": "wxid_a", "remark": "小王"}\n\n{"user_name": "wxid_b", "nick_name": null}\n',
            encoding="utf-8",
        )

        contacts = load_contacts(path)

        assert [(c.user_name, c.display_name) for c in contacts] == [("wxid_a", "小王"), ("wxid_b", "wxid_b")]

    def test_name_map(self) -> None:
        contacts = [Contact(user_name="a", remark="A"), Contact(user_name="b", nick_name="B")]
        assert create_contact_name_map(contacts) == {"a": "A", "b": "B"}
