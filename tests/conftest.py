"""Shared fixtures: throwaway WeChat-shaped SQLite databases."""

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from wechat_sft.models import RawMessage

MSG_SCHEMA = """
    CREATE TABLE MSG (
        localId INTEGER PRIMARY KEY AUTOINCREMENT,
        Type INTEGER,
        IsSender INTEGER,
        CreateTime INTEGER,
        StrTalker TEXT,
        StrContent TEXT
    )
"""

CONTACT_SCHEMA = """
    CREATE TABLE Contact (
        UserName TEXT PRIMARY KEY,
        Remark TEXT,
        NickName TEXT
    )
"""


def make_msg_db(path: Path, rows: list[tuple]) -> Path:
    """Create a message store. Rows are (Type, IsSender, CreateTime, StrTalker, StrContent)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(path)
    conn.execute(MSG_SCHEMA)
    conn.executemany(
        "INSERT INTO MSG (Type, IsSender, CreateTime, StrTalker, StrContent) VALUES (?, ?, ?, ?, ?)",
        rows,
    )
    conn.commit()
    conn.close()
    return path


def make_contact_db(path: Path, rows: list[tuple]) -> Path:
    """Create MicroMsg.db. Rows are (UserName, Remark, NickName)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(path)
    conn.execute(CONTACT_SCHEMA)
    conn.executemany("INSERT INTO Contact (UserName, Remark, NickName) VALUES (?, ?, ?)", rows)
    conn.commit()
    conn.close()
    return path


def msg(timestamp: int, is_self: bool = False, content: str = "hi", sender_id: str = "wxid_alice") -> RawMessage:
    return RawMessage(
        content=content,
        sender="我" if is_self else sender_id,
        sender_id=sender_id,
        timestamp=timestamp,
        is_self=is_self,
    )


@pytest.fixture
def wechat_dir(tmp_path: Path) -> Path:
    """A data directory with two message stores and a contact database."""
    data_dir = tmp_path / "wechat"
    make_msg_db(
        data_dir / "Multi" / "MSG0.db",
        [
            (1, 0, 100, "wxid_alice", "hello from alice"),
            (1, 1, 160, "wxid_alice", "hi alice"),
            (3, 0, 170, "wxid_alice", None),  # image
            (10000, 0, 180, "wxid_alice", "alice recalled a message"),  # system notice
            (1, 0, 400, "wxid_bob", "bob here"),
        ],
    )
    make_msg_db(
        data_dir / "Multi" / "MSG1.db",
        [
            (1, 0, 130, "wxid_carol", "carol says hi"),
            (1, 1, 500, "wxid_bob", "hey bob"),
        ],
    )
    make_contact_db(
        data_dir / "MicroMsg.db",
        [
            ("wxid_alice", "Alice (work)", "alice"),
            ("wxid_bob", "", "Bobby"),
            ("wxid_carol", None, None),
        ],
    )
    return data_dir
