"""
Common database constants and utilities

File: database/common.py
Created: 2026-10-12
Last Modified: 2026-10-14
"""

import re
import sqlite3
from pathlib import Path
from typing import List

# MSG.Type for plain text; images, voice, system notices etc. use other values
TEXT_MESSAGE_TYPE = 1

# Decrypted message stores are sharded as MSG0.db, MSG1.db, ... under Multi/
MSG_DB_PATTERN = re.compile(r"^MSG(\d+)\.db$")
CONTACT_DB_NAME = "MicroMsg.db"


def find_message_db_paths(data_dir: Path) -> List[Path]:
    """
    Find sharded message stores in a decrypted WeChat data directory.

    Looks in both ``data_dir/Multi`` and ``data_dir`` itself.

    Returns:
        Paths ordered by shard number
    """
    found = {}
    for directory in (data_dir / "Multi", data_dir):
        if not directory.is_dir():
            continue
        for path in directory.iterdir():
            match = MSG_DB_PATTERN.match(path.name)
            if match and path.is_file():
                found.setdefault(int(match.group(1)), path)

    return [found[shard] for shard in sorted(found)]


def connect_read_only(path: Path) -> sqlite3.Connection:
    """Open a SQLite database without ever writing to it."""
    return sqlite3.connect(f"{path.resolve().as_uri()}?mode=ro", uri=True)


__all__ = [
    "TEXT_MESSAGE_TYPE",
    "CONTACT_DB_NAME",
    "find_message_db_paths",
    "connect_read_only",
]
