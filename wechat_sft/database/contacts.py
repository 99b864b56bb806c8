"""
Contact directory access.

File: database/contacts.py
Created: 2026-10-12
Last Modified: 2026-10-15
"""

import json
import logging
import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Dict, List

from ..models import Contact

log = logging.getLogger(__name__)

CONTACTS_QUERY = "SELECT UserName, Remark, NickName FROM Contact"


def fetch_contacts(conn: sqlite3.Connection) -> List[Contact]:
    """
    Read every contact from the MicroMsg.db Contact table.

    Raises:
        sqlite3.Error: if the table cannot be queried
    """
    contacts = []
    with closing(conn.execute(CONTACTS_QUERY)) as cursor:
        for user_name, remark, nick_name in cursor:
            if not user_name:
                continue
            contacts.append(Contact(
                user_name=user_name,
                remark=remark or "",
                nick_name=nick_name or "",
            ))

    log.info(f"Loaded {len(contacts)} contacts from Contact table")
    return contacts


def load_contacts(filepath: Path) -> List[Contact]:
    """
    Load contacts from JSONL file.

    Each line should contain: {"user_name": "wxid_...", "remark": "...", "nick_name": "..."}

    Args:
        filepath: Path to contacts JSONL file (one contact per line)

    Returns:
        List of Contact objects
    """
    contacts = []
    with open(filepath, "r", encoding="utf-8") as f:
        for line in f:
            if not line.strip():
                continue
            data = json.loads(line.strip())
            contacts.append(Contact(
                user_name=data["user_name"],
                remark=data.get("remark") or "",
                nick_name=data.get("nick_name") or "",
            ))

    log.info(f"Loaded {len(contacts)} contacts from {filepath}")
    return contacts


def create_contact_name_map(contacts: List[Contact]) -> Dict[str, str]:
    """
    Create mapping from raw identifier to display name.

    Display name precedence is remark, then nickname, then the raw identifier.
    """
    mapping = {contact.user_name: contact.display_name for contact in contacts}
    log.debug(f"Created name mapping for {len(mapping)} identifiers")
    return mapping
