"""
Read-only access to a decrypted WeChat data directory.

File: database/provider.py
Created: 2026-10-12
Last Modified: 2026-10-16
"""

import logging
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..errors import InvalidInput
from ..models import Contact
from .common import CONTACT_DB_NAME, connect_read_only, find_message_db_paths
from .contacts import fetch_contacts, load_contacts

log = logging.getLogger(__name__)


@dataclass
class MessageStore:
    """One sharded message database (MSG0.db, MSG1.db, ...)."""

    name: str
    conn: Optional[sqlite3.Connection]


class WechatDataProvider:
    """
    Owns the message-store connections and the contact directory.

    A provider whose ``msg_dbs`` is None has not been opened (or was closed)
    and is rejected by retrieval.
    """

    def __init__(
        self,
        msg_dbs: Optional[List[MessageStore]] = None,
        contact_db: Optional[sqlite3.Connection] = None,
        contacts_file: Optional[Path] = None,
    ):
        self.msg_dbs = msg_dbs
        self.contact_db = contact_db
        self.contacts_file = contacts_file

    @classmethod
    def open(cls, data_dir: Path, contacts_file: Optional[Path] = None) -> "WechatDataProvider":
        """
        Open every message store and the contact database under data_dir.

        Args:
            data_dir: Decrypted WeChat directory (holds Multi/MSG*.db and MicroMsg.db)
            contacts_file: Optional JSONL contact directory, used instead of MicroMsg.db

        Raises:
            InvalidInput: if no message store is found
        """
        data_dir = Path(data_dir)
        paths = find_message_db_paths(data_dir)
        if not paths:
            raise InvalidInput(f"No MSG*.db message stores found under {data_dir}")

        stores = []
        for path in paths:
            try:
                stores.append(MessageStore(name=path.name, conn=connect_read_only(path)))
            except sqlite3.Error as e:
                # Kept as a dead store so retrieval logs and skips it
                log.warning(f"Could not open message store {path}: {e}")
                stores.append(MessageStore(name=path.name, conn=None))

        contact_db = None
        contact_path = data_dir / CONTACT_DB_NAME
        if contacts_file is None and contact_path.is_file():
            try:
                contact_db = connect_read_only(contact_path)
            except sqlite3.Error as e:
                log.warning(f"Could not open contact database {contact_path}: {e}")

        log.info(f"Opened {len(stores)} message stores from {data_dir}")
        return cls(msg_dbs=stores, contact_db=contact_db, contacts_file=contacts_file)

    @property
    def is_open(self) -> bool:
        return self.msg_dbs is not None

    def get_all_contacts(self) -> List[Contact]:
        """
        Snapshot of the contact directory.

        Raises:
            sqlite3.Error, OSError, ValueError: if the directory cannot be read
        """
        if self.contacts_file is not None:
            return load_contacts(self.contacts_file)
        if self.contact_db is None:
            log.debug("No contact directory configured, names will be raw identifiers")
            return []
        return fetch_contacts(self.contact_db)

    def close(self) -> None:
        if self.msg_dbs is not None:
            for store in self.msg_dbs:
                if store.conn is not None:
                    store.conn.close()
        if self.contact_db is not None:
            self.contact_db.close()
        self.msg_dbs = None
        self.contact_db = None

    def __enter__(self) -> "WechatDataProvider":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
