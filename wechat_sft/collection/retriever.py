"""
Reads text messages out of every WeChat message store and resolves who sent them.

File: collection/retriever.py
Created: 2026-10-12
Last Modified: 2026-10-16
"""

import logging
import sqlite3
from contextlib import closing
from typing import Dict, List, Optional

from ..config import DEFAULT_SELF_LABEL
from ..database import MessageStore, WechatDataProvider, build_text_message_query, create_contact_name_map
from ..errors import InvalidInput, PartialSourceFailure
from ..models import RawMessage

log = logging.getLogger(__name__)


def _load_contact_names(provider: WechatDataProvider) -> Dict[str, str]:
    """Snapshot the contact directory; an unreadable directory yields an empty map."""
    try:
        contacts = provider.get_all_contacts()
    except (sqlite3.Error, OSError, ValueError, KeyError) as e:
        log.warning(f"Contact lookup failed, using raw identifiers: {PartialSourceFailure('contacts', e)}")
        return {}
    return create_contact_name_map(contacts)


def _parse_row(row: tuple, contact_names: Dict[str, str], self_label: str) -> Optional[RawMessage]:
    """
    Convert one (StrTalker, StrContent, CreateTime, IsSender) row.

    Returns:
        RawMessage, or None if the row has no content

    Raises:
        ValueError, TypeError: if the row is malformed
    """
    talker_id, content, create_time, is_sender = row
    if content is None:
        return None

    is_self = is_sender == 1
    if is_self:
        sender = self_label
    else:
        sender = contact_names.get(talker_id, talker_id)

    return RawMessage(
        content=content,
        sender=sender,
        sender_id=talker_id,
        timestamp=create_time,
        is_self=is_self,
    )


def _read_store(
    store: MessageStore,
    peer_id: str,
    contact_names: Dict[str, str],
    self_label: str,
) -> List[RawMessage]:
    """
    Read all text messages from a single store.

    The cursor is closed before this returns, whether or not the query succeeded.

    Raises:
        sqlite3.Error: if the query fails
    """
    sql, params = build_text_message_query(peer_id)
    messages = []
    skipped = 0

    with closing(store.conn.execute(sql, params)) as cursor:
        for row in cursor:
            try:
                message = _parse_row(row, contact_names, self_label)
            except (ValueError, TypeError) as e:
                log.debug(f"Skipping malformed row: {PartialSourceFailure(store.name, e)}")
                skipped += 1
                continue
            if message is None:
                skipped += 1
                continue
            messages.append(message)

    if skipped:
        log.info(f"{store.name}: skipped {skipped} rows without usable content")
    return messages


def export_raw_messages(
    provider: Optional[WechatDataProvider],
    peer_id: str = "",
    self_label: str = DEFAULT_SELF_LABEL,
) -> List[RawMessage]:
    """
    Collect every text message across all message stores, oldest first.

    Failures of individual stores and rows are logged and skipped, so a
    partial result is a normal outcome.

    Args:
        provider: Opened data provider
        peer_id: Only return messages with this talker; empty string for all
        self_label: Sender name used for messages sent by the exporting user

    Returns:
        Messages stable-sorted by timestamp (ties keep retrieval order)

    Raises:
        InvalidInput: if the provider is missing or not opened
    """
    if provider is None:
        raise InvalidInput("provider is None")
    if not provider.is_open:
        raise InvalidInput("provider is not initialized")

    contact_names = _load_contact_names(provider)

    all_messages: List[RawMessage] = []
    failed_stores = 0
    for store in provider.msg_dbs:
        if store is None or store.conn is None:
            continue

        try:
            messages = _read_store(store, peer_id, contact_names, self_label)
        except sqlite3.Error as e:
            log.error(f"Message query failed, skipping store: {PartialSourceFailure(store.name, e)}")
            failed_stores += 1
            continue

        log.debug(f"{store.name}: {len(messages)} text messages")
        all_messages.extend(messages)

    all_messages.sort(key=lambda m: m.timestamp)

    scope = f"peer {peer_id}" if peer_id else "all peers"
    log.info(
        f"Retrieved {len(all_messages)} text messages for {scope} "
        f"from {len(provider.msg_dbs) - failed_stores}/{len(provider.msg_dbs)} stores"
    )
    return all_messages
