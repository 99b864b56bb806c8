"""
File: database/messages.py
Created: 2026-10-12
Last Modified: 2026-10-15
"""

from typing import Tuple

from .common import TEXT_MESSAGE_TYPE

TEXT_MESSAGES_QUERY = """
    SELECT StrTalker, StrContent, CreateTime, IsSender
    FROM MSG
    WHERE Type = ?
"""


def build_text_message_query(peer_id: str = "") -> Tuple[str, tuple]:
    """
    Build the text-message query for one message store.

    Args:
        peer_id: Restrict to a single talker; empty string means all peers

    Returns:
        (sql, params) ready for ``Connection.execute``; the peer id is always
        bound as a parameter, never formatted into the SQL
    """
    if not peer_id:
        return TEXT_MESSAGES_QUERY, (TEXT_MESSAGE_TYPE,)
    return TEXT_MESSAGES_QUERY + "    AND StrTalker = ?\n", (TEXT_MESSAGE_TYPE, peer_id)
