"""
File: database/__init__.py
Created: 2026-10-12
Last Modified: 2026-10-16
"""

from .common import TEXT_MESSAGE_TYPE, connect_read_only, find_message_db_paths
from .contacts import create_contact_name_map, fetch_contacts, load_contacts
from .messages import build_text_message_query
from .provider import MessageStore, WechatDataProvider

__all__ = [
    "TEXT_MESSAGE_TYPE",
    "connect_read_only",
    "find_message_db_paths",
    "create_contact_name_map",
    "fetch_contacts",
    "load_contacts",
    "build_text_message_query",
    "MessageStore",
    "WechatDataProvider",
]
