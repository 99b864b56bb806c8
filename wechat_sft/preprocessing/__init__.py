"""
Preprocessing module for fine-tuning data: PII cleaning, session building, export.

File: preprocessing/__init__.py
Created: 2026-10-12
Last Modified: 2026-10-15
"""

from .export import export_raw_messages_to_json, export_sessions_to_jsonl
from .pii import PII_PATTERNS, clean_pii, find_pii
from .sessions import assign_role, build_training_sessions

__all__ = [
    "PII_PATTERNS",
    "clean_pii",
    "find_pii",
    "assign_role",
    "build_training_sessions",
    "export_sessions_to_jsonl",
    "export_raw_messages_to_json",
]
