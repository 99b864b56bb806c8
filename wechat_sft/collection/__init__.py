"""
Collects text messages from decrypted WeChat message stores

File: collection/__init__.py
Created: 2026-10-12
Last Modified: 2026-10-12
"""

from .retriever import export_raw_messages

__all__ = [
    "export_raw_messages",
]
