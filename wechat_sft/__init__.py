"""
Turns a decrypted WeChat chat history into PII-cleaned fine-tuning sessions.
"""

from .collection import export_raw_messages
from .config import ExportConfig
from .database import WechatDataProvider
from .errors import InvalidInput, PartialSourceFailure, WechatExportError
from .preprocessing import build_training_sessions, clean_pii

__all__ = [
    "export_raw_messages",
    "ExportConfig",
    "WechatDataProvider",
    "InvalidInput",
    "PartialSourceFailure",
    "WechatExportError",
    "build_training_sessions",
    "clean_pii",
]
