"""
Raw chat message model.

File: models/message.py
Created: 2026-10-12
Last Modified: 2026-10-15
"""

from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class RawMessage(BaseModel):
    """A text message read from a WeChat message store, with its sender resolved."""
    model_config = ConfigDict(frozen=True, extra='ignore')

    content: str = Field(..., description="Message text (StrContent)")
    sender: str = Field(..., description="Resolved display name, or the self label for own messages")
    sender_id: str = Field(..., description="Raw talker identifier (StrTalker)")
    timestamp: int = Field(..., description="Creation time in unix seconds (CreateTime)")
    is_self: bool = Field(..., description="True if the exporting user sent this message")

    @property
    def time_str(self) -> str:
        """Local time formatted like the WeChat client shows it."""
        return datetime.fromtimestamp(self.timestamp).strftime("%Y-%m-%d %H:%M:%S")

    def to_export_dict(self) -> Dict[str, Any]:
        """Convert to the raw-message export layout"""
        return {
            "Content": self.content,
            "Sender": self.sender,
            "TimeStr": self.time_str,
            "Timestamp": self.timestamp,
            "IsSender": 1 if self.is_self else 0,
        }
