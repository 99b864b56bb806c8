"""
Fine-tuning session models.

File: models/training_session.py
Created: 2026-10-12
Last Modified: 2026-10-16
"""

from enum import Enum
from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field


class BotIdentity(str, Enum):
    """Which side of the conversation plays the assistant."""

    SELF = "self"
    COUNTERPART = "counterpart"


class DialogueTurn(BaseModel):
    """One role-labeled message inside a training session."""
    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"] = Field(..., description="Dialogue role")
    content: str = Field(..., description="Message text, redacted if PII cleaning is on")


class TrainingSession(BaseModel):
    """
    A contiguous block of conversation with no gap above the split threshold.

    Sessions are never empty; the segmenter only emits sessions that hold at
    least one turn.
    """

    messages: List[DialogueTurn] = Field(..., min_length=1, description="Turns in time order")

    def to_jsonl_dict(self) -> Dict[str, Any]:
        """Convert to the JSONL record written for fine-tuning"""
        return {"messages": [turn.model_dump() for turn in self.messages]}
