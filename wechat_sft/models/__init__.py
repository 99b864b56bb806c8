"""
Shared data models for the WeChat SFT exporter.
"""

from .contact import Contact
from .message import RawMessage
from .training_session import BotIdentity, DialogueTurn, TrainingSession

__all__ = [
    "BotIdentity",
    "Contact",
    "DialogueTurn",
    "RawMessage",
    "TrainingSession",
]
