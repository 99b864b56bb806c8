"""
Split a time-ordered message history into role-labeled training sessions.

A new session starts whenever the gap to the previous message is strictly
greater than the split threshold. Messages from the bot identity become
``assistant`` turns and everyone else becomes ``user``.

File: preprocessing/sessions.py
Created: 2026-10-12
Last Modified: 2026-10-16
"""

import logging
from typing import List, Optional, Sequence

from ..errors import InvalidInput
from ..models import BotIdentity, DialogueTurn, RawMessage, TrainingSession
from .pii import clean_pii as redact

log = logging.getLogger(__name__)


def assign_role(msg: RawMessage, bot_identity: BotIdentity) -> str:
    """
    Role of a message given which side plays the assistant.

    With more than two participants every non-bot sender is ``user``.
    """
    if bot_identity == BotIdentity.SELF:
        is_bot = msg.is_self
    else:
        is_bot = not msg.is_self
    return "assistant" if is_bot else "user"


def build_training_sessions(
    messages: Sequence[RawMessage],
    bot_identity: BotIdentity = BotIdentity.SELF,
    split_gap_minutes: int = 30,
    clean_pii: bool = False,
) -> List[TrainingSession]:
    """
    Segment messages into sessions on inactivity gaps and assign roles.

    Args:
        messages: Messages sorted ascending by timestamp
        bot_identity: Which side's messages become assistant turns
        split_gap_minutes: Gaps strictly longer than this start a new session
        clean_pii: Redact PII from each message's content first

    Returns:
        Non-empty sessions in time order

    Raises:
        InvalidInput: if split_gap_minutes is negative
    """
    if split_gap_minutes < 0:
        raise InvalidInput(f"split_gap_minutes must be >= 0, got {split_gap_minutes}")

    bot_identity = BotIdentity(bot_identity)
    split_gap_seconds = split_gap_minutes * 60

    sessions: List[TrainingSession] = []
    current: List[DialogueTurn] = []
    last_timestamp: Optional[int] = None

    for msg in messages:
        if last_timestamp is not None and msg.timestamp - last_timestamp > split_gap_seconds:
            if current:
                sessions.append(TrainingSession(messages=current))
            current = []

        content = redact(msg.content) if clean_pii else msg.content
        current.append(DialogueTurn(role=assign_role(msg, bot_identity), content=content))
        last_timestamp = msg.timestamp

    if current:
        sessions.append(TrainingSession(messages=current))

    log.info(
        f"Built {len(sessions)} sessions from {len(messages)} messages "
        f"(gap > {split_gap_minutes}m, bot={bot_identity.value}, pii_cleaned={clean_pii})"
    )
    return sessions
