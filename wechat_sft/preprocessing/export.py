"""
Write raw messages and training sessions to disk.

File: preprocessing/export.py
Created: 2026-10-13
Last Modified: 2026-10-15
"""

import json
import logging
from pathlib import Path
from typing import List

from ..models import RawMessage, TrainingSession

log = logging.getLogger(__name__)


def export_sessions_to_jsonl(sessions: List[TrainingSession], output_path: Path) -> int:
    """
    Export training sessions to JSONL file.

    Each line contains: {"messages": [{"role": "...", "content": "..."}, ...]}

    Args:
        sessions: Sessions to write
        output_path: Path to output file (parent directories are created)

    Returns:
        Number of sessions exported
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with open(output_path, "w", encoding="utf-8") as f:
        for session in sessions:
            json.dump(session.to_jsonl_dict(), f, ensure_ascii=False)
            f.write("\n")
            count += 1

    log.info(f"Exported {count} sessions to {output_path}")
    return count


def export_raw_messages_to_json(messages: List[RawMessage], output_path: Path) -> int:
    """
    Export raw messages as a single JSON array.

    Returns:
        Number of messages exported
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump([msg.to_export_dict() for msg in messages], f, ensure_ascii=False, indent=2)

    log.info(f"Exported {len(messages)} raw messages to {output_path}")
    return len(messages)
