"""
Export configuration for the WeChat SFT exporter.

File: config.py
Created: 2026-10-13
Last Modified: 2026-10-16
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .errors import InvalidInput
from .models import BotIdentity

# Sender label WeChat shows for your own messages
DEFAULT_SELF_LABEL = "我"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ExportConfig:
    """Configuration for turning a WeChat history into fine-tuning sessions."""

    # Sources
    data_dir: Path = field(default_factory=lambda: Path("data/wechat"))
    contacts_file: Optional[Path] = None  # JSONL directory used instead of MicroMsg.db

    # Identity
    self_label: str = DEFAULT_SELF_LABEL
    bot_identity: BotIdentity = BotIdentity.SELF

    # Segmentation
    split_gap_minutes: int = 30
    clean_pii: bool = True

    # Output
    output_path: Path = field(default_factory=lambda: Path("data/sft_sessions.jsonl"))
    raw_output_path: Path = field(default_factory=lambda: Path("data/raw_messages.json"))

    def __post_init__(self):
        # Ensure paths are Path objects
        if isinstance(self.data_dir, str):
            self.data_dir = Path(self.data_dir)
        if isinstance(self.contacts_file, str):
            self.contacts_file = Path(self.contacts_file)
        if isinstance(self.output_path, str):
            self.output_path = Path(self.output_path)
        if isinstance(self.raw_output_path, str):
            self.raw_output_path = Path(self.raw_output_path)
        if isinstance(self.bot_identity, str):
            try:
                self.bot_identity = BotIdentity(self.bot_identity.strip().lower())
            except ValueError:
                raise InvalidInput(
                    f"Unknown bot identity '{self.bot_identity}' (expected 'self' or 'counterpart')"
                )
        if self.split_gap_minutes < 0:
            raise InvalidInput(f"split_gap_minutes must be >= 0, got {self.split_gap_minutes}")

    @classmethod
    def from_env(cls) -> "ExportConfig":
        """Build a config from the environment, loading .env first."""
        load_dotenv()

        contacts_file = os.getenv("CONTACTS_FILE")
        try:
            split_gap_minutes = int(os.getenv("SPLIT_GAP_MINUTES", "30"))
        except ValueError:
            raise InvalidInput(f"SPLIT_GAP_MINUTES must be an integer, got {os.getenv('SPLIT_GAP_MINUTES')!r}")

        return cls(
            data_dir=Path(os.getenv("WECHAT_DATA_DIR", "data/wechat")),
            contacts_file=Path(contacts_file) if contacts_file else None,
            self_label=os.getenv("MY_NAME") or DEFAULT_SELF_LABEL,
            bot_identity=os.getenv("BOT_IDENTITY", BotIdentity.SELF.value),
            split_gap_minutes=split_gap_minutes,
            clean_pii=_env_bool("CLEAN_PII", True),
            output_path=Path(os.getenv("OUTPUT_PATH", "data/sft_sessions.jsonl")),
            raw_output_path=Path(os.getenv("RAW_OUTPUT_PATH", "data/raw_messages.json")),
        )

    def to_dict(self) -> dict:
        """Convert to dict for the run summary."""
        return {
            "data_dir": str(self.data_dir),
            "contacts_file": str(self.contacts_file) if self.contacts_file else None,
            "self_label": self.self_label,
            "bot_identity": self.bot_identity.value,
            "split_gap_minutes": self.split_gap_minutes,
            "clean_pii": self.clean_pii,
            "output_path": str(self.output_path),
            "raw_output_path": str(self.raw_output_path),
        }
