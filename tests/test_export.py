"""Tests for writing sessions and raw messages to disk, and for the end-to-end pipeline."""

from __future__ import annotations

import json
from pathlib import Path

from tests.conftest import msg
from wechat_sft.collection import export_raw_messages
from wechat_sft.database import WechatDataProvider
from wechat_sft.models import BotIdentity, DialogueTurn, TrainingSession
from wechat_sft.preprocessing import (
    build_training_sessions,
    export_raw_messages_to_json,
    export_sessions_to_jsonl,
)


class TestExportSessions:
    def test_one_session_per_line(self, tmp_path: Path) -> None:
        sessions = [
            TrainingSession(messages=[DialogueTurn(role="user", content="你好")]),
            TrainingSession(
                messages=[
                    DialogueTurn(role="user", content="q"),
                    DialogueTurn(role="assistant", content="a"),
                ]
            ),
        ]
        output = tmp_path / "out" / "sessions.jsonl"

        count = export_sessions_to_jsonl(sessions, output)

        lines = output.read_text(encoding="utf-8").splitlines()
        assert count == 2
        assert json.loads(lines[0]) == {"messages": [{"role": "user", "content": "你好"}]}
        assert "你好" in lines[0]
        assert json.loads(lines[1])["messages"][1] == {"role": "assistant", "content": "a"}

    def test_no_sessions_writes_empty_file(self, tmp_path: Path) -> None:
        output = tmp_path / "sessions.jsonl"
        assert export_sessions_to_jsonl([], output) == 0
        assert output.read_text(encoding="utf-8") == ""


class TestExportRawMessages:
    def test_layout(self, tmp_path: Path) -> None:
        output = tmp_path / "raw.json"
        export_raw_messages_to_json([msg(0, is_self=True, content="x")], output)

        data = json.loads(output.read_text(encoding="utf-8"))
        assert len(data) == 1
        assert data[0]["Content"] == "x"
        assert data[0]["Sender"] == "我"
        assert data[0]["Timestamp"] == 0
        assert data[0]["IsSender"] == 1
        assert len(data[0]["TimeStr"]) == len("2006-01-02 15:04:05")


class TestPipeline:
    def test_stores_to_jsonl(self, wechat_dir: Path, tmp_path: Path) -> None:
        with WechatDataProvider.open(wechat_dir) as provider:
            messages = export_raw_messages(provider)

        # 100, 130, 160 | 400, 500 with a 2 minute threshold
        sessions = build_training_sessions(messages, BotIdentity.SELF, split_gap_minutes=2, clean_pii=True)
        output = tmp_path / "sessions.jsonl"
        export_sessions_to_jsonl(sessions, output)

        records = [json.loads(line) for line in output.read_text(encoding="utf-8").splitlines()]
        assert [[t["role"] for t in r["messages"]] for r in records] == [
            ["user", "user", "assistant"],
            ["user", "assistant"],
        ]
