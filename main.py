"""
Main entry point for the WeChat SFT exporter.

Interactive CLI for running export steps individually or together.

File: main.py
Created: 2026-10-13
Last Modified: 2026-10-17
"""

import logging
import sqlite3
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt, Confirm
from rich.table import Table
from rich import box

from wechat_sft.collection import export_raw_messages
from wechat_sft.config import ExportConfig
from wechat_sft.database import WechatDataProvider
from wechat_sft.errors import WechatExportError
from wechat_sft.preprocessing import (
    build_training_sessions,
    export_raw_messages_to_json,
    export_sessions_to_jsonl,
    find_pii,
)

console = Console()

load_dotenv()

# Configure logging
LOG_DIR = Path(__file__).parent / "logs"
LOG_DIR.mkdir(exist_ok=True)

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s | %(levelname)-8s | %(message)s',
    handlers=[
        logging.FileHandler(LOG_DIR / f"wechat_sft_{datetime.now().strftime('%Y-%m-%d')}.log"),
        logging.StreamHandler()
    ]
)
log = logging.getLogger(__name__)

# Step definitions
STEPS = {
    "1": {
        "name": "List contacts",
        "description": "Show the contact directory and resolved display names",
    },
    "2": {
        "name": "Export raw messages",
        "description": "Dump all text messages (time ordered) to JSON",
    },
    "3": {
        "name": "Export training sessions",
        "description": "Clean PII, split into sessions, write JSONL",
    },
}


def show_menu(config: ExportConfig):
    """Display the main menu."""
    console.print()
    console.print(
        Panel.fit(
            "[bold cyan]WeChat SFT Export[/] - Chat history to fine-tuning sessions",
            border_style="cyan",
        )
    )
    console.print(f"[dim]Data directory: {config.data_dir}[/]")
    console.print()

    table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("Step", style="cyan", width=4)
    table.add_column("Name", style="white")
    table.add_column("Description", style="dim")

    for key, step in STEPS.items():
        table.add_row(key, step["name"], step["description"])

    console.print(table)
    console.print()
    console.print("[dim]Commands:[/]")
    console.print("  [cyan]1, 2, 3[/]  Run a step")
    console.print("  [cyan]a[/]        Run steps 2 and 3")
    console.print("  [cyan]q[/]        Quit")
    console.print()


def _ask_peer_id(interactive: bool) -> str:
    if not interactive:
        return ""
    return Prompt.ask("Peer id to export (empty for all)", default="").strip()


def _run_step_1(config: ExportConfig):
    """List contacts."""
    with WechatDataProvider.open(config.data_dir, config.contacts_file) as provider:
        try:
            contacts = provider.get_all_contacts()
        except (sqlite3.Error, OSError, ValueError) as e:
            log.error(f"Could not read contacts: {e}")
            console.print(f"[red]Could not read contacts:[/] {e}")
            return

    table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("Identifier", style="cyan")
    table.add_column("Remark", style="white")
    table.add_column("Nickname", style="white")
    table.add_column("Shown as", style="green")

    for contact in contacts:
        table.add_row(contact.user_name, contact.remark, contact.nick_name, contact.display_name)

    console.print(table)
    console.print(f"[dim]{len(contacts):,} contacts[/]")


def _run_step_2(config: ExportConfig, peer_id: str):
    """Export raw messages."""
    with WechatDataProvider.open(config.data_dir, config.contacts_file) as provider:
        console.print("[dim]Reading message stores...[/]")
        messages = export_raw_messages(provider, peer_id, config.self_label)

    export_raw_messages_to_json(messages, config.raw_output_path)
    console.print(f"[green]Exported {len(messages):,} messages[/] → {config.raw_output_path}")


def _run_step_3(config: ExportConfig, peer_id: str):
    """Build and export training sessions."""
    with WechatDataProvider.open(config.data_dir, config.contacts_file) as provider:
        console.print("[dim]Reading message stores...[/]")
        messages = export_raw_messages(provider, peer_id, config.self_label)

    console.print("[dim]Building sessions...[/]")
    sessions = build_training_sessions(
        messages,
        bot_identity=config.bot_identity,
        split_gap_minutes=config.split_gap_minutes,
        clean_pii=config.clean_pii,
    )
    export_sessions_to_jsonl(sessions, config.output_path)

    redacted = sum(1 for msg in messages if find_pii(msg.content)) if config.clean_pii else 0
    turns = sum(len(session.messages) for session in sessions)

    # Rich summary output
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Label", style="dim")
    table.add_column("Count", style="bold cyan", justify="right")
    table.add_row("Messages", f"{len(messages):,}")
    table.add_row("Sessions", f"{len(sessions):,}")
    table.add_row("Turns", f"{turns:,}")
    table.add_row("Messages with PII removed", f"{redacted:,}")
    table.add_row("Assistant", config.bot_identity.value)
    table.add_row("Output", str(config.output_path))

    console.print(Panel(table, title="[bold green]Session Export Complete", border_style="green"))


def run_single_step(step: str, config: ExportConfig, interactive: bool = True):
    """Run a single step."""
    step_info = STEPS[step]
    console.rule(f"[bold]{step_info['name']}")

    if step == "1":
        _run_step_1(config)
    elif step == "2":
        _run_step_2(config, _ask_peer_id(interactive))
    elif step == "3":
        _run_step_3(config, _ask_peer_id(interactive))


def run_all_steps(config: ExportConfig, interactive: bool = True):
    """Run the raw and session exports."""
    peer_id = _ask_peer_id(interactive)

    console.rule("[bold]Step 2: Export raw messages")
    _run_step_2(config, peer_id)

    console.rule("[bold]Step 3: Export training sessions")
    _run_step_3(config, peer_id)

    console.print()
    console.print(Panel.fit("[bold green]Export complete![/]", border_style="green"))


def main():
    """Main entry point with interactive menu."""
    try:
        config = ExportConfig.from_env()
    except WechatExportError as e:
        console.print(f"[red]Invalid configuration:[/] {e}")
        sys.exit(1)

    # Check for command-line argument for non-interactive use
    if len(sys.argv) > 1:
        step = sys.argv[1].lower()
        try:
            if step == "all" or step == "a":
                run_all_steps(config, interactive=False)
            elif step in STEPS:
                run_single_step(step, config, interactive=False)
            else:
                console.print(f"[red]Unknown step: {step}[/]")
                console.print("[dim]Valid steps: 1-3, a (all)[/]")
        except WechatExportError as e:
            log.error(f"Export failed: {e}")
            sys.exit(1)
        return

    # Interactive mode
    while True:
        show_menu(config)

        choice = Prompt.ask(
            "Select step",
            choices=list(STEPS.keys()) + ["a", "q"],
            default="q",
        )

        if choice == "q":
            console.print("[dim]Goodbye![/]")
            break

        try:
            if choice == "a":
                run_all_steps(config)
            else:
                run_single_step(choice, config)
        except WechatExportError as e:
            console.print(f"[red]Export failed:[/] {e}")

        console.print()
        if not Confirm.ask("Continue?", default=True):
            console.print("[dim]Goodbye![/]")
            break


if __name__ == "__main__":
    main()
