"""
Init Command - Onboarding Automation.

Handles `kglight init`, which writes a project configuration pointing at
the inventory found in the current directory.
"""

import csv
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm

from ...config import CONFIG_PATH, Settings, write_settings
from ...core.demo import DemoManager
from ...core.loader import HEADER_ALIASES, REQUIRED_COLUMNS

console = Console()


def detect_inventories(root_dir: Path) -> List[Path]:
    """
    Find CSV files in root_dir whose header looks like an inventory.

    A header qualifies if it names both a producer (or publisher) and a
    consumer column.
    """
    found = []
    for path in sorted(root_dir.glob("*.csv")):
        try:
            with open(path, newline="", encoding="utf-8-sig") as f:
                header = next(csv.reader(f), [])
        except (OSError, UnicodeDecodeError):
            continue
        columns = {HEADER_ALIASES.get(h.strip(), h.strip()) for h in header}
        if all(c in columns for c in REQUIRED_COLUMNS):
            found.append(path)
    return found


def _init_project(root_dir: Path, dataset: Optional[Path] = None) -> Path:
    """Internal helper to write the project config."""
    if dataset is None:
        with console.status("[bold green]Looking for inventory files...[/bold green]"):
            candidates = detect_inventories(root_dir)

        if not candidates:
            console.print("[yellow]No inventory CSV detected. Using the default dataset name.[/yellow]")
        else:
            dataset = candidates[0]
            console.print(f"✅ Detected: [cyan]{dataset.name}[/cyan]")
            if len(candidates) > 1:
                others = ", ".join(c.name for c in candidates[1:])
                console.print(f"   [dim]Also found: {others}[/dim]")

    settings = Settings()
    if dataset is not None:
        settings.dataset = str(dataset.relative_to(root_dir)) if dataset.is_relative_to(root_dir) else str(dataset)

    config_file = write_settings(settings, root_dir / CONFIG_PATH)

    console.print("\n✨ [bold green]Initialized successfully![/bold green]")
    console.print(f"   Config created at: [dim]{config_file}[/dim]")
    return config_file


@click.command()
@click.option("--force", is_flag=True, help="Overwrite existing configuration")
@click.option("--demo", is_flag=True, help="Create an example inventory to try kglight instantly")
def init(force: bool, demo: bool):
    """
    Initialize kglight in the current directory.

    If --demo is used, a sample inventory is created in ./kglight-demo
    and initialized automatically.
    """
    console.print(Panel.fit("🚀 [bold blue]kglight Initialization[/bold blue]", border_style="blue"))

    if demo:
        console.print("[cyan]Provisioning demo inventory...[/cyan]")
        demo_dir = DemoManager(Path.cwd()).provision()
        console.print(f"📂 Created demo inventory at: [bold]{demo_dir}[/bold]")

        _init_project(demo_dir, dataset=demo_dir / "inventory.csv")

        console.print("\n[bold green]Ready to go! Try these commands:[/bold green]")
        console.print(f"1. cd {demo_dir.name}")
        console.print("2. [bold cyan]kglight options[/bold cyan]")
        console.print("3. [bold cyan]kglight graph -l Active --open[/bold cyan]")
        return

    root_dir = Path.cwd()
    config_file = root_dir / CONFIG_PATH

    if config_file.exists() and not force:
        console.print(f"[yellow]Configuration already exists at {config_file}[/yellow]")
        if not Confirm.ask("Do you want to overwrite it?"):
            console.print("Aborted.")
            return

    _init_project(root_dir)
