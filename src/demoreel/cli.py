"""
DemoReel CLI - Command Line Interface for TF2 demo analysis

Provides commands for:
- Analysing recorded demo message logs
- Browsing the highlight timeline of a stored summary
- Showing version and effective configuration
"""

import logging
import re
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from demoreel import __version__
from demoreel.analysis.timeline import HighlightFilters, filter_highlights
from demoreel.core.config import config_to_dict, load_config
from demoreel.core.constants import AirshotRule
from demoreel.core.schemas import (
    Airshot,
    ChatMessage,
    CrossbowAirshot,
    GameSummary,
    Highlight,
    Kill,
    PlayerConnected,
    PlayerDisconnected,
    PointCaptured,
    RoundWin,
)
from demoreel.core.utils import configure_logging
from demoreel.export import export_players_csv, load_summary, summary_to_json
from demoreel.pipeline.replay import analyse_message_log

app = typer.Typer(
    name="demoreel",
    help="TF2 demo analyser - scoreboards and highlight timelines from demo message streams",
    add_completion=False,
)
console = Console()

logger = logging.getLogger(__name__)

_verbose = False


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]DemoReel[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable verbose output",
    ),
) -> None:
    """DemoReel - TF2 Demo Analyser"""
    global _verbose
    _verbose = verbose
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


def _describe(event: Highlight, names: dict[int, str]) -> str:
    """One-line description of a highlight for the timeline table."""

    def name(user_id: Optional[int]) -> str:
        if user_id is None:
            return ""
        return names.get(user_id, f"#{user_id}")

    if isinstance(event, Kill):
        text = f"{name(event.killer_id)} killed {name(event.victim_id)} ({event.kill_icon})"
        if event.assister_id is not None:
            text += f" + {name(event.assister_id)}"
        if event.airshot:
            text += " [airshot]"
        if event.drop:
            text += " [drop]"
        return text
    if isinstance(event, Airshot):
        return f"{name(event.attacker_id)} airshot {name(event.victim_id)}"
    if isinstance(event, CrossbowAirshot):
        return f"{name(event.healer_id)} crossbow airshot on {name(event.target_id)}"
    if isinstance(event, ChatMessage):
        return f"{name(event.sender)}: {event.text}"
    if isinstance(event, PointCaptured):
        cappers = ", ".join(name(user_id) for user_id in event.cappers)
        return f"{event.point_name} captured by team {event.capturing_team} ({cappers})"
    if isinstance(event, RoundWin):
        return f"Round won by team {event.winner}"
    if isinstance(event, PlayerConnected):
        return f"{name(event.user_id)} connected"
    if isinstance(event, PlayerDisconnected):
        return f"{name(event.user_id)} disconnected ({event.reason})"
    return event.tag


def _display_summary(summary: GameSummary) -> None:
    console.print(
        Panel(
            f"[red]RED {summary.red_team_score}[/red]  -  [blue]{summary.blue_team_score} BLU[/blue]",
            title="Score",
        )
    )

    table = Table(title="Players")
    table.add_column("User", justify="right", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Team")
    table.add_column("Classes")
    table.add_column("K", justify="right", style="green")
    table.add_column("D", justify="right", style="red")
    table.add_column("A", justify="right")
    table.add_column("Damage", justify="right")
    table.add_column("Points", justify="right")

    for player in sorted(summary.players, key=lambda p: (p.team, p.user_id)):
        score = player.scoreboard
        marker = " *" if player.user_id == summary.local_user_id else ""
        table.add_row(
            str(player.user_id),
            escape(player.name) + marker,
            player.team.label,
            ", ".join(c.label for c in player.classes),
            str(score.get("kills", 0)),
            str(score.get("deaths", 0)),
            str(score.get("assists", 0)),
            str(score.get("damage_dealt", 0)),
            str(score.get("points", 0)),
        )
    console.print(table)

    counts: dict[str, int] = {}
    for highlight in summary.highlights:
        counts[highlight.event.tag] = counts.get(highlight.event.tag, 0) + 1
    if counts:
        console.print("Highlights: " + ", ".join(f"{tag} {count}" for tag, count in sorted(counts.items())))


@app.command()
def analyse(
    log_path: Path = typer.Argument(
        ...,
        help="Path to the recorded message log (JSON lines)",
        exists=True,
        dir_okay=False,
        resolve_path=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the game summary as JSON",
    ),
    csv_path: Optional[Path] = typer.Option(
        None,
        "--csv",
        help="Write the per-player table as CSV",
    ),
    airshot_rule: Optional[AirshotRule] = typer.Option(
        None,
        "--airshot-rule",
        case_sensitive=False,
        help="Rule deciding a victim was airborne",
    ),
    threshold: Optional[float] = typer.Option(
        None,
        "--threshold",
        min=0.0,
        help="Airtime in seconds required by the airtime rule",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (YAML, TOML or JSON)",
    ),
) -> None:
    """
    Analyse a recorded demo message log and display the game summary.
    """
    config = load_config(config_file)
    configure_logging(config.logging)
    if _verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    if airshot_rule is not None:
        config.analyser.airshot_rule = airshot_rule
    if threshold is not None:
        config.analyser.airtime_threshold_seconds = threshold

    console.print(f"\n[bold blue]DemoReel[/bold blue] - Analysing {log_path.name}...\n")

    try:
        summary = analyse_message_log(log_path, config.analyser)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error analysing log:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    _display_summary(summary)

    if output:
        summary_to_json(summary, output, indent=config.export.json_indent)
        console.print(f"[green]Summary written to {output}[/green]")
    if csv_path:
        export_players_csv(summary, csv_path, delimiter=config.export.csv_delimiter)
        console.print(f"[green]Players written to {csv_path}[/green]")


@app.command()
def show(
    summary_path: Path = typer.Argument(
        ...,
        help="Path to a stored game summary (JSON)",
        exists=True,
        dir_okay=False,
        resolve_path=True,
    ),
    players: Optional[List[int]] = typer.Option(
        None,
        "--player",
        "-p",
        help="Only highlights involving this user id (repeatable)",
    ),
    chat_search: str = typer.Option(
        "",
        "--chat",
        help="Regular expression matched against chat sender and text",
    ),
    no_kills: bool = typer.Option(False, "--no-kills", help="Hide the kill feed"),
    no_captures: bool = typer.Option(False, "--no-captures", help="Hide point captures"),
    no_chat: bool = typer.Option(False, "--no-chat", help="Hide chat"),
    no_connections: bool = typer.Option(False, "--no-connections", help="Hide connects and disconnects"),
    no_rounds: bool = typer.Option(False, "--no-rounds", help="Hide round starts and ends"),
    no_airshots: bool = typer.Option(False, "--no-airshots", help="Hide airshots"),
) -> None:
    """
    Show the highlight timeline of a stored game summary.
    """
    try:
        summary = load_summary(summary_path)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error loading summary:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    filters = HighlightFilters(
        player_ids=list(players or []),
        chat_search=chat_search,
        killfeed=not no_kills,
        captures=not no_captures,
        chat=not no_chat,
        connections=not no_connections,
        rounds=not no_rounds,
        airshots=not no_airshots,
    )

    try:
        highlights = filter_highlights(summary, filters)
    except re.error as e:
        console.print(f"[red]Invalid chat search:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    names = {player.user_id: player.name for player in summary.players}
    interval = summary.interval_per_tick

    table = Table(title=f"Timeline ({len(highlights)} of {len(summary.highlights)})")
    table.add_column("Tick", justify="right", style="dim")
    table.add_column("Time", justify="right")
    table.add_column("Type", style="cyan")
    table.add_column("Details")

    for highlight in highlights:
        seconds = highlight.tick * interval
        table.add_row(
            str(highlight.tick),
            f"{int(seconds // 60)}:{seconds % 60:05.2f}" if interval else "",
            highlight.event.tag,
            escape(_describe(highlight.event, names)),
        )
    console.print(table)


@app.command()
def info(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (YAML, TOML or JSON)",
    ),
) -> None:
    """
    Display information about DemoReel and the effective configuration.
    """
    import platform as plat

    console.print(f"\n[bold blue]DemoReel[/bold blue] v{__version__}\n")

    table = Table(show_header=False)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Python", plat.python_version())
    table.add_row("Platform", plat.system())

    for section, values in config_to_dict(load_config(config_file)).items():
        if isinstance(values, dict):
            for key, value in values.items():
                table.add_row(f"{section}.{key}", str(value))
        else:
            table.add_row(section, str(values))

    console.print(table)


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
