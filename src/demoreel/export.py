"""
Export Functionality for DemoReel

Writes and reads analysed GameSummaries:
- JSON (complete summary, round-trips through ``load_summary``)
- CSV (one row per player, scoreboard counters flattened into columns)
"""

import json
import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from demoreel.analysis.scoreboard import Scoreboard
from demoreel.core.schemas import GameSummary

logger = logging.getLogger(__name__)

PLAYER_COLUMNS = ["user_id", "name", "steam_id", "team", "classes"]


# ============================================================================
# JSON Export
# ============================================================================


def summary_to_json(
    summary: GameSummary,
    output_path: Optional[Path] = None,
    indent: Optional[int] = 2,
) -> str:
    """
    Export a game summary to JSON.

    Args:
        summary: The analysed summary
        output_path: Optional path to write the file
        indent: JSON indentation level

    Returns:
        JSON string
    """
    json_str = summary.to_json(indent=indent)

    if output_path:
        output_path.write_text(json_str, encoding="utf-8")
        logger.info(f"Exported JSON to: {output_path}")

    return json_str


def load_summary(path: Path) -> GameSummary:
    """
    Load a summary previously written by ``summary_to_json``.

    Raises:
        OSError: If the file can't be read
        ValueError: If the file is not a valid summary
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{path} is not valid JSON: {e.msg}") from e
    if not isinstance(data, dict):
        raise ValueError(f"{path} does not contain a game summary")
    try:
        return GameSummary.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"{path} does not contain a valid game summary: {e}") from e


# ============================================================================
# Tabular Export
# ============================================================================


def players_dataframe(summary: GameSummary) -> pd.DataFrame:
    """
    Build a per-player table.

    Classes are joined with ";" (most played first). Every scoreboard
    counter gets its own column, zero when absent.
    """
    counters = Scoreboard.counter_names()
    rows = []
    for player in summary.players:
        row = {
            "user_id": player.user_id,
            "name": player.name,
            "steam_id": str(player.steam_id),
            "team": player.team.label,
            "classes": ";".join(c.label for c in player.classes),
        }
        for counter in counters:
            row[counter] = player.scoreboard.get(counter, 0)
        rows.append(row)

    df = pd.DataFrame(rows, columns=PLAYER_COLUMNS + counters)
    if not df.empty:
        df = df.sort_values("user_id", kind="stable").reset_index(drop=True)
    return df


def export_players_csv(
    summary: GameSummary,
    output_path: Optional[Path] = None,
    delimiter: str = ",",
) -> str:
    """
    Export the per-player table to CSV.

    Args:
        summary: The analysed summary
        output_path: Optional path to write the file
        delimiter: CSV delimiter character

    Returns:
        CSV string
    """
    csv_str = players_dataframe(summary).to_csv(index=False, sep=delimiter)

    if output_path:
        output_path.write_text(csv_str, encoding="utf-8")
        logger.info(f"Exported CSV to: {output_path}")

    return csv_str
