"""
Message Log Replay

Drives a GameDetailsAnalyser from a recorded message log: a JSON-lines
file in which each line is one unit produced by the demo parser.

    {"kind": "header", "server": "my server"}
    {"kind": "data_tables", "classes": ["CTFPlayer", "CTFTeam", ...]}
    {"kind": "string_entry", "table": "userinfo", "index": 0, "text": "...", "extra": "<hex>"}
    {"kind": "message", "tick": 120, "message": {"type": "game_event", ...}}

Lines are applied strictly in file order. Message types the analyser
has no interest in are skipped before decoding.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

from demoreel.analysis.analyser import GameDetailsAnalyser
from demoreel.core.config import AnalyserConfig
from demoreel.core.messages import MessageType, message_from_dict
from demoreel.core.schemas import GameSummary
from demoreel.core.utils import PerformanceMonitor, safe_int

logger = logging.getLogger(__name__)

_MESSAGE_TYPES = {t.value: t for t in MessageType}


def iter_message_log(lines: Iterable[str]) -> Iterator[tuple[int, dict[str, Any]]]:
    """
    Parse JSON lines, skipping blanks and ``#`` comments.

    Yields:
        (line_number, record) pairs

    Raises:
        ValueError: On a line that is not a JSON object
    """
    for line_number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        try:
            record = json.loads(stripped)
        except json.JSONDecodeError as e:
            raise ValueError(f"line {line_number}: invalid JSON ({e.msg})") from e
        if not isinstance(record, dict):
            raise ValueError(f"line {line_number}: expected an object")
        yield line_number, record


def _decode_extra(value: Any, line_number: int) -> bytes | None:
    if value is None or value == "":
        return None
    try:
        return bytes.fromhex(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"line {line_number}: string entry extra data is not hex") from e


def feed_record(analyser: GameDetailsAnalyser, record: dict[str, Any], line_number: int = 0) -> None:
    """Apply one message log record to an analyser."""
    kind = record.get("kind")
    if kind == "header":
        analyser.on_header(str(record.get("server") or ""))
    elif kind == "data_tables":
        classes = record.get("classes", [])
        if not isinstance(classes, list):
            raise ValueError(f"line {line_number}: data_tables classes must be a list")
        analyser.on_data_tables([str(name) for name in classes])
    elif kind == "string_entry":
        analyser.on_string_table_entry(
            str(record.get("table", "")),
            safe_int(record.get("index")),
            record.get("text"),
            _decode_extra(record.get("extra"), line_number),
        )
    elif kind == "message":
        raw = record.get("message")
        if not isinstance(raw, dict):
            raise ValueError(f"line {line_number}: message record has no message object")
        message_type = _MESSAGE_TYPES.get(str(raw.get("type")), MessageType.OTHER)
        if not analyser.handles(message_type):
            return
        try:
            message = message_from_dict(raw)
        except ValueError as e:
            raise ValueError(f"line {line_number}: {e}") from e
        if message is not None:
            analyser.on_message(message, safe_int(record.get("tick")))
    else:
        raise ValueError(f"line {line_number}: unknown record kind {kind!r}")


def analyse_lines(lines: Iterable[str], config: AnalyserConfig | None = None) -> GameSummary:
    """Run an analyser over message log lines and return its summary."""
    analyser = GameDetailsAnalyser(config)
    for line_number, record in iter_message_log(lines):
        feed_record(analyser, record, line_number)
    return analyser.finalize()


def analyse_message_log(path: Path, config: AnalyserConfig | None = None) -> GameSummary:
    """
    Analyse a recorded message log file.

    Args:
        path: Path to the JSON-lines message log
        config: Analyser configuration (defaults if omitted)

    Returns:
        The GameSummary

    Raises:
        OSError: If the file can't be read
        ValueError: If a line is malformed
    """
    with PerformanceMonitor(f"Analysing {path.name}"):
        with open(path, encoding="utf-8") as f:
            summary = analyse_lines(f, config)
    logger.info(
        f"{path.name}: {len(summary.players)} players, {len(summary.highlights)} highlights, "
        f"score RED {summary.red_team_score} - BLU {summary.blue_team_score}"
    )
    return summary
