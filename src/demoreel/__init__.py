"""
DemoReel - TF2 Demo Game Details Analyser

Turns the decoded message stream of a Team Fortress 2 demo into a game
summary: per-player scoreboards and classes, team scores, and a timeline
of highlights (kills, airshots, captures, rounds, chat, pauses).

Usage:
    from demoreel import analyse_message_log

    summary = analyse_message_log(Path("match.jsonl"))

    for player in summary.players:
        print(f"{player.name}: {player.scoreboard.get('kills', 0)} kills")
"""

__version__ = "0.1.0"
__author__ = "DemoReel Contributors"


def __getattr__(name):
    """Lazy import for the public entry points."""
    if name == "GameDetailsAnalyser":
        from demoreel.analysis.analyser import GameDetailsAnalyser
        return GameDetailsAnalyser
    elif name == "analyse_messages":
        from demoreel.analysis.analyser import analyse_messages
        return analyse_messages
    elif name == "analyse_message_log":
        from demoreel.pipeline.replay import analyse_message_log
        return analyse_message_log
    elif name == "GameSummary":
        from demoreel.core.schemas import GameSummary
        return GameSummary
    elif name == "AnalyserConfig":
        from demoreel.core.config import AnalyserConfig
        return AnalyserConfig
    elif name == "AirshotRule":
        from demoreel.core.constants import AirshotRule
        return AirshotRule
    elif name == "HighlightFilters":
        from demoreel.analysis.timeline import HighlightFilters
        return HighlightFilters
    elif name == "filter_highlights":
        from demoreel.analysis.timeline import filter_highlights
        return filter_highlights
    elif name == "summary_to_json":
        from demoreel.export import summary_to_json
        return summary_to_json
    elif name == "load_summary":
        from demoreel.export import load_summary
        return load_summary
    raise AttributeError(f"module 'demoreel' has no attribute '{name}'")


__all__ = [
    # Version
    "__version__",
    # Analysis
    "GameDetailsAnalyser",
    "analyse_messages",
    "analyse_message_log",
    "GameSummary",
    "AnalyserConfig",
    "AirshotRule",
    "HighlightFilters",
    "filter_highlights",
    # Export
    "summary_to_json",
    "load_summary",
]
