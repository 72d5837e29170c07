"""Shared fixtures: analysers with two registered players."""

import pytest
from helpers import ALICE, BOB, SERVER_CLASSES, user_info

from demoreel.analysis.analyser import GameDetailsAnalyser
from demoreel.core.config import AnalyserConfig
from demoreel.core.constants import USERINFO_TABLE


def _register(analyser: GameDetailsAnalyser) -> GameDetailsAnalyser:
    analyser.on_data_tables(SERVER_CLASSES)
    for index, name, user_id, steam3 in (ALICE, BOB):
        analyser.on_string_table_entry(USERINFO_TABLE, index, name, user_info(name, user_id, steam3))
    return analyser


@pytest.fixture
def stv_analyser():
    """STV demo analyser with Alice (entity 1, user 10) and Bob (entity 2, user 20)."""
    analyser = GameDetailsAnalyser()
    analyser.on_header("")
    return _register(analyser)


@pytest.fixture
def pov_analyser():
    """POV demo analyser recorded by Alice."""
    analyser = GameDetailsAnalyser(AnalyserConfig())
    analyser.on_header("Some Community Server")
    return _register(analyser)
