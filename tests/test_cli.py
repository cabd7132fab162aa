"""
Tests for the self-play CLI.
"""

import pytest

from play_senet import main, simulate_game
from senet.settings import EngineSettings


@pytest.mark.parametrize("agent_type", ["random", "greedy"])
def test_simulate_game_runs_to_cap(agent_type):
    settings = EngineSettings(_env_file=None)
    session = simulate_game(agent_type=agent_type, seed=5, verbose=False, settings=settings, max_moves=120)
    assert session.move_count == 120
    assert session.is_over


def test_main_prints_summary(monkeypatch, capsys):
    monkeypatch.setattr(
        "sys.argv", ["play_senet.py", "--seed", "3", "--max-moves", "30", "--agent", "random"]
    )
    main()
    out = capsys.readouterr().out
    assert "GAME STOPPED" in out
    assert "Total Moves: 30" in out
