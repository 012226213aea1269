import json
import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
sys.path.append(
    os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "scripts"))
)

import score_game


def test_prints_summary(capsys):
    assert score_game.main(["10", "10", "1", "1"]) == 0
    summary = json.loads(capsys.readouterr().out)
    assert summary["total"] == 35
    assert summary["frames"][:3] == [[10], [10], [1, 1]]


def test_invalid_roll_exits_with_error(capsys):
    assert score_game.main(["6", "6"]) == 2
    assert "Invalid roll #2" in capsys.readouterr().err


def test_flags_select_rules(capsys):
    rolls = ["1"] * 18 + ["10", "10", "10"]
    assert score_game.main(rolls + ["--legacy-tenth"]) == 0
    assert json.loads(capsys.readouterr().out)["total"] == 38

    assert score_game.main(["6", "6", "--no-overflow-check"]) == 0
    assert json.loads(capsys.readouterr().out)["total"] == 12
