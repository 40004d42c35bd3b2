# Copyright (C) 2025 Richard Owen
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""Tests for utility modules (generator, roster, debug, rounding)."""

import json
import random
from collections import Counter
from datetime import date
from pathlib import Path

import pytest

from dugout.engine.match_engine import MatchEngine
from dugout.models.player import AttributeDelta
from dugout.models.team import Team
from dugout.utils.debug import MatchDebugger
from dugout.utils.generator import generate_random_player, generate_team
from dugout.utils.roster import (
    load_teams_from_json,
    player_from_dict,
    save_teams_to_json,
    team_to_dict,
)
from dugout.utils.rounding import round_half_up

TODAY = date(2026, 10, 19)
DATA_FILE = Path(__file__).resolve().parents[1] / "data" / "players.json"


class TestGenerator:
    """Tests for generator utility functions."""

    def test_generate_random_player(self) -> None:
        """Test generating a random player."""
        player = generate_random_player(id=1, position="ATT", rng=random.Random(3), today=TODAY)
        assert player.player_id == 1
        assert player.position == "ATT"
        assert len(player.name) > 0
        for value in player.attributes.as_dict().values():
            assert 10 <= value <= 95
        assert 70 <= player.potential <= 94
        assert 17 <= player.age(TODAY) <= 34

    def test_generate_team_shape(self) -> None:
        """Test generating a complete squad."""
        team = generate_team(id=1, name="Test FC", rng=random.Random(1), today=TODAY)
        assert team.team_id == 1
        assert team.name == "Test FC"
        assert len(team.players) == 17
        assert Counter(p.position for p in team.players) == {"GK": 2, "DEF": 5, "MID": 6, "ATT": 4}
        assert [p.player_id for p in team.players] == list(range(1, 18))

    def test_generate_team_is_reproducible(self) -> None:
        first = generate_team(id=1, name="A", rng=random.Random(42), today=TODAY)
        second = generate_team(id=1, name="A", rng=random.Random(42), today=TODAY)
        assert team_to_dict(first) == team_to_dict(second)

    def test_starting_player_id_offsets(self) -> None:
        team = generate_team(id=2, name="B", starting_player_id=100, rng=random.Random(0), today=TODAY)
        assert team.players[0].player_id == 100
        assert team.players[-1].player_id == 116


class TestRoster:
    """Tests for roster loading utility functions."""

    def test_player_from_dict(self) -> None:
        """Test loading a player from dictionary."""
        player = player_from_dict(
            {
                "id": 1,
                "name": "Test Player",
                "position": "DEF",
                "birth_date": "1999-07-02",
                "potential": 86,
                "fatigue": 12,
                "attributes": {"speed": 71, "technique": 74, "physical": 85, "mental": 80, "goalkeeping": 20},
            }
        )
        assert player.player_id == 1
        assert player.name == "Test Player"
        assert player.position == "DEF"
        assert player.birth_date == date(1999, 7, 2)
        assert player.potential == 86
        assert player.fatigue == 12
        assert player.attributes.physical == 85

    def test_player_from_dict_defaults(self) -> None:
        """Missing values fall back to middling defaults."""
        player = player_from_dict({"id": 5, "age": 30}, today=TODAY)
        assert player.name == "player_5"
        assert player.position == "MID"
        assert player.age(TODAY) == 30
        assert player.attributes.as_dict() == {
            "speed": 50,
            "technique": 50,
            "physical": 50,
            "mental": 50,
            "goalkeeping": 50,
        }

    def test_load_teams_from_json(self) -> None:
        """Load the bundled fixture squads."""
        home, away = load_teams_from_json(str(DATA_FILE))
        assert home.name == "Harbour City"
        assert away.name == "Northbridge Rovers"
        assert len(home.players) == 13
        assert len(away.players) == 12
        injured = home.get_player(12)
        assert injured is not None and injured.injury_type == "moderate"

    def test_save_and_reload(self, tmp_path: Path) -> None:
        home, away = load_teams_from_json(str(DATA_FILE))
        target = tmp_path / "nested" / "players.json"
        save_teams_to_json(str(target), home, away)

        reloaded_home, reloaded_away = load_teams_from_json(str(target))
        assert team_to_dict(reloaded_home) == team_to_dict(home)
        assert team_to_dict(reloaded_away) == team_to_dict(away)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_teams_from_json(str(tmp_path / "absent.json"))

    def test_missing_section(self, tmp_path: Path) -> None:
        path = tmp_path / "half.json"
        path.write_text(json.dumps({"home": {"id": 1, "name": "Solo", "players": []}}), encoding="utf-8")
        with pytest.raises(KeyError):
            load_teams_from_json(str(path))


class TestDebugger:
    """Tests for the match debugger."""

    def test_log_lines_written(self, tmp_path: Path) -> None:
        debugger = MatchDebugger(str(tmp_path))
        debugger.log_match_event(12, "goal", "GOAL! Someone scores")
        debugger.log_development(7, 88, AttributeDelta(speed=70))
        debugger.log_error("roster", "empty squad")
        debugger.close()

        contents = debugger.log_path.read_text(encoding="utf-8")
        assert "MATCH_EVENT: Minute: 12 | Event: goal" in contents
        assert "DEVELOPMENT: Player 7 | Performance: 88 | Changes: speed=70" in contents
        assert "ERROR: Type: roster" in contents

    def test_recent_events_are_numbered(self, tmp_path: Path) -> None:
        debugger = MatchDebugger(str(tmp_path))
        for minute in range(1, 6):
            debugger.log_match_event(minute, "card", f"card {minute}")
        recent = debugger.get_recent_events(limit=2)
        debugger.close()
        assert len(recent) == 2
        assert recent[0].startswith("00004 ")
        assert recent[1].startswith("00005 ")

    def test_engine_logs_strength_and_score(self, tmp_path: Path) -> None:
        debugger = MatchDebugger(str(tmp_path))
        engine = MatchEngine(rng=random.Random(5), debugger=debugger)
        engine.simulate_match(Team(1, "Home"), Team(2, "Away"))
        debugger.close()

        contents = debugger.log_path.read_text(encoding="utf-8")
        assert "TEAM_STRENGTH: Home | ATT 50 | MID 50 | DEF 50 | GK 50 | Overall 50 (adjusted 55)" in contents
        assert "STATISTICS: possession 52-48" in contents
        assert "FINAL_SCORE: Home" in contents


def test_round_half_up() -> None:
    assert round_half_up(58.75) == 59
    assert round_half_up(58.5) == 59
    assert round_half_up(58.49) == 58
    assert round_half_up(0.5) == 1
