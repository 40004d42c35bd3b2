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
"""Tests for team strength aggregation."""

from datetime import date
from pathlib import Path

from dugout.engine.strength import TeamStrength, calculate_position_strength, calculate_team_strength
from dugout.models.player import Player, PlayerAttributes
from dugout.utils.roster import load_teams_from_json

DATA_FILE = Path(__file__).resolve().parents[1] / "data" / "players.json"


def _player(player_id: int, position: str, speed: int = 60, technique: int = 60, physical: int = 60,
            mental: int = 60, goalkeeping: int = 60, **kwargs) -> Player:
    return Player(
        player_id=player_id,
        name=f"Player {player_id}",
        position=position,
        birth_date=date(1998, 1, 1),
        attributes=PlayerAttributes(speed, technique, physical, mental, goalkeeping),
        potential=95,
        **kwargs,
    )


class TestNeutralStrength:
    """Empty groups fall back to the neutral score."""

    def test_empty_roster(self) -> None:
        assert calculate_team_strength([]) == TeamStrength(50, 50, 50, 50, 50)

    def test_fully_unavailable_roster(self) -> None:
        roster = [
            _player(1, "ATT", injury_days=3, injury_type="light"),
            _player(2, "MID", fatigue=90),
            _player(3, "GK", fatigue=100),
        ]
        assert calculate_team_strength(roster) == TeamStrength(50, 50, 50, 50, 50)

    def test_empty_group_helper(self) -> None:
        assert calculate_position_strength([], ("speed", "technique")) == 50


class TestPositionalScores:
    """Checks of the positional formulas."""

    def test_single_attacker_rounds_half_up(self) -> None:
        strength = calculate_team_strength([_player(1, "ATT", speed=90, technique=80)])
        assert strength.attack == 85
        assert (strength.midfield, strength.defense, strength.goalkeeping) == (50, 50, 50)
        # (85 + 50 + 50 + 50) / 4 == 58.75
        assert strength.overall == 59

    def test_each_group_uses_its_attributes(self) -> None:
        roster = [
            _player(1, "ATT", speed=80, technique=70),
            _player(2, "MID", technique=90, mental=70),
            _player(3, "DEF", physical=66, mental=60),
            _player(4, "GK", goalkeeping=77),
        ]
        strength = calculate_team_strength(roster)
        assert strength == TeamStrength(attack=75, midfield=80, defense=63, goalkeeping=77, overall=74)

    def test_group_mean_of_player_means(self) -> None:
        players = [_player(1, "ATT", speed=81, technique=80), _player(2, "ATT", speed=80, technique=80)]
        # player means 80.5 and 80.0, group mean 80.25
        assert calculate_position_strength(players, ("speed", "technique")) == 80

    def test_fatigue_limit_is_exclusive(self) -> None:
        tired = _player(1, "ATT", speed=90, technique=90, fatigue=89)
        exhausted = _player(2, "ATT", speed=20, technique=20, fatigue=90)
        assert calculate_team_strength([tired, exhausted]).attack == 90


class TestAggregatorProperties:
    def test_idempotent(self) -> None:
        home, _ = load_teams_from_json(str(DATA_FILE))
        assert calculate_team_strength(home.players) == calculate_team_strength(home.players)

    def test_scores_within_scale(self) -> None:
        home, away = load_teams_from_json(str(DATA_FILE))
        for team in (home, away):
            strength = calculate_team_strength(team.players)
            for value in (strength.attack, strength.midfield, strength.defense, strength.goalkeeping, strength.overall):
                assert 0 <= value <= 100

    def test_fixture_squads(self) -> None:
        home, away = load_teams_from_json(str(DATA_FILE))
        assert calculate_team_strength(home.players) == TeamStrength(87, 83, 82, 86, 85)
        assert calculate_team_strength(away.players) == TeamStrength(85, 81, 81, 79, 82)

    def test_home_advantage_only_touches_overall(self) -> None:
        base = TeamStrength(70, 71, 72, 73, 72)
        adjusted = base.with_home_advantage(5)
        assert adjusted == TeamStrength(70, 71, 72, 73, 77)
        assert base.overall == 72
