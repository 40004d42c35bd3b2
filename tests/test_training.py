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
"""Tests for the training system."""

from datetime import date

import pytest

from dugout.engine.training import TrainingSession, TrainingSystem
from dugout.models.player import AttributeDelta, Player, PlayerAttributes
from dugout.models.team import Team

TODAY = date(2026, 10, 19)


def _player(player_id: int = 1, age: int = 27, position: str = "MID", value: int = 60, potential: int = 90) -> Player:
    return Player(
        player_id=player_id,
        name=f"Player {player_id}",
        position=position,
        birth_date=date(TODAY.year - age, 1, 1),
        attributes=PlayerAttributes(value, value, value, value, value),
        potential=potential,
    )


class TestTrainingSession:
    """Validation of session descriptions."""

    def test_defaults_to_one_week(self) -> None:
        session = TrainingSession("speed", 3, [1, 2])
        assert session.duration_days == 7

    @pytest.mark.parametrize(
        ("kwargs", "message"),
        [
            ({"training_type": "dribbling", "intensity": 3, "player_ids": [1]}, "training type"),
            ({"training_type": "speed", "intensity": 0, "player_ids": [1]}, "intensity"),
            ({"training_type": "speed", "intensity": 6, "player_ids": [1]}, "intensity"),
            ({"training_type": "speed", "intensity": 3, "player_ids": []}, "participant"),
            ({"training_type": "speed", "intensity": 3, "player_ids": [1], "duration_days": 0}, "duration_days"),
        ],
    )
    def test_invalid_sessions(self, kwargs: dict, message: str) -> None:
        with pytest.raises(ValueError, match=message):
            TrainingSession(**kwargs)


class TestApplyTraining:
    """Deterministic gains, fatigue, and injury risk."""

    def test_young_player_speed(self) -> None:
        outcome = TrainingSystem().apply_training(_player(age=20), "speed", 3, today=TODAY)
        assert outcome.improvements == AttributeDelta(speed=63)
        assert outcome.fatigue_increase == 15.0
        assert outcome.injury_risk == pytest.approx(0.09)

    def test_mental_bonus_and_reduced_fatigue(self) -> None:
        outcome = TrainingSystem().apply_training(_player(age=27), "mental", 2, today=TODAY)
        assert outcome.improvements == AttributeDelta(mental=62)
        assert outcome.fatigue_increase == 5.0
        assert outcome.injury_risk == pytest.approx(0.04)

    def test_two_week_physical_block(self) -> None:
        outcome = TrainingSystem().apply_training(_player(age=27), "physical", 1, duration_days=14, today=TODAY)
        assert outcome.improvements == AttributeDelta(physical=62)
        assert outcome.injury_risk == pytest.approx(0.04)

    def test_veteran_light_session_gains_nothing(self) -> None:
        outcome = TrainingSystem().apply_training(_player(age=33), "technique", 1, today=TODAY)
        assert outcome.improvements.is_empty
        assert outcome.fatigue_increase == pytest.approx(4.0)

    def test_gain_clamped_to_potential(self) -> None:
        player = _player(age=20, value=89, potential=90)
        outcome = TrainingSystem().apply_training(player, "speed", 5, today=TODAY)
        assert outcome.improvements == AttributeDelta(speed=90)

    def test_attribute_at_potential_not_in_delta(self) -> None:
        player = _player(age=20, value=90, potential=90)
        outcome = TrainingSystem().apply_training(player, "speed", 5, today=TODAY)
        assert outcome.improvements.is_empty

    def test_goalkeeping_only_for_goalkeepers(self) -> None:
        system = TrainingSystem()
        outfield = system.apply_training(_player(age=27), "goalkeeping", 4, today=TODAY)
        keeper = system.apply_training(_player(age=27, position="GK"), "goalkeeping", 4, today=TODAY)
        assert outfield.improvements.is_empty
        assert keeper.improvements == AttributeDelta(goalkeeping=64)

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="training type"):
            TrainingSystem().apply_training(_player(), "dribbling", 3, today=TODAY)

    @pytest.mark.parametrize(("age", "expected"), [(18, 1.2), (24, 1.2), (25, 1.0), (30, 1.0), (31, 0.8)])
    def test_age_multiplier(self, age: int, expected: float) -> None:
        assert TrainingSystem().age_multiplier(age) == expected


class TestRunSession:
    def test_outcomes_keyed_by_player(self) -> None:
        team = Team(1, "Home", [_player(1, age=20), _player(2, age=27), _player(3, age=33)])
        session = TrainingSession("technique", 2, [3, 1, 99])

        outcomes = TrainingSystem().run_session(session, team, today=TODAY)

        assert list(outcomes) == [3, 1]
        assert outcomes[1].improvements == AttributeDelta(technique=62)
        assert outcomes[3].improvements == AttributeDelta(technique=61)
        # training never mutates the squad
        assert team.get_player(1).attributes.technique == 60
