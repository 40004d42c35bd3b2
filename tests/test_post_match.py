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
"""Tests for post-match roster bookkeeping."""

import random
from datetime import date
from pathlib import Path

import pytest

from dugout.engine.post_match import PlayerMatchUpdate, PostMatchProcessor
from dugout.engine.random_source import ScriptedRandom
from dugout.models.player import AttributeDelta, Player, PlayerAttributes
from dugout.models.team import Team
from dugout.utils.debug import MatchDebugger

TODAY = date(2026, 10, 19)


def _player(player_id: int, age: int = 27, fatigue: int = 0) -> Player:
    return Player(
        player_id=player_id,
        name=f"Player {player_id}",
        position="MID",
        birth_date=date(TODAY.year - age, 1, 1),
        attributes=PlayerAttributes(60, 60, 60, 60, 60),
        potential=90,
        fatigue=fatigue,
    )


class TestProcessPlayer:
    def test_veteran_fatigue_is_capped(self) -> None:
        player = _player(1, age=40, fatigue=80)
        rng = ScriptedRandom([0.5, 0.5, 0.99])

        update = PostMatchProcessor(rng=rng).process_player(player, today=TODAY)

        assert update == PlayerMatchUpdate(
            player_id=1, performance=51, improvements=AttributeDelta(), games_played=1, fatigue=100
        )
        assert rng.consumed == 3

    def test_development_draws_sit_between_performance_and_fatigue(self) -> None:
        player = _player(1, age=20)
        # performance, gate, speed roll, speed magnitude, three failed rolls, fatigue
        rng = ScriptedRandom([0.99, 0.0, 0.0, 0.99, 0.99, 0.99, 0.99, 0.0])

        update = PostMatchProcessor(rng=rng).process_player(player, today=TODAY)

        assert update.performance == 100
        assert update.improvements == AttributeDelta(speed=63)
        assert update.fatigue == 10


class TestProcess:
    def test_home_roster_first_and_inputs_untouched(self) -> None:
        home = Team(1, "Home", [_player(1), _player(2)])
        away = Team(2, "Away", [_player(101, fatigue=95)])

        updates = PostMatchProcessor(rng=random.Random(4)).process(home, away, today=TODAY)

        assert [u.player_id for u in updates] == [1, 2, 101]
        assert all(u.games_played == 1 for u in updates)
        assert all(10 <= u.fatigue <= 100 for u in updates)
        assert updates[2].fatigue == 100
        assert all(1 <= u.performance <= 100 for u in updates)
        assert home.players[0].games_played == 0
        assert away.players[0].fatigue == 95

    def test_apply_writes_update(self) -> None:
        player = _player(7)
        update = PlayerMatchUpdate(7, 88, AttributeDelta(mental=62), games_played=1, fatigue=24)
        update.apply(player)
        assert player.attributes.mental == 62
        assert player.games_played == 1
        assert player.fatigue == 24

    def test_apply_rejects_other_player(self) -> None:
        update = PlayerMatchUpdate(7, 88, AttributeDelta(), games_played=1, fatigue=24)
        with pytest.raises(ValueError):
            update.apply(_player(8))

    def test_development_is_logged(self, tmp_path: Path) -> None:
        debugger = MatchDebugger(str(tmp_path))
        PostMatchProcessor(rng=random.Random(0), debugger=debugger).process(
            Team(1, "Home", [_player(1)]), Team(2, "Away", [_player(101)]), today=TODAY
        )
        debugger.close()
        contents = debugger.log_path.read_text(encoding="utf-8")
        assert "DEVELOPMENT: Player 1 |" in contents
        assert "DEVELOPMENT: Player 101 |" in contents
