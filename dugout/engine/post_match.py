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
"""Roster bookkeeping once a match has been simulated."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from dugout.engine.config import ENGINE_CONFIG
from dugout.engine.development import PlayerDevelopment
from dugout.engine.random_source import RandomSource, default_source, roll_below
from dugout.models.player import AttributeDelta, Player
from dugout.models.team import Team
from dugout.utils.debug import MatchDebugger


@dataclass(frozen=True)
class PlayerMatchUpdate:
    """Changes owed to one player after a match.

    Parameters
    ----------
    player_id : int
        Player the update belongs to.
    performance : int
        Performance score drawn for the match.
    improvements : AttributeDelta
        Attribute gains from development; may be empty.
    games_played : int
        New games-played count.
    fatigue : int
        New fatigue level, capped at the configured maximum.
    """

    player_id: int
    performance: int
    improvements: AttributeDelta
    games_played: int
    fatigue: int

    def apply(self, player: Player) -> None:
        """Write the update onto ``player`` in-place.

        Parameters
        ----------
        player : Player
            Player whose id matches :attr:`player_id`.
        """
        if player.player_id != self.player_id:
            raise ValueError(f"Update for player {self.player_id} applied to player {player.player_id}")
        player.apply_delta(self.improvements)
        player.games_played = self.games_played
        player.fatigue = self.fatigue


class PostMatchProcessor:
    """Work out development, fatigue, and appearance updates for both squads.

    Parameters
    ----------
    rng : RandomSource | None, optional
        Source of the performance, development, and fatigue draws.
    debugger : MatchDebugger | None, optional
        Optional logging helper that records each player's development.
    """

    def __init__(self, rng: Optional[RandomSource] = None, debugger: Optional[MatchDebugger] = None) -> None:
        """Bind the processor to a random source and optional debugger.

        Parameters
        ----------
        rng : RandomSource | None
            Source of every random draw.
        debugger : MatchDebugger | None
            Optional logging helper.
        """
        self.rng: RandomSource = rng if rng is not None else default_source()
        self.development = PlayerDevelopment(self.rng)
        self.debugger = debugger

    def process(self, home_team: Team, away_team: Team, today: Optional[date] = None) -> List[PlayerMatchUpdate]:
        """Compute updates for every rostered player of both teams.

        Parameters
        ----------
        home_team : Team
            Home squad.
        away_team : Team
            Away squad.
        today : date | None
            Day used to compute player ages.

        Returns
        -------
        List[PlayerMatchUpdate]
            One update per player, home roster first. Inputs are not modified.
        """
        return [self.process_player(p, today) for p in [*home_team.players, *away_team.players]]

    def process_player(self, player: Player, today: Optional[date] = None) -> PlayerMatchUpdate:
        """Compute the update for a single player.

        Parameters
        ----------
        player : Player
            Player who was rostered for the match.
        today : date | None
            Day used to compute the player's age.

        Returns
        -------
        PlayerMatchUpdate
            Performance, development delta, appearance count, and fatigue.
        """
        cfg = ENGINE_CONFIG.post_match
        performance = roll_below(self.rng, cfg.performance_range) + 1
        improvements = self.development.calculate_improvement(player, performance, today)
        fatigue_gain = roll_below(self.rng, cfg.fatigue_gain_range) + cfg.fatigue_gain_min
        fatigue = min(ENGINE_CONFIG.availability.max_fatigue, player.fatigue + fatigue_gain)

        if self.debugger:
            self.debugger.log_development(player.player_id, performance, improvements)

        return PlayerMatchUpdate(
            player_id=player.player_id,
            performance=performance,
            improvements=improvements,
            games_played=player.games_played + 1,
            fatigue=fatigue,
        )
