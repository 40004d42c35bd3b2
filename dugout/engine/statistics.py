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
"""Cosmetic match statistics.

These numbers are derived from the two strength snapshots and fresh random
draws only. They are not read from the event log: a side can finish with more
goals than shots on target, and possession does not influence which team gets
an event. Callers compose this function with the event loop.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict

from dugout.engine.config import ENGINE_CONFIG
from dugout.engine.random_source import RandomSource, roll_below
from dugout.engine.strength import TeamStrength
from dugout.utils.rounding import round_half_up


@dataclass(frozen=True)
class TeamSplit:
    """Home and away values for a single statistic.

    Parameters
    ----------
    home : int
        Value recorded for the home team.
    away : int
        Value recorded for the away team.
    """

    home: int
    away: int


@dataclass(frozen=True)
class MatchStatistics:
    """Aggregate statistics presented alongside a match result.

    Parameters
    ----------
    possession : TeamSplit
        Possession percentages; the two values always sum to 100.
    shots : TeamSplit
        Total shots per side.
    shots_on_target : TeamSplit
        Shots on target per side.
    fouls : TeamSplit
        Fouls committed per side.
    corners : TeamSplit
        Corners won per side.
    """

    possession: TeamSplit
    shots: TeamSplit
    shots_on_target: TeamSplit
    fouls: TeamSplit
    corners: TeamSplit

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        """Serialise into nested plain dictionaries.

        Returns
        -------
        Dict[str, Dict[str, int]]
            ``{"possession": {"home": ..., "away": ...}, ...}``.
        """
        return asdict(self)


def generate_statistics(home: TeamStrength, away: TeamStrength, rng: RandomSource) -> MatchStatistics:
    """Generate the statistics block for a finished match.

    Parameters
    ----------
    home : TeamStrength
        Home snapshot, including any home advantage already applied.
    away : TeamStrength
        Away snapshot.
    rng : RandomSource
        Source for the shot, foul, and corner draws.

    Returns
    -------
    MatchStatistics
        Possession proportional to overall strength share, shots from a random
        base plus attack, on-target shots at a fixed ratio, and independent
        foul and corner counts.
    """
    cfg = ENGINE_CONFIG.statistics

    total = home.overall + away.overall
    home_possession = round_half_up(home.overall / total * 100) if total else 50

    home_shots = roll_below(rng, cfg.shot_base_range) + home.attack / cfg.shot_attack_divisor
    away_shots = roll_below(rng, cfg.shot_base_range) + away.attack / cfg.shot_attack_divisor

    home_fouls = roll_below(rng, cfg.foul_range) + cfg.foul_min
    away_fouls = roll_below(rng, cfg.foul_range) + cfg.foul_min
    home_corners = roll_below(rng, cfg.corner_range) + cfg.corner_min
    away_corners = roll_below(rng, cfg.corner_range) + cfg.corner_min

    return MatchStatistics(
        possession=TeamSplit(home_possession, 100 - home_possession),
        shots=TeamSplit(round_half_up(home_shots), round_half_up(away_shots)),
        shots_on_target=TeamSplit(
            round_half_up(home_shots * cfg.on_target_ratio),
            round_half_up(away_shots * cfg.on_target_ratio),
        ),
        fouls=TeamSplit(home_fouls, away_fouls),
        corners=TeamSplit(home_corners, away_corners),
    )
