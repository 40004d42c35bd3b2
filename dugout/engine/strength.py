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
"""Team strength aggregation.

A roster is reduced to four positional scores and an overall score. Only
available players (fit, and below the fatigue limit) are counted; any position
group left empty scores the neutral baseline instead of zero.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Sequence

from dugout.engine.config import ENGINE_CONFIG
from dugout.models.player import Player
from dugout.utils.rounding import round_half_up


@dataclass(frozen=True)
class TeamStrength:
    """Aggregated strength snapshot for one team.

    Parameters
    ----------
    attack : int
        Mean of speed and technique across available attackers.
    midfield : int
        Mean of technique and mental across available midfielders.
    defense : int
        Mean of physical and mental across available defenders.
    goalkeeping : int
        Mean goalkeeping across available goalkeepers.
    overall : int
        Unweighted mean of the four positional scores, rounded half-up.
    """

    attack: int
    midfield: int
    defense: int
    goalkeeping: int
    overall: int

    def with_home_advantage(self, bonus: int) -> TeamStrength:
        """Return a copy whose overall score includes a home bonus.

        Parameters
        ----------
        bonus : int
            Points added to ``overall``. Positional scores are left untouched.

        Returns
        -------
        TeamStrength
            Adjusted snapshot.
        """
        return replace(self, overall=self.overall + bonus)


def calculate_position_strength(players: Sequence[Player], attributes: Sequence[str]) -> int:
    """Score one position group.

    Parameters
    ----------
    players : Sequence[Player]
        Available players registered in the group.
    attributes : Sequence[str]
        Attribute names averaged per player.

    Returns
    -------
    int
        Mean of the per-player attribute means, rounded half-up, or the neutral
        strength when ``players`` is empty.
    """
    if not players:
        return ENGINE_CONFIG.strength.neutral_strength

    total = 0.0
    for player in players:
        total += sum(getattr(player.attributes, attr) for attr in attributes) / len(attributes)
    return round_half_up(total / len(players))


def calculate_team_strength(players: Iterable[Player]) -> TeamStrength:
    """Aggregate a roster into a :class:`TeamStrength` snapshot.

    Parameters
    ----------
    players : Iterable[Player]
        Full roster; unavailable players are filtered out here.

    Returns
    -------
    TeamStrength
        Positional and overall scores. An empty or fully unavailable roster
        yields the neutral strength everywhere.
    """
    cfg = ENGINE_CONFIG.strength
    available = [p for p in players if p.is_available]

    scores = {}
    for position, attributes in cfg.position_attributes.items():
        group = [p for p in available if p.position == position]
        scores[position] = calculate_position_strength(group, attributes)

    attack = scores["ATT"]
    midfield = scores["MID"]
    defense = scores["DEF"]
    goalkeeping = scores["GK"]
    overall = round_half_up((attack + midfield + defense + goalkeeping) / 4)

    return TeamStrength(
        attack=attack,
        midfield=midfield,
        defense=defense,
        goalkeeping=goalkeeping,
        overall=overall,
    )
