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
"""Post-match player development.

After a match every participating player gets one chance to improve. Age decides
how likely any improvement is at all; the match performance score sizes the
gain; each attribute then rolls independently. Nothing here mutates a player:
the caller receives an :class:`~dugout.models.player.AttributeDelta` and decides
how to persist it.
"""

from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional, Tuple

from dugout.engine.config import ENGINE_CONFIG
from dugout.engine.random_source import RandomSource, default_source, roll_below
from dugout.models.player import AttributeDelta, Player


def improvement_probability(age: int) -> float:
    """Return the chance that a player of ``age`` improves after a match.

    Parameters
    ----------
    age : int
        Age in whole years.

    Returns
    -------
    float
        0.7 under 18, 0.5 for 18-24, 0.4 for 25-29, 0.2 for 30-34, 0.1 beyond.
    """
    cfg = ENGINE_CONFIG.development
    for limit, probability in cfg.age_bands:
        if age < limit:
            return probability
    return cfg.veteran_probability


def improvement_cap(performance: int) -> int:
    """Return the largest gain a single attribute may receive.

    Parameters
    ----------
    performance : int
        Match performance score, ``1``-``100``.

    Returns
    -------
    int
        ``min(3, performance // 20)``.
    """
    cfg = ENGINE_CONFIG.development
    return min(cfg.max_improvement, performance // cfg.performance_step)


class PlayerDevelopment:
    """Compute post-match attribute improvements.

    Parameters
    ----------
    rng : RandomSource | None, optional
        Source of every random draw; a fresh unseeded generator when omitted.
    """

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        """Bind the model to a random source.

        Parameters
        ----------
        rng : RandomSource | None
            Source of every random draw.
        """
        self.rng: RandomSource = rng if rng is not None else default_source()

    def calculate_improvement(
        self, player: Player, performance: int, today: Optional[date] = None
    ) -> AttributeDelta:
        """Roll the improvements earned by one match.

        Parameters
        ----------
        player : Player
            Player who took part in the match.
        performance : int
            Match performance score, ``1``-``100``.
        today : date | None
            Day used to compute the player's age; defaults to the current date.

        Returns
        -------
        AttributeDelta
            New ratings for every attribute that rose. Empty when the age gate
            fails or no attribute roll succeeds.
        """
        age = player.age(today)
        if self.rng.random() > improvement_probability(age):
            return AttributeDelta()

        cap = improvement_cap(performance)
        changes: Dict[str, int] = {}
        for attribute, chance in self._attribute_chances(player, age):
            new_value = self._roll_attribute(player, attribute, chance, cap)
            if new_value is not None:
                changes[attribute] = new_value

        return AttributeDelta(**changes)

    def _attribute_chances(self, player: Player, age: int) -> List[Tuple[str, float]]:
        """List the attributes eligible to roll and their chances, in roll order.

        Parameters
        ----------
        player : Player
            Player being developed.
        age : int
            Player's age in whole years.

        Returns
        -------
        List[Tuple[str, float]]
            ``(attribute, chance)`` pairs. Goalkeeping appears for goalkeepers only.
        """
        cfg = ENGINE_CONFIG.development
        physical = cfg.physical_chance_young if age < cfg.physical_age_cutoff else cfg.physical_chance_old
        mental = cfg.mental_chance_experienced if age > cfg.mental_age_cutoff else cfg.mental_chance_inexperienced

        chances = [
            ("speed", cfg.speed_chance),
            ("technique", cfg.technique_chance),
            ("physical", physical),
            ("mental", mental),
        ]
        if player.is_goalkeeper:
            chances.append(("goalkeeping", cfg.goalkeeping_chance))
        return chances

    def _roll_attribute(self, player: Player, attribute: str, chance: float, cap: int) -> Optional[int]:
        """Roll a single attribute.

        Parameters
        ----------
        player : Player
            Player being developed.
        attribute : str
            Attribute name to roll.
        chance : float
            Probability that the attribute improves.
        cap : int
            Upper bound of the random gain; the gain is always at least one.

        Returns
        -------
        int | None
            New rating clamped to the player's potential, or ``None`` when the
            roll fails or the attribute has already reached potential.
        """
        if self.rng.random() >= chance:
            return None
        current = getattr(player.attributes, attribute)
        if current >= player.potential:
            return None
        gain = roll_below(self.rng, cap) + 1
        return min(player.potential, current + gain)
