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
"""Weekly training sessions.

Training is deterministic: the gain depends only on intensity, duration, and
age. The returned fatigue increase and injury risk are estimates for the caller
to apply or roll against.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

from dugout.engine.config import ENGINE_CONFIG
from dugout.models.player import ATTRIBUTE_NAMES, AttributeDelta, Player
from dugout.models.team import Team

TRAINING_TYPES = ATTRIBUTE_NAMES


@dataclass
class TrainingSession:
    """A block of training assigned to part of a squad.

    Parameters
    ----------
    training_type : str
        Attribute being trained: speed, technique, physical, mental or goalkeeping.
    intensity : int
        Load level from ``1`` (light) to ``5`` (maximum).
    player_ids : List[int]
        Participants; must not be empty.
    duration_days : int, optional
        Length of the block; defaults to one week.
    """

    training_type: str
    intensity: int
    player_ids: List[int]
    duration_days: int = field(default_factory=lambda: ENGINE_CONFIG.training.default_duration_days)

    def __post_init__(self) -> None:
        """Validate type, intensity, duration, and participants."""
        cfg = ENGINE_CONFIG.training
        if self.training_type not in TRAINING_TYPES:
            raise ValueError(f"Unknown training type: {self.training_type}")
        if not cfg.min_intensity <= self.intensity <= cfg.max_intensity:
            raise ValueError(f"intensity must be between {cfg.min_intensity} and {cfg.max_intensity}")
        if self.duration_days <= 0:
            raise ValueError("duration_days must be positive")
        if not self.player_ids:
            raise ValueError("A training session needs at least one participant")


@dataclass(frozen=True)
class TrainingOutcome:
    """Result of training one player.

    Parameters
    ----------
    player_id : int
        Player the outcome belongs to.
    improvements : AttributeDelta
        New ratings for the trained attribute, if it rose.
    fatigue_increase : float
        Fatigue the session adds.
    injury_risk : float
        Probability that the session injures the player.
    """

    player_id: int
    improvements: AttributeDelta
    fatigue_increase: float
    injury_risk: float


class TrainingSystem:
    """Apply training sessions to players."""

    def age_multiplier(self, age: int) -> float:
        """Return the gain multiplier for a player's age.

        Parameters
        ----------
        age : int
            Age in whole years.

        Returns
        -------
        float
            Boosted for young players, reduced for veterans, neutral otherwise.
        """
        cfg = ENGINE_CONFIG.training
        if age < cfg.young_age:
            return cfg.young_multiplier
        if age > cfg.veteran_age:
            return cfg.veteran_multiplier
        return 1.0

    def apply_training(
        self,
        player: Player,
        training_type: str,
        intensity: int,
        duration_days: Optional[int] = None,
        today: Optional[date] = None,
    ) -> TrainingOutcome:
        """Compute the effect of one training block on one player.

        Parameters
        ----------
        player : Player
            Player being trained.
        training_type : str
            Attribute being trained.
        intensity : int
            Load level of the block.
        duration_days : int | None
            Length of the block; one week when omitted.
        today : date | None
            Day used to compute the player's age.

        Returns
        -------
        TrainingOutcome
            Attribute gain clamped to potential, fatigue added, and injury risk.
        """
        cfg = ENGINE_CONFIG.training
        if training_type not in cfg.type_modifiers:
            raise ValueError(f"Unknown training type: {training_type}")
        days = duration_days if duration_days is not None else cfg.default_duration_days

        gain_mod, fatigue_mod, injury_mod = cfg.type_modifiers[training_type]
        base_gain = intensity * (days / cfg.default_duration_days)
        gain = math.floor(base_gain * self.age_multiplier(player.age(today)) * gain_mod)

        improvements = AttributeDelta()
        if training_type != "goalkeeping" or player.is_goalkeeper:
            current = getattr(player.attributes, training_type)
            new_value = min(player.potential, current + gain)
            if new_value > current:
                improvements = AttributeDelta(**{training_type: new_value})

        return TrainingOutcome(
            player_id=player.player_id,
            improvements=improvements,
            fatigue_increase=intensity * cfg.fatigue_per_intensity * fatigue_mod,
            injury_risk=intensity * cfg.injury_risk_per_intensity * injury_mod,
        )

    def run_session(self, session: TrainingSession, team: Team, today: Optional[date] = None) -> Dict[int, TrainingOutcome]:
        """Apply a session to every listed participant on a squad.

        Parameters
        ----------
        session : TrainingSession
            Validated session description.
        team : Team
            Squad the participants belong to; ids missing from it are skipped.
        today : date | None
            Day used to compute player ages.

        Returns
        -------
        Dict[int, TrainingOutcome]
            Outcomes keyed by player id, in session order.
        """
        outcomes: Dict[int, TrainingOutcome] = {}
        for player_id in session.player_ids:
            player = team.get_player(player_id)
            if player is None:
                continue
            outcomes[player_id] = self.apply_training(
                player, session.training_type, session.intensity, session.duration_days, today
            )
        return outcomes
