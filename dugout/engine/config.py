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
"""Central configuration for engine tuning parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(slots=True)
class AttributeConfig:
    """Rating scale applied when validating player attributes.

    Parameters
    ----------
    min_rating : int, default=1
        Lowest legal attribute or potential rating.
    max_rating : int, default=100
        Highest legal attribute or potential rating.
    """

    min_rating: int = 1
    max_rating: int = 100


@dataclass(slots=True)
class AvailabilityConfig:
    """Thresholds deciding whether a player can take part in a match.

    Parameters
    ----------
    fatigue_limit : int, default=90
        Fatigue at or above this value removes a player from strength calculations.
    max_fatigue : int, default=100
        Upper bound for accumulated fatigue.
    """

    fatigue_limit: int = 90
    max_fatigue: int = 100


@dataclass(slots=True)
class StrengthConfig:
    """Position-to-attribute mapping used by the team strength aggregator.

    Parameters
    ----------
    neutral_strength : int, default=50
        Score assigned to a position group with no eligible players.
    position_attributes : Dict[str, Tuple[str, ...]]
        Attributes averaged for each position group, keyed by position code.
    """

    neutral_strength: int = 50
    position_attributes: Dict[str, Tuple[str, ...]] = field(
        default_factory=lambda: {
            "ATT": ("speed", "technique"),
            "MID": ("technique", "mental"),
            "DEF": ("physical", "mental"),
            "GK": ("goalkeeping",),
        }
    )


@dataclass(slots=True)
class SimulationConfig:
    """Timing and probability controls for the minute loop.

    Parameters
    ----------
    match_minutes : int, default=90
        Number of simulated minutes.
    event_probability : float, default=0.02
        Chance that a given minute produces an event.
    home_advantage : int, default=5
        Bonus added to the home side's overall strength.
    """

    match_minutes: int = 90
    event_probability: float = 0.02
    home_advantage: int = 5


@dataclass(slots=True)
class EventConfig:
    """Cumulative thresholds that classify a generated event.

    Parameters
    ----------
    goal_threshold : float, default=0.6
        Draws below this value become goals.
    card_threshold : float, default=0.8
        Draws below this value (and above the goal threshold) become cards.
    substitution_threshold : float, default=0.95
        Draws below this value become substitutions; anything higher is an injury.
    """

    goal_threshold: float = 0.6
    card_threshold: float = 0.8
    substitution_threshold: float = 0.95


@dataclass(slots=True)
class StatisticsConfig:
    """Ranges used to fill the cosmetic match statistics.

    Parameters
    ----------
    shot_base_range : int, default=10
        Exclusive upper bound of the random shot base.
    shot_attack_divisor : float, default=10.0
        Divisor applied to the attack score before adding it to the shot base.
    on_target_ratio : float, default=0.4
        Fraction of shots counted as on target.
    foul_min : int, default=5
        Minimum fouls per side.
    foul_range : int, default=15
        Exclusive width of the random foul range.
    corner_min : int, default=2
        Minimum corners per side.
    corner_range : int, default=8
        Exclusive width of the random corner range.
    """

    shot_base_range: int = 10
    shot_attack_divisor: float = 10.0
    on_target_ratio: float = 0.4
    foul_min: int = 5
    foul_range: int = 15
    corner_min: int = 2
    corner_range: int = 8


@dataclass(slots=True)
class DevelopmentConfig:
    """Probabilities steering post-match attribute growth.

    Parameters
    ----------
    age_bands : Tuple[Tuple[int, float], ...]
        ``(age_limit, probability)`` pairs checked in order; the first band whose
        limit exceeds the player's age applies.
    veteran_probability : float, default=0.1
        Improvement probability once every age band is exceeded.
    max_improvement : int, default=3
        Hard cap on the per-attribute gain magnitude.
    performance_step : int, default=20
        Performance points needed per unit of gain magnitude.
    speed_chance : float, default=0.3
        Chance to roll a speed gain.
    technique_chance : float, default=0.4
        Chance to roll a technique gain.
    physical_chance_young : float, default=0.4
        Physical gain chance below ``physical_age_cutoff``.
    physical_chance_old : float, default=0.2
        Physical gain chance from ``physical_age_cutoff`` upwards.
    physical_age_cutoff : int, default=25
        Age splitting the two physical chances.
    mental_chance_experienced : float, default=0.5
        Mental gain chance above ``mental_age_cutoff``.
    mental_chance_inexperienced : float, default=0.3
        Mental gain chance up to and including ``mental_age_cutoff``.
    mental_age_cutoff : int, default=25
        Age splitting the two mental chances.
    goalkeeping_chance : float, default=0.4
        Chance for goalkeepers to roll a goalkeeping gain.
    """

    age_bands: Tuple[Tuple[int, float], ...] = ((18, 0.7), (25, 0.5), (30, 0.4), (35, 0.2))
    veteran_probability: float = 0.1
    max_improvement: int = 3
    performance_step: int = 20
    speed_chance: float = 0.3
    technique_chance: float = 0.4
    physical_chance_young: float = 0.4
    physical_chance_old: float = 0.2
    physical_age_cutoff: int = 25
    mental_chance_experienced: float = 0.5
    mental_chance_inexperienced: float = 0.3
    mental_age_cutoff: int = 25
    goalkeeping_chance: float = 0.4


@dataclass(slots=True)
class TrainingConfig:
    """Weekly training load, gain multipliers, and risk modifiers.

    Parameters
    ----------
    min_intensity : int, default=1
        Lowest accepted session intensity.
    max_intensity : int, default=5
        Highest accepted session intensity.
    default_duration_days : int, default=7
        Length of a standard training block.
    young_age : int, default=25
        Players younger than this receive ``young_multiplier``.
    young_multiplier : float, default=1.2
        Gain multiplier for young players.
    veteran_age : int, default=30
        Players older than this receive ``veteran_multiplier``.
    veteran_multiplier : float, default=0.8
        Gain multiplier for veterans.
    fatigue_per_intensity : float, default=5.0
        Fatigue added per intensity level before type modifiers.
    injury_risk_per_intensity : float, default=0.02
        Injury probability per intensity level before type modifiers.
    type_modifiers : Dict[str, Tuple[float, float, float]]
        ``(gain, fatigue, injury_risk)`` multipliers keyed by training type.
    """

    min_intensity: int = 1
    max_intensity: int = 5
    default_duration_days: int = 7
    young_age: int = 25
    young_multiplier: float = 1.2
    veteran_age: int = 30
    veteran_multiplier: float = 0.8
    fatigue_per_intensity: float = 5.0
    injury_risk_per_intensity: float = 0.02
    type_modifiers: Dict[str, Tuple[float, float, float]] = field(
        default_factory=lambda: {
            "speed": (1.0, 1.0, 1.5),
            "technique": (1.0, 0.8, 1.0),
            "physical": (1.0, 1.0, 2.0),
            "mental": (1.2, 0.5, 1.0),
            "goalkeeping": (1.0, 1.0, 1.0),
        }
    )


@dataclass(slots=True)
class PostMatchConfig:
    """Bookkeeping applied to every rostered player after a match.

    Parameters
    ----------
    performance_range : int, default=100
        Performance scores are drawn uniformly from ``1..performance_range``.
    fatigue_gain_min : int, default=10
        Minimum fatigue added by playing a match.
    fatigue_gain_range : int, default=20
        Exclusive width of the random fatigue gain.
    """

    performance_range: int = 100
    fatigue_gain_min: int = 10
    fatigue_gain_range: int = 20


@dataclass(slots=True)
class EngineConfig:
    """Top-level container for all engine tuning structures.

    Parameters
    ----------
    attributes : AttributeConfig, default=AttributeConfig()
        Attribute rating scale.
    availability : AvailabilityConfig, default=AvailabilityConfig()
        Injury and fatigue availability thresholds.
    strength : StrengthConfig, default=StrengthConfig()
        Team strength aggregation settings.
    simulation : SimulationConfig, default=SimulationConfig()
        Match loop timing and probabilities.
    events : EventConfig, default=EventConfig()
        Event classification thresholds.
    statistics : StatisticsConfig, default=StatisticsConfig()
        Statistic generation ranges.
    development : DevelopmentConfig, default=DevelopmentConfig()
        Post-match development probabilities.
    training : TrainingConfig, default=TrainingConfig()
        Training session tuning.
    post_match : PostMatchConfig, default=PostMatchConfig()
        Post-match roster bookkeeping.
    """

    attributes: AttributeConfig = field(default_factory=AttributeConfig)
    availability: AvailabilityConfig = field(default_factory=AvailabilityConfig)
    strength: StrengthConfig = field(default_factory=StrengthConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    events: EventConfig = field(default_factory=EventConfig)
    statistics: StatisticsConfig = field(default_factory=StatisticsConfig)
    development: DevelopmentConfig = field(default_factory=DevelopmentConfig)
    training: TrainingConfig = field(default_factory=TrainingConfig)
    post_match: PostMatchConfig = field(default_factory=PostMatchConfig)


ENGINE_CONFIG = EngineConfig()
"""Singleton-style access to the engine configuration."""
