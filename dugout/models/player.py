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
"""Domain models representing managed players and their attributes."""

from dataclasses import dataclass, fields, replace
from datetime import date
from typing import Dict, Iterator, Optional, Tuple

from dugout.engine.config import ENGINE_CONFIG
from dugout.utils.rounding import round_half_up

POSITIONS = ("GK", "DEF", "MID", "ATT")
INJURY_TYPES = ("light", "moderate", "severe")
ATTRIBUTE_NAMES = ("speed", "technique", "physical", "mental", "goalkeeping")


def calculate_age(birth_date: date, today: Optional[date] = None) -> int:
    """Return the number of whole years between ``birth_date`` and ``today``.

    Parameters
    ----------
    birth_date : date
        Player's date of birth.
    today : date | None
        Reference day; defaults to :meth:`date.today`.

    Returns
    -------
    int
        Age in completed years. One year is subtracted when the birthday has not
        yet come round in the reference year.
    """
    today = today or date.today()
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


@dataclass
class PlayerAttributes:
    """Current attribute ratings for a player.

    Parameters
    ----------
    speed : int
        Acceleration and top pace.
    technique : int
        Ball control, passing, and finishing quality.
    physical : int
        Strength and stamina in duels.
    mental : int
        Composure, positioning, and decision making.
    goalkeeping : int
        Shot stopping and handling; only meaningful for goalkeepers.
    """

    speed: int
    technique: int
    physical: int
    mental: int
    goalkeeping: int

    def __post_init__(self) -> None:
        """Validate that all attributes fall within the configured rating scale."""
        cfg = ENGINE_CONFIG.attributes
        for attr, value in self.as_dict().items():
            if not cfg.min_rating <= value <= cfg.max_rating:
                raise ValueError(f"{attr} must be between {cfg.min_rating} and {cfg.max_rating}")

    def as_dict(self) -> Dict[str, int]:
        """Return the ratings keyed by attribute name.

        Returns
        -------
        Dict[str, int]
            Mapping in canonical attribute order.
        """
        return {name: getattr(self, name) for name in ATTRIBUTE_NAMES}


@dataclass(frozen=True)
class AttributeDelta:
    """Sparse set of new attribute values produced by development or training.

    A field left as ``None`` means the attribute is untouched. Populated fields
    hold the *new* rating, not the increment.

    Parameters
    ----------
    speed : int | None, optional
        New speed rating.
    technique : int | None, optional
        New technique rating.
    physical : int | None, optional
        New physical rating.
    mental : int | None, optional
        New mental rating.
    goalkeeping : int | None, optional
        New goalkeeping rating.
    """

    speed: Optional[int] = None
    technique: Optional[int] = None
    physical: Optional[int] = None
    mental: Optional[int] = None
    goalkeeping: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when no attribute changes."""
        return all(getattr(self, f.name) is None for f in fields(self))

    def items(self) -> Iterator[Tuple[str, int]]:
        """Iterate over the populated ``(attribute, new_value)`` pairs.

        Returns
        -------
        Iterator[Tuple[str, int]]
            Pairs in canonical attribute order.
        """
        for name in ATTRIBUTE_NAMES:
            value = getattr(self, name)
            if value is not None:
                yield name, value

    def apply_to(self, attributes: PlayerAttributes) -> PlayerAttributes:
        """Return a copy of ``attributes`` with this delta written over it.

        Parameters
        ----------
        attributes : PlayerAttributes
            Ratings to update.

        Returns
        -------
        PlayerAttributes
            New attribute record; ``attributes`` itself is left untouched.
        """
        return replace(attributes, **dict(self.items()))


@dataclass
class Player:
    """Squad member combining identity, ratings, and match condition.

    Parameters
    ----------
    player_id : int
        Unique identifier for the player.
    name : str
        Human-readable player name.
    position : str
        Position group: ``"GK"``, ``"DEF"``, ``"MID"`` or ``"ATT"``.
    birth_date : date
        Date of birth used to derive the player's age.
    attributes : PlayerAttributes
        Current attribute ratings.
    potential : int
        Fixed ceiling that development and training never push an attribute past.
    fatigue : int, optional
        Accumulated fatigue from ``0`` (fresh) to ``100``.
    injury_days : int, optional
        Days until the player recovers; ``0`` means fit.
    injury_type : str | None, optional
        ``"light"``, ``"moderate"`` or ``"severe"`` while injured.
    games_played : int, optional
        Number of matches the player has been rostered for.
    goals : int, optional
        Career goal tally.
    assists : int, optional
        Career assist tally.
    is_youth : bool, optional
        Whether the player came through the youth academy.
    """

    player_id: int
    name: str
    position: str
    birth_date: date
    attributes: PlayerAttributes
    potential: int
    fatigue: int = 0
    injury_days: int = 0
    injury_type: Optional[str] = None
    games_played: int = 0
    goals: int = 0
    assists: int = 0
    is_youth: bool = False

    def __post_init__(self) -> None:
        """Validate position, potential, and match condition fields."""
        if self.position not in POSITIONS:
            raise ValueError(f"Unknown position: {self.position}")
        cfg = ENGINE_CONFIG.attributes
        if not cfg.min_rating <= self.potential <= cfg.max_rating:
            raise ValueError(f"potential must be between {cfg.min_rating} and {cfg.max_rating}")
        if not 0 <= self.fatigue <= ENGINE_CONFIG.availability.max_fatigue:
            raise ValueError(f"fatigue must be between 0 and {ENGINE_CONFIG.availability.max_fatigue}")
        if self.injury_days < 0:
            raise ValueError("injury_days cannot be negative")
        if self.injury_type is not None and self.injury_type not in INJURY_TYPES:
            raise ValueError(f"Unknown injury type: {self.injury_type}")

    @property
    def is_goalkeeper(self) -> bool:
        """Return ``True`` for players registered as goalkeepers."""
        return self.position == "GK"

    @property
    def is_injured(self) -> bool:
        """Return ``True`` while the player has injury days outstanding."""
        return self.injury_days > 0

    @property
    def is_available(self) -> bool:
        """Return ``True`` when the player is fit and below the fatigue limit."""
        return not self.is_injured and self.fatigue < ENGINE_CONFIG.availability.fatigue_limit

    def age(self, today: Optional[date] = None) -> int:
        """Return the player's age in whole years.

        Parameters
        ----------
        today : date | None
            Reference day; defaults to the current date.

        Returns
        -------
        int
            Completed years since ``birth_date``.
        """
        return calculate_age(self.birth_date, today)

    def overall_rating(self) -> int:
        """Summarise the attributes as a single display rating.

        Goalkeepers weight goalkeeping, mental, physical, and technique; outfield
        players average their four outfield attributes.

        Returns
        -------
        int
            Rating rounded half-up to the nearest integer.
        """
        a = self.attributes
        if self.is_goalkeeper:
            score = a.goalkeeping * 0.4 + a.mental * 0.3 + a.physical * 0.2 + a.technique * 0.1
        else:
            score = (a.speed + a.technique + a.physical + a.mental) / 4
        return round_half_up(score)

    def apply_delta(self, delta: AttributeDelta) -> None:
        """Write an attribute delta onto this player in-place.

        Parameters
        ----------
        delta : AttributeDelta
            New ratings to store; unset fields are ignored.
        """
        if not delta.is_empty:
            self.attributes = delta.apply_to(self.attributes)
