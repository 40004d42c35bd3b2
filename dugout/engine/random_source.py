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
"""Injectable uniform random sources shared by every simulation entry point.

Engines only ever call ``random()`` on their source, so any object exposing that
method works: a seeded :class:`random.Random` for reproducible runs, the module
level generator for casual play, or :class:`ScriptedRandom` when a test needs to
force a specific branch.
"""

from __future__ import annotations

import math
import random
from typing import Iterable, List, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that yields uniform floats in ``[0, 1)``."""

    def random(self) -> float:
        """Return the next uniform value.

        Returns
        -------
        float
            A value in the half-open interval ``[0, 1)``.
        """
        ...


def default_source(seed: Optional[int] = None) -> random.Random:
    """Create a fresh generator, optionally seeded for reproducible runs.

    Parameters
    ----------
    seed : int | None
        Seed passed to :class:`random.Random`; ``None`` seeds from the OS.

    Returns
    -------
    random.Random
        Independent generator satisfying :class:`RandomSource`.
    """
    return random.Random(seed)


def roll_below(rng: RandomSource, upper: int) -> int:
    """Draw an integer uniformly from ``0..upper - 1``.

    Parameters
    ----------
    rng : RandomSource
        Source of the uniform draw.
    upper : int
        Exclusive upper bound. Zero always yields ``0``.

    Returns
    -------
    int
        ``floor(u * upper)`` for one uniform draw ``u``.
    """
    return int(math.floor(rng.random() * upper))


def pick(rng: RandomSource, items: Sequence[T]) -> Optional[T]:
    """Choose one element uniformly, consuming a single draw.

    Parameters
    ----------
    rng : RandomSource
        Source of the uniform draw.
    items : Sequence[T]
        Candidates to choose from.

    Returns
    -------
    T | None
        The chosen element, or ``None`` without drawing when ``items`` is empty.
    """
    if not items:
        return None
    return items[roll_below(rng, len(items))]


class ScriptedRandom:
    """Replay a fixed sequence of uniform values.

    Parameters
    ----------
    values : Iterable[float]
        Values returned in order by :meth:`random`.
    fallback : float | None, optional
        Value returned once the script runs out. When ``None`` an exhausted
        script raises ``RuntimeError`` so unexpected extra draws surface in tests.
    """

    def __init__(self, values: Iterable[float], fallback: Optional[float] = None) -> None:
        """Store the script and its fallback.

        Parameters
        ----------
        values : Iterable[float]
            Values to replay.
        fallback : float | None
            Value used after the script is exhausted.
        """
        self._values: List[float] = list(values)
        for value in self._values:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"scripted value {value} is outside [0, 1)")
        if fallback is not None and not 0.0 <= fallback < 1.0:
            raise ValueError(f"fallback {fallback} is outside [0, 1)")
        self._fallback = fallback
        self._index = 0

    @property
    def consumed(self) -> int:
        """Return how many draws have been taken so far."""
        return self._index

    def random(self) -> float:
        """Return the next scripted value.

        Returns
        -------
        float
            The next value in the script, or the fallback once exhausted.
        """
        if self._index < len(self._values):
            value = self._values[self._index]
        elif self._fallback is not None:
            value = self._fallback
        else:
            raise RuntimeError(f"scripted random source exhausted after {self._index} draws")
        self._index += 1
        return value
