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
"""Rounding helpers shared by ratings, strengths, and statistics."""
import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, sending exact halves upwards.

    Python's built-in :func:`round` uses banker's rounding, which would turn a
    58.5 strength into 58; ratings shown to managers always round halves up.

    Parameters
    ----------
    value : float
        Number to round.

    Returns
    -------
    int
        ``floor(value + 0.5)``.
    """
    return int(math.floor(value + 0.5))
