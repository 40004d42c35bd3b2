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
"""Event domain models for the match engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

EventType = Literal["goal", "card", "substitution", "injury"]

EVENT_TYPES = ("goal", "card", "substitution", "injury")


@dataclass(frozen=True)
class MatchEvent:
    """Snapshot of a noteworthy moment during a simulation.

    Parameters
    ----------
    minute : int
        Match minute (``1``-``90``) in which the event occurred.
    event_type : EventType
        Category of event: ``"goal"``, ``"card"``, ``"substitution"`` or ``"injury"``.
    team_id : int
        Identifier of the team the event belongs to.
    description : str
        Human-readable summary of what happened.
    player_id : int | None, optional
        Identifier of the involved player, if the team had anyone to pick.
    """

    minute: int
    event_type: EventType
    team_id: int
    description: str
    player_id: Optional[int] = None

    @property
    def is_goal(self) -> bool:
        """Return ``True`` when the event changes the score."""
        return self.event_type == "goal"


def describe_event(event_type: str, player_name: Optional[str], team_name: str) -> str:
    """Build the commentary line shown for an event.

    Parameters
    ----------
    event_type : str
        Category of the event.
    player_name : str | None
        Involved player's name; ``None`` renders as ``"Unknown"``.
    team_name : str
        Name of the team the event belongs to.

    Returns
    -------
    str
        One-line description.
    """
    name = player_name or "Unknown"
    if event_type == "goal":
        return f"GOAL! {name} scores for {team_name}!"
    if event_type == "card":
        return f"{name} receives a yellow card"
    if event_type == "substitution":
        return f"{team_name} makes a substitution"
    if event_type == "injury":
        return f"{name} is injured and needs treatment"
    return f"Event involving {name}"
