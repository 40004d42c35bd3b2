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
"""Team domain model grouping a manager's squad."""
from dataclasses import dataclass, field
from typing import List, Optional

from dugout.models.player import POSITIONS, Player


@dataclass
class Team:
    """Container representing a managed club and its squad.

    Unlike a matchday selection, a squad may be empty or contain only injured
    players; the engines treat such squads with neutral defaults.

    Parameters
    ----------
    team_id : int
        Unique identifier for the team.
    name : str
        Display name for the squad.
    players : List[Player], optional
        Complete roster available to the team.
    """

    team_id: int
    name: str
    players: List[Player] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Reject rosters that list the same player twice."""
        ids = [p.player_id for p in self.players]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Team {self.name} lists a player more than once")

    def get_players_by_position(self, position: str) -> List[Player]:
        """Get all players registered in a given position group.

        Parameters
        ----------
        position : str
            Position code to filter by (for example ``"MID"``).

        Returns
        -------
        List[Player]
            Players on the roster whose position matches ``position``.
        """
        if position not in POSITIONS:
            raise ValueError(f"Unknown position: {position}")
        return [p for p in self.players if p.position == position]

    def available_players(self) -> List[Player]:
        """Return players fit and rested enough to count towards team strength.

        Returns
        -------
        List[Player]
            Roster members with no injury days and fatigue below the limit.
        """
        return [p for p in self.players if p.is_available]

    def uninjured_players(self) -> List[Player]:
        """Return players who can be involved in match events.

        Returns
        -------
        List[Player]
            Roster members with no injury days, regardless of fatigue.
        """
        return [p for p in self.players if not p.is_injured]

    def get_player(self, player_id: int) -> Optional[Player]:
        """Look up a rostered player by identifier.

        Parameters
        ----------
        player_id : int
            Identifier to search for.

        Returns
        -------
        Player | None
            The matching player, or ``None`` if the id is not on this roster.
        """
        return next((p for p in self.players if p.player_id == player_id), None)
