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
"""Utilities that synthesise players and squads for quick simulations."""
import random
from datetime import date
from typing import List, Optional

from dugout.models.player import Player, PlayerAttributes
from dugout.models.team import Team

# (position, speed, technique, physical, mental, goalkeeping) for a standard 17-man squad
SQUAD_TEMPLATE = [
    ("GK", 45, 75, 80, 85, 88),
    ("GK", 40, 70, 78, 82, 85),
    ("DEF", 70, 75, 85, 80, 20),
    ("DEF", 75, 78, 82, 85, 15),
    ("DEF", 68, 72, 88, 78, 25),
    ("DEF", 72, 80, 80, 82, 18),
    ("DEF", 74, 76, 84, 79, 22),
    ("MID", 78, 85, 75, 88, 15),
    ("MID", 80, 88, 72, 85, 12),
    ("MID", 75, 82, 78, 86, 18),
    ("MID", 82, 80, 80, 82, 10),
    ("MID", 76, 84, 74, 87, 16),
    ("MID", 79, 86, 76, 84, 14),
    ("ATT", 88, 85, 78, 82, 10),
    ("ATT", 85, 88, 75, 85, 8),
    ("ATT", 90, 82, 80, 80, 12),
    ("ATT", 86, 86, 76, 83, 9),
]

FIRST_NAMES = ["Lionel", "Kylian", "Erling", "Kevin", "Luka", "Virgil", "Mohamed", "Pedri", "Harry", "Jadon"]
LAST_NAMES = ["Silva", "Kane", "Modric", "Salah", "Haaland", "Kroos", "Torres", "Foden", "Mount", "Barella"]
TEAM_NAMES = ["FC Barcelona", "Real Madrid", "Liverpool", "Juventus", "Bayern Munich", "AS Monaco"]


def _varied(rng: random.Random, value: int, low: int) -> int:
    """Shift a template rating by up to five points either way.

    Parameters
    ----------
    rng : random.Random
        Generator supplying the variation.
    value : int
        Template rating.
    low : int
        Lowest rating the result may take.

    Returns
    -------
    int
        Varied rating clamped to ``low..95``.
    """
    return max(low, min(95, value + rng.randint(-5, 5)))


def generate_random_player(
    id: int,
    position: str,
    template: Optional[tuple] = None,
    name: Optional[str] = None,
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
) -> Player:
    """Generate a player with randomised attributes around a template.

    Parameters
    ----------
    id : int
        Unique identifier assigned to the created player.
    position : str
        Position group of the player.
    template : Optional[tuple]
        ``(speed, technique, physical, mental, goalkeeping)`` base ratings; the
        first squad template for ``position`` is used when omitted.
    name : Optional[str]
        Human-readable name to apply; a pseudo-random name is chosen when omitted.
    rng : Optional[random.Random]
        Generator for every draw; a fresh unseeded generator when omitted.
    today : Optional[date]
        Reference day for the birth date; defaults to the current date.

    Returns
    -------
    Player
        A newly constructed player born 18-34 years before ``today`` with potential between 70 and 94.
    """
    rng = rng or random.Random()
    today = today or date.today()

    if template is None:
        template = next(t[1:] for t in SQUAD_TEMPLATE if t[0] == position)
    if name is None:
        name = f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}"

    speed, technique, physical, mental, goalkeeping = template
    attributes = PlayerAttributes(
        speed=_varied(rng, speed, 30),
        technique=_varied(rng, technique, 30),
        physical=_varied(rng, physical, 30),
        mental=_varied(rng, mental, 30),
        goalkeeping=_varied(rng, goalkeeping, 10),
    )

    age = rng.randint(18, 34)
    birth_date = date(today.year - age, rng.randint(1, 12), rng.randint(1, 28))

    return Player(
        player_id=id,
        name=name,
        position=position,
        birth_date=birth_date,
        attributes=attributes,
        potential=rng.randint(70, 94),
    )


def generate_team(
    id: int,
    name: Optional[str] = None,
    starting_player_id: int = 1,
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
) -> Team:
    """Generate a full squad from the standard template.

    Parameters
    ----------
    id : int
        Unique identifier assigned to the generated team.
    name : Optional[str]
        Squad name to apply; picked at random when ``None``.
    starting_player_id : int
        Identifier to use for the first generated player; increments for each additional player.
    rng : Optional[random.Random]
        Generator for every draw; a fresh unseeded generator when omitted.
    today : Optional[date]
        Reference day for birth dates.

    Returns
    -------
    Team
        Squad of two goalkeepers, five defenders, six midfielders, and four attackers.
    """
    rng = rng or random.Random()
    if name is None:
        name = rng.choice(TEAM_NAMES)

    players: List[Player] = []
    for offset, (position, *template) in enumerate(SQUAD_TEMPLATE):
        players.append(
            generate_random_player(
                starting_player_id + offset,
                position,
                template=tuple(template),
                rng=rng,
                today=today,
            )
        )

    return Team(team_id=id, name=name, players=players)
