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
"""Utilities for constructing squads from serialized data sources.

The utilities in this module translate plain dictionaries or JSON payloads into
rich domain objects that the engines understand, and back again. They are
primarily used by the CLI entrypoint and test fixtures to spin up realistic
squads without hand-coding every player. Missing attribute values default to a
middling rating so that incomplete datasets remain usable.
"""
import json
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from dugout.models.player import ATTRIBUTE_NAMES, Player, PlayerAttributes
from dugout.models.team import Team


def player_from_dict(d: dict, today: Optional[date] = None) -> Player:
    """Build a ``Player`` from a plain dictionary payload.

    Parameters
    ----------
    d
        A mapping containing the serialized player information. Supported keys
        include ``id``, ``name``, ``position``, ``birth_date`` (ISO format, or an
        ``age`` fallback), ``potential``, ``fatigue``, ``injury_days``,
        ``injury_type``, ``games_played`` and an ``attributes`` mapping.
    today
        Reference day used when only an ``age`` is supplied.

    Returns
    -------
    Player
        A fully initialised player instance with sane defaults for any missing
        attribute values.

    """
    attrs = d.get("attributes", {}) or {}
    pa = PlayerAttributes(**{name: attrs.get(name, 50) for name in ATTRIBUTE_NAMES})

    if "birth_date" in d:
        birth_date = date.fromisoformat(d["birth_date"])
    else:
        reference = today or date.today()
        birth_date = date(reference.year - d.get("age", 25), 1, 1)

    return Player(
        player_id=d.get("id", 0),
        name=d.get("name", f"player_{d.get('id', 0)}"),
        position=d.get("position", "MID"),
        birth_date=birth_date,
        attributes=pa,
        potential=d.get("potential", 75),
        fatigue=d.get("fatigue", 0),
        injury_days=d.get("injury_days", 0),
        injury_type=d.get("injury_type"),
        games_played=d.get("games_played", 0),
        goals=d.get("goals", 0),
        assists=d.get("assists", 0),
        is_youth=d.get("is_youth", False),
    )


def player_to_dict(player: Player) -> Dict[str, Any]:
    """Serialise a player into the roster JSON schema.

    Parameters
    ----------
    player
        Player to serialise.

    Returns
    -------
    Dict[str, Any]
        JSON-compatible mapping accepted by :func:`player_from_dict`.
    """
    return {
        "id": player.player_id,
        "name": player.name,
        "position": player.position,
        "birth_date": player.birth_date.isoformat(),
        "potential": player.potential,
        "fatigue": player.fatigue,
        "injury_days": player.injury_days,
        "injury_type": player.injury_type,
        "games_played": player.games_played,
        "goals": player.goals,
        "assists": player.assists,
        "is_youth": player.is_youth,
        "attributes": player.attributes.as_dict(),
    }


def team_to_dict(team: Team) -> Dict[str, Any]:
    """Serialise a squad into the roster JSON schema.

    Parameters
    ----------
    team
        Squad to serialise.

    Returns
    -------
    Dict[str, Any]
        Mapping with ``id``, ``name`` and ``players`` keys.
    """
    return {
        "id": team.team_id,
        "name": team.name,
        "players": [player_to_dict(p) for p in team.players],
    }


def load_teams_from_json(path: str) -> Tuple[Team, Team]:
    """Load home and away squads from the repository's JSON schema.

    Parameters
    ----------
    path
        The filesystem path to the JSON document following the
        ``data/players.json`` schema.

    Returns
    -------
    tuple[Team, Team]
        A pair of ``Team`` objects in ``(home, away)`` order that are ready for
        simulation.

    Raises
    ------
    FileNotFoundError
        Raised when ``path`` does not exist.
    KeyError
        Raised when the JSON payload is missing required top-level sections.

    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Players JSON not found: {path}")

    with p.open("r", encoding="utf-8") as fh:
        data = json.load(fh)

    def build_team(section: str) -> Team:
        tdata = data[section]
        players = [player_from_dict(pl) for pl in tdata.get("players", [])]
        return Team(
            team_id=tdata.get("id", 0),
            name=tdata.get("name", f"Team_{section}"),
            players=players,
        )

    home = build_team("home")
    away = build_team("away")
    return home, away


def save_teams_to_json(path: str, home: Team, away: Team) -> None:
    """Write a home/away pair in the format read by :func:`load_teams_from_json`.

    Parameters
    ----------
    path
        Destination file; parent directories are created as needed.
    home
        Home squad.
    away
        Away squad.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as fh:
        json.dump({"home": team_to_dict(home), "away": team_to_dict(away)}, fh, indent=2)
