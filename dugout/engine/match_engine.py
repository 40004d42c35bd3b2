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
"""Minute-by-minute match simulation between two managed squads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from dugout.engine.config import ENGINE_CONFIG
from dugout.engine.events import EventType, MatchEvent, describe_event
from dugout.engine.random_source import RandomSource, default_source, pick
from dugout.engine.statistics import MatchStatistics, generate_statistics
from dugout.engine.strength import TeamStrength, calculate_team_strength
from dugout.models.player import Player
from dugout.models.team import Team
from dugout.utils.debug import MatchDebugger


@dataclass(frozen=True)
class MatchResult:
    """Immutable outcome of a simulated match.

    Parameters
    ----------
    home_team_id : int
        Identifier of the home side.
    away_team_id : int
        Identifier of the away side.
    home_score : int
        Goals scored by the home side.
    away_score : int
        Goals scored by the away side.
    events : Tuple[MatchEvent, ...]
        Events in the order they happened.
    statistics : MatchStatistics
        Cosmetic statistics generated independently of ``events``.
    home_strength : TeamStrength
        Home strength before the home advantage was applied.
    away_strength : TeamStrength
        Away strength snapshot.
    """

    home_team_id: int
    away_team_id: int
    home_score: int
    away_score: int
    events: Tuple[MatchEvent, ...]
    statistics: MatchStatistics
    home_strength: TeamStrength
    away_strength: TeamStrength

    def goals_for(self, team_id: int) -> List[MatchEvent]:
        """Return the goal events credited to one team.

        Parameters
        ----------
        team_id : int
            Team to filter by.

        Returns
        -------
        List[MatchEvent]
            Goal events belonging to ``team_id`` in match order.
        """
        return [e for e in self.events if e.is_goal and e.team_id == team_id]

    def to_dict(self) -> Dict[str, Any]:
        """Serialise the result for the persistence layer.

        Returns
        -------
        Dict[str, Any]
            Scores, events, and statistics as plain JSON-compatible values.
        """
        return {
            "home_team_id": self.home_team_id,
            "away_team_id": self.away_team_id,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "events": [
                {
                    "minute": e.minute,
                    "type": e.event_type,
                    "player_id": e.player_id,
                    "team_id": e.team_id,
                    "description": e.description,
                }
                for e in self.events
            ],
            "statistics": self.statistics.to_dict(),
        }


class MatchEngine:
    """Simulate complete matches in a single synchronous call.

    The engine holds no state between matches apart from the injected random
    source, so one instance can simulate any number of fixtures.

    Parameters
    ----------
    rng : RandomSource | None, optional
        Source of every random draw; a fresh unseeded generator when omitted.
    debugger : MatchDebugger | None, optional
        Optional logging helper used to trace strengths, events, and statistics.
    """

    def __init__(self, rng: Optional[RandomSource] = None, debugger: Optional[MatchDebugger] = None) -> None:
        """Create an engine bound to a random source and optional debugger.

        Parameters
        ----------
        rng : RandomSource | None
            Source of every random draw.
        debugger : MatchDebugger | None
            Optional logging helper.
        """
        self.rng: RandomSource = rng if rng is not None else default_source()
        self.debugger = debugger

    def simulate_match(self, home_team: Team, away_team: Team) -> MatchResult:
        """Play ninety minutes between two squads.

        Parameters
        ----------
        home_team : Team
            Side receiving the home advantage.
        away_team : Team
            Visiting side.

        Returns
        -------
        MatchResult
            Final score, ordered event timeline, and statistics.
        """
        home_strength = calculate_team_strength(home_team.players)
        away_strength = calculate_team_strength(away_team.players)
        adjusted_home = home_strength.with_home_advantage(ENGINE_CONFIG.simulation.home_advantage)

        if self.debugger:
            self.debugger.log_team_strength(home_team.name, home_strength, adjusted_home.overall)
            self.debugger.log_team_strength(away_team.name, away_strength, away_strength.overall)

        events, home_score, away_score = self.simulate_events(home_team, away_team, adjusted_home, away_strength)

        statistics = generate_statistics(adjusted_home, away_strength, self.rng)

        if self.debugger:
            self.debugger.log_statistics(statistics)
            self.debugger.log_final_score(home_team.name, home_score, away_score, away_team.name)

        return MatchResult(
            home_team_id=home_team.team_id,
            away_team_id=away_team.team_id,
            home_score=home_score,
            away_score=away_score,
            events=tuple(events),
            statistics=statistics,
            home_strength=home_strength,
            away_strength=away_strength,
        )

    def simulate_events(
        self,
        home_team: Team,
        away_team: Team,
        home_strength: TeamStrength,
        away_strength: TeamStrength,
    ) -> Tuple[List[MatchEvent], int, int]:
        """Run the minute loop and collect the event timeline and score.

        Each minute gets exactly one roll, so minutes in the returned list are
        strictly increasing and at most one event exists per minute.

        Parameters
        ----------
        home_team : Team
            Home squad supplying event players.
        away_team : Team
            Away squad supplying event players.
        home_strength : TeamStrength
            Home snapshot with the home advantage already applied.
        away_strength : TeamStrength
            Away snapshot.

        Returns
        -------
        Tuple[List[MatchEvent], int, int]
            Events in emission order, then the home and away goal counts.
        """
        cfg = ENGINE_CONFIG.simulation
        events: List[MatchEvent] = []
        home_score = 0
        away_score = 0

        for minute in range(1, cfg.match_minutes + 1):
            if self.rng.random() < cfg.event_probability:
                is_home, event = self._generate_event(minute, home_team, away_team, home_strength, away_strength)
                events.append(event)
                if event.is_goal:
                    if is_home:
                        home_score += 1
                    else:
                        away_score += 1
                if self.debugger:
                    self.debugger.log_match_event(minute, event.event_type, event.description)

        return events, home_score, away_score

    def _generate_event(
        self,
        minute: int,
        home_team: Team,
        away_team: Team,
        home_strength: TeamStrength,
        away_strength: TeamStrength,
    ) -> Tuple[bool, MatchEvent]:
        """Build the event for a minute whose roll succeeded.

        Parameters
        ----------
        minute : int
            Current match minute.
        home_team : Team
            Home squad.
        away_team : Team
            Away squad.
        home_strength : TeamStrength
            Adjusted home snapshot.
        away_strength : TeamStrength
            Away snapshot.

        Returns
        -------
        Tuple[bool, MatchEvent]
            Whether the home side owns the event, and the event itself. The
            owner is picked in proportion to overall strength.
        """
        total = home_strength.overall + away_strength.overall
        home_chance = home_strength.overall / total if total else 0.5
        is_home = self.rng.random() < home_chance
        team = home_team if is_home else away_team

        event_type = self._determine_event_type()
        player = self._select_player(team, event_type)

        return is_home, MatchEvent(
            minute=minute,
            event_type=event_type,
            team_id=team.team_id,
            description=describe_event(event_type, player.name if player else None, team.name),
            player_id=player.player_id if player else None,
        )

    def _determine_event_type(self) -> EventType:
        """Classify an event with a single draw against cumulative thresholds.

        Returns
        -------
        EventType
            ``"goal"``, ``"card"``, ``"substitution"`` or ``"injury"``.
        """
        cfg = ENGINE_CONFIG.events
        roll = self.rng.random()
        if roll < cfg.goal_threshold:
            return "goal"
        if roll < cfg.card_threshold:
            return "card"
        if roll < cfg.substitution_threshold:
            return "substitution"
        return "injury"

    def _select_player(self, team: Team, event_type: str) -> Optional[Player]:
        """Pick the player involved in an event.

        Goals go to a random uninjured attacker when the team has one; every
        other case picks among all uninjured players.

        Parameters
        ----------
        team : Team
            Team owning the event.
        event_type : str
            Category of the event.

        Returns
        -------
        Player | None
            Selected player, or ``None`` if nobody on the roster is uninjured.
        """
        candidates = team.uninjured_players()
        if not candidates:
            return None

        if event_type == "goal":
            attackers = [p for p in candidates if p.position == "ATT"]
            if attackers:
                return pick(self.rng, attackers)

        return pick(self.rng, candidates)
