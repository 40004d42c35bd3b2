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
"""Entry point for manual match simulations."""
import random
from datetime import date
from pathlib import Path
from typing import Optional

from dugout.engine.match_engine import MatchEngine, MatchResult
from dugout.engine.post_match import PostMatchProcessor
from dugout.models.team import Team
from dugout.utils.debug import MatchDebugger
from dugout.utils.generator import generate_team  # Fallback if no roster file
from dugout.utils.roster import load_teams_from_json  # For loading saved rosters


def print_match_report(result: MatchResult, home_team: Team, away_team: Team) -> None:
    """Print the timeline, score, and statistics of a finished match.

    Parameters
    ----------
    result : MatchResult
        Simulated outcome.
    home_team : Team
        Home squad, used for names.
    away_team : Team
        Away squad, used for names.
    """
    for event in result.events:
        print(f"{event.minute:2d}': {event.description}")

    print(f"\nFinal Score: {home_team.name} {result.home_score} - {result.away_score} {away_team.name}")

    stats = result.statistics
    print("\nMatch Statistics:")
    print(f"{'':16}{home_team.name[:14]:>14}  {away_team.name[:14]:<14}")
    for label, split in (
        ("Possession %", stats.possession),
        ("Shots", stats.shots),
        ("On target", stats.shots_on_target),
        ("Fouls", stats.fouls),
        ("Corners", stats.corners),
    ):
        print(f"{label:16}{split.home:>14}  {split.away:<14}")


def main(seed: Optional[int] = None) -> None:
    """Simulate a demo fixture and apply post-match development.

    Parameters
    ----------
    seed : int | None
        Seed for every random draw, for reproducible demo runs.
    """
    rng = random.Random(seed)
    today = date.today()

    # Try to load teams from JSON file, fall back to generated teams if not found
    roster_file = Path("data/players.json")
    if roster_file.exists():
        try:
            home_team, away_team = load_teams_from_json(str(roster_file))
        except (KeyError, ValueError) as e:
            print(f"Error loading teams from {roster_file}: {e}")
            print("Falling back to generated teams...")
            home_team = generate_team(1, "Manchester United", starting_player_id=1, rng=rng, today=today)
            away_team = generate_team(2, "Liverpool", starting_player_id=100, rng=rng, today=today)
    else:
        print(f"No roster file found at {roster_file}")
        print("Using generated teams...")
        home_team = generate_team(1, "Manchester United", starting_player_id=1, rng=rng, today=today)
        away_team = generate_team(2, "Liverpool", starting_player_id=100, rng=rng, today=today)

    debugger = MatchDebugger()
    try:
        engine = MatchEngine(rng=rng, debugger=debugger)
        result = engine.simulate_match(home_team, away_team)
        print_match_report(result, home_team, away_team)

        processor = PostMatchProcessor(rng=rng, debugger=debugger)
        updates = processor.process(home_team, away_team, today)
    finally:
        debugger.close()

    players = {p.player_id: p for p in [*home_team.players, *away_team.players]}
    print("\nPlayer Development:")
    for update in updates:
        player = players[update.player_id]
        if not update.improvements.is_empty:
            changes = ", ".join(
                f"{name} {getattr(player.attributes, name)}->{value}" for name, value in update.improvements.items()
            )
            print(f"{player.name} (performance {update.performance}): {changes}")
        update.apply(player)

    print(f"\nDebug log written to {debugger.log_path}")


if __name__ == "__main__":
    main()
