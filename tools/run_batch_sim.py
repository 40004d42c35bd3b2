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
"""Run many simulations between the fixture squads and summarise the outcomes."""
import argparse
import random
from collections import Counter
from pathlib import Path

from dugout.engine.match_engine import MatchEngine
from dugout.utils.roster import load_teams_from_json


def run_batch(matches: int = 1000, seed: int = 0) -> None:
    """Simulate ``matches`` fixtures and print aggregate numbers.

    Parameters
    ----------
    matches : int
        Number of fixtures to simulate (default 1000).
    seed : int
        Seed for the shared random generator (default 0).
    """
    data_path = Path(__file__).parent.parent / "data" / "players.json"
    home, away = load_teams_from_json(str(data_path))

    engine = MatchEngine(rng=random.Random(seed))
    outcomes = Counter()
    event_types = Counter()
    home_goals = away_goals = 0

    for _ in range(matches):
        result = engine.simulate_match(home, away)
        home_goals += result.home_score
        away_goals += result.away_score
        event_types.update(e.event_type for e in result.events)
        if result.home_score > result.away_score:
            outcomes["home"] += 1
        elif result.home_score < result.away_score:
            outcomes["away"] += 1
        else:
            outcomes["draw"] += 1

    print(f"{home.name} vs {away.name} over {matches} matches")
    print(f"  Home wins: {outcomes['home']}  Draws: {outcomes['draw']}  Away wins: {outcomes['away']}")
    print(f"  Goals per match: {(home_goals + away_goals) / matches:.2f} ({home_goals} - {away_goals})")
    for event_type, count in event_types.most_common():
        print(f"  {event_type}: {count / matches:.2f} per match")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--matches", type=int, default=1000)
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args()
    run_batch(args.matches, args.seed)
