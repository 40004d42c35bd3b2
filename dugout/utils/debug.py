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
"""Structured logging utilities used to trace match simulations."""
import time
from collections import deque
from pathlib import Path
from threading import Lock
from typing import TYPE_CHECKING, Deque, List, Optional, TextIO, Tuple

if TYPE_CHECKING:
    from dugout.engine.statistics import MatchStatistics
    from dugout.engine.strength import TeamStrength
    from dugout.models.player import AttributeDelta


class MatchDebugger:
    """Helper object that streams structured match telemetry to disk.

    Parameters
    ----------
    output_dir : str, default="debug_logs"
        Directory where new session logs are created; created automatically when missing.
    """

    def __init__(self, output_dir: str = "debug_logs") -> None:
        """Initialise the debugger and start the first logging session.

        Parameters
        ----------
        output_dir : str
            Filesystem directory where log files are created or appended.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.log_file: Optional[TextIO] = None
        self.session_start = time.strftime("%Y%m%d_%H%M%S")
        self._lock = Lock()
        self._line_number = 1
        self._recent_events: Deque[Tuple[int, str]] = deque(maxlen=200)
        self.start_new_session()

    @property
    def log_path(self) -> Path:
        """Return the path of the current session file."""
        return self.output_dir / f"match_debug_{self.session_start}.txt"

    def start_new_session(self) -> None:
        """Start a new debug logging session."""
        if self.log_file:
            self.log_file.close()

        self.log_file = open(self.log_path, "w", encoding="utf-8")
        self.log_file.write(f"=== Match Debug Session: {time.strftime('%Y-%m-%d %H:%M:%S')} ===\n\n")

    def log_team_strength(self, team_name: str, strength: "TeamStrength", adjusted_overall: int) -> None:
        """Log the aggregated strength used to weight a simulation.

        Parameters
        ----------
        team_name : str
            Label for the team.
        strength : TeamStrength
            Raw positional and overall scores.
        adjusted_overall : int
            Overall score after any home advantage.
        """
        self._write_log(
            "TEAM_STRENGTH",
            f"{team_name} | ATT {strength.attack} | MID {strength.midfield} | "
            f"DEF {strength.defense} | GK {strength.goalkeeping} | "
            f"Overall {strength.overall} (adjusted {adjusted_overall})",
        )

    def log_match_event(self, minute: int, event_type: str, description: str) -> None:
        """Log a match event (goal, card, etc.).

        Parameters
        ----------
        minute : int
            Match minute of the event.
        event_type : str
            Short label identifying the event category.
        description : str
            Human-readable summary of the event.
        """
        self._write_log("MATCH_EVENT", f"Minute: {minute} | Event: {event_type} | Details: {description}")

    def log_statistics(self, statistics: "MatchStatistics") -> None:
        """Log the statistics block attached to a finished match.

        Parameters
        ----------
        statistics : MatchStatistics
            Generated statistics.
        """
        parts = [f"{name} {split['home']}-{split['away']}" for name, split in statistics.to_dict().items()]
        self._write_log("STATISTICS", " | ".join(parts))

    def log_final_score(self, home_name: str, home_score: int, away_score: int, away_name: str) -> None:
        """Log the final result of a simulation.

        Parameters
        ----------
        home_name : str
            Home team label.
        home_score : int
            Goals scored by the home team.
        away_score : int
            Goals scored by the away team.
        away_name : str
            Away team label.
        """
        self._write_log("FINAL_SCORE", f"{home_name} {home_score} - {away_score} {away_name}")

    def log_development(self, player_id: int, performance: int, delta: "AttributeDelta") -> None:
        """Log the attribute changes produced for one player after a match.

        Parameters
        ----------
        player_id : int
            Identifier of the developed player.
        performance : int
            Performance score that sized the improvement.
        delta : AttributeDelta
            New attribute values; may be empty.
        """
        changes = ", ".join(f"{name}={value}" for name, value in delta.items()) or "none"
        self._write_log("DEVELOPMENT", f"Player {player_id} | Performance: {performance} | Changes: {changes}")

    def log_error(self, error_type: str, description: str) -> None:
        """Log an error or warning.

        Parameters
        ----------
        error_type : str
            Label describing the error classification.
        description : str
            Human-readable explanation of the issue.
        """
        self._write_log("ERROR", f"Type: {error_type} | Details: {description}")

    def _write_log(self, event_type: str, details: str) -> None:
        """Write a log entry to the file.

        Parameters
        ----------
        event_type : str
            Category label for the log entry.
        details : str
            Formatted message body to persist.
        """
        timestamp = time.strftime("%H:%M:%S")
        log_entry = f"[{timestamp}] {event_type}: {details}"

        with self._lock:
            line_no = self._line_number
            self._line_number += 1
            self._recent_events.append((line_no, log_entry))

            if self.log_file:
                self.log_file.write(f"{log_entry}\n")
                self.log_file.flush()

    def get_recent_events(self, limit: int = 20) -> List[str]:
        """Return the latest debug entries with line numbers for live displays.

        Parameters
        ----------
        limit : int
            Maximum number of entries to return.

        Returns
        -------
        List[str]
            Up to ``limit`` most recent log lines with prefixed line numbers.
        """
        with self._lock:
            selected = list(self._recent_events)[-limit:]
        return [f"{line_no:05d} {entry}" for line_no, entry in selected]

    def close(self) -> None:
        """Close the log file."""
        if self.log_file:
            self.log_file.close()
            self.log_file = None
