"""A championship: teams, matches and the results derived from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from placar.matches import MatchDatabase
from placar.teams import TeamDatabase


@dataclass
class Championship:
    """Teams and matches kept together, with results applied to the teams."""

    teams: TeamDatabase = field(default_factory=TeamDatabase)
    matches: MatchDatabase = field(default_factory=MatchDatabase)

    @classmethod
    def load(
        cls,
        teams_path: str | Path = "times.csv",
        matches_path: str | Path = "partidas.csv",
    ) -> "Championship":
        """Load both files and tally every match into the team records."""
        championship = cls(TeamDatabase.load(teams_path), MatchDatabase.load(matches_path))
        championship.apply_results()
        return championship

    def apply_results(self) -> None:
        """Add each match's goals, wins, draws and losses to its two teams."""
        for match in self.matches:
            home = self.teams.find_by_id(match.home_id)
            away = self.teams.find_by_id(match.away_id)

            home.goals_for += match.home_goals
            home.goals_against += match.away_goals
            away.goals_for += match.away_goals
            away.goals_against += match.home_goals

            if match.home_goals > match.away_goals:
                home.wins += 1
                away.losses += 1
            elif match.home_goals < match.away_goals:
                home.losses += 1
                away.wins += 1
            else:
                home.draws += 1
                away.draws += 1

    def query_teams(self, prefix: str) -> str:
        """The team table for names with the prefix."""
        return self.teams.query(prefix)

    def query_matches(self, mode: int, prefix: str) -> str:
        """The match table for teams with the prefix, on the side given by mode."""
        return self.matches.query(self.teams, mode, prefix)

    def standings(self) -> str:
        """The full team table."""
        return self.teams.standings()