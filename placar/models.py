"""Core records of the championship: teams and matches."""

from __future__ import annotations

from dataclasses import dataclass

POINTS_PER_WIN = 3
POINTS_PER_DRAW = 1


@dataclass
class Team:
    """A team together with its accumulated results."""

    id: int
    name: str
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals_for: int = 0
    goals_against: int = 0

    def points(self) -> int:
        """Points earned: three per win, one per draw."""
        return self.wins * POINTS_PER_WIN + self.draws * POINTS_PER_DRAW

    def goal_difference(self) -> int:
        """Goals scored minus goals conceded."""
        return self.goals_for - self.goals_against


@dataclass(frozen=True)
class Match:
    """The raw result of a single match."""

    id: int
    home_id: int
    away_id: int
    home_goals: int
    away_goals: int