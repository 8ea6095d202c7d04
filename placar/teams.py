"""The team database: loading, lookup and tabular output."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from placar.models import Team

NAME_WIDTH = 15
COLUMN_WIDTH = 5
_HEADER_LABELS = ("ID", "Time", "V", "E", "D", "GM", "GS", "S", "PG")
_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def pad_name(name: str, width: int) -> str:
    """Left-justify a name to a width counted in visible characters."""
    return name.ljust(width)


def team_table_header() -> str:
    """The header line of the team table."""
    first, name, *rest = _HEADER_LABELS
    return " ".join(
        [f"{first:<{COLUMN_WIDTH}}", f"{name:<{NAME_WIDTH}}", *(f"{label:<{COLUMN_WIDTH}}" for label in rest)]
    )


def format_team_row(team: Team) -> str:
    """One line of the team table for the given team."""
    values = (
        team.wins,
        team.draws,
        team.losses,
        team.goals_for,
        team.goals_against,
        team.goal_difference(),
        team.points(),
    )
    return " ".join(
        [
            f"{team.id:<{COLUMN_WIDTH}}",
            pad_name(team.name, NAME_WIDTH),
            *(f"{value:<{COLUMN_WIDTH}}" for value in values),
        ]
    )


def has_prefix(name: str, prefix: str) -> bool:
    """Case-insensitive (ASCII letters only) prefix test."""
    return name[: len(prefix)].translate(_ASCII_FOLD) == prefix.translate(_ASCII_FOLD)


def _parse_team(line: str) -> Team | None:
    id_text, sep, name = line.rstrip("\n").partition(",")
    if not sep or not name:
        return None
    try:
        team_id = int(id_text)
    except ValueError:
        return None
    return Team(team_id, name)


def _table(rows: list[str]) -> str:
    return "\n".join(["", team_table_header(), *rows]) + "\n"


@dataclass
class TeamDatabase:
    """All registered teams, in file order."""

    teams: list[Team] = field(default_factory=list)

    @classmethod
    def load(cls, path: str | Path = "times.csv") -> "TeamDatabase":
        """Read teams from a CSV file whose first line is a header.

        Reading stops at the first line that is not ``id,name``.
        """
        teams: list[Team] = []
        with open(path, encoding="utf-8") as handle:
            lines = iter(handle)
            next(lines, None)
            for line in lines:
                if not line.strip():
                    continue
                team = _parse_team(line)
                if team is None:
                    break
                teams.append(team)
        return cls(teams)

    def __iter__(self) -> Iterator[Team]:
        return iter(self.teams)

    def __len__(self) -> int:
        return len(self.teams)

    def find_by_id(self, team_id: int) -> Team:
        """Return the first team with the given id; raise KeyError if absent."""
        for team in self.teams:
            if team.id == team_id:
                return team
        raise KeyError(team_id)

    def matching(self, prefix: str) -> list[Team]:
        """Teams whose name starts with the prefix, ignoring ASCII case."""
        return [team for team in self.teams if has_prefix(team.name, prefix)]

    def query(self, prefix: str) -> str:
        """The team table restricted to names with the prefix."""
        rows = [format_team_row(team) for team in self.matching(prefix)]
        if not rows:
            rows.append(f"Erro: Nenhum time encontrado com o prefixo '{prefix}'.")
        return _table(rows)

    def standings(self) -> str:
        """The full team table."""
        return _table([format_team_row(team) for team in self.teams])