"""The match database and match queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Iterator

from placar.models import Match
from placar.teams import NAME_WIDTH, TeamDatabase, pad_name


class QueryMode(IntEnum):
    """Which side of a match a team must play on to be selected."""

    HOME = 1
    AWAY = 2
    EITHER = 3

    def includes(self, match: Match, team_ids: set[int]) -> bool:
        """Whether the match involves one of the teams on this side."""
        if self is QueryMode.HOME:
            return match.home_id in team_ids
        if self is QueryMode.AWAY:
            return match.away_id in team_ids
        return match.home_id in team_ids or match.away_id in team_ids


def _parse_match(line: str) -> Match | None:
    fields = line.split(",")
    if len(fields) != 5:
        return None
    try:
        return Match(*(int(value) for value in fields))
    except ValueError:
        return None


def _match_header() -> str:
    return f"{'ID':<5} {'Time1':<15} {'Placar':<10} {'Time2':<15}"


@dataclass
class MatchDatabase:
    """All recorded matches, in file order."""

    matches: list[Match] = field(default_factory=list)

    @classmethod
    def load(cls, path: str | Path = "partidas.csv") -> "MatchDatabase":
        """Read matches from a CSV file whose first line is a header.

        Reading stops at the first line that is not five integers.
        """
        matches: list[Match] = []
        with open(path, encoding="utf-8") as handle:
            lines = iter(handle)
            next(lines, None)
            for line in lines:
                if not line.strip():
                    continue
                match = _parse_match(line)
                if match is None:
                    break
                matches.append(match)
        return cls(matches)

    def __iter__(self) -> Iterator[Match]:
        return iter(self.matches)

    def __len__(self) -> int:
        return len(self.matches)

    def select(self, teams: TeamDatabase, mode: int, prefix: str) -> list[Match]:
        """Matches in which a team named with the prefix plays on the side given by mode."""
        query_mode = QueryMode(mode)
        team_ids = {team.id for team in teams.matching(prefix)}
        return [match for match in self.matches if query_mode.includes(match, team_ids)]

    def query(self, teams: TeamDatabase, mode: int, prefix: str) -> str:
        """The match table for the teams named with the prefix."""
        query_mode = QueryMode(mode)
        if not teams.matching(prefix):
            return f"\nNenhum time foi encontrado com o prefixo '{prefix}'. \n"

        names = {team.id: team.name for team in teams}
        rows = [
            f"{match.id:<5} {pad_name(names.get(match.home_id, ''), NAME_WIDTH)} "
            f"{match.home_goals} x {match.away_goals}      "
            f"{pad_name(names.get(match.away_id, ''), NAME_WIDTH)}"
            for match in self.select(teams, query_mode, prefix)
        ]
        if not rows:
            rows.append("Nenhuma partida encontrada para os criterios informados.")
        return "\n".join(["", _match_header(), *rows]) + "\n"