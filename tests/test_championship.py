import pytest

from placar.championship import Championship
from placar.matches import MatchDatabase
from placar.models import Match, Team
from placar.teams import TeamDatabase


@pytest.fixture
def files(tmp_path):
    teams = tmp_path / "times.csv"
    teams.write_text("ID,Nome\n1,Flamengo\n2,São Paulo\n3,Santos\n", encoding="utf-8")
    matches = tmp_path / "partidas.csv"
    matches.write_text(
        "ID,Time1ID,Time2ID,GolsTime1,GolsTime2\n1,1,2,3,1\n2,2,3,0,0\n3,3,1,2,1\n",
        encoding="utf-8",
    )
    return teams, matches


@pytest.fixture
def championship(files):
    return Championship.load(*files)


def test_home_win_is_recorded():
    champ = Championship(TeamDatabase([Team(1, "A"), Team(2, "B")]), MatchDatabase([Match(1, 1, 2, 3, 1)]))
    champ.apply_results()
    home, away = champ.teams.find_by_id(1), champ.teams.find_by_id(2)
    assert (home.wins, home.losses, home.goals_for, home.goals_against) == (1, 0, 3, 1)
    assert (away.wins, away.losses, away.goals_for, away.goals_against) == (0, 1, 1, 3)


def test_draw_is_recorded_for_both():
    champ = Championship(TeamDatabase([Team(1, "A"), Team(2, "B")]), MatchDatabase([Match(1, 1, 2, 2, 2)]))
    champ.apply_results()
    assert [t.draws for t in champ.teams] == [1, 1]
    assert [t.points() for t in champ.teams] == [1, 1]


def test_away_win_is_recorded():
    champ = Championship(TeamDatabase([Team(1, "A"), Team(2, "B")]), MatchDatabase([Match(1, 1, 2, 0, 4)]))
    champ.apply_results()
    assert champ.teams.find_by_id(2).wins == 1
    assert champ.teams.find_by_id(1).losses == 1


def test_totals_balance(championship):
    teams = list(championship.teams)
    assert sum(t.wins for t in teams) == sum(t.losses for t in teams)
    assert sum(t.goals_for for t in teams) == sum(t.goals_against for t in teams)
    assert sum(t.goals_for for t in teams) == sum(m.home_goals + m.away_goals for m in championship.matches)
    assert sum(t.goal_difference() for t in teams) == 0


def test_games_played_match_appearances(championship):
    for team in championship.teams:
        appearances = sum(team.id in (m.home_id, m.away_id) for m in championship.matches)
        assert team.wins + team.draws + team.losses == appearances


def test_santos_points(championship):
    assert championship.teams.find_by_id(3).points() == 4


def test_unknown_team_in_match_raises():
    champ = Championship(TeamDatabase([Team(1, "A")]), MatchDatabase([Match(1, 1, 9, 0, 0)]))
    with pytest.raises(KeyError):
        champ.apply_results()


def test_query_teams_delegates(championship):
    assert championship.query_teams("san") == championship.teams.query("san")
    assert "Santos" in championship.query_teams("san")


def test_query_matches_delegates(championship):
    assert championship.query_matches(3, "são") == championship.matches.query(championship.teams, 3, "são")


def test_standings_lists_all(championship):
    text = championship.standings()
    assert all(t.name in text for t in championship.teams)


def test_load_missing_file_raises(tmp_path, files):
    with pytest.raises(FileNotFoundError):
        Championship.load(files[0], tmp_path / "nothing.csv")