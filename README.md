# placar

`placar` reads the teams and matches of a football championship from two CSV
files. From them it works out each team's record. It then answers queries from
an interactive menu in the terminal. The menu and its messages are in
Portuguese.

## Installation

```
pip install .
```

## Data files

`times.csv` holds the teams. The first line is a header. Each row after it has
an integer ID and a name:

```
ID,Nome
1,Flamengo
2,São Paulo
```

`partidas.csv` holds the matches. The first line is a header. Each row after it
has five integers: the match ID, the home team ID, the away team ID, the home
goals and the away goals:

```
ID,Time1ID,Time2ID,GolsTime1,GolsTime2
1,1,2,2,1
```

Both files are read as UTF-8. Blank lines are skipped. Reading stops at the
first row that does not have the expected shape. Every team ID used in
`partidas.csv` must appear in `times.csv`. If it does not, a `KeyError` is
raised when the results are tallied.

## Usage

Run the command from the directory that holds both files:

```
placar
```

If a file cannot be opened, an error message is printed. The program then
carries on with that file's data empty.

The main menu reads one character per choice:

- `1`: asks for a name or name prefix and lists the matching teams. The
  comparison ignores case for ASCII letters.
- `2`: opens a sub-menu for looking up matches by team prefix:
  - `1`: the team plays at home.
  - `2`: the team plays away.
  - `3`: the team plays either at home or away.
  - `4`: returns to the main menu.
- `6`: prints the standings table. Teams appear in file order.
- `Q` or `q`: quit. The program also stops when input runs out.

For each team, the tables show wins (V), draws (E), losses (D), goals scored
(GM), goals conceded (GS), goal difference (S) and points (PG). A win is worth
three points and a draw is worth one.

## Library use

```python
from placar.championship import Championship
from placar.matches import QueryMode

champ = Championship.load("times.csv", "partidas.csv")  # results already tallied
print(champ.standings())
print(champ.query_teams("fla"))
print(champ.query_matches(QueryMode.HOME, "fla"))
```

`Championship.load` reads both files and calls `apply_results` once. Call
`apply_results` yourself only on a `Championship` built directly from a
`TeamDatabase` and a `MatchDatabase`. Calling it a second time counts every
match twice.

Other pieces you can use directly:

- `TeamDatabase`: `load`, `find_by_id`, `matching`, `query` and `standings`.
- `MatchDatabase`: `load`, `select` (returns `Match` records) and `query`.
- `models.Team`: has `points()` and `goal_difference()`.
- `models.Match`
- `cli.run(championship, input_stream, output_stream)`: drives the menu over
  any pair of text streams.

The query methods return the formatted table as a string.

## What it does not do

Options `3`, `4` and `5` (update, remove and insert a match) only print a
message saying that the feature is not implemented. The data files are never
written to. Changes to the championship must be made by editing the CSV
files. The standings table is not sorted by points.