"""Interactive menu for consulting the championship."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence, TextIO

from placar.championship import Championship
from placar.matches import MatchDatabase
from placar.teams import TeamDatabase

CLEAR_SCREEN = "\033[H\033[J"

MAIN_MENU = (
    "\nSistema de Gerenciamento de Partidas\n\n"
    "1 - Consultar time\n"
    "2 - Consultar partidas\n"
    "3 - Atualizar partida\n"
    "4 - Remover partida\n"
    "5 - Inserir partida\n"
    "6 - Imprimir tabela de classificação\n"
    "Q - Sair\n\n"
)

MATCH_MENU = (
    "\nEscolha o modo de consulta:\n"
    "1 - Por time mandante\n"
    "2 - Por time visitante\n"
    "3 - Por time mandante ou visitante\n"
    "4 - Retornar ao menu principal\n\n"
)

TEAM_PROMPT = "Digite o nome ou prefixo do time: "
MATCH_PROMPT = "Digite o nome: "
NOT_IMPLEMENTED = "\nFuncionalidade ainda não implementada\n"
INVALID_OPTION = "\nselecione uma opção válida \n"
INVALID_MODE = "selecione uma opção válida\n"


class _Console:
    """Reads single characters and words from a text stream, scanf-style."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pushback = ""

    def _getc(self) -> str:
        if self._pushback:
            char, self._pushback = self._pushback, ""
            return char
        return self._stream.read(1)

    def _skip_space(self) -> str:
        while True:
            char = self._getc()
            if not char or not char.isspace():
                return char

    def read_char(self) -> str | None:
        """The next non-blank character, or None at end of input."""
        return self._skip_space() or None

    def read_word(self) -> str | None:
        """The next run of non-blank characters, or None at end of input."""
        char = self._skip_space()
        if not char:
            return None
        chars = [char]
        while True:
            char = self._getc()
            if not char:
                break
            if char.isspace():
                self._pushback = char
                break
            chars.append(char)
        return "".join(chars)

    def discard_line(self) -> None:
        """Drop everything up to and including the next newline."""
        while (char := self._getc()) and char != "\n":
            pass


def _match_menu(championship: Championship, console: _Console, write) -> bool:
    """Run the match sub-menu; False means input ran out."""
    while True:
        write(MATCH_MENU)
        choice = console.read_char()
        if choice is None:
            return False
        console.discard_line()
        write(CLEAR_SCREEN)
        if choice in ("1", "2", "3"):
            write(MATCH_PROMPT)
            prefix = console.read_word()
            if prefix is None:
                return False
            write(championship.query_matches(int(choice), prefix))
        elif choice == "4":
            return True
        else:
            write(INVALID_MODE)


def run(championship: Championship, input_stream: TextIO, output_stream: TextIO) -> None:
    """Drive the main menu until the user quits or input ends."""
    console = _Console(input_stream)
    write = output_stream.write
    while True:
        write(MAIN_MENU)
        option = console.read_char()
        if option is None:
            return
        console.discard_line()
        write(CLEAR_SCREEN)
        if option == "1":
            write(TEAM_PROMPT)
            prefix = console.read_word()
            if prefix is None:
                return
            write(championship.query_teams(prefix))
        elif option == "2":
            if not _match_menu(championship, console, write):
                return
        elif option in ("3", "4", "5"):
            write(NOT_IMPLEMENTED)
        elif option == "6":
            write(championship.standings())
        elif option in ("Q", "q"):
            return
        else:
            write(INVALID_OPTION)


def main(argv: Sequence[str] | None = None) -> int:
    """Load times.csv and partidas.csv from the working directory and start the menu."""
    parser = argparse.ArgumentParser(
        prog="placar",
        description="Consulta de times, partidas e tabela de classificação.",
    )
    parser.parse_args(argv)

    try:
        teams = TeamDatabase.load("times.csv")
    except OSError:
        print("Erro ao abrir o arquivo times.csv")
        teams = TeamDatabase()
    try:
        matches = MatchDatabase.load("partidas.csv")
    except OSError:
        print("Erro ao abrir o arquivo partidas.csv")
        matches = MatchDatabase()

    championship = Championship(teams, matches)
    championship.apply_results()

    sys.stdout.write(CLEAR_SCREEN)
    run(championship, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())