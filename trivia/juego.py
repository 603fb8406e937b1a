"""Menus of the trivia game and its command-line entry point."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass, field
from pathlib import Path

from trivia.console import Console
from trivia.jugador import (
    Player,
    change_dni,
    create_players,
    delete_player,
    find_player,
    load_players,
    merge_results,
    play_round,
    rename_player,
    save_players,
    show_known_players,
)
from trivia.pregunta import Question, load_questions
from trivia.respuesta import load_answers

PLAYERS_FILE = "jugadores.txt"
QUESTIONS_FILE = "preguntas.txt"
ANSWERS_FILE = "respuestas.txt"

_SEPARATOR = "\n- - - - - - - - - - - - - - -\n"
_BACK_TO_MENU = "INGRESE UN NUMERO PARA VOLVER AL MENU\n"
_NO_SUCH_OPTION = "Error! La opcion que intentas ingresar no existe..."

_MAIN_MENU = (
    "\n- - - - BIENVENIDO! - - - -\n"
    "\n1) Jugar\n"
    "\n2) Mostrar Top Global de Puntos\n"
    "\n3) Buscar su usuario\n"
    "\n4) De que se trata el juego?\n"
    "\n5) Salir Del Juego\n"
    "\n- - - - - - - - - - - - - - -\n"
    "\nOPCION:"
)

_EDIT_MENU = (
    _SEPARATOR
    + "\nDesea modificar algun aspecto de su usuario?\n\n"
    "\n1) Modificar Alias\n"
    "\n2) Modificar Dni\n"
    "\n3) Eliminar Usuario\n"
    "\n4) No quiero modificar nada\n"
    + _SEPARATOR
    + "\nOPCION:"
)

_INFO_MENU = (
    _SEPARATOR
    + "\nQue desea saber acerca el Juego?\n"
    "\n1) De que se tratan las preguntas?\n"
    "\n2) Como funciona el sistema de puntuacion?\n"
    "\n3) Que pasa en caso de empate de puntos?\n"
    "\n4) De a cuantos jugadores se puede jugar?\n"
    "\n5) Quien es el creador del juego?\n"
    "\n6) Volver al menu principal\n"
    + _SEPARATOR
    + "\nOPCION:"
)

_INFO_ANSWERS = {
    1: "\nLas preguntas no tienen una tematica exacta, son de cultura general, "
    "futbol, matematicas, etc\n\n",
    2: "\nCada pregunta respondida correctamente suma 15 puntos, si se responde "
    "incorrectamente, empieza a responder el siguiente jugador\n\n",
    3: "\nEn caso de empate, los jugadores que quedaron empatados responderan "
    "una pregunta matematica aleatoria\n\n"
    "El jugador que tenga la menor diferencia con el resultado, ganara un punto "
    "y se hara el desempate\n\n",
    4: "\nSe puede jugar de 2 a 4 jugadores simultaneamente\n\n",
    5: "\nEl creador del juego es el alumno de Licenciatura en Sistemas de la UNLa, "
    "Santino Donato :)\n\n",
}


@dataclass
class Game:
    """The game's menus over the known players and the question bank."""

    console: Console
    known: list[Player]
    questions: list[Question]
    players_path: Path
    rng: random.Random = field(default_factory=random.Random)

    def _pause(self, prefix: str = "") -> None:
        self.console.read_line(prefix + _BACK_TO_MENU)
        self.console.clear()

    def _save(self) -> None:
        save_players(self.known, self.players_path)

    def run_menu(self) -> None:
        """Show the main menu until the player chooses to leave."""
        while True:
            option = self.console.read_int(_MAIN_MENU)
            self.console.clear()
            if option == 5:
                return
            if option == 1:
                self.play()
            elif option == 2:
                show_known_players(self.console, self.known)
            elif option == 3:
                self.edit_menu()
            elif option == 4:
                self.info_menu()
            else:
                self.console.write(_NO_SUCH_OPTION)
            self._pause("\n\n")

    def play(self) -> Player:
        """Play one match, record the results and return the winner."""
        players = create_players(self.console, self.known)
        winner = play_round(self.console, self.questions, players, self.rng)
        merge_results(self.known, players)
        self._save()
        return winner

    def edit_menu(self) -> None:
        """Look a player up by DNI and let them change or delete their record."""
        dni = self.console.read_int("\nIngrese el Dni de su usuario: \n")
        self.console.clear()
        index = find_player(self.known, dni)
        if index is None:
            self.console.write("\nNo se encontro el usuario seleccionado...\n")
            return
        while True:
            option = self.console.read_int(_EDIT_MENU)
            self.console.clear()
            if option == 4:
                return
            removed = False
            if option == 1:
                rename_player(self.console, self.known, index)
                self._save()
            elif option == 2:
                change_dni(self.console, self.known, index)
                self._save()
            elif option == 3:
                removed = delete_player(self.console, self.known, index)
                self._save()
            else:
                self.console.write(_NO_SUCH_OPTION)
            self._pause()
            if removed:
                return

    def info_menu(self) -> None:
        """Answer questions about the rules until the player goes back."""
        while True:
            option = self.console.read_int(_INFO_MENU)
            self.console.clear()
            if option == 6:
                return
            self.console.write(_INFO_ANSWERS.get(option, ""))
            self._pause()


def _load_game(console: Console, directory: Path, rng: random.Random) -> Game:
    players_path = directory / PLAYERS_FILE
    known = load_players(players_path)
    answers = load_answers(directory / ANSWERS_FILE)
    questions = load_questions(directory / QUESTIONS_FILE, answers, rng)
    return Game(console=console, known=known, questions=questions,
                players_path=players_path, rng=rng)


def main(argv: list[str] | None = None) -> int:
    """Start the game from the data files in the given directory."""
    parser = argparse.ArgumentParser(prog="trivia", description="Juego de preguntas.")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=Path("."),
        help="directory holding jugadores.txt, preguntas.txt and respuestas.txt",
    )
    args = parser.parse_args(argv)
    console = Console()
    try:
        game = _load_game(console, args.data_dir, random.Random())
    except OSError:
        console.write("Error al abrir el archivo!!!\n")
        return 1
    try:
        game.run_menu()
    except EOFError:
        console.write("\n")
    return 0