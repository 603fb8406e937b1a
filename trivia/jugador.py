"""Players, the players file and the flow of a match."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from os import PathLike
from typing import Mapping, Sequence

from trivia.console import Console
from trivia.pregunta import Question, random_question
from trivia.puntos import Score
from trivia.respuesta import _atoi, correct_number

MIN_PLAYERS = 2
MAX_PLAYERS = 4
MIN_ANSWER = 1
MAX_ANSWER = 4
_HEADER = "\n- - - JUGADOR - - -\n"


@dataclass
class Player:
    """A player known by alias and DNI, with a score."""

    alias: str
    dni: int
    score: Score = field(default_factory=Score)

    def describe_record(self) -> str:
        """Return the player as shown in the all-time list."""
        return (
            f"{_HEADER}\nALIAS: {self.alias} | DNI: {self.dni} | "
            f"MAX PUNTUACION: {self.score.best}\n"
        )

    def describe_match(self) -> str:
        """Return the player as shown at the end of a match."""
        return (
            f"{_HEADER}\nALIAS: {self.alias} | DNI: {self.dni} | "
            f"PUNTUACION FINAL: {self.score.current}\n"
        )


def parse_player(line: str) -> Player:
    """Parse an 'alias;dni;best' line."""
    parts = line.rstrip("\r\n").split(";", 2)
    if len(parts) < 3:
        raise ValueError(f"malformed player line: {line!r}")
    alias, dni, best = parts
    return Player(alias=alias, dni=_atoi(dni), score=Score(best=_atoi(best)))


def format_player_record(player: Player) -> str:
    """Return the player as a line of the players file, without line ending."""
    return f"{player.alias};{player.dni};{player.score.best}"


def load_players(path: str | PathLike[str]) -> list[Player]:
    """Read the players file; later lines come first, players with DNI 0 are skipped."""
    players: list[Player] = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            if not line.strip():
                continue
            player = parse_player(line)
            if player.dni != 0:
                players.insert(0, player)
    return players


def save_players(players: Sequence[Player], path: str | PathLike[str]) -> None:
    """Write every player to the players file."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write("\n".join(format_player_record(player) for player in players))


def find_player(players: Sequence[Player], dni: int) -> int | None:
    """Return the index of the last player with this DNI, or None."""
    found = None
    for index, player in enumerate(players):
        if player.dni == dni:
            found = index
    return found


def show_known_players(console: Console, players: Sequence[Player]) -> None:
    """Show the all-time list of players."""
    if not players:
        console.write("No hay datos previos de ningun jugador...\n")
        return
    for player in players:
        if player.dni != 0:
            console.write(player.describe_record())
    console.write("\n")


def show_match_players(console: Console, players: Sequence[Player]) -> None:
    """Show the players of the match with their final scores."""
    for player in players:
        if player.dni != -1:
            console.write(player.describe_match())
    console.write("\n")


def create_player(console: Console, known: Sequence[Player]) -> Player:
    """Ask for a DNI and, for a new player, an alias."""
    dni = console.read_int("Ingrese su dni:\n")
    index = find_player(known, dni)
    if index is None:
        alias = console.read_line("Ingrese su alias:\n")
    else:
        alias = known[index].alias
        console.write(
            f"Ya jugaste una vez al juego, tu alias es: {alias} "
            "(Se puede cambiar desde el menu principal)\n"
        )
    return Player(alias=alias, dni=dni)


def create_players(console: Console, known: Sequence[Player]) -> list[Player]:
    """Ask how many play (2 to 4) and create each of them."""
    prompt = "\nIngrese la cantidad de jugadores que van a jugar(2 a 4 Jugadores!)\n"
    count = console.read_int(prompt)
    while not MIN_PLAYERS <= count <= MAX_PLAYERS:
        console.write("\nERROR, cantidad de jugadores invalida, vuelva a intentar...\n")
        count = console.read_int(prompt)
    console.clear()
    players = []
    for number in range(1, count + 1):
        console.write(f"\nCreando Jugador {number}\n")
        players.append(create_player(console, known))
    return players


def _read_answer(console: Console) -> int:
    answer = console.read_int("\nRespuesta Final: ")
    while not MIN_ANSWER <= answer <= MAX_ANSWER:
        console.write("\nNumero de respuesta invalida, ingrese nuevamente...\n")
        answer = console.read_int("\nRespuesta Final: ")
    return answer


def play_round(
    console: Console,
    questions: Sequence[Question],
    players: Sequence[Player],
    rng: random.Random,
) -> Player:
    """Let each player answer until they miss, then announce and return the winner."""
    for number, player in enumerate(players, 1):
        console.write(f"\n---Turno del jugador {number} ({player.alias})---\n")
        while True:
            question = random_question(questions, rng)
            console.write(question.describe())
            correct = correct_number(question.answers)
            if _read_answer(console) == correct:
                console.write("\nCorrecto!\n")
                player.score.add()
            else:
                console.write("\nIncorrecto :(\n")
                break
    console.clear()
    console.write("\nFIN DEL JUEGO\n")
    show_match_players(console, players)
    return announce_winner(console, players, rng)


def leader_index(players: Sequence[Player]) -> int:
    """Return the index of the first player with the highest current score."""
    if not players:
        raise ValueError("there are no players")
    best = 0
    for index, player in enumerate(players):
        if player.score.current > players[best].score.current:
            best = index
    return best


def is_tie(players: Sequence[Player], maximum: int) -> bool:
    """Tell whether two or more players have the given score."""
    return sum(1 for player in players if player.score.current == maximum) >= 2


def tiebreak_question(rng: random.Random) -> tuple[str, int]:
    """Make an 'a + b * c' question and return its text and result."""
    a = rng.randrange(151)
    b = rng.randrange(151)
    c = rng.randrange(91)
    return f"{a} + {b} * {c}", a + b * c


def resolve_tiebreak(
    players: Sequence[Player], maximum: int, correct: int, answers: Mapping[int, int]
) -> int:
    """Give a point to the tied player whose answer is closest and return its index.

    ``answers`` maps the index of each tied player to its answer; the first
    player in order wins when distances are equal.
    """
    winner = None
    smallest = None
    for index, player in enumerate(players):
        if player.score.current != maximum:
            continue
        if index not in answers:
            raise ValueError(f"no tiebreak answer for player {index + 1}")
        distance = abs(answers[index] - correct)
        if smallest is None or distance < smallest:
            winner, smallest = index, distance
    if winner is None:
        raise ValueError(f"no player has {maximum} points")
    players[winner].score.current += 1
    return winner


def tiebreak(
    console: Console, players: Sequence[Player], maximum: int, rng: random.Random
) -> int:
    """Ask the tied players a math question and return the index of the winner."""
    text, correct = tiebreak_question(rng)
    console.write(f"\n{text}\n")
    answers = {}
    for index, player in enumerate(players):
        if player.score.current == maximum:
            console.write(f"\nResponde el jugador {index + 1} ({player.alias})\n")
            answers[index] = console.read_int("\nRespuesta Final: ")
    console.write(f"\nEl resultado es: {correct}\n")
    return resolve_tiebreak(players, maximum, correct, answers)


def announce_winner(
    console: Console, players: Sequence[Player], rng: random.Random
) -> Player:
    """Find the winner, breaking ties, announce and return it."""
    winner = leader_index(players)
    maximum = players[winner].score.current
    if is_tie(players, maximum):
        console.clear()
        console.write("\nHay Empate!!\n")
        while is_tie(players, maximum):
            winner = tiebreak(console, players, maximum, rng)
            maximum = players[winner].score.current
    champion = players[winner]
    console.write(f"\nEl ganador es: {champion.alias}, Felicidades!!\n")
    return champion


def merge_results(known: list[Player], players: Sequence[Player]) -> None:
    """Update best scores of known players and add the new ones."""
    for player in players:
        index = find_player(known, player.dni)
        if index is None:
            player.score.finalize()
            known.append(player)
        else:
            record = known[index]
            if player.score.current > record.score.best:
                record.score.best = player.score.current


def rename_player(console: Console, players: Sequence[Player], index: int) -> None:
    """Ask for a new alias for the player at index."""
    players[index].alias = console.read_line("\nIngrese el nuevo Alias: \n")


def change_dni(console: Console, players: Sequence[Player], index: int) -> None:
    """Ask for a new DNI for the player at index."""
    players[index].dni = console.read_int("\nIngrese el nuevo Dni: \n")


def delete_player(console: Console, players: list[Player], index: int) -> bool:
    """Ask for confirmation and remove the player at index; return whether it was removed."""
    console.write(
        f"\nEsta seguro que desea eliminar el usuario '{players[index].alias}'?\n"
        "1) Si, estoy seguro.\n"
        "2) No, me arrepenti.\n"
    )
    if console.read_int() == 1:
        del players[index]
        return True
    return False