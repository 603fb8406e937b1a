import io
import random
import sys

import pytest

from trivia.console import Console
from trivia.juego import Game, main
from trivia.jugador import Player
from trivia.pregunta import Question, attach_answers
from trivia.puntos import Score
from trivia.respuesta import Answer, correct_number


def _question(rng):
    answers = [
        Answer(number=1, text="Paris", question_number=1, correct=True),
        Answer(number=2, text="Roma", question_number=1, correct=False),
        Answer(number=3, text="Lima", question_number=1, correct=False),
        Answer(number=4, text="Oslo", question_number=1, correct=False),
    ]
    return attach_answers(Question(number=1, text="Capital de Francia?"), answers, rng)


def _game(tmp_path, text):
    out = io.StringIO()
    console = Console(stdin=io.StringIO(text), stdout=out)
    rng = random.Random(0)
    known = [Player(alias="ana", dni=111, score=Score(best=30))]
    game = Game(
        console=console,
        known=known,
        questions=[_question(rng)],
        players_path=tmp_path / "jugadores.txt",
        rng=rng,
    )
    return game, out


def test_exit_immediately(tmp_path):
    game, out = _game(tmp_path, "5\n")
    game.run_menu()
    assert "BIENVENIDO" in out.getvalue()
    assert "INGRESE UN NUMERO" not in out.getvalue()


def test_show_top_players(tmp_path):
    game, out = _game(tmp_path, "2\n\n5\n")
    game.run_menu()
    assert "ALIAS: ana | DNI: 111 | MAX PUNTUACION: 30" in out.getvalue()


def test_unknown_option(tmp_path):
    game, out = _game(tmp_path, "9\n\n5\n")
    game.run_menu()
    assert "Error! La opcion que intentas ingresar no existe..." in out.getvalue()


def test_info_menu(tmp_path):
    game, out = _game(tmp_path, "4\n\n6\n")
    game.info_menu()
    assert "Se puede jugar de 2 a 4 jugadores simultaneamente" in out.getvalue()


def test_edit_rename(tmp_path):
    game, _ = _game(tmp_path, "111\n1\nbea\n\n4\n")
    game.edit_menu()
    assert game.known[0].alias == "bea"
    assert (tmp_path / "jugadores.txt").read_text(encoding="utf-8") == "bea;111;30"


def test_edit_change_dni(tmp_path):
    game, _ = _game(tmp_path, "111\n2\n222\n\n4\n")
    game.edit_menu()
    assert game.known[0].dni == 222


def test_edit_not_found(tmp_path):
    game, out = _game(tmp_path, "999\n")
    game.edit_menu()
    assert "No se encontro el usuario seleccionado" in out.getvalue()


def test_edit_delete(tmp_path):
    game, _ = _game(tmp_path, "111\n3\n1\n\n")
    game.edit_menu()
    assert game.known == []
    assert (tmp_path / "jugadores.txt").read_text(encoding="utf-8") == ""


def test_edit_delete_declined(tmp_path):
    game, _ = _game(tmp_path, "111\n3\n2\n\n4\n")
    game.edit_menu()
    assert [p.alias for p in game.known] == ["ana"]


def test_play_records_results(tmp_path):
    rng = random.Random(0)
    correct = correct_number(_question(rng).answers)
    wrong = 1 if correct != 1 else 2
    text = f"2\n111\n222\ncarl\n{correct}\n{wrong}\n{wrong}\n"
    game, out = _game(tmp_path, text)
    winner = game.play()
    assert winner.alias == "ana"
    assert "El ganador es: ana, Felicidades!!" in out.getvalue()
    saved = (tmp_path / "jugadores.txt").read_text(encoding="utf-8")
    assert saved == "ana;111;30\ncarl;222;0"


def test_main_exits(tmp_path, monkeypatch, capsys):
    (tmp_path / "jugadores.txt").write_text("ana;111;30", encoding="utf-8")
    (tmp_path / "respuestas.txt").write_text(
        "1;Si;1;1\n2;No;1;0\n3;Tal vez;1;0\n4;Nunca;1;0\n", encoding="utf-8"
    )
    (tmp_path / "preguntas.txt").write_text("1;Pregunta?\n", encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", io.StringIO("2\n\n5\n"))
    assert main(["--data-dir", str(tmp_path)]) == 0
    assert "ALIAS: ana | DNI: 111 | MAX PUNTUACION: 30" in capsys.readouterr().out


def test_main_missing_files(tmp_path, capsys):
    assert main(["--data-dir", str(tmp_path)]) == 1
    assert "Error al abrir el archivo!!!" in capsys.readouterr().out


def test_play_without_questions_raises(tmp_path):
    game, _ = _game(tmp_path, "2\n111\n222\ncarl\n1\n")
    game.questions = []
    with pytest.raises(ValueError):
        game.play()