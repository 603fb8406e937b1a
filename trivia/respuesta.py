"""Answers to trivia questions and the answers file."""

from __future__ import annotations

import random
import re
from dataclasses import dataclass, replace
from os import PathLike
from typing import Iterable

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class Answer:
    """One possible answer, tied to a question by its number."""

    number: int
    text: str
    question_number: int
    correct: bool

    def describe(self) -> str:
        """Return the answer as it is shown to players."""
        return f"{self.number}) {self.text}"


def parse_answer(line: str) -> Answer:
    """Parse a 'number;text;question;correct' line."""
    parts = line.rstrip("\r\n").split(";", 3)
    if len(parts) < 4:
        raise ValueError(f"malformed answer line: {line!r}")
    number, text, question, correct = parts
    return Answer(
        number=_atoi(number),
        text=text,
        question_number=_atoi(question),
        correct=_atoi(correct) == 1,
    )


def load_answers(path: str | PathLike[str]) -> list[Answer]:
    """Read every answer from the answers file."""
    with open(path, encoding="utf-8") as handle:
        return [parse_answer(line) for line in handle if line.strip()]


def shuffle_answers(answers: Iterable[Answer], rng: random.Random) -> list[Answer]:
    """Return the answers in random order, renumbered from 1."""
    keyed = [(rng.randrange(100), answer) for answer in answers]
    keyed.sort(key=lambda pair: pair[0], reverse=True)
    return [replace(answer, number=position) for position, (_, answer) in enumerate(keyed, 1)]


def correct_number(answers: Iterable[Answer]) -> int | None:
    """Return the number of the correct answer, or None if none is marked correct."""
    found = None
    for answer in answers:
        if answer.correct:
            found = answer.number
    return found