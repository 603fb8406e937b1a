"""Trivia questions and the questions file."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from os import PathLike
from typing import Sequence

from trivia.respuesta import Answer, _atoi, shuffle_answers

MAX_ANSWERS = 4


@dataclass
class Question:
    """A question with its possible answers in display order."""

    number: int
    text: str
    answers: list[Answer] = field(default_factory=list)

    def describe(self) -> str:
        """Return the question and its answers as shown to players."""
        lines = [f"\n{self.text}"]
        lines.extend(answer.describe() for answer in self.answers)
        return "\n".join(lines) + "\n\n"


def parse_question(line: str) -> Question:
    """Parse a 'number;text' line."""
    number, sep, text = line.rstrip("\r\n").partition(";")
    if not sep:
        raise ValueError(f"malformed question line: {line!r}")
    return Question(number=_atoi(number), text=text)


def attach_answers(
    question: Question, answers: Sequence[Answer], rng: random.Random
) -> Question:
    """Give the question its own answers, shuffled, and return it."""
    slots: dict[int, Answer] = {}
    for answer in answers:
        if answer.question_number != question.number:
            continue
        if not 1 <= answer.number <= MAX_ANSWERS:
            raise ValueError(
                f"answer number {answer.number} out of range for question {question.number}"
            )
        slots[answer.number] = answer
    question.answers = shuffle_answers((slots[k] for k in sorted(slots)), rng)
    return question


def load_questions(
    path: str | PathLike[str], answers: Sequence[Answer], rng: random.Random
) -> list[Question]:
    """Read every question from the questions file and attach its answers."""
    with open(path, encoding="utf-8") as handle:
        return [
            attach_answers(parse_question(line), answers, rng)
            for line in handle
            if line.strip()
        ]


def random_question(questions: Sequence[Question], rng: random.Random) -> Question:
    """Pick one question at random."""
    if not questions:
        raise ValueError("there are no questions to ask")
    return rng.choice(questions)