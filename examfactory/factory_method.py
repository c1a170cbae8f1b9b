"""One factory per question type, parameterised by exam."""

from __future__ import annotations

import argparse
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence, TextIO

from .evaluators import Evaluator, Exam, QuestionType, make_evaluator


@dataclass(frozen=True)
class ExamFactory(ABC):
    """Creates the evaluator of one question type for one exam."""

    exam: Exam

    def __post_init__(self) -> None:
        object.__setattr__(self, "exam", Exam.coerce(self.exam))

    @property
    @abstractmethod
    def question_type(self) -> QuestionType:
        """The question type whose evaluators this factory creates."""

    def create_evaluator(self) -> Evaluator:
        """Create the evaluator for this factory's exam and question type."""
        return make_evaluator(self.exam, self.question_type)


@dataclass(frozen=True)
class McqFactory(ExamFactory):
    """Creates multiple-choice evaluators."""

    question_type = QuestionType.MCQ


@dataclass(frozen=True)
class FillinFactory(ExamFactory):
    """Creates fill-in evaluators."""

    question_type = QuestionType.FILLIN


@dataclass(frozen=True)
class EssayFactory(ExamFactory):
    """Creates essay evaluators."""

    question_type = QuestionType.ESSAY


@dataclass(frozen=True)
class TrueFalseFactory(ExamFactory):
    """Creates true/false evaluators."""

    question_type = QuestionType.TRUE_FALSE


@dataclass(frozen=True)
class CodingFactory(ExamFactory):
    """Creates coding evaluators."""

    question_type = QuestionType.CODING


_FACTORY_CLASSES: tuple[type[ExamFactory], ...] = (
    McqFactory,
    FillinFactory,
    EssayFactory,
    TrueFalseFactory,
    CodingFactory,
)

_DEMO: tuple[tuple[Exam, tuple[str, str, str, str, str]], ...] = (
    (
        Exam.GATE,
        ("A", "gate class", "This is how factory method works", "True", "int main()"),
    ),
    (
        Exam.JEE,
        ("A", "jee class", "This is how factory method works", "False", "int main()"),
    ),
    (
        Exam.IELTS,
        ("C", "ielts class", "This is how IELTS evaluates essays", "True", "int main()"),
    ),
)


def _run_demo(out: TextIO) -> list[str]:
    lines = []
    for exam, answers in _DEMO:
        for factory_class, answer in zip(_FACTORY_CLASSES, answers):
            evaluator = factory_class(exam).create_evaluator()
            lines.append(evaluator.evaluate(answer, out))
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate a sample answer of every kind for every exam."""
    parser = argparse.ArgumentParser(
        prog="examfactory-method",
        description="Evaluate sample answers through one factory per question type.",
    )
    parser.parse_args(argv)
    _run_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())