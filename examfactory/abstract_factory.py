"""Families of evaluators, one factory per exam."""

from __future__ import annotations

import argparse
import sys
from abc import ABC, abstractmethod
from typing import Sequence, TextIO

from .evaluators import Evaluator, Exam, QuestionType, make_evaluator


class EvaluatorFactory(ABC):
    """Creates the evaluator for every question type of one exam."""

    @property
    @abstractmethod
    def exam(self) -> Exam:
        """The exam whose evaluators this factory creates."""

    def _create(self, question_type: QuestionType) -> Evaluator:
        return make_evaluator(self.exam, question_type)

    def create_mcq(self) -> Evaluator:
        """Create the multiple-choice evaluator."""
        return self._create(QuestionType.MCQ)

    def create_fillin(self) -> Evaluator:
        """Create the fill-in evaluator."""
        return self._create(QuestionType.FILLIN)

    def create_essay(self) -> Evaluator:
        """Create the essay evaluator."""
        return self._create(QuestionType.ESSAY)

    def create_true_false(self) -> Evaluator:
        """Create the true/false evaluator."""
        return self._create(QuestionType.TRUE_FALSE)

    def create_coding(self) -> Evaluator:
        """Create the coding evaluator."""
        return self._create(QuestionType.CODING)


class GateEvaluatorFactory(EvaluatorFactory):
    """Evaluators for GATE."""

    exam = Exam.GATE


class JeeEvaluatorFactory(EvaluatorFactory):
    """Evaluators for JEE."""

    exam = Exam.JEE


class IeltsEvaluatorFactory(EvaluatorFactory):
    """Evaluators for IELTS."""

    exam = Exam.IELTS


_DEMO: tuple[tuple[type[EvaluatorFactory], tuple[str, str, str, str, str]], ...] = (
    (
        GateEvaluatorFactory,
        ("A", "gate class", "This is how factory method works", "True", "find min k"),
    ),
    (
        JeeEvaluatorFactory,
        ("A", "jee class", "This is how factory method works", "False", "find max k"),
    ),
    (
        IeltsEvaluatorFactory,
        ("A", "ielts class", "This is how factory method works", "False", "dummy"),
    ),
)


def _run_demo(out: TextIO) -> list[str]:
    lines = []
    for factory_class, answers in _DEMO:
        factory = factory_class()
        creators = (
            factory.create_mcq,
            factory.create_fillin,
            factory.create_essay,
            factory.create_true_false,
            factory.create_coding,
        )
        for create, answer in zip(creators, answers):
            lines.append(create().evaluate(answer, out))
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate a sample answer of every kind for every exam."""
    parser = argparse.ArgumentParser(
        prog="examfactory-abstract",
        description="Evaluate sample answers through one factory per exam.",
    )
    parser.parse_args(argv)
    _run_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())