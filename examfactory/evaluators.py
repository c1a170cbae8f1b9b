"""Answer evaluators for each exam and question type."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import TextIO


class Exam(Enum):
    """Exams that have evaluators. The value is the label used in reports."""

    GATE = "Gate"
    JEE = "JEE"
    IELTS = "IELTS"

    @classmethod
    def coerce(cls, value: Exam | str) -> Exam:
        """Return the member named by ``value`` (member, label or name)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if value in (member.value, member.name) or value.upper() == member.name:
                    return member
        raise ValueError(f"unknown exam: {value!r}")


class QuestionType(Enum):
    """Kinds of question. The value is the label used in reports."""

    MCQ = "mcq"
    FILLIN = "fillin"
    ESSAY = "essay"
    TRUE_FALSE = "true false"
    CODING = "coding"

    @classmethod
    def coerce(cls, value: QuestionType | str) -> QuestionType:
        """Return the member named by ``value`` (member, label or name)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if value in (member.value, member.name) or value.upper() == member.name:
                    return member
        raise ValueError(f"unknown question type: {value!r}")


@dataclass(frozen=True)
class Evaluator:
    """Evaluates answers to one question type of one exam."""

    exam: Exam
    question_type: QuestionType

    def message(self, expression: str) -> str:
        """Return the report line for ``expression``."""
        return (
            f"Evaluated {expression} as per "
            f"{self.exam.value} {self.question_type.value} question"
        )

    def evaluate(self, expression: str, out: TextIO | None = None) -> str:
        """Write the report line for ``expression`` to ``out`` and return it."""
        line = self.message(expression)
        stream = sys.stdout if out is None else out
        print(line, file=stream)
        return line


def make_evaluator(exam: Exam | str, question_type: QuestionType | str) -> Evaluator:
    """Build the evaluator for ``exam`` and ``question_type``."""
    return Evaluator(Exam.coerce(exam), QuestionType.coerce(question_type))