import io

import pytest

from examfactory.evaluators import Evaluator, Exam, QuestionType, make_evaluator


def test_gate_mcq_message():
    evaluator = make_evaluator(Exam.GATE, QuestionType.MCQ)
    assert evaluator.message("A") == "Evaluated A as per Gate mcq question"


def test_jee_true_false_message():
    evaluator = make_evaluator(Exam.JEE, QuestionType.TRUE_FALSE)
    assert evaluator.message("False") == "Evaluated False as per JEE true false question"


def test_ielts_coding_message():
    evaluator = make_evaluator(Exam.IELTS, QuestionType.CODING)
    assert evaluator.message("dummy") == "Evaluated dummy as per IELTS coding question"


@pytest.mark.parametrize("exam", list(Exam))
@pytest.mark.parametrize("question_type", list(QuestionType))
def test_message_shape(exam, question_type):
    evaluator = make_evaluator(exam, question_type)
    line = evaluator.message("x")
    assert line.startswith("Evaluated x as per ")
    assert line.endswith(" question")
    assert exam.value in line
    assert question_type.value in line


def test_evaluate_writes_line_to_stream():
    evaluator = make_evaluator(Exam.GATE, QuestionType.FILLIN)
    out = io.StringIO()
    returned = evaluator.evaluate("gate class", out)
    assert out.getvalue() == returned + "\n"
    assert returned == evaluator.message("gate class")


def test_evaluate_defaults_to_stdout(capsys):
    evaluator = make_evaluator(Exam.JEE, QuestionType.ESSAY)
    evaluator.evaluate("text")
    assert capsys.readouterr().out == evaluator.message("text") + "\n"


def test_repeated_evaluations_append():
    evaluator = make_evaluator(Exam.IELTS, QuestionType.MCQ)
    out = io.StringIO()
    evaluator.evaluate("A", out)
    evaluator.evaluate("B", out)
    assert out.getvalue().splitlines() == [evaluator.message("A"), evaluator.message("B")]


def test_make_evaluator_accepts_strings():
    assert make_evaluator("GATE", "mcq") == Evaluator(Exam.GATE, QuestionType.MCQ)
    assert make_evaluator("jee", "true false") == Evaluator(Exam.JEE, QuestionType.TRUE_FALSE)
    assert make_evaluator("IELTS", "CODING") == Evaluator(Exam.IELTS, QuestionType.CODING)


def test_distinct_evaluators_per_combination():
    evaluators = {make_evaluator(e, q) for e in Exam for q in QuestionType}
    assert len(evaluators) == len(Exam) * len(QuestionType)


def test_unknown_exam_rejected():
    with pytest.raises(ValueError):
        make_evaluator("TOEFL", QuestionType.MCQ)


def test_unknown_question_type_rejected():
    with pytest.raises(ValueError):
        make_evaluator(Exam.GATE, "oral")


def test_non_string_rejected():
    with pytest.raises(ValueError):
        make_evaluator(3, QuestionType.MCQ)