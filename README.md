# examfactory

Evaluators for the answers to exam questions. Three exams are covered
(GATE, JEE and IELTS), and each has five kinds of question: multiple
choice, fill-in, essay, true/false and coding.

## Modules

### `examfactory.evaluators`

- `Exam`: enumeration with members `GATE`, `JEE` and `IELTS`. Each value
  is the label used in reports (`"Gate"`, `"JEE"`, `"IELTS"`).
  `Exam.coerce(value)` accepts a member, its label or its name. Name
  matching ignores case. Anything else raises `ValueError`.
- `QuestionType`: enumeration with members `MCQ`, `FILLIN`, `ESSAY`,
  `TRUE_FALSE` and `CODING`. Their labels are `"mcq"`, `"fillin"`,
  `"essay"`, `"true false"` and `"coding"`. `QuestionType.coerce(value)`
  works like `Exam.coerce`.
- `Evaluator`: a frozen dataclass holding an `exam` and a
  `question_type`.
  - `message(expression)` returns the report line.
  - `evaluate(expression, out=None)` prints that line to `out`, or to
    standard output when `out` is `None`, and returns it.
- `make_evaluator(exam, question_type)` builds an `Evaluator`. It accepts
  members or strings, as the `coerce` methods do.

### `examfactory.abstract_factory`: one factory per exam

`EvaluatorFactory` is the abstract base class. Its subclasses are
`GateEvaluatorFactory`, `JeeEvaluatorFactory` and
`IeltsEvaluatorFactory`. Each one hands out every kind of evaluator for
its exam through these methods:

- `create_mcq()`
- `create_fillin()`
- `create_essay()`
- `create_true_false()`
- `create_coding()`

### `examfactory.factory_method`: one factory per question type

`ExamFactory` is the abstract base class. Its subclasses are
`McqFactory`, `FillinFactory`, `EssayFactory`, `TrueFalseFactory` and
`CodingFactory`. Each one is built with an exam, given as an `Exam` member
or a string, and its `create_evaluator()` returns the matching evaluator.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
import sys

from examfactory.abstract_factory import GateEvaluatorFactory
from examfactory.factory_method import EssayFactory

evaluator = GateEvaluatorFactory().create_mcq()
print(evaluator.message("A"))
# Evaluated A as per Gate mcq question

line = EssayFactory("IELTS").create_evaluator().evaluate("My essay", sys.stdout)
# prints and returns: Evaluated My essay as per IELTS essay question
```

## Commands

Each command runs a demonstration of one approach. It evaluates a fixed
sample answer of every kind for every exam and prints one report line per
answer. The commands take no options apart from `--help`.

```
examfactory-abstract
examfactory-method
```

## What it does not do

An evaluator only produces a report line naming the answer, the exam and
the question type. It does not check answers against a key, award marks,
or store results.