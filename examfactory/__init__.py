"""Exam answer evaluators for GATE, JEE and IELTS, with per-exam and per-question-type factories."""

__version__ = "0.1.0"