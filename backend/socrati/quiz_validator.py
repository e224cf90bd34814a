"""Validation of LLM-generated quizzes.

A quiz is accepted only as a whole: exactly ``QUIZ_LENGTH`` questions, each
with a question, ``OPTION_COUNT`` options and a correct answer. Any
violation rejects the entire batch.
"""
from __future__ import annotations

import json
import logging
import re
from typing import Any, List

from pydantic import BaseModel, ConfigDict

from .errors import MalformedOutput, SchemaViolation

logger = logging.getLogger(__name__)

QUIZ_LENGTH = 5
OPTION_COUNT = 4

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)


class QuizQuestion(BaseModel):
	# Extra keys the model adds (e.g. an explanation) are kept as-is.
	model_config = ConfigDict(extra="allow")

	question: str
	options: List[str]
	correctAnswer: str


def strip_code_fences(text: str) -> str:
	return _FENCE_RE.sub("", text).strip()


def _non_empty_str(value: Any) -> bool:
	return isinstance(value, str) and bool(value.strip())


def _check_question(index: int, item: Any) -> QuizQuestion:
	label = f"question {index + 1}"
	if not isinstance(item, dict):
		raise SchemaViolation(f"Invalid quiz format: {label} is not an object")
	if not _non_empty_str(item.get("question")):
		raise SchemaViolation(f"Invalid quiz format: {label} has no question text")
	options = item.get("options")
	if not isinstance(options, list) or len(options) != OPTION_COUNT:
		raise SchemaViolation(f"Invalid quiz format: {label} must have exactly {OPTION_COUNT} options")
	if not all(isinstance(o, str) for o in options):
		raise SchemaViolation(f"Invalid quiz format: {label} has non-text options")
	if not _non_empty_str(item.get("correctAnswer")):
		raise SchemaViolation(f"Invalid quiz format: {label} has no correctAnswer")
	# correctAnswer is not required to match one of the options.
	return QuizQuestion(**item)


def validate_quiz(raw_text: str) -> List[QuizQuestion]:
	cleaned = strip_code_fences(raw_text or "")
	try:
		data = json.loads(cleaned)
	except ValueError as exc:
		logger.error("Quiz output is not valid JSON (%s). Raw LLM text:\n%s", exc, raw_text)
		raise MalformedOutput("Failed to parse quiz questions from LLM response") from exc

	if not isinstance(data, list) or len(data) != QUIZ_LENGTH:
		raise SchemaViolation(f"LLM did not return a valid array of {QUIZ_LENGTH} questions")

	return [_check_question(i, item) for i, item in enumerate(data)]
