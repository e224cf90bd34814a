"""
Quiz validation tests
"""
import json
import logging

import pytest

from conftest import quiz_payload
from socrati.errors import MalformedOutput, SchemaViolation
from socrati.quiz_validator import strip_code_fences, validate_quiz


class TestStripCodeFences:

	def test_json_tagged_fence(self):
		assert strip_code_fences('```json\n[1, 2]\n```') == "[1, 2]"

	def test_untagged_fence(self):
		assert strip_code_fences('  ```\n{"a": 1}\n```  ') == '{"a": 1}'

	def test_plain_text_only_trimmed(self):
		assert strip_code_fences("  [] \n") == "[]"


class TestValidateQuiz:

	def test_bare_json(self, quiz_json):
		questions = validate_quiz(quiz_json)
		assert len(questions) == 5
		assert questions[0].question == "Question 1?"
		assert questions[0].options == ["A", "B", "C", "D"]
		assert questions[0].correctAnswer == "A"

	def test_fenced_json(self, quiz_json):
		questions = validate_quiz(f"```json\n{quiz_json}\n```")
		assert [q.question for q in questions] == [f"Question {n}?" for n in range(1, 6)]

	def test_extra_fields_kept(self):
		items = quiz_payload()
		items[2]["explanation"] = "Because."
		questions = validate_quiz(json.dumps(items))
		assert questions[2].model_dump()["explanation"] == "Because."

	def test_correct_answer_not_among_options_is_accepted(self):
		items = quiz_payload()
		items[0]["correctAnswer"] = "E"
		assert validate_quiz(json.dumps(items))[0].correctAnswer == "E"

	def test_not_json(self, caplog):
		raw = "Here are your questions: 1. What is..."
		with caplog.at_level(logging.ERROR, logger="socrati.quiz_validator"):
			with pytest.raises(MalformedOutput):
				validate_quiz(raw)
		assert raw in caplog.text

	@pytest.mark.parametrize("count", [0, 4, 6])
	def test_wrong_question_count(self, count):
		with pytest.raises(SchemaViolation):
			validate_quiz(json.dumps(quiz_payload(count)))

	def test_object_instead_of_array(self):
		with pytest.raises(SchemaViolation):
			validate_quiz(json.dumps({"questions": quiz_payload()}))

	def test_missing_correct_answer_rejects_whole_batch(self):
		items = quiz_payload()
		del items[3]["correctAnswer"]
		with pytest.raises(SchemaViolation):
			validate_quiz(json.dumps(items))

	@pytest.mark.parametrize("field,value", [
		("question", ""),
		("question", "   "),
		("correctAnswer", ""),
		("options", ["A", "B", "C"]),
		("options", ["A", "B", "C", "D", "E"]),
		("options", "A, B, C, D"),
		("options", ["A", "B", "C", 4]),
	])
	def test_invalid_question_fields(self, field, value):
		items = quiz_payload()
		items[4][field] = value
		with pytest.raises(SchemaViolation):
			validate_quiz(json.dumps(items))

	def test_non_object_question(self):
		items = quiz_payload()
		items[1] = "What is 2 + 2?"
		with pytest.raises(SchemaViolation):
			validate_quiz(json.dumps(items))
