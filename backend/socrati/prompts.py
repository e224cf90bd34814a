"""Prompt templates and message builders for reed and quiz generation."""
from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from .errors import InvalidStyle
from .settings import DialogueMode

TRUNCATION_MARKER = "...(text truncated for length)"
DEFAULT_MAX_SOURCE_CHARS = 5000

Message = Dict[str, str]


class TeachingStyle(str, Enum):
	SOCRATIC = "Socratic"
	PLATONIC = "Platonic"
	STORY = "Story"


_STYLE_BRIEFS: Dict[TeachingStyle, str] = {
	TeachingStyle.SOCRATIC: (
		"You are an expert in the Socratic teaching method. Create a dialogue between a Teacher and a Student "
		"that explores the concepts in the text through probing questions that lead the student to discover "
		"insights for themselves. The teacher asks leading questions rather than providing direct answers."
	),
	TeachingStyle.PLATONIC: (
		"You are an expert in the Platonic dialogue style of teaching. Create a dialogue between a Teacher and a "
		"Student that explores the concepts in the text in a structured, explanatory manner. The teacher guides "
		"the conversation while providing clear explanations that systematically develop the subject matter."
	),
	TeachingStyle.STORY: (
		"You are a gifted storyteller and teacher. Create a dialogue between a Teacher and a Student in which the "
		"teacher explains the concepts in the text through a narrative: characters, situations and examples that "
		"make each idea concrete. The student reacts, asks questions and retells what they have understood."
	),
}

_PLAIN_FORMAT = (
	"\n\nWrite 10-15 exchanges that progressively build understanding, starting with the Teacher and alternating "
	"speakers. Put each turn on its own line, prefixed literally with \"Teacher:\" or \"Student:\". "
	"Output plain text only. Do NOT wrap the dialogue in JSON, code blocks or any other markup."
)

_STRUCTURED_FORMAT = (
	"\n\nWrite 10-15 exchanges that progressively build understanding, starting with the teacher and alternating "
	"speakers. Return ONLY a JSON object of the shape "
	"{\"dialogues\": [{\"speaker\": \"teacher\", \"text\": \"...\"}, {\"speaker\": \"student\", \"text\": \"...\"}]} "
	"where speaker is exactly \"teacher\" or \"student\". No markdown, no extra commentary."
)

STYLE_PROMPTS: Dict[DialogueMode, Dict[TeachingStyle, str]] = {
	DialogueMode.PLAIN: {style: brief + _PLAIN_FORMAT for style, brief in _STYLE_BRIEFS.items()},
	DialogueMode.STRUCTURED: {style: brief + _STRUCTURED_FORMAT for style, brief in _STYLE_BRIEFS.items()},
}

QUIZ_PROMPT = (
	"You are an expert teacher writing a comprehension check for the teaching dialogue supplied by the user.\n"
	"Generate EXACTLY 5 multiple-choice questions about the concepts discussed in the dialogue.\n"
	"Each question must have EXACTLY 4 options, and only ONE option is correct.\n"
	"Return ONLY a JSON array of 5 objects. Each object must have keys: question (string), "
	"options (array of 4 strings), correctAnswer (string, identical to the correct option).\n"
	"No markdown, no code fences, no extra commentary."
)


def parse_style(value: Optional[str]) -> TeachingStyle:
	try:
		return TeachingStyle(value)
	except ValueError:
		choices = ", ".join(f'"{s.value}"' for s in TeachingStyle)
		raise InvalidStyle(f"Invalid style. Choose one of {choices}") from None


def truncate_source(text: str, limit: int = DEFAULT_MAX_SOURCE_CHARS) -> str:
	"""Cut ``text`` to ``limit`` characters and mark the cut; shorter text is returned unchanged."""
	if len(text) > limit:
		return text[:limit] + TRUNCATION_MARKER
	return text


def build_dialogue_messages(
	source_text: str,
	style: TeachingStyle | str,
	mode: DialogueMode | str = DialogueMode.PLAIN,
	*,
	max_chars: int = DEFAULT_MAX_SOURCE_CHARS,
) -> List[Message]:
	if not isinstance(style, TeachingStyle):
		style = parse_style(style)
	system_prompt = STYLE_PROMPTS[DialogueMode(mode)][style]
	return [
		{"role": "system", "content": system_prompt},
		{"role": "user", "content": truncate_source(source_text, max_chars)},
	]


def build_quiz_messages(dialogue_text: str) -> List[Message]:
	return [
		{"role": "system", "content": QUIZ_PROMPT},
		{"role": "user", "content": dialogue_text},
	]
