from __future__ import annotations

from .prompts import TeachingStyle
from .settings import DialogueMode


def normalize_dialogue(raw_text: str, style: TeachingStyle, mode: DialogueMode = DialogueMode.PLAIN) -> str:
	"""Return the generated reed for the caller.

	Dialogue output is passed through verbatim in both modes: plain-text
	output is interpreted by the client, and structured output is forwarded
	as an opaque JSON payload. Only quiz output is validated structurally
	(see ``quiz_validator``).
	"""
	return raw_text
