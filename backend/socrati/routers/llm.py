from __future__ import annotations
import logging
from typing import AsyncIterator, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ..errors import InvalidInput
from ..mistral_client import MistralClient
from ..normalizer import normalize_dialogue
from ..prompts import build_dialogue_messages, build_quiz_messages, parse_style
from ..quiz_validator import validate_quiz
from ..settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/llm", tags=["llm"])


class GenerateRequest(BaseModel):
	extractedText: Optional[str] = None
	style: Optional[str] = None


class GenerateQuizRequest(BaseModel):
	dialogueText: Optional[str] = None


async def get_llm_client(settings: Settings = Depends(get_settings)) -> AsyncIterator[MistralClient]:
	client = MistralClient(settings)
	try:
		yield client
	finally:
		await client.aclose()


@router.post("/generate")
async def generate_reed(
	req: GenerateRequest,
	settings: Settings = Depends(get_settings),
	client: MistralClient = Depends(get_llm_client),
):
	if not req.extractedText or not req.style:
		raise InvalidInput("Missing required parameters: extractedText and style")
	style = parse_style(req.style)
	messages = build_dialogue_messages(
		req.extractedText,
		style,
		settings.dialogue_mode,
		max_chars=settings.max_source_chars,
	)
	logger.info("Generating %s reed from %d characters of text", style.value, len(req.extractedText))
	raw = await client.complete(messages)
	return {
		"success": True,
		"generatedText": normalize_dialogue(raw, style, settings.dialogue_mode),
		"style": style.value,
	}


@router.post("/generate-quiz")
async def generate_quiz(req: GenerateQuizRequest, client: MistralClient = Depends(get_llm_client)):
	if not req.dialogueText or not req.dialogueText.strip():
		raise InvalidInput("Missing required parameter: dialogueText")
	raw = await client.complete(build_quiz_messages(req.dialogueText))
	questions = validate_quiz(raw)
	return {"success": True, "questions": [q.model_dump() for q in questions]}
