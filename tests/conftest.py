"""
Test Configuration and Fixtures
"""
import json
from typing import Dict, List

import pytest
from fastapi.testclient import TestClient

from socrati.main import app as fastapi_app
from socrati.routers.llm import get_llm_client
from socrati.settings import Settings, get_settings


def make_pdf(pages: List[str]) -> bytes:
	"""Build a minimal single-font PDF with one line of text per page."""
	objects = [
		b"<< /Type /Catalog /Pages 2 0 R >>",
		("<< /Type /Pages /Kids [%s] /Count %d >>" % (
			" ".join(f"{4 + 2 * i} 0 R" for i in range(len(pages))), len(pages))).encode(),
		b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
	]
	for i, text in enumerate(pages):
		stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode()
		objects.append((
			"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
			"/Resources << /Font << /F1 3 0 R >> >> /Contents %d 0 R >>" % (5 + 2 * i)
		).encode())
		objects.append(b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream")

	out = bytearray(b"%PDF-1.4\n")
	offsets = []
	for num, body in enumerate(objects, start=1):
		offsets.append(len(out))
		out += b"%d 0 obj\n" % num + body + b"\nendobj\n"
	xref_at = len(out)
	out += b"xref\n0 %d\n" % (len(objects) + 1)
	out += b"0000000000 65535 f \n"
	for off in offsets:
		out += b"%010d 00000 n \n" % off
	out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (len(objects) + 1, xref_at)
	return bytes(out)


def quiz_payload(count: int = 5) -> List[Dict[str, object]]:
	return [
		{
			"question": f"Question {n}?",
			"options": ["A", "B", "C", "D"],
			"correctAnswer": "A",
		}
		for n in range(1, count + 1)
	]


class FakeLLMClient:
	"""Stands in for MistralClient; records every conversation it is sent."""

	def __init__(self, reply: str = "Teacher: Hello.\nStudent: Hello."):
		self.reply = reply
		self.error: Exception | None = None
		self.calls: List[List[Dict[str, str]]] = []

	async def complete(self, messages):
		self.calls.append(messages)
		if self.error is not None:
			raise self.error
		return self.reply

	async def aclose(self):
		pass


@pytest.fixture
def anyio_backend():
	return "asyncio"


@pytest.fixture
def settings():
	return Settings(
		_env_file=None,
		mistral_api_key="test-key",
		mistral_api_url="https://llm.test/v1/chat/completions",
		mistral_model="mistral-medium",
		dialogue_mode="plain",
	)


@pytest.fixture
def fake_llm():
	return FakeLLMClient()


@pytest.fixture
def client(settings, fake_llm):
	"""Create test client with settings and LLM client replaced"""
	fastapi_app.dependency_overrides[get_settings] = lambda: settings
	fastapi_app.dependency_overrides[get_llm_client] = lambda: fake_llm
	with TestClient(fastapi_app) as test_client:
		yield test_client
	fastapi_app.dependency_overrides.clear()


@pytest.fixture
def sample_pdf():
	return make_pdf(["Hello World", "Second page"])


@pytest.fixture
def quiz_json():
	return json.dumps(quiz_payload())
