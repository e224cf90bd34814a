from __future__ import annotations
import logging
import httpx
from typing import Any, Dict, List, Optional
from .errors import TransportError, UpstreamError
from .settings import Settings

logger = logging.getLogger(__name__)


class MistralClient:
	"""Single-attempt chat-completion call against the configured endpoint."""

	def __init__(self, settings: Settings, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
		self.api_key = settings.mistral_api_key
		self.base_url = settings.mistral_api_url
		self.model = settings.mistral_model
		self.temperature = settings.llm_temperature
		self.max_tokens = settings.llm_max_tokens
		self._headers = {
			"Authorization": f"Bearer {self.api_key}" if self.api_key else "",
			"Content-Type": "application/json",
		}
		self._client = httpx.AsyncClient(timeout=settings.llm_timeout_seconds, transport=transport)

	def build_payload(self, messages: List[Dict[str, str]]) -> Dict[str, Any]:
		return {
			"model": self.model,
			"messages": messages,
			"temperature": self.temperature,
			"max_tokens": self.max_tokens,
		}

	async def complete(self, messages: List[Dict[str, str]]) -> str:
		headers = {k: v for k, v in self._headers.items() if v}
		try:
			r = await self._client.post(self.base_url, headers=headers, json=self.build_payload(messages))
		except httpx.RequestError as net_err:
			logger.error("Mistral request failed: %s", net_err)
			raise TransportError(f"Failed to reach LLM API: {net_err}") from net_err
		try:
			data = r.json()
		except ValueError:
			data = None
		content = self._first_choice_content(data)
		if content is None:
			logger.error("Unexpected Mistral API response (HTTP %s): %s", r.status_code, r.text)
			raise UpstreamError("Invalid response from LLM API")
		return content

	@staticmethod
	def _first_choice_content(data: Any) -> Optional[str]:
		if not isinstance(data, dict):
			return None
		choices = data.get("choices")
		if not isinstance(choices, list) or not choices:
			return None
		first = choices[0]
		message = first.get("message") if isinstance(first, dict) else None
		content = message.get("content") if isinstance(message, dict) else None
		return content if isinstance(content, str) else None

	async def aclose(self) -> None:
		await self._client.aclose()
