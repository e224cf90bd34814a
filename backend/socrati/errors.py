"""Failure kinds raised by the extraction and generation pipeline.

Each kind carries the HTTP status the request boundary answers with; the
message becomes the ``error`` field of the ``{success: false}`` envelope.
"""
from __future__ import annotations


class SocratiError(Exception):
	status_code: int = 500

	def __init__(self, message: str) -> None:
		super().__init__(message)
		self.message = message


class InvalidInput(SocratiError):
	"""Missing or malformed request field."""
	status_code = 400


class InvalidStyle(SocratiError):
	status_code = 400


class ExtractionFailed(SocratiError):
	"""The PDF library could not read the upload."""


class TransportError(SocratiError):
	"""The LLM endpoint could not be reached."""


class UpstreamError(SocratiError):
	"""The LLM endpoint answered without a usable completion choice."""


class MalformedOutput(SocratiError):
	"""The model's text is not valid JSON where JSON was required."""


class SchemaViolation(SocratiError):
	"""JSON parsed, but does not have the required structure."""
