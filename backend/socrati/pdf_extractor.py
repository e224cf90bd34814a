"""PDF text extraction.

The upload is written to a request-unique temporary file, read with
pdfplumber, and the file is removed again whatever the outcome.
"""
from __future__ import annotations

import logging
import os
import tempfile
import uuid
from dataclasses import dataclass
from typing import Iterator, Optional
from contextlib import contextmanager

import pdfplumber

from .errors import ExtractionFailed, InvalidInput

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"
PAGE_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class ExtractedDocument:
	text: str
	page_count: int
	source_file_name: str
	source_size_bytes: int


@contextmanager
def _temporary_pdf(data: bytes) -> Iterator[str]:
	path = os.path.join(tempfile.gettempdir(), f"pdf-{uuid.uuid4().hex}.pdf")
	try:
		with open(path, "wb") as fh:
			fh.write(data)
		yield path
	finally:
		try:
			os.unlink(path)
		except FileNotFoundError:
			pass


def _read_pages(path: str) -> tuple[str, int]:
	with pdfplumber.open(path) as pdf:
		texts = [(page.extract_text() or "") for page in pdf.pages]
	return PAGE_SEPARATOR.join(texts).strip(), len(texts)


def extract_pdf(data: Optional[bytes], content_type: Optional[str], file_name: str = "") -> ExtractedDocument:
	if data is None:
		raise InvalidInput("No PDF file uploaded")
	if content_type != PDF_MIME_TYPE:
		raise InvalidInput("Uploaded file is not a PDF")

	try:
		with _temporary_pdf(data) as path:
			text, page_count = _read_pages(path)
	except Exception as exc:
		logger.error("Error extracting PDF text from %r: %s", file_name, exc)
		raise ExtractionFailed(str(exc) or "Error processing PDF") from exc

	return ExtractedDocument(
		text=text,
		page_count=page_count,
		source_file_name=file_name,
		source_size_bytes=len(data),
	)
