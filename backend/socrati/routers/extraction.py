from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile
from starlette.concurrency import run_in_threadpool

from ..errors import InvalidInput
from ..pdf_extractor import extract_pdf
from ..settings import Settings, get_settings

router = APIRouter(prefix="/api/extraction", tags=["extraction"])


def _too_large(settings: Settings) -> InvalidInput:
	limit_mb = settings.max_upload_bytes / (1024 * 1024)
	return InvalidInput(f"File too large. Maximum size is {limit_mb:g} MB")


@router.post("/pdf")
async def extract_pdf_text(file: Optional[UploadFile] = File(default=None), settings: Settings = Depends(get_settings)):
	if file is None:
		raise InvalidInput("No PDF file uploaded")
	# Reject on the declared size before buffering the upload
	if file.size is not None and file.size > settings.max_upload_bytes:
		raise _too_large(settings)
	content = await file.read()
	if len(content) > settings.max_upload_bytes:
		raise _too_large(settings)
	doc = await run_in_threadpool(extract_pdf, content, file.content_type, file.filename or "")
	return {
		"success": True,
		"data": {
			"text": doc.text,
			"pageCount": doc.page_count,
			"fileName": doc.source_file_name,
			"fileSize": doc.source_size_bytes,
			"timestamp": datetime.now(timezone.utc).isoformat(),
		},
	}
