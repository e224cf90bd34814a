import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .errors import SocratiError
from .settings import get_settings
from .routers import extraction, llm, system

logger = logging.getLogger(__name__)


def _envelope(status_code: int, message: str) -> JSONResponse:
	return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def create_app() -> FastAPI:
	settings = get_settings()
	logging.basicConfig(
		level=settings.log_level.upper(),
		format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
	)
	if not settings.mistral_api_key:
		logger.warning("MISTRAL_API_KEY is not configured; LLM requests will be rejected upstream")

	app = FastAPI(title="Socrati Backend API")
	app.add_middleware(
		CORSMiddleware,
		allow_origins=settings.cors_origin_list,
		allow_methods=["*"],
		allow_headers=["*"],
	)
	app.include_router(extraction.router)
	app.include_router(llm.router)
	app.include_router(system.router)

	@app.exception_handler(SocratiError)
	async def handle_socrati_error(request: Request, exc: SocratiError):
		log = logger.warning if exc.status_code < 500 else logger.error
		log("%s %s failed with %s: %s", request.method, request.url.path, type(exc).__name__, exc.message)
		return _envelope(exc.status_code, exc.message)

	@app.exception_handler(RequestValidationError)
	async def handle_validation_error(request: Request, exc: RequestValidationError):
		logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.errors())
		return _envelope(400, "Invalid request body")

	@app.exception_handler(Exception)
	async def handle_unexpected_error(request: Request, exc: Exception):
		logger.exception("Unhandled error on %s %s", request.method, request.url.path)
		return _envelope(500, "Internal server error")

	@app.get("/")
	def root():
		return {"message": "Socrati Backend API is running"}

	return app


app = create_app()


def run() -> None:
	import uvicorn

	settings = get_settings()
	uvicorn.run(app, host=settings.host, port=settings.port)
