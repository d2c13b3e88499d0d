import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.comparison import CacheError, SessionNotFoundError, ValidationError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(ValidationError)
	async def validation_error_handler(request: Request, exc: ValidationError):
		return JSONResponse(status_code=400, content={'detail': str(exc)})

	@app.exception_handler(SessionNotFoundError)
	async def session_not_found_handler(request: Request, exc: SessionNotFoundError):
		return JSONResponse(status_code=404, content={'detail': str(exc)})

	@app.exception_handler(CacheError)
	async def cache_error_handler(request: Request, exc: CacheError):
		logger.error(f'Cache error: {exc}')
		return JSONResponse(status_code=503, content={'detail': 'Click statistics unavailable'})
