from pathlib import Path
import logging

from fastapi import Depends, FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .errors import StudyAidError
from .settings import Settings, get_settings, settings
from .routers import ai, health

BASE_DIR = Path(__file__).resolve().parents[2]
FRONTEND_DIR = BASE_DIR / "frontend"

logging.basicConfig(
	level=settings.log_level.upper(),
	format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Study Aid API")
app.include_router(health.router)
app.include_router(ai.router)


@app.exception_handler(StudyAidError)
async def study_aid_error_handler(request: Request, exc: StudyAidError):
	if exc.status_code >= 500:
		logger.error("%s: %s", exc.__class__.__name__, exc.message)
	return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
	if exc.status_code == 405:
		return JSONResponse(status_code=405, content={"error": "Only POST allowed"}, headers={"Allow": "POST"})
	return await http_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
	problems = "; ".join(
		f"{'.'.join(str(p) for p in err.get('loc', ()) if p != 'body') or 'body'}: {err.get('msg')}"
		for err in exc.errors()
	)
	return JSONResponse(status_code=400, content={"error": f"Invalid request body. {problems}"})


# Static frontend at /app (absolute path so cwd doesn't matter when launching)
if FRONTEND_DIR.is_dir():
	app.mount("/app", StaticFiles(directory=FRONTEND_DIR, html=True), name="frontend")

	@app.get("/", include_in_schema=False)
	async def redirect_root_to_app():
		return RedirectResponse(url="/app")

@app.get("/info")
def root(config: Settings = Depends(get_settings)):
	return {"status": "ok", "gemini_configured": bool(config.gemini_api_key), "model": config.gemini_model}
