from pathlib import Path
from typing import Any, Dict, Optional
import asyncio
import logging
import re

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from fastapi.responses import JSONResponse, RedirectResponse

from .cleanup import purge_idle_sessions
from .sessions import SESSION_COOKIE, SessionStore
from .settings import Settings, get_settings, settings
from .routers import health, options, credentials, appreciations

BASE_DIR = Path(__file__).resolve().parents[2]
FRONTEND_DIR = BASE_DIR / "frontend"

logger = logging.getLogger(__name__)

INVALID_REQUEST = "Le formulaire contient des valeurs invalides."

app = FastAPI(title="Bulletin Appreciation API")
app.state.sessions = SessionStore()
app.include_router(health.router)
app.include_router(options.router)
app.include_router(credentials.router)
app.include_router(appreciations.router)

# Static frontend at /app (use absolute paths so cwd doesn't matter when launching)
app.mount("/app", StaticFiles(directory=FRONTEND_DIR, html=True), name="frontend")


def _current_settings(request: Request) -> Settings:
	return request.app.dependency_overrides.get(get_settings, get_settings)()


@app.middleware("http")
async def persist_browser_session(request: Request, call_next):
	response = await call_next(request)
	session = getattr(request.state, "browser_session", None)
	if session is None or not request.app.state.sessions.keep(session):
		return response
	if request.cookies.get(SESSION_COOKIE) != session.session_id:
		# Session cookie: no max-age, so the browser drops it when closed
		response.set_cookie(
			SESSION_COOKIE,
			session.session_id,
			httponly=True,
			samesite="lax",
			secure=_current_settings(request).cookie_secure,
		)
	return response


def _field_name(loc) -> str:
	names = [p for p in loc[1:] if isinstance(p, str)]
	if not names:
		return "body"
	return re.sub(r"(?<!^)(?=[A-Z])", "_", names[0]).lower()


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
	# Same body shape as the form validator's errors
	errors: Dict[str, str] = {}
	for err in exc.errors():
		errors.setdefault(_field_name(err.get("loc", ())), str(err.get("msg", "")))
	return JSONResponse(status_code=422, content={"detail": {"message": INVALID_REQUEST, "errors": errors}})


@app.get("/", include_in_schema=False)
async def redirect_root_to_app():
	return RedirectResponse(url="/app")


async def _cleanup_watcher():
	while True:
		await asyncio.sleep(settings.session_sweep_seconds)
		try:
			purge_idle_sessions(app.state.sessions, settings.session_idle_minutes * 60)
		except Exception:
			logger.exception("Idle session sweep failed")


_watcher: Optional["asyncio.Task[Any]"] = None


@app.on_event("startup")
async def startup_event():
	global _watcher
	logging.basicConfig(
		level=settings.log_level.upper(),
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)
	# Start periodic cleanup loop
	_watcher = asyncio.create_task(_cleanup_watcher())
	logger.info(
		"Bulletin API ready (model=%s, key configured=%s)",
		settings.gemini_model,
		bool(settings.gemini_api_key),
	)


@app.on_event("shutdown")
async def shutdown_event():
	if _watcher is not None:
		_watcher.cancel()
