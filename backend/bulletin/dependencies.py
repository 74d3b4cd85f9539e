from __future__ import annotations
from typing import Callable, Optional

from fastapi import Depends, Request

from .gemini_client import GeminiClient
from .sessions import SESSION_COOKIE, BrowserSession, SessionStore
from .settings import Settings, get_settings


ClientFactory = Callable[[Optional[str]], GeminiClient]


def get_store(request: Request) -> SessionStore:
	return request.app.state.sessions


def get_browser_session(request: Request, store: SessionStore = Depends(get_store)) -> BrowserSession:
	session = store.resolve(request.cookies.get(SESSION_COOKIE))
	# Picked up by the session middleware once the response is built
	request.state.browser_session = session
	return session


def get_client_factory(settings: Settings = Depends(get_settings)) -> ClientFactory:
	def factory(api_key: Optional[str]) -> GeminiClient:
		return GeminiClient(api_key, config=settings)
	return factory
