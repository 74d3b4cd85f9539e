from __future__ import annotations

import json
from typing import Callable, Iterator, List

import httpx
import pytest
from fastapi import Depends
from fastapi.testclient import TestClient

from bulletin.dependencies import get_client_factory
from bulletin.gemini_client import GeminiClient
from bulletin.main import app
from bulletin.schemas import CommentSection, EvaluationInput
from bulletin.sessions import SessionStore
from bulletin.settings import Settings, get_settings


def make_settings(**env: object) -> Settings:
	values = {"GEMINI_API_KEY": "server-key", "GEMINI_PROVIDER": "ai_studio"}
	values.update(env)
	return Settings(**values)


def gemini_reply(text: str) -> httpx.Response:
	return httpx.Response(200, json={"candidates": [{"content": {"parts": [{"text": text}]}}]})


def gemini_error(status: int, message: str, code: str = "") -> httpx.Response:
	return httpx.Response(status, json={"error": {"code": status, "message": message, "status": code}})


@pytest.fixture()
def lea_form() -> EvaluationInput:
	return EvaluationInput(
		student_name="Léa",
		subject="Mathématiques",
		gender="GIRL",
		performance_level="GOOD",
		comment_sections={CommentSection.COMPORTEMENT},
		comportement="attentive",
		tone="FORMAL",
		comment_length="MEDIUM",
	)


class FakeGemini:
	"""Records requests and answers them from a queue of canned responses."""

	def __init__(self) -> None:
		self.responses: List[httpx.Response] = []
		self.requests: List[httpx.Request] = []

	def handler(self, request: httpx.Request) -> httpx.Response:
		self.requests.append(request)
		if not self.responses:
			return gemini_reply("Léa est une élève sérieuse.")
		return self.responses.pop(0)

	def prompts(self) -> List[str]:
		return [json.loads(r.content)["contents"][0]["parts"][0]["text"] for r in self.requests]


@pytest.fixture()
def fake_gemini() -> FakeGemini:
	return FakeGemini()


@pytest.fixture()
def api_settings() -> Settings:
	return make_settings()


@pytest.fixture()
def api_client(fake_gemini: FakeGemini, api_settings: Settings) -> Iterator[TestClient]:
	def factory_override(settings: Settings = Depends(get_settings)) -> Callable[[str | None], GeminiClient]:
		def factory(api_key: str | None) -> GeminiClient:
			transport = httpx.MockTransport(fake_gemini.handler)
			return GeminiClient(api_key, config=settings, http_client=httpx.AsyncClient(transport=transport))
		return factory

	app.state.sessions = SessionStore()
	app.dependency_overrides[get_settings] = lambda: api_settings
	app.dependency_overrides[get_client_factory] = factory_override
	try:
		with TestClient(app) as client:
			yield client
	finally:
		app.dependency_overrides.pop(get_settings, None)
		app.dependency_overrides.pop(get_client_factory, None)
