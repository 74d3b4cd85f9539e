from __future__ import annotations

import asyncio

import httpx
import pytest

from bulletin.exceptions import (
	FormValidationError,
	GenerationInProgress,
	InvalidCredentialError,
	TransientGenerationError,
)
from bulletin.gemini_client import GeminiClient
from bulletin.schemas import EvaluationInput, FormField
from bulletin.service import generate_appreciation, prepare_prompt
from bulletin.sessions import SessionStore

from conftest import gemini_error, gemini_reply, make_settings


def _client(handler) -> GeminiClient:
	return GeminiClient(config=make_settings(), http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))


def test_sessions_do_not_share_logs(lea_form: EvaluationInput) -> None:
	store = SessionStore()
	a = store.resolve()
	b = store.resolve()
	asyncio.run(generate_appreciation(lea_form, a, _client(lambda r: gemini_reply("ok"))))
	assert len(a.log) == 1
	assert len(b.log) == 0


def test_success_appends_one_record(lea_form: EvaluationInput) -> None:
	session = SessionStore().resolve()
	record = asyncio.run(generate_appreciation(lea_form, session, _client(lambda r: gemini_reply(" Léa est attentive. "))))
	assert record.generated_text == "Léa est attentive."
	assert session.log.all() == [record]
	assert session.pending is False


def test_invalid_form_never_calls_the_service() -> None:
	calls = []
	session = SessionStore().resolve()

	def handler(request: httpx.Request) -> httpx.Response:
		calls.append(request)
		return gemini_reply("ok")

	with pytest.raises(FormValidationError) as exc:
		asyncio.run(generate_appreciation(EvaluationInput(), session, _client(handler)))
	assert FormField.STUDENT_NAME in exc.value.errors
	assert calls == []
	assert len(session.log) == 0


def test_invalid_credential_forgets_user_key_and_keeps_log(lea_form: EvaluationInput) -> None:
	session = SessionStore().resolve()
	asyncio.run(generate_appreciation(lea_form, session, _client(lambda r: gemini_reply("first"))))
	session.api_key = "typed-key"
	with pytest.raises(InvalidCredentialError):
		asyncio.run(generate_appreciation(lea_form, session, _client(lambda r: gemini_error(400, "API key not valid"))))
	assert session.api_key is None
	assert [r.generated_text for r in session.log] == ["first"]
	assert session.pending is False


def test_transient_failure_leaves_log_unchanged(lea_form: EvaluationInput) -> None:
	session = SessionStore().resolve()
	with pytest.raises(TransientGenerationError):
		asyncio.run(generate_appreciation(lea_form, session, _client(lambda r: gemini_error(429, "rate limit exceeded"))))
	assert len(session.log) == 0


def test_pending_session_rejects_a_second_generation(lea_form: EvaluationInput) -> None:
	session = SessionStore().resolve()
	session.begin()
	with pytest.raises(GenerationInProgress):
		asyncio.run(generate_appreciation(lea_form, session, _client(lambda r: gemini_reply("ok"))))
	assert session.pending is True


def test_prepare_prompt_respects_auto_section_policy() -> None:
	form = EvaluationInput(student_name="Tom", subject="Histoire")
	with pytest.raises(FormValidationError):
		prepare_prompt(form)
	assert "Tom" in prepare_prompt(form, allow_auto_sections=True)
