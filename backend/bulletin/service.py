from __future__ import annotations
import logging

from .exceptions import FormValidationError, InvalidCredentialError
from .gemini_client import GeminiClient
from .prompt_builder import build_prompt
from .schemas import EvaluationInput
from .session_log import SessionRecord
from .sessions import BrowserSession
from .validation import validate

logger = logging.getLogger(__name__)


def prepare_prompt(form: EvaluationInput, *, allow_auto_sections: bool = False) -> str:
	errors = validate(form, allow_auto_sections=allow_auto_sections)
	if errors:
		raise FormValidationError(errors)
	return build_prompt(form)


async def generate_appreciation(
	form: EvaluationInput,
	session: BrowserSession,
	client: GeminiClient,
	*,
	allow_auto_sections: bool = False,
) -> SessionRecord:
	"""Validate the form, generate its comment and save it in the session log.

	The log only grows when generation succeeds. A rejected key typed in by
	the user is forgotten so the next attempt asks for a new one.
	"""
	prompt = prepare_prompt(form, allow_auto_sections=allow_auto_sections)
	session.begin()
	try:
		text = await client.generate(prompt)
	except InvalidCredentialError:
		session.api_key = None
		raise
	finally:
		session.end()
	record = SessionRecord(
		student_name=form.student_name.strip(),
		subject=form.subject.strip(),
		generated_text=text,
	)
	session.log.append(record)
	logger.info("Generated comment %d for session %s", len(session.log), session.session_id[:8])
	return record
