from __future__ import annotations
import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, Response

from ..dependencies import ClientFactory, get_browser_session, get_client_factory
from ..exceptions import (
	FormValidationError,
	GenerationInProgress,
	InvalidCredentialError,
	TransientGenerationError,
)
from ..schemas import AppreciationResponse, EvaluationInput, FormField, PromptPreview, SavedRecord
from ..service import generate_appreciation, prepare_prompt
from ..session_log import CSV_FILENAME
from ..sessions import BrowserSession
from ..settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/appreciations", tags=["appreciations"])

GENERIC_FAILURE = "Une erreur est survenue lors de la génération de l'appréciation. Veuillez réessayer."
INVALID_KEY = (
	"La clé API sélectionnée n'est pas valide ou n'a pas les autorisations nécessaires. "
	"Veuillez en sélectionner une nouvelle."
)


def _validation_exception(errors: Dict[FormField, str]) -> HTTPException:
	return HTTPException(
		status_code=422,
		detail={"errors": {field.value: msg for field, msg in errors.items()}},
	)


def _invalid_credential_exception() -> HTTPException:
	return HTTPException(status_code=401, detail={"message": INVALID_KEY, "code": "invalid_credential"})


@router.post("", response_model=AppreciationResponse)
async def create_appreciation(
	form: EvaluationInput,
	session: BrowserSession = Depends(get_browser_session),
	make_client: ClientFactory = Depends(get_client_factory),
	settings: Settings = Depends(get_settings),
):
	allow_auto = settings.auto_generate_empty_sections
	try:
		prepare_prompt(form, allow_auto_sections=allow_auto)
	except FormValidationError as e:
		raise _validation_exception(e.errors)
	try:
		client = make_client(session.api_key)
	except InvalidCredentialError:
		raise _invalid_credential_exception()
	try:
		record = await generate_appreciation(form, session, client, allow_auto_sections=allow_auto)
	except GenerationInProgress:
		raise HTTPException(status_code=409, detail="generation already in progress")
	except InvalidCredentialError:
		raise _invalid_credential_exception()
	except TransientGenerationError:
		raise HTTPException(status_code=502, detail={"message": GENERIC_FAILURE, "code": "generation_failed"})
	finally:
		await client.aclose()
	return AppreciationResponse(
		student_name=record.student_name,
		subject=record.subject,
		generated_text=record.generated_text,
		saved_count=len(session.log),
	)


@router.post("/prompt", response_model=PromptPreview)
def preview_prompt(form: EvaluationInput, settings: Settings = Depends(get_settings)):
	try:
		prompt = prepare_prompt(form, allow_auto_sections=settings.auto_generate_empty_sections)
	except FormValidationError as e:
		raise _validation_exception(e.errors)
	return PromptPreview(prompt=prompt)


@router.get("", response_model=List[SavedRecord])
def list_appreciations(session: BrowserSession = Depends(get_browser_session)):
	return [
		SavedRecord(student_name=r.student_name, subject=r.subject, generated_text=r.generated_text)
		for r in session.log
	]


@router.get("/export.csv")
def export_csv(session: BrowserSession = Depends(get_browser_session)):
	if not len(session.log):
		raise HTTPException(status_code=404, detail="no saved appreciations")
	return Response(
		content=session.log.to_csv().encode("utf-8"),
		media_type="text/csv; charset=utf-8",
		headers={"Content-Disposition": f'attachment; filename="{CSV_FILENAME}"'},
	)
