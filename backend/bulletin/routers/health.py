from fastapi import APIRouter, Depends

from ..settings import Settings, get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
	return {"status": "ok"}


@router.get("/info")
def info(settings: Settings = Depends(get_settings)):
	return {
		"status": "ok",
		"gemini_configured": bool(settings.gemini_api_key),
		"gemini_model": settings.gemini_model,
		"auto_generate_empty_sections": settings.auto_generate_empty_sections,
	}
