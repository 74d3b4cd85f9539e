from typing import Dict, List

from fastapi import APIRouter

from ..schemas import FormOptions
from ..suggestions import SUGGESTION_KEYWORDS, form_options

router = APIRouter(prefix="/options", tags=["options"])


@router.get("", response_model=FormOptions)
def get_options():
	return form_options()


@router.get("/suggestions")
def get_suggestions() -> Dict[str, List[str]]:
	return {field.value: list(words) for field, words in SUGGESTION_KEYWORDS.items()}
