from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import get_browser_session
from ..schemas import CredentialRequest, CredentialStatus
from ..sessions import BrowserSession

router = APIRouter(prefix="/credentials", tags=["credentials"])


@router.get("", response_model=CredentialStatus)
def credential_status(session: BrowserSession = Depends(get_browser_session)):
	return CredentialStatus(has_key=bool(session.api_key))


@router.post("", response_model=CredentialStatus)
def set_credential(req: CredentialRequest, session: BrowserSession = Depends(get_browser_session)):
	key = (req.api_key or "").strip()
	if not key:
		raise HTTPException(status_code=400, detail="api_key is required")
	session.api_key = key
	return CredentialStatus(has_key=True)


@router.delete("", response_model=CredentialStatus)
def forget_credential(session: BrowserSession = Depends(get_browser_session)):
	session.api_key = None
	return CredentialStatus(has_key=False)
