from __future__ import annotations
import logging
from typing import Any, Dict, Optional, Type

import httpx

from .exceptions import GenerationError, InvalidCredentialError, TransientGenerationError
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


# Gemini does not guarantee stable error codes, so credential problems are
# recognised from the wording of the reported error.
CREDENTIAL_ERROR_MARKERS = (
	"api key not valid",
	"api key invalid",
	"permission",
	"not found",
	"unauthenticated",
	"invalid authentication",
)


def classify_error(message: str) -> Type[GenerationError]:
	normalized = (message or "").lower().replace("_", " ")
	if any(marker in normalized for marker in CREDENTIAL_ERROR_MARKERS):
		return InvalidCredentialError
	return TransientGenerationError


def _error_message(r: httpx.Response) -> str:
	try:
		body = r.json()
	except Exception:
		return f"HTTP {r.status_code}: {r.text}"
	err = body.get("error") if isinstance(body, dict) else None
	if not isinstance(err, dict):
		return f"HTTP {r.status_code}: {err or r.text}"
	parts = [str(err.get("status") or ""), str(err.get("message") or "")]
	detail = " ".join(p for p in parts if p).strip()
	return f"HTTP {r.status_code}: {detail or r.text}"


class GeminiClient:
	def __init__(
		self,
		api_key: Optional[str] = None,
		*,
		base_url: Optional[str] = None,
		model: Optional[str] = None,
		config: Optional[Settings] = None,
		http_client: Optional[httpx.AsyncClient] = None,
	) -> None:
		config = config or get_settings()
		self.api_key = api_key or config.gemini_api_key
		if not self.api_key:
			raise InvalidCredentialError("GEMINI_API_KEY is not configured")
		self.model = model or config.gemini_model
		self.provider = config.gemini_provider
		if self.provider == "vertex":
			region = config.vertex_region
			project = config.vertex_project or "placeholder-project"
			# Vertex AI Generative REST endpoint (API key via header)
			self.base_url = base_url or (
				f"https://{region}-aiplatform.googleapis.com/v1/projects/{project}/locations/{region}/publishers/google/models/{self.model}:generateContent"
			)
			self._auth_in_query = False
		else:
			# Google AI Studio (Generative Language API)
			self.base_url = base_url or f"https://generativelanguage.googleapis.com/v1beta/models/{self.model}:generateContent"
			self._auth_in_query = True
		self._client = http_client or httpx.AsyncClient(timeout=config.gemini_timeout_seconds)

	async def generate(self, prompt: str) -> str:
		"""Send one prompt and return the trimmed completion text.

		Raises InvalidCredentialError or TransientGenerationError; never retries.
		"""
		payload: Dict[str, Any] = {"contents": [{"parts": [{"text": prompt}]}]}
		params: Dict[str, Any] = {}
		headers: Dict[str, str] = {}
		if self._auth_in_query:
			params["key"] = self.api_key
		else:
			headers["x-goog-api-key"] = self.api_key
		try:
			r = await self._client.post(self.base_url, params=params, headers=headers, json=payload)
		except httpx.RequestError as net_err:
			logger.warning("Gemini request failed: %s", net_err.__class__.__name__)
			raise TransientGenerationError(f"Gemini request failed: {net_err.__class__.__name__}") from net_err
		if r.is_error:
			message = _error_message(r)
			error_cls = classify_error(message)
			logger.warning("Gemini call failed (%s): %s", error_cls.__name__, message)
			raise error_cls(message)
		try:
			data = r.json()
			parts = data["candidates"][0]["content"]["parts"]
			text = "".join(part.get("text", "") for part in parts)
		except Exception as err:
			logger.warning("Unexpected Gemini response: %s", r.text[:500])
			raise TransientGenerationError("Unexpected Gemini response") from err
		text = text.strip()
		if not text:
			raise TransientGenerationError("Gemini returned an empty response")
		return text

	async def aclose(self) -> None:
		await self._client.aclose()
