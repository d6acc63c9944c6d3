from __future__ import annotations
import logging
import httpx
from typing import Any, Dict, List, Optional
from .errors import ConfigurationError
from .models import (
	NO_OUTPUT,
	GenerationResult,
	InternalError,
	ProviderError,
	SafetyBlocked,
	Success,
)
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Lenient defaults: only high-severity harassment and hate speech is blocked
SAFETY_SETTINGS: List[Dict[str, str]] = [
	{"category": "HARM_CATEGORY_HARASSMENT", "threshold": "BLOCK_ONLY_HIGH"},
	{"category": "HARM_CATEGORY_HATE_SPEECH", "threshold": "BLOCK_ONLY_HIGH"},
]


def _first_candidate(data: Any) -> Optional[Dict[str, Any]]:
	if not isinstance(data, dict):
		return None
	candidates = data.get("candidates")
	if not isinstance(candidates, list) or not candidates:
		return None
	first = candidates[0]
	return first if isinstance(first, dict) else None


def _first_text(candidate: Optional[Dict[str, Any]]) -> Optional[str]:
	if candidate is None:
		return None
	content = candidate.get("content")
	if not isinstance(content, dict):
		return None
	parts = content.get("parts")
	if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
		return None
	text = parts[0].get("text")
	return text if isinstance(text, str) else None


class GeminiGateway:
	"""Single-shot client for the Generative Language `generateContent` call."""

	def __init__(
		self,
		api_key: Optional[str] = None,
		*,
		model: Optional[str] = None,
		base_url: Optional[str] = None,
		timeout: Optional[float] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None,
		config: Optional[Settings] = None,
	) -> None:
		config = config or get_settings()
		self.api_key = api_key or config.gemini_api_key
		if not self.api_key:
			raise ConfigurationError("API Key is missing. Set GEMINI_API_KEY in the environment or .env")
		self.model = model or config.gemini_model
		root = (base_url or config.gemini_base_url).rstrip("/")
		self.url = f"{root}/models/{self.model}:generateContent"
		self._client = httpx.AsyncClient(
			timeout=timeout if timeout is not None else config.gemini_timeout_seconds,
			transport=transport,
		)

	def build_payload(self, prompt: str) -> Dict[str, Any]:
		return {
			"contents": [{"parts": [{"text": prompt}]}],
			"safetySettings": SAFETY_SETTINGS,
		}

	async def generate(self, prompt: str) -> GenerationResult:
		try:
			r = await self._client.post(self.url, params={"key": self.api_key}, json=self.build_payload(prompt))
			if not r.is_success:
				logger.warning("Gemini returned %s for model %s", r.status_code, self.model)
				return ProviderError(status_code=r.status_code, details=r.text)
			data = r.json()
		except Exception as err:
			logger.exception("Gemini call failed")
			return InternalError(message=str(err) or err.__class__.__name__)
		candidate = _first_candidate(data)
		if candidate is not None and candidate.get("finishReason") == "SAFETY":
			logger.info("Gemini blocked the response on safety grounds")
			return SafetyBlocked()
		text = _first_text(candidate)
		return Success(text=text if text is not None else NO_OUTPUT)

	async def aclose(self) -> None:
		await self._client.aclose()

	async def __aenter__(self) -> "GeminiGateway":
		return self

	async def __aexit__(self, *exc_info: Any) -> None:
		await self.aclose()
