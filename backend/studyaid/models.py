from __future__ import annotations
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel


SAFETY_WARNING = "⚠️ Content was blocked by safety filters. Try rephrasing your text."
NO_OUTPUT = "No output produced."


class AIRequest(BaseModel):
	# Raw strings so an unknown mode reaches the prompt builder and gets a readable 400
	text: str = ""
	mode: Optional[str] = "Breakdown"
	lang: Optional[str] = "Semi-Telugu"


class AIResponse(BaseModel):
	result: str


class ErrorResponse(BaseModel):
	error: str
	message: Optional[str] = None
	details: Optional[str] = None


# ---- Gateway outcomes: exactly one of these is returned per provider call ----

class Success(BaseModel):
	text: str

	def to_response(self) -> Tuple[int, Dict[str, Any]]:
		return 200, {"result": self.text}


class SafetyBlocked(BaseModel):
	message: str = SAFETY_WARNING

	def to_response(self) -> Tuple[int, Dict[str, Any]]:
		# The call itself succeeded; the warning is the result
		return 200, {"result": self.message}


class ProviderError(BaseModel):
	status_code: int
	details: str

	def to_response(self) -> Tuple[int, Dict[str, Any]]:
		return self.status_code, {"error": f"Gemini API Error: {self.status_code}", "details": self.details}


class InternalError(BaseModel):
	message: str

	def to_response(self) -> Tuple[int, Dict[str, Any]]:
		return 500, {"error": "Internal Server Error", "message": self.message}


GenerationResult = Union[Success, SafetyBlocked, ProviderError, InternalError]
