from __future__ import annotations
import logging
from typing import Callable, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..gemini_client import GeminiGateway
from ..models import AIRequest, AIResponse, ErrorResponse
from ..prompts import GenerationRequest, build_prompt, resolve_language_style, resolve_mode
from ..settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["ai"])

GatewayFactory = Callable[[], GeminiGateway]


def get_gateway_factory(config: Settings = Depends(get_settings)) -> GatewayFactory:
	# Deferred so the key is only checked once the lesson text has been validated
	return lambda: GeminiGateway(config=config)


@router.post(
	"/ai",
	response_model=AIResponse,
	responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate(
	req: Optional[AIRequest] = None,
	make_gateway: GatewayFactory = Depends(get_gateway_factory),
):
	req = req or AIRequest()
	request = GenerationRequest(
		text=req.text,
		mode=resolve_mode(req.mode),
		language_style=resolve_language_style(req.lang),
	)
	prompt = build_prompt(request)
	logger.info(
		"Generating %s in %s for %d characters of lesson text",
		request.mode.value,
		request.language_style.value,
		len(request.text),
	)
	async with make_gateway() as gateway:
		outcome = await gateway.generate(prompt)
	status_code, body = outcome.to_response()
	return JSONResponse(status_code=status_code, content=body)


@router.api_route("/ai", methods=["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"], include_in_schema=False)
async def method_not_allowed():
	return JSONResponse(status_code=405, content={"error": "Only POST allowed"}, headers={"Allow": "POST"})
