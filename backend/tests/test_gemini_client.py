import asyncio
import json

import httpx
import pytest

from conftest import FakeProvider, gemini_reply
from studyaid.errors import ConfigurationError
from studyaid.gemini_client import GeminiGateway
from studyaid.models import NO_OUTPUT, SAFETY_WARNING, InternalError, ProviderError, SafetyBlocked, Success
from studyaid.settings import Settings


def run(gateway: GeminiGateway, prompt: str = "prompt"):
	async def go():
		async with gateway:
			return await gateway.generate(prompt)
	return asyncio.run(go())


def test_missing_key_is_a_configuration_error():
	with pytest.raises(ConfigurationError):
		GeminiGateway(config=Settings(GEMINI_API_KEY=None))


def test_request_shape(test_settings, provider: FakeProvider):
	result = run(GeminiGateway(config=test_settings, transport=provider.transport()), "hello prompt")
	assert result == Success(text="ok")
	assert provider.call_count == 1
	request = provider.requests[0]
	assert request.method == "POST"
	assert request.url.path == "/v1beta/models/gemini-test:generateContent"
	assert request.url.params["key"] == "test-key"
	body = json.loads(request.content)
	assert body["contents"] == [{"parts": [{"text": "hello prompt"}]}]
	assert body["safetySettings"] == [
		{"category": "HARM_CATEGORY_HARASSMENT", "threshold": "BLOCK_ONLY_HIGH"},
		{"category": "HARM_CATEGORY_HATE_SPEECH", "threshold": "BLOCK_ONLY_HIGH"},
	]


def test_safety_finish_reason_is_not_an_error(test_settings, provider):
	provider.reply = lambda request: httpx.Response(200, json={"candidates": [{"finishReason": "SAFETY"}]})
	result = run(GeminiGateway(config=test_settings, transport=provider.transport()))
	assert isinstance(result, SafetyBlocked)
	assert result.to_response() == (200, {"result": SAFETY_WARNING})


@pytest.mark.parametrize("body", [{}, {"candidates": []}, {"candidates": [{"content": {"parts": []}}]}, []])
def test_missing_candidate_text_yields_placeholder(test_settings, provider, body):
	provider.reply = lambda request: httpx.Response(200, json=body)
	result = run(GeminiGateway(config=test_settings, transport=provider.transport()))
	assert result == Success(text=NO_OUTPUT)


def test_non_success_status_passes_raw_body_through(test_settings, provider):
	provider.reply = lambda request: httpx.Response(503, text='{"error": {"code": 503}}')
	result = run(GeminiGateway(config=test_settings, transport=provider.transport()))
	assert result == ProviderError(status_code=503, details='{"error": {"code": 503}}')
	assert result.to_response()[0] == 503


def test_network_failure_is_internal_error(test_settings):
	def boom(request):
		raise httpx.ConnectError("name resolution failed", request=request)

	result = run(GeminiGateway(config=test_settings, transport=httpx.MockTransport(boom)))
	assert result == InternalError(message="name resolution failed")
	assert result.to_response() == (500, {"error": "Internal Server Error", "message": "name resolution failed"})


def test_malformed_body_is_internal_error(test_settings, provider):
	provider.reply = lambda request: httpx.Response(200, text="<html>not json</html>")
	result = run(GeminiGateway(config=test_settings, transport=provider.transport()))
	assert isinstance(result, InternalError)


def test_explicit_arguments_override_settings(test_settings, provider):
	gateway = GeminiGateway("other-key", model="gemini-other", config=test_settings, transport=provider.transport())
	run(gateway)
	assert provider.requests[0].url.params["key"] == "other-key"
	assert provider.requests[0].url.path.endswith("/models/gemini-other:generateContent")


def test_reply_helper_round_trip(test_settings, provider):
	provider.reply = lambda request: gemini_reply("Plants turn light into food.")
	assert run(GeminiGateway(config=test_settings, transport=provider.transport())).text == "Plants turn light into food."


def test_any_exception_during_call_is_internal_error(test_settings):
	def broken(request):
		raise RuntimeError("stream broke")

	result = run(GeminiGateway(config=test_settings, transport=httpx.MockTransport(broken)))
	assert result == InternalError(message="stream broke")
