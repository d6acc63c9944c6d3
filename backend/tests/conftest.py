from typing import Any, Callable, Dict, List

import httpx
import pytest
from fastapi.testclient import TestClient

from studyaid.gemini_client import GeminiGateway
from studyaid.main import app
from studyaid.routers.ai import get_gateway_factory
from studyaid.settings import Settings, get_settings


class FakeProvider:
	"""Stands in for the Gemini endpoint and records every request it sees."""

	def __init__(self) -> None:
		self.requests: List[httpx.Request] = []
		self.reply: Callable[[httpx.Request], httpx.Response] = lambda request: gemini_reply("ok")

	@property
	def call_count(self) -> int:
		return len(self.requests)

	def handler(self, request: httpx.Request) -> httpx.Response:
		self.requests.append(request)
		return self.reply(request)

	def transport(self) -> httpx.MockTransport:
		return httpx.MockTransport(self.handler)


def gemini_reply(text: str, *, finish_reason: str = "STOP", status_code: int = 200) -> httpx.Response:
	body: Dict[str, Any] = {
		"candidates": [
			{"content": {"parts": [{"text": text}], "role": "model"}, "finishReason": finish_reason}
		]
	}
	return httpx.Response(status_code, json=body)


@pytest.fixture
def test_settings() -> Settings:
	return Settings(GEMINI_API_KEY="test-key", GEMINI_MODEL="gemini-test", GEMINI_BASE_URL="https://gemini.test/v1beta")


@pytest.fixture
def provider() -> FakeProvider:
	return FakeProvider()


@pytest.fixture
def client(test_settings: Settings, provider: FakeProvider):
	app.dependency_overrides[get_settings] = lambda: test_settings
	app.dependency_overrides[get_gateway_factory] = lambda: (
		lambda: GeminiGateway(config=test_settings, transport=provider.transport())
	)
	with TestClient(app) as c:
		yield c
	app.dependency_overrides.clear()
