"""Client-side controller for the study aid.

Holds the same state the browser page keeps (input, selections, result, speech
flag) and talks to ``POST /api/ai`` over httpx. Speech, clipboard and file
export go through an injected ``Capabilities`` object so the controller never
touches platform singletons directly.
"""
from __future__ import annotations
import logging
from typing import Optional, Protocol

import httpx

from .prompts import LanguageStyle, Mode

logger = logging.getLogger(__name__)

THEMES = ("Light", "Dark", "Evening")
DOWNLOAD_NAME = "study-notes.txt"
EMPTY_INPUT_MESSAGE = "Paste some text first! ✨"
DROPDOWNS = ("lang", "mode")


class Capabilities(Protocol):
	def speak(self, text: str, voice_lang: str = "en") -> None: ...

	def cancel(self) -> None: ...

	def copy(self, text: str) -> None: ...

	def download_as_file(self, name: str, text: str) -> None: ...


class StudyClientError(Exception):
	pass


def strip_emphasis(text: str) -> str:
	return text.replace("*", "")


def count_words(text: str) -> int:
	return len(text.split())


class StudyClient:
	def __init__(self, http: httpx.Client, *, path: str = "/api/ai") -> None:
		self._http = http
		self._path = path

	def generate(self, text: str, mode: str, lang: str) -> str:
		try:
			r = self._http.post(self._path, json={"text": text, "mode": mode, "lang": lang})
		except httpx.HTTPError as err:
			raise StudyClientError(str(err) or "An unexpected error occurred.") from err
		if not r.is_success:
			message = f"Error {r.status_code}"
			try:
				detail = r.json().get("error")
			except (ValueError, AttributeError):
				detail = None
			if detail:
				message = f"{message}: {detail}"
			raise StudyClientError(message)
		try:
			data = r.json()
		except ValueError as err:
			raise StudyClientError("Server returned a response that is not JSON.") from err
		if not isinstance(data, dict):
			raise StudyClientError("Server returned an unexpected response.")
		return data.get("result") or "No output."


class StudyController:
	def __init__(self, client: StudyClient, capabilities: Capabilities) -> None:
		self.client = client
		self.capabilities = capabilities
		self.text = ""
		self.word_count = 0
		self.mode = Mode.BREAKDOWN
		self.language_style = LanguageStyle.SEMI_TELUGU
		self.theme = THEMES[0]
		self.open_dropdown: Optional[str] = None
		self.loading = False
		self.result = ""
		self.error = ""
		self.is_speaking = False

	# ---- input and selections ----

	def set_text(self, text: str) -> None:
		self.text = text
		self.word_count = count_words(text)

	def select_mode(self, mode: Mode | str) -> None:
		self.mode = Mode(mode)
		self.open_dropdown = None

	def select_language(self, style: LanguageStyle | str) -> None:
		self.language_style = LanguageStyle(style)
		self.open_dropdown = None

	def select_theme(self, theme: str) -> None:
		if theme not in THEMES:
			raise ValueError(f"Unknown theme '{theme}'")
		self.theme = theme

	def toggle_dropdown(self, name: str) -> None:
		# Opening one dropdown closes the other
		if name not in DROPDOWNS:
			raise ValueError(f"Unknown dropdown '{name}'")
		self.open_dropdown = None if self.open_dropdown == name else name

	# ---- request ----

	def submit(self) -> None:
		if self.loading:
			return
		self.error = ""
		if not self.text.strip():
			self.error = EMPTY_INPUT_MESSAGE
			return
		self.loading = True
		self.result = ""
		self._stop_speech()
		try:
			raw = self.client.generate(self.text, self.mode.value, self.language_style.value)
			self.result = strip_emphasis(raw)
		except StudyClientError as err:
			logger.warning("Generation failed: %s", err)
			self.error = str(err)
		finally:
			self.loading = False

	def clear(self) -> None:
		self.set_text("")
		self.result = ""
		self.error = ""
		self._stop_speech()

	# ---- result actions ----

	def voice_lang(self) -> str:
		return "te" if self.language_style is LanguageStyle.TELUGU else "en"

	def toggle_speech(self) -> None:
		if self.is_speaking:
			self._stop_speech()
			return
		if not self.result:
			return
		self.is_speaking = True
		self.capabilities.speak(self.result, self.voice_lang())

	def on_speech_end(self) -> None:
		self.is_speaking = False

	def copy(self) -> bool:
		if not self.result:
			return False
		self.capabilities.copy(self.result)
		return True

	def download(self) -> bool:
		if not self.result:
			return False
		self.capabilities.download_as_file(DOWNLOAD_NAME, self.result)
		return True

	def close(self) -> None:
		self._stop_speech()

	def _stop_speech(self) -> None:
		self.capabilities.cancel()
		self.is_speaking = False
