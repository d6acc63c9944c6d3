from __future__ import annotations
from enum import Enum
from typing import Dict

from pydantic import BaseModel

from .errors import ValidationError


class Mode(str, Enum):
	BREAKDOWN = "Breakdown"
	SUMMARY = "Summary"
	FLASHCARDS = "Flashcards"
	MCQS = "MCQs"


class LanguageStyle(str, Enum):
	SEMI_TELUGU = "Semi-Telugu"
	TELUGU = "Telugu"
	ENGLISH = "English"


FLASHCARD_COUNT = 6
MCQ_COUNT = 8
MCQ_OPTIONS = ("A)", "B)", "C)", "D)")

NO_MARKDOWN_DIRECTIVE = (
	"STRICT: Do not use any markdown formatting like stars, hashtags, underscores or bold text. "
	"Return only plain text."
)

LANGUAGE_DIRECTIVES: Dict[LanguageStyle, str] = {
	LanguageStyle.SEMI_TELUGU: (
		"Use Tanglish (Telugu slang written in English letters like 'em avtundi', 'ante', 'inka'). "
		"Do NOT use Telugu script (తెలుగు). "
		"Use the Telugu that a normal Telugu speaking person uses every day."
	),
	LanguageStyle.TELUGU: (
		"Use full Telugu script (తెలుగు), but do not use any complex Telugu words. "
		"Use the Telugu that a normal Telugu speaking person uses every day."
	),
	LanguageStyle.ENGLISH: (
		"Use clear, simple English that a complete English beginner can understand. "
		"Do NOT use any Telugu words."
	),
}


class GenerationRequest(BaseModel):
	text: str
	mode: Mode = Mode.BREAKDOWN
	language_style: LanguageStyle = LanguageStyle.SEMI_TELUGU


def resolve_mode(value: str | Mode | None) -> Mode:
	if isinstance(value, Mode):
		return value
	try:
		return Mode(value or Mode.BREAKDOWN.value)
	except ValueError:
		allowed = ", ".join(m.value for m in Mode)
		raise ValidationError(f"Unknown mode '{value}'. Choose one of: {allowed}.")


def resolve_language_style(value: str | LanguageStyle | None) -> LanguageStyle:
	"""Map a raw language value to a style; anything unrecognized reads as English."""
	if isinstance(value, LanguageStyle):
		return value
	try:
		return LanguageStyle(value)
	except ValueError:
		return LanguageStyle.ENGLISH


def _breakdown_instructions(style: LanguageStyle) -> str:
	return (
		"TASK: Break down the following lesson into clear bullet points.\n"
		"RULES:\n"
		"1. Cover only the important topics from the text and avoid duplicated points. "
		"Keep bullet points medium sized with respect to the text provided.\n"
		"2. Each bullet point MUST be exactly 2 to 3 lines long to provide a clear explanation.\n"
		"3. Use '-' as the bullet character.\n"
		"4. Keep the language simple so a student can understand it easily.\n"
		"5. If there is a side heading, include it followed by its own bullet points. "
		"Do not leave a blank line between a side heading and its bullet points. "
		"Only leave a blank line between one side heading group and the next."
	)


def _summary_instructions(style: LanguageStyle) -> str:
	return (
		"TASK: Provide a complete and simple summary of the entire text provided.\n"
		"RULES:\n"
		"1. Do NOT use bullet points. Write it as a cohesive, easy-to-read narrative.\n"
		"2. Ensure you summarize all main ideas from the start to the end of the text.\n"
		"3. Keep the tone helpful and encouraging for a student."
	)


def _flashcard_instructions(style: LanguageStyle) -> str:
	return (
		f"TASK: Create exactly {FLASHCARD_COUNT} flashcards in {style.value} from the text.\n"
		"RULES:\n"
		"1. Write each flashcard as a line starting with 'Q:' followed by a line starting with 'A:'.\n"
		"2. Leave one blank line between flashcards."
	)


def _mcq_instructions(style: LanguageStyle) -> str:
	options = ", ".join(MCQ_OPTIONS)
	return (
		f"TASK: Create exactly {MCQ_COUNT} multiple choice questions in {style.value} from the text.\n"
		"RULES:\n"
		f"1. Each question has exactly four options labeled {options}.\n"
		"2. After the options, add a line starting with 'Answer:' giving the correct option letter.\n"
		"3. Leave one blank line between questions."
	)


# Every builder takes the style, even those whose wording does not depend on it
MODE_INSTRUCTIONS = {
	Mode.BREAKDOWN: (_breakdown_instructions, "TEXT TO BREAK DOWN:"),
	Mode.SUMMARY: (_summary_instructions, "TEXT TO SUMMARIZE:"),
	Mode.FLASHCARDS: (_flashcard_instructions, "TEXT FOR FLASHCARDS:"),
	Mode.MCQS: (_mcq_instructions, "TEXT FOR MCQS:"),
}


def build_prompt(request: GenerationRequest) -> str:
	"""Build the full prompt for one lesson.

	Order is fixed: no-markdown directive, language directive, task rules for the
	mode, a delimiter line, then the lesson text exactly as the user pasted it.
	"""
	if not request.text or not request.text.strip():
		raise ValidationError("No lesson text provided.")
	instructions, delimiter = MODE_INSTRUCTIONS[request.mode]
	return (
		f"{NO_MARKDOWN_DIRECTIVE}\n"
		f"{LANGUAGE_DIRECTIVES[request.language_style]}\n"
		f"{instructions(request.language_style)}\n\n"
		f"{delimiter}\n"
		f"{request.text}"
	)
