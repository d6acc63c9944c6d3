from fastapi import APIRouter

from ..client import THEMES
from ..prompts import LanguageStyle, Mode

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
	return {"ok": True}


@router.get("/api/options")
def options():
	"""Values the frontend offers in its dropdowns, defaults first."""
	return {
		"modes": [m.value for m in Mode],
		"languages": [l.value for l in LanguageStyle],
		"themes": list(THEMES),
	}
