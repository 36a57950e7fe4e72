"""Statistical language identification of message text."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

from lingua import LanguageDetector, LanguageDetectorBuilder

from .languages import LANGUAGE_NAMES

UNDETERMINED = "und"


@lru_cache(maxsize=1)
def _detector() -> LanguageDetector:
    return LanguageDetectorBuilder.from_all_languages().with_low_accuracy_mode().build()


def identify(text: str) -> list[tuple[str, float]]:
    """Return ``(iso639-3 code, confidence)`` pairs, most probable first."""

    if not text or not text.strip():
        return []
    candidates = _detector().compute_language_confidence_values(text)
    return [
        (candidate.language.iso_code_639_3.name.lower(), candidate.value)
        for candidate in candidates
        if candidate.value > 0
    ]


def pick_language(candidates: Sequence[tuple[str, float]]) -> str:
    """Choose a code from ranked candidates.

    Scots ranked just above English is reported as English; the detector
    routinely confuses the two on short English texts.
    """

    first = candidates[0][0] if len(candidates) > 0 else UNDETERMINED
    second = candidates[1][0] if len(candidates) > 1 else UNDETERMINED
    if first == "sco" and second == "eng":
        return second
    return first


def detect_language(text: str | None, subject: str | None = None) -> str:
    """Detect the language of the body text, falling back to the subject."""

    return pick_language(identify(text or subject or ""))


def language_name(code: str) -> str:
    return LANGUAGE_NAMES.get(code, code)


__all__ = ["UNDETERMINED", "detect_language", "identify", "language_name", "pick_language"]
