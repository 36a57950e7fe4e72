"""Subject line metrics."""

from __future__ import annotations

import emoji

from ..types import SubjectMetrics


def find_emojis(text: str) -> list[str]:
    """Return every emoji glyph in ``text`` in order of appearance."""

    return [match["emoji"] for match in emoji.emoji_list(text)]


def subject_metrics(subject: str | None) -> SubjectMetrics:
    if not subject:
        return SubjectMetrics()
    return SubjectMetrics(
        chars=len(subject),
        words=len(subject.split()),
        emojis=find_emojis(subject),
    )


__all__ = ["find_emojis", "subject_metrics"]
