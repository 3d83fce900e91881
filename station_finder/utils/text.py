"""Text helpers for case-insensitive matching."""

from __future__ import annotations


def fold_text(text: str) -> str:
    """대소문자 구분 없는 비교용 문자열

    예시:
    - "Car Wash" -> "car wash"
    - "STRASSE" / "Straße" -> "strasse"
    """
    if not text:
        return ""
    return text.casefold()


def contains_folded(haystack: str, folded_needle: str) -> bool:
    """haystack에 이미 fold된 needle이 포함되는지 여부"""
    if not haystack:
        return False
    return folded_needle in haystack.casefold()
