"""Album title composition."""

from __future__ import annotations


def compose_title(mood: str, span: str, place: str) -> str:
    return "A " + mood + " " + span + " in " + place
