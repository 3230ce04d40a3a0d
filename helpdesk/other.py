"""Tickets of the "other" kind."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class OtherTicket:
    """Payload of a generic ticket; its estimated time equals its level."""

    description: str
    location: str
    level: int

    def estimated_time(self) -> int:
        return self.level

    def kind(self) -> str:
        return "O"

    def render(self) -> str:
        return (
            "- Tipo: Outros\n"
            f"- Descricao: {self.description}\n"
            f"- Local: {self.location}\n"
            f"- Nivel de Dificuldade: {self.level}\n"
            f"- Tempo Estimado: {self.estimated_time()}h\n"
        )


def _read_line(lines) -> str:
    for line in lines:
        if line.strip():
            return line.lstrip().rstrip("\r\n")
    raise EOFError("unexpected end of input")


def read_other(lines: Iterable[str]) -> OtherTicket:
    """Read description, location and difficulty level, one per line."""
    lines = iter(lines)
    description = _read_line(lines)
    location = _read_line(lines)
    level = int(_read_line(lines).strip())
    return OtherTicket(description, location, level)