"""Software tickets."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

TEMPO_ESTIMADO_BUG = 3
TEMPO_ESTIMADO_OUTROS = 2
TEMPO_ESTIMADO_DUVIDA = 1


def estimate_software_time(category: str, impact: int) -> int:
    """Estimated hours for a software ticket of the given category and impact.

    Bugs take the bug base time; any category other than ``DUVIDAS`` takes
    the question base time; ``DUVIDAS`` itself takes the "others" base time.
    """
    if category == "BUG":
        return TEMPO_ESTIMADO_BUG + impact
    if category != "DUVIDAS":
        return TEMPO_ESTIMADO_DUVIDA + impact
    return TEMPO_ESTIMADO_OUTROS + impact


@dataclass
class SoftwareTicket:
    """Payload of a software ticket."""

    name: str
    category: str
    impact: int
    reason: str

    def estimated_time(self) -> int:
        return estimate_software_time(self.category, self.impact)

    def kind(self) -> str:
        return "S"

    def render(self) -> str:
        return (
            "- Tipo: Software\n"
            f"- Nome do software: {self.name}\n"
            f"- Categoria: {self.category}\n"
            f"- Nível do impacto: {self.impact}\n"
            f"- Motivo: {self.reason}\n"
            f"- Tempo estimado: {self.estimated_time()}h\n"
        )


def _read_line(lines) -> str:
    for line in lines:
        if line.strip():
            return line.lstrip().rstrip("\r\n")
    raise EOFError("unexpected end of input")


def read_software(lines: Iterable[str]) -> SoftwareTicket:
    """Read name, category, impact and reason, one per line."""
    lines = iter(lines)
    name = _read_line(lines)
    category = _read_line(lines)
    impact = int(_read_line(lines).strip())
    reason = _read_line(lines)
    return SoftwareTicket(name, category, impact, reason)