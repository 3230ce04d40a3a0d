"""Maintenance tickets."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

_STATE_HOURS = {
    "RUIM": 3,
    "REGULAR": 2,
    "BOM": 1,
}

_SECTOR_HOURS = {
    "RH": 2,
    "FINANCEIRO": 3,
    "P&D": 1,
    "VENDAS": 1,
    "MARKETING": 1,
}


def estimate_maintenance_time(state: str, sector: str) -> int:
    """Estimated hours: state weight times sector weight.

    An unknown state or sector weighs zero.
    """
    return _STATE_HOURS.get(state, 0) * _SECTOR_HOURS.get(sector, 0)


@dataclass
class MaintenanceTicket:
    """Payload of a maintenance ticket."""

    name: str
    state: str
    location: str
    sector: str

    def estimated_time(self) -> int:
        return estimate_maintenance_time(self.state, self.sector)

    def kind(self) -> str:
        return "M"

    def render(self) -> str:
        return (
            "- Tipo: Manutencao\n"
            f"- Nome do item: {self.name}\n"
            f"- Estado de conservacao: {self.state}\n"
            f"- Local: {self.location}\n"
            f"- Tempo estimado: {self.estimated_time()}h\n"
        )


def _read_line(lines) -> str:
    for line in lines:
        if line.strip():
            return line.lstrip().rstrip("\r\n")
    raise EOFError("unexpected end of input")


def read_maintenance(lines: Iterable[str], sector: str) -> MaintenanceTicket:
    """Read item name, state and location, one per line, for the given sector."""
    lines = iter(lines)
    name = _read_line(lines)
    state = _read_line(lines)
    location = _read_line(lines)
    return MaintenanceTicket(name, state, location, sector)