"""Users who open tickets."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass

from helpdesk.dates import Date, parse_date


@dataclass
class User:
    """A user belonging to a sector, with a count of requested tickets."""

    name: str
    cpf: str
    birth_date: Date
    phone: str
    gender: str
    sector: str
    ticket_count: int = 0

    def add_ticket(self) -> None:
        """Count one more ticket requested by this user."""
        self.ticket_count += 1

    def copy(self) -> User:
        """An independent copy, ticket count included."""
        return dataclasses.replace(self)

    def render(self) -> str:
        return (
            f"- Nome: {self.name}\n"
            f"- CPF: {self.cpf}\n"
            f"- Data de Nascimento: {self.birth_date}\n"
            f"- Telefone: {self.phone}\n"
            f"- Genero: {self.gender}\n"
            f"- Setor: {self.sector}\n"
            f"- Tickets solicitados: {self.ticket_count}\n"
        )


def _read_line(lines) -> str:
    for line in lines:
        if line.strip():
            return line.lstrip().rstrip("\r\n")
    raise EOFError("unexpected end of input")


def read_user(lines: Iterable[str]) -> User:
    """Read name, CPF, birth date, phone, gender and sector, one per line."""
    lines = iter(lines)
    name = _read_line(lines)
    cpf = _read_line(lines)
    birth_date = parse_date(_read_line(lines))
    phone = _read_line(lines)
    gender = _read_line(lines)
    sector = _read_line(lines)
    return User(name, cpf, birth_date, phone, gender, sector)