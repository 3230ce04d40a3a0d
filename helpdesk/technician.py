"""Technicians who resolve tickets."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass

from helpdesk.dates import Date, parse_date


@dataclass
class Technician:
    """A technician with an area of work and hours available."""

    name: str
    cpf: str
    birth_date: Date
    phone: str
    gender: str
    area: str
    salary: int
    available_time: int
    worked_time: int = 0

    def assign_hours(self, hours: int) -> None:
        """Move ``hours`` from available time to worked time."""
        self.available_time -= hours
        self.worked_time += hours

    def copy(self) -> Technician:
        """An independent copy, worked time included."""
        return dataclasses.replace(self)

    def render(self) -> str:
        return (
            f"- Nome: {self.name}\n"
            f"- CPF: {self.cpf}\n"
            f"- Data de Nascimento: {self.birth_date}\n"
            f"- Telefone: {self.phone}\n"
            f"- Genero: {self.gender}\n"
            f"- Area de Atuacao: {self.area}\n"
            f"- Salario: {self.salary}.00\n"
            f"- Disponibilidade: {self.available_time}h\n"
            f"- Tempo Trabalhado: {self.worked_time}h\n"
        )


def _read_line(lines) -> str:
    for line in lines:
        if line.strip():
            return line.lstrip().rstrip("\r\n")
    raise EOFError("unexpected end of input")


def read_technician(lines: Iterable[str]) -> Technician:
    """Read name, CPF, birth date, phone, gender, area, available hours and salary."""
    lines = iter(lines)
    name = _read_line(lines)
    cpf = _read_line(lines)
    birth_date = parse_date(_read_line(lines))
    phone = _read_line(lines)
    gender = _read_line(lines)
    area = _read_line(lines)
    available_time = int(_read_line(lines).strip())
    salary = int(_read_line(lines).strip())
    return Technician(name, cpf, birth_date, phone, gender, area, salary, available_time)