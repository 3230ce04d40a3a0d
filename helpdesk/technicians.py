"""The register of technicians."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from helpdesk.dates import Date
from helpdesk.technician import Technician

REFERENCE_DATE = Date(18, 2, 2025)


def _truncated_mean(total: int, count: int) -> int:
    if count == 0:
        raise ZeroDivisionError("average of an empty list")
    quotient = abs(total) // count
    return quotient if total >= 0 else -quotient


class TechnicianList:
    """Technicians in registration order, unique by CPF."""

    def __init__(self, technicians: Iterable[Technician] = ()) -> None:
        self._technicians: list[Technician] = []
        for technician in technicians:
            self.add(technician)

    def add(self, technician: Technician) -> bool:
        """Register ``technician`` unless its CPF is taken; report whether it was added."""
        if self.find_index(technician.cpf) is not None:
            return False
        self._technicians.append(technician)
        return True

    def find_index(self, cpf: str) -> int | None:
        """Position of the technician with ``cpf``, or None."""
        return next(
            (i for i, technician in enumerate(self._technicians) if technician.cpf == cpf),
            None,
        )

    def __len__(self) -> int:
        return len(self._technicians)

    def __getitem__(self, index: int) -> Technician:
        return self._technicians[index]

    def __iter__(self) -> Iterator[Technician]:
        return iter(self._technicians)

    def add_hours(self, cpf: str, hours: int) -> None:
        """Assign ``hours`` to the technician with ``cpf``, if registered."""
        index = self.find_index(cpf)
        if index is not None:
            self._technicians[index].assign_hours(hours)

    def ranking(self) -> TechnicianList:
        """Copies ordered by worked time, most first, ties by name."""
        ordered = sorted(
            (technician.copy() for technician in self._technicians),
            key=lambda technician: (-technician.worked_time, technician.name),
        )
        return TechnicianList(ordered)

    def _render_with(self, header: str, footer: str) -> str:
        body = "".join(
            f"--------------------\n{technician.render()}" for technician in self._technicians
        )
        return f"{header}\n{body}{footer}\n\n"

    def render(self) -> str:
        return self._render_with(
            "----- BANCO DE TECNICOS -----", "----------------------------"
        )

    def render_ranking(self) -> str:
        return self._render_with(
            "----- RANKING DE TECNICOS -----", "-------------------------------"
        )

    def average_age(self) -> int:
        """Mean age in whole years on the reference date, truncated."""
        total = sum(t.birth_date.years_until(REFERENCE_DATE) for t in self._technicians)
        return _truncated_mean(total, len(self._technicians))

    def average_worked_time(self) -> int:
        """Mean worked hours, truncated."""
        total = sum(t.worked_time for t in self._technicians)
        return _truncated_mean(total, len(self._technicians))