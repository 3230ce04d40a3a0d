"""Generic tickets wrapping a type-specific payload."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Protocol


class TicketStatus(enum.Enum):
    """Status of a ticket."""

    OPEN = "A"
    FINISHED = "F"


class TicketPayload(Protocol):
    """The type-specific part of a ticket."""

    def estimated_time(self) -> int: ...

    def kind(self) -> str: ...

    def render(self) -> str: ...


_STATUS_LABELS = {
    TicketStatus.OPEN: "Aberto",
    TicketStatus.FINISHED: "Finalizado",
}


@dataclass
class Ticket:
    """A ticket opened by a requester, holding a typed payload."""

    requester_cpf: str
    payload: TicketPayload
    ticket_id: str = ""
    status: TicketStatus = TicketStatus.OPEN

    def finish(self) -> None:
        """Mark the ticket as finished."""
        self.status = TicketStatus.FINISHED

    def estimated_time(self) -> int:
        """Estimated hours to resolve, as given by the payload."""
        return self.payload.estimated_time()

    def kind(self) -> str:
        """One-letter type code of the payload."""
        return self.payload.kind()

    def render(self) -> str:
        """Text description of the ticket."""
        return (
            "---------TICKET-----------\n"
            f"- ID: {self.ticket_id}\n"
            f"- Usuario solicitante: {self.requester_cpf}\n"
            f"{self.payload.render()}"
            f"- Status: {_STATUS_LABELS[self.status]}\n"
            "-------------------------\n"
        )