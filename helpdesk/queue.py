"""A first-in first-out queue of tickets."""

from __future__ import annotations

from collections.abc import Iterator

from helpdesk.ticket import Ticket, TicketPayload, TicketStatus


class TicketQueue:
    """Tickets in the order they were opened, numbered ``Tick-1``, ``Tick-2``..."""

    def __init__(self) -> None:
        self._tickets: list[Ticket] = []

    def add(self, requester_cpf: str, payload: TicketPayload) -> Ticket:
        """Append a new ticket for ``payload`` and return it."""
        ticket = Ticket(
            requester_cpf,
            payload,
            ticket_id=f"Tick-{len(self._tickets) + 1}",
        )
        self._tickets.append(ticket)
        return ticket

    def __len__(self) -> int:
        return len(self._tickets)

    def __getitem__(self, index: int) -> Ticket:
        return self._tickets[index]

    def __iter__(self) -> Iterator[Ticket]:
        return iter(self._tickets)

    def count_by_status(self, status: TicketStatus | str) -> int:
        """Number of tickets with the given status (enum or its letter)."""
        status = TicketStatus(status)
        return sum(1 for ticket in self._tickets if ticket.status is status)

    def render(self) -> str:
        """Every ticket's text, each followed by a blank line."""
        return "".join(f"{ticket.render()}\n" for ticket in self._tickets)