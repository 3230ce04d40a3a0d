"""Ticket registration, distribution to technicians, and reports."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from helpdesk.maintenance import read_maintenance
from helpdesk.other import read_other
from helpdesk.queue import TicketQueue
from helpdesk.software import read_software
from helpdesk.technicians import TechnicianList
from helpdesk.ticket import TicketStatus
from helpdesk.users import UserList


def _read_line(lines: Iterator[str]) -> str:
    for line in lines:
        if line.strip():
            return line.lstrip().rstrip("\r\n")
    raise EOFError("unexpected end of input")


def _matches(kind: str, area: str) -> bool:
    return (kind == "S") == (area == "TI")


def distribute_tickets(queue: TicketQueue, technicians: TechnicianList) -> None:
    """Assign open tickets to technicians in round-robin order.

    Software tickets go to ``TI`` technicians, all others to the rest; a
    technician takes a ticket only if it fits in their available time.
    """
    count = len(technicians)
    start = 0
    for ticket in queue:
        if ticket.status is TicketStatus.FINISHED:
            continue
        for offset in range(count):
            index = (start + offset) % count
            technician = technicians[index]
            if not _matches(ticket.kind(), technician.area):
                continue
            hours = ticket.estimated_time()
            if hours <= technician.available_time:
                technician.assign_hours(hours)
                ticket.finish()
                start = (index + 1) % count
                break


def report(queue: TicketQueue, technicians: TechnicianList, users: UserList) -> str:
    """The general report on tickets, users and technicians."""
    open_count = queue.count_by_status(TicketStatus.OPEN)
    finished_count = queue.count_by_status(TicketStatus.FINISHED)
    users_age = users.average_age()
    technicians_age = technicians.average_age()
    worked = technicians.average_worked_time()
    return (
        "----- RELATORIO GERAL -----\n"
        f"- Qtd tickets: {len(queue)}\n"
        f"- Qtd tickets (A): {open_count}\n"
        f"- Qtd tickets (F): {finished_count}\n"
        f"- Qtd usuarios: {len(users)}\n"
        f"- Md idade usuarios: {users_age}\n"
        f"- Qtd tecnicos: {len(technicians)}\n"
        f"- Md idade tecnicos: {technicians_age}\n"
        f"- Md trabalho tecnicos: {worked}\n"
        "---------------------------\n\n"
    )


def register_ticket(lines: Iterable[str], queue: TicketQueue, users: UserList) -> None:
    """Read a requester CPF, a ticket type and its fields, and queue the ticket.

    The fields are always consumed; the ticket is queued only when the
    requester is a registered user, whose ticket count then grows by one.
    """
    lines = iter(lines)
    cpf = _read_line(lines)
    kind = _read_line(lines)
    index = users.find_index(cpf)
    requester = users[index] if index is not None else None

    if kind == "MANUTENCAO":
        payload = read_maintenance(lines, requester.sector if requester else "")
    elif kind == "OUTROS":
        payload = read_other(lines)
    elif kind == "SOFTWARE":
        payload = read_software(lines)
    else:
        return

    if requester is not None:
        queue.add(cpf, payload)
        requester.add_ticket()


def perform_action(
    lines: Iterable[str],
    queue: TicketQueue,
    users: UserList,
    technicians: TechnicianList,
) -> str:
    """Read an action name, carry it out and return its output text."""
    action = _read_line(iter(lines))
    if action == "DISTRIBUI":
        distribute_tickets(queue, technicians)
        return ""
    if action == "NOTIFICA":
        return (
            "----- FILA DE TICKETS -----\n"
            f"{queue.render()}"
            "---------------------------\n\n"
        )
    if action == "USUARIOS":
        return users.render()
    if action == "TECNICOS":
        return technicians.render()
    if action == "RANKING TECNICOS":
        return technicians.ranking().render_ranking()
    if action == "RANKING USUARIOS":
        return users.ranking().render_ranking()
    if action == "RELATORIO":
        return report(queue, technicians, users)
    return ""