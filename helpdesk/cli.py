"""Command-line entry point reading help-desk operations from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

from helpdesk.management import perform_action, register_ticket
from helpdesk.queue import TicketQueue
from helpdesk.technician import read_technician
from helpdesk.technicians import TechnicianList
from helpdesk.user import read_user
from helpdesk.users import UserList


def _next_operation(lines) -> str | None:
    for line in lines:
        stripped = line.strip()
        if stripped:
            return stripped[0]
    return None


def run(lines: Iterable[str]) -> str:
    """Process operations until ``F`` or end of input; return the output text.

    ``T`` registers a technician, ``U`` a user, ``A`` opens a ticket and
    ``E`` performs an action.
    """
    lines = iter(lines)
    technicians = TechnicianList()
    users = UserList()
    queue = TicketQueue()
    output: list[str] = []

    while (operation := _next_operation(lines)) not in (None, "F"):
        if operation == "T":
            technicians.add(read_technician(lines))
        elif operation == "U":
            users.add(read_user(lines))
        elif operation == "A":
            register_ticket(lines, queue, users)
        elif operation == "E":
            output.append(perform_action(lines, queue, users, technicians))
    return "".join(output)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="helpdesk",
        description="Read help-desk operations from standard input.",
    )
    parser.parse_args(argv)
    sys.stdout.write(run(sys.stdin))
    return 0