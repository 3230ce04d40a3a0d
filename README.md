# helpdesk

A small help-desk system driven by a line-oriented script on standard input.
It keeps a register of users, a register of technicians and a queue of
tickets. It hands open tickets out to technicians who have enough time left,
and it prints listings, rankings and a summary report.

## Installation

```
pip install .
```

## Usage

```
helpdesk < commands.txt
```

The `helpdesk` command takes no options besides `--help`. It reads operations
from standard input and writes the output of the actions to standard output.

Each operation starts with a one-letter code on its own line. The lines it
needs come after it. Blank lines are skipped.

- `U` registers a user. The next lines give the name, CPF, birth date
  (`d/m/yyyy`), phone, gender and sector. A user whose CPF is already
  registered is ignored.
- `T` registers a technician. The next lines give the name, CPF, birth date,
  phone, gender, area of work, available hours and salary. A technician whose
  CPF is already registered is ignored.
- `A` opens a ticket. The next line gives the requester's CPF and the line
  after it gives the ticket type. The type is followed by its own lines:
  - `SOFTWARE`: software name, category, impact and reason.
  - `MANUTENCAO` (maintenance): item name, state of conservation and location.
  - `OUTROS` (other): description, location and difficulty level.

  The ticket's lines are always read. The ticket is queued only when the
  requester is a registered user, and that user's ticket count then goes up
  by one. Queued tickets are numbered `Tick-1`, `Tick-2` and so on.
- `E` runs an action, named on the next line:
  - `DISTRIBUI` assigns open tickets to technicians.
  - `NOTIFICA` prints the ticket queue.
  - `USUARIOS` prints the user register.
  - `TECNICOS` prints the technician register.
  - `RANKING TECNICOS` prints technicians by hours worked, most first, with
    ties broken by name.
  - `RANKING USUARIOS` prints users by tickets requested, most first, with
    ties broken by name.
  - `RELATORIO` prints ticket counts by status, the number of users and
    technicians, their average ages and the technicians' average hours
    worked.

  An unknown action prints nothing.
- `F` stops. The end of the input also stops processing.

## Estimated times

- Software tickets are 3 hours plus the impact for category `BUG`, 2 plus the
  impact for `DUVIDAS`, and 1 plus the impact for any other category.
- Maintenance tickets use a state weight (`RUIM` 3, `REGULAR` 2, `BOM` 1)
  times a sector weight (`RH` 2, `FINANCEIRO` 3, `P&D`, `VENDAS` and
  `MARKETING` 1). The sector is the requester's sector. An unknown state or
  sector weighs 0.
- Other tickets take as many hours as their difficulty level.

## Distribution

`DISTRIBUI` walks the queue in order and skips finished tickets. It offers
each open ticket to technicians round-robin, starting after the technician
who took the previous ticket. Software tickets go only to technicians whose
area is `TI`. All other tickets go only to the remaining technicians. A
technician takes a ticket if its estimated time fits in their available
hours. Those hours then move to their worked time and the ticket is
finished. A ticket that no one can take stays open.

Ages are counted in whole years as of 18/2/2025. Averages are truncated to
whole numbers. The report raises `ZeroDivisionError` if there are no users or
no technicians.

## Library use

The same behaviour is available from Python:

```python
from helpdesk.cli import run

output = run(lines)  # lines: any iterable of input lines
print(output, end="")
```

The building blocks:

- `helpdesk.dates`: `Date` (`compare`, `years_until`) and `parse_date`.
- `helpdesk.ticket`: `Ticket`, `TicketStatus` and the `TicketPayload` protocol.
- `helpdesk.software`, `helpdesk.maintenance`, `helpdesk.other`:
  `SoftwareTicket`, `MaintenanceTicket` and `OtherTicket`, their readers
  `read_software`, `read_maintenance` and `read_other`, and
  `estimate_software_time` and `estimate_maintenance_time`.
- `helpdesk.queue`: `TicketQueue` (`add`, `count_by_status`, `render`).
- `helpdesk.technician` and `helpdesk.user`: `Technician`, `User`,
  `read_technician` and `read_user`.
- `helpdesk.technicians` and `helpdesk.users`: `TechnicianList` and `UserList`
  (`add`, `find_index`, `ranking`, `render`, `render_ranking`,
  `average_age`, and `TechnicianList.average_worked_time`).
- `helpdesk.management`: `distribute_tickets`, `report`, `register_ticket` and
  `perform_action`.

## What it does not do

All data lives in memory for one run only. Nothing is saved between runs, and
no ticket can be edited, removed or closed except through `DISTRIBUI`.