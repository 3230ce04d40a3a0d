import pytest

from helpdesk.other import OtherTicket
from helpdesk.queue import TicketQueue
from helpdesk.ticket import TicketStatus


def _payload(level=2):
    return OtherTicket("Lampada queimada", "Corredor", level)


def test_empty_queue():
    queue = TicketQueue()
    assert len(queue) == 0
    assert list(queue) == []
    assert queue.render() == ""


def test_ids_follow_insertion_order():
    queue = TicketQueue()
    first = queue.add("cpf-a", _payload())
    second = queue.add("cpf-b", _payload())
    assert first.ticket_id == "Tick-1"
    assert second.ticket_id == "Tick-2"
    assert [t.requester_cpf for t in queue] == ["cpf-a", "cpf-b"]


def test_getitem_returns_added_ticket():
    queue = TicketQueue()
    ticket = queue.add("cpf-a", _payload())
    assert queue[0] is ticket
    with pytest.raises(IndexError):
        queue[5]


def test_new_tickets_are_open():
    queue = TicketQueue()
    for _ in range(3):
        queue.add("cpf-a", _payload())
    assert queue.count_by_status(TicketStatus.OPEN) == len(queue)
    assert queue.count_by_status(TicketStatus.FINISHED) == 0


def test_count_by_status_after_finish():
    queue = TicketQueue()
    for _ in range(3):
        queue.add("cpf-a", _payload())
    queue[1].finish()
    assert queue.count_by_status("F") == 1
    assert queue.count_by_status("A") + queue.count_by_status("F") == len(queue)


def test_count_by_unknown_status():
    queue = TicketQueue()
    with pytest.raises(ValueError):
        queue.count_by_status("X")


def test_ticket_delegates_to_payload():
    queue = TicketQueue()
    ticket = queue.add("cpf-a", _payload(level=4))
    assert ticket.estimated_time() == 4
    assert ticket.kind() == "O"


def test_render_joins_tickets_with_blank_lines():
    queue = TicketQueue()
    queue.add("cpf-a", _payload())
    queue.add("cpf-b", _payload())
    assert queue.render() == queue[0].render() + "\n" + queue[1].render() + "\n"