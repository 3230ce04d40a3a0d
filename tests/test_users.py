import pytest

from helpdesk.dates import Date
from helpdesk.user import User
from helpdesk.users import UserList


def make_user(name, cpf, sector="RH", birth=Date(1, 1, 1990)):
    return User(name, cpf, birth, "0000", "M", sector)


def test_add_rejects_duplicate_cpf():
    users = UserList()
    first = make_user("Ana", "111")
    assert users.add(first) is True
    assert users.add(make_user("Outro", "111")) is False
    assert len(users) == 1
    assert users[0] is first


def test_find_index():
    users = UserList([make_user("Ana", "1"), make_user("Bia", "2")])
    assert users.find_index("1") == 0
    assert users.find_index("2") == 1
    assert users.find_index("3") is None


def test_ranking_orders_by_tickets_then_name():
    users = UserList([make_user("Caio", "1"), make_user("Bia", "2"), make_user("Ana", "3")])
    users[1].add_ticket()
    users[2].add_ticket()
    ranked = users.ranking()
    assert [u.name for u in ranked] == ["Ana", "Bia", "Caio"]
    assert [u.name for u in users] == ["Caio", "Bia", "Ana"]


def test_ranking_keeps_ticket_counts_and_copies():
    users = UserList([make_user("Ana", "1")])
    users[0].add_ticket()
    ranked = users.ranking()
    assert ranked[0].ticket_count == users[0].ticket_count
    ranked[0].add_ticket()
    assert users[0].ticket_count == ranked[0].ticket_count - 1


def test_render_contains_users():
    users = UserList([make_user("Ana", "1"), make_user("Bia", "2")])
    text = users.render()
    assert text.startswith("----- BANCO DE USUARIOS -----\n")
    assert text.endswith("----------------------------\n\n")
    for user in users:
        assert f"--------------------\n{user.render()}" in text


def test_render_ranking_header():
    users = UserList([make_user("Ana", "1")])
    text = users.render_ranking()
    assert text.startswith("----- RANKING DE USUARIOS -----\n")
    assert text.endswith("-------------------------------\n\n")


def test_average_age():
    users = UserList([make_user("Ana", "1", birth=Date(18, 2, 2000))])
    assert users.average_age() == 25


def test_average_age_empty_raises():
    with pytest.raises(ZeroDivisionError):
        UserList().average_age()