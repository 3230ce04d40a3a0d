import io

from helpdesk.cli import main, run

USER = ["U", "Ana", "111", "18/2/2000", "0000", "F", "RH"]
TECH = ["T", "Bia", "222", "1/1/1990", "0000", "F", "REDES", "10", "3000"]
TICKET = ["A", "111", "OUTROS", "Porta quebrada", "Sala 1", "2"]


def test_stop_immediately():
    assert run(["F", "E", "USUARIOS"]) == ""


def test_end_of_input_without_f():
    assert run(USER) == ""


def test_users_listing():
    out = run(USER + ["E", "USUARIOS", "F"])
    assert out.startswith("----- BANCO DE USUARIOS -----\n")
    assert "- Nome: Ana\n" in out
    assert "- Setor: RH\n" in out


def test_ticket_distribution_flow():
    lines = USER + TECH + TICKET + ["E", "DISTRIBUI", "E", "NOTIFICA", "F"]
    out = run(lines)
    assert out.startswith("----- FILA DE TICKETS -----\n")
    assert "- ID: Tick-1\n" in out
    assert "- Status: Finalizado\n" in out


def test_ticket_from_unknown_user_is_not_queued():
    lines = USER + ["A", "999", "OUTROS", "x", "y", "1", "E", "NOTIFICA", "F"]
    out = run(lines)
    assert out == "----- FILA DE TICKETS -----\n---------------------------\n\n"


def test_duplicate_user_ignored():
    out = run(USER + ["U", "Outra", "111", "1/1/1990", "0000", "F", "RH", "E", "USUARIOS", "F"])
    assert "- Nome: Outra\n" not in out
    assert out.count("- CPF: 111\n") == 1


def test_main_reads_stdin(monkeypatch, capsys):
    text = "\n".join(USER + ["E", "USUARIOS", "F"]) + "\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == run(USER + ["E", "USUARIOS", "F"])