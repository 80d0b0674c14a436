import json

import main


def _fail_open_session():
    raise AssertionError("spreadsheet must not be opened")


def test_bad_query_rejected_before_session(monkeypatch, capsys):
    monkeypatch.setattr(main, "open_session", _fail_open_session)
    assert main.main(["query", "дата", "вчера"]) == 2
    assert "Неверный формат даты" in capsys.readouterr().out


def test_empty_table_rejected_before_session(monkeypatch, capsys, tmp_path):
    monkeypatch.setattr(main, "open_session", _fail_open_session)
    table = tmp_path / "empty.csv"
    table.write_text("")
    assert main.main(["highlight", str(table)]) == 2
    assert "Файл пустой" in capsys.readouterr().out


def test_highlight_flow(monkeypatch, capsys, tmp_path, session):
    monkeypatch.setattr(main, "open_session", lambda: session)
    table = tmp_path / "rk.csv"
    table.write_text("РК,ТК\nSummer Sale,1001\nSummer Sale,9999\n", encoding="utf-8")
    assert main.main(["highlight", str(table)]) == 0
    out = capsys.readouterr().out
    assert "РК найдена в строке 3" in out
    assert "Выделено ячеек: 1" in out
    assert "• 9999" in out


def test_query_flow(monkeypatch, capsys, session):
    monkeypatch.setattr(main, "open_session", lambda: session)
    assert main.main(["query", "тип", "ГМ"]) == 0
    assert "Найдено роликов: 2" in capsys.readouterr().out


def test_status_prints_health_state(monkeypatch, capsys, session):
    monkeypatch.setattr(main, "open_session", lambda: session)
    assert main.main(["status"]) == 0
    state = json.loads(capsys.readouterr().out)
    assert state["googleSheetsConnected"] is True
    assert state["spreadsheet"]["title"] == "Медиаплан"
