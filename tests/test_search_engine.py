import io

import pytest

from labstructs.search_engine import (
    WikiEntry,
    format_results,
    load_entries,
    main,
    parse_title,
    search,
    search_string,
)
from labstructs.search_engine import split_row

DATA = "0:10:Python\n0:12:Monty Python\n1:5:Talk:Python\n0:20:Cobra\n"


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "index.dat"
    path.write_text(DATA, encoding="utf-8")
    return path


def test_split_row_splits_on_every_colon():
    assert split_row("1:5:Talk:Python") == ["1", "5", "Talk", "Python"]


def test_parse_title_takes_third_segment():
    assert parse_title("0:10:Python") == "Python"
    assert parse_title("1:5:Talk:Python") == "Talk"


def test_parse_title_missing_segment_is_empty():
    assert parse_title("0:10") == ""


def test_from_raw_fields():
    entry = WikiEntry.from_raw("0:10:Python")
    assert (entry.namespace, entry.page_id, entry.title) == ("0", "10", "Python")


def test_equality_ignores_title():
    assert WikiEntry("a", "0", "10") == WikiEntry("b", "0", "10")
    assert not WikiEntry("a", "0", "10") == WikiEntry("a", "0", "11")


def test_ordering_is_numeric_namespace_then_id():
    assert WikiEntry("x", "0", "9") < WikiEntry("x", "0", "10")
    assert WikiEntry("x", "0", "99") < WikiEntry("x", "1", "1")
    assert not WikiEntry("x", "1", "1") < WikiEntry("x", "0", "99")


def test_ordering_rejects_non_numeric_fields():
    with pytest.raises(ValueError):
        WikiEntry("x", "a", "1") < WikiEntry("x", "0", "1")


def test_describe():
    entry = WikiEntry("python", "0", "10")
    assert entry.describe() == "Title: python\nNamespace: 0\nID: 10"


def test_load_entries_lowercases_titles(data_file):
    entries = load_entries(data_file)
    assert [e.title for e in entries] == ["python", "monty python", "talk", "cobra"]
    assert [e.page_id for e in entries] == ["10", "12", "5", "20"]


def test_load_entries_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_entries(tmp_path / "absent.dat")


def test_load_entries_malformed_line(tmp_path):
    path = tmp_path / "bad.dat"
    path.write_text("0:10\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_entries(path)


def test_search_string_is_case_insensitive(data_file):
    entries = load_entries(data_file)
    found = search_string(entries, "PYTHON")
    assert [e.page_id for e in found] == ["10", "12"]


def test_search_intersects_terms(data_file):
    entries = load_entries(data_file)
    found = search(entries, ["python", "monty"])
    assert [e.title for e in found] == ["monty python"]


def test_search_single_term_matches_search_string(data_file):
    entries = load_entries(data_file)
    assert search(entries, ["co"]) == search_string(entries, "co")


def test_search_with_no_terms_is_empty(data_file):
    assert search(load_entries(data_file), []) == []


def test_format_results_empty():
    assert "No results found" in format_results([])


def test_format_results_aligns_columns():
    entries = [WikiEntry("ab", "0", "12"), WikiEntry("longer title", "14", "7")]
    text = format_results(entries)
    assert text.startswith("\nSearch Results:\n------------------\n")
    rows = [line for line in text.splitlines() if "[NS]" in line]
    assert len(rows) == 2
    assert rows[0].startswith("ab")
    assert rows[0].endswith("[ID] 12")
    assert rows[1].endswith("[ID] 7")
    assert rows[0].index("[NS]") == rows[1].index("[NS]")
    assert rows[0].index("[ID]") == rows[1].index("[ID]")


def test_main_runs_queries(data_file, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("monty\nzzz\n"))
    assert main([str(data_file)]) == 0
    out = capsys.readouterr().out
    assert "wikiData loaded successfully!" in out
    assert "monty python" in out
    assert "No results found" in out
    assert out.count("The program took") == 2


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.dat")]) == 1
    assert "File failed to load" in capsys.readouterr().out