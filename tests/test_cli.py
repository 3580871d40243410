import io

import pytest

from hotrace.cli import (
    UnexpectedEOF,
    format_result,
    main,
    parse_pairs,
    run_searches,
)
from hotrace.hashmap import HashMap


def _feed_stdin(monkeypatch, data: bytes) -> None:
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(data)))


def test_parse_pairs_stops_at_empty_line():
    table = HashMap(16)
    lines = iter([b"k1", b"v1", b"k2", b"v2", b"", b"k1"])
    parse_pairs(lines, table, io.StringIO())
    assert table.get(b"k1") == b"v1"
    assert table.get(b"k2") == b"v2"
    assert list(lines) == [b"k1"]


def test_parse_pairs_duplicate_key_keeps_last_value():
    table = HashMap(16)
    parse_pairs(iter([b"k", b"old", b"k", b"new", b""]), table, io.StringIO())
    assert table.get(b"k") == b"new"
    assert len(table) == 1


def test_parse_pairs_empty_input_is_eof():
    with pytest.raises(UnexpectedEOF):
        parse_pairs(iter([]), HashMap(16), io.StringIO())


def test_parse_pairs_missing_value_is_eof():
    table = HashMap(16)
    with pytest.raises(UnexpectedEOF) as info:
        parse_pairs(iter([b"k1", b"v1", b"k2"]), table, io.StringIO())
    assert str(info.value) == "Unexpected EOF"
    assert table.get(b"k1") == b"v1"


def test_parse_pairs_empty_value_warns_and_ends():
    table = HashMap(16)
    err = io.StringIO()
    lines = iter([b"k1", b"", b"k1"])
    parse_pairs(lines, table, err)
    assert err.getvalue() == "Unexpected empty line\n"
    assert len(table) == 0
    assert list(lines) == [b"k1"]


def test_format_result_found():
    assert format_result(b"key", b"value") == b"value\n"


def test_format_result_not_found():
    assert format_result(b"key", None) == b"key: Not found.\n"


def test_run_searches_skips_empty_lines():
    table = HashMap(16)
    table.insert(b"a", b"alpha")
    out = io.BytesIO()
    run_searches(iter([b"a", b"", b"b", b"a"]), table, out)
    assert out.getvalue() == b"alpha\nb: Not found.\nalpha\n"


def test_main_full_run(monkeypatch, capsysbinary):
    _feed_stdin(monkeypatch, b"k1\nv1\nk2\nv2\n\nk2\nk3\n\nk1\n")
    assert main([]) == 0
    captured = capsysbinary.readouterr()
    assert captured.out == b"v2\nk3: Not found.\nv1\n"
    assert captured.err == b""


def test_main_last_search_without_newline(monkeypatch, capsysbinary):
    _feed_stdin(monkeypatch, b"k\nv\n\nk")
    assert main([]) == 0
    assert capsysbinary.readouterr().out == b"v\n"


def test_main_unexpected_eof(monkeypatch, capsysbinary):
    _feed_stdin(monkeypatch, b"k1\nv1\nk2\n")
    assert main([]) == 1
    captured = capsysbinary.readouterr()
    assert captured.out == b""
    assert captured.err == b"Unexpected EOF\n"


def test_main_empty_value_continues_with_searches(monkeypatch, capsysbinary):
    _feed_stdin(monkeypatch, b"k1\nv1\nk2\n\nk1\nk2\n")
    assert main([]) == 0
    captured = capsysbinary.readouterr()
    assert captured.err == b"Unexpected empty line\n"
    assert captured.out == b"v1\nk2: Not found.\n"


def test_main_rejects_unknown_arguments(monkeypatch):
    _feed_stdin(monkeypatch, b"")
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2