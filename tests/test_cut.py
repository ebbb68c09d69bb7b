import io
import sys

import pytest

import cut
from cut import (
    ConfigError,
    Extract,
    IllegalToken,
    ParseError,
    RangeOrder,
    RecordError,
    Selector,
    build_selector,
    check_delimiter,
    extract_bytes,
    extract_chars,
    extract_fields,
    parse_pos,
)


def _illegal(text):
    with pytest.raises(IllegalToken) as excinfo:
        parse_pos(text)
    return excinfo.value


def _set_stdin(monkeypatch, data: bytes):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data), encoding="utf-8"))


def test_parse_pos_rejects_empty_and_zero():
    assert _illegal("").token == ""
    assert str(_illegal("0")) == 'illegal list value: "0"'
    # A zero inside a range is reported on its own.
    assert str(_illegal("0-1")) == 'illegal list value: "0"'


def test_parse_pos_rejects_plus_sign_anywhere():
    assert str(_illegal("+1")) == 'illegal list value: "+1"'
    assert str(_illegal("+1-2")) == 'illegal list value: "+1-2"'
    assert str(_illegal("1-+2")) == 'illegal list value: "1-+2"'


def test_parse_pos_rejects_non_numeric_values():
    assert str(_illegal("a")) == 'illegal list value: "a"'
    assert str(_illegal("1,a")) == 'illegal list value: "a"'
    assert str(_illegal("1-a")) == 'illegal list value: "1-a"'
    assert str(_illegal("a-1")) == 'illegal list value: "a-1"'


@pytest.mark.parametrize("text", ["-", ",", "1,", "1-", "-1", "1-1-1", "1-1-a", "1 ", "١"])
def test_parse_pos_rejects_malformed_values(text):
    with pytest.raises(ParseError):
        parse_pos(text)


def test_parse_pos_range_order():
    with pytest.raises(RangeOrder) as excinfo:
        parse_pos("1-1")
    assert str(excinfo.value) == "First number in range (1) must be lower than second number (1)"

    with pytest.raises(RangeOrder) as excinfo:
        parse_pos("2-1")
    assert (excinfo.value.first, excinfo.value.second) == (2, 1)
    assert str(excinfo.value) == "First number in range (2) must be lower than second number (1)"

    # Leading zeros are gone from the message.
    with pytest.raises(RangeOrder) as excinfo:
        parse_pos("03-002")
    assert str(excinfo.value) == "First number in range (3) must be lower than second number (2)"


def test_parse_pos_error_after_valid_values_discards_everything():
    with pytest.raises(IllegalToken):
        parse_pos("1,2,3-4,x")


def test_parse_pos_valid_lists():
    assert parse_pos("1") == (range(0, 1),)
    assert parse_pos("01") == (range(0, 1),)
    assert parse_pos("1,3") == (range(0, 1), range(2, 3))
    assert parse_pos("001,0003") == (range(0, 1), range(2, 3))
    assert parse_pos("1-3") == (range(0, 3),)
    assert parse_pos("0001-03") == (range(0, 3),)
    assert parse_pos("1,7,3-5") == (range(0, 1), range(6, 7), range(2, 5))
    assert parse_pos("15,19-20") == (range(14, 15), range(18, 20))


def test_parse_pos_keeps_duplicates_and_is_deterministic():
    assert parse_pos("2,2,1-3") == (range(1, 2), range(1, 2), range(0, 3))
    assert parse_pos("3-5,1") == parse_pos("3-5,1")


def test_extract_chars():
    assert extract_chars("", [range(0, 1)]) == ""
    assert extract_chars("abc", [range(0, 1), range(2, 3)]) == "ac"
    assert extract_chars("あbc", [range(0, 1)]) == "あ"
    assert extract_chars("あbc", [range(0, 1), range(2, 3)]) == "あc"
    assert extract_chars("あbc", [range(0, 3)]) == "あbc"
    assert extract_chars("あbc", [range(2, 3), range(1, 2)]) == "cb"
    assert extract_chars("あbc", [range(0, 1), range(1, 2), range(4, 5)]) == "あb"


def test_extract_bytes():
    line = "あbc".encode("utf-8")
    assert extract_bytes(line, [range(0, 1)]) == "�"
    assert extract_bytes(line, [range(0, 3)]) == "あ"
    assert extract_bytes(line, [range(0, 4)]) == "あb"
    assert extract_bytes(line, [range(0, 5)]) == "あbc"
    assert extract_bytes(line, [range(4, 5), range(3, 4)]) == "cb"
    assert extract_bytes(line, [range(0, 3), range(6, 7)]) == "あ"


def test_extract_bytes_split_character_gives_one_marker():
    line = "あbc".encode("utf-8")
    assert extract_bytes(line, [range(0, 2), range(3, 4)]) == "�b"


def test_extract_fields():
    rec = ["Captain", "Sham", "12345"]
    assert extract_fields(rec, [range(0, 1)]) == ["Captain"]
    assert extract_fields(rec, [range(1, 2)]) == ["Sham"]
    assert extract_fields(rec, [range(0, 1), range(2, 3)]) == ["Captain", "12345"]
    assert extract_fields(rec, [range(5, 6)]) == []
    assert extract_fields(rec, [range(0, 2), range(1, 2)]) == ["Captain", "Sham", "Sham"]


def test_build_selector():
    assert build_selector(field_list="1,3") == Selector(Extract.FIELDS, (range(0, 1), range(2, 3)))
    assert build_selector(byte_list="2").mode is Extract.BYTES
    assert build_selector(char_list="1-2").positions == (range(0, 2),)


def test_build_selector_requires_exactly_one_list():
    with pytest.raises(ConfigError) as excinfo:
        build_selector()
    message = str(excinfo.value)
    assert "--fields" in message and "--bytes" in message and "--chars" in message

    with pytest.raises(ConfigError):
        build_selector(field_list="1", byte_list="1")


def test_check_delimiter():
    assert check_delimiter(",") == ","
    with pytest.raises(ConfigError) as excinfo:
        check_delimiter(",,")
    assert str(excinfo.value) == '--delim ",," must be a single byte'
    with pytest.raises(ConfigError):
        check_delimiter("")
    with pytest.raises(ConfigError):
        check_delimiter("é")


def test_run_chars_and_bytes(tmp_path, capsys):
    path = tmp_path / "lines.txt"
    path.write_text("あbc\r\nxyz\n", encoding="utf-8")

    assert cut.run(build_selector(char_list="1,3"), [str(path)]) == 0
    assert capsys.readouterr().out == "あc\nxz\n"

    assert cut.run(build_selector(byte_list="1"), [str(path)]) == 0
    assert capsys.readouterr().out == "�\nx\n"


def test_run_fields_with_default_tab(tmp_path, capsys):
    path = tmp_path / "movies.tsv"
    path.write_text("Captain\tSham\t12345\nLily\tFrog\t678\n", encoding="utf-8")

    assert cut.run(build_selector(field_list="1,3"), [str(path)]) == 0
    assert capsys.readouterr().out == "Captain\t12345\nLily\t678\n"


def test_run_fields_requotes_output(tmp_path, capsys):
    path = tmp_path / "books.csv"
    path.write_text('"Austen, Jane",Emma,1815\n', encoding="utf-8")

    assert cut.run(build_selector(field_list="1,2"), [str(path)], ",") == 0
    assert capsys.readouterr().out == '"Austen, Jane",Emma\n'


def test_run_reads_stdin_for_dash(monkeypatch, capsys):
    _set_stdin(monkeypatch, b"hello\nworld\n")
    assert cut.run(build_selector(char_list="2-3"), ["-"]) == 0
    assert capsys.readouterr().out == "el\nor\n"


def test_run_skips_missing_file_and_continues(tmp_path, capsys):
    good = tmp_path / "good.txt"
    good.write_text("abc\n", encoding="utf-8")
    missing = tmp_path / "missing.txt"

    status = cut.run(build_selector(char_list="1"), [str(missing), str(good)])

    captured = capsys.readouterr()
    assert status == 1
    assert captured.out == "a\n"
    assert captured.err == f"{missing}: No such file or directory\n"


def test_run_stops_on_malformed_record(tmp_path, capsys):
    bad = tmp_path / "bad.csv"
    bad.write_text("a,b,c\nd,e\nf,g,h\n", encoding="utf-8")
    never = tmp_path / "never.csv"
    never.write_text("x,y,z\n", encoding="utf-8")

    with pytest.raises(RecordError) as excinfo:
        cut.run(build_selector(field_list="1"), [str(bad), str(never)], ",")

    assert excinfo.value.filename == str(bad)
    assert capsys.readouterr().out == "a\n"


def test_main_parse_error_before_any_io(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    with pytest.raises(SystemExit) as excinfo:
        cut.main(["-f", "0", str(missing)])

    captured = capsys.readouterr()
    assert excinfo.value.code == 1
    assert captured.out == ""
    assert captured.err == 'illegal list value: "0"\n'


def test_main_bad_delimiter(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cut.main(["-f", "1", "-d", ",,"])
    assert excinfo.value.code == 1
    assert capsys.readouterr().err == '--delim ",," must be a single byte\n'


def test_main_requires_a_selector(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cut.main(["file.txt"])
    assert excinfo.value.code == 1
    assert "the following required arguments were not provided" in capsys.readouterr().err


def test_main_rejects_two_selectors():
    with pytest.raises(SystemExit) as excinfo:
        cut.main(["-f", "1", "-b", "1"])
    assert excinfo.value.code == 2


def test_main_record_error_exits_nonzero(tmp_path, capsys):
    bad = tmp_path / "bad.tsv"
    bad.write_text("a\tb\nc\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        cut.main(["-f", "2", str(bad)])

    captured = capsys.readouterr()
    assert excinfo.value.code == 1
    assert captured.out == "b\n"
    assert "found record with 1 fields" in captured.err


def test_run_chars_lone_carriage_return_stays_in_line(tmp_path, capsys):
    path = tmp_path / "cr.txt"
    path.write_bytes(b"a\rb\n")

    assert cut.run(build_selector(char_list="1-3"), [str(path)]) == 0
    assert capsys.readouterr().out == "a\rb\n"

    assert cut.run(build_selector(byte_list="1-3"), [str(path)]) == 0
    assert capsys.readouterr().out == "a\rb\n"


def test_run_fields_accepts_text_after_closing_quote(tmp_path, capsys):
    path = tmp_path / "loose.csv"
    path.write_text('"a"b,c\nd,e\n', encoding="utf-8")

    assert cut.run(build_selector(field_list="1,2"), [str(path)], ",") == 0
    assert capsys.readouterr().out == "ab,c\nd,e\n"
