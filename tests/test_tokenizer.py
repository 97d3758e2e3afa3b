"""Tests for parsing the rwxrwxrwx display form."""

from __future__ import annotations

import pytest

from umask.errors import ModeParseError, ParseErrno
from umask.flags import Class, ExtraPermission
from umask.mode import Mode
from umask.tokenizer import ModeTokenizer


class TestParse:
    def test_plain(self):
        assert Mode.parse("rw-r--r--") == Mode(0o644)
        assert Mode.parse("---------") == Mode.new()
        assert Mode.parse("rwxrwxrwx") == Mode.all()

    def test_lowercase_special_sets_extra_and_exec(self):
        m = Mode.parse("rwsr-sr-t")
        assert int(m) == 0o7755

    def test_uppercase_special_sets_extra_only(self):
        m = Mode.parse("rwSr-S--T")
        assert int(m) == 0o7640
        assert not m.isExe()

    def test_mixed(self):
        assert int(Mode.parse("rwSr-s--T")) == 0o7650

    def test_every_display_string_parses_back(self):
        for value in range(0o10000):
            m = Mode(value)
            s = str(m)
            assert Mode.parse(s) == m
            assert str(Mode.parse(s)) == s

    def test_parse_drops_high_bits(self):
        m = Mode(0o104755)
        assert Mode.parse(str(m)) == m & Mode(0o7777)


class TestCells:
    def test_read_cell(self):
        assert ModeTokenizer.tokenizeRead("r--rw-", 3, Class.GROUP) == 0o040
        assert ModeTokenizer.tokenizeRead("-w", 0, Class.GROUP) == 0

    def test_write_cell(self):
        assert ModeTokenizer.tokenizeWrite("rw-rw-rw-", 7, Class.OTHERS) == 0o002

    def test_exec_cell(self):
        tokenize = ModeTokenizer.tokenizeExec
        assert tokenize("rwx", 2, Class.USER, ExtraPermission.SETUID, "s") == 0o100
        assert tokenize("rws", 2, Class.USER, ExtraPermission.SETUID, "s") == 0o4100
        assert tokenize("rwS", 2, Class.USER, ExtraPermission.SETUID, "s") == 0o4000
        assert tokenize("rw-", 2, Class.USER, ExtraPermission.SETUID, "s") == 0

    def test_empty_input(self):
        with pytest.raises(ModeParseError) as info:
            ModeTokenizer.nextChar("rw-r", 4)
        assert info.value.errno == ParseErrno.NOT_ENOUGH_INPUT
        assert info.value.position == 4

    def test_long_input_reports_first_extra_character(self):
        with pytest.raises(ModeParseError) as info:
            Mode.parse("rw-r--r--" + "q" + "x" * 100000)
        assert info.value.errno == ParseErrno.TRAILING_CHARACTERS
        assert info.value.char == "q"
        assert info.value.position == 9


class TestParseErrors:
    def test_invalid_first_character(self):
        with pytest.raises(ModeParseError) as info:
            Mode.parse("xw-r--r---")
        assert info.value.errno == ParseErrno.INVALID_CHARACTER
        assert info.value.char == "x"
        assert info.value.position == 0

    @pytest.mark.parametrize(
        ("text", "char", "position"),
        [
            ("Rw-r--r--", "R", 0),
            ("rx-r--r--", "x", 1),
            ("rwtr--r--", "t", 2),
            ("rw-w--r--", "w", 3),
            ("rw-r-tr--", "t", 5),
            ("rw-r--r-s", "s", 8),
            ("rw-r--r-S", "S", 8),
            ("rw-r--r- ", " ", 8),
            ("rw-ré-r--", "é", 4),
        ],
    )
    def test_invalid_character(self, text, char, position):
        with pytest.raises(ModeParseError) as info:
            Mode.parse(text)
        assert info.value.errno == ParseErrno.INVALID_CHARACTER
        assert info.value.char == char
        assert info.value.position == position

    @pytest.mark.parametrize("text", ["", "r", "rw-r--r-"])
    def test_not_enough_input(self, text):
        with pytest.raises(ModeParseError) as info:
            Mode.parse(text)
        assert info.value.errno == ParseErrno.NOT_ENOUGH_INPUT
        assert info.value.position == len(text)

    def test_trailing_characters(self):
        with pytest.raises(ModeParseError) as info:
            Mode.parse("rw-r--r--x")
        assert info.value.errno == ParseErrno.TRAILING_CHARACTERS
        assert info.value.char == "x"
        assert info.value.position == 9

    def test_invalid_character_wins_over_length(self):
        with pytest.raises(ModeParseError) as info:
            Mode.parse("rw-q")
        assert info.value.errno == ParseErrno.INVALID_CHARACTER
        assert info.value.position == 3

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            Mode.parse("nope")

    def test_message(self):
        with pytest.raises(ModeParseError) as info:
            Mode.parse("xw-r--r--")
        assert str(info.value) == "ModeParseError:(INVALID_CHARACTER: invalid character 'x' at position 0)"
        assert info.value.args[0] == "invalid character 'x' at position 0"

    def test_not_a_string(self):
        with pytest.raises(TypeError):
            Mode.parse(b"rw-r--r--")
