import pytest

from parityworkers.args import (
    HELP_MSG,
    HelpRequested,
    is_file_flag,
    is_help_flag,
    parse_args,
)
from parityworkers.errors import ErrorKind, ParityError


@pytest.mark.parametrize("arg, expected", [("-h", True), ("--help", True),
                                           ("-help", False), ("-hh", False),
                                           ("-f", False)])
def test_is_help_flag(arg, expected):
    assert is_help_flag(arg) is expected


@pytest.mark.parametrize("arg, expected", [("-f", True), ("--file", True),
                                           ("--files", False), ("-h", False)])
def test_is_file_flag(arg, expected):
    assert is_file_flag(arg) is expected


@pytest.mark.parametrize("flag", ["-f", "--file"])
def test_parse_args_returns_path(flag):
    assert parse_args([flag, "conf.txt"]) == "conf.txt"


@pytest.mark.parametrize("argv", [[], ["-f", "a.txt", "extra"]])
def test_wrong_number_of_arguments(argv):
    with pytest.raises(ParityError) as info:
        parse_args(argv)
    assert info.value.kind is ErrorKind.NB_ARGS


def test_file_flag_without_path():
    with pytest.raises(ParityError) as info:
        parse_args(["--file"])
    assert info.value.kind is ErrorKind.ROOT_FILE


def test_unknown_flag():
    with pytest.raises(ParityError) as info:
        parse_args(["-x", "conf.txt"])
    assert info.value.kind is ErrorKind.ARGS


@pytest.mark.parametrize("argv", [["-h"], ["--help", "conf.txt"]])
def test_help_requested(argv):
    with pytest.raises(HelpRequested) as info:
        parse_args(argv)
    assert str(info.value) == HELP_MSG