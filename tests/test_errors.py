import io

import pytest

from parityworkers.errors import ErrorKind, ParityError, report_error


@pytest.mark.parametrize(
    "kind, code, message",
    [
        (ErrorKind.NB_ARGS, 1, "Incorrect number of arguments"),
        (ErrorKind.ROOT_FILE, 2, "Root config file is required"),
        (
            ErrorKind.ARGS,
            3,
            "Invalid argument: Use -h or --help for usage information",
        ),
        (ErrorKind.EXT_FILE, 4, "Incorrect extension file (must be .txt)"),
        (
            ErrorKind.NO_DATA,
            5,
            "Invalid or missing configuration value (expected format: key = value)",
        ),
        (ErrorKind.INT_MAX, 6, "Value exceeds maximum allowed integer (INT_MAX)"),
    ],
)
def test_kind_codes_and_messages(kind, code, message):
    assert int(kind) == code
    assert kind.message == message


def test_parity_error_carries_kind_and_message():
    error = ParityError(ErrorKind.ROOT_FILE)
    assert error.kind is ErrorKind.ROOT_FILE
    assert str(error) == "Root config file is required"


def test_report_error_writes_line_and_returns_failure():
    stream = io.StringIO()
    code = report_error(ParityError(ErrorKind.NB_ARGS), stream)
    assert code == 1
    assert stream.getvalue() == "Incorrect number of arguments\n"


def test_report_error_defaults_to_stdout(capsys):
    report_error(ParityError(ErrorKind.EXT_FILE))
    assert capsys.readouterr().out == "Incorrect extension file (must be .txt)\n"