##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
Tests for the `main.py` module.
"""

import sys

import pytest
from pytest_mock import MockerFixture

from librarian import main as librarian_main


@pytest.fixture(autouse=True)
def no_logging_setup(mocker: MockerFixture):
    """
    Keep `main` from reconfiguring the shared `librarian` logger.

    Args:
        mocker: PyTest mocker fixture.
    """
    return mocker.patch("librarian.main.setup_logging")


def test_no_arguments_prints_help(mocker: MockerFixture, capsys: pytest.CaptureFixture):
    """
    Test that running with no arguments prints the help.

    Args:
        mocker: PyTest mocker fixture.
        capsys: PyTest capsys fixture.
    """
    mocker.patch.object(sys, "argv", ["librarian"])

    assert librarian_main.main() == 1
    assert "usage: librarian" in capsys.readouterr().out


def test_successful_command_exits_zero(mocker: MockerFixture, no_logging_setup):
    """
    Test that a command that succeeds exits cleanly with the requested log level.

    Args:
        mocker: PyTest mocker fixture.
        no_logging_setup: The patched `setup_logging`.
    """
    mocker.patch.object(sys, "argv", ["librarian", "-lvl", "debug", "rebuild", "-f"])
    mock_process = mocker.patch("librarian.cli.commands.rebuild.RebuildCommand.process_command")

    with pytest.raises(SystemExit) as excinfo:
        librarian_main.main()

    assert excinfo.value.code is None
    assert no_logging_setup.call_args.kwargs["log_level"] == "DEBUG"
    mock_process.assert_called_once()


def test_failing_command_exits_one(
    mocker: MockerFixture, db_file: str, caplog: pytest.LogCaptureFixture
):
    """
    Test that an error raised by a command is logged and turned into exit code 1.

    Args:
        mocker: PyTest mocker fixture.
        db_file: The path to a database file that doesn't exist yet.
        caplog: PyTest caplog fixture.
    """
    mocker.patch.object(sys, "argv", ["librarian", "-db", db_file, "book", "get", "12"])

    with pytest.raises(SystemExit) as excinfo:
        librarian_main.main()

    assert excinfo.value.code == 1
    assert "Book with id '12' does not exist" in caplog.text
