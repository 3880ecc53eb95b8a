import io
import os
from unittest import mock

import pytest

from corekit.terminal import terminal_size


def test_string_stream_is_not_terminal():
    with pytest.raises(OSError, match="no terminal"):
        terminal_size(io.StringIO())


def test_object_without_fileno_is_not_terminal():
    with pytest.raises(OSError, match="no terminal"):
        terminal_size(object())


def test_regular_file_is_not_terminal(tmp_path):
    with open(tmp_path / "out.txt", "w") as handle:
        with pytest.raises(OSError, match="no terminal"):
            terminal_size(handle)


def test_terminal_reports_size(tmp_path):
    with open(tmp_path / "out.txt", "w") as handle:
        with mock.patch("os.isatty", return_value=True), mock.patch(
            "os.get_terminal_size", return_value=os.terminal_size((120, 40))
        ):
            assert terminal_size(handle) == (120, 40)


def test_size_error_propagates(tmp_path):
    with open(tmp_path / "out.txt", "w") as handle:
        with mock.patch("os.isatty", return_value=True), mock.patch(
            "os.get_terminal_size", side_effect=OSError("bad ioctl")
        ):
            with pytest.raises(OSError, match="bad ioctl"):
                terminal_size(handle)