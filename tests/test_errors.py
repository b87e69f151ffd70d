"""Tests for PathAwareError and MainError."""

from __future__ import annotations

import errno
import os
import pickle
from pathlib import Path

import pytest

from errortools import MainError, PathAwareError, describe_error
from fakes import ConfigError, SilentError


def _not_found(path: str) -> FileNotFoundError:
    return FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)


class TestDescribeError:
    def test_os_error_uses_strerror(self):
        assert describe_error(_not_found("/tmp/x")) == os.strerror(errno.ENOENT)

    def test_os_error_without_strerror_uses_message(self):
        assert describe_error(OSError("disk on fire")) == "disk on fire"

    def test_plain_error_uses_str(self):
        assert describe_error(ConfigError("token")) == "missing config key: token"

    def test_empty_message_falls_back_to_class_name(self):
        assert describe_error(SilentError()) == "SilentError"


class TestPathAwareError:
    def test_display_is_path_then_message(self):
        err = PathAwareError("/tmp/missing.txt", _not_found("/tmp/missing.txt"))
        assert str(err) == "/tmp/missing.txt: No such file or directory"

    def test_source_is_original_object(self):
        source = ValueError("bad header")
        err = PathAwareError("data.csv", source)
        assert err.source is source
        assert err.__cause__ is source

    def test_path_is_owned_string(self):
        path = Path("/var/log") / "app.log"
        err = PathAwareError(path, RuntimeError("x"))
        assert err.path == "/var/log/app.log"
        assert isinstance(err.path, str)

    def test_bytes_path_is_decoded(self):
        err = PathAwareError(b"/tmp/raw.bin", RuntimeError("x"))
        assert err.path == "/tmp/raw.bin"

    def test_empty_path_rejected(self):
        with pytest.raises(ValueError):
            PathAwareError("", RuntimeError("x"))

    def test_non_error_source_rejected(self):
        with pytest.raises(TypeError):
            PathAwareError("/tmp/x", "not an error")  # type: ignore[arg-type]

    def test_attributes_are_read_only(self):
        err = PathAwareError("/tmp/x", RuntimeError("x"))
        with pytest.raises(AttributeError):
            err.path = "/elsewhere"  # type: ignore[misc]
        with pytest.raises(AttributeError):
            err.source = RuntimeError("y")  # type: ignore[misc]

    def test_from_os_error(self):
        source = _not_found("/etc/app.toml")
        err = PathAwareError.from_os_error(source, "/etc/app.toml")
        assert err.source is source
        assert err.path == "/etc/app.toml"

    def test_nested_display_concatenates(self):
        inner = PathAwareError("inner.txt", RuntimeError("boom"))
        outer = PathAwareError("archive.zip", inner)
        assert str(outer) == "archive.zip: inner.txt: boom"

    def test_survives_pickling(self):
        err = PathAwareError("/tmp/missing.txt", _not_found("/tmp/missing.txt"))
        restored = pickle.loads(pickle.dumps(err))
        assert str(restored) == str(err)
        assert restored.path == err.path
        assert isinstance(restored.source, FileNotFoundError)
        assert restored.__cause__ is restored.source

    def test_raised_and_caught(self):
        with pytest.raises(PathAwareError, match="^/tmp/x: boom$"):
            raise PathAwareError("/tmp/x", RuntimeError("boom"))


class TestMainError:
    @pytest.mark.parametrize(
        "error",
        [
            ValueError("bad value"),
            KeyError("missing"),
            ConfigError("token"),
            _not_found("/tmp/missing.txt"),
            PathAwareError("/tmp/missing.txt", _not_found("/tmp/missing.txt")),
            SilentError(),
        ],
    )
    def test_display_delegates_to_inner(self, error):
        main_error = MainError.from_error(error)
        assert str(main_error) == str(error)
        assert main_error.inner is error
        assert main_error.__cause__ is error

    def test_path_error_display_unchanged(self):
        path_error = PathAwareError("/tmp/missing.txt", _not_found("/tmp/missing.txt"))
        assert str(MainError.from_error(path_error)) == "/tmp/missing.txt: No such file or directory"

    def test_from_string_message(self):
        main_error = MainError.from_error("something went wrong")
        assert str(main_error) == "something went wrong"
        assert type(main_error.inner) is Exception

    def test_from_main_error_returns_same_object(self):
        main_error = MainError.from_error(ValueError("x"))
        assert MainError.from_error(main_error) is main_error

    def test_non_error_rejected(self):
        with pytest.raises(TypeError):
            MainError.from_error(42)  # type: ignore[arg-type]

    def test_repr_names_inner(self):
        assert repr(MainError.from_error(ValueError("x"))) == "MainError(ValueError('x'))"

    def test_survives_pickling(self):
        main_error = MainError.from_error(PathAwareError("/tmp/x", RuntimeError("boom")))
        restored = pickle.loads(pickle.dumps(main_error))
        assert str(restored) == "/tmp/x: boom"
        assert isinstance(restored.inner, PathAwareError)
