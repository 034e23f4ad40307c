from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from printlog.core.location import (
    CallerLocation,
    abs_to_rel_filepath,
    abs_to_simple_filepath,
    caller_location,
)


def test_rel_filepath_keeps_last_two_nodes():
    assert abs_to_rel_filepath("/a/b/c") == ("b/c", True)
    assert abs_to_rel_filepath("/tmp/aaa/bbb/ccc") == ("bbb/ccc", True)


def test_rel_filepath_rejects_short_paths():
    assert abs_to_rel_filepath("") == ("", False)
    assert abs_to_rel_filepath("/a") == ("", False)


def test_rel_filepath_accepts_two_nodes():
    assert abs_to_rel_filepath("/a/b") == ("a/b", True)


def test_simple_filepath_needs_three_nodes():
    assert abs_to_simple_filepath("/a/b/c") == ("b/c", True)
    assert abs_to_simple_filepath("/a/b") == ("", False)
    assert abs_to_simple_filepath("") == ("", False)


def test_helpers_disagree_on_two_nodes():
    assert abs_to_rel_filepath("/pkg/mod.py")[1] is True
    assert abs_to_simple_filepath("/pkg/mod.py")[1] is False


def _where():
    return caller_location(1)


def test_caller_location_points_at_caller():
    line = sys._getframe().f_lineno + 1
    location = _where()
    assert isinstance(location, CallerLocation)
    assert location.line == line
    assert location.path.endswith("tests/test_location.py")
    assert location.function.endswith("test_caller_location_points_at_caller")


def test_caller_location_too_deep_is_none():
    assert caller_location(100_000) is None


def test_caller_location_keeps_pseudo_filenames():
    scope = {"where": _where}
    exec(compile("result = where()", "<string>", "exec"), scope)
    assert scope["result"].path == "<string>"
    assert abs_to_simple_filepath(scope["result"].path) == ("", False)
