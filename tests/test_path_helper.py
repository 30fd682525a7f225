from pathlib import Path

import pytest

from gdrivecli.path_helper import sanitize_path


def test_leading_parents_are_dropped():
    assert sanitize_path("../../etc/passwd") == Path("etc/passwd")


def test_parent_removes_previous_component():
    assert sanitize_path("a/./b/../c") == Path("a/c")


def test_absolute_path_stays_rooted():
    assert sanitize_path("/a/../../b") == Path("/b")


@pytest.mark.parametrize(
    "raw",
    ["../x", "a/../../../y/z", "./../q", "x/y/z", "../../", "docs/../../../../secret.txt"],
)
def test_result_has_no_parent_components(raw):
    assert ".." not in sanitize_path(raw).parts


@pytest.mark.parametrize("raw", ["a/b/c", "folder/file.txt", "x"])
def test_clean_paths_unchanged(raw):
    assert sanitize_path(raw) == Path(raw)


@pytest.mark.parametrize("raw", ["a/../b/c", "../../q/r", "./s/t/.."])
def test_idempotent(raw):
    once = sanitize_path(raw)
    assert sanitize_path(once) == once


def test_only_parents_gives_empty_path():
    assert sanitize_path("../..") == Path()