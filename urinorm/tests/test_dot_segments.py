import pytest

from urinorm import remove_dot_segments_from_path
from urinorm.testing import capture_log


EXPECTED_PATHS = {
    # rfc 3986, section 5.2.4
    "/a/b/c/./../../g": "/a/g",
    "mid/content=5/../6": "mid/6",
    # a path consisting only of dot segments
    ".": "",
    "..": "",
    "/.": "/",
    "/..": "/",
    "/./": "/",
    "/../": "/",
    # relative paths
    "../test/../foo/index.html": "foo/index.html",
    "./a": "a",
    "../../a": "a",
    "a/./b": "a/b",
    "a/../b": "b",
    "a/..": "",
    "a/b/../../c": "c",
    "a/b/..": "a/",
    "a/b/../": "a/",
    # the empty segment after '..' stays, the path does not turn absolute
    "a/..//b": "//b",
    "./a/..//b": "//b",
    # absolute paths
    "/foo/bar/.": "/foo/bar/",
    "/foo/bar/./": "/foo/bar/",
    "/foo/bar/..": "/foo/",
    "/foo/bar/../": "/foo/",
    "/foo/bar/../baz": "/foo/baz",
    "/foo/bar/../..": "/",
    "/foo/bar/../../": "/",
    "/foo/bar/../../baz": "/baz",
    "/foo/bar/../../../baz": "/baz",
    "/foo/bar/../../../../baz": "/baz",
    "/./foo": "/foo",
    "/../foo": "/foo",
    "/./../foo": "/foo",
    "/./foo/.": "/foo/",
    "/foo/./bar": "/foo/bar",
    "/foo/../bar": "/bar",
    "/../test/../foo/index.html": "/foo/index.html",
    # segments that only look like dot segments
    "/foo.": "/foo.",
    "/.foo": "/.foo",
    "/foo..": "/foo..",
    "/..foo": "/..foo",
    "...": "...",
    "/a/.../b": "/a/.../b",
    "/a/%2E%2E/b": "/a/%2E%2E/b",
    "/a/%2e/b": "/a/%2e/b",
    # empty segments are significant
    "": "",
    "/": "/",
    "/foo//": "/foo//",
    "/foo//../bar": "/foo/bar",
    "//a/./b": "//a/b",
}


@pytest.mark.parametrize("path, expected", EXPECTED_PATHS.items())
def test_remove_dot_segments_from_path(path, expected):
    assert remove_dot_segments_from_path(path) == expected


@pytest.mark.parametrize("path", EXPECTED_PATHS.keys())
def test_idempotent(path):
    once = remove_dot_segments_from_path(path)
    assert remove_dot_segments_from_path(once) == once


@pytest.mark.parametrize("path", EXPECTED_PATHS.keys())
def test_output_not_longer_than_input(path):
    assert len(remove_dot_segments_from_path(path)) <= len(path)


@pytest.mark.parametrize("path", EXPECTED_PATHS.keys())
def test_no_segments_are_invented(path):
    result = remove_dot_segments_from_path(path)
    input_segments = set(path.split('/'))
    for segment in result.split('/'):
        assert segment == '' or segment in input_segments
        assert segment not in ('.', '..')


def test_parent_without_ancestor_is_discarded():
    # no error, the '..' segments are dropped
    assert remove_dot_segments_from_path("/../../../a") == "/a"
    assert remove_dot_segments_from_path("../../..") == ""


def test_parent_without_ancestor_is_logged():
    log_handle = capture_log()
    try:
        remove_dot_segments_from_path("/../a")
    finally:
        log_handle.close()

    assert "Discarding '..' without parent segment in '/../a'" \
           in log_handle.text


def test_long_path():
    path = "/a" * 1000 + "/.." * 999
    assert remove_dot_segments_from_path(path) == "/a/"
