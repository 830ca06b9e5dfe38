import pytest

from lightmime.boundary import boundary_linebreak, chomp_boundary, get_boundary

BOUNDARY = "--Part_5-743799170"


@pytest.mark.parametrize("linebreak", ["\r\n", "\n", "\r"])
def test_boundary_linebreak_found(linebreak):
    s = f"{BOUNDARY}{linebreak}content"
    assert boundary_linebreak(s, linebreak) == linebreak


def test_boundary_linebreak_missing():
    assert boundary_linebreak(BOUNDARY, "\r\n") is None


def test_boundary_linebreak_lf_inside_crlf():
    assert boundary_linebreak(f"{BOUNDARY}\r\n", "\n") == "\n"


def test_chomp_boundary_cuts_at_linebreak():
    assert chomp_boundary(f"{BOUNDARY}\r\nrest\r\nmore", "\r\n") == BOUNDARY


def test_chomp_boundary_without_linebreak_returns_input():
    assert chomp_boundary(BOUNDARY, "\n") == BOUNDARY


def test_chomp_boundary_leading_linebreak_gives_none():
    assert chomp_boundary(f"\n{BOUNDARY}", "\n") is None


def test_chomp_boundary_is_prefix_of_input():
    s = f"{BOUNDARY}--\nafter"
    result = chomp_boundary(s, "\n")
    assert s.startswith(result)
    assert "\n" not in result


def test_get_boundary_quoted():
    value = f'multipart/mixed; boundary="{BOUNDARY}"'
    assert get_boundary(value) == BOUNDARY


def test_get_boundary_unquoted_followed_by_parameter():
    value = f"multipart/mixed; boundary={BOUNDARY}; charset=us-ascii"
    assert get_boundary(value) == BOUNDARY


def test_get_boundary_case_insensitive():
    value = f'multipart/alternative; BOUNDARY="{BOUNDARY}"'
    assert get_boundary(value) == BOUNDARY


def test_get_boundary_strips_whitespace():
    value = f"multipart/mixed; boundary=  {BOUNDARY}  \r\n"
    assert get_boundary(value) == BOUNDARY


def test_get_boundary_missing():
    assert get_boundary("text/plain; charset=us-ascii") is None


def test_get_boundary_empty_value():
    assert get_boundary("multipart/mixed; boundary=") == ""


def test_get_boundary_result_has_no_delimiters():
    value = f'multipart/related; type="text/html"; boundary="{BOUNDARY}"; start=x'
    result = get_boundary(value)
    assert result == BOUNDARY
    assert ";" not in result and '"' not in result