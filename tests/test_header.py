import pytest

from lightmime.header import Header


def test_header_source_cases():
    h = Header()
    h.name = "X-Foo"
    assert h.name == "X-Foo"

    h.set_value("foobar", False)
    assert h.count() == 1
    assert h.get_value(0) == "foobar"
    assert str(h) == "X-Foo: foobar"

    h.set_value("raboof", False)
    assert h.count() == 2
    assert h.get_value(0) == "foobar"
    assert h.get_value(1) == "raboof"

    h.set_value("Test string 1", True)
    assert h.get_value(0) == "Test string 1"
    assert h.count() == 1


def test_get_value_empty_header():
    assert Header(name="X-Empty").get_value(0) is None


def test_get_value_out_of_range():
    h = Header(name="X-Foo")
    h.set_value("a")
    with pytest.raises(IndexError):
        h.get_value(3)


def test_to_string_leading_space_not_doubled():
    h = Header(name="Subject")
    h.set_value(" hello")
    assert str(h) == "Subject: hello"


def test_to_string_parsed_keeps_value_verbatim():
    h = Header(name="Subject", parsed=True)
    h.set_value("hello")
    assert str(h) == "Subject:hello"


def test_to_string_empty_and_none_values():
    h = Header(name="X-Foo")
    h.set_value("")
    h.set_value(None)
    assert str(h) == "X-Foo:X-Foo:"


def test_to_string_multiple_values_concatenated():
    h = Header(name="X-Foo")
    h.set_value("a")
    h.set_value("b")
    assert str(h) == "X-Foo: aX-Foo: b"