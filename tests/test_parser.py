import pytest

from addressbook.models import Contact
from addressbook.parser import InvalidContactFormat, is_likely_email, parse_line


def test_parse_trims_fields():
    c = parse_line("  Ada , ada@x.io\t, 555-1 ,Paris  ")
    assert c == Contact(name="Ada", email="ada@x.io", phone="555-1", city="Paris")


@pytest.mark.parametrize("line", ["Ada,ada@x.io,555-1", "Ada,ada@x.io,555-1,Paris,extra", "no separators"])
def test_wrong_number_of_fields(line):
    with pytest.raises(InvalidContactFormat) as exc:
        parse_line(line)
    assert str(exc.value) == f"Wrong number of fields: {line}"
    assert exc.value.issue == "wrong_field_count"
    assert exc.value.line == line


@pytest.mark.parametrize("line", [
    "Ada,ada@x.io,555-1,",   # trailing comma
    ",,,",                   # four empties
    "Ada,ada@x.io,   ,Paris",  # whitespace only
])
def test_missing_field(line):
    with pytest.raises(InvalidContactFormat) as exc:
        parse_line(line)
    assert str(exc.value) == f"Missing required field(s): {line}"
    assert exc.value.issue == "missing_field"


@pytest.mark.parametrize("email", ["@b", "a@", "ab", "a @b"])
def test_invalid_email(email):
    with pytest.raises(InvalidContactFormat) as exc:
        parse_line(f"Ada,{email},555-1,Paris")
    assert str(exc.value) == f"Invalid email: {email}"
    assert exc.value.issue == "invalid_email"


def test_minimal_email_accepted():
    assert parse_line("Ada,a@b,555-1,Paris").email == "a@b"


def test_is_likely_email():
    assert is_likely_email("a@b")
    assert is_likely_email("a@b@c")
    assert not is_likely_email("")
    assert not is_likely_email("a b@c")


def test_invalid_format_is_a_value_error():
    with pytest.raises(ValueError):
        parse_line("nope")


def test_round_trip_through_to_line():
    c = Contact(name="Ada Lovelace", email="ada@x.io", phone="+44 20", city="London")
    assert c.to_line() == "Ada Lovelace,ada@x.io,+44 20,London"
    assert parse_line(c.to_line()) == c
