import pytest
from pydantic import ValidationError

from addressbook.models import Contact


def test_contact_is_immutable():
    c = Contact(name="Ada", email="ada@x.io", phone="555-1", city="Paris")
    with pytest.raises(ValidationError):
        c.city = "Lyon"


def test_structural_equality_and_hash():
    a = Contact(name="Ada", email="ada@x.io", phone="555-1", city="Paris")
    b = Contact(name="Ada", email="ada@x.io", phone="555-1", city="Paris")
    c = Contact(name="Ada", email="ada@x.io", phone="555-1", city="Lyon")
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2


def test_empty_field_rejected():
    with pytest.raises(ValidationError):
        Contact(name="", email="ada@x.io", phone="555-1", city="Paris")


def test_str():
    c = Contact(name="Ada", email="ada@x.io", phone="555-1", city="Paris")
    assert str(c) == "Ada (ada@x.io, 555-1, Paris)"
