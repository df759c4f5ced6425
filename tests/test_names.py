import pytest

from hopstep.names import (
    MAX_NAME_LENGTH,
    NO_DIGITS,
    Name,
    NameEntry,
    NamePool,
    detect_trailing_digit,
    get_name_pool,
    get_name_string,
    make_name,
)


@pytest.mark.parametrize("text", ["Name", "Actor_12", "Player1", "123", "a0"])
def test_name_round_trip(text):
    assert Name(text).to_string() == text


def test_leading_zeros_are_dropped():
    assert Name("Item007").to_string() == "Item7"


def test_name_without_digits_stores_no_digits():
    assert Name("Plain").digits == NO_DIGITS


def test_empty_name_is_invalid():
    name = Name("")
    assert not name.is_valid()
    assert name.digits == NO_DIGITS
    assert make_name("") == (0, NO_DIGITS)


def test_names_share_base_key():
    first = Name("Mesh1")
    second = Name("Mesh2")
    assert first.key == second.key
    assert first != second


def test_equality_and_hash():
    assert Name("Foo3") == Name("Foo3")
    assert hash(Name("Foo3")) == hash(Name("Foo3"))
    assert Name("Foo3") != Name("Foo4")
    assert {Name("Foo3"), Name("Foo3")} == {Name("Foo3")}


def test_get_hash_layout():
    name = Name("Layout5")
    assert name.get_hash() >> 32 == name.key
    assert name.get_hash() & 0xFFFFFFFF == name.digits


def test_detect_trailing_digit():
    assert detect_trailing_digit("abc") == (0, 0)
    assert detect_trailing_digit("x42") == (42, 2)
    assert detect_trailing_digit("") == (0, 0)


def test_get_name_string_matches_to_string():
    key, digits = make_name("Widget9")
    assert get_name_string(key, digits) == Name("Widget9").to_string()


def test_pool_store_is_idempotent():
    pool = NamePool()
    key = pool.store("Thing")
    assert pool.store("Thing") == key
    assert len(pool) == 1
    assert pool.find_entry(key).name == "Thing"
    assert key in pool


def test_pool_hash_is_stable():
    pool = NamePool()
    assert pool.generate_hash("abc") == NamePool().generate_hash("abc")
    assert 0 <= pool.generate_hash("abc") <= 0xFFFFFFFF


def test_find_missing_entry_raises():
    with pytest.raises(KeyError):
        NamePool().find_entry(1)


def test_global_pool_holds_base_string():
    name = Name("GlobalBase77")
    assert get_name_pool().find_entry(name.key).name == "GlobalBase"


def test_entry_too_long():
    with pytest.raises(ValueError):
        NameEntry("x" * MAX_NAME_LENGTH)
    assert NameEntry("abc").length == 3