import math

import pytest

from phpserial import PhpObject, decode, encode


@pytest.mark.parametrize(
    "value",
    [
        None,
        True,
        False,
        0,
        -5,
        2147483647,
        1.5,
        -0.001,
        1e-7,
        1.7976931348623157e308,
        "",
        "plain",
        "héllo € 😀",
        'quote " and ; and } inside',
        [],
        [1, [2, 3], "x"],
        {"a": 1, "b": [1, 2]},
        {5: "x", "k": None},
        {1: "a", 0: "b"},
        PhpObject("Foo", {"x": 1, "nested": PhpObject("Bar", {})}),
        [PhpObject("Item", {"tags": ["a", "b"], 3: 4.25})],
    ],
)
def test_round_trip(value):
    assert decode(encode(value)) == value


@pytest.mark.parametrize("value", ["日本語テキスト", "😀😃😄", "a\x00b", "line\nbreak", "ß" * 100])
def test_round_trip_preserves_strings(value):
    encoded = encode(value)
    assert encoded.startswith(f"s:{len(value.encode('utf-8'))}:")
    assert decode(encoded) == value


def test_round_trip_nan():
    assert math.isnan(decode(encode(float("nan"))))


def test_round_trip_large_int_becomes_float():
    assert decode(encode(2**40)) == float(2**40)
    assert isinstance(decode(encode(2**40)), float)


def test_list_and_sequential_map_are_indistinguishable():
    assert encode({0: "a", 1: "b"}) == encode(["a", "b"])
    assert decode(encode({0: "a", 1: "b"})) == ["a", "b"]


def test_empty_map_decodes_as_list():
    assert decode(encode({})) == []


def test_tuple_decodes_as_list():
    assert decode(encode((1, "a"))) == [1, "a"]


def test_object_tag_round_trip():
    result = decode(encode(PhpObject("Foo", {"x": 1})))
    assert isinstance(result, PhpObject)
    assert result.type_name == "Foo"
    assert result.properties == {"x": 1}


def test_renamed_object_round_trip():
    result = decode(encode(PhpObject("Foo", {"x": 1}), {"Foo": "App\\Models\\Foo"}))
    assert result == PhpObject("App\\Models\\Foo", {"x": 1})
