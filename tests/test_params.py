import pytest

from rc5cipher.errors import InvalidParameters, RC5Error
from rc5cipher.params import (
    MAGIC_CONSTANTS,
    RC5_DEFAULT_PARAMS,
    ParameterSet,
    add_words,
    rotate_left,
    rotate_right,
    sub_words,
)


def test_defaults_are_rc5_32_12_16():
    params = ParameterSet()
    assert params.to_dict() == RC5_DEFAULT_PARAMS
    assert params.name == "RC5-32/12/16"
    assert params.word_bytes == 4
    assert params.key_words == 4
    assert params.table_size == 26
    assert params.block_bytes == 8
    assert params.mask == 0xFFFFFFFF
    assert (params.p, params.q) == (0xB7E15163, 0x9E3779B9)


@pytest.mark.parametrize("word_size", sorted(MAGIC_CONSTANTS))
def test_magic_constants_are_odd_and_fit_the_word(word_size):
    params = ParameterSet(word_size=word_size)
    assert params.p % 2 == 1 and params.q % 2 == 1
    assert params.p <= params.mask and params.q <= params.mask
    assert params.p.bit_length() == word_size


@pytest.mark.parametrize("word_size, key_size, expected", [
    (32, 16, 4),
    (32, 5, 2),
    (32, 1, 1),
    (32, 0, 1),
    (8, 4, 4),
    (64, 24, 3),
    (128, 17, 2),
    (16, 255, 128),
])
def test_key_words(word_size, key_size, expected):
    assert ParameterSet(word_size, 12, key_size).key_words == expected


@pytest.mark.parametrize("rounds", [0, 1, 12, 255])
def test_table_size(rounds):
    assert ParameterSet(num_rounds=rounds).table_size == 2 * (rounds + 1)


@pytest.mark.parametrize("kwargs", [
    {'word_size': 24},
    {'word_size': 80},
    {'word_size': 0},
    {'word_size': 32.0},
    {'word_size': True},
    {'num_rounds': -1},
    {'num_rounds': 256},
    {'num_rounds': 12.5},
    {'key_size': -1},
    {'key_size': 256},
    {'key_size': '16'},
])
def test_invalid_parameters(kwargs):
    with pytest.raises(InvalidParameters):
        ParameterSet(**kwargs)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        ParameterSet(word_size=7)
    assert issubclass(InvalidParameters, RC5Error)


def test_parameter_set_is_immutable():
    params = ParameterSet()
    with pytest.raises(AttributeError):
        params.num_rounds = 20


def test_from_dict_fills_defaults():
    params = ParameterSet.from_dict({'num_rounds': 20})
    assert params == ParameterSet(32, 20, 16)
    assert ParameterSet.from_dict(params.to_dict()) == params


def test_from_dict_rejects_unknown_entries():
    with pytest.raises(InvalidParameters, match="block_size"):
        ParameterSet.from_dict({'block_size': 64})


@pytest.mark.parametrize("name, expected", [
    ("RC5-32/12/16", ParameterSet(32, 12, 16)),
    ("rc5-64/24/24", ParameterSet(64, 24, 24)),
    (" RC5-8/12/4 ", ParameterSet(8, 12, 4)),
    ("RC5-16/0/0", ParameterSet(16, 0, 0)),
])
def test_from_name(name, expected):
    assert ParameterSet.from_name(name) == expected


@pytest.mark.parametrize("name", ["RC5-32/12", "RC6-32/20/16", "RC5-a/b/c", "", "RC5-24/12/16"])
def test_from_name_rejects_bad_names(name):
    with pytest.raises(InvalidParameters):
        ParameterSet.from_name(name)


def test_rotations():
    assert rotate_left(0x80000001, 1) == 0x00000003
    assert rotate_right(0x00000003, 1) == 0x80000001
    assert rotate_left(0x12345678, 8) == 0x34567812
    assert rotate_right(0x12345678, 8) == 0x78123456
    assert rotate_left(0xB7, 4, 8) == 0x7B


@pytest.mark.parametrize("shift", [0, 32, 64, 96])
def test_rotation_by_multiple_of_word_size_is_identity(shift):
    assert rotate_left(0xDEADBEEF, shift) == 0xDEADBEEF
    assert rotate_right(0xDEADBEEF, shift) == 0xDEADBEEF


def test_rotation_amount_taken_modulo_word_size():
    assert rotate_left(0x12345678, 40) == rotate_left(0x12345678, 8)
    assert rotate_right(0x12345678, 0xFFFFFFFF) == rotate_right(0x12345678, 31)


def test_wraparound_arithmetic():
    assert add_words(0xFFFFFFFF, 2) == 1
    assert sub_words(1, 2) == 0xFFFFFFFF
    assert add_words(0xFF, 1, 8) == 0
    assert sub_words(0, 1, 16) == 0xFFFF
