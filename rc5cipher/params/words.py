"""
Word Primitives

This module implements the fixed-width word operations RC5 is built from:
wraparound addition and subtraction, data-dependent rotations, and the
little-endian packing of byte blocks into words.
"""

from typing import Sequence, Tuple


def word_mask(size: int) -> int:
    """Return the all-ones mask for a word of ``size`` bits."""
    return (1 << size) - 1


def add_words(a: int, b: int, size: int = 32) -> int:
    """Add two words modulo 2**size."""
    return (a + b) & word_mask(size)


def sub_words(a: int, b: int, size: int = 32) -> int:
    """Subtract two words modulo 2**size."""
    return (a - b) & word_mask(size)


def rotate_left(value: int, shift: int, size: int = 32) -> int:
    """
    Rotate a value left by the specified number of bits.

    Args:
        value: The value to rotate
        shift: The number of bits to rotate by (taken modulo size)
        size: The bit size of the value

    Returns:
        The rotated value
    """
    shift %= size
    if shift == 0:
        return value & word_mask(size)
    return ((value << shift) | (value >> (size - shift))) & word_mask(size)


def rotate_right(value: int, shift: int, size: int = 32) -> int:
    """
    Rotate a value right by the specified number of bits.

    Args:
        value: The value to rotate
        shift: The number of bits to rotate by (taken modulo size)
        size: The bit size of the value

    Returns:
        The rotated value
    """
    shift %= size
    if shift == 0:
        return value & word_mask(size)
    return ((value >> shift) | (value << (size - shift))) & word_mask(size)


def bytes_to_words(data: bytes, word_bytes: int) -> Tuple[int, ...]:
    """Split ``data`` into little-endian words of ``word_bytes`` bytes each."""
    return tuple(int.from_bytes(data[i:i + word_bytes], byteorder='little')
                 for i in range(0, len(data), word_bytes))


def words_to_bytes(words: Sequence[int], word_bytes: int) -> bytes:
    """Join words back into bytes, least significant byte first."""
    return b''.join(word.to_bytes(word_bytes, byteorder='little') for word in words)
