"""
RC5 Key Schedule Implementation

This module implements the RC5 key expansion: the secret key is packed into
words, a key-independent table is seeded from the magic constants P and Q,
and the two are mixed together with data-dependent rotations to produce
the expanded key table used by every encryption round.
"""

import hmac
import logging
import secrets
from typing import Iterable, Iterator, Optional, Tuple, Union

from ..errors import InvalidKeyLength, InvalidKeyTable, InvalidParameters
from ..instrumentation.trace import (
    TRACE_KEY_MIXED,
    TRACE_KEY_PACKED,
    TRACE_TABLE_INITIALIZED,
    TraceHook,
    emit,
)
from ..params.parameter_set import MAX_KEY_SIZE, ParameterSet
from ..params.words import rotate_left, words_to_bytes

logger = logging.getLogger(__name__)

KeyLike = Union[bytes, bytearray, memoryview]


class ExpandedKeyTable:
    """
    Immutable expanded key table of ``t`` words.

    The table is derived key material. It compares in constant time, hides
    its words from ``repr`` and refuses to be pickled, so that it is not
    stored in place of the secret key it was derived from.
    """

    __slots__ = ('_params', '_words')

    def __init__(self, words: Iterable[int], params: ParameterSet):
        words = tuple(words)
        if len(words) != params.table_size:
            raise InvalidKeyTable(
                f"{params.name} needs {params.table_size} table words, got {len(words)}")
        for word in words:
            if isinstance(word, bool) or not isinstance(word, int) or not 0 <= word <= params.mask:
                raise InvalidKeyTable(f"Table word {word!r} is not a {params.word_size}-bit word")
        object.__setattr__(self, '_params', params)
        object.__setattr__(self, '_words', words)

    def __setattr__(self, name, value):
        raise AttributeError("ExpandedKeyTable is immutable")

    @property
    def params(self) -> ParameterSet:
        return self._params

    @property
    def words(self) -> Tuple[int, ...]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[int]:
        return iter(self._words)

    def __getitem__(self, index):
        return self._words[index]

    def __eq__(self, other):
        if not isinstance(other, ExpandedKeyTable):
            return NotImplemented
        if self._params != other._params:
            return False
        word_bytes = self._params.word_bytes
        return hmac.compare_digest(words_to_bytes(self._words, word_bytes),
                                   words_to_bytes(other._words, word_bytes))

    __hash__ = None

    def __repr__(self) -> str:
        return f"<ExpandedKeyTable {self._params.name} ({len(self._words)} words)>"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce_ex__(self, protocol):
        raise TypeError("ExpandedKeyTable is derived key material and cannot be pickled")


def generate_key(key_size: int = 16) -> bytes:
    """
    Generate a cryptographically secure random key.

    Args:
        key_size: Size of the key in bytes (default: 16)

    Returns:
        A random key as bytes
    """
    if isinstance(key_size, bool) or not isinstance(key_size, int) or not 0 <= key_size <= MAX_KEY_SIZE:
        raise InvalidParameters(f"Key size must be between 0 and {MAX_KEY_SIZE} bytes")
    return secrets.token_bytes(key_size)


def expand_key(key: KeyLike,
               params: Optional[ParameterSet] = None,
               trace: Optional[TraceHook] = None) -> ExpandedKeyTable:
    """
    Expand a secret key into the RC5 expanded key table.

    Args:
        key: The secret key, exactly ``params.key_size`` bytes
        params: RC5 parameters (default: RC5-32/12/16)
        trace: Optional trace hook

    Returns:
        The expanded key table of ``params.table_size`` words

    Raises:
        TypeError: If the key is not bytes-like
        InvalidKeyLength: If the key length does not match the parameters
    """
    if params is None:
        params = ParameterSet()
    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise TypeError(f"Key must be bytes-like, got {type(key).__name__}")
    key = bytes(key)
    if len(key) != params.key_size:
        raise InvalidKeyLength(f"{params.name} needs a {params.key_size}-byte key, got {len(key)}")

    w = params.word_size
    u = params.word_bytes
    c = params.key_words
    t = params.table_size
    mask = params.mask

    # Pack the key into c words, least significant byte first
    key_words = [0] * c
    for i in range(len(key) - 1, -1, -1):
        key_words[i // u] = ((key_words[i // u] << 8) + key[i]) & mask
    emit(trace, TRACE_KEY_PACKED, words=tuple(key_words))

    table = [0] * t
    table[0] = params.p
    for i in range(1, t):
        table[i] = (table[i - 1] + params.q) & mask
    emit(trace, TRACE_TABLE_INITIALIZED, words=tuple(table))

    # 3 * max(t, c) so that every key word is mixed even when c > t
    a = b = i = j = 0
    for _ in range(3 * max(t, c)):
        a = table[i] = rotate_left((table[i] + a + b) & mask, 3, w)
        b = key_words[j] = rotate_left((key_words[j] + a + b) & mask, (a + b) % w, w)
        i = (i + 1) % t
        j = (j + 1) % c

    for k in range(c):
        key_words[k] = 0
    emit(trace, TRACE_KEY_MIXED, words=tuple(table))

    logger.debug("Expanded %s key into %d-word table", params.name, t)
    return ExpandedKeyTable(table, params)
