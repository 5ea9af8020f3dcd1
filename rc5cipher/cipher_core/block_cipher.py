"""
Block Cipher Implementation

This module provides the RC5 block cipher engine: encryption and decryption
of a two-word block under an expanded key table, on words or on raw
little-endian bytes.
"""

from typing import Optional, Sequence, Tuple, Union

from ..errors import InvalidBlockLength, InvalidKeyTable, InvalidWord
from ..instrumentation.trace import TRACE_DECRYPT_ROUND, TRACE_ENCRYPT_ROUND, TraceHook, emit
from ..key_schedule.rc5_key_schedule import ExpandedKeyTable, KeyLike, expand_key
from ..params.parameter_set import RC5_DEFAULT_PARAMS, ParameterSet
from ..params.words import bytes_to_words, rotate_left, rotate_right, words_to_bytes

Block = Tuple[int, int]
TableLike = Union[ExpandedKeyTable, Sequence[int]]


class RC5BlockCipher:
    """
    RC5 block cipher engine for one parameter set.

    The engine holds no key material; every operation takes the expanded
    key table explicitly, so one engine and one table can be shared by any
    number of threads.
    """

    def __init__(self, params: Optional[ParameterSet] = None, trace: Optional[TraceHook] = None):
        """
        Initialize the block cipher with specified parameters.

        Args:
            params: RC5 parameters (default: RC5-32/12/16)
            trace: Optional trace hook called for key expansion and every round
        """
        self.params = params if params is not None else ParameterSet()
        self.trace = trace

    def expand_key(self, key: KeyLike) -> ExpandedKeyTable:
        """Expand ``key`` with this engine's parameters and trace hook."""
        return expand_key(key, self.params, trace=self.trace)

    def _check_table(self, table: TableLike) -> Tuple[int, ...]:
        if isinstance(table, ExpandedKeyTable):
            if table.params != self.params:
                raise InvalidKeyTable(
                    f"Table was expanded for {table.params.name}, cipher is {self.params.name}")
            return table.words
        try:
            return ExpandedKeyTable(table, self.params).words
        except TypeError:
            raise InvalidKeyTable(f"Key table must be a sequence of words, got {type(table).__name__}")

    def _check_block(self, block: Sequence[int]) -> Block:
        if len(block) != 2:
            raise InvalidBlockLength(f"Block must hold exactly 2 words, got {len(block)}")
        for word in block:
            if isinstance(word, bool) or not isinstance(word, int) or not 0 <= word <= self.params.mask:
                raise InvalidWord(f"Block word {word!r} is not a {self.params.word_size}-bit word")
        return block[0], block[1]

    def encrypt(self, plaintext: Sequence[int], table: TableLike) -> Block:
        """
        Encrypt a two-word block.

        Args:
            plaintext: The plaintext words (A, B)
            table: Expanded key table for this cipher's parameters

        Returns:
            The ciphertext words
        """
        s = self._check_table(table)
        a, b = self._check_block(plaintext)
        w = self.params.word_size
        mask = self.params.mask

        a = (a + s[0]) & mask
        b = (b + s[1]) & mask
        for i in range(1, self.params.num_rounds + 1):
            a = (rotate_left(a ^ b, b, w) + s[2 * i]) & mask
            b = (rotate_left(b ^ a, a, w) + s[2 * i + 1]) & mask
            emit(self.trace, TRACE_ENCRYPT_ROUND, round=i, a=a, b=b)

        return a, b

    def decrypt(self, ciphertext: Sequence[int], table: TableLike) -> Block:
        """
        Decrypt a two-word block.

        Args:
            ciphertext: The ciphertext words (A, B)
            table: Expanded key table for this cipher's parameters

        Returns:
            The plaintext words
        """
        s = self._check_table(table)
        a, b = self._check_block(ciphertext)
        w = self.params.word_size
        mask = self.params.mask

        for i in range(self.params.num_rounds, 0, -1):
            b = rotate_right((b - s[2 * i + 1]) & mask, a, w) ^ a
            a = rotate_right((a - s[2 * i]) & mask, b, w) ^ b
            emit(self.trace, TRACE_DECRYPT_ROUND, round=i, a=a, b=b)

        b = (b - s[1]) & mask
        a = (a - s[0]) & mask
        return a, b

    def _block_to_words(self, data: bytes) -> Block:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"Block must be bytes-like, got {type(data).__name__}")
        data = bytes(data)
        if len(data) != self.params.block_bytes:
            raise InvalidBlockLength(
                f"{self.params.name} blocks are {self.params.block_bytes} bytes, got {len(data)}")
        return bytes_to_words(data, self.params.word_bytes)

    def encrypt_block(self, plaintext: bytes, table: TableLike) -> bytes:
        """
        Encrypt a single block of plaintext bytes.

        Args:
            plaintext: The plaintext block, exactly ``2 * word_bytes`` bytes
            table: Expanded key table

        Returns:
            The encrypted ciphertext block
        """
        words = self._block_to_words(plaintext)
        return words_to_bytes(self.encrypt(words, table), self.params.word_bytes)

    def decrypt_block(self, ciphertext: bytes, table: TableLike) -> bytes:
        """
        Decrypt a single block of ciphertext bytes.

        Args:
            ciphertext: The ciphertext block, exactly ``2 * word_bytes`` bytes
            table: Expanded key table

        Returns:
            The decrypted plaintext block
        """
        words = self._block_to_words(ciphertext)
        return words_to_bytes(self.decrypt(words, table), self.params.word_bytes)


def encrypt_block(plaintext: bytes, key: KeyLike,
                  word_size: int = RC5_DEFAULT_PARAMS['word_size'],
                  num_rounds: int = RC5_DEFAULT_PARAMS['num_rounds']) -> bytes:
    """
    Convenience function to encrypt a single block.

    Args:
        plaintext: The plaintext block to encrypt
        key: The secret key (its length sets the key size)
        word_size: Word size in bits (default: 32)
        num_rounds: Number of rounds (default: 12)

    Returns:
        The encrypted ciphertext block
    """
    cipher = RC5BlockCipher(ParameterSet(word_size, num_rounds, len(key)))
    return cipher.encrypt_block(plaintext, cipher.expand_key(key))


def decrypt_block(ciphertext: bytes, key: KeyLike,
                  word_size: int = RC5_DEFAULT_PARAMS['word_size'],
                  num_rounds: int = RC5_DEFAULT_PARAMS['num_rounds']) -> bytes:
    """
    Convenience function to decrypt a single block.

    Args:
        ciphertext: The ciphertext block to decrypt
        key: The secret key (its length sets the key size)
        word_size: Word size in bits (default: 32)
        num_rounds: Number of rounds (default: 12)

    Returns:
        The decrypted plaintext block
    """
    cipher = RC5BlockCipher(ParameterSet(word_size, num_rounds, len(key)))
    return cipher.decrypt_block(ciphertext, cipher.expand_key(key))
