"""
RC5 Parameter Set

This module holds the three RC5 parameters (word size, round count and key
length) together with the quantities derived from them and the magic
constants for each supported word size.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from ..errors import InvalidParameters
from .words import word_mask

logger = logging.getLogger(__name__)

# Default configuration: RC5-32/12/16
RC5_DEFAULT_PARAMS = {
    'word_size': 32,   # Bits per word
    'num_rounds': 12,  # Number of rounds
    'key_size': 16     # Key length in bytes
}

# P = Odd((e - 2) * 2^w), Q = Odd((phi - 1) * 2^w)
MAGIC_CONSTANTS = {
    8: (0xB7, 0x9F),
    16: (0xB7E1, 0x9E37),
    32: (0xB7E15163, 0x9E3779B9),
    64: (0xB7E151628AED2A6B, 0x9E3779B97F4A7C15),
    128: (0xB7E151628AED2A6ABF7158809CF4F3C7, 0x9E3779B97F4A7C15F39CC0605CEDC835),
}

MAX_ROUNDS = 255
MAX_KEY_SIZE = 255

_NAME_PATTERN = re.compile(r'^RC5-(\d+)/(\d+)/(\d+)$', re.IGNORECASE)


def _check_count(name: str, value: Any, upper: int) -> None:
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameters(f"{name} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= upper:
        raise InvalidParameters(f"{name} must be between 0 and {upper}, got {value}")


@dataclass(frozen=True)
class ParameterSet:
    """
    RC5 parameters ``w/r/b`` and everything derived from them.

    Instances are immutable and validated on construction, so a
    ParameterSet that exists is always usable by the key schedule and
    the block cipher.
    """
    word_size: int = RC5_DEFAULT_PARAMS['word_size']
    num_rounds: int = RC5_DEFAULT_PARAMS['num_rounds']
    key_size: int = RC5_DEFAULT_PARAMS['key_size']
    p: int = field(init=False, repr=False)
    q: int = field(init=False, repr=False)

    def __post_init__(self):
        if (isinstance(self.word_size, bool) or not isinstance(self.word_size, int)
                or self.word_size not in MAGIC_CONSTANTS):
            supported = ', '.join(str(w) for w in sorted(MAGIC_CONSTANTS))
            raise InvalidParameters(
                f"Unsupported word size {self.word_size!r} (supported: {supported})")
        _check_count('num_rounds', self.num_rounds, MAX_ROUNDS)
        _check_count('key_size', self.key_size, MAX_KEY_SIZE)

        p, q = MAGIC_CONSTANTS[self.word_size]
        object.__setattr__(self, 'p', p)
        object.__setattr__(self, 'q', q)
        logger.debug("Configured %s (c=%d, t=%d)", self.name, self.key_words, self.table_size)

    @property
    def word_bytes(self) -> int:
        """Bytes per word (u)."""
        return self.word_size // 8

    @property
    def key_words(self) -> int:
        """Words needed to hold the key (c), never less than one."""
        return max(1, -(-8 * self.key_size // self.word_size))

    @property
    def table_size(self) -> int:
        """Size of the expanded key table (t)."""
        return 2 * (self.num_rounds + 1)

    @property
    def block_bytes(self) -> int:
        return 2 * self.word_bytes

    @property
    def mask(self) -> int:
        return word_mask(self.word_size)

    @property
    def name(self) -> str:
        return f"RC5-{self.word_size}/{self.num_rounds}/{self.key_size}"

    def to_dict(self) -> Dict[str, int]:
        return {
            'word_size': self.word_size,
            'num_rounds': self.num_rounds,
            'key_size': self.key_size
        }

    @classmethod
    def from_dict(cls, params: Mapping[str, Any]) -> 'ParameterSet':
        """
        Build a parameter set from a mapping.

        Missing entries fall back to RC5_DEFAULT_PARAMS.

        Raises:
            InvalidParameters: If the mapping holds unknown entries or
                invalid values
        """
        unknown = set(params) - set(RC5_DEFAULT_PARAMS)
        if unknown:
            raise InvalidParameters(f"Unknown parameters: {', '.join(sorted(unknown))}")
        merged = dict(RC5_DEFAULT_PARAMS)
        merged.update(params)
        return cls(**merged)

    @classmethod
    def from_name(cls, name: str) -> 'ParameterSet':
        """
        Build a parameter set from the conventional ``RC5-w/r/b`` notation.

        Args:
            name: e.g. ``"RC5-32/12/16"``

        Returns:
            The matching ParameterSet
        """
        match = _NAME_PATTERN.match(name.strip())
        if match is None:
            raise InvalidParameters(f"Cannot parse RC5 parameter name {name!r}")
        w, r, b = (int(group) for group in match.groups())
        return cls(word_size=w, num_rounds=r, key_size=b)
