"""
RC5 Error Types

All errors raised by the cipher core derive from RC5Error, which is itself
a ValueError so callers that already guard against bad input keep working.
"""


class RC5Error(ValueError):
    """Base class for every error raised by the RC5 cipher core."""


class InvalidParameters(RC5Error):
    """Unsupported word size, round count or key length."""


class InvalidKeyLength(RC5Error):
    """Secret key length does not match the parameter set."""


class InvalidKeyTable(RC5Error):
    """Expanded key table does not match the parameter set."""


class InvalidBlockLength(RC5Error):
    """Block is not exactly two words (or 2 * word_bytes bytes)."""


class InvalidWord(RC5Error):
    """Block word does not fit in the configured word size."""
