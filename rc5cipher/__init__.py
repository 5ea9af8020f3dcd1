"""
RC5Cipher - RC5 Block Cipher Library

This library implements the RC5 block cipher: key schedule expansion,
block encryption and block decryption, parameterized by word size,
round count and key length (RC5-w/r/b).

Key Features:
- Word sizes of 8, 16, 32, 64 and 128 bits (RC5-32/12/16 by default)
- 0 to 255 rounds, keys of 0 to 255 bytes
- Immutable expanded key tables, safe to share across threads
- Optional trace hooks for key schedule and round debugging
- Avalanche measurement helpers

"""

from .errors import (
    RC5Error,
    InvalidParameters,
    InvalidKeyLength,
    InvalidKeyTable,
    InvalidBlockLength,
    InvalidWord,
)
from .params import ParameterSet, RC5_DEFAULT_PARAMS
from .key_schedule import ExpandedKeyTable, expand_key, generate_key
from .cipher_core import RC5BlockCipher, encrypt_block, decrypt_block

__version__ = '0.1.0'
__author__ = 'RC5Cipher Team'

__all__ = ['RC5Error', 'InvalidParameters', 'InvalidKeyLength', 'InvalidKeyTable',
           'InvalidBlockLength', 'InvalidWord', 'ParameterSet', 'RC5_DEFAULT_PARAMS',
           'ExpandedKeyTable', 'expand_key', 'generate_key',
           'RC5BlockCipher', 'encrypt_block', 'decrypt_block']
