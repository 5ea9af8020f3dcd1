"""
Key Schedule Package

This package implements the RC5 key expansion algorithm that transforms
a secret key into the expanded key table used by the block cipher.
"""

from .rc5_key_schedule import ExpandedKeyTable, expand_key, generate_key

__all__ = ['ExpandedKeyTable', 'expand_key', 'generate_key']
