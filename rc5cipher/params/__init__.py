"""
Parameter Set Package

This package holds the RC5 parameter set (word size, rounds, key length),
the per-word-size magic constants and the fixed-width word primitives
shared by the key schedule and the block cipher.
"""

from .parameter_set import ParameterSet, RC5_DEFAULT_PARAMS, MAGIC_CONSTANTS
from .words import rotate_left, rotate_right, add_words, sub_words

__all__ = ['ParameterSet', 'RC5_DEFAULT_PARAMS', 'MAGIC_CONSTANTS',
           'rotate_left', 'rotate_right', 'add_words', 'sub_words']
