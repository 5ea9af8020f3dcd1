"""
Analysis Package

This package implements diffusion measurements for the cipher, used as
statistical sanity checks rather than exact equalities.
"""

from .avalanche import bit_difference, key_avalanche, plaintext_avalanche

__all__ = ['bit_difference', 'key_avalanche', 'plaintext_avalanche']
