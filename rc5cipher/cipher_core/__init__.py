"""
Cipher Core Package

This package implements the RC5 block cipher engine: encryption and
decryption of two-word blocks under an expanded key table.
"""

from .block_cipher import RC5BlockCipher, encrypt_block, decrypt_block

__all__ = ['RC5BlockCipher', 'encrypt_block', 'decrypt_block']
