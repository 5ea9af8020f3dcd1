"""
Avalanche Measurement

This module measures how many ciphertext bits change when a single key or
plaintext bit is flipped. A cipher with good diffusion changes close to
half of the output bits for every flipped input bit.
"""

import logging
from typing import Dict, List, Optional

import numpy as np

from ..cipher_core.block_cipher import RC5BlockCipher
from ..params.parameter_set import ParameterSet

logger = logging.getLogger(__name__)


def bit_difference(a: bytes, b: bytes) -> int:
    """
    Count the bits that differ between two equal-length byte strings.

    Args:
        a: First byte string
        b: Second byte string

    Returns:
        The Hamming distance between a and b
    """
    if len(a) != len(b):
        raise ValueError("Inputs must have the same length")
    diff = np.bitwise_xor(np.frombuffer(bytes(a), dtype=np.uint8),
                          np.frombuffer(bytes(b), dtype=np.uint8))
    return int(np.unpackbits(diff).sum())


def _flip_bit(data: bytes, bit: int) -> bytes:
    flipped = bytearray(data)
    flipped[bit // 8] ^= 1 << (bit % 8)
    return bytes(flipped)


def _summarize(fractions: List[float]) -> Dict[str, float]:
    values = np.asarray(fractions, dtype=np.float64)
    return {
        'mean': float(values.mean()),
        'std': float(values.std()),
        'min': float(values.min()),
        'max': float(values.max()),
        'samples': len(values)
    }


def key_avalanche(key: bytes, plaintext: bytes,
                  params: Optional[ParameterSet] = None) -> Dict[str, float]:
    """
    Flip every key bit in turn and measure the ciphertext change.

    Args:
        key: The secret key
        plaintext: A plaintext block held fixed for every trial
        params: RC5 parameters (default: RC5-32/12/len(key))

    Returns:
        Dictionary with the mean, std, min and max fraction of ciphertext
        bits changed, and the number of samples
    """
    if params is None:
        params = ParameterSet(key_size=len(key))
    if not key:
        raise ValueError("Key has no bits to flip")

    cipher = RC5BlockCipher(params)
    baseline = cipher.encrypt_block(plaintext, cipher.expand_key(key))
    total_bits = len(baseline) * 8

    fractions = []
    for bit in range(len(key) * 8):
        table = cipher.expand_key(_flip_bit(key, bit))
        changed = bit_difference(baseline, cipher.encrypt_block(plaintext, table))
        fractions.append(changed / total_bits)

    metrics = _summarize(fractions)
    logger.debug("Key avalanche for %s: %.2f%% of bits changed on average",
                 params.name, metrics['mean'] * 100)
    return metrics


def plaintext_avalanche(key: bytes, plaintext: bytes,
                        params: Optional[ParameterSet] = None) -> Dict[str, float]:
    """
    Flip every plaintext bit in turn and measure the ciphertext change.

    Args:
        key: The secret key, expanded once for every trial
        plaintext: The plaintext block to perturb
        params: RC5 parameters (default: RC5-32/12/len(key))

    Returns:
        Dictionary with the mean, std, min and max fraction of ciphertext
        bits changed, and the number of samples
    """
    if params is None:
        params = ParameterSet(key_size=len(key))

    cipher = RC5BlockCipher(params)
    table = cipher.expand_key(key)
    baseline = cipher.encrypt_block(plaintext, table)
    total_bits = len(baseline) * 8

    fractions = []
    for bit in range(len(plaintext) * 8):
        changed = bit_difference(baseline, cipher.encrypt_block(_flip_bit(plaintext, bit), table))
        fractions.append(changed / total_bits)

    metrics = _summarize(fractions)
    logger.debug("Plaintext avalanche for %s: %.2f%% of bits changed on average",
                 params.name, metrics['mean'] * 100)
    return metrics
