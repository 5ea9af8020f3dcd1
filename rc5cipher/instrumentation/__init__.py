"""
Instrumentation Package

This package implements optional trace hooks that observe the key schedule
and the block cipher rounds without being part of their arithmetic.
"""

from .trace import (
    LoggingTraceHook,
    CollectingTraceHook,
    TRACE_KEY_PACKED,
    TRACE_TABLE_INITIALIZED,
    TRACE_KEY_MIXED,
    TRACE_ENCRYPT_ROUND,
    TRACE_DECRYPT_ROUND,
    TRACE_EVENTS,
)

__all__ = ['LoggingTraceHook', 'CollectingTraceHook',
           'TRACE_KEY_PACKED', 'TRACE_TABLE_INITIALIZED', 'TRACE_KEY_MIXED',
           'TRACE_ENCRYPT_ROUND', 'TRACE_DECRYPT_ROUND', 'TRACE_EVENTS']
