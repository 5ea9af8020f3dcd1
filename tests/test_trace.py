import logging

from rc5cipher import ParameterSet, RC5BlockCipher
from rc5cipher.instrumentation import (
    CollectingTraceHook,
    LoggingTraceHook,
    TRACE_DECRYPT_ROUND,
    TRACE_ENCRYPT_ROUND,
    TRACE_EVENTS,
    TRACE_KEY_MIXED,
    TRACE_KEY_PACKED,
    TRACE_TABLE_INITIALIZED,
)

KEY = bytes(range(16))
BLOCK = (0x33221100, 0x77665544)


def test_tracing_is_off_by_default():
    cipher = RC5BlockCipher()
    assert cipher.trace is None
    assert cipher.encrypt(BLOCK, cipher.expand_key(KEY)) == (0x9B14DC2D, 0x9E8B08CF)


def test_trace_events_in_order():
    hook = CollectingTraceHook()
    cipher = RC5BlockCipher(trace=hook)
    table = cipher.expand_key(KEY)
    ct = cipher.encrypt(BLOCK, table)
    cipher.decrypt(ct, table)

    names = [event for event, _ in hook.events]
    assert names[:3] == [TRACE_KEY_PACKED, TRACE_TABLE_INITIALIZED, TRACE_KEY_MIXED]
    assert names[3:15] == [TRACE_ENCRYPT_ROUND] * 12
    assert names[15:] == [TRACE_DECRYPT_ROUND] * 12
    assert set(names) == set(TRACE_EVENTS)


def test_round_events_follow_the_rounds():
    hook = CollectingTraceHook()
    cipher = RC5BlockCipher(ParameterSet(32, 5, 16), trace=hook)
    table = cipher.expand_key(KEY)
    ct = cipher.encrypt(BLOCK, table)
    cipher.decrypt(ct, table)

    encrypt_rounds = hook.of(TRACE_ENCRYPT_ROUND)
    assert [data['round'] for data in encrypt_rounds] == [1, 2, 3, 4, 5]
    assert (encrypt_rounds[-1]['a'], encrypt_rounds[-1]['b']) == ct

    decrypt_rounds = hook.of(TRACE_DECRYPT_ROUND)
    assert [data['round'] for data in decrypt_rounds] == [5, 4, 3, 2, 1]
    # undoing round i restores the state after round i - 1
    for undone, forward in zip(decrypt_rounds[:-1], reversed(encrypt_rounds[:-1])):
        assert (undone['a'], undone['b']) == (forward['a'], forward['b'])


def test_trace_does_not_change_results():
    plain = RC5BlockCipher()
    traced = RC5BlockCipher(trace=CollectingTraceHook())
    assert plain.expand_key(KEY) == traced.expand_key(KEY)
    table = plain.expand_key(KEY)
    assert plain.encrypt(BLOCK, table) == traced.encrypt(BLOCK, table)


def test_collecting_hook_clear():
    hook = CollectingTraceHook()
    RC5BlockCipher(trace=hook).expand_key(KEY)
    assert hook.events
    hook.clear()
    assert hook.events == []


def test_logging_hook_writes_records(caplog):
    logger = logging.getLogger("rc5cipher.tests.trace")
    cipher = RC5BlockCipher(ParameterSet(32, 2, 16), trace=LoggingTraceHook(logger))
    with caplog.at_level(logging.DEBUG, logger="rc5cipher.tests.trace"):
        table = cipher.expand_key(KEY)
        cipher.encrypt(BLOCK, table)

    messages = [record.getMessage() for record in caplog.records
                if record.name == "rc5cipher.tests.trace"]
    assert len(messages) == 5
    assert messages[0].startswith("key_packed: words=[0x3020100, 0x7060504")
    assert messages[3].startswith("encrypt_round: round=1 a=0x")


def test_logging_hook_respects_level(caplog):
    logger = logging.getLogger("rc5cipher.tests.quiet")
    cipher = RC5BlockCipher(trace=LoggingTraceHook(logger, level=logging.DEBUG))
    with caplog.at_level(logging.INFO, logger="rc5cipher.tests.quiet"):
        cipher.expand_key(KEY)
    assert not [record for record in caplog.records if record.name == "rc5cipher.tests.quiet"]
