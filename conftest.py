import logging
import pytest


@pytest.fixture(autouse=True)
def silence_expected_warnings():
    """Reduce noise from failure paths exercised on purpose.

    Several tests drive the notices page through transport and decode
    failures, which log at WARNING via the 'notices' loggers. Lower
    those (and 'django.request') to ERROR during tests.
    """
    loggers = [logging.getLogger(name) for name in ("django.request", "notices")]
    old = [lg.level for lg in loggers]
    for lg in loggers:
        lg.setLevel(logging.ERROR)
    try:
        yield
    finally:
        for lg, level in zip(loggers, old):
            lg.setLevel(level)
