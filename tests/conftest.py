import logging
from collections.abc import Generator
from contextlib import contextmanager

import pytest
from _pytest.logging import LogCaptureHandler


@contextmanager
def local_caplog_fn(
    level: int = logging.INFO, name: str = "optionals"
) -> Generator[LogCaptureHandler, None, None]:
    """
    Context manager that captures records from non-propagating loggers.

    After the end of the ``with`` statement, the log level is restored to its original
    value. Code adapted from `this GitHub comment <GH_>`_.

    .. _GH: https://github.com/pytest-dev/pytest/issues/3697#issuecomment-790925527

    Parameters
    ----------
    level
        The log level.
    name
        The name of the logger to update.
    """

    logger = logging.getLogger(name)

    old_level = logger.level
    logger.setLevel(level)

    handler = LogCaptureHandler()
    logger.addHandler(handler)

    try:
        yield handler
    finally:
        logger.setLevel(old_level)
        logger.removeHandler(handler)


@pytest.fixture
def local_caplog():
    """
    Fixture that yields a context manager for capturing records from non-propagating
    loggers.

    Examples
    --------
    Usage example::

        from optionals import Optional


        def test_of_none_warns(local_caplog):
            with local_caplog() as caplog:
                Optional.of(None)
                assert len(caplog.records) == 1
                assert caplog.records[0].levelname == "WARNING"
    """

    yield local_caplog_fn
