"""
Logging utilities.
"""

import logging
from pathlib import Path


def setup_logger() -> None:
    """
    Sets up a basic ``StreamHandler`` that prints log messages to the terminal.
    The default log level of the ``StreamHandler`` is set to "info".

    Calling this function again does not add another handler.

    The global log level for optionals can be adjusted like this::

        import logging
        logger = logging.getLogger("optionals")
        logger.level = logging.ERROR

    This will set the log level to "error" and silence the warning emitted by
    ``Optional.of(None)``.
    """

    # We adjust only our library's logger
    logger = logging.getLogger("optionals")

    # This is the level that will in principle be handled by the logger.
    # If it is set, for example, to logging.WARNING, this logger will never
    # emit messages of a level below warning
    logger.setLevel(logging.INFO)

    # By setting this to False, we prevent the log messages from being passed on
    # to the root logger. This prevents duplication of the log messages
    logger.propagate = False

    if any(isinstance(h, _OptionalsStreamHandler) for h in logger.handlers):
        return

    # This is the default handler that we set for our log messages
    handler = _OptionalsStreamHandler()

    # We define the format of log messages for this handler
    formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)

    logger.addHandler(handler)


def reset_logger() -> None:
    """
    Undoes :func:`.setup_logger` so that the ``"optionals"`` logger is configured by
    the application instead.

    The level goes back to ``logging.NOTSET``, records propagate to the root logger
    again, and every handler is removed, including file handlers added with
    :func:`.add_file_handler`. Call :func:`.setup_logger` to restore the defaults.
    """

    # We adjust only our library's logger
    logger = logging.getLogger("optionals")

    # Removes the level of the logger. All log messages will be propagated
    logger.setLevel(logging.NOTSET)

    # By setting this to True, we allow the log messages to be passed on
    # to the root logger
    logger.propagate = True

    # Removes all handlers. Iterates over a copy, since removeHandler
    # mutates the list
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


def add_file_handler(
    path: str | Path,
    level: str,
    logger: str = "optionals",
    fmt: str = "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
) -> logging.FileHandler:
    """
    Adds a file handler to a logger.

    Parameters
    ----------
    path
        Absolute path to the log file. If it does not exist, it will be created.
        If any parent directory does not exist, it will be created as well.
    level
        The log level of the messages to write to the file. Can be ``"debug"``,
        ``"info"``, ``"warning"``, ``"error"`` or ``"critical"``. The file will
        contain all messages from the specified level upwards.
    logger
        The name of the logger to configure the file handler for. Can be, for
        example, ``"optionals.optional"`` to only catch messages from the
        container module.
    fmt
        Formatting string. See the documentation of the :class:`logging.Formatter`.

    Returns
    -------
    The new handler, so that it can be closed and removed again.

    Examples
    --------
    A file handler catching all log messages from optionals::

        import optionals

        optionals.logging.add_file_handler(path="/path/to/logfile.log", level="debug")

        optionals.Optional.of(None)  # writes a warning to the file
    """

    path = Path(path)

    if not path.is_absolute():
        raise ValueError("Provided path for logging file handler must be absolute")

    levelno = logging.getLevelName(level.upper())

    if not isinstance(levelno, int):
        raise ValueError(f"Unknown log level: {level!r}")

    path.parent.mkdir(parents=True, exist_ok=True)

    _logger = logging.getLogger(logger)
    handler = logging.FileHandler(path)

    handler.setLevel(levelno)

    formatter = logging.Formatter(fmt, "%Y-%m-%d %H:%M:%S")
    handler.setFormatter(formatter)

    _logger.addHandler(handler)

    return handler


class _OptionalsStreamHandler(logging.StreamHandler):
    """Marks the handler installed by :func:`.setup_logger`."""
