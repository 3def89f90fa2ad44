import logging
import os
import warnings
from typing import Union


class LoggingManager:
    """Interface for configuring logging in urinorm.

    The normalization functions only log at the level 'DEBUG'. With the
    default configuration, urinorm is therefore silent. Lowering the log
    level shows how paths are rewritten, which can be helpful when two URIs
    unexpectedly do (or do not) normalize to the same value.

    All submodule loggers in urinorm are child loggers of the base logger.
    This class acts as an interface to set the log level for urinorm and get
    child loggers.
    """
    _console_formatter = logging.Formatter(
        "{module: <8} {levelname: >10} \t{message}", style='{'
    )

    _console_handler = logging.StreamHandler()
    _console_handler.setFormatter(_console_formatter)
    _console_handler.setLevel(logging.INFO)

    _root_logger = logging.getLogger('urinorm')
    _root_logger.setLevel(logging.DEBUG)
    _root_logger.addHandler(_console_handler)

    @classmethod
    def get_child(cls, name: str):
        """Return a logger with the given name that is child of the base
        logger.

        Args:
            name: name of the child logger
        """
        return cls._root_logger.getChild(name)

    @classmethod
    def set_level(cls, level: int):
        """Set the log level for urinorm.

        Args:
            level: log level, for example `logging.INFO`
        """
        cls._console_handler.setLevel(level)


def get_logger(name: str):
    """Return a logger with the given name that is a child of urinorm's
    base logger.
    """
    return LoggingManager.get_child(name)


def _level_from_name(name: str):
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else None


def set_log_level(level: Union[str, int]):
    """Set the log level for all parts of urinorm.

    When setting the log level for urinorm, only messages with this level or
    with a higher level will be shown.

    Args:
        level: Either a log level from the logging module (e.g. `logging.INFO`)
            or the level as a string (e.g. 'DEBUG').

    Raises:
        ValueError: the level name is unknown
    """
    if isinstance(level, str):
        name, level = level, _level_from_name(level)
        if level is None:
            raise ValueError(f"Unknown log level '{name}'")
    LoggingManager.set_level(level)


_env_level = os.getenv('URINORM_LOG_LEVEL')
if _env_level:
    if _level_from_name(_env_level) is None:
        warnings.warn(f"Ignoring invalid URINORM_LOG_LEVEL '{_env_level}'",
                      UserWarning)
    else:
        set_log_level(_env_level)
