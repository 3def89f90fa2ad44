"""Collection of functions to simplify tests.
"""

import io
import logging


class LogOutputHandle:
    """A handle to access captured log output.

    Used by :func:`capture_log`

    Args:
        stream_handler: An instance of :class:`logging.StreamHandler` that
            captures the logging output.
        stream: An instance of :class:`io.StringIO` that is used as stream
            target by the stream handler.
    """
    def __init__(self, stream_handler, stream):
        self.stream_handler = stream_handler
        self.stream = stream

    @property
    def text(self):
        """Property for accessing the captured logging output as string.
        """
        self.stream_handler.flush()
        return self.stream.getvalue()

    def close(self):
        """Stop capturing and detach the handler from the logger."""
        logging.getLogger('urinorm').removeHandler(self.stream_handler)


def capture_log(level=logging.DEBUG):
    """Capture urinorm's logging output during a test run.

    This can be used as an alternative to pytest's ``caplog`` fixture when
    the formatted output of urinorm's loggers should be checked.

    Args:
        level: Log level at which the log is captured

    Returns:
        :class:`LogOutputHandle`
    """
    logger = logging.getLogger('urinorm')
    stream = io.StringIO()
    stream_handler = logging.StreamHandler(stream=stream)
    stream_handler.setLevel(level)
    logger.addHandler(stream_handler)

    return LogOutputHandle(stream_handler, stream)
