"""
Removal of dot segments from URI paths (RFC 3986, section 5.2.3).

The path is consumed from the left. In each step, the first matching rule
is applied:

    A. a leading ``'../'`` or ``'./'`` is removed
    B. a leading ``'/./'`` or a complete ``'/.'`` is replaced with ``'/'``
    C. a leading ``'/../'`` or a complete ``'/..'`` is replaced with ``'/'``
       and the last segment is removed from the output
    D. a remaining ``'.'`` or ``'..'`` is removed
    E. otherwise the first segment, including a leading ``'/'``, is moved to
       the output

Each rule consumes at least one character, so the loop always terminates.
The output is collected as a list of segments, where every segment except
(possibly) the first one starts with a ``'/'``.
"""

from urinorm.logger import get_logger


_logger = get_logger(__name__)


def remove_dot_segments_from_path(path: str) -> str:
    """Remove all ``'.'`` and ``'..'`` segments from a path.

    A ``'..'`` that has no preceding segment that it could remove is
    discarded. Empty segments and percent-encoded dots (``'%2E'``) are kept
    as they are.

    .. code-block:: python

        >>> remove_dot_segments_from_path('/a/b/c/./../../g')
        '/a/g'
        >>> remove_dot_segments_from_path('mid/content=5/../6')
        'mid/6'

    Args:
        path: an absolute or relative path

    Returns:
        the path without dot segments; never longer than ``path``
    """
    remaining = path
    output = []

    while remaining:
        if remaining.startswith('../'):
            remaining = remaining[3:]

        elif remaining.startswith('./'):
            remaining = remaining[2:]

        elif remaining.startswith('/./') or remaining == '/.':
            remaining = '/' + remaining[3:]

        elif remaining.startswith('/../') or remaining == '/..':
            remaining = '/' + remaining[4:]
            if not output:
                _logger.debug(f"Discarding '..' without parent segment "
                              f"in '{path}'")
            elif output[-1].startswith('/'):
                output.pop()
            else:
                # a relative first segment; its parent is the empty path
                output.pop()
                if not remaining.startswith('//'):
                    remaining = remaining[1:]

        elif remaining in ('.', '..'):
            remaining = ''

        else:
            end = remaining.find('/', 1)
            if end == -1:
                end = len(remaining)
            output.append(remaining[:end])
            remaining = remaining[end:]

    return ''.join(output)
