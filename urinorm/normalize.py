"""
Syntax-based normalization of URIs (RFC 3986, section 6).

Normalization makes it possible to compare URIs with fewer false negatives.
For example, all of the following URIs normalize to the same value::

    HTTPS://www.example.com:443/../test/../foo/index.html
    https://WWW.EXAMPLE.COM/./foo/index.html
    https://www.example.com/%66%6f%6f/index.html
    https://www.example.com/foo/index.html

Two URIs that normalize to the same value do not necessarily identify the
same resource. A server may treat ``'/./'`` in a path or an encoded octet
like ``'%3a'`` differently from its normalized counterpart. Normalization is
a purely syntactic tool.

All functions accept either a :class:`~urinorm.URI` or a string and return a
new :class:`~urinorm.URI`. The argument itself is never modified.
"""

import functools

from urinorm.dot_segments import remove_dot_segments_from_path
from urinorm.exceptions import MissingArgumentError
from urinorm.logger import get_logger
from urinorm.uri import URI


_logger = get_logger(__name__)


@functools.singledispatch
def coerce_uri(uri, caller: str = 'coerce_uri') -> URI:
    """Return ``uri`` as a :class:`~urinorm.URI`.

    Strings are parsed, :class:`~urinorm.URI` instances are returned
    unchanged (they are immutable, modifications always create a copy).

    Args:
        uri: a :class:`~urinorm.URI` or a string
        caller: name of the public function, used in error messages

    Raises:
        MissingArgumentError: ``uri`` is None
        TypeError: ``uri`` is neither a string nor a :class:`~urinorm.URI`
    """
    raise TypeError(f"{caller} expects a URI or a str, "
                    f"got {type(uri).__name__}")


@coerce_uri.register
def _(uri: URI, caller: str = 'coerce_uri') -> URI:
    return uri


@coerce_uri.register
def _(uri: str, caller: str = 'coerce_uri') -> URI:
    return URI(uri)


@coerce_uri.register(type(None))
def _(uri, caller: str = 'coerce_uri') -> URI:
    raise MissingArgumentError(caller)


def normalize_uri(uri=None) -> URI:
    """Normalize a URI.

    The URI is first converted to its canonical form (see
    :meth:`URI.canonical`) and then dot segments are removed from its path
    (see :func:`remove_dot_segments`).

    .. code-block:: python

        >>> uri = 'HTTPS://www.Example.com:443/../test/../foo/index.html'
        >>> normalize_uri(uri)
        URI('https://www.example.com/foo/index.html')

    Args:
        uri: a :class:`~urinorm.URI` or a string

    Returns:
        a new :class:`~urinorm.URI`

    Raises:
        MissingArgumentError: no URI was given
    """
    uri = coerce_uri(uri, 'normalize_uri')
    return remove_dot_segments(uri.canonical())


def remove_dot_segments(uri=None) -> URI:
    """Remove ``'.'`` and ``'..'`` segments from the path of a URI.

    Only the path is changed. Scheme, host and port are kept exactly as
    they are given.

    .. code-block:: python

        >>> uri = 'HTTPS://www.Example.com:443/../test/../foo/index.html'
        >>> remove_dot_segments(uri)
        URI('HTTPS://www.Example.com:443/foo/index.html')

    Args:
        uri: a :class:`~urinorm.URI` or a string

    Returns:
        a new :class:`~urinorm.URI`

    Raises:
        MissingArgumentError: no URI was given
    """
    uri = coerce_uri(uri, 'remove_dot_segments')
    path = remove_dot_segments_from_path(uri.path)
    if path != uri.path:
        _logger.debug(f"Removed dot segments: '{uri.path}' -> '{path}'")
    return uri.with_path(path)


def uris_equivalent(first=None, second=None) -> bool:
    """Check whether two URIs are equal after normalization.

    Args:
        first: a :class:`~urinorm.URI` or a string
        second: a :class:`~urinorm.URI` or a string

    Raises:
        MissingArgumentError: one of the URIs was not given
    """
    first = coerce_uri(first, 'uris_equivalent')
    second = coerce_uri(second, 'uris_equivalent')
    return normalize_uri(first) == normalize_uri(second)
