"""
urinorm - syntax-based URI normalization according to RFC 3986

.. code-block:: python

    >>> from urinorm import normalize_uri, remove_dot_segments
    >>> uri = 'HTTPS://www.Example.com:443/../test/../foo/index.html'
    >>> str(normalize_uri(uri))
    'https://www.example.com/foo/index.html'
    >>> str(remove_dot_segments(uri))
    'HTTPS://www.Example.com:443/foo/index.html'
"""
from urinorm.version import __version__  # noqa: F401

from urinorm.dot_segments import remove_dot_segments_from_path  # noqa: F401
from urinorm.exceptions import (  # noqa: F401
    MissingArgumentError,
    URINormError
)
from urinorm.logger import set_log_level  # noqa: F401
from urinorm.normalize import (  # noqa: F401
    coerce_uri,
    normalize_uri,
    remove_dot_segments,
    uris_equivalent
)
from urinorm.uri import URI  # noqa: F401
