"""
The :class:`URI` value type.

A :class:`URI` is an immutable, parsed URI reference. Splitting a string into
its components and joining the components back together is done by
``url-normalize`` (:func:`url_normalize.tools.deconstruct_url` and
:func:`url_normalize.tools.reconstruct_url`), which also provides the
scheme, userinfo, host and port normalization that is used by
:meth:`URI.canonical`.

Every method that "changes" a URI returns a new instance. An instance that
was passed to one of the normalization functions is never modified.

.. code-block:: python

    >>> from urinorm import URI
    >>> uri = URI('HTTP://User@Example.COM:80/%7efoo/./bar')
    >>> uri.host
    'Example.COM'
    >>> uri.canonical()
    URI('http://User@example.com/~foo/./bar')
    >>> uri.with_path('/baz')
    URI('HTTP://User@Example.COM:80/baz')
"""

import re

from url_normalize.tools import deconstruct_url, reconstruct_url
from url_normalize.url_normalize import (
    normalize_host,
    normalize_port,
    normalize_scheme,
    normalize_userinfo
)


EMPTY_PATH_SCHEMES = ('http', 'https', 'ftp', 'file')
"""Schemes for which an empty path is equivalent to '/'."""

UNRESERVED = frozenset('ABCDEFGHIJKLMNOPQRSTUVWXYZ'
                       'abcdefghijklmnopqrstuvwxyz'
                       '0123456789-._~')

_PCT_ENCODED_RE = re.compile(r'%([0-9A-Fa-f]{2})')


def _normalize_pct_triplet(match) -> str:
    char = chr(int(match.group(1), 16))
    if char in UNRESERVED:
        return char
    return match.group().upper()


def normalize_percent_encoding(component: str) -> str:
    """Normalize the percent-encoded octets in a URI component.

    Hexadecimal digits are converted to upper case and octets that encode
    unreserved characters are decoded (RFC 3986, sections 6.2.2.1 and
    6.2.2.2). All other characters are left as they are.

    Args:
        component: path, query, fragment or userinfo of a URI
    """
    return _PCT_ENCODED_RE.sub(_normalize_pct_triplet, component)


class URI:
    """An immutable URI reference.

    Args:
        uri: the URI as a string. Leading and trailing whitespace is ignored.
            Relative references (e.g. ``'../a/b'``) are accepted as well.

    Raises:
        ValueError: the string cannot be split into URI components, for
            example because of an unbalanced IPv6 bracket in the authority
    """
    __slots__ = ('_url', )

    def __init__(self, uri: str):
        text = uri.strip()
        url = deconstruct_url(text)
        # the splitter folds the scheme to lower case; keep it as given
        spelled = text[:len(url.scheme)]
        if url.scheme and spelled.lower() == url.scheme:
            url = url._replace(scheme=spelled)
        self._url = url

    @classmethod
    def _from_url(cls, url) -> "URI":
        obj = cls.__new__(cls)
        obj._url = url
        return obj

    @property
    def scheme(self) -> str:
        """The scheme, e.g. ``'https'``, or an empty string."""
        return self._url.scheme

    @property
    def userinfo(self) -> str:
        """The userinfo without the trailing ``'@'``, or an empty string."""
        return self._url.userinfo[:-1] if self._url.userinfo else ''

    @property
    def host(self) -> str:
        return self._url.host

    @property
    def port(self) -> str:
        """The port as a string, or an empty string if there is none."""
        return self._url.port

    @property
    def authority(self) -> str:
        """Userinfo, host and port as they appear after ``'//'``."""
        authority = self._url.userinfo + self._url.host
        if self._url.port:
            authority += ':' + self._url.port
        return authority

    @property
    def path(self) -> str:
        return self._url.path

    @property
    def query(self) -> str:
        return self._url.query

    @property
    def fragment(self) -> str:
        return self._url.fragment

    def with_path(self, path: str) -> "URI":
        """Return a copy of this URI with the path replaced.

        Args:
            path: the new path
        """
        return self._from_url(self._url._replace(path=path))

    def clone(self) -> "URI":
        """Return an independent copy of this URI."""
        return self._from_url(self._url)

    def canonical(self) -> "URI":
        """Return the canonical form of this URI.

        - the scheme and the host are converted to lower case, the host is
          IDNA-encoded and leading or trailing dots are removed
        - the port is removed if it is empty or the default port of the
          scheme
        - an empty userinfo (``'@'`` or ``':@'``) is removed
        - percent-encoding is normalized in userinfo, path, query and
          fragment (see :func:`normalize_percent_encoding`)
        - for http, https, ftp and file URIs with a host, an empty path is
          replaced by ``'/'``

        Dot segments are not removed from the path, see
        :func:`urinorm.normalize_uri` for this.

        Raises:
            UnicodeError: the host cannot be IDNA-encoded
        """
        url = self._url
        scheme = normalize_scheme(url.scheme)
        host = normalize_host(url.host) if url.host else url.host
        path = normalize_percent_encoding(url.path)
        if not path and host and scheme in EMPTY_PATH_SCHEMES:
            path = '/'

        return self._from_url(url._replace(
            scheme=scheme,
            userinfo=normalize_percent_encoding(
                normalize_userinfo(url.userinfo)
            ),
            host=host,
            port=normalize_port(url.port, scheme),
            path=path,
            query=normalize_percent_encoding(url.query),
            fragment=normalize_percent_encoding(url.fragment),
        ))

    def __str__(self):
        return reconstruct_url(self._url)

    def __repr__(self):
        return f"URI({str(self)!r})"

    def __eq__(self, other):
        if isinstance(other, (URI, str)):
            return str(self) == str(other)
        return NotImplemented

    def __hash__(self):
        return hash(str(self))
