"""URL host rewriting use case."""

from urllib.parse import urlsplit

_AUTHORITY_END = "/?#"


def _replace_host(netloc: str, host: str) -> str:
    """Return netloc with its host replaced, keeping userinfo and port."""
    userinfo, sep, hostport = netloc.rpartition("@")

    port = ""
    if hostport.startswith("["):
        # Bracketed literal: the port follows the closing bracket
        _, bracket, tail = hostport.partition("]")
        if bracket and tail.startswith(":"):
            port = tail
    else:
        _, colon, port_digits = hostport.partition(":")
        if colon:
            port = colon + port_digits

    return f"{userinfo}{sep}{host}{port}"


def rewrite_host(url: str, host: str) -> str:
    """Replace the host of url with host, leaving everything else untouched.

    Only the authority is rebuilt. Scheme, port, path, query string and
    fragment are copied byte for byte, so percent-encoding and parameter
    order survive the rewrite. A URL without a path gets the root path "/"
    so the result stays well-formed. URLs without an authority are returned
    unchanged.

    Examples:
        >>> rewrite_host("http://any.url.com:8080/path?p=1#f", "10.0.0.2")
        'http://10.0.0.2:8080/path?p=1#f'
        >>> rewrite_host("http://any.url.com?p=1", "10.0.0.1")
        'http://10.0.0.1/?p=1'

    Args:
        url: Absolute URL whose host should be replaced.
        host: New host, typically an IPv4 address literal.

    Returns:
        The rewritten URL.
    """
    if not urlsplit(url).netloc:
        return url

    # urlsplit drops tab, CR and LF, so the authority is located in url itself
    start = url.find("//")
    if start == -1:
        return url
    start += 2
    end = start
    while end < len(url) and url[end] not in _AUTHORITY_END:
        end += 1

    netloc = url[start:end]
    rest = url[end:]
    if not rest.startswith("/"):
        rest = "/" + rest

    return url[:start] + _replace_host(netloc, host) + rest
