"""
URL utilities for crawlstore.

Provides host extraction for per-host cookie records.
"""

from urllib.parse import urlparse


def get_host(url_or_host: str) -> str:
    """
    Extract the host from a URL, or return a bare host unchanged.

    The network location is returned as-is (including any port and
    without case folding) so keys stay byte-identical to the host the
    caller saw.

    Args:
        url_or_host: A full URL (``https://example.com/path``) or a bare
            host (``example.com:8080``).

    Returns:
        The host portion.
    """
    if "://" not in url_or_host:
        return url_or_host
    return urlparse(url_or_host).netloc
