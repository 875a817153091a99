"""Client IP resolution behind optional trusted reverse proxies."""

from __future__ import annotations

_OWS = " \t"


def extract_client_ip(
    forwarded_for: str,
    remote_addr: str,
    trust_proxy: bool,
    trusted_hops: int = 1,
) -> str:
    """Return the client's IP address.

    Without ``trust_proxy`` the socket address is used. Otherwise the
    X-Forwarded-For value is read from the right: ``trusted_hops - 1`` entries
    are skipped and the next one is taken. If the header has too few entries
    or the chosen entry is blank, the socket address is used.
    """
    if not trust_proxy or not forwarded_for:
        return remote_addr

    remaining = forwarded_for
    for _ in range(trusted_hops - 1):
        head, sep, _tail = remaining.rpartition(",")
        if not sep:
            return remote_addr
        remaining = head

    ip = remaining.rpartition(",")[2].strip(_OWS)
    return ip or remote_addr