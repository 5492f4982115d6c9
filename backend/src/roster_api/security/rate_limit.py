"""Rate limiting for the login and registration endpoints.

Limits are keyed on the client IP. Forwarding headers are only believed
when the direct peer is a trusted proxy; otherwise any client could pick
its own rate-limit bucket.
"""

from collections.abc import Iterable, Sequence
from ipaddress import IPv4Network, IPv6Network, ip_address, ip_network

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from roster_api.config import get_settings

# Used in development when TRUSTED_PROXIES is empty
DEV_TRUSTED_PROXIES = ("127.0.0.1", "::1", "10.0.0.0/8", "172.16.0.0/12", "192.168.0.0/16")


def _get_trusted_proxies() -> Sequence[str]:
    settings = get_settings()
    if settings.trusted_proxies_list:
        return settings.trusted_proxies_list
    if settings.environment == "development":
        return DEV_TRUSTED_PROXIES
    return ()


def _networks(entries: Iterable[str]) -> list[IPv4Network | IPv6Network]:
    # A bare address becomes a single-host network
    return [ip_network(entry, strict=False) for entry in entries]


def _is_trusted_proxy(client_ip: str, trusted_proxies: Sequence[str]) -> bool:
    """Whether ``client_ip`` falls inside any trusted address or CIDR range."""
    try:
        addr = ip_address(client_ip)
        return any(addr in network for network in _networks(trusted_proxies))
    except ValueError:
        return False


def _first_valid_ip(*candidates: str | None) -> str | None:
    for candidate in candidates:
        if not candidate:
            continue
        try:
            return str(ip_address(candidate.strip()))
        except ValueError:
            continue
    return None


def get_real_client_ip(request: Request) -> str:
    """Resolve the client IP used as the rate-limit key.

    Behind a trusted proxy the left-most ``X-Forwarded-For`` entry wins,
    then ``X-Real-IP``. Malformed header values are skipped.
    """
    peer = get_remote_address(request)
    if not _is_trusted_proxy(peer, _get_trusted_proxies()):
        return peer

    forwarded_for = request.headers.get("X-Forwarded-For", "")
    forwarded = _first_valid_ip(forwarded_for.split(",")[0], request.headers.get("X-Real-IP"))
    return forwarded or peer


_settings = get_settings()

# In-memory counters, one set per worker process
limiter = Limiter(key_func=get_real_client_ip, enabled=_settings.rate_limit_enabled)

AUTH_LOGIN_LIMIT = f"{_settings.rate_limit_auth_login}/minute"
AUTH_REGISTER_LIMIT = f"{_settings.rate_limit_auth_register}/minute"
