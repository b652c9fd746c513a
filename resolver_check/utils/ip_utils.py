"""IP address and resolver address utilities."""

import ipaddress
import socket
from typing import Optional, Tuple


DEFAULT_DNS_PORT = 53


def is_ip_literal(value: str) -> bool:
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def is_null_address(address: str) -> bool:
    """Check if an address is the all-zero sentinel used by blocking resolvers.

    Args:
        address: IP address string from an answer record.

    Returns:
        bool: True for 0.0.0.0 (or ::), False otherwise, including for
        strings that are not IP addresses at all.

    Examples:
        >>> is_null_address("0.0.0.0")
        True
        >>> is_null_address("93.184.216.34")
        False
    """
    try:
        return ipaddress.ip_address(address).is_unspecified
    except ValueError:
        return False


def parse_resolver_address(address: str) -> Tuple[str, int]:
    """Split a resolver address into host and port.

    Accepts ``host:port``, ``[ipv6]:port``, a bare IPv4/IPv6 address, or a
    bare host. The port defaults to 53.

    Args:
        address: Resolver address as given on the command line.

    Returns:
        Tuple[str, int]: (host, port)

    Raises:
        ValueError: If the host is empty or the port is not 1-65535.

    Examples:
        >>> parse_resolver_address("1.1.1.1:53")
        ('1.1.1.1', 53)
        >>> parse_resolver_address("[2606:4700:4700::1111]:5353")
        ('2606:4700:4700::1111', 5353)
        >>> parse_resolver_address("::1")
        ('::1', 53)
    """
    address = address.strip()
    port_text: Optional[str] = None

    if address.startswith("["):
        host, sep, rest = address[1:].partition("]")
        if not sep:
            raise ValueError(f"Invalid resolver address: {address}")
        if rest:
            if not rest.startswith(":"):
                raise ValueError(f"Invalid resolver address: {address}")
            port_text = rest[1:]
    elif address.count(":") == 1:
        host, _, port_text = address.partition(":")
    else:
        # Bare IPv6 address or bare host
        host = address

    if not host:
        raise ValueError(f"Resolver address has no host: {address}")

    if port_text is None:
        return host, DEFAULT_DNS_PORT

    if not port_text.isdigit() or not 1 <= int(port_text) <= 65535:
        raise ValueError(f"Invalid resolver port: {port_text}")

    return host, int(port_text)


def resolve_server_host(host: str, port: int = DEFAULT_DNS_PORT) -> str:
    """Turn a resolver host into an IP literal usable as a query destination.

    IP literals are returned unchanged; host names (e.g. a compose service
    name) are looked up once through the system resolver.

    Args:
        host: IP address or host name of the resolver.
        port: Resolver port, passed through to the lookup.

    Returns:
        str: IP address of the resolver.

    Raises:
        ValueError: If the host name cannot be resolved.
    """
    if is_ip_literal(host):
        return host

    try:
        infos = socket.getaddrinfo(host, port, type=socket.SOCK_DGRAM)
    except OSError as e:
        raise ValueError(f"Cannot resolve resolver host {host}: {e}") from e

    if not infos:
        raise ValueError(f"Cannot resolve resolver host {host}: no addresses")
    return infos[0][4][0]
