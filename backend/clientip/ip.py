"""Classification and integer conversion of IP addresses.

Classification never raises: anything that does not parse is simply
"not local". The integer conversions are strict and raise ValueError
subclasses from clientip.exceptions.
"""

import ipaddress
from ipaddress import IPv4Address, IPv6Address

from clientip.exceptions import IPv4RangeError, NotIPv4Error

IPAddress = IPv4Address | IPv6Address

MAX_IPV4 = 2**32 - 1


def parse_ip(address: str) -> IPAddress | None:
    """Parse text into an address, or None if it is not one."""
    try:
        return ipaddress.ip_address(address)
    except ValueError:
        return None


def _to_ipv4(ip: IPAddress) -> IPv4Address | None:
    if isinstance(ip, IPv4Address):
        return ip
    return ip.ipv4_mapped


def is_local_ip(ip: IPAddress) -> bool:
    """Return True for loopback and RFC1918 private IPv4 addresses.

    IPv4-mapped IPv6 addresses are judged by the embedded IPv4 address.
    """
    if ip.is_loopback:
        return True
    ip4 = _to_ipv4(ip)
    if ip4 is None:
        return False
    first, second = ip4.packed[0], ip4.packed[1]
    return (
        first == 127
        or first == 10
        or (first == 172 and 16 <= second <= 31)
        or (first == 192 and second == 168)
    )


def is_local_address(address: str | IPAddress) -> bool:
    """Like is_local_ip, but also accepts text. Unparseable text is not local."""
    if isinstance(address, (IPv4Address, IPv6Address)):
        return is_local_ip(address)
    if not isinstance(address, str):
        return False
    ip = parse_ip(address)
    if ip is None:
        return False
    return is_local_ip(ip)


def is_public_address(address: str | IPAddress) -> bool:
    """Return True if the address parses and is not local."""
    if isinstance(address, str):
        ip = parse_ip(address)
    elif isinstance(address, (IPv4Address, IPv6Address)):
        ip = address
    else:
        ip = None
    return ip is not None and not is_local_ip(ip)


def ip_to_long(ip: IPAddress) -> int:
    """Convert an IPv4 (or IPv4-mapped IPv6) address to its 32-bit integer."""
    ip4 = _to_ipv4(ip)
    if ip4 is None:
        raise NotIPv4Error(f"{ip} is not an IPv4 address")
    return int(ip4)


def long_to_ip(value: int) -> IPv4Address:
    """Convert a 32-bit integer to an IPv4 address."""
    if value < 0 or value > MAX_IPV4:
        raise IPv4RangeError(f"{value} is outside the IPv4 range")
    return IPv4Address(value)


def ip_string_to_long(address: str) -> int:
    ip = parse_ip(address)
    if ip is None:
        raise NotIPv4Error(f"{address!r} is not an IP address")
    return ip_to_long(ip)


def long_to_ip_string(value: int) -> str:
    return str(long_to_ip(value))
