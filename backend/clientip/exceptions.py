class NotIPv4Error(ValueError):
    """Raised when an address is not a parseable IPv4 address."""


class IPv4RangeError(ValueError):
    """Raised when an integer is outside the 32-bit IPv4 range."""
