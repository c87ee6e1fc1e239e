"""Request ID generation.

ULID-based identifiers for tracing HTTP requests through the logs.
ULIDs are lexicographically sortable and carry a millisecond timestamp,
so request ids in the log stream sort in arrival order.
"""

from typing import NewType
from ulid import ULID

RequestID = NewType("RequestID", str)
"""HTTP request identifier"""

ULID_LENGTH = 26


class Prefix:
    """ID prefix constants."""

    REQUEST = "req"


class Generator:
    """ULID generator."""

    def generate(self) -> str:
        """Generate a new ULID."""
        return str(ULID())

    def generate_with_prefix(self, prefix: str) -> str:
        """Generate ULID with type prefix."""
        return f"{prefix}_{self.generate()}"


# Singleton instance
_generator = Generator()


def new_request_id() -> RequestID:
    """Generate new request ID."""
    return RequestID(_generator.generate_with_prefix(Prefix.REQUEST))


def is_valid(id_str: str, prefix: str = Prefix.REQUEST) -> bool:
    """Check if string is `<prefix>_<ulid>`."""
    head, sep, ulid_part = id_str.partition("_")
    if not sep or head != prefix or len(ulid_part) != ULID_LENGTH:
        return False
    try:
        ULID.from_str(ulid_part)
    except ValueError:
        return False
    return True


def request_id_from_header(value: str | None) -> RequestID:
    """Reuse a well-formed incoming request id, otherwise mint a new one."""
    if value and is_valid(value):
        return RequestID(value)
    return new_request_id()


__all__ = ["RequestID", "Prefix", "Generator", "new_request_id", "is_valid", "request_id_from_header"]
