"""
Field validation for untrusted request strings.

Every username, document id and opaque value passes through one of these
predicates before it reaches a store. Both predicates are a single regex
scan over a character class, so they run in linear time.
"""

import ipaddress
import re
from typing import Any, Mapping, Optional

FIELD_LEN_LIMIT = 4096

# Letters, digits and punctuation that is inert in storage keys.
# ':' is excluded because it is the storage-layer delimiter.
_KEY_FIELD_RE = re.compile(r"[A-Za-z0-9._@+~-]+")

# C0 and C1 control characters.
_CONTROL_CHAR_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")

REAL_IP_HEADER = "x-real-ip"


def _within_limit(field: Any) -> bool:
    return isinstance(field, str) and 0 < len(field) <= FIELD_LEN_LIMIT


def is_valid_field(field: Any) -> bool:
    """
    Check if a field is an acceptable opaque value (secret, device name...).

    Args:
        field: Value to validate

    Returns:
        True if field is a non-empty string within the length limit
        that contains no control characters
    """
    return _within_limit(field) and _CONTROL_CHAR_RE.search(field) is None


def is_valid_key_field(field: Any) -> bool:
    """
    Check if a field can be used as a storage key (username, document id).

    Args:
        field: Value to validate

    Returns:
        True if field is a non-empty string within the length limit made
        only of identifier-safe characters
    """
    return _within_limit(field) and _KEY_FIELD_RE.fullmatch(field) is not None


def get_remote_addr(headers: Mapping[str, str], socket_addr: Optional[str]) -> str:
    """
    Resolve the caller address for logging.

    The x-real-ip header set by a reverse proxy wins when it holds a valid
    IP address; otherwise the transport peer address is used. Never use the
    result for authorization decisions.
    """
    real_ip = headers.get(REAL_IP_HEADER)
    if real_ip:
        real_ip = real_ip.strip()
        try:
            ipaddress.ip_address(real_ip)
        except ValueError:
            pass
        else:
            return real_ip
    return socket_addr or "unknown"
