"""Node identifier provisioning.

Ids only correlate a rendered element back to its node. They never take part
in tree structure or ordering.
"""

from __future__ import annotations

import secrets

ID_HEX_LENGTH = 16


def provision_new_id() -> str:
    """Return a fresh 16-character lowercase hex identifier.

    Example:
        >>> len(provision_new_id())
        16
    """
    return secrets.token_hex(ID_HEX_LENGTH // 2)
