"""Utility modules for mathedit.

Provides:
- logger: get_logger for logging
- ids: provision_new_id for node identifiers
"""

from mathedit.utils.ids import provision_new_id
from mathedit.utils.logger import get_logger

__all__ = [
    "get_logger",
    "provision_new_id",
]
