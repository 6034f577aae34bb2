"""Console, password entry and validation helpers"""

from .console import Streams, flushed_write
from .passwords import MISMATCH_ATTEMPTS, request_new_password

__all__ = [
    "Streams",
    "flushed_write",
    "MISMATCH_ATTEMPTS",
    "request_new_password",
]
