"""
KSUID - K-Sortable Unique Identifier.

Used to tag generation snapshots, errors and crash records so log lines
can be correlated. Layout: 4 byte big-endian timestamp (seconds since the
KSUID epoch) followed by 16 random bytes, base62 encoded to 27 chars.
"""

import os
import struct
import time

KSUID_EPOCH = 1400000000
KSUID_LENGTH = 27
BASE62 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def _encode(raw):
    n = int.from_bytes(raw, byteorder="big")
    chars = []
    while n > 0:
        n, remainder = divmod(n, 62)
        chars.append(BASE62[remainder])
    return "".join(reversed(chars)).rjust(KSUID_LENGTH, "0")


def generate_ksuid(epoch_seconds=None):
    """Generate a 27-character sortable unique ID."""
    if epoch_seconds is None:
        epoch_seconds = time.time()
    ts_bytes = struct.pack(">I", int(epoch_seconds) - KSUID_EPOCH)
    return _encode(ts_bytes + os.urandom(16))

