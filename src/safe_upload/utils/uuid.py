"""UUID utilities for safe-upload."""

import uuid
import time


def generate_uuid_v7() -> uuid.UUID:
    """
    Generate a UUIDv7 with time-based ordering.

    48 bits of millisecond timestamp followed by 74 random bits, so names
    generated in the same directory sort by arrival and practically never
    collide.

    Returns:
        UUIDv7 instance
    """
    timestamp_ms = int(time.time() * 1000)
    timestamp_bytes = timestamp_ms.to_bytes(6, byteorder='big')
    random_bytes = uuid.uuid4().bytes[6:]

    uuid_bytes = timestamp_bytes + random_bytes

    # Set version to 7 (bits 12-15 of the 7th byte)
    uuid_bytes = uuid_bytes[:6] + bytes([(uuid_bytes[6] & 0x0f) | 0x70]) + uuid_bytes[7:]

    # Set variant to 10 (bits 6-7 of the 9th byte)
    uuid_bytes = uuid_bytes[:8] + bytes([(uuid_bytes[8] & 0x3f) | 0x80]) + uuid_bytes[9:]

    return uuid.UUID(bytes=uuid_bytes)


def generate_token() -> str:
    """Generate a 32-character hex token suitable for a file name."""
    return generate_uuid_v7().hex
