"""Row id bounds shared by every SERIAL primary key."""

# SERIAL is int4; a larger value cannot be bound as a query parameter
MAX_SERIAL_ID = 2_147_483_647


def is_serial_id(value: int) -> bool:
    """True if `value` could be the id of a stored row."""
    return 1 <= value <= MAX_SERIAL_ID
