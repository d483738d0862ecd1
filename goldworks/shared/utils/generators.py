"""ID and value generators (CUID for primary keys, order numbers)."""

from datetime import datetime

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2).

    Returns:
        A new CUID string.
    """
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def generate_order_number(created_at: datetime) -> str:
    """Human-facing order number, e.g. 'ORD-20261019-K3F9Q2'."""
    suffix = generate_cuid()[-6:].upper()
    return f"ORD-{created_at:%Y%m%d}-{suffix}"
