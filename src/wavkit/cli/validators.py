def validate_positive_integer(type_: object, value: int | None) -> None:
    """Validate that an optional integer option is > 0."""
    if value is None:
        return

    if value <= 0:
        raise ValueError(f"Value must be a positive integer, got {value}")


def validate_u16(type_: object, value: int | None) -> None:
    if value is None:
        return

    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"Value must fit in 16 bits (0-65535), got {value}")


def validate_u32(type_: object, value: int | None) -> None:
    if value is None:
        return

    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"Value must fit in 32 bits (0-4294967295), got {value}")
