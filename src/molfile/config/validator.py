"""Turn pydantic validation failures into ConfigError arguments."""

from pydantic import ValidationError as PydanticValidationError


def describe_validation_error(exc: PydanticValidationError) -> tuple[str, str]:
    """Name the first offending field and describe every failure.

    Returns:
        ``(field, message)``; the message joins one ``field: reason`` entry
        per error, quoting the rejected value when a validator refused it.
    """
    field = "unknown"
    messages: list[str] = []
    for error in exc.errors():
        path = ".".join(str(item) for item in error["loc"]) or "unknown"
        if field == "unknown":
            field = path
        message = f"{path}: {error['msg']}"
        if error["type"] == "value_error":
            message += f" (received {error['input']!r})"
        messages.append(message)
    return field, "; ".join(messages)
