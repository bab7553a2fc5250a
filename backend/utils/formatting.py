PLACEHOLDER = "N/A"


def safe_text(value) -> str:
    """Render an optional field, joining lists; empty values become the placeholder."""
    if isinstance(value, (list, tuple)):
        value = ", ".join(str(v) for v in value if v)
    if value is None or value == "":
        return PLACEHOLDER
    return str(value)


def format_number(value: int | float | None) -> str:
    if value is None:
        return PLACEHOLDER
    if isinstance(value, float) and value != value:  # NaN
        return PLACEHOLDER
    return f"{value:,}"
