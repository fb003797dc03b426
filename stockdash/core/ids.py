def normalize_id(value):
    """Coerce a stored identifier to its canonical string form.

    Legacy files hold a mix of ``3`` and ``"3"``; both become ``"3"``.
    Integral floats (``3.0``) are treated as the integer they encode.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _as_int(value):
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return 0


def new_identifier(records):
    """Next id for a collection: one more than the largest integer id.

    Ids that do not parse as integers count as 0, so an all-text collection
    still gets "1".
    """
    highest = 0
    for record in records:
        record_id = record.get("id") if isinstance(record, dict) else getattr(record, "id", None)
        highest = max(highest, _as_int(record_id))
    return str(highest + 1)


__all__ = ["new_identifier", "normalize_id"]
