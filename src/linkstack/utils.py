from typing import Any

_BOOLS = {"true": True, "false": False}


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# HELPERS
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
def coerce_value(value: str) -> Any:
    """Turn a --push string into a stack element.

    Numbers and booleans become scalars, anything else
    is pushed as the string itself.

    >>> coerce_value("3")
    3
    >>> coerce_value("False")
    False
    >>> coerce_value("none")
    'none'
    """
    if value.lower() in _BOOLS:
        return _BOOLS[value.lower()]
    for cast in (int, float):
        try:
            return cast(value)
        except ValueError:
            continue
    return value
