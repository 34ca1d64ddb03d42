from typing import Any


def clone_value(value: Any) -> Any:
    """
    Structural copy of JSON-like section content.

    Dicts, lists and tuples are rebuilt recursively; scalars are immutable
    and returned as-is. Original and copy never share a mutable container.
    """
    if isinstance(value, dict):
        return {key: clone_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [clone_value(item) for item in value]
    return value
