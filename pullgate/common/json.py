from dataclasses import fields, is_dataclass
from typing import Any


def asjson(obj: Any) -> Any:  # type: ignore[misc]
    """
    Convert dataclasses (and lists/dicts of them) into plain objects that can
    be passed to a `JSONResponse`.
    """

    if obj is None:
        return None

    if isinstance(obj, dict):
        return {str(k): asjson(v) for k, v in obj.items()}

    if is_dataclass(obj) and not isinstance(obj, type):
        return {field.name: asjson(getattr(obj, field.name)) for field in fields(obj)}

    if isinstance(obj, list | tuple):
        return [asjson(x) for x in obj]

    if isinstance(obj, bool | int | float | str):
        return obj

    return str(obj)
