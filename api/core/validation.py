"""
Small input checks shared by the feature services.
"""

from __future__ import annotations

from typing import Annotated, Any, Mapping, Union

from pydantic import Field, StrictFloat, StrictInt

from .schema import MAX_SQLITE_INTEGER

# JSON number kept as submitted: integers stay exact, booleans are rejected.
Amount = Union[StrictInt, Annotated[StrictFloat, Field(allow_inf_nan=False)]]


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def is_negative(value: float | None) -> bool:
    return value is not None and value < 0


def is_too_large(value: float | None) -> bool:
    # Floats are stored as REAL; only integers must fit the INTEGER range.
    return isinstance(value, int) and value > MAX_SQLITE_INTEGER


def set_clause(fields: Mapping[str, Any], columns: Mapping[str, str]) -> tuple[str, list[Any]]:
    """
    Build `Col = ?, Col = ?` for an UPDATE from request field names.

    Only names present in `columns` are accepted; the mapping is the allowlist
    that keeps caller input out of the SQL text.
    """
    assignments: list[str] = []
    params: list[Any] = []
    for name, value in fields.items():
        column = columns.get(name)
        if column is None:
            raise KeyError(f"Unknown field: {name}")
        assignments.append(f"{column} = ?")
        params.append(value)
    return ", ".join(assignments), params
