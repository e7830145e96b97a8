"""Checks on the JSON input of a simulation."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class InputError(Exception):
    """The input data cannot be used to start a simulation."""


class FieldType(Enum):
    """Kinds of value an input field may be required to hold."""

    STRING = "string"
    INT = "integer"
    FLOAT = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    MATRIX = "matrix"


@dataclass(frozen=True)
class FieldRequirement:
    """A mandatory input field and the kind of value it must hold."""

    name: str
    type: FieldType


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _size(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, (list, dict)):
        return len(value)
    return 1


def type_name(value: Any) -> str:
    """Name of the JSON type of a decoded value."""
    if isinstance(value, str):
        return "string"
    if isinstance(value, bool):
        return "boolean"
    if _is_integer(value):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    if value is None:
        return "null"
    return "unknown"


def expected_type_name(field_type: FieldType) -> str:
    """Name under which a required kind of value is reported."""
    return field_type.value


def is_type_valid(value: Any, field_type: FieldType) -> bool:
    """Whether ``value`` is of the kind ``field_type`` asks for."""
    if field_type is FieldType.STRING:
        return isinstance(value, str)
    if field_type is FieldType.INT:
        return _is_integer(value)
    if field_type is FieldType.FLOAT:
        return _is_number(value)
    if field_type is FieldType.BOOLEAN:
        return isinstance(value, bool)
    if field_type is FieldType.ARRAY:
        return isinstance(value, list) and len(value) > 0
    if field_type is FieldType.MATRIX:
        return isinstance(value, list) and len(value) > 0 and isinstance(value[0], list)
    return False


def _check_numbers(items: Iterable[Any], kind: str, name: str) -> None:
    for item in items:
        if not _is_number(item):
            raise InputError(
                f"Wrong type '{type_name(item)}' for elements of {kind} '{name}', expected 'number'!"
            )


def _check_array(name: str, value: list, dim: int) -> None:
    if len(value) != dim:
        quote = "" if name == "psi" else "'"
        raise InputError(f"Wrong size '{len(value)}' for array '{name}{quote}, expected '{dim}'!")
    _check_numbers(value, "array", name)


def _check_matrix(name: str, value: list, dim: int) -> None:
    if len(value) != dim:
        raise InputError(f"Wrong number of rows '{len(value)}' for matrix '{name}', expected '{dim}'!")
    for row in value:
        if not isinstance(row, list) or len(row) != dim:
            raise InputError(
                f"Wrong number of columns '{_size(row)}' for matrix '{name}', expected '{dim}'!"
            )
        _check_numbers(row, "matrix", name)


def validate_fields(params: Mapping[str, Any], fields: Iterable[FieldRequirement]) -> None:
    """Check that every required field is present with the right type and size.

    ``Dstates`` and ``qbmode`` are assumed to have passed :func:`check_header`.
    Raises :class:`InputError` on the first problem found.
    """
    dim = params["Dstates"]
    if dim <= 0:
        raise InputError("Invalid dimension 'Dstates': must be positive!")
    qbmode = params.get("qbmode")
    if qbmode == "on":
        raise InputError("Only supported value for 'qbmode' is 'off'!")

    for field in fields:
        if field.name not in params:
            raise InputError(
                f"Missing mandatory input data '{field.name}' of type '{expected_type_name(field.type)}'!"
            )
        value = params[field.name]
        if not is_type_valid(value, field.type):
            raise InputError(
                f"Wrong type '{type_name(value)}' for input data '{field.name}', "
                f"expected '{expected_type_name(field.type)}'!"
            )
        if field.type is FieldType.ARRAY and (field.name == "psi" or qbmode == "off"):
            _check_array(field.name, value, dim)
        if field.type is FieldType.MATRIX:
            _check_matrix(field.name, value, dim)


def check_header(params: Any) -> tuple[str, str, int]:
    """Check the fields that select the simulation; return ``(qbmode, envelope, Dstates)``."""
    has = isinstance(params, Mapping)

    if not has or "qbmode" not in params:
        raise InputError("Missing mandatory input data 'qbmode' of type 'string'!")
    qbmode = params["qbmode"]
    if not isinstance(qbmode, str):
        raise InputError(f"Wrong type '{type_name(qbmode)}' for input data 'qbmode', expected 'string'!")
    if qbmode == "on":
        raise InputError(f"The specified qbmode {json.dumps(qbmode)} is not supported")

    if "envelope" not in params:
        raise InputError("Missing mandatory input data 'envelope' of type 'string'!")
    envelope = params["envelope"]
    if not isinstance(envelope, str):
        raise InputError(
            f"Wrong type '{type_name(envelope)}' for input data 'envelope', expected 'string'!"
        )

    if "Dstates" not in params:
        raise InputError("Missing mandatory input data 'Dstates' of type 'string'!")
    dimension = params["Dstates"]
    if not _is_integer(dimension):
        raise InputError(
            f"Wrong type '{type_name(dimension)}' for input data 'envelope', expected 'integer'!"
        )

    return qbmode, envelope, dimension