"""Generate illustrative JSON payloads for ``@input`` and ``@response``.

The example for a registered type is built from zero values of each field,
expanding nested registered types into objects and slices into one-element
lists. Text that names no registered type is shown as written.

Example
-------
>>> import dataclasses as dc
>>> from wsdoc.examples import generate_example
>>> from wsdoc.registry import TypeRegistry
>>> registry = TypeRegistry()
>>> @registry.register
... @dc.dataclass
... class Ping:
...     count: int
>>> print(generate_example("Ping", registry))
{
    "count": 0
}
"""

from __future__ import annotations

import json
import typing as typ

from .structs import analyze_type

if typ.TYPE_CHECKING:
    from .registry import TypeRegistry

ZERO_VALUES: dict[str, typ.Any] = {
    "str": "",
    "string": "",
    "bytes": "",
    "int": 0,
    "int64": 0,
    "float": 0.0,
    "float64": 0.0,
    "Decimal": "0",
    "bool": False,
    "datetime": "1970-01-01T00:00:00Z",
    "Time": "1970-01-01T00:00:00Z",
    "date": "1970-01-01",
    "UUID": "00000000-0000-0000-0000-000000000000",
}


def example_value(
    type_name: str, registry: TypeRegistry, expanding: frozenset[str] = frozenset()
) -> dict[str, typ.Any]:
    """Return a zero-valued mapping for the registered type ``type_name``."""
    if type_name in expanding:
        return {}
    expanding = expanding | {type_name}
    payload: dict[str, typ.Any] = {}
    for spec in registry.fields(type_name):
        info = analyze_type(spec.declared_type, registry)
        if info.is_recursive:
            value: typ.Any = example_value(info.base_name, registry, expanding)
        else:
            value = ZERO_VALUES.get(info.base_name)
        payload[spec.name] = [value] if info.is_slice else value
    return payload


def generate_example(text: str, registry: TypeRegistry) -> str:
    """Return an example payload for the type referenced in ``text``."""
    for token in text.split():
        if token in registry:
            return json.dumps(example_value(token, registry), indent=4)
        if token.lower() == "string":
            return json.dumps("string")
    return text.strip()


__all__ = ["example_value", "generate_example"]
