"""Flatten registered payload types into documented field listings.

Given the name of a registered dataclass, :func:`list_vars` walks its fields in
declaration order and recursively expands every field whose type is itself
registered, producing a pre-order list of :class:`~wsdoc.models.FieldDescriptor`
rows. Nesting is rendered by repeating ``INDENT_UNIT`` once per level and by
qualifying nested field names with the type they belong to
(``Address.street``).

Example
-------
>>> import dataclasses as dc
>>> from wsdoc.registry import TypeRegistry
>>> from wsdoc.structs import analyze_type
>>> registry = TypeRegistry()
>>> @registry.register
... @dc.dataclass
... class Foo:
...     name: str
>>> analyze_type("[]pkg.Foo", registry)
TypeInfo(is_slice=True, is_recursive=True, base_name='Foo')
"""

from __future__ import annotations

import re
import typing as typ

from markupsafe import Markup

from ._constants import INDENT_UNIT
from .models import FieldDescriptor

if typ.TYPE_CHECKING:
    from .glossary import Glossary
    from .registry import TypeRegistry

SLICE_PREFIX = "[]"
SLICE_PATTERNS = (
    re.compile(
        r"^(?:[\w.]+\.)?"
        r"(?:list|List|Sequence|MutableSequence|Iterable|set|Set|frozenset)"
        r"\[(?P<inner>.+)\]$"
    ),
    re.compile(r"^(?:[\w.]+\.)?(?:tuple|Tuple)\[(?P<inner>[^,\]]+),\s*\.\.\.\]$"),
)
OPTIONAL_PATTERN = re.compile(r"^(?:[\w.]+\.)?Optional\[(?P<inner>.+)\]$")


class TypeInfo(typ.NamedTuple):
    """Result of :func:`analyze_type`."""

    is_slice: bool
    is_recursive: bool
    base_name: str


def _strip_optional(text: str) -> str:
    """Remove an ``Optional[...]`` wrapper or a ``| None`` alternative."""
    text = text.strip()
    match = OPTIONAL_PATTERN.match(text)
    if match:
        return match["inner"].strip()
    if "|" in text:
        options = [part.strip() for part in text.split("|")]
        remaining = [part for part in options if part != "None"]
        if len(remaining) == 1:
            return remaining[0]
    return text


def analyze_type(declared: str, registry: TypeRegistry) -> TypeInfo:
    """Classify a declared field type.

    Parameters
    ----------
    declared : str
        Declared type text such as ``"[]pkg.Foo"``, ``"list[Foo]"`` or
        ``"str"``.
    registry : TypeRegistry
        Registry consulted to decide whether the base type can be expanded.

    Returns
    -------
    TypeInfo
        Whether the type is a slice, whether it names a registered type, and
        the unqualified base type name.
    """
    text = _strip_optional(declared)
    is_slice = False
    if text.startswith(SLICE_PREFIX):
        text = text[len(SLICE_PREFIX) :]
        is_slice = True
    else:
        for pattern in SLICE_PATTERNS:
            match = pattern.match(text)
            if match:
                text = match["inner"]
                is_slice = True
                break
    text = _strip_optional(text)
    base_name = text.rpartition(".")[2]
    return TypeInfo(is_slice, base_name in registry, base_name)


def _field_definition(glossary: Glossary, path: str, name: str) -> str:
    definition = glossary.define(path)
    if not definition and path != name:
        definition = glossary.define(name)
    return definition


def list_vars(
    type_name: str,
    registry: TypeRegistry,
    glossary: Glossary,
    *,
    prefix: str = "",
    depth: int = 1,
    expanding: frozenset[str] = frozenset(),
) -> list[FieldDescriptor]:
    """List the fields of ``type_name`` depth-first, expanding nested types.

    Parameters
    ----------
    type_name : str
        Name of a registered type.
    registry : TypeRegistry
        Registry used for the top-level type and every nested type.
    glossary : Glossary
        Read-only glossary providing field definitions.
    prefix : str, optional
        Dotted qualifier prepended to every field name.
    depth : int, optional
        Nesting level; controls how many indentation units are emitted.
    expanding : frozenset[str], optional
        Types already being expanded on the current path. A field of one of
        these types is listed but not expanded again.

    Returns
    -------
    list[FieldDescriptor]
        Each field followed immediately by its expanded children.

    Raises
    ------
    KeyError
        If ``type_name`` is not registered.
    """
    expanding = expanding | {type_name}
    indent = Markup(INDENT_UNIT * depth)
    descriptors: list[FieldDescriptor] = []
    for spec in registry.fields(type_name):
        path = f"{prefix}{spec.name}"
        info = analyze_type(spec.declared_type, registry)
        data_type = SLICE_PREFIX + info.base_name if info.is_slice else info.base_name
        descriptors.append(
            FieldDescriptor(
                field=indent + path,
                data_type=data_type,
                definition=_field_definition(glossary, path, spec.name),
                path=path,
                depth=depth,
            )
        )
        if info.is_recursive and info.base_name not in expanding:
            descriptors.extend(
                list_vars(
                    info.base_name,
                    registry,
                    glossary,
                    prefix=f"{prefix}{info.base_name}.",
                    depth=depth + 1,
                    expanding=expanding,
                )
            )
    return descriptors


def resolve_type_reference(
    text: str, registry: TypeRegistry, glossary: Glossary
) -> list[FieldDescriptor]:
    """Expand the first type named in ``text``.

    The first whitespace-separated token that names a registered type is
    expanded with :func:`list_vars`. A ``string`` token produces a single
    ``data`` field. Anything else yields an empty list.
    """
    for token in text.split():
        if token in registry:
            return list_vars(token, registry, glossary)
        if token.lower() == "string":
            return [
                FieldDescriptor(
                    field=Markup("data"), data_type="string", path="data", depth=0
                )
            ]
    return []


__all__ = [
    "TypeInfo",
    "analyze_type",
    "list_vars",
    "resolve_type_reference",
]
