"""Name-keyed registry of payload dataclasses.

Directive text refers to payload types by their bare class name
(``@response SearchResponse``). The registry resolves those names to
dataclasses and describes their fields in declaration order so the
introspector can flatten them without importing anything itself.

Example
-------
>>> import dataclasses as dc
>>> from wsdoc.registry import TypeRegistry
>>> registry = TypeRegistry()
>>> @registry.register
... @dc.dataclass
... class Point:
...     x: int
...     y: int
>>> [spec.name for spec in registry.fields("Point")]
['x', 'y']
"""

from __future__ import annotations

import dataclasses as dc
import importlib
import inspect
import logging
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from types import ModuleType

logger = logging.getLogger(__name__)

T = typ.TypeVar("T", bound=type)


@dc.dataclass(frozen=True, slots=True)
class FieldSpec:
    """A declared field: its name and the declared type as text."""

    name: str
    declared_type: str


def _type_text(annotation: object) -> str:
    """Return the textual form of a field annotation."""
    if isinstance(annotation, str):
        return annotation
    if isinstance(annotation, type):
        return annotation.__name__
    return str(annotation).removeprefix("typing.")


class TypeRegistry:
    """Map type names to dataclasses that can be expanded into field lists."""

    def __init__(self, types: cabc.Iterable[type] = ()) -> None:
        self._types: dict[str, type] = {}
        for cls in types:
            self.register(cls)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)

    def register(self, cls: T) -> T:
        """Register ``cls`` under its class name; usable as a decorator.

        Raises
        ------
        TypeError
            If ``cls`` is not a dataclass.
        """
        if not (inspect.isclass(cls) and dc.is_dataclass(cls)):
            msg = f"Only dataclasses can be registered, got {cls!r}."
            raise TypeError(msg)
        self._types[cls.__name__] = cls
        return cls

    def register_module(self, module: ModuleType) -> int:
        """Register every dataclass defined in ``module``; return how many."""
        count = 0
        for _name, member in inspect.getmembers(module, inspect.isclass):
            if member.__module__ != module.__name__ or not dc.is_dataclass(member):
                continue
            self.register(member)
            count += 1
        return count

    @classmethod
    def from_modules(cls, module_names: cabc.Iterable[str]) -> TypeRegistry:
        """Build a registry from dotted module names.

        Modules that fail to import are logged and skipped.
        """
        registry = cls()
        for name in module_names:
            try:
                module = importlib.import_module(name)
            except ImportError as exc:
                logger.error("Error importing type module %s: %s", name, exc)
                continue
            count = registry.register_module(module)
            logger.info("registered %d types from %s", count, name)
        return registry

    def names(self) -> list[str]:
        """Return the registered type names in sorted order."""
        return sorted(self._types)

    def fields(self, name: str) -> list[FieldSpec]:
        """Return the declared fields of the type registered as ``name``.

        Raises
        ------
        KeyError
            If no type is registered under ``name``.
        """
        cls = self._types[name]
        return [
            FieldSpec(name=field.name, declared_type=_type_text(field.type))
            for field in dc.fields(cls)
        ]


__all__ = ["FieldSpec", "TypeRegistry"]
