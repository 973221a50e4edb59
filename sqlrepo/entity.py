"""
sqlrepo Entity Shapes - Static metadata for entity classes.

An EntityShape describes a record type: its simple name, its fields in
declaration order (name, type, nullability) and a zero-argument factory
producing a default-valued instance. Shapes are built once per class and
kept in a process-wide registry, so queries never re-inspect types.

Usage:
    @dataclass
    class Person:
        Id: int
        Name: str
        Email: Optional[str] = None

    shape = entity_shape(Person)
    [f.name for f in shape.fields]      # ["Id", "Name", "Email"]
    shape.new_instance()                # Person(Id=0, Name="", Email=None)

    # Explicit registration with a custom factory
    register_entity(Person, factory=lambda: Person(Id=-1, Name=""))
"""

import dataclasses
import logging
import types
import typing
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, ClassVar, Dict, List, Optional, Tuple, Union

logger = logging.getLogger(__name__)

# Type -> zero value constructor for required fields of default factories
ZERO_VALUES: Dict[Any, Callable[[], Any]] = {
    int: int,
    float: float,
    bool: bool,
    str: str,
    bytes: bytes,
    Decimal: Decimal,
}

_UNION_TYPES = (Union, types.UnionType)


@dataclass(frozen=True)
class FieldShape:
    """One mapped field of an entity."""

    name: str
    type: Any
    nullable: bool


@dataclass(frozen=True)
class EntityShape:
    """Immutable metadata for one entity class."""

    entity_class: type
    name: str
    fields: Tuple[FieldShape, ...]
    factory: Callable[[], Any]

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    def get_field(self, name: str) -> Optional[FieldShape]:
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def new_instance(self) -> Any:
        """Create a zero-valued instance of the entity."""
        return self.factory()


_REGISTRY: Dict[type, EntityShape] = {}


def is_nullable(annotation: Any) -> bool:
    """
    Whether a field with this annotation may hold SQL NULL.

    Optional types, ``str`` (textual) and ``Any`` accept NULL; everything
    else does not.
    """
    if annotation is Any or annotation is str or annotation is type(None):
        return True
    if typing.get_origin(annotation) in _UNION_TYPES:
        return type(None) in typing.get_args(annotation)
    return False


def zero_value(annotation: Any) -> Any:
    """Return the default value for a type (``None`` for unknown types)."""
    make = ZERO_VALUES.get(annotation)
    return make() if make is not None else None


def _dataclass_factory(cls: type, hints: Dict[str, Any]) -> Callable[[], Any]:
    required = [
        f.name
        for f in dataclasses.fields(cls)
        if f.init
        and f.default is dataclasses.MISSING
        and f.default_factory is dataclasses.MISSING
    ]

    def factory() -> Any:
        return cls(**{name: zero_value(hints.get(name, Any)) for name in required})

    return factory


def _plain_factory(cls: type, hints: Dict[str, Any], names: List[str]) -> Callable[[], Any]:
    def factory() -> Any:
        instance = cls()
        for name in names:
            if not hasattr(instance, name):
                setattr(instance, name, zero_value(hints[name]))
        return instance

    return factory


def _build_shape(cls: type, factory: Optional[Callable[[], Any]] = None) -> EntityShape:
    if not isinstance(cls, type):
        raise TypeError(f"Entity must be a class, got {cls!r}")

    hints = typing.get_type_hints(cls)

    if dataclasses.is_dataclass(cls):
        if cls.__dataclass_params__.frozen:
            raise TypeError(f"Entity {cls.__name__} is a frozen dataclass; fields cannot be assigned")
        names = [f.name for f in dataclasses.fields(cls)]
        default_factory = _dataclass_factory(cls, hints)
    else:
        names = [
            name for name, hint in hints.items()
            if typing.get_origin(hint) is not ClassVar and hint is not ClassVar
        ]
        default_factory = _plain_factory(cls, hints, names)

    if not names:
        raise TypeError(f"Entity {cls.__name__} declares no fields")

    fields = tuple(
        FieldShape(name=name, type=hints.get(name, Any), nullable=is_nullable(hints.get(name, Any)))
        for name in names
    )
    return EntityShape(
        entity_class=cls,
        name=cls.__name__,
        fields=fields,
        factory=factory or default_factory,
    )


def register_entity(cls: type, factory: Optional[Callable[[], Any]] = None) -> EntityShape:
    """Build and register the shape of ``cls``, replacing any previous one."""
    shape = _build_shape(cls, factory)
    _REGISTRY[cls] = shape
    logger.debug(f"Registered entity {shape.name} with fields {list(shape.field_names)}")
    return shape


def entity(cls: Optional[type] = None, *, factory: Optional[Callable[[], Any]] = None):
    """
    Class decorator registering an entity at import time.

    Example:
        @entity
        @dataclass
        class Person: ...

        @entity(factory=make_empty_order)
        @dataclass
        class Order: ...
    """
    def decorator(klass: type) -> type:
        register_entity(klass, factory=factory)
        return klass

    if cls is None:
        return decorator
    return decorator(cls)


def entity_shape(cls: type) -> EntityShape:
    """Return the registered shape of ``cls``, building it on first use."""
    shape = _REGISTRY.get(cls)
    if shape is None:
        shape = register_entity(cls)
    return shape


def clear_registry() -> None:
    """Forget all registered shapes."""
    _REGISTRY.clear()
