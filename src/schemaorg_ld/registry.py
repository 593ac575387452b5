# global Registry of schema.org entity types

from typing import Type, TypeVar

from schemaorg_ld.common.types import unqualified_name
from schemaorg_ld.model.base import SchemaEntity

E = TypeVar("E", bound=Type[SchemaEntity])


class UnknownSchemaTypeError(KeyError):
    """Raised when no entity type is registered under a schema.org name."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else super().__str__()


class Registry:
    """
    Holds entity types by their unqualified schema.org name
    """

    _registry: dict[str, Type[SchemaEntity]] = {}

    @classmethod
    def register(cls, t: E) -> E:
        name = t.schema_type or unqualified_name(t.__qualname__)
        cls._registry[name] = t
        return t

    @classmethod
    def get(cls, name: str) -> Type[SchemaEntity]:
        try:
            return cls._registry[unqualified_name(name)]
        except KeyError:
            raise UnknownSchemaTypeError(f"Unknown schema.org type: {name}") from None

    @classmethod
    def contains(cls, name: str) -> bool:
        return unqualified_name(name) in cls._registry

    @classmethod
    def entries(cls) -> list[tuple[str, Type[SchemaEntity]]]:
        """Registered (name, type) pairs, sorted by name."""
        return sorted(cls._registry.items(), key=lambda item: item[0])

    @classmethod
    def list(cls) -> list[Type[SchemaEntity]]:
        """List all registered types, sorted by name."""
        return [cls._registry[name] for name in sorted(cls._registry)]
