"""Unique-name registries."""

from __future__ import annotations

from typing import Generic, Iterator, Protocol, TypeVar

from cheese_wizard.domain.errors import DuplicateNameError, NameNotFoundError
from cheese_wizard.domain.models import Cheese


class Named(Protocol):
    name: str


E = TypeVar("E", bound=Named)


class NamedEntityRegistry(Generic[E]):
    """Collection of entities keyed by their ``name`` attribute.

    Names are unique: inserting a second entity under an existing name is
    rejected and leaves the registry unchanged. There is no delete or
    rename.

    Attributes:
        label: Entity kind used in error codes and messages.
    """

    label = "entity"

    def __init__(self) -> None:
        self._entities: dict[str, E] = {}

    def __repr__(self) -> str:  # pragma: no cover - representation only
        return f"{type(self).__name__}(size={len(self._entities)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NamedEntityRegistry):
            return NotImplemented
        return self._entities == other._entities

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, name: object) -> bool:
        return name in self._entities

    def __iter__(self) -> Iterator[E]:
        return iter(self.all())

    def insert(self, entity: E) -> None:
        """Store ``entity`` under its name.

        Raises:
            DuplicateNameError: If the name is already registered.
        """
        if entity.name in self._entities:
            raise DuplicateNameError.for_name(entity.name, self.label)
        self._entities[entity.name] = entity

    def get_mut(self, name: str) -> E:
        """Return the stored entity so the current operation can modify it.

        The reference must not outlive the operation that asked for it.

        Raises:
            NameNotFoundError: If no entity is registered under ``name``.
        """
        try:
            return self._entities[name]
        except KeyError:
            raise NameNotFoundError.for_name(name, self.label) from None

    get = get_mut

    def all(self) -> list[E]:
        """Snapshot of every entity, sorted by name."""
        return [self._entities[name] for name in sorted(self._entities)]


class CheeseRegistry(NamedEntityRegistry[Cheese]):
    """Registry of cheeses keyed by cheese name."""

    label = "cheese"
