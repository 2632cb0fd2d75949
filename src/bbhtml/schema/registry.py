#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbhtml/schema/registry.py
"""Tag schema registry.

Registration happens once, through ``SchemaRegistryBuilder``; ``build()``
returns a ``TagRegistry`` that only supports lookups. Because the registry
cannot change after it is built, a single instance can be shared by any
number of concurrent parse and render calls without locking.

Examples
--------
    >>> from bbhtml.schema import BUILTIN_TAGS, SchemaRegistryBuilder
    >>> registry = SchemaRegistryBuilder().register_all(BUILTIN_TAGS).build()
    >>> registry.lookup("B").name
    'b'

"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional

from bbhtml.exceptions import DuplicateTagError, SchemaError
from bbhtml.schema.types import TagSchema

logger = logging.getLogger(__name__)


class TagRegistry:
    """Frozen mapping of tag name to ``TagSchema``.

    Instances are created by ``SchemaRegistryBuilder.build()`` and expose no
    mutating operations.

    """

    __slots__ = ("_tags",)

    def __init__(self, tags: Mapping[str, TagSchema]):
        self._tags: Mapping[str, TagSchema] = MappingProxyType(dict(tags))

    def lookup(self, name: str) -> Optional[TagSchema]:
        """Return the schema for ``name`` (case-insensitive), or None if unknown."""
        return self._tags.get(name.lower())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._tags

    def __iter__(self) -> Iterator[TagSchema]:
        return iter(self._tags.values())

    def __len__(self) -> int:
        return len(self._tags)

    @property
    def names(self) -> tuple[str, ...]:
        """Registered tag names in registration order."""
        return tuple(self._tags)

    def __repr__(self) -> str:
        return f"TagRegistry({len(self._tags)} tags)"


class SchemaRegistryBuilder:
    """Collects tag declarations during initialization.

    Raises
    ------
    DuplicateTagError
        From ``register`` when a tag name is declared twice
    SchemaError
        From ``register`` once ``build`` has been called

    """

    def __init__(self) -> None:
        self._tags: dict[str, TagSchema] = {}
        self._built = False

    def register(self, schema: TagSchema) -> SchemaRegistryBuilder:
        """Add one declaration.

        Parameters
        ----------
        schema : TagSchema
            Declaration to add

        Returns
        -------
        SchemaRegistryBuilder
            This builder, for chaining

        """
        if self._built:
            raise SchemaError("Registry has already been built", tag_name=schema.name)
        if schema.name in self._tags:
            raise DuplicateTagError(schema.name)
        self._tags[schema.name] = schema
        logger.debug("Registered tag schema: %s (%s)", schema.name, schema.content_model.value)
        return self

    def register_all(self, schemas: Iterable[TagSchema]) -> SchemaRegistryBuilder:
        """Add several declarations in order."""
        for schema in schemas:
            self.register(schema)
        return self

    def build(self) -> TagRegistry:
        """Freeze the collected declarations into a ``TagRegistry``."""
        self._built = True
        return TagRegistry(self._tags)


def initialize_schema_registry(declarations: Optional[Iterable[TagSchema]] = None) -> TagRegistry:
    """Build a frozen registry from tag declarations.

    Parameters
    ----------
    declarations : iterable of TagSchema, optional
        Declarations to register. Defaults to the built-in tag table.

    Returns
    -------
    TagRegistry
        Frozen registry

    Raises
    ------
    DuplicateTagError
        If two declarations share a name (case-insensitive)

    """
    if declarations is None:
        from bbhtml.schema.builtin import BUILTIN_TAGS

        declarations = BUILTIN_TAGS
    registry = SchemaRegistryBuilder().register_all(declarations).build()
    logger.debug("Initialized schema registry with %d tags", len(registry))
    return registry


def build_default_registry() -> TagRegistry:
    """Build a registry holding the built-in tag table."""
    return initialize_schema_registry()
