#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbhtml/schema/__init__.py
"""Tag schemas: the declarative grammar and rendering rules for BBCode tags.

- types: ``TagSchema``, ``AttributeSpec``, ``ContentModel``
- registry: ``SchemaRegistryBuilder`` and the frozen ``TagRegistry``
- validators: attribute validators referenced from declarations
- builtin: the built-in tag table, ``BUILTIN_TAGS``

"""

from bbhtml.schema.builtin import BUILTIN_TAGS
from bbhtml.schema.registry import (
    SchemaRegistryBuilder,
    TagRegistry,
    build_default_registry,
    initialize_schema_registry,
)
from bbhtml.schema.types import (
    AttributeResult,
    AttributeSpec,
    AttributeValidator,
    ContentModel,
    RenderTemplate,
    TagSchema,
)

__all__ = [
    "BUILTIN_TAGS",
    "SchemaRegistryBuilder",
    "TagRegistry",
    "build_default_registry",
    "initialize_schema_registry",
    "AttributeResult",
    "AttributeSpec",
    "AttributeValidator",
    "ContentModel",
    "RenderTemplate",
    "TagSchema",
]
