#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbhtml/schema/types.py
"""Declarative description of a BBCode tag.

A ``TagSchema`` captures everything the parser and renderer need to know about
one tag kind: its content model, the attributes it accepts (each with a
validator), which attribute the ``[tag=value]`` shorthand binds to, and the
render template that turns validated attributes plus rendered children into
an HTML fragment.

Schemas are plain frozen values. They are collected into a ``TagRegistry`` once
at start-up and are never modified afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Mapping, Optional, Sequence

from bbhtml.exceptions import InvalidSchemaError

if TYPE_CHECKING:
    from bbhtml.options.html import HtmlRendererOptions

AttributeValidator = Callable[[str], Optional[str]]
"""Validate one raw attribute value; return the normalized value or None to reject it."""

RenderTemplate = Callable[[Mapping[str, str], str, "HtmlRendererOptions"], str]
"""Produce an HTML fragment from validated attributes and the rendered children."""


class ContentModel(Enum):
    """Structural constraint on an element's children.

    ``VOID`` elements have no children and ``VERBATIM`` elements hold exactly one
    unparsed ``Text``. ``INLINE`` and ``BLOCK`` place no limit on children, so
    ``[b][quote]x[/quote][/b]`` keeps the quote inside the bold element; they
    differ only in how the HTML renderer treats newlines next to the element.
    """

    INLINE = "inline"
    BLOCK = "block"
    VOID = "void"
    VERBATIM = "verbatim"


@dataclass(frozen=True)
class AttributeSpec:
    """Grammar for one attribute of a tag.

    Parameters
    ----------
    name : str
        Attribute name as written in markup (case-insensitive)
    validator : AttributeValidator
        Normalizes the raw value; returning None drops the attribute
    required : bool, default False
        Whether the attribute must be present in the markup. A tag missing a
        required attribute is kept as literal text.

    """

    name: str
    validator: AttributeValidator
    required: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", self.name.lower())


@dataclass(frozen=True)
class AttributeResult:
    """Outcome of validating the attributes written on an opening tag.

    Parameters
    ----------
    values : Mapping of str to str
        Accepted attributes, normalized
    missing : tuple of str
        Required attributes absent from the markup
    dropped : tuple of str
        Attributes that were unknown or failed validation

    """

    values: Mapping[str, str]
    missing: tuple[str, ...] = ()
    dropped: tuple[str, ...] = ()

    @property
    def complete(self) -> bool:
        """Whether every required attribute was present."""
        return not self.missing


@dataclass(frozen=True)
class TagSchema:
    """Grammar and rendering rule for one tag kind.

    Parameters
    ----------
    name : str
        Tag name, stored lowercase
    content_model : ContentModel
        Children constraint; VOID tags never get children, VERBATIM tags hold
        exactly one unparsed Text child
    template : RenderTemplate
        HTML fragment builder
    attributes : tuple of AttributeSpec
        Accepted attributes; anything else is dropped
    default_attribute : str or None
        Attribute that receives the ``[tag=value]`` shorthand
    content_attribute : str or None
        Attribute filled from the element's plain-text content when the
        markup does not supply it (``[url]http://...[/url]``)
    block : bool or None
        Whether the element is block-level for newline handling. Defaults to
        True for BLOCK and False otherwise; set it for block-level VERBATIM tags.
    closed_by_sibling : bool, default False
        Opening this tag implicitly closes an open element of the same tag,
        searching no further out than the nearest ``scope_tags`` element
        (list items)
    scope_tags : frozenset of str
        Tags that bound the ``closed_by_sibling`` search

    Raises
    ------
    InvalidSchemaError
        If the declaration is inconsistent

    """

    name: str
    content_model: ContentModel
    template: RenderTemplate
    attributes: tuple[AttributeSpec, ...] = ()
    default_attribute: Optional[str] = None
    content_attribute: Optional[str] = None
    block: Optional[bool] = None
    closed_by_sibling: bool = False
    scope_tags: frozenset[str] = frozenset()
    _attribute_index: Mapping[str, AttributeSpec] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", self.name.lower())
        if self.block is None:
            object.__setattr__(self, "block", self.content_model is ContentModel.BLOCK)

        index: dict[str, AttributeSpec] = {}
        for spec in self.attributes:
            if spec.name in index:
                raise InvalidSchemaError(f"Attribute '{spec.name}' declared twice", tag_name=self.name)
            index[spec.name] = spec
        object.__setattr__(self, "_attribute_index", MappingProxyType(index))

        for role, attribute in (("default", self.default_attribute), ("content", self.content_attribute)):
            if attribute is not None and attribute not in index:
                raise InvalidSchemaError(
                    f"{role} attribute '{attribute}' is not declared", tag_name=self.name
                )

        if self.content_attribute is not None:
            if self.content_model is ContentModel.VOID:
                raise InvalidSchemaError("Void tags cannot take an attribute from content", tag_name=self.name)
            if index[self.content_attribute].required:
                raise InvalidSchemaError(
                    f"Content attribute '{self.content_attribute}' cannot be required", tag_name=self.name
                )

    @property
    def is_void(self) -> bool:
        return self.content_model is ContentModel.VOID

    @property
    def is_verbatim(self) -> bool:
        return self.content_model is ContentModel.VERBATIM

    @property
    def is_block(self) -> bool:
        return bool(self.block)

    def attribute(self, name: str) -> Optional[AttributeSpec]:
        """Look up an attribute spec by name (case-insensitive)."""
        return self._attribute_index.get(name.lower())

    def validate_attributes(self, raw: Sequence[tuple[str, Optional[str]]]) -> AttributeResult:
        """Validate attributes as written on an opening tag.

        The shorthand pair (key equal to the tag name) is bound to the default
        attribute. The first occurrence of a key wins. Unknown attributes and
        values rejected by their validator are dropped.

        Parameters
        ----------
        raw : sequence of (key, value or None)
            Attributes in source order

        Returns
        -------
        AttributeResult
            Accepted values plus the names of missing and dropped attributes

        """
        values: dict[str, str] = {}
        seen: set[str] = set()
        dropped: list[str] = []

        for key, value in raw:
            key = key.lower()
            if key == self.name:
                if self.default_attribute is None:
                    dropped.append(key)
                    continue
                key = self.default_attribute

            spec = self._attribute_index.get(key)
            if spec is None:
                dropped.append(key)
                continue
            if key in seen:
                continue
            seen.add(key)

            validated = spec.validator(value if value is not None else "")
            if validated is None:
                dropped.append(key)
            else:
                values[key] = validated

        missing = tuple(spec.name for spec in self.attributes if spec.required and spec.name not in seen)
        return AttributeResult(MappingProxyType(values), missing, tuple(dropped))

    def validate_content_attribute(self, content: str) -> Optional[str]:
        """Validate plain-text content as this tag's content attribute."""
        if self.content_attribute is None:
            return None
        return self._attribute_index[self.content_attribute].validator(content)
