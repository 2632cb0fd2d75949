#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbhtml/schema/builtin.py
"""Built-in BBCode tag table.

The table below is the complete declaration of the tags understood out of the
box. Each entry pairs a grammar (content model and attributes) with a render
template. Templates escape every attribute value they emit; children arrive
already rendered and escaped.

To support additional tags, build a registry from ``BUILTIN_TAGS`` plus your
own ``TagSchema`` entries:

    >>> from bbhtml.schema import BUILTIN_TAGS, ContentModel, TagSchema, initialize_schema_registry
    >>> from bbhtml.schema.builtin import simple_template
    >>> mark = TagSchema("mark", ContentModel.INLINE, simple_template("mark"))
    >>> registry = initialize_schema_registry([*BUILTIN_TAGS, mark])

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping

from bbhtml.constants import (
    FONT_SIZE_MAX_PX,
    FONT_SIZE_MIN_PX,
    IMAGE_DIMENSION_MAX_PX,
    IMAGE_DIMENSION_MIN_PX,
    LIST_ITEM_TAG,
    ORDERED_LIST_TYPES,
    TABLE_CELL_WIDTH_MAX_PX,
    TABLE_CELL_WIDTH_MIN_PX,
    TEXT_ALIGNMENTS,
)
from bbhtml.schema import validators
from bbhtml.schema.types import AttributeSpec, ContentModel, RenderTemplate, TagSchema
from bbhtml.utils.escape import escape_html

if TYPE_CHECKING:
    from bbhtml.options.html import HtmlRendererOptions

YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v={}"


def _attr(name: str, value: str | None) -> str:
    return f' {name}="{escape_html(value)}"' if value else ""


def _style(*declarations: tuple[str, str | None]) -> str:
    style = "; ".join(f"{prop}: {value}" for prop, value in declarations if value)
    return _attr("style", style)


def simple_template(html_tag: str) -> RenderTemplate:
    """Build a template that wraps the children in ``<html_tag>``."""

    def render(attributes: Mapping[str, str], content: str, options: HtmlRendererOptions) -> str:
        return f"<{html_tag}>{content}</{html_tag}>"

    return render


def void_template(html_tag: str) -> RenderTemplate:
    """Build a template for an element without children."""

    def render(attributes: Mapping[str, str], content: str, options: HtmlRendererOptions) -> str:
        return f"<{html_tag}>"

    return render


def styled_span_template(css_property: str, attribute: str, unit: str = "") -> RenderTemplate:
    """Build a template that sets one CSS property on a ``<span>`` from an attribute."""

    def render(attributes: Mapping[str, str], content: str, options: HtmlRendererOptions) -> str:
        value = attributes.get(attribute)
        return f"<span{_style((css_property, f'{value}{unit}' if value else None))}>{content}</span>"

    return render


def alignment_template(alignment: str) -> RenderTemplate:
    def render(attributes: Mapping[str, str], content: str, options: HtmlRendererOptions) -> str:
        return f"<div{_style(('text-align', alignment))}>{content}</div>"

    return render


def _render_link(href: str | None, content: str, options: HtmlRendererOptions) -> str:
    return f"<a{_attr('href', href)}{_attr('rel', options.link_rel)}>{content}</a>"


def render_url(attributes: Mapping[str, str], content: str, options: HtmlRendererOptions) -> str:
    return _render_link(attributes.get("href"), content, options)


def render_email(attributes: Mapping[str, str], content: str, options: HtmlRendererOptions) -> str:
    return f"<a{_attr('href', attributes.get('address'))}>{content}</a>"


def render_noparse(attributes: Mapping[str, str], content: str, options: HtmlRendererOptions) -> str:
    return content


def render_image(attributes: Mapping[str, str], content: str, options: HtmlRendererOptions) -> str:
    width = height = None
    if "dimensions" in attributes:
        width, height = attributes["dimensions"].split("x")
    width = attributes.get("width", width)
    height = attributes.get("height", height)
    alt = attributes.get("alt", "")
    return (
        f"<img{_attr('src', attributes.get('src'))} alt=\"{escape_html(alt)}\""
        f"{_attr('width', width)}{_attr('height', height)}>"
    )


def render_quote(attributes: Mapping[str, str], content: str, options: HtmlRendererOptions) -> str:
    author = attributes.get("author")
    cite = f"<cite>{escape_html(author)} wrote:</cite>" if author else ""
    return f"<blockquote>{cite}{content}</blockquote>"


def render_code(attributes: Mapping[str, str], content: str, options: HtmlRendererOptions) -> str:
    language = attributes.get("lang")
    return f"<pre><code{_attr('class', f'language-{language}' if language else None)}>{content}</code></pre>"


def render_list(attributes: Mapping[str, str], content: str, options: HtmlRendererOptions) -> str:
    list_type = attributes.get("type")
    if list_type is None:
        return f"<ul>{content}</ul>"
    type_attr = _attr("type", list_type) if list_type != "1" else ""
    return f"<ol{type_attr}>{content}</ol>"


def table_cell_template(html_tag: str) -> RenderTemplate:
    def render(attributes: Mapping[str, str], content: str, options: HtmlRendererOptions) -> str:
        width = attributes.get("width")
        return f"<{html_tag}{_style(('width', f'{width}px' if width else None))}>{content}</{html_tag}>"

    return render


def render_spoiler(attributes: Mapping[str, str], content: str, options: HtmlRendererOptions) -> str:
    title = escape_html(attributes.get("title", "Spoiler"))
    return f'<details class="spoiler"><summary>{title}</summary>{content}</details>'


def render_youtube(attributes: Mapping[str, str], content: str, options: HtmlRendererOptions) -> str:
    video = attributes.get("video")
    return _render_link(YOUTUBE_WATCH_URL.format(video) if video else None, content, options)


BUILTIN_TAGS: tuple[TagSchema, ...] = (
    # Inline formatting
    TagSchema("b", ContentModel.INLINE, simple_template("strong")),
    TagSchema("i", ContentModel.INLINE, simple_template("em")),
    TagSchema("u", ContentModel.INLINE, simple_template("u")),
    TagSchema("s", ContentModel.INLINE, simple_template("s")),
    TagSchema("sup", ContentModel.INLINE, simple_template("sup")),
    TagSchema("sub", ContentModel.INLINE, simple_template("sub")),
    # Links
    TagSchema(
        "url",
        ContentModel.INLINE,
        render_url,
        attributes=(AttributeSpec("href", validators.link_url),),
        default_attribute="href",
        content_attribute="href",
    ),
    TagSchema(
        "email",
        ContentModel.INLINE,
        render_email,
        attributes=(AttributeSpec("address", validators.email_address),),
        default_attribute="address",
        content_attribute="address",
    ),
    # Styling
    TagSchema(
        "color",
        ContentModel.INLINE,
        styled_span_template("color", "color"),
        attributes=(AttributeSpec("color", validators.color, required=True),),
        default_attribute="color",
    ),
    TagSchema(
        "size",
        ContentModel.INLINE,
        styled_span_template("font-size", "size", unit="px"),
        attributes=(
            AttributeSpec("size", validators.bounded_int(FONT_SIZE_MIN_PX, FONT_SIZE_MAX_PX), required=True),
        ),
        default_attribute="size",
    ),
    TagSchema(
        "font",
        ContentModel.INLINE,
        styled_span_template("font-family", "family"),
        attributes=(AttributeSpec("family", validators.font_family, required=True),),
        default_attribute="family",
    ),
    # Inline verbatim and media
    TagSchema("noparse", ContentModel.VERBATIM, render_noparse),
    TagSchema(
        "img",
        ContentModel.VERBATIM,
        render_image,
        attributes=(
            AttributeSpec("src", validators.image_url),
            AttributeSpec("dimensions", validators.dimensions),
            AttributeSpec("width", validators.bounded_int(IMAGE_DIMENSION_MIN_PX, IMAGE_DIMENSION_MAX_PX)),
            AttributeSpec("height", validators.bounded_int(IMAGE_DIMENSION_MIN_PX, IMAGE_DIMENSION_MAX_PX)),
            AttributeSpec("alt", validators.plain_text()),
        ),
        default_attribute="dimensions",
        content_attribute="src",
    ),
    # Void
    TagSchema("br", ContentModel.VOID, void_template("br")),
    TagSchema("hr", ContentModel.VOID, void_template("hr"), block=True),
    # Blocks
    TagSchema(
        "quote",
        ContentModel.BLOCK,
        render_quote,
        attributes=(AttributeSpec("author", validators.plain_text()),),
        default_attribute="author",
    ),
    TagSchema(
        "code",
        ContentModel.VERBATIM,
        render_code,
        attributes=(AttributeSpec("lang", validators.code_language),),
        default_attribute="lang",
        block=True,
    ),
    TagSchema(
        "list",
        ContentModel.BLOCK,
        render_list,
        attributes=(AttributeSpec("type", validators.choice(ORDERED_LIST_TYPES, case_sensitive=True)),),
        default_attribute="type",
    ),
    TagSchema(
        LIST_ITEM_TAG,
        ContentModel.BLOCK,
        simple_template("li"),
        closed_by_sibling=True,
        scope_tags=frozenset({"list"}),
    ),
    TagSchema("table", ContentModel.BLOCK, simple_template("table")),
    TagSchema("tr", ContentModel.BLOCK, simple_template("tr")),
    TagSchema(
        "td",
        ContentModel.BLOCK,
        table_cell_template("td"),
        attributes=(
            AttributeSpec("width", validators.bounded_int(TABLE_CELL_WIDTH_MIN_PX, TABLE_CELL_WIDTH_MAX_PX)),
        ),
        default_attribute="width",
    ),
    TagSchema(
        "th",
        ContentModel.BLOCK,
        table_cell_template("th"),
        attributes=(
            AttributeSpec("width", validators.bounded_int(TABLE_CELL_WIDTH_MIN_PX, TABLE_CELL_WIDTH_MAX_PX)),
        ),
        default_attribute="width",
    ),
    *(TagSchema(alignment, ContentModel.BLOCK, alignment_template(alignment)) for alignment in TEXT_ALIGNMENTS),
    TagSchema(
        "spoiler",
        ContentModel.BLOCK,
        render_spoiler,
        attributes=(AttributeSpec("title", validators.plain_text(128)),),
        default_attribute="title",
    ),
    *(TagSchema(f"h{level}", ContentModel.BLOCK, simple_template(f"h{level}")) for level in range(1, 7)),
    TagSchema(
        "youtube",
        ContentModel.VERBATIM,
        render_youtube,
        attributes=(AttributeSpec("video", validators.youtube_video),),
        content_attribute="video",
        block=True,
    ),
)
