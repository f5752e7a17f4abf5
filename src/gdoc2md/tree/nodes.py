#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/tree/nodes.py
"""Document tree node classes.

The document tree is the intermediate representation every producer
(Google Docs JSON, HTML) builds and every output path (HTML serializer,
Markdown pipeline) consumes. It mirrors an HTML element tree but restricts
element kinds to a closed ``Tag`` vocabulary. Tags outside the vocabulary are
kept as ``Tag.UNKNOWN`` with their source spelling in ``Element.tag_name`` so
that they survive HTML serialization and can be skipped by Markdown
conversion.

Node Hierarchy
--------------
- Root: the document itself, holding top-level children and metadata
- Element: a tagged node with attributes and ordered children
- Text: an immutable leaf carrying a string value

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, Union


class Tag(str, Enum):
    """Closed vocabulary of element kinds understood by gdoc2md."""

    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    H6 = "h6"
    P = "p"
    UL = "ul"
    OL = "ol"
    LI = "li"
    TABLE = "table"
    THEAD = "thead"
    TBODY = "tbody"
    TFOOT = "tfoot"
    TR = "tr"
    TD = "td"
    TH = "th"
    EM = "em"
    STRONG = "strong"
    S = "s"
    U = "u"
    SUB = "sub"
    SUP = "sup"
    SPAN = "span"
    A = "a"
    CODE = "code"
    PRE = "pre"
    BLOCKQUOTE = "blockquote"
    BR = "br"
    HR = "hr"
    DIV = "div"
    UNKNOWN = "unknown"

    @classmethod
    def from_name(cls, name: str) -> Tag:
        """Resolve a source tag spelling to a vocabulary member.

        Parameters
        ----------
        name : str
            Tag name as written by the producer (case-insensitive)

        Returns
        -------
        Tag
            Matching member, the aliased member for ``i``/``b``/``del``/
            ``strike``, or ``Tag.UNKNOWN`` for anything else

        """
        key = name.strip().lower()
        if key in _TAG_ALIASES:
            return _TAG_ALIASES[key]
        if key == cls.UNKNOWN.value:
            return cls.UNKNOWN
        try:
            return cls(key)
        except ValueError:
            return cls.UNKNOWN


_TAG_ALIASES: dict[str, Tag] = {
    "i": Tag.EM,
    "b": Tag.STRONG,
    "del": Tag.S,
    "strike": Tag.S,
}

HEADING_TAGS: dict[Tag, int] = {
    Tag.H1: 1,
    Tag.H2: 2,
    Tag.H3: 3,
    Tag.H4: 4,
    Tag.H5: 5,
    Tag.H6: 6,
}

LIST_TAGS = frozenset({Tag.UL, Tag.OL})
TABLE_TAGS = frozenset({Tag.TABLE, Tag.THEAD, Tag.TBODY, Tag.TFOOT, Tag.TR, Tag.TD, Tag.TH})
CELL_TAGS = frozenset({Tag.TD, Tag.TH})

# Elements that start a new block when they appear in a flow of content
BLOCK_TAGS = frozenset(
    set(HEADING_TAGS) | LIST_TAGS | TABLE_TAGS | {Tag.P, Tag.LI, Tag.PRE, Tag.BLOCKQUOTE, Tag.HR, Tag.DIV}
)


def heading_level(tag: Tag) -> Optional[int]:
    """Return the heading level for a heading tag, or None."""
    return HEADING_TAGS.get(tag)


@dataclass(frozen=True)
class Text:
    """Text leaf.

    Parameters
    ----------
    value : str
        Literal text
    raw : bool, default False
        True when ``value`` already holds Markdown syntax (for example a
        transcoded table) and must not be escaped again

    """

    value: str
    raw: bool = False


@dataclass
class Element:
    """Tagged element node.

    Parameters
    ----------
    tag : Tag
        Element kind
    tag_name : str, default ""
        Source spelling of the tag; defaults to the vocabulary spelling.
        Required for ``Tag.UNKNOWN`` so the element can be serialized.
    attributes : dict of str to str, default = empty dict
        Attribute mapping, e.g. ``{"style": "font-weight: bold"}``
    children : list of Node, default = empty list
        Ordered child nodes

    """

    tag: Tag
    tag_name: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Fill in the tag spelling and reject nameless unknown tags."""
        if not self.tag_name:
            if self.tag is Tag.UNKNOWN:
                raise ValueError("Elements with Tag.UNKNOWN require a tag_name")
            self.tag_name = self.tag.value

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return an attribute value, or ``default`` when it is absent."""
        return self.attributes.get(name, default)


@dataclass
class Root:
    """Document root.

    Parameters
    ----------
    children : list of Node, default = empty list
        Top-level nodes
    metadata : dict, default = empty dict
        Document-level metadata such as ``title``

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


Node = Union[Element, Text]
Parent = Union[Root, Element]


def element(
    name: Union[str, Tag],
    *children: Union[Node, str],
    attributes: Optional[Mapping[str, str]] = None,
) -> Element:
    """Build an element from a tag name and children.

    Plain strings among ``children`` become ``Text`` nodes. This is the
    convenience constructor used by the producers and tests.

    Parameters
    ----------
    name : str or Tag
        Tag spelling (aliases such as ``b`` and ``del`` are resolved) or a
        ``Tag`` member
    *children : Node or str
        Child nodes in document order
    attributes : mapping, optional
        Attributes for the element

    Returns
    -------
    Element
        The new element

    Examples
    --------
    >>> element("p", "Hello ", element("strong", "world"))
    Element(tag=<Tag.P: 'p'>, tag_name='p', ...)

    """
    if isinstance(name, Tag):
        tag, tag_name = name, name.value
    else:
        tag, tag_name = Tag.from_name(name), name.strip().lower()
    nodes: list[Node] = [Text(child) if isinstance(child, str) else child for child in children]
    return Element(tag=tag, tag_name=tag_name, attributes=dict(attributes or {}), children=nodes)
