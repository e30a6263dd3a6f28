"""HTML renderer for the Markdown syntax tree."""

from __future__ import annotations

from plumlabs.nodes import Node, NodeType

_ESCAPES = str.maketrans(
    {"<": "&lt;", ">": "&gt;", "&": "&amp;", "'": "&#39;", '"': "&#34;"}
)

_ENCLOSING_TAGS: dict[NodeType, tuple[str, str]] = {
    NodeType.DOCUMENT: ("", ""),
    NodeType.HEADER: ('<h1 class="text-4xl font-bold mb-4">', "</h1>"),
    NodeType.BOLD: ("<b>", "</b>"),
    NodeType.ITALIC: ("<i>", "</i>"),
    NodeType.STRIKETHROUGH: ("<del>", "</del>"),
    NodeType.LIST_BLOCK: ('<ul class="list-disc pl-6 space-y-1">', "</ul>"),
    NodeType.LIST_ITEM: ('<li class="text-base">', "</li>"),
    NodeType.BLOCK_QUOTE: ("<blockquote>", "</blockquote>"),
}

_SEPARATOR = " -> "


def _escape(text: str) -> str:
    return text.translate(_ESCAPES)


def _render_image(value: str) -> str:
    parts = value.split(_SEPARATOR)
    if len(parts) != 2:
        return '<img src="" alt="Invalid image format">'
    alt, src = (_escape(part) for part in parts)
    return f'<img src="{src}" alt="{alt}" class="max-w-full h-auto rounded-lg my-4">'


def _render_link(value: str) -> str:
    parts = value.split(_SEPARATOR)
    if len(parts) != 2:
        return '<a href="">Invalid link format</a>'
    text, href = (_escape(part) for part in parts)
    return f'<a href="{href}" class="text-blue-600 hover:underline">{text}</a>'


class Renderer:
    """Renders a syntax tree to an HTML fragment."""

    def __init__(self, root: Node | None) -> None:
        self.root = root

    def render(self, node: Node | None) -> str:
        """Return the HTML for node and its descendants."""
        if node is None:
            return ""
        kind = node.type
        if kind in _ENCLOSING_TAGS:
            opening, closing = _ENCLOSING_TAGS[kind]
            return opening + self._render_children(node) + closing
        if kind is NodeType.TEXT:
            return _escape(node.value)
        if kind is NodeType.CODE_BLOCK:
            return f"<pre><code>{_escape(node.value)}</code></pre>"
        if kind is NodeType.IMAGE:
            return _render_image(node.value)
        if kind is NodeType.AUTO_LINK:
            return _render_link(node.value)
        if kind is NodeType.NEXT_LINE:
            return "<br>"
        if node.children:
            return self._render_children(node)
        if node.value:
            return f"<p>{_escape(node.value)}</p>"
        return ""

    def _render_children(self, node: Node) -> str:
        return "".join(self.render(child) for child in node.children)