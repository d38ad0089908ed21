"""
Minimal page-region model for the NewsAlert widget.

The host owns the page and hands the widget a root :class:`Element`. The
widget writes markup into elements, looks up its output container by id,
and sets CSS custom properties on the root's inline style.
"""

from __future__ import annotations

from markupsafe import escape


class StyleDeclaration:
    """Inline style of an element, keyed by property name."""

    def __init__(self) -> None:
        self._properties: dict[str, str] = {}

    def set_property(self, name: str, value: str | None) -> None:
        """Set *name* to *value*; ``None`` or ``""`` removes the property."""
        if value:
            self._properties[name] = value
        else:
            self._properties.pop(name, None)

    def get_property(self, name: str) -> str | None:
        return self._properties.get(name)

    def as_dict(self) -> dict[str, str]:
        return dict(self._properties)

    @property
    def css_text(self) -> str:
        return "; ".join(f"{name}: {value}" for name, value in self._properties.items())


class Element:
    """A page element with inner markup, inline style, and addressable children.

    Args:
        element_id: Value of the ``id`` attribute.
        tag: Tag name used when serialising the element.
    """

    def __init__(self, element_id: str, tag: str = "div") -> None:
        self.element_id = element_id
        self.tag = tag
        self.inner_html = ""
        self.style = StyleDeclaration()
        self._children: dict[str, Element] = {}

    # ── tree ──

    def append_child(self, child: Element) -> Element:
        self._children[child.element_id] = child
        return child

    def remove_child(self, element_id: str) -> Element | None:
        return self._children.pop(element_id, None)

    def clear_children(self) -> None:
        self._children.clear()

    def get_element_by_id(self, element_id: str) -> Element | None:
        """Return the descendant with *element_id*, or ``None``."""
        found = self._children.get(element_id)
        if found is not None:
            return found
        for child in self._children.values():
            found = child.get_element_by_id(element_id)
            if found is not None:
                return found
        return None

    # ── serialisation ──

    @property
    def outer_html(self) -> str:
        """Serialise the element, splicing children into their id placeholders.

        A child is rendered in place of the first empty element in
        ``inner_html`` carrying its id; children without a placeholder are
        not serialised.
        """
        body = self.inner_html
        for child in self._children.values():
            placeholder = f'<{child.tag} id="{child.element_id}"></{child.tag}>'
            body = body.replace(placeholder, child.outer_html, 1)
        attrs = f' id="{escape(self.element_id)}"'
        if self.style.css_text:
            attrs += f' style="{escape(self.style.css_text)}"'
        return f"<{self.tag}{attrs}>{body}</{self.tag}>"
