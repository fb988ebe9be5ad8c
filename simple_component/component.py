"""Tag-based HTML component with chainable attribute and content helpers."""

from __future__ import annotations

import html
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .exceptions import (
    ComponentError,
    InvalidAriaError,
    InvalidAttributeKeyError,
    InvalidAttributeValueError,
    InvalidAttributesError,
    InvalidDataError,
    InvalidTagError,
)

LINE_SEPARATOR = "\n"


def _escape(text: str) -> str:
    return html.escape(text, quote=True)


class Component:
    """A single HTML element: tag, attributes, escaped text content.

    Every mutator returns the component itself so calls can be chained::

        Component("a").set_id("home").add_class("nav__link").add_content("Home")

    Attribute values are stored trimmed. An empty value marks a valueless
    attribute and renders as the bare key (``disabled``). Content is escaped
    when it is added, so ``get_contents()`` never holds raw markup.

    A component that is not closed renders only its opening tag; any
    buffered content is kept but ignored by ``render()``.
    """

    def __init__(self, tag: str = "comp", closed: bool = True) -> None:
        self._tag = ""
        self.set_tag(tag)
        self._closed = bool(closed)
        self._attributes: Dict[str, str] = {}
        self._contents = ""

    def __repr__(self) -> str:
        return f"Component({self._tag!r}, closed={self._closed!r}, attributes={self._attributes!r})"

    def __str__(self) -> str:
        return self.render()

    # Tag and closed state

    def set_tag(self, tag: str) -> "Component":
        cleaned = tag.strip() if isinstance(tag, str) else ""
        if not cleaned:
            raise InvalidTagError("The tag of this component is empty")
        self._tag = cleaned
        return self

    def get_tag(self) -> str:
        return self._tag

    def is_closed(self) -> bool:
        return self._closed

    def set_closed(self, closed: bool) -> "Component":
        self._closed = bool(closed)
        return self

    # Attributes

    @staticmethod
    def clean_attribute(key: str, value: Optional[str]) -> Tuple[str, str]:
        """Return ``key`` and ``value`` stripped; ``None`` becomes ``""``."""

        return key.strip(), ("" if value is None else value.strip())

    @staticmethod
    def check_attribute(key: object, value: object) -> Tuple[str, str]:
        """Validate one attribute and return its cleaned ``(key, value)``.

        Raises:
            InvalidAttributeKeyError: the key is not a string or is blank.
            InvalidAttributeValueError: the value is neither a string nor None.
        """

        if not isinstance(key, str):
            raise InvalidAttributeKeyError("This attribute key is not a string")
        if value is not None and not isinstance(value, str):
            raise InvalidAttributeValueError("Attribute value must be a string")
        key, value = Component.clean_attribute(key, value)
        if key == "":
            raise InvalidAttributeKeyError("Attribute key cannot be empty")
        return key, value

    def add_attribute(self, key: str, value: Optional[str] = "") -> "Component":
        """Add or replace an attribute. A missing value makes it valueless."""

        key, value = self.check_attribute(key, value)
        self._attributes[key] = value
        return self

    def set_attribute(self, key: str, value: Optional[str] = "") -> "Component":
        """Alias of :meth:`add_attribute`."""

        return self.add_attribute(key, value)

    def add_attributes(self, attributes: Mapping[str, Optional[str]]) -> "Component":
        """Merge several attributes at once.

        Every entry is validated before any of them is stored, so a single
        invalid entry leaves the component untouched. Existing keys are
        overwritten in place and keep their position.
        """

        staged = self._stage_attributes(attributes)
        self._attributes.update(staged)
        return self

    def set_attributes(self, attributes: Mapping[str, Optional[str]]) -> "Component":
        """Replace the whole attribute map with ``attributes``."""

        try:
            staged = self._stage_attributes(attributes)
        except ComponentError as exc:
            raise InvalidAttributesError(f"Failed to set attributes : {exc}") from exc
        self._attributes = staged
        return self

    def _stage_attributes(self, attributes: Mapping[str, Optional[str]]) -> Dict[str, str]:
        staged: Dict[str, str] = {}
        for key, value in attributes.items():
            key, value = self.check_attribute(key, value)
            staged[key] = value
        return staged

    def reset_attributes(self) -> "Component":
        self._attributes = {}
        return self

    def remove_attribute(self, key: str) -> Optional[str]:
        """Remove an attribute and return its value, or None if it was not set."""

        return self._attributes.pop(key, None)

    def get_attribute(self, key: str) -> Optional[str]:
        return self._attributes.get(key)

    def attribute_exists(self, key: str) -> bool:
        return key in self._attributes

    def get_attributes(self) -> Dict[str, str]:
        return dict(self._attributes)

    # Contents

    def add_content(self, content: str) -> "Component":
        """Escape and append a line of text. Blank text is ignored."""

        content = content.strip()
        if content:
            if self._contents:
                self._contents += LINE_SEPARATOR
            self._contents += _escape(content)
        return self

    def add_contents(self, contents: Iterable[str]) -> "Component":
        for content in contents:
            self.add_content(content)
        return self

    def get_contents(self) -> str:
        return self._contents

    def clear_contents(self) -> "Component":
        self._contents = ""
        return self

    # Rendering

    def render_attributes(self) -> str:
        # keys were validated on insertion
        parts: List[str] = []
        for key, value in self._attributes.items():
            if value == "":
                parts.append(key)
            else:
                parts.append(f'{key}="{_escape(value)}"')
        return " ".join(parts)

    def render(self) -> str:
        """Render the component to HTML.

        >>> Component("p").add_content("Line 1").add_content("Line 2").render()
        '<p>\\nLine 1\\nLine 2\\n</p>'
        """

        attributes = self.render_attributes()
        opening = f"<{self._tag} {attributes}>" if attributes else f"<{self._tag}>"
        if not self._closed:
            return opening
        if self._contents:
            return f"{opening}{LINE_SEPARATOR}{self._contents}{LINE_SEPARATOR}</{self._tag}>"
        return f"{opening}</{self._tag}>"

    # id / class helpers

    def set_id(self, element_id: str) -> "Component":
        return self.set_attribute("id", element_id)

    def get_id(self) -> Optional[str]:
        return self.get_attribute("id")

    def _class_tokens(self) -> List[str]:
        return (self.get_attribute("class") or "").split()

    def set_class(self, classes: str) -> "Component":
        """Overwrite the class list. A blank list removes the attribute."""

        _, value = self.check_attribute("class", classes)
        tokens = value.split()
        if tokens:
            self._attributes["class"] = " ".join(tokens)
        else:
            self._attributes.pop("class", None)
        return self

    def add_class(self, classes: str) -> "Component":
        """Append class tokens that are not already present.

        ``classes`` may hold several space-separated tokens, which is what
        the BEM and BEMX generators return.
        """

        if not isinstance(classes, str):
            raise InvalidAttributeValueError("A class must be a string")
        new_tokens = classes.split()
        if not new_tokens:
            raise InvalidAttributeValueError("A class cannot be empty")
        tokens = self._class_tokens()
        for token in new_tokens:
            if token not in tokens:
                tokens.append(token)
        self._attributes["class"] = " ".join(tokens)
        return self

    def get_class(self) -> Optional[str]:
        return self.get_attribute("class")

    def has_class(self, class_name: str) -> bool:
        class_name = class_name.strip()
        if not class_name:
            return False
        return class_name in self._class_tokens()

    def remove_class(self, class_name: str) -> "Component":
        """Remove one class token; drop the attribute once no class is left."""

        class_name = class_name.strip()
        if not class_name or not self.attribute_exists("class"):
            return self
        remaining = [token for token in self._class_tokens() if token != class_name]
        if remaining:
            self._attributes["class"] = " ".join(remaining)
        else:
            self.remove_attribute("class")
        return self

    # data-* / aria-* helpers

    @staticmethod
    def _check_prefixed(
        name: str, value: str, label: str, error: type[ComponentError]
    ) -> Tuple[str, str]:
        if not isinstance(name, str) or not isinstance(value, str):
            raise error(f"{label} name and value must be strings")
        name, value = name.strip(), value.strip()
        if name == "" or value == "":
            empty = "name" if name == "" else "value"
            raise error(f"{label} {empty} cannot be empty")
        return name, value

    def set_data(self, name: str, value: str) -> "Component":
        """Set ``data-<name>``. Blank names or values raise InvalidDataError."""

        name, value = self._check_prefixed(name, value, "A data", InvalidDataError)
        return self.set_attribute(f"data-{name}", value)

    def get_data(self, name: str) -> Optional[str]:
        name = name.strip()
        if not name:
            return None
        return self.get_attribute(f"data-{name}")

    def remove_data(self, name: str) -> Optional[str]:
        name = name.strip()
        if not name:
            return None
        return self.remove_attribute(f"data-{name}")

    def set_aria(self, name: str, value: str) -> "Component":
        """Set ``aria-<name>``. Blank names or values raise InvalidAriaError."""

        name, value = self._check_prefixed(name, value, "An aria", InvalidAriaError)
        return self.set_attribute(f"aria-{name}", value)

    def get_aria(self, name: str) -> Optional[str]:
        name = name.strip()
        if not name:
            return None
        return self.get_attribute(f"aria-{name}")

    def remove_aria(self, name: str) -> Optional[str]:
        name = name.strip()
        if not name:
            return None
        return self.remove_attribute(f"aria-{name}")


__all__ = ["Component", "LINE_SEPARATOR"]
