"""BEM (Block__Element--Modifier) class string generator.

Example::

    >>> generate("btn", "label", ["large", "primary"])
    'btn__label btn__label--large btn__label--primary'

See https://getbem.com/introduction/ for the naming methodology.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .exceptions import (
    InvalidBemBlockError,
    InvalidBemElementError,
    InvalidBemModifierError,
    InvalidModifierTypeError,
)

ELEMENT_SEPARATOR = "__"
MODIFIER_SEPARATOR = "--"


def check_modifier_types(modifiers: Iterable[object], prefix: str, error: type[Exception]) -> List[str]:
    """Return ``modifiers`` as a list, rejecting anything that is not a str.

    A bare string is refused too: it would otherwise be split into
    one-character modifiers.
    """

    if isinstance(modifiers, str):
        raise error(f"{prefix} Invalid modifiers: expected a list of strings, got a single string.")
    checked: List[str] = []
    for modifier in modifiers:
        if not isinstance(modifier, str):
            raise error(
                f"{prefix} Invalid modifier type: expected string, got {type(modifier).__name__}."
            )
        checked.append(modifier)
    return checked


def _normalize(
    block: str, element: Optional[str], modifiers: Iterable[object]
) -> Tuple[str, Optional[str], List[str]]:
    checked = check_modifier_types(modifiers, "[BEM]", InvalidModifierTypeError)

    block = block.strip() if isinstance(block, str) else ""
    if block == "":
        raise InvalidBemBlockError("[BEM] Invalid block name: cannot be empty.")

    if element is not None:
        element = element.strip() if isinstance(element, str) else ""
        if element == "":
            raise InvalidBemElementError("[BEM] Invalid element name: cannot be empty if not None.")

    cleaned = [modifier.strip() for modifier in checked]
    if any(modifier == "" for modifier in cleaned):
        raise InvalidBemModifierError("[BEM] Invalid modifier: cannot be empty.")

    return block, element, cleaned


def generate(block: str, element: Optional[str] = None, modifiers: Iterable[str] = ()) -> str:
    """Generate a space-separated BEM class string.

    Args:
        block: Block name, required.
        element: Optional element name; produces ``block__element``.
        modifiers: Modifiers applied to the base class, in order.

    Raises:
        InvalidModifierTypeError: a modifier is not a string.
        InvalidBemBlockError: the block is blank.
        InvalidBemElementError: an element was given but is blank.
        InvalidBemModifierError: a modifier is blank.
    """

    block, element, cleaned = _normalize(block, element, modifiers)

    base = f"{block}{ELEMENT_SEPARATOR}{element}" if element is not None else block
    classes = [base]
    classes.extend(f"{base}{MODIFIER_SEPARATOR}{modifier}" for modifier in cleaned)
    return " ".join(classes)


__all__ = ["ELEMENT_SEPARATOR", "MODIFIER_SEPARATOR", "check_modifier_types", "generate"]
