"""BEMX: contextual BEM class generation.

BEMX lets a block carry the context of the block it is nested in without
touching the parent's own classes. The child keeps its regular BEM classes
and gains ``parent__child`` plus one ``parent__child--modifier`` per parent
modifier::

    menu-item (expanded)
    └── btn (primary)

    >>> generate("btn", "menu-item", ["primary"], ["expanded"])
    'btn btn--primary menu-item__btn menu-item__btn--expanded'

Parent modifiers are ignored when no parent block is given, but they are
still validated.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from . import bem
from .exceptions import BemError, BemxError, InvalidBemxModifierTypeError, InvalidBemxParentError


def _normalize_parent(
    parent_block: Optional[str], parent_modifiers: Iterable[object]
) -> Tuple[Optional[str], List[str]]:
    checked = bem.check_modifier_types(parent_modifiers, "[BEMX]", InvalidBemxModifierTypeError)

    if parent_block is not None:
        parent_block = parent_block.strip() if isinstance(parent_block, str) else ""
        if parent_block == "":
            raise InvalidBemxParentError("[BEMX] Invalid parent block name: cannot be empty if not None.")

    cleaned = [modifier.strip() for modifier in checked]
    if any(modifier == "" for modifier in cleaned):
        raise InvalidBemxParentError("[BEMX] Invalid modifier: cannot be empty.")

    return parent_block, cleaned


def generate(
    block: str,
    parent_block: Optional[str] = None,
    modifiers: Iterable[str] = (),
    parent_modifiers: Iterable[str] = (),
) -> str:
    """Generate BEMX classes for ``block`` in the context of ``parent_block``.

    Raises:
        InvalidBemxModifierTypeError: a parent modifier is not a string.
        InvalidBemxParentError: the parent block or a parent modifier is blank.
        BemxError: the child block or its modifiers were rejected by the BEM
            generator; the message is the BEM one prefixed with ``[BEMX]``.
    """

    parent_block, cleaned_parent_modifiers = _normalize_parent(parent_block, parent_modifiers)

    try:
        child_classes = bem.generate(block, None, modifiers)
    except BemError as exc:
        raise BemxError(f"[BEMX] {exc}") from exc

    if parent_block is None:
        return child_classes

    context = f"{parent_block}{bem.ELEMENT_SEPARATOR}{block.strip()}"
    parent_classes = [context]
    parent_classes.extend(
        f"{context}{bem.MODIFIER_SEPARATOR}{modifier}" for modifier in cleaned_parent_modifiers
    )
    return f"{child_classes} {' '.join(parent_classes)}"


__all__ = ["generate"]
