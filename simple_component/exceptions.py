"""Exception types raised by components and the BEM/BEMX helpers."""

from __future__ import annotations


class SimpleComponentError(ValueError):
    """Base class for every validation error raised by this package."""


class ComponentError(SimpleComponentError):
    """Invalid input given to a Component."""


class InvalidTagError(ComponentError):
    pass


class InvalidAttributeKeyError(ComponentError):
    pass


class InvalidAttributeValueError(ComponentError):
    pass


class InvalidAttributesError(ComponentError):
    """Raised by ``Component.set_attributes`` when any entry is rejected."""


class InvalidDataError(ComponentError):
    pass


class InvalidAriaError(ComponentError):
    pass


class BemError(SimpleComponentError):
    """Invalid block, element or modifier given to the BEM generator."""


class InvalidBemBlockError(BemError):
    pass


class InvalidBemElementError(BemError):
    pass


class InvalidBemModifierError(BemError):
    pass


class InvalidModifierTypeError(BemError, TypeError):
    pass


class BemxError(SimpleComponentError):
    """Invalid input given to the BEMX generator.

    Errors coming from the child BEM generation are re-raised as a plain
    ``BemxError`` whose message keeps the original one after a ``[BEMX]``
    prefix.
    """


class InvalidBemxParentError(BemxError):
    pass


class InvalidBemxModifierTypeError(BemxError, TypeError):
    pass


__all__ = [
    "BemError",
    "BemxError",
    "ComponentError",
    "InvalidAriaError",
    "InvalidAttributeKeyError",
    "InvalidAttributeValueError",
    "InvalidAttributesError",
    "InvalidBemBlockError",
    "InvalidBemElementError",
    "InvalidBemModifierError",
    "InvalidBemxModifierTypeError",
    "InvalidBemxParentError",
    "InvalidDataError",
    "InvalidModifierTypeError",
    "InvalidTagError",
    "SimpleComponentError",
]
