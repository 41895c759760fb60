"""
Tells apart values tracked by identity from the ones inlined as literals.
"""
from __future__ import annotations

import decimal
import enum
import numbers
from typing import Tuple, Type

PRIMITIVE_TYPES: Tuple[type, ...] = (type(None), bool, numbers.Real, decimal.Decimal, str, enum.Enum)

class Classifier:
    """
    Categorizes values as primitive or reference.

    Primitives carry no identity and are always inlined at every use site.
    Any other value is a reference, unless its type opts out with
    ``__coded_as_object__ = False`` or is registered with `register_primitive`.
    """

    def __init__(self, primitives:Tuple[type, ...] = PRIMITIVE_TYPES) -> None:
        self._primitives = primitives

    def register_primitive(self, cls:Type[object]) -> None:
        """
        Do not track instances of this type by identity.
        """
        if cls not in self._primitives:
            self._primitives = (*self._primitives, cls)

    def is_reference(self, value:object) -> bool:
        if isinstance(value, self._primitives):
            return False
        return bool(getattr(type(value), '__coded_as_object__', True))

    def is_primitive(self, value:object) -> bool:
        return not self.is_reference(value)

default_classifier = Classifier()

def is_reference(value:object) -> bool:
    """
    Whether the value should be tracked by identity, with the default classifier.

    >>> is_reference(None), is_reference(1.2), is_reference('s')
    (False, False, False)
    >>> is_reference([]), is_reference({}), is_reference(object())
    (True, True, True)
    """
    return default_classifier.is_reference(value)
