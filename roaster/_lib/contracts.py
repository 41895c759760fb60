"""
Encoding contracts: how each kind of reference enumerates its properties.
"""
from __future__ import annotations

import abc
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional

from .coder import get_property
from .exceptions import ContractMissing
from .properties import encoded_properties
from .structures import TypeTable

if TYPE_CHECKING:
    from .coder import Frame

class EncodingContract(abc.ABC):
    """
    Base class for encoding contracts.
    """

    @abc.abstractmethod
    def enumerate_edges(self, value:Any, frame:Frame) -> None:
        """
        Call ``frame.visit()`` for each property of the value.
        """

class SequenceContract(EncodingContract):
    def enumerate_edges(self, value:Any, frame:Frame) -> None:
        for item in value:
            # visit all the items, but do not assign them as references of the array
            frame.visit(item)

class MappingContract(EncodingContract):
    def enumerate_edges(self, value:Any, frame:Frame) -> None:
        for item in value.values():
            # idem, the keys are assigned positionally
            frame.visit(item)

class ObjectContract(EncodingContract):
    """
    Visits the properties registered with `properties_for_coding`, base classes first.

    Then, if the object has an ``encode_with_coder(frame)`` method, it's called
    so the object can encode its inner state as it wants.
    Other objects are leaves.
    """

    def enumerate_edges(self, value:Any, frame:Frame) -> None:
        for name, label in encoded_properties(type(value)):
            frame.visit(get_property(value, name), label)
        if isinstance(value, type):
            return
        encode = getattr(value, 'encode_with_coder', None)
        if callable(encode):
            encode(frame)

class ContractRegistry(TypeTable[EncodingContract]):
    """
    The encoding contracts, by type.
    """

    def enumerate_edges(self, value:object, frame:Frame) -> None:
        contract: Optional[EncodingContract] = self.lookup(type(value))
        if contract is None:
            raise ContractMissing(value)
        contract.enumerate_edges(value, frame)

default_contracts = ContractRegistry({
    list: SequenceContract(),
    tuple: SequenceContract(),
    dict: MappingContract(),
    Mapping: MappingContract(),
    object: ObjectContract(),
})
