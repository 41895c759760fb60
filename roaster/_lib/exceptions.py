from __future__ import annotations

import abc
import attr as attrs
from typing import Optional

def describe(value:object) -> str:
    """
    Short description of a value, used in messages.
    """
    return f'{type(value).__qualname__} at {hex(id(value))}'

@attrs.s(auto_attribs=True, kw_only=True, str=False, frozen=True)
class ValueLocation:
    typename:'str|None' = None
    # the identity is only meaningful during a run, so it's not compared.
    ident:'int|None' = attrs.ib(default=None, eq=False)

    @classmethod
    def make(cls, value:object) -> 'ValueLocation':
        """
        :param value: Any value of the encoded graph.
        """
        return ValueLocation(typename=type(value).__qualname__,
                             ident=id(value))

    def __str__(self) -> str:
        if self.typename is None:
            return '?'
        if self.ident is None:
            return self.typename
        return f'{self.typename} at {hex(self.ident)}'

@attrs.s(auto_attribs=True)
class CoderException(Exception, abc.ABC):
    """
    Base exception for the library.
    """

    value: object
    desrc: Optional[str] = None

    def location(self) -> ValueLocation:
        return ValueLocation.make(self.value)

    @abc.abstractmethod
    def msg(self) -> str:
        ...

    def __str__(self) -> str:
        return f'{self.location()}: {self.msg()}'

@attrs.s
class ContractMissing(CoderException):
    """
    No encoding contract is registered for the value's type.
    """
    desrc: None = attrs.ib(init=False, default=None)

    def msg(self) -> str:
        return f"No encoding contract for type {type(self.value).__qualname__!r}"

@attrs.s
class RendererMissing(CoderException):
    """
    The renderer table can't provide the required capability for this value.
    """
    capability: str = attrs.ib(kw_only=True)

    def msg(self) -> str:
        s = f"Missing renderer capability {self.capability!r} for type {type(self.value).__qualname__!r}"
        if self.desrc:
            s += f", {self.desrc}"
        return s

@attrs.s
class UnsupportedKey(CoderException):
    """
    A mapping key can't be represented as a javascript object key.
    """
    key: object = attrs.ib(kw_only=True)

    def msg(self) -> str:
        s = f"Unsupported mapping key {self.key!r} of type {type(self.key).__qualname__}"
        if self.desrc:
            s += f", {self.desrc}"
        return s

@attrs.s
class CoderAttributeError(CoderException):
    """
    A property registered for coding is not found on the object.
    """
    attr: str = attrs.ib(kw_only=True)
    desrc: None = attrs.ib(init=False, default=None)

    def msg(self) -> str:
        return f"Attribute {self.attr!r} not found in {type(self.value).__qualname__!r}"
