"""
Declare which properties of a class are encoded.

>>> @properties_for_coding('title', 'price')
... class Product:
...     ...
>>> @properties_for_coding({'tax': 'vat'})
... class TaxedProduct(Product):
...     ...
>>> encoded_properties(TaxedProduct)
[('title', 'title'), ('price', 'price'), ('tax', 'vat')]
"""
from __future__ import annotations

import attr as attrs
from typing import Any, Callable, List, Mapping, Optional, Tuple, TypeVar, Union, overload

_C = TypeVar('_C', bound=type)

# name of the class attribute holding the properties declared directly on a class
_LAYER = '__coding_properties__'

def _normalize(properties:Tuple[Union[str, Mapping[str, str]], ...]) -> List[Tuple[str, str]]:
    if len(properties) == 1 and isinstance(properties[0], Mapping):
        return [(name, label) for name, label in properties[0].items()]
    pairs = []
    for name in properties:
        if not isinstance(name, str):
            raise TypeError(f'property names must be strings, got {name!r}')
        pairs.append((name, name))
    return pairs

def properties_for_coding(*properties: Union[str, Mapping[str, str]]) -> Callable[[_C], _C]:
    """
    Class decorator that registers properties for coding, in declaration order.

    :param properties: Property names, or a single mapping from property names
        to the labels used in the generated code.

    Declarations are layered: the properties of the base classes are always encoded
    first, and decorating the same class several times adds to the previous declarations.
    """
    pairs = _normalize(properties)
    def decorator(cls:_C) -> _C:
        layer: List[Tuple[str, str]] = list(cls.__dict__.get(_LAYER, ()))
        layer.extend(pairs)
        setattr(cls, _LAYER, tuple(layer))
        return cls
    return decorator

property_for_coding = properties_for_coding

def declared_properties(cls:type) -> Tuple[Tuple[str, str], ...]:
    """
    The properties registered directly on this class, not including the inherited ones.
    """
    return cls.__dict__.get(_LAYER, ())

def encoded_properties(cls:type) -> List[Tuple[str, str]]:
    """
    All ``(name, label)`` pairs to encode for instances of this class, base classes first.
    """
    result: List[Tuple[str, str]] = []
    for klass in reversed(cls.__mro__):
        result.extend(declared_properties(klass))
    return result

@overload
def attrs_with_coding(maybe_cls:_C, **kw:Any) -> _C:
    ...
@overload
def attrs_with_coding(maybe_cls:None=None, **kw:Any) -> Callable[[_C], _C]:
    ...
def attrs_with_coding(maybe_cls:Optional[_C]=None, **kw:Any) -> 'Any':
    """
    Like ``attrs.s(auto_attribs=True)``, and registers the fields
    defined by this class for coding.

    >>> @attrs_with_coding
    ... class Shelf:
    ...     products: list
    ...     height: int = 123
    >>> encoded_properties(Shelf)
    [('products', 'products'), ('height', 'height')]
    """
    kw.setdefault('auto_attribs', True)
    def wrap(cls:_C) -> _C:
        cls = attrs.s(**kw)(cls)
        own = [a.name for a in attrs.fields(cls) if not a.inherited]
        return properties_for_coding(*own)(cls)
    if maybe_cls is None:
        return wrap
    return wrap(maybe_cls)
