"""
Renderers produce the javascript snippets for each kind of value.
"""
from __future__ import annotations

import abc
import decimal
import enum
import json
import numbers
import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Dict, Iterable, Iterator, List, Sequence

from .exceptions import RendererMissing, UnsupportedKey
from .structures import TypeTable

if TYPE_CHECKING:
    from .coder import Edge
    from .jscoder import JSCoder

_IDENTIFIER = re.compile(r'^[A-Za-z_$][A-Za-z0-9_$]*$')

def _decimal_literal(value:decimal.Decimal) -> str:
    if value.is_finite():
        # keeps the exact digits, exponents are valid javascript
        return str(value)
    if value.is_nan():
        return 'NaN'
    return json.dumps(float(value))

def js_key(key:object, mapping:object=None) -> str:
    """
    Convert a mapping key to the property name it gets in javascript,
    the same way `json.dumps` converts dictionary keys.

    >>> js_key('a'), js_key(1), js_key(1.5), js_key(True), js_key(None)
    ('a', '1', '1.5', 'true', 'null')
    """
    if isinstance(key, str):
        return key
    if isinstance(key, enum.Enum):
        return key.name
    if key is None:
        return 'null'
    if isinstance(key, bool):
        return 'true' if key else 'false'
    if isinstance(key, int):
        return str(int(key))
    if isinstance(key, float):
        return json.dumps(key)
    if isinstance(key, decimal.Decimal):
        return _decimal_literal(key)
    if isinstance(key, numbers.Real):
        return json.dumps(float(key))
    raise UnsupportedKey(mapping, key=key)

def js_member(variable:str, label:object) -> str:
    """
    >>> js_member('sc0', 'delegate'), js_member('sc0', 'tint-color')
    ('sc0.delegate', 'sc0["tint-color"]')
    """
    name = js_key(label)
    if _IDENTIFIER.match(name):
        return f'{variable}.{name}'
    return f'{variable}[{json.dumps(name)}]'

def variable_basis(class_name:str) -> str:
    """
    Derive a short variable name prefix from a class name: the capitals of
    the class name, lower cased. It never contains digits, so
    appending a numeric tag gives unique names.

    >>> variable_basis('ShopController'), variable_basis('list'), variable_basis('app.HTTPServer2')
    ('sc', 'l', 'https')
    """
    name = class_name.split('.')[-1]
    basis = re.sub(r'[a-z]+', '', name).lower()
    basis = re.sub(r'[^a-z_$]', '', basis)
    if not basis:
        first = name[:1].lower()
        basis = first if re.match(r'[a-z_$]', first) else 'o'
    return basis

class Renderer(abc.ABC):
    """
    Base class for renderers. Each capability that's not provided
    raises `RendererMissing`.
    """

    def variable_name(self, value:Any, tag:int, coder:JSCoder) -> str:
        raise RendererMissing(value, capability='variable_name')

    def allocation(self, value:Any, coder:JSCoder) -> str:
        raise RendererMissing(value, capability='allocation')

    def literal(self, value:Any) -> str:
        raise RendererMissing(value, capability='literal',
                              desrc='the value can only be used as a variable')

    def assignments(self, value:Any, edges:Sequence[Edge], coder:JSCoder) -> Iterator[str]:
        variable = coder.variable_name(value)
        for edge in edges:
            yield f'{js_member(variable, edge.key)} = {coder.lvalue(edge.value)};'

class PrimitiveRenderer(Renderer):
    """
    Primitives are inlined, the variable name is only informative.
    """
    prefix = 'v'

    def variable_name(self, value:Any, tag:int, coder:JSCoder) -> str:
        return f'{self.prefix}{tag}'

    def allocation(self, value:Any, coder:JSCoder) -> str:
        return self.literal(value)

    @abc.abstractmethod
    def literal(self, value:Any) -> str:
        ...

class NoneRenderer(PrimitiveRenderer):
    prefix = 'n'
    def literal(self, value:None) -> str:
        return 'null'

class BoolRenderer(PrimitiveRenderer):
    def variable_name(self, value:bool, tag:int, coder:JSCoder) -> str:
        return f'{"t" if value else "f"}{tag}'
    def literal(self, value:bool) -> str:
        return 'true' if value else 'false'

class NumberRenderer(PrimitiveRenderer):
    prefix = 'n'
    def literal(self, value:'numbers.Real|decimal.Decimal') -> str:
        if isinstance(value, int):
            return str(int(value))
        if isinstance(value, float):
            # NaN and Infinity are valid javascript
            return json.dumps(value)
        if isinstance(value, decimal.Decimal):
            return _decimal_literal(value)
        return json.dumps(float(value))

class StringRenderer(PrimitiveRenderer):
    prefix = 's'
    def literal(self, value:str) -> str:
        return json.dumps(value)

class SymbolRenderer(PrimitiveRenderer):
    prefix = 'y'
    def literal(self, value:enum.Enum) -> str:
        return json.dumps(value.name)

class ObjectRenderer(Renderer):
    """
    Objects are allocated with their constructor, properties are assigned afterwards.
    """

    def variable_name(self, value:Any, tag:int, coder:JSCoder) -> str:
        return f'{variable_basis(coder.class_name(type(value)))}{tag}'

    def allocation(self, value:Any, coder:JSCoder) -> str:
        return f'new {coder.class_name(type(value))}()'

class ArrayRenderer(ObjectRenderer):
    """
    Arrays are allocated as literals; the references are left null
    and populated at the assignment stage.
    """

    def allocation(self, value:Iterable[Any], coder:JSCoder) -> str:
        items = ('null' if coder.is_reference(item) else coder.lvalue(item)
                 for item in value)
        return f'[{",".join(items)}]'

    def assignments(self, value:Iterable[Any], edges:Sequence[Edge], coder:JSCoder) -> Iterator[str]:
        yield from super().assignments(value, edges, coder)
        variable = coder.variable_name(value)
        for index, item in enumerate(value):
            if coder.is_reference(item):
                yield f'{variable}[{index}] = {coder.lvalue(item)};'

class MappingRenderer(ObjectRenderer):
    """
    Like arrays, mappings are allocated as literals.
    """

    def keys(self, value:Mapping[Any, Any]) -> List[str]:
        """
        The javascript keys of the mapping, in iteration order.
        Two keys converting to the same property name raise `UnsupportedKey`.
        """
        names: List[str] = []
        seen: Dict[str, object] = {}
        for key in value:
            name = js_key(key, value)
            if name in seen:
                raise UnsupportedKey(value, key=key,
                    desrc=f'javascript key {name!r} is already used by {seen[name]!r}')
            seen[name] = key
            names.append(name)
        return names

    def allocation(self, value:Mapping[Any, Any], coder:JSCoder) -> str:
        items: List[str] = []
        for name, item in zip(self.keys(value), value.values()):
            lvalue = 'null' if coder.is_reference(item) else coder.lvalue(item)
            items.append(f'{json.dumps(name)}:{lvalue}')
        return f'{{{",".join(items)}}}'

    def assignments(self, value:Mapping[Any, Any], edges:Sequence[Edge], coder:JSCoder) -> Iterator[str]:
        yield from super().assignments(value, edges, coder)
        variable = coder.variable_name(value)
        for name, item in zip(self.keys(value), value.values()):
            if coder.is_reference(item):
                yield f'{variable}[{json.dumps(name)}] = {coder.lvalue(item)};'

class RendererTable(TypeTable[Renderer]):
    """
    The renderers, by type.
    """

    def renderer_for(self, value:object) -> Renderer:
        renderer = self.lookup(type(value))
        if renderer is None:
            raise RendererMissing(value, capability='renderer',
                                  desrc='no renderer is registered for this kind')
        return renderer

default_renderers = RendererTable({
    type(None): NoneRenderer(),
    bool: BoolRenderer(),
    numbers.Real: NumberRenderer(),
    decimal.Decimal: NumberRenderer(),
    str: StringRenderer(),
    enum.Enum: SymbolRenderer(),
    list: ArrayRenderer(),
    tuple: ArrayRenderer(),
    dict: MappingRenderer(),
    Mapping: MappingRenderer(),
    object: ObjectRenderer(),
})
