"""
Generic data structures.
"""

from __future__ import annotations

from typing import (
    Dict,
    Generic,
    Iterator,
    Mapping,
    MutableMapping,
    Optional,
    Tuple,
    TypeVar,
)

_KT = TypeVar("_KT")
_VT = TypeVar("_VT")

class IdentityMap(MutableMapping[_KT, _VT]):
    """
    A mapping that compares keys by identity instead of equality.

    Keys don't have to be hashable and two equal keys are different
    entries as long as they are distinct objects. The insertion order is preserved.
    The map holds a reference to every key, so identities are never
    recycled while the map is alive.

    >>> a, b = [], []
    >>> m = IdentityMap()
    >>> m[a] = 'a'
    >>> m[b] = 'b'
    >>> len(m), m[a], m[b]
    (2, 'a', 'b')
    >>> [] in m
    False
    """

    def __init__(self) -> None:
        self._d: Dict[int, Tuple[_KT, _VT]] = {}

    def __getitem__(self, key:_KT) -> _VT:
        try:
            return self._d[id(key)][1]
        except KeyError:
            raise KeyError(key) from None

    def __setitem__(self, key:_KT, value:_VT) -> None:
        self._d[id(key)] = (key, value)

    def __delitem__(self, key:_KT) -> None:
        try:
            del self._d[id(key)]
        except KeyError:
            raise KeyError(key) from None

    def __contains__(self, key:object) -> bool:
        return id(key) in self._d

    def __iter__(self) -> Iterator[_KT]:
        for k, _ in self._d.values():
            yield k

    def __len__(self) -> int:
        return len(self._d)

    def __repr__(self) -> str:
        items = ', '.join(f'{type(k).__qualname__}@{hex(id(k))}: {v!r}'
                          for k,v in self._d.values())
        return f'{self.__class__.__name__}({{{items}}})'


class TypeTable(Generic[_VT]):
    """
    Associates values to types, looked up by the type of an instance.

    The lookup follows the method resolution order of the type, then abstract base
    classes registered in the table are checked in registration order, then ``object``.

    >>> import numbers
    >>> t = TypeTable({numbers.Real: 'number', object: 'object', bool: 'bool'})
    >>> t.lookup(int), t.lookup(bool), t.lookup(str)
    ('number', 'bool', 'object')
    """

    def __init__(self, table:'Mapping[type, _VT]|None' = None) -> None:
        self._table: Dict[type, _VT] = dict(table or {})

    def register(self, cls:type, value:_VT) -> None:
        self._table[cls] = value

    def copy(self) -> 'TypeTable[_VT]':
        new = self.__class__.__new__(self.__class__)
        new.__dict__.update(self.__dict__)
        new._table = dict(self._table)
        return new

    def __contains__(self, cls:object) -> bool:
        return cls in self._table

    def lookup(self, cls:type) -> Optional[_VT]:
        table = self._table
        for klass in cls.__mro__:
            if klass is not object and klass in table:
                return table[klass]
        for klass, value in table.items():
            if klass is not object and issubclass(cls, klass):
                return value
        return table.get(object)
