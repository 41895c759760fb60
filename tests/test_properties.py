import attr as attrs
import pytest

from roaster import properties_for_coding, property_for_coding, encoded_properties, attrs_with_coding
from roaster._lib.properties import declared_properties

@properties_for_coding('name', 'age')
class Person:
    ...

@properties_for_coding({'employer': 'company', 'salary': 'pay'})
class Employee(Person):
    ...

class Intern(Employee):
    ...

@property_for_coding('school')
class Student(Person):
    ...

def test_declaration_order() -> None:
    assert encoded_properties(Person) == [('name', 'name'), ('age', 'age')]

def test_layers_base_first() -> None:
    assert encoded_properties(Employee) == [('name', 'name'), ('age', 'age'),
                                            ('employer', 'company'), ('salary', 'pay')]
    assert declared_properties(Employee) == (('employer', 'company'), ('salary', 'pay'))

def test_inherited_without_declaration() -> None:
    assert encoded_properties(Intern) == encoded_properties(Employee)
    assert declared_properties(Intern) == ()

def test_sibling_layers_independent() -> None:
    assert encoded_properties(Student) == [('name', 'name'), ('age', 'age'), ('school', 'school')]
    assert ('school', 'school') not in encoded_properties(Employee)

def test_chained_declarations() -> None:
    @properties_for_coding('b')
    @properties_for_coding('a')
    class C:
        ...
    assert encoded_properties(C) == [('a', 'a'), ('b', 'b')]

def test_multiple_inheritance() -> None:
    @properties_for_coding('x')
    class A: ...
    @properties_for_coding('y')
    class B: ...
    @properties_for_coding('z')
    class C(A, B): ...
    # reversed mro: object, B, A, C
    assert encoded_properties(C) == [('y', 'y'), ('x', 'x'), ('z', 'z')]

def test_not_a_string() -> None:
    with pytest.raises(TypeError):
        properties_for_coding('a', 1) # type:ignore

def test_no_properties() -> None:
    assert encoded_properties(object) == []
    assert encoded_properties(dict) == []

def test_attrs_with_coding() -> None:
    @attrs_with_coding
    class Node:
        name: str
        parent: object = None

    @attrs_with_coding(frozen=True)
    class Leaf(Node):
        weight: int = 0

    assert encoded_properties(Node) == [('name', 'name'), ('parent', 'parent')]
    assert encoded_properties(Leaf) == [('name', 'name'), ('parent', 'parent'), ('weight', 'weight')]
    leaf = Leaf('x', weight=2)
    assert attrs.has(Leaf)
    with pytest.raises(attrs.exceptions.FrozenInstanceError):
        leaf.weight = 3 # type:ignore
