"""
Encode python object graphs into javascript functions.

Inspired by ``NSCoding``, this library walks an object graph, possibly containing
shared references and cycles, and generates the source of a javascript function that
rebuilds an equivalent graph when it's called.

The model
=========

The `Coder` visits each distinct object of the graph exactly once, starting at the root.
The result is the identity map: a mapping from each object to the properties (`Edge`)
discovered at its first visit, in depth-first order.

Values are either primitives (``None``, booleans, numbers, strings and enum members) or references
(lists, tuples, mappings and any other objects). Primitives are always inlined as literals, references
are tracked by identity, equal but distinct objects are never merged.

The `JSCoder` renders the identity map in three phases:

- Allocate every object in its own variable;
- Assign the properties of all objects, now that every variable exists;
- Awake each object with its ``awake()`` method, if any. The root object is
  finally notified with ``didAwakeAll()``.

How to use the library
======================

Declare the properties of your classes that should be encoded with `properties_for_coding`,
then call `encode` on the root object.

>>> @properties_for_coding('title')
... class Product:
...     def __init__(self, title):
...         self.title = title
>>> @properties_for_coding('products', 'featured', 'delegate')
... class Shelf:
...     def __init__(self):
...         self.products = [Product("Apple")]
...         self.featured = self.products[0]
...         self.delegate = self
>>> print(encode(Shelf()))
(function(){
var s0 = new Shelf();
var l1 = [null];
var p2 = new Product();
s0.products = l1;
s0.delegate = s0;
l1[0] = p2;
p2.title = "Apple";
if(s0 && s0.awake) { s0.awake(); }
if(l1 && l1.awake) { l1.awake(); }
if(p2 && p2.awake) { p2.awake(); }
if(s0 && s0.didAwakeAll) { s0.didAwakeAll(); }
return s0;
})

The cycle ``s0.delegate`` is resolved because every variable is allocated before the assignments.
Notice that ``s0.featured`` is never assigned: an object that has already been visited
is ignored when it's not part of a cycle, so only the first object referring to it gets the assignment.
"""

from ._lib.options import Options, javascript_class_name
from ._lib.classify import Classifier, is_reference, default_classifier
from ._lib.coder import Coder, Frame, Edge
from ._lib.contracts import (EncodingContract, ContractRegistry, SequenceContract,
                             MappingContract, ObjectContract, default_contracts)
from ._lib.properties import (properties_for_coding, property_for_coding,
                              encoded_properties, attrs_with_coding)
from ._lib.renderers import (Renderer, RendererTable, PrimitiveRenderer, ObjectRenderer,
                             ArrayRenderer, MappingRenderer, default_renderers)
from ._lib.jscoder import JSCoder, encode
from ._lib.structures import IdentityMap
from ._lib.exceptions import *

__all__ = (
    "Options",
    "javascript_class_name",

    "Classifier",
    "is_reference",
    "default_classifier",

    "Coder",
    "Frame",
    "Edge",
    "IdentityMap",

    "EncodingContract",
    "ContractRegistry",
    "SequenceContract",
    "MappingContract",
    "ObjectContract",
    "default_contracts",

    "properties_for_coding",
    "property_for_coding",
    "encoded_properties",
    "attrs_with_coding",

    "Renderer",
    "RendererTable",
    "PrimitiveRenderer",
    "ObjectRenderer",
    "ArrayRenderer",
    "MappingRenderer",
    "default_renderers",

    "JSCoder",
    "encode",

    "ValueLocation",
    "CoderException",
    "ContractMissing",
    "RendererMissing",
    "UnsupportedKey",
    "CoderAttributeError",
)
