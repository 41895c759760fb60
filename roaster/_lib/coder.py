"""
The traversal engine: builds the identity map of an object graph.
"""
from __future__ import annotations

import time
import attr as attrs
from typing import (
    TYPE_CHECKING,
    Any,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Union,
)

from .classify import Classifier, default_classifier
from .exceptions import CoderAttributeError
from .options import Options, msg as _msg
from .structures import IdentityMap

if TYPE_CHECKING:
    from .contracts import ContractRegistry

@attrs.s(auto_attribs=True, frozen=True)
class Edge:
    """
    A labeled reference from an object to one of its properties' value.
    """
    key: str
    value: object

def get_property(obj:object, name:str) -> object:
    try:
        return getattr(obj, name)
    except AttributeError as e:
        raise CoderAttributeError(obj, attr=name) from e

class Frame:
    """
    One level of the traversal stack: the object under visit and the
    list of edges discovered for it so far.

    Encoding contracts receive a frame and call `visit` for each child.
    """
    __slots__ = 'coder', 'value', 'edges', 'parent'

    def __init__(self, coder:Coder, value:object, edges:List[Edge],
                 parent:Optional[Frame]=None) -> None:
        self.coder = coder
        self.value = value
        self.edges = edges
        self.parent = parent

    @property
    def depth(self) -> int:
        depth = 0
        frame = self.parent
        while frame is not None:
            depth += 1
            frame = frame.parent
        return depth

    def is_visiting(self, value:object) -> bool:
        """
        Whether the value is this frame's object or one of its ancestors.
        """
        frame: Optional[Frame] = self
        while frame is not None:
            if frame.value is value:
                return True
            frame = frame.parent
        return False

    def visit(self, value:object, key:Optional[str]=None) -> None:
        """
        Visit the value, reached from the current object with the given label.

        A reference is expanded only once. When it's reached again from one of the objects
        currently under visit, the edge closes a cycle and is recorded. Otherwise the reference
        is ignored altogether, no edge is recorded for it: an object shared by several
        parents is only assigned to the first parent discovering it.

        :param key: The label of the edge, or None for container elements:
            these are assigned positionally and do not record an edge.
        """
        coder = self.coder
        identity_map = coder.identity_map
        assert identity_map is not None
        is_reference = coder.classifier.is_reference(value)
        if is_reference and value in identity_map:
            if key is not None and self.is_visiting(value):
                self.edges.append(Edge(key, value))
            return
        if key is not None:
            self.edges.append(Edge(key, value))
        if is_reference:
            edges: List[Edge] = []
            identity_map[value] = edges
            if coder.options.verbosity >= 2:
                coder.msg(f"discovered at depth {self.depth+1}", ctx=value, thresh=2)
            coder.contracts.enumerate_edges(value, Frame(coder, value, edges, self))

    def visit_properties(self, names:Union[Iterable[str], Mapping[str, str]], obj:object) -> None:
        """
        Batch visit some properties of an object.

        Example: ``frame.visit_properties(['name', 'age'], obj)``
        or ``frame.visit_properties({'myname': 'name', 'myage': 'age'}, obj)``.
        The later is equivalent to ``frame.visit_dictionary({'name': obj.myname, 'age': obj.myage})``.
        """
        if isinstance(names, Mapping):
            pairs: Iterable[Any] = names.items()
        else:
            pairs = ((name, name) for name in names)
        for name, label in pairs:
            self.visit(get_property(obj, name), label)

    def visit_dictionary(self, dictionary:Mapping[str, object]) -> None:
        """
        Visit each value of the dictionary, labeled with its key.
        """
        for key, value in dictionary.items():
            self.visit(value, key)

class Coder:
    """
    Walks the object graph from the root and maps each distinct reference
    to the edges discovered at its first visit.

    A coder is meant to encode a single graph, once:

    >>> coder = Coder(['foo', {'a': 1}])
    >>> coder.run()
    >>> [type(o).__name__ for o in coder.references()]
    ['list', 'dict']
    """

    def __init__(self,
                 root_object: object = None, *,
                 options: Optional[Options] = None,
                 contracts: Optional[ContractRegistry] = None,
                 classifier: Optional[Classifier] = None,
                 **kw: Any) -> None:
        """
        :param root_object: The object to start coding with.
        :param options: The `Options`, all other keywords are passed to `Options`
            constructor when it's not given.
        :param contracts: The encoding contracts used to enumerate the properties of
            the objects, defaults to `default_contracts`.
        :param classifier: Tells primitives and references apart.
        """
        from .contracts import default_contracts

        if options is None:
            options = Options(**kw)
        elif kw:
            raise TypeError(f'unexpected keyword arguments: {", ".join(kw)}')
        self.root_object = root_object
        self.options = options
        self.contracts = default_contracts if contracts is None else contracts
        self.classifier = default_classifier if classifier is None else classifier
        # { object => [ Edge(label, value), ... ] }
        self.identity_map: Optional[IdentityMap[object, List[Edge]]] = None

    def msg(self, msg: str, ctx: Optional[object] = None, thresh: int = 0) -> None:
        """
        Log a message about this value.
        """
        _msg(self.options, msg, ctx, thresh)

    def run(self) -> None:
        """
        Populate the identity map. Calling this more than once has no effect,
        unless the previous run failed: the map is only kept when the traversal completes.
        """
        if self.identity_map is not None:
            return
        t0 = time.time()
        self.identity_map = IdentityMap()
        root = self.root_object
        edges: List[Edge] = []
        try:
            if self.classifier.is_reference(root):
                self.identity_map[root] = edges
                self.contracts.enumerate_edges(root, Frame(self, root, edges))
        except BaseException:
            self.identity_map = None
            raise
        t1 = time.time()
        self.msg(f"found {len(self.identity_map)} references in {t1-t0} seconds", thresh=1)

    def references(self) -> Iterator[object]:
        """
        Iterate over the references in discovery order.
        """
        self.run()
        assert self.identity_map is not None
        return iter(self.identity_map)

    def edges(self, value:object) -> List[Edge]:
        """
        The edges recorded for this reference.

        :raises KeyError: If the value is not a reference of the graph.
        """
        self.run()
        assert self.identity_map is not None
        return self.identity_map[value]

