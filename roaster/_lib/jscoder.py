"""
Encodes an object graph into a javascript function.
"""
from __future__ import annotations

import time
from typing import Any, Dict, List, Optional

from .coder import Coder
from .renderers import Renderer, RendererTable, default_renderers

class JSCoder(Coder):
    """
    Encoder which encodes objects into a javascript function.

    The generated function allocates all the objects first, then assigns
    the references between them, then awakes them. This way, cycles and
    forward references are resolved correctly.

    >>> print(JSCoder({'a': ['foo', 'bar']}).javascript_function())
    (function(){
    var d0 = {"a":null};
    var l1 = ["foo","bar"];
    d0["a"] = l1;
    if(d0 && d0.awake) { d0.awake(); }
    if(l1 && l1.awake) { l1.awake(); }
    if(d0 && d0.didAwakeAll) { d0.didAwakeAll(); }
    return d0;
    })
    """

    def __init__(self, root_object: object = None, *,
                 renderers: Optional[RendererTable] = None, **kw: Any) -> None:
        """
        :param renderers: The renderers table, defaults to `default_renderers`.
        :param kw: Passed to `Coder` constructor.
        """
        super().__init__(root_object, **kw)
        self.renderers = default_renderers if renderers is None else renderers
        self._variable_names: Optional[Dict[int, str]] = None
        self._javascript: Optional[str] = None

    def renderer(self, value:object) -> Renderer:
        return self.renderers.renderer_for(value)

    def is_reference(self, value:object) -> bool:
        return self.classifier.is_reference(value)

    def class_name(self, cls:type) -> str:
        return self.options.class_name(cls)

    def variable_name(self, value:object) -> str:
        """
        The name of the variable holding this value.
        References are named uniquely after their position in the identity map.
        """
        if self.is_reference(value):
            self._name_references()
            assert self._variable_names is not None
            return self._variable_names[id(value)]
        return self.renderer(value).variable_name(value, id(value), self)

    def lvalue(self, value:object) -> str:
        """
        The expression of this value: the variable name of references,
        and the literal of primitives.
        """
        if self.is_reference(value):
            return self.variable_name(value)
        return self.renderer(value).literal(value)

    def _name_references(self) -> None:
        if self._variable_names is not None:
            return
        self.run()
        assert self.identity_map is not None
        names: Dict[int, str] = {}
        for tag, obj in enumerate(self.identity_map):
            names[id(obj)] = self.renderer(obj).variable_name(obj, tag, self)
        self._variable_names = names

    def _awake(self, variable:str, hook:str) -> str:
        return f'if({variable} && {variable}.{hook}) {{ {variable}.{hook}(); }}'

    def javascript_function(self) -> str:
        """
        Returns the source of a javascript function expression that
        builds the graph and returns its root object when called.
        """
        if self._javascript is not None:
            return self._javascript

        t0 = time.time()
        self._name_references()
        assert self.identity_map is not None
        options = self.options

        allocation: List[str] = []
        assignments: List[str] = []
        awakening: List[str] = []

        for obj, edges in self.identity_map.items():
            renderer = self.renderer(obj)
            variable = self.variable_name(obj)
            allocation.append(f'var {variable} = {renderer.allocation(obj, self)};')
            assignments.extend(renderer.assignments(obj, edges, self))
            awakening.append(self._awake(variable, options.awake_hook))

        root = self.root_object
        if self.is_reference(root):
            awakening.append(self._awake(self.variable_name(root), options.awake_all_hook))

        footer = f'return {self.lvalue(root)};'

        body = ''.join(f'{options.indent}{stmt}\n' for stmt in
                       (*allocation, *assignments, *awakening, footer))
        self._javascript = f'(function(){{\n{body}}})'

        t1 = time.time()
        self.msg(f"javascript generation took {t1-t0} seconds", thresh=1)
        return self._javascript

def encode(root_object:object, **kw:Any) -> str:
    """
    Shortcut for ``JSCoder(root_object, **kw).javascript_function()``.

    >>> print(encode(None))
    (function(){
    return null;
    })
    """
    return JSCoder(root_object, **kw).javascript_function()
