"""
Configuration of the coders.
"""
from __future__ import annotations

import sys
import attr as attrs
from typing import Callable, Optional, TextIO

from .exceptions import describe

def javascript_class_name(cls:type) -> str:
    """
    The dotted name of the class, as it should be known by the javascript runtime.

    >>> class Shop: ...
    >>> javascript_class_name(Shop)
    'Shop'
    >>> javascript_class_name(dict)
    'dict'
    """
    parts = cls.__qualname__.split('.')
    # classes defined in functions are named after their last enclosing scope
    if '<locals>' in parts:
        parts = parts[len(parts) - parts[::-1].index('<locals>'):]
    return '.'.join(parts)

@attrs.s(auto_attribs=True, frozen=True, kw_only=True)
class Options:
    outstream: TextIO = sys.stdout
    verbosity: int = 0
    awake_hook: str = 'awake'
    awake_all_hook: str = 'didAwakeAll'
    class_name: Callable[[type], str] = javascript_class_name
    indent: str = ''

def msg(options:Options, msg: str, ctx: Optional[object] = None, thresh: int = 0) -> None:
    """
    Log a message, optionally about the given value.
    """
    if options.verbosity < thresh:
        return
    context = ""
    if ctx is not None:
        context = f"<{describe(ctx)}>: "
    print(f"{context}{msg}", file=options.outstream)
