"""Template data nodes: lookup, emptiness and rendering of single values.

A node is any of: ``None``, ``str``, ``int``, ``float``, ``bool``, a
:class:`Lambda`, a :class:`LazyObject`, a ``dict`` mapping names to nodes,
or a ``list`` of nodes.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from lunikit.template_token import html_escape

Node = Any

_CO_VARARGS = 0x04


class LazyObject:
    """An object whose named members are computed on demand and cached."""

    def __init__(self) -> None:
        self._methods: dict[str, Callable[[], Node]] = {}
        self._cache: dict[str, Node] = {}

    def register_methods(self, methods: Mapping[str, Callable[[], Node]]) -> None:
        """Expose each zero-argument callable under its name; earlier names win."""
        for name, method in methods.items():
            self._methods.setdefault(name, method)

    def has(self, name: str) -> bool:
        """Whether a member of this name is registered."""
        return name in self._methods

    def at(self, name: str) -> Node:
        """Compute the named member, cache it and return it.

        Raises KeyError if no member of that name is registered.
        """
        value = self._methods[name]()
        self._cache[name] = value
        return value


def _takes_text(func: Callable[..., Node]) -> bool:
    bound_self = getattr(func, "__self__", None)
    target = getattr(func, "__func__", func)
    code = getattr(target, "__code__", None)
    if code is None:
        call = getattr(type(func), "__call__", None)
        code = getattr(call, "__code__", None)
        if code is None:
            return False
        bound_self = func
    if code.co_flags & _CO_VARARGS:
        return True
    count = code.co_argcount
    if bound_self is not None:
        count -= 1
    return count > 0


class Lambda:
    """A callable node whose result is passed through a renderer.

    The wrapped function takes either no arguments or the section text.
    """

    def __init__(self, func: Callable[..., Node]) -> None:
        self._func = func
        self._takes_text = _takes_text(func)

    @property
    def takes_text(self) -> bool:
        """Whether the wrapped function receives the section text."""
        return self._takes_text

    def __call__(self, renderer: Callable[[Node], str], text: str = "") -> str:
        result = self._func(text) if self._takes_text else self._func()
        return renderer(result)


def is_node_empty(node: Node) -> bool:
    """Whether a node counts as false for sections."""
    if node is None:
        return True
    if isinstance(node, bool):
        return not node
    if isinstance(node, (int, float)):
        return node == 0
    if isinstance(node, str):
        return node == ""
    if isinstance(node, list):
        return len(node) == 0
    return False


def has_token(node: Node, token: str) -> bool:
    """Whether ``token`` can be looked up on ``node``."""
    if isinstance(node, dict):
        return token in node
    if isinstance(node, LazyObject):
        return node.has(token)
    return token == "."


def get_token(node: Node, token: str) -> Node:
    """Look ``token`` up on ``node``; scalars and lists return themselves."""
    if isinstance(node, dict):
        return node[token]
    if isinstance(node, LazyObject):
        return node.at(token)
    return node


def find_node(token: str, nodes: Iterable[Node]) -> Node:
    """Resolve a possibly dotted name against a stack of nodes, innermost first.

    Returns None when the name is not found.
    """
    if token != "." and "." in token:
        head, _, tail = token.rpartition(".")
        return find_node(tail, [find_node(head, nodes)])
    for node in nodes:
        if has_token(node, token):
            return get_token(node, token)
    return None


def _render_number(value: int | float) -> str:
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def render_value(node: Node, escape: bool = False) -> str:
    """Render a single node as text, HTML-escaping strings when asked.

    Booleans render as ``true``/``false``; containers and None render as "".
    A lambda's result is rendered in turn and returned as text.
    """
    if isinstance(node, bool):
        return "true" if node else "false"
    if isinstance(node, (int, float)):
        return _render_number(node)
    if isinstance(node, str):
        return html_escape(node) if escape else node
    if isinstance(node, Lambda):
        rendered = node(lambda inner: render_value(inner, False))
        return html_escape(rendered) if escape else rendered
    return ""