"""Ordered, recursive key/value tree modelling a parsed JSON document.

Objects keep their member order and duplicate names. Arrays become trees
flagged ``array=True`` whose children are all named ``""``.
"""

import json
from collections.abc import Iterable, Iterator
from typing import Any, Union

Leaf = str | int | float | bool | None
Node = Union["Tree", Leaf]

_MISSING = object()


class _Members(list):
    """Raw ``(name, value)`` pairs of one JSON object."""


class Tree:
    __slots__ = ("_children", "array")

    def __init__(
        self,
        children: Iterable[tuple[str, Node]] | None = None,
        array: bool = False,
    ):
        self._children: list[tuple[str, Node]] = list(children or [])
        self.array = array

    @classmethod
    def from_json(cls, text: str | bytes) -> "Tree":
        """Parse a JSON object or array.

        Raises:
            ValueError: the text is not JSON (NaN and Infinity included), or its
                top level is a scalar.
            RecursionError: the document nests deeper than the interpreter allows.
        """
        root = _to_node(
            json.loads(text, object_pairs_hook=_Members, parse_constant=_reject_constant)
        )
        if not isinstance(root, Tree):
            raise ValueError("JSON document must be an object or an array")
        return root

    def to_python(self) -> dict[str, Any] | list[Any]:
        if self.array:
            return [_to_python(node) for _, node in self._children]
        return {name: _to_python(node) for name, node in self._children}

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_python(), indent=indent, ensure_ascii=False)

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[tuple[str, Node]]:
        return iter(self._children)

    def __contains__(self, name: object) -> bool:
        return any(child == name for child, _ in self._children)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tree):
            return NotImplemented
        return (
            self.array == other.array
            and len(self._children) == len(other._children)
            and all(
                name == other_name and _same_node(node, other_node)
                for (name, node), (other_name, other_node) in zip(self._children, other._children)
            )
        )

    def __repr__(self) -> str:
        return f"Tree({self._children!r}, array={self.array})"

    def keys(self) -> list[str]:
        return [name for name, _ in self._children]

    def get_child_optional(self, name: str) -> Node | None:
        return self.get(name)

    def get_child(self, name: str) -> Node:
        node = self.get(name, _MISSING)
        if node is _MISSING:
            raise KeyError(name)
        return node

    def get(self, name: str, default: Any = None) -> Any:
        for child, node in self._children:
            if child == name:
                return node
        return default

    def put(self, name: str, value: Node) -> None:
        """Set the first child called ``name``, appending it if absent."""
        for idx, (child, _) in enumerate(self._children):
            if child == name:
                self._children[idx] = (name, value)
                return
        self._children.append((name, value))

    def add(self, name: str, value: Node) -> None:
        self._children.append((name, value))


def _to_node(value: Any) -> Node:
    if isinstance(value, _Members):
        return Tree((name, _to_node(member)) for name, member in value)
    if isinstance(value, list):
        return Tree((("", _to_node(item)) for item in value), array=True)
    return value


def _to_python(node: Node) -> Any:
    if isinstance(node, Tree):
        return node.to_python()
    return node


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


def _same_node(left: Node, right: Node) -> bool:
    # 1, 1.0 and true are different leaves
    return type(left) is type(right) and left == right
