import json
import logging
from collections.abc import Callable
from typing import Any

from .exceptions import UnexpectedShape
from .tree import Tree

logger = logging.getLogger(__name__)


def has_child(tree: Tree | None, name: str) -> bool:
    if tree is None:
        return False
    return name in tree


def _display(tree: Tree, name: str) -> str:
    value = tree.get_child(name)
    if isinstance(value, Tree):
        raise UnexpectedShape(name)
    if isinstance(value, str):
        return value
    return json.dumps(value)


def is_known_error_shape(tree: Tree | None) -> bool:
    """Check a parsed reply for an upstream application error.

    Recognised shapes, first match wins: a missing tree, Django's
    ``info``/``traceback`` pair, ``djerror``, and ``error``. Matches are
    logged.

    Raises:
        UnexpectedShape: a matched child holds a nested tree.
    """
    if tree is None:
        logger.error("JSON Error: null tree")
        return True
    if has_child(tree, "info") and has_child(tree, "traceback"):
        logger.error("Django error: %s", _display(tree, "info"))
        logger.error("    traceback: %s", _display(tree, "traceback"))
        return True
    if has_child(tree, "djerror"):
        logger.error("Django error: %s", _display(tree, "djerror"))
        return True
    if has_child(tree, "error"):
        logger.error("HTTP Error: %s", _display(tree, "error"))
        return True
    return False


def tree_values(tree: Tree, cast: Callable[[Any], Any] = str) -> list[Any]:
    """Collect the leaf value of every direct child, converted with ``cast``.

    Meant for trees built from JSON arrays.
    """
    values = []
    for name, node in tree:
        if isinstance(node, Tree):
            raise UnexpectedShape(name)
        values.append(cast(node))
    return values
