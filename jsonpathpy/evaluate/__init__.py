"""Evaluation of selector ASTs against in-memory JSON documents."""

from jsonpathpy.evaluate.evaluator import descendants, evaluate, find, select
from jsonpathpy.evaluate.node import Location, Node, is_array, is_object

__all__ = [
    "Location",
    "Node",
    "descendants",
    "evaluate",
    "find",
    "is_array",
    "is_object",
    "select",
]
