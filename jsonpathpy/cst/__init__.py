"""Green CST structures."""

from jsonpathpy.cst.green import GreenElement, GreenNode, GreenToken, TreeBuilder

__all__ = [
    "GreenElement",
    "GreenNode",
    "GreenToken",
    "TreeBuilder",
]
