#!/usr/bin/env python
"""Print the tokens, CST and diagnostics of one path expression."""

import argparse

from jsonpathpy.cst import GreenNode, GreenToken
from jsonpathpy.lexer import Lexer, dump_tokens
from jsonpathpy.parser import parse


def format_cst(node: GreenNode, depth: int = 0) -> list[str]:
    lines = [f"{'  ' * depth}{node.kind.name}"]
    for child in node.children:
        if isinstance(child, GreenToken):
            lines.append(f"{'  ' * (depth + 1)}{child.kind.name} text={child.text!r} leading={child.leading_text!r}")
        else:
            lines.extend(format_cst(child, depth + 1))
    return lines


def main() -> None:
    parser = argparse.ArgumentParser(description="Dump tokens and CST for a path expression")
    parser.add_argument("expression", help="Path expression, e.g. \"$.store[0,'a b']\"")
    parser.add_argument("--cst", action="store_true", help="Also print the CST")
    args = parser.parse_args()

    lexer = Lexer(args.expression)
    tokens = lexer.lex()
    dump_tokens(tokens, args.expression, lexer.diagnostics)

    if args.cst:
        parsed = parse(args.expression)
        print("\nCST:")
        print("\n".join(format_cst(parsed.root)))
        for diagnostic in parsed.diagnostics:
            print(f"- {diagnostic.code} at {diagnostic.offset}: {diagnostic.message}")


if __name__ == "__main__":
    main()
