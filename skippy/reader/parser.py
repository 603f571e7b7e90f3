"""
  Skippy Lexer and Parser

Turns source text into a generic syntax tree of AstNode objects, the same
shape a parser-combinator library would emit for this grammar:

    number : /-?[0-9]+([.][0-9]+)?/ ;
    symbol : /[a-zA-Z0-9_+\\-*\\/\\\\=<>!&%]+/ ;
    sexpr  : '(' <expr>* ')' ;
    qexpr  : '{' <expr>* '}' ;
    expr   : <number> | <symbol> | <sexpr> | <qexpr> ;
    skippy : /^/ <expr>* /$/ ;

Node tags:
    - root              -> ">"
    - start/end anchors -> "regex" (contents "")
    - number            -> "expr|number|regex"
    - symbol            -> "expr|symbol|regex"
    - ( ... )           -> "expr|sexpr|>"
    - { ... }           -> "expr|qexpr|>"
    - delimiters        -> "char" (contents "(", ")", "{" or "}")

The tree carries no meaning of its own; skippy.reader.reader turns it
into Values.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, Optional

from skippy.errors import SkippySyntaxError


TOKEN_RE = re.compile(
    r"(?P<number>-?[0-9]+(?:[.][0-9]+)?)"  # tried before symbol: -5 is a number
    r"|(?P<symbol>[a-zA-Z0-9_+\-*/\\=<>!&%]+)"
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
)

CLOSERS: dict[str, str] = {
    "lparen": "rparen",
    "lbrace": "rbrace",
}

CLOSE_CHARS: dict[str, str] = {
    "rparen": ")",
    "rbrace": "}",
}

GROUP_TAGS: dict[str, str] = {
    "lparen": "expr|sexpr|>",
    "lbrace": "expr|qexpr|>",
}

LEAF_TAGS: dict[str, str] = {
    "number": "expr|number|regex",
    "symbol": "expr|symbol|regex",
}

ROOT_TAG = ">"
EXPECTED_EXPR = "'(', '{', number or symbol"

Token = tuple[str, str, int]


@dataclass
class AstNode:
    tag: str
    contents: str = ""
    children: list[AstNode] = field(default_factory=list)
    pos: int = 0

    @property
    def children_num(self) -> int:
        return len(self.children)


def lex(source: str, filename: str = "<stdin>") -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, offset) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise SkippySyntaxError(
                _diagnostic(source, pos, f"expected {EXPECTED_EXPR} at '{source[pos]}'", filename)
            )
        yield m.lastgroup, m.group(), pos
        pos = m.end()


def _diagnostic(source: str, pos: int, detail: str, filename: str = "<stdin>") -> str:
    line = source.count("\n", 0, pos) + 1
    col = pos - (source.rfind("\n", 0, pos) + 1) + 1
    return f"{filename}:{line}:{col}: error: {detail}"


class TokenStream:
    def __init__(self, source: str, filename: str = "<stdin>"):
        self.source = source
        self.filename = filename
        self.tokens = lex(source, filename)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def error(self, expected: str, tok: Optional[Token]) -> SkippySyntaxError:
        if tok is None:
            pos, found = len(self.source), "end of input"
        else:
            pos, found = tok[2], f"'{tok[1]}'"
        return SkippySyntaxError(
            _diagnostic(self.source, pos, f"expected {expected} at {found}", self.filename)
        )

    def parse_expr(self) -> Optional[AstNode]:
        """Parse one expression, or return None at end of input."""
        tok = self.peek()
        if tok is None:
            return None
        tok_type, tok_val, pos = tok

        if tok_type in LEAF_TAGS:
            self.advance()
            return AstNode(LEAF_TAGS[tok_type], tok_val, pos=pos)

        if tok_type in GROUP_TAGS:
            self.advance()
            node = AstNode(GROUP_TAGS[tok_type], pos=pos)
            node.children.append(AstNode("char", tok_val, pos=pos))
            closer = CLOSERS[tok_type]
            while True:
                nxt = self.peek()
                if nxt is not None and nxt[0] == closer:
                    self.advance()
                    node.children.append(AstNode("char", nxt[1], pos=nxt[2]))
                    return node
                if nxt is None or nxt[0] in CLOSERS.values():
                    raise self.error(f"{EXPECTED_EXPR} or '{CLOSE_CHARS[closer]}'", nxt)
                node.children.append(self.parse_expr())

        raise self.error(EXPECTED_EXPR, tok)

    def parse_all(self) -> Iterator[AstNode]:
        while True:
            tok = self.peek()
            if tok is None:
                break
            if tok[0] in CLOSERS.values():
                raise self.error(f"{EXPECTED_EXPR} or end of input", tok)
            yield self.parse_expr()


def parse(source: str, filename: str = "<stdin>") -> AstNode:
    """Parse a whole input into a root node anchored at start and end."""
    stream = TokenStream(source, filename)
    root = AstNode(ROOT_TAG)
    root.children.append(AstNode("regex"))
    root.children.extend(stream.parse_all())
    root.children.append(AstNode("regex", pos=len(source)))
    return root
