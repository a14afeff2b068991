"""
binconv Syntax Tree

A closed set of node kinds tagged by NodeType. Nodes are immutable;
a program's children are kept as a tuple in token order.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .tokens import TERMINATOR


class NodeType(Enum):
    PROGRAM = 'Program'
    STRING_LITERAL = 'StringLiteral'
    END_OPERATOR = 'EndOperator'


@dataclass(frozen=True)
class Node:
    """
    Syntax tree node.

    Attributes:
        type: Node kind
        value: Literal text (STRING_LITERAL) or terminator (END_OPERATOR)
        body: Child nodes (PROGRAM only)
    """
    type: NodeType
    value: str = ''
    body: Tuple['Node', ...] = ()


def program(*body: Node) -> Node:
    return Node(NodeType.PROGRAM, body=tuple(body))


def string_literal(value: str) -> Node:
    return Node(NodeType.STRING_LITERAL, value=value)


def end_operator(value: str = TERMINATOR) -> Node:
    return Node(NodeType.END_OPERATOR, value=value)
