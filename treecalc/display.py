from typing import Iterable

from treecalc.extra.exceptions import PositionedError
from treecalc.extra.types import Application, ExpressionNode, Group, LexicalToken, Literal, NumberLiteral, \
    OperatorMark
from treecalc.extra.utils import format_number


def format_token(token: LexicalToken) -> str:
    if isinstance(token, NumberLiteral):
        return format_number(token.value)
    if isinstance(token, OperatorMark):
        return f" {token.operator.symbol} "
    if isinstance(token, Group):
        return f"({format_tokens(token.children)})"
    raise TypeError(f"Unknown token: '{token}'")


def format_tokens(tokens: Iterable[LexicalToken]) -> str:
    """
    Rebuilds printable form of the tokens
    :param tokens: tokens to print
    :return: e.g. '3 * (4 + 5)'
    """
    return "".join(format_token(token) for token in tokens)


def format_tree(node: ExpressionNode) -> str:
    """
    Prints the tree in call notation, e.g. 'add(1, mul(2, 3))'
    """
    if isinstance(node, Literal):
        return format_number(node.value)
    if isinstance(node, Application):
        args = ", ".join(format_tree(operand) for operand in node.operands)
        return f"{node.operation.name}({args})"
    raise TypeError(f"Unknown node: '{node}'")


def format_result(node: ExpressionNode, value: float) -> str:
    return f"{format_tree(node)} = {format_number(value)}"


def format_error(error: PositionedError) -> str:
    return f"Error: {error}"
