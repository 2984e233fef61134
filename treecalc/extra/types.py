from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union


class Operator(Enum):
    """
    Operators the tokenizer can emit
    :param symbol: glyph used when echoing tokens (NEGATE shares '-' with SUBTRACT)
    :param arity: amount of operands
    :param priority: precedence rank, the higher the tighter it binds
    """
    ADD = ("+", 2, 1)
    SUBTRACT = ("-", 2, 1)
    MULTIPLY = ("*", 2, 2)
    DIVIDE = ("/", 2, 2)
    POWER = ("^", 2, 3)
    NEGATE = ("-", 1, 4)

    def __init__(self, symbol: str, arity: int, priority: int):
        self.symbol = symbol
        self.arity = arity
        self.priority = priority


@dataclass(frozen=True)
class NumberLiteral:
    value: float


@dataclass(frozen=True)
class OperatorMark:
    operator: Operator


@dataclass(frozen=True)
class Group:
    """
    Fully parenthesized sub-expression
    :param children: tokens found between the parenthesis, may contain other groups
    """
    children: tuple["LexicalToken", ...]


LexicalToken = Union[NumberLiteral, OperatorMark, Group]


@dataclass(frozen=True)
class Operation:
    """
    Class representing a numeric operation
    :param name: name used when the expression tree is printed
    :param arity: amount of operands 'callable_function' takes
    :param callable_function: function that will be called with the operands
    """
    name: str
    arity: int
    callable_function: Callable[..., float]


@dataclass(frozen=True)
class Literal:
    value: float


@dataclass(frozen=True)
class Application:
    operation: Operation
    operands: tuple["ExpressionNode", ...]

    @property
    def arity(self) -> int:
        return len(self.operands)


ExpressionNode = Union[Literal, Application]
