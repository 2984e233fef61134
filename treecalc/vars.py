from typing import Sequence

import numpy as np

from treecalc.extra.exceptions import ArityMismatchError
from treecalc.extra.types import Operation, Operator

OPERATIONS: dict[Operator, Operation] = {
        Operator.ADD: Operation("add", 2, np.add),
        Operator.SUBTRACT: Operation("sub", 2, np.subtract),
        Operator.MULTIPLY: Operation("mul", 2, np.multiply),
        Operator.DIVIDE: Operation("div", 2, np.divide),
        Operator.NEGATE: Operation("inv", 1, np.negative),
        Operator.POWER: Operation("pow", 2, np.power),
    }


def from_operator(operator: Operator) -> Operation:
    return OPERATIONS[operator]


def call(operation: Operation, operands: Sequence[float]) -> float:
    """
    Calls operation on the operands. Division by zero and invalid powers are not errors:
    they give inf or nan like plain IEEE-754 doubles do
    :param operation: operation to call
    :param operands: numbers passed as arguments
    :return: result of the operation
    :raises ArityMismatchError: if amount of operands differs from operation arity
    """
    if len(operands) != operation.arity:
        raise ArityMismatchError.unindexed(
            f"{operation.name} requires {operation.arity} arguments but {len(operands)} were given")
    args = [np.float64(operand) for operand in operands]
    with np.errstate(all="ignore"):
        return float(operation.callable_function(*args))
