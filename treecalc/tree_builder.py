import logging
from typing import Sequence

import treecalc.vars as vrs
from treecalc.extra.exceptions import InvalidTokenError, UnsupportedArityError
from treecalc.extra.types import (Application, ExpressionNode, Group, LexicalToken, Literal, NumberLiteral,
                                  OperatorMark)
from treecalc.extra.utils import log_exception


class TreeBuilder:
    """
    Builds an expression tree from tokens by splitting at the weakest binding operator
    """
    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)

    @log_exception
    def build_tree(self, tokens: Sequence[LexicalToken]) -> ExpressionNode:
        """
        Converts list of tokens to an expression tree
        :param tokens: tokens produced by the Tokenizer
        :return: root of the tree
        :raises TreeBuildError: tokens can't form an expression
        """
        tree = self._build(tokens)
        self.logger.debug(f"{tree=}")
        return tree

    def _build(self, tokens: Sequence[LexicalToken]) -> ExpressionNode:
        if len(tokens) == 1:
            token = tokens[0]
            if isinstance(token, NumberLiteral):
                return Literal(token.value)
            if isinstance(token, Group):
                return self._build(token.children)
            raise InvalidTokenError.unindexed(
                f"Invalid token: operator '{token.operator.symbol}' has no operand", exc_type="invalid_token")

        if not tokens:
            raise InvalidTokenError.unindexed("Missing operand", exc_type="missing_operand")

        split: int | None = None
        for index, token in enumerate(tokens):
            if not isinstance(token, OperatorMark):
                continue
            # strict '<': on a tie the leftmost operator stays the split point
            if split is None or token.operator.priority < tokens[split].operator.priority:  # type: ignore
                split = index

        if split is None:
            raise InvalidTokenError.unindexed(
                "Ambiguous numbers: no operator between them", exc_type="ambiguous_numbers")

        operator = tokens[split].operator  # type: ignore
        if operator.arity == 1:
            # tokens before a unary operator are dropped
            operands = (self._build(tokens[split + 1:]),)
        elif operator.arity == 2:
            operands = (self._build(tokens[:split]), self._build(tokens[split + 1:]))
        else:
            raise UnsupportedArityError.unindexed(f"Unsupported arity {operator.arity} of '{operator.symbol}'")
        return Application(vrs.from_operator(operator), operands)
