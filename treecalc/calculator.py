import logging

import treecalc.vars as vrs
from treecalc.extra.types import Application, ExpressionNode, LexicalToken, Literal
from treecalc.extra.utils import log_exception
from treecalc.tokenizer import Tokenizer
from treecalc.tree_builder import TreeBuilder


class Calculator:

    """
    Class for running the whole pipeline: text -> tokens -> expression tree -> value.
    Intermediate results of the last calc() call are kept for displaying
    :param logger: logger shared with the tokenizer and the tree builder
    """
    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)
        self.tokens: list[LexicalToken] | None = None
        self.tree: ExpressionNode | None = None

    @log_exception
    def calc(self, expression: str) -> float:
        """
        Calculates value of the expression
        :return: value of expression
        :raises PositionedError: the first error met by any of the stages
        """
        self.logger.debug(f"expression: {expression}")
        self.tokens = None
        self.tree = None
        self.tokens = Tokenizer(logger=self.logger).tokenize(expression)
        self.tree = TreeBuilder(logger=self.logger).build_tree(self.tokens)
        result = self.evaluate(self.tree)
        self.logger.debug(f"{result=}")
        return result

    def evaluate(self, node: ExpressionNode) -> float:
        if isinstance(node, Literal):
            return node.value
        if isinstance(node, Application):
            operands = [self.evaluate(operand) for operand in node.operands]
            return vrs.call(node.operation, operands)
        raise TypeError(f"Cannot evaluate '{node}'")
