import logging
from dataclasses import dataclass, field

import treecalc.constants as cst
from treecalc.extra import exceptions as ex_exc
from treecalc.extra.types import Group, LexicalToken, NumberLiteral, Operator, OperatorMark
from treecalc.extra.utils import log_exception

SYMBOLS_OPERATORS_ENUM: dict[str, Operator] = {
        "+": Operator.ADD,
        "*": Operator.MULTIPLY,
        "/": Operator.DIVIDE,
        "^": Operator.POWER,
    }


@dataclass
class ScanState:
    """
    State of a single scan over (a part of) the expression
    :param tokens: tokens emitted so far
    :param int_part: digits before the decimal point of the number being read
    :param float_part: digits after the decimal point of the number being read
    :param is_float: decimal point met in the number being read
    :param depth: current parenthesis depth
    :param group_start: index of the outermost opening parenthesis
    """
    tokens: list[LexicalToken] = field(default_factory=list)
    int_part: str = ""
    float_part: str = ""
    is_float: bool = False
    depth: int = 0
    group_start: int = 0

    def last_is_group(self) -> bool:
        return bool(self.tokens) and isinstance(self.tokens[-1], Group)

    def place_token(self, token: LexicalToken):
        self.tokens.append(token)

    def place_operator(self, operator: Operator):
        self.tokens.append(OperatorMark(operator))


class Tokenizer:
    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)

    @log_exception
    def tokenize(self, expression: str) -> list[LexicalToken]:
        """
        Tokenizes the expression
        :param expression: raw mathematical expression
        :return: list of tokens, every parenthesized part is packed in a Group
        :raises LexerError: positioned at the faulty character of 'expression'
        """
        tokens = self._scan(expression, 0, len(expression))
        self.logger.debug(f"{tokens=}")
        return tokens

    def _compute_number(self, state: ScanState, source: str, index: int):
        """
        Flushes the number being read into a NumberLiteral
        :param index: position reported if the number can't be parsed
        """
        if state.last_is_group():
            return
        number = state.int_part + "." + state.float_part
        try:
            value = float(number)
        except ValueError:
            raise ex_exc.InvalidNumberError.indexed("Invalid number", source, index)
        state.place_token(NumberLiteral(value))
        state.int_part = ""
        state.float_part = ""
        state.is_float = False

    def _scan(self, source: str, start: int, end: int) -> list[LexicalToken]:
        """
        Scans source[start:end]. Indexes stay absolute so errors point into the whole source
        """
        state = ScanState(group_start=start)

        for index in range(start, end):
            s = source[index]
            in_group = state.depth > 0

            if s in cst.DIGITS:
                if in_group:
                    continue
                if state.last_is_group():
                    state.place_operator(Operator.MULTIPLY)  # (1+2)3
                if state.is_float:
                    state.float_part += s
                else:
                    state.int_part += s

            elif s == ".":
                if in_group:
                    continue
                if state.is_float:
                    raise ex_exc.InvalidNumberError.indexed("Invalid number", source, index)
                if not state.int_part:
                    state.int_part = "0"  # .5
                state.is_float = True

            elif s in SYMBOLS_OPERATORS_ENUM:
                if in_group:
                    continue
                self._compute_number(state, source, index)
                state.place_operator(SYMBOLS_OPERATORS_ENUM[s])

            elif s == "-":
                if in_group:
                    continue
                # only the buffer is checked: '-' right after a group is read as unary
                if not state.int_part:
                    state.place_operator(Operator.NEGATE)
                else:
                    self._compute_number(state, source, index)
                    state.place_operator(Operator.SUBTRACT)

            elif s == "(":
                if state.int_part:
                    self._compute_number(state, source, index)
                    state.place_operator(Operator.MULTIPLY)  # 3(4+5)
                if state.depth == 0:
                    state.group_start = index
                state.depth += 1

            elif s == ")":
                state.depth -= 1
                if state.depth == 0:
                    if not source[state.group_start + 1:index].strip(cst.SPACE):
                        raise ex_exc.InvalidParenthesisError.indexed(
                            "Empty parenthesis", source, state.group_start, exc_type="empty")
                    children = self._scan(source, state.group_start + 1, index)
                    state.place_token(Group(tuple(children)))

            elif s == cst.SPACE or in_group:
                continue

            else:
                raise ex_exc.InvalidCharacterError.indexed("Invalid character", source, index)

        if state.depth != 0:
            raise ex_exc.InvalidParenthesisError.indexed(
                "Parenthesis not closed", source, end - 1, exc_type="not_closed")

        if state.int_part:
            self._compute_number(state, source, end)

        return state.tokens
