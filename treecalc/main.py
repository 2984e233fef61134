import argparse
import logging
from pathlib import Path
from sys import stderr

import treecalc.constants as cst
from treecalc.calculator import Calculator
from treecalc.display import format_error, format_result, format_tokens
from treecalc.extra.exceptions import LexerError, PositionedError

logger = logging.getLogger(__name__)


def configure_logging(log_file: str, verbose: bool = False):
    """
    Sets up logging to 'log_file' (and to stderr if verbose)
    """
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    handlers: list[logging.Handler] = [logging.FileHandler(log_file, mode="a", encoding="utf-8")]
    if verbose:
        handlers.append(logging.StreamHandler(stderr))
    logging.basicConfig(
        level=cst.LOG_LEVEL,
        handlers=handlers,
        format=cst.FORMAT,
        force=True
    )


def parse_args(argv: list[str] | None = None) -> tuple[argparse.Namespace, list[str]]:
    """
    Parses options. Every other word belongs to the expression, including ones
    starting with '-' (unary minus)
    :return: options and the expression words in their original order
    """
    parser = argparse.ArgumentParser(prog="treecalc", usage="%(prog)s [--log-file LOG_FILE] [-v] expression ...",
                                     description="Calculates an arithmetic expression")
    parser.add_argument("--log-file", default=cst.LOG_FILE)
    parser.add_argument("-v", "--verbose", action="store_true", help="also log to stderr")
    return parser.parse_known_args(argv)


def run(expression: str) -> list[str]:
    """
    Calculates the expression and builds lines to print
    :param expression: expression to calculate
    :return: token echo and the result, or the error instead of whatever could not be built
    """
    lines = []
    calc = Calculator(logger=logger)
    try:
        result = calc.calc(expression)
    except LexerError as e:
        lines.append(format_error(e))
    except PositionedError as e:
        lines.append(format_tokens(calc.tokens or []))
        lines.append(format_error(e))
    else:
        lines.append(format_tokens(calc.tokens))  # type: ignore
        lines.append(format_result(calc.tree, result))  # type: ignore
    return lines


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for application. Joins arguments into a single expression and prints its value
    """
    args, words = parse_args(argv)
    configure_logging(args.log_file, args.verbose)
    expression = " ".join(words) or cst.DEFAULT_EXPRESSION
    for line in run(expression):
        print(line)
    return 0


if __name__ == "__main__":
    main()
