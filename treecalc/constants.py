import logging
import string

FORMAT = "[%(levelname)s - %(funcName)4s() ] %(message)s"
LOG_FILE = "logs/treecalc.log"
LOG_LEVEL = logging.DEBUG

DEFAULT_EXPRESSION = "3(4 + 5) / .5 ^ 2 + 1"

DIGITS = set(string.digits)
SPACE = " "
