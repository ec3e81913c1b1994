"""Turn an arithmetic expression string into tokens."""
import re
from typing import List, Pattern

from arithmetic_evaluator.common.errors import LexicalError
from arithmetic_evaluator.common.tokens import NumberToken, Operator, OperatorToken, Token


# Named groups tried in order; MISMATCH catches anything else
TOKEN_SPECIFICATION: List[tuple[str, str]] = [
    ("NUMBER", r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+"),
    ("OPERATOR", r"[-+*/]"),
    ("SKIP", r"\s+"),
    ("MISMATCH", r"."),
]

TOKEN_PATTERN: Pattern[str] = re.compile(
    "|".join(f"(?P<{name}>{pattern})" for name, pattern in TOKEN_SPECIFICATION),
    re.DOTALL,
)


def lex(expr: str) -> List[Token]:
    """
    Split an arithmetic expression into number and operator tokens.

    Whitespace is optional between tokens (``"3+4"`` and ``"3 + 4"`` lex the same).
    Whether the tokens form a valid Number/Operator chain is left to the parser.

    :param str expr: Arithmetic expression as a string

    :return: Tokens in order of appearance
    :rtype: List[Token]
    :raises LexicalError: If a character is neither a digit, a decimal point,
        an operator symbol nor whitespace
    """
    tokens: List[Token] = []
    for match in TOKEN_PATTERN.finditer(expr):
        kind = match.lastgroup
        text = match.group()
        if kind == "NUMBER":
            tokens.append(NumberToken(value=float(text)))
        elif kind == "OPERATOR":
            tokens.append(OperatorToken(operator=Operator(text)))
        elif kind == "MISMATCH":
            raise LexicalError(text, match.start())
    return tokens
