"""Parse and evaluate arithmetic operations safely."""
from typing import List, Sequence, Tuple

from arithmetic_evaluator.common.errors import ExpressionError, ParsingError
from arithmetic_evaluator.common.expressions import Expression, Number, combine, evaluate
from arithmetic_evaluator.common.lexer import lex
from arithmetic_evaluator.common.logger import logger
from arithmetic_evaluator.common.operations import OperationError, OperationOutcome, OperationResult
from arithmetic_evaluator.common.tokens import NumberToken, OperatorToken, Token, precedence, render_tokens


class ExpressionParser:
    """
    Parse and evaluate arithmetic expressions safely.

    Design constraints:
        - No eval(), no dynamic code execution
        - No grammar or recursive descent: precedence is resolved by staged reduction

    Algorithm:
        1. Lex the string into Number and Operator tokens
        2. Collapse every run of multiplications/divisions into a single Number token
        3. Collapse every run of additions/subtractions the same way
        4. Reduce what is left, a single Number, into the result

    Each run is folded left to right into an expression tree and evaluated as soon
    as the run ends, so higher-precedence runs are already numbers by the time
    lower-precedence operators see them.

    Examples:
        - 2 + 3 * 4 - 1
        - after level 1: 2 + 12 - 1
        - after level 0: 13
    """

    @staticmethod
    def _is_number(tokens: Sequence[Token], index: int) -> bool:
        """Tell whether ``tokens[index]`` exists and is a NumberToken."""
        return index < len(tokens) and isinstance(tokens[index], NumberToken)

    @staticmethod
    def _is_operator(tokens: Sequence[Token], index: int) -> bool:
        """Tell whether ``tokens[index]`` exists and is an OperatorToken."""
        return index < len(tokens) and isinstance(tokens[index], OperatorToken)

    @staticmethod
    def reduce(tokens: Sequence[Token]) -> Tuple[Number, List[Token]]:
        """
        Fold the leading run of same-precedence operations into one value.

        The target precedence is the one of the first operator. Folding stops at
        the first operator of another precedence, or at the end of the tokens.

        :param Sequence[Token] tokens: Tokens starting Number, Operator, Number, ...

        :return: Evaluated run and the tokens left unconsumed
        :rtype: Tuple[Number, List[Token]]
        :raises ParsingError: If the tokens do not alternate Number and Operator
        :raises ArithmeticEvaluationError: If the run divides by a literal zero
        """
        if len(tokens) == 1 and ExpressionParser._is_number(tokens, 0):
            return Number(value=tokens[0].value), []
        if not (ExpressionParser._is_number(tokens, 0) and ExpressionParser._is_operator(tokens, 1)):
            raise ParsingError("reduce", render_tokens(tokens))

        target: int = precedence(tokens[1].operator)
        expr: Expression = Number(value=tokens[0].value)
        index: int = 1
        while index < len(tokens):
            if not ExpressionParser._is_operator(tokens, index):
                raise ParsingError("reduce", render_tokens(tokens[index:]))
            op = tokens[index].operator
            if precedence(op) != target:
                break
            if not ExpressionParser._is_number(tokens, index + 1):
                raise ParsingError("reduce", render_tokens(tokens[index:]))
            expr = combine(expr, Number(value=tokens[index + 1].value), op)
            index += 2

        return Number(value=evaluate(expr)), list(tokens[index:])

    @staticmethod
    def parse_by_prec(tokens: Sequence[Token], level: int) -> List[Token]:
        """
        Replace every run of operators at precedence ``level`` with its value.

        Number/Operator pairs at other levels are copied through untouched.

        :param Sequence[Token] tokens: Number, Operator, ..., Number chain
        :param int level: Precedence level to collapse

        :return: New chain without operators of precedence ``level``
        :rtype: List[Token]
        :raises ParsingError: If the tokens do not alternate Number and Operator
        """
        output: List[Token] = []
        remaining: List[Token] = list(tokens)

        while True:
            if ExpressionParser._is_number(remaining, 0) and ExpressionParser._is_operator(remaining, 1):
                if precedence(remaining[1].operator) == level:
                    # Fold the run, then keep scanning from its placeholder
                    reduced, rest = ExpressionParser.reduce(remaining)
                    remaining = [NumberToken(value=reduced.value), *rest]
                else:
                    output.extend(remaining[:2])
                    remaining = remaining[2:]
            elif len(remaining) == 1 and ExpressionParser._is_number(remaining, 0):
                output.append(remaining[0])
                return output
            else:
                raise ParsingError("parse_by_prec", render_tokens(remaining))

    @staticmethod
    def parse(tokens: Sequence[Token]) -> Number:
        """
        Reduce a token chain by descending order of precedence.

        :param Sequence[Token] tokens: Tokens produced by the lexer

        :return: Evaluated expression
        :rtype: Number
        :raises ParsingError: If the tokens are not a well-formed chain
        :raises ArithmeticEvaluationError: If a literal zero is used as a divisor
        """
        chain: List[Token] = ExpressionParser.parse_by_prec(tokens, 1)
        chain = ExpressionParser.parse_by_prec(chain, 0)
        result, rest = ExpressionParser.reduce(chain)
        if rest:
            raise ParsingError("parse", render_tokens(rest))
        return result

    @staticmethod
    def evaluate(expr: str) -> float:
        """
        Evaluate an arithmetic expression safely.

        :param str expr: Arithmetic expression string

        :return: Computed result as float
        :rtype: float
        :raises LexicalError: If the string contains an unsupported character
        :raises ParsingError: If the expression is malformed
        :raises ArithmeticEvaluationError: If the expression divides by a literal zero
        """
        tokens: List[Token] = lex(expr)
        logger.debug(f"🔤 Lexed {expr!r} into {render_tokens(tokens)!r}")
        return ExpressionParser.parse(tokens).value

    @staticmethod
    def interpret(expr: str) -> OperationOutcome:
        """
        Evaluate an expression without raising for invalid input.

        :param str expr: Arithmetic expression string

        :return: OperationResult on success, OperationError describing the failure otherwise
        :rtype: OperationOutcome
        """
        try:
            return OperationResult(expression=expr, result=ExpressionParser.evaluate(expr))
        except ExpressionError as exc:
            logger.debug(f"🧮❌ {exc.kind.value} error for {expr!r}: {exc}")
            return OperationError(expression=expr, error_kind=exc.kind, message=str(exc))
