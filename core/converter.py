"""中缀 -> 后缀（RPN）转换器 - 调度场算法"""
import logging

from core.errors import ExpressionSyntaxError
from core.token_system import TokenType, Associativity, precedence, associativity
from utils.formatting import format_rpn

logger = logging.getLogger(__name__)


class InfixToPostfixConverter:
    """
    经典调度场算法：
      - 数值直接输出
      - 函数和 ( 入栈，) 弹出到匹配的 ( 为止，其下的函数随之输出
      - 操作符入栈前弹出优先级更高（或同级且左结合）的操作符

    同时检查操作数/操作符是否交替出现，以便在转换阶段报告语法错误
    """

    @staticmethod
    def convert(tokens):
        if not tokens:
            raise ExpressionSyntaxError("Empty expression")

        output = []
        stack = []
        expect_operand = True  # 当前位置是否需要操作数

        for token in tokens:
            if token.type == TokenType.NUMBER:
                if not expect_operand:
                    raise ExpressionSyntaxError(f"Missing operator before {token.value:g}")
                output.append(token)
                expect_operand = False

            elif token.type == TokenType.FUNCTION:
                if not expect_operand:
                    raise ExpressionSyntaxError(f"Missing operator before '{token.name}'")
                stack.append(token)

            elif token.type == TokenType.LPAREN:
                if not expect_operand:
                    raise ExpressionSyntaxError("Missing operator before '('")
                stack.append(token)

            elif token.type == TokenType.RPAREN:
                if expect_operand:
                    raise ExpressionSyntaxError("Invalid syntax: expected operand before ')'")
                while stack and stack[-1].type != TokenType.LPAREN:
                    output.append(stack.pop())
                if not stack:
                    raise ExpressionSyntaxError("Mismatched parentheses.")
                stack.pop()  # 丢弃 (
                if stack and stack[-1].type == TokenType.FUNCTION:
                    output.append(stack.pop())

            elif token.type == TokenType.OPERATOR:
                if expect_operand:
                    raise ExpressionSyntaxError(f"Invalid syntax: unexpected operator '{token.name}'")
                current_prec = precedence(token)
                left_assoc = associativity(token) == Associativity.LEFT
                while stack and stack[-1].type == TokenType.OPERATOR:
                    top_prec = precedence(stack[-1])
                    if top_prec > current_prec or (top_prec == current_prec and left_assoc):
                        output.append(stack.pop())
                    else:
                        break
                stack.append(token)
                expect_operand = True

            else:
                raise ExpressionSyntaxError(f"Unexpected token: {token!r}")

        if expect_operand:
            raise ExpressionSyntaxError("Invalid syntax: expected operand at end of expression")

        while stack:
            top = stack.pop()
            if top.type == TokenType.LPAREN:
                raise ExpressionSyntaxError("Mismatched parentheses.")
            output.append(top)

        logger.debug(f"RPN: {format_rpn(output)}")
        return output


def to_postfix(tokens):
    """中缀Token序列 -> 后缀Token序列"""
    return InfixToPostfixConverter.convert(tokens)
