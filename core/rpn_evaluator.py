"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import EvaluationError
from core.token_system import TokenType
from core.operators import BINARY_OPERATORS, FUNCTIONS

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence):
        """
        评估后缀Token序列
        Args:
            token_sequence: 后缀顺序的Token列表
        Returns:
            float结果
        Raises:
            EvaluationError: 操作数不足、除零、栈未归约为单个值
        """
        stack = []

        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack.append(token.value)

            # ================== 二元操作符 ==================
            elif token.type == TokenType.OPERATOR:
                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {token.name}, stack={stack}")
                    raise EvaluationError(f"Insufficient operands for '{token.name}'")
                operand2 = stack.pop()
                operand1 = stack.pop()
                stack.append(BINARY_OPERATORS[token.name](operand1, operand2))

            # ================== 三角函数 ==================
            elif token.type == TokenType.FUNCTION:
                if not stack:
                    logger.debug(f"Insufficient operands for {token.name}")
                    raise EvaluationError(f"Insufficient operands for '{token.name}'")
                stack.append(FUNCTIONS[token.name](stack.pop()))

            else:
                # 括号不应出现在后缀序列中
                raise EvaluationError(f"Malformed expression: unexpected {token!r} in RPN")

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise EvaluationError("Malformed expression")

        return stack[0]
