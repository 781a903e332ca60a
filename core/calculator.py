"""计算器入口 - 串联 词法分析 -> 调度场 -> RPN求值，并处理 export"""
import re
import logging

from config.config import RESERVED_NAMES
from core.errors import ExpressionSyntaxError
from core.tokenizer import tokenize, IDENTIFIER_PATTERN
from core.converter import to_postfix
from core.rpn_evaluator import RPNEvaluator
from core.constants import ConstantTable, StoredConstant

logger = logging.getLogger(__name__)

EXPORT_PATTERN = re.compile(r'^export\b(.*)$', re.DOTALL)


def calculate(expression, constants=None):
    """对普通表达式运行完整流水线，返回float"""
    tokens = tokenize(expression.strip(), constants)
    postfix = to_postfix(tokens)
    return RPNEvaluator.evaluate(postfix)


def parse_export(line):
    """
    拆分 export NAME = EXPRESSION
    Returns:
        (name, expression)，不是export语句时返回None
    """
    match = EXPORT_PATTERN.match(line.strip())
    if match is None:
        return None

    rest = match.group(1)
    if '=' not in rest:
        raise ExpressionSyntaxError("Invalid export syntax, expected: export NAME = EXPRESSION")
    name, expression = rest.split('=', 1)
    name = name.strip()

    if not IDENTIFIER_PATTERN.fullmatch(name) or name in RESERVED_NAMES:
        raise ExpressionSyntaxError(f"Please choose different variable name: '{name}'")
    return name, expression.strip()


def evaluate(line, constants):
    """
    对外唯一入口
    Args:
        line: 一行输入（首尾空白无意义）
        constants: ConstantTable，export 时会被修改
    Returns:
        float 或 StoredConstant
    Raises:
        ExpressionSyntaxError / EvaluationError
    """
    export = parse_export(line)
    if export is None:
        return calculate(line, constants)

    name, expression = export
    value = calculate(expression, constants)
    stored = constants.store(name, value)
    logger.info(f"Stored constant {stored.name} = {stored.value}")
    return stored


class Calculator:
    """持有自己常量表的计算器会话"""

    def __init__(self, constants=None):
        self.constants = constants if constants is not None else ConstantTable()

    def evaluate(self, line):
        return evaluate(line, self.constants)

    def to_rpn(self, expression):
        """返回表达式的后缀Token序列（不求值）"""
        export = parse_export(expression)
        if export is not None:
            expression = export[1]
        return to_postfix(tokenize(expression.strip(), self.constants))

