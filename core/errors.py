"""计算器异常类型"""


class CalculatorError(Exception):
    """所有表达式处理错误的基类"""


class ExpressionSyntaxError(CalculatorError):
    """词法/语法错误：未知符号、括号不匹配、操作符位置错误等"""


class EvaluationError(CalculatorError):
    """求值错误：操作数不足、除零、结果栈不为1等"""
