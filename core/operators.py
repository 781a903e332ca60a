"""core/operators.py"""
import numpy as np

from core.errors import EvaluationError


class Operators:
    """所有操作符和函数的静态方法集合，输入输出均为float"""

    # 二元操作符========================================
    @staticmethod
    def add(operand1, operand2):
        with np.errstate(all='ignore'):
            return float(np.add(operand1, operand2))

    @staticmethod
    def sub(operand1, operand2):
        with np.errstate(all='ignore'):
            return float(np.subtract(operand1, operand2))

    @staticmethod
    def mul(operand1, operand2):
        with np.errstate(all='ignore'):
            return float(np.multiply(operand1, operand2))

    @staticmethod
    def div(operand1, operand2):
        """除法，除数为0时报错"""
        if operand2 == 0:
            raise EvaluationError("Division by zero")
        with np.errstate(all='ignore'):
            return float(np.divide(operand1, operand2))

    @staticmethod
    def pow(operand1, operand2):
        """
        浮点幂运算
        负数的分数次幂返回nan，溢出返回inf（不产生复数）
        """
        with np.errstate(all='ignore'):
            return float(np.power(np.float64(operand1), np.float64(operand2)))

    # 三角函数（角度制）================================
    @staticmethod
    def _is_tangent_pole(degrees):
        """90°的奇数倍处正切无定义"""
        return np.isfinite(degrees) and degrees % 180.0 == 90.0

    @staticmethod
    def sin(degrees):
        with np.errstate(all='ignore'):
            return float(np.sin(np.radians(degrees)))

    @staticmethod
    def cos(degrees):
        with np.errstate(all='ignore'):
            return float(np.cos(np.radians(degrees)))

    @staticmethod
    def tg(degrees):
        if Operators._is_tangent_pole(degrees):
            raise EvaluationError(f"Undefined tangent value for {degrees:g} degrees")
        with np.errstate(all='ignore'):
            return float(np.tan(np.radians(degrees)))

    @staticmethod
    def ctg(degrees):
        if Operators._is_tangent_pole(degrees):
            return 0.0
        with np.errstate(all='ignore'):
            tangent = np.tan(np.radians(degrees))
        if tangent == 0:
            raise EvaluationError("Division by zero: cotangent of a zero tangent")
        return float(1.0 / tangent)


# 符号 -> 方法
BINARY_OPERATORS = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
    '^': Operators.pow,
}

FUNCTIONS = {
    'sin': Operators.sin,
    'cos': Operators.cos,
    'tg': Operators.tg,
    'ctg': Operators.ctg,
}
