"""核心模块 - Token系统、词法分析、调度场转换、RPN求值和常量表"""
from .token_system import (
    TokenType, Token, Associativity, TOKEN_DEFINITIONS, OPERATOR_METADATA,
    FUNCTION_NAMES, number_token
)
from .errors import CalculatorError, ExpressionSyntaxError, EvaluationError
from .tokenizer import Tokenizer, tokenize
from .converter import InfixToPostfixConverter, to_postfix
from .operators import Operators
from .rpn_evaluator import RPNEvaluator
from .constants import ConstantTable, StoredConstant
from .calculator import Calculator, calculate, evaluate, parse_export

__all__ = [
    'TokenType', 'Token', 'Associativity', 'TOKEN_DEFINITIONS', 'OPERATOR_METADATA',
    'FUNCTION_NAMES', 'number_token',
    'CalculatorError', 'ExpressionSyntaxError', 'EvaluationError',
    'Tokenizer', 'tokenize', 'InfixToPostfixConverter', 'to_postfix',
    'Operators', 'RPNEvaluator', 'ConstantTable', 'StoredConstant',
    'Calculator', 'calculate', 'evaluate', 'parse_export'
]
