"""core/token_system.py"""
from enum import Enum
from types import MappingProxyType


class TokenType(Enum):
    NUMBER = "number"      # 数值（常量已替换为数值）
    OPERATOR = "operator"  # 二元操作符 + - * / ^
    FUNCTION = "function"  # 三角函数 sin cos tg ctg
    LPAREN = "lparen"      # (
    RPAREN = "rparen"      # )


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


class Token:
    """不可变的Token：类型 + 名称 + 数值"""

    __slots__ = ('_type', '_name', '_value')

    def __init__(self, token_type, name, value=None):
        object.__setattr__(self, '_type', token_type)
        object.__setattr__(self, '_name', name)
        object.__setattr__(self, '_value', value)

    def __setattr__(self, key, value):
        raise AttributeError("Token is immutable")

    @property
    def type(self):
        return self._type

    @property
    def name(self):
        return self._name

    @property
    def value(self):
        return self._value

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self._type, self._name, self._value) == (other._type, other._name, other._value)

    def __hash__(self):
        return hash((self._type, self._name, self._value))

    def __repr__(self):
        if self._type == TokenType.NUMBER:
            return f"Token(NUMBER, {self._value!r})"
        return f"Token({self._type.name}, {self._name!r})"


def number_token(value):
    """创建数值Token"""
    return Token(TokenType.NUMBER, 'num', float(value))


# 操作符元数据：优先级 + 结合性（只读）
OPERATOR_METADATA = MappingProxyType({
    '+': (1, Associativity.LEFT),
    '-': (1, Associativity.LEFT),
    '*': (2, Associativity.LEFT),
    '/': (2, Associativity.LEFT),
    '^': (3, Associativity.RIGHT),
})

FUNCTION_NAMES = ('sin', 'cos', 'tg', 'ctg')

# Token定义字典（数值Token在扫描时动态创建）
TOKEN_DEFINITIONS = {
    # 括号
    '(': Token(TokenType.LPAREN, '('),
    ')': Token(TokenType.RPAREN, ')'),

    # 二元操作符
    '+': Token(TokenType.OPERATOR, '+'),
    '-': Token(TokenType.OPERATOR, '-'),
    '*': Token(TokenType.OPERATOR, '*'),
    '/': Token(TokenType.OPERATOR, '/'),
    '^': Token(TokenType.OPERATOR, '^'),

    # 三角函数（角度制）
    'sin': Token(TokenType.FUNCTION, 'sin'),
    'cos': Token(TokenType.FUNCTION, 'cos'),
    'tg': Token(TokenType.FUNCTION, 'tg'),
    'ctg': Token(TokenType.FUNCTION, 'ctg'),
}


def precedence(token):
    return OPERATOR_METADATA[token.name][0]


def associativity(token):
    return OPERATOR_METADATA[token.name][1]
