"""词法分析器 - 把一行文本扫描为Token序列，常量在扫描时替换为数值"""
import re
import logging

from core.errors import ExpressionSyntaxError
from core.token_system import (
    TokenType, TOKEN_DEFINITIONS, OPERATOR_METADATA, FUNCTION_NAMES, number_token
)

logger = logging.getLogger(__name__)

NUMBER_PATTERN = re.compile(r'\d+(?:\.\d*)?|\.\d+')
IDENTIFIER_PATTERN = re.compile(r'[^\W\d]\w*')
PUNCTUATION = set(OPERATOR_METADATA) | {'(', ')'}


class Tokenizer:
    """
    逐字符扫描的状态机

    一元负号的处理：
      - 紧跟数字或常量时，直接折叠进数值（-5 -> NUMBER(-5)）
      - 紧跟 ( 或函数调用时，改写为 ( -1 * <操作数> )，
        右括号在操作数自身的括号闭合时补上
    """

    def __init__(self, expression, constants=None):
        self.text = expression
        self.constants = constants if constants is not None else {}
        self.pos = 0
        self.depth = 0
        self.tokens = []
        self._pending_closes = []  # 需要补右括号的括号深度

    def tokenize(self):
        while True:
            self._skip_whitespace()
            if self.pos >= len(self.text):
                break
            ch = self.text[self.pos]

            if ch.isdigit() or ch == '.':
                self.tokens.append(number_token(self._read_number()))
            elif ch.isalpha() or ch == '_':
                self._read_identifier(negate=False)
            elif ch == '-' and self._expects_operand():
                self.pos += 1
                self._unary_minus()
            elif ch in OPERATOR_METADATA:
                self.tokens.append(TOKEN_DEFINITIONS[ch])
                self.pos += 1
            elif ch == '(':
                self.tokens.append(TOKEN_DEFINITIONS['('])
                self.depth += 1
                self.pos += 1
            elif ch == ')':
                self.tokens.append(TOKEN_DEFINITIONS[')'])
                self.depth -= 1
                self.pos += 1
                while self._pending_closes and self._pending_closes[-1] == self.depth:
                    self._pending_closes.pop()
                    self.tokens.append(TOKEN_DEFINITIONS[')'])
            else:
                raise ExpressionSyntaxError(f"Invalid character found: '{self._bad_fragment()}'")

        logger.debug(f"Tokens: {self.tokens}")
        return self.tokens

    # ------------------------------------------------------------------
    def _skip_whitespace(self):
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def _expects_operand(self):
        """表达式开头、( 之后、操作符之后为操作数位置"""
        if not self.tokens:
            return True
        return self.tokens[-1].type in (TokenType.OPERATOR, TokenType.LPAREN, TokenType.FUNCTION)

    def _read_number(self):
        match = NUMBER_PATTERN.match(self.text, self.pos)
        if match is None:
            raise ExpressionSyntaxError(f"Invalid number: '{self._bad_fragment()}'")
        self.pos = match.end()
        return float(match.group())

    def _read_identifier(self, negate):
        match = IDENTIFIER_PATTERN.match(self.text, self.pos)
        name = match.group()
        self.pos = match.end()

        if name in FUNCTION_NAMES:
            if negate:
                self._open_negation()
            self._function(name)
            return

        if name not in self.constants:
            raise ExpressionSyntaxError(f"Unknown identifier: '{name}'")
        value = float(self.constants[name])
        self.tokens.append(number_token(-value if negate else value))

    def _function(self, name):
        # 函数名后必须是 (，中间允许空白
        self._skip_whitespace()
        if self.pos >= len(self.text) or self.text[self.pos] != '(':
            raise ExpressionSyntaxError(f"Function '{name}' must be followed by '('")
        self.tokens.append(TOKEN_DEFINITIONS[name])

    def _unary_minus(self):
        self._skip_whitespace()
        if self.pos >= len(self.text):
            raise ExpressionSyntaxError("Invalid syntax: expected operand after unary '-'")
        ch = self.text[self.pos]

        if ch.isdigit() or ch == '.':
            self.tokens.append(number_token(-self._read_number()))
        elif ch.isalpha() or ch == '_':
            self._read_identifier(negate=True)
        elif ch == '(':
            self._open_negation()
        else:
            # 连续的一元操作符（--5）等
            raise ExpressionSyntaxError(
                f"Invalid syntax: expected number, constant or '(' after unary '-', got '{ch}'"
            )

    def _open_negation(self):
        """写入 ( -1 * ，并记录在当前深度补右括号"""
        self.tokens.append(TOKEN_DEFINITIONS['('])
        self.tokens.append(number_token(-1.0))
        self.tokens.append(TOKEN_DEFINITIONS['*'])
        self._pending_closes.append(self.depth)

    def _bad_fragment(self):
        end = self.pos + 1
        while end < len(self.text):
            ch = self.text[end]
            if ch.isspace() or ch.isalnum() or ch in PUNCTUATION or ch in '._':
                break
            end += 1
        return self.text[self.pos:end]


def tokenize(expression, constants=None):
    """扫描表达式，返回中缀Token序列"""
    return Tokenizer(expression, constants).tokenize()
