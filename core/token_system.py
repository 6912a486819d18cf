"""core/token_system.py"""
from enum import Enum

from utils.formatting import format_result


class TokenType(Enum):
    NUMBER = "number"  # 数值字面量
    OPERATOR = "operator"  # 二元中缀操作符
    FUNCTION = "function"  # 一元前缀函数
    OPEN_PAREN = "open_paren"  # (
    CLOSE_PAREN = "close_paren"  # )


class Token:
    """词法单元，创建后不可修改"""

    __slots__ = ('type', 'value')

    def __init__(self, token_type, value=None):
        object.__setattr__(self, 'type', token_type)
        object.__setattr__(self, 'value', value)

    def __setattr__(self, name, value):
        raise AttributeError(f"Token is immutable, cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Token is immutable, cannot delete {name!r}")

    # 不可变对象，拷贝直接返回自身
    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (Token, (self.type, self.value))

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self):
        return hash((self.type, self.value))

    def __repr__(self):
        if self.value is None:
            return f"Token({self.type.name})"
        return f"Token({self.type.name}, {self.value!r})"

    @classmethod
    def number(cls, value):
        return cls(TokenType.NUMBER, float(value))

    @classmethod
    def operator(cls, symbol):
        return cls(TokenType.OPERATOR, symbol)

    @classmethod
    def function(cls, name):
        return cls(TokenType.FUNCTION, name)

    def is_parenthesis(self):
        return self.type in (TokenType.OPEN_PAREN, TokenType.CLOSE_PAREN)

    @property
    def text(self):
        """Token在表达式中的文本形式"""
        if self.type == TokenType.NUMBER:
            return format_result(self.value)
        if self.type == TokenType.OPEN_PAREN:
            return '('
        if self.type == TokenType.CLOSE_PAREN:
            return ')'
        return self.value


OPEN_PAREN = Token(TokenType.OPEN_PAREN)
CLOSE_PAREN = Token(TokenType.CLOSE_PAREN)

SUPPORTED_OPERATORS = '+-*/^'
SUPPORTED_FUNCTIONS = ('sin', 'cos', 'tan')

# 操作符优先级，未定义的操作符为0
OPERATOR_PRECEDENCE = {
    '+': 1,
    '-': 1,
    '*': 2,
    '/': 2,
    '^': 3,
}

# 固定文本的Token定义（数值Token在词法分析时动态创建）
TOKEN_DEFINITIONS = {
    '(': OPEN_PAREN,
    ')': CLOSE_PAREN,
    **{op: Token.operator(op) for op in SUPPORTED_OPERATORS},
    **{name: Token.function(name) for name in SUPPORTED_FUNCTIONS},
}


def precedence(op):
    """返回操作符优先级"""
    return OPERATOR_PRECEDENCE.get(op, 0)
