"""核心模块 - Token系统、词法分析、调度场转换和RPN求值器"""
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, OPEN_PAREN, CLOSE_PAREN,
    SUPPORTED_OPERATORS, SUPPORTED_FUNCTIONS, OPERATOR_PRECEDENCE, precedence
)
from .errors import (
    CalculatorError, LexError, UnbalancedParentheses, InsufficientOperands,
    UnsupportedOperator, UnsupportedFunction, InvalidExpression
)
from .tokenizer import tokenize
from .shunting_yard import to_postfix
from .operators import Operators, BINARY_OPERATORS, UNARY_FUNCTIONS
from .rpn_evaluator import RPNEvaluator
from .calculator import calculate, evaluate_expression, to_rpn, CalculatorSession

__all__ = [
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'OPEN_PAREN', 'CLOSE_PAREN',
    'SUPPORTED_OPERATORS', 'SUPPORTED_FUNCTIONS', 'OPERATOR_PRECEDENCE', 'precedence',
    'CalculatorError', 'LexError', 'UnbalancedParentheses', 'InsufficientOperands',
    'UnsupportedOperator', 'UnsupportedFunction', 'InvalidExpression',
    'tokenize', 'to_postfix', 'Operators', 'BINARY_OPERATORS', 'UNARY_FUNCTIONS',
    'RPNEvaluator', 'calculate', 'evaluate_expression', 'to_rpn', 'CalculatorSession'
]
