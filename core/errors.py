"""core/errors.py - 计算器异常体系"""


class CalculatorError(Exception):
    """所有求值错误的基类，消息可直接展示给用户"""


class LexError(CalculatorError):
    """输入中出现无法识别的片段"""

    def __init__(self, segment, position):
        self.segment = segment
        self.position = position
        super().__init__(f"Unrecognized input {segment!r} at position {position}")


class UnbalancedParentheses(CalculatorError):
    """括号不匹配"""


class InsufficientOperands(CalculatorError):
    """操作符或函数缺少操作数"""


class UnsupportedOperator(CalculatorError):
    """未知的二元操作符"""


class UnsupportedFunction(CalculatorError):
    """未知的函数名"""


class InvalidExpression(CalculatorError):
    """求值结束后栈为空或剩余多个值"""
