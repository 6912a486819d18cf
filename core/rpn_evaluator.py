"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from config.config import CALCULATOR_CONFIG, resolve_policy
from core.errors import (
    InsufficientOperands, InvalidExpression, UnsupportedFunction, UnsupportedOperator
)
from core.operators import BINARY_OPERATORS, UNARY_FUNCTIONS
from core.token_system import TokenType

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def _pop_operand(stack, default, strict, token):
        if stack:
            return stack.pop()
        if strict:
            raise InsufficientOperands(f"Insufficient operands for {token.value!r}")
        logger.warning(f"Insufficient operands for {token.value!r}, substituting {default}")
        return default

    @staticmethod
    def evaluate(token_sequence, policy=None):
        """
        评估后缀Token序列
        Args:
            token_sequence: 后缀顺序的Token序列
            policy: 'strict' 或 'lenient'，None时取配置默认值
        Returns:
            float 结果
        """
        strict = resolve_policy(policy) == 'strict'
        missing = CALCULATOR_CONFIG["missing_operand"]
        stack = []

        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack.append(token.value)

            elif token.type == TokenType.OPERATOR:
                op_method = BINARY_OPERATORS.get(token.value)
                if op_method is None and strict:
                    raise UnsupportedOperator(f"Unsupported operator: {token.value!r}")
                # 先弹出右操作数
                divisor_default = CALCULATOR_CONFIG["missing_divisor"] if token.value == '/' else missing
                b = RPNEvaluator._pop_operand(stack, divisor_default, strict, token)
                a = RPNEvaluator._pop_operand(stack, missing, strict, token)
                if op_method is None:
                    logger.warning(f"Unknown binary operator: {token.value!r}, substituting {missing}")
                    stack.append(missing)
                else:
                    stack.append(op_method(a, b))

            elif token.type == TokenType.FUNCTION:
                func = UNARY_FUNCTIONS.get(token.value)
                if func is None and strict:
                    raise UnsupportedFunction(f"Unsupported function: {token.value!r}")
                value = RPNEvaluator._pop_operand(stack, missing, strict, token)
                if func is None:
                    logger.warning(f"Unknown function: {token.value!r}, substituting {missing}")
                    stack.append(missing)
                else:
                    stack.append(func(value))

            else:
                # 括号不应出现在后缀序列中，忽略
                logger.debug(f"Ignoring {token!r} in postfix sequence")

        if len(stack) == 1:
            return stack[0]

        if not stack:
            if strict:
                raise InvalidExpression("Empty expression")
            logger.warning("Empty stack after evaluation")
            return CALCULATOR_CONFIG["empty_result"]

        if strict:
            raise InvalidExpression(f"Expression left {len(stack)} values on the stack, expected 1")
        logger.warning(f"Stack has {len(stack)} elements after evaluation, returning the top")
        return stack[-1]
