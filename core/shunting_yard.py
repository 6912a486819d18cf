"""core/shunting_yard.py - 调度场算法：中缀Token序列 -> 后缀Token序列"""
import logging

from config.config import resolve_policy
from core.errors import UnbalancedParentheses
from core.token_system import TokenType, precedence

logger = logging.getLogger(__name__)


def to_postfix(tokens, policy=None):
    """
    中缀转后缀
    所有操作符都按左结合处理（比较用 <=），因此 2^3^2 == (2^3)^2。
    函数留在栈中，只会被弹出它的右括号或最后的清栈输出。
    Args:
        tokens: 中缀顺序的Token序列（不会被修改）
        policy: 'strict' 或 'lenient'
    Returns:
        后缀顺序的Token列表
    """
    strict = resolve_policy(policy) == 'strict'
    output = []
    operators = []

    for token in tokens:
        if token.type == TokenType.NUMBER:
            output.append(token)

        elif token.type == TokenType.FUNCTION:
            operators.append(token)

        elif token.type == TokenType.OPERATOR:
            while operators and operators[-1].type == TokenType.OPERATOR:
                if precedence(token.value) <= precedence(operators[-1].value):
                    output.append(operators.pop())
                else:
                    break
            operators.append(token)

        elif token.type == TokenType.OPEN_PAREN:
            operators.append(token)

        elif token.type == TokenType.CLOSE_PAREN:
            matched = False
            while operators:
                top = operators.pop()
                if top.type == TokenType.OPEN_PAREN:
                    matched = True
                    break
                output.append(top)
            if not matched:
                if strict:
                    raise UnbalancedParentheses("Unmatched ')' in expression")
                logger.warning("Unmatched ')' in expression, ignoring")

    # 清栈：栈顶先出
    while operators:
        top = operators.pop()
        if top.type == TokenType.OPEN_PAREN:
            if strict:
                raise UnbalancedParentheses("Unclosed '(' in expression")
            logger.warning("Unclosed '(' in expression, ignoring")
        output.append(top)

    return output
