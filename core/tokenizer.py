"""core/tokenizer.py - 词法分析：文本 -> Token序列"""
import logging
import re

from config.config import resolve_policy
from core.errors import LexError
from core.token_system import Token, TOKEN_DEFINITIONS

logger = logging.getLogger(__name__)

# 按顺序尝试：数值、单字符操作符/括号、函数名
TOKEN_PATTERN = re.compile(r'\d+\.?\d*|[+\-^*/()]|cos|sin|tan')


def _check_gap(expression, start, end, strict):
    """检查两次匹配之间被跳过的文本，空白总是忽略"""
    gap = expression[start:end]
    if not gap or gap.isspace():
        return
    stripped = gap.strip()
    position = start + gap.index(stripped[0])
    if strict:
        raise LexError(stripped, position)
    logger.debug(f"Skipping unrecognized input {stripped!r} at position {position}")


def _parse_number(text, position, strict):
    try:
        # \d 也匹配非ASCII数字（如 '٣'），只接受ASCII数字
        if not text.isascii():
            raise ValueError(f"non-ASCII digits in {text!r}")
        return Token.number(text)
    except ValueError:
        if strict:
            raise LexError(text, position) from None
        logger.warning(f"Malformed number {text!r} at position {position}, using 0.0")
        return Token.number(0.0)


def tokenize(expression, policy=None):
    """
    将表达式文本扫描为Token序列
    Args:
        expression: 输入文本
        policy: 'strict' 或 'lenient'，None时取配置默认值
    Returns:
        按输入顺序排列的Token列表
    """
    strict = resolve_policy(policy) == 'strict'
    tokens = []
    last_end = 0

    for match in TOKEN_PATTERN.finditer(expression):
        _check_gap(expression, last_end, match.start(), strict)
        last_end = match.end()

        part = match.group(0)
        if part in TOKEN_DEFINITIONS:
            tokens.append(TOKEN_DEFINITIONS[part])
        else:
            tokens.append(_parse_number(part, match.start(), strict))

    _check_gap(expression, last_end, len(expression), strict)

    logger.debug(f"Tokenized {expression!r} into {len(tokens)} tokens")
    return tokens
