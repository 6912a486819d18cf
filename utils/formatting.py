"""utils/formatting.py"""
import numpy as np


def format_result(value):
    """
    数值 -> 展示字符串
    最短可往返的十进制定点表示，不使用科学计数法，整数不带小数点：
    5.0 -> '5'，0.1 + 0.2 -> '0.30000000000000004'
    """
    return np.format_float_positional(np.float64(value), unique=True, trim='-')


def format_rpn(tokens):
    """Token序列 -> 以空格分隔的后缀表达式文本"""
    return ' '.join(token.text for token in tokens)
