"""工具模块"""
from .formatting import format_result, format_rpn

__all__ = ['format_result', 'format_rpn']
