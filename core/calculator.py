"""core/calculator.py - 对外入口：文本 -> 结果字符串"""
import logging

from config.config import resolve_policy
from core.errors import CalculatorError
from core.rpn_evaluator import RPNEvaluator
from core.shunting_yard import to_postfix
from core.tokenizer import tokenize
from utils.formatting import format_result

logger = logging.getLogger(__name__)


def to_rpn(expression, policy=None):
    """词法分析 -> 中缀转后缀，返回后缀Token列表"""
    policy = resolve_policy(policy)
    return to_postfix(tokenize(expression, policy), policy)


def evaluate_expression(expression, policy=None):
    """表达式 -> 后缀 -> 求值，返回 float"""
    policy = resolve_policy(policy)
    return RPNEvaluator.evaluate(to_rpn(expression, policy), policy)


def calculate(expression, policy=None):
    """
    计算表达式并格式化结果
    strict 策略下错误以 CalculatorError 子类抛出
    """
    return format_result(evaluate_expression(expression, policy))


class CalculatorSession:
    """界面会话状态：当前输入文本和上一次的答案"""

    def __init__(self, policy=None):
        self.text = ""
        self.answer = ""
        self.policy = resolve_policy(policy)

    def submit(self):
        """输入非空时计算，错误转为可展示的消息"""
        if len(self.text) > 0:
            try:
                self.answer = calculate(self.text, self.policy)
            except CalculatorError as e:
                logger.info(f"Evaluation failed for {self.text!r}: {e}")
                self.answer = f"Error: {e}"
        return self.answer

    def press_enter(self, shift=False):
        """Enter 触发计算，Shift+Enter 插入换行"""
        if shift:
            self.text += "\n"
            return self.answer
        return self.submit()

    def clear(self):
        self.text = ""
        self.answer = ""
