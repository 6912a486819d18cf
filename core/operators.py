"""core/operators.py"""
import numpy as np


class Operators:
    """所有操作符和函数的静态方法集合，统一按 float64 / IEEE-754 语义计算"""

    # 二元操作符====================
    # 除零得到 inf，负数开非整数次方得到 nan，与 IEEE-754 一致，不抛异常

    @staticmethod
    def add(a, b):
        with np.errstate(all='ignore'):
            return float(np.add(np.float64(a), np.float64(b)))

    @staticmethod
    def sub(a, b):
        with np.errstate(all='ignore'):
            return float(np.subtract(np.float64(a), np.float64(b)))

    @staticmethod
    def mul(a, b):
        with np.errstate(all='ignore'):
            return float(np.multiply(np.float64(a), np.float64(b)))

    @staticmethod
    def div(a, b):
        with np.errstate(all='ignore'):
            return float(np.divide(np.float64(a), np.float64(b)))

    @staticmethod
    def pow(a, b):
        with np.errstate(all='ignore'):
            return float(np.power(np.float64(a), np.float64(b)))

    # 三角函数（角度制）====================

    @staticmethod
    def sin(degrees):
        with np.errstate(all='ignore'):
            return float(np.sin(np.deg2rad(np.float64(degrees))))

    @staticmethod
    def cos(degrees):
        with np.errstate(all='ignore'):
            return float(np.cos(np.deg2rad(np.float64(degrees))))

    @staticmethod
    def tan(degrees):
        with np.errstate(all='ignore'):
            return float(np.tan(np.deg2rad(np.float64(degrees))))


BINARY_OPERATORS = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
    '^': Operators.pow,
}

UNARY_FUNCTIONS = {
    'sin': Operators.sin,
    'cos': Operators.cos,
    'tan': Operators.tan,
}
