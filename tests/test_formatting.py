import math

from core import Token, tokenize, to_postfix
from utils.formatting import format_result, format_rpn


def test_integral_values_have_no_decimal_point():
    assert format_result(5.0) == "5"
    assert format_result(-64.0) == "-64"


def test_shortest_round_trip():
    assert format_result(0.5) == "0.5"
    assert format_result(0.1 + 0.2) == "0.30000000000000004"
    assert format_result(1e-7) == "0.0000001"


def test_non_finite_values():
    assert format_result(math.inf) == "inf"
    assert format_result(-math.inf) == "-inf"
    assert format_result(math.nan) == "nan"


def test_format_rpn():
    assert format_rpn(to_postfix(tokenize("2.5*cos(60)"))) == "2.5 60 cos *"
    assert format_rpn([]) == ""


def test_token_text():
    assert Token.number(3).text == "3"
    assert Token.operator('^').text == "^"
    assert repr(Token.function('tan')) == "Token(FUNCTION, 'tan')"
