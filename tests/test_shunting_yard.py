import pytest

from core import (
    OPEN_PAREN, Token, TokenType, UnbalancedParentheses, precedence, to_postfix, tokenize
)
from utils.formatting import format_rpn


def rpn(expression, policy=None):
    return format_rpn(to_postfix(tokenize(expression, policy), policy))


@pytest.mark.parametrize("expression, expected", [
    ("2+3", "2 3 +"),
    ("2+3*4", "2 3 4 * +"),
    ("(2+3)*4", "2 3 + 4 *"),
    ("8-3-2", "8 3 - 2 -"),
    ("2*3+4/2", "2 3 * 4 2 / +"),
    ("cos(0)", "0 cos"),
    ("2*sin(30)", "2 30 sin *"),
])
def test_postfix_order(expression, expected):
    assert rpn(expression) == expected


def test_exponentiation_is_left_associative():
    assert rpn("2^3^2") == "2 3 ^ 2 ^"


def test_function_stays_on_stack_until_drain():
    # 函数不参与优先级比较，只在清栈时输出
    assert rpn("sin 90 + 1") == "90 1 + sin"
    assert rpn("sin(30)+1") == "30 1 + sin"


def test_outer_parentheses_flush_function():
    assert rpn("(sin(30))+1") == "30 sin 1 +"


@pytest.mark.parametrize("expression", [
    "2+3",
    "(2+3)*4",
    "((1))",
    "cos((2+3)*(4-1))^2",
    "sin(30)+tan(45)/(1+2)",
])
def test_parentheses_are_removed_from_output(expression):
    infix = tokenize(expression)
    pairs = sum(1 for t in infix if t.type == TokenType.OPEN_PAREN)
    postfix = to_postfix(infix)
    assert len(postfix) == len(infix) - 2 * pairs
    assert not any(t.is_parenthesis() for t in postfix)


def test_input_is_not_mutated():
    infix = tokenize("(1+2)*3")
    snapshot = list(infix)
    to_postfix(infix)
    assert infix == snapshot


def test_strict_rejects_unmatched_close_paren():
    with pytest.raises(UnbalancedParentheses):
        rpn("2+3)", policy='strict')


def test_strict_rejects_unclosed_open_paren():
    with pytest.raises(UnbalancedParentheses):
        rpn("(2+3", policy='strict')


def test_lenient_tolerates_unbalanced_parentheses():
    assert rpn("2+3)", policy='lenient') == "2 3 +"
    postfix = to_postfix(tokenize("(2+3"), policy='lenient')
    assert postfix[-1] == OPEN_PAREN
    assert format_rpn(postfix) == "2 3 + ("


def test_precedence_table():
    assert precedence('+') == precedence('-') == 1
    assert precedence('*') == precedence('/') == 2
    assert precedence('^') == 3
    assert precedence('%') == 0


def test_undefined_operator_pops_everything_above_it():
    tokens = [Token.number(1), Token.operator('*'), Token.number(2), Token.operator('%'), Token.number(3)]
    assert format_rpn(to_postfix(tokens)) == "1 2 * 3 %"
