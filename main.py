"""主程序入口 - 命令行计算器（单次求值或交互模式）"""
import argparse
import logging
import sys

from config.config import CALCULATOR_CONFIG, ERROR_POLICIES, LOGGING_CONFIG, validate_config
from core import CalculatorError, CalculatorSession, RPNEvaluator, to_rpn
from utils.formatting import format_result, format_rpn

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ('quit', 'exit')


def setup_logging(verbose=False):
    # 设置日志
    logging.basicConfig(
        level=logging.DEBUG if verbose else LOGGING_CONFIG["level"],
        format=LOGGING_CONFIG["format"]
    )


def run_once(expression, policy, show_rpn=False, out=None):
    """求值一个表达式并输出结果，返回进程退出码"""
    out = out or sys.stdout
    try:
        rpn = to_rpn(expression, policy)
        if show_rpn:
            print(f"RPN: {format_rpn(rpn)}", file=out)
        result = RPNEvaluator.evaluate(rpn, policy)
    except CalculatorError as e:
        print(f"Error: {e}", file=out)
        return 1
    print(format_result(result), file=out)
    return 0


def run_interactive(policy, stream=None, out=None):
    """逐行读取表达式，空行跳过，quit/exit 或 EOF 结束"""
    stream = stream or sys.stdin
    out = out or sys.stdout
    session = CalculatorSession(policy)

    for line in stream:
        line = line.strip()
        if not line:
            continue
        if line in EXIT_COMMANDS:
            break
        session.text = line
        print(session.submit(), file=out)

    logger.debug("Interactive session finished")
    return 0


def main(args):
    setup_logging(args.verbose)
    validate_config()
    logger.info(f"Using error policy: {args.policy}")

    if args.expr is not None:
        return run_once(args.expr, args.policy, show_rpn=args.show_rpn)
    return run_interactive(args.policy)


def build_parser():
    parser = argparse.ArgumentParser(description="Degree-mode infix calculator")

    parser.add_argument(
        "--expr",
        type=str,
        default=None,
        help="Expression to evaluate; starts an interactive session when omitted"
    )
    parser.add_argument(
        "--policy",
        type=str,
        choices=ERROR_POLICIES,
        default=CALCULATOR_CONFIG["error_policy"],
        help="Error policy: strict raises on malformed input, lenient substitutes defaults"
    )
    parser.add_argument(
        "--show_rpn",
        action="store_true",
        help="Print the postfix form of the expression before the result"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def cli():
    sys.exit(main(build_parser().parse_args()))


if __name__ == "__main__":
    cli()
