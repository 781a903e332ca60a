"""主程序入口 - 交互式科学计算器"""
import argparse
import logging
import sys

from config.config import CALCULATOR_CONFIG, HELP_MSG, LOGGING_CONFIG, validate_config
from core import Calculator, CalculatorError
from utils.formatting import format_outcome, format_error, format_rpn

try:
    import readline
except ImportError:  # Windows 下没有 readline，历史记录功能关闭
    readline = None

logger = logging.getLogger(__name__)


def handle_line(line, calculator, show_rpn=False):
    """
    处理一行输入
    Returns:
        (要输出的文本列表, 是否退出)
    """
    command = line.strip()
    if not command:
        return [], False
    if command == "exit":
        return ["Exiting..."], True
    if command == "help":
        return [HELP_MSG], False

    output = []
    try:
        if show_rpn:
            output.append(f"RPN: {format_rpn(calculator.to_rpn(command))}")
        outcome = calculator.evaluate(command)
    except CalculatorError as e:
        logger.debug(f"Failed to evaluate '{command}': {e}")
        return [format_error(e)], False

    output.append(format_outcome(outcome))
    return output, False


def _load_history(path):
    if readline is None or not path:
        return
    try:
        readline.read_history_file(path)
    except FileNotFoundError:
        logger.debug(f"No history file at {path}")
    except OSError as e:
        logger.warning(f"Could not read history file {path}: {e}")


def _save_history(path):
    if readline is None or not path:
        return
    try:
        readline.write_history_file(path)
    except OSError as e:
        logger.warning(f"Could not save history file {path}: {e}")


def run_repl(calculator, input_fn=input, output_fn=print, show_rpn=False):
    """读取-求值-输出循环，单行出错不会中断循环"""
    output_fn(CALCULATOR_CONFIG["welcome"])
    output_fn("Type help for instructions\n")

    while True:
        try:
            line = input_fn(CALCULATOR_CONFIG["prompt"])
        except (EOFError, KeyboardInterrupt):
            output_fn("Exiting...")
            break

        messages, should_exit = handle_line(line, calculator, show_rpn=show_rpn)
        for message in messages:
            output_fn(message)
        if should_exit:
            break


def run_expressions(expressions, calculator, output_fn=print, show_rpn=False):
    """依次求值命令行给出的表达式，返回失败的个数"""
    failures = 0
    for expression in expressions:
        messages, _ = handle_line(expression, calculator, show_rpn=show_rpn)
        for message in messages:
            output_fn(message)
        if messages and messages[-1].startswith("Error:"):
            failures += 1
    return failures


def main(args):
    validate_config()
    calculator = Calculator()

    if args.expression:
        failures = run_expressions(args.expression, calculator, show_rpn=args.show_rpn)
        return 1 if failures else 0

    history_path = None if args.no_history else args.history_path
    _load_history(history_path)
    try:
        run_repl(calculator, show_rpn=args.show_rpn)
    finally:
        _save_history(history_path)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Scientific Calculator")

    parser.add_argument(
        "-e", "--expression",
        action="append",
        help="Evaluate an expression and exit (can be repeated, constants are shared)"
    )
    parser.add_argument(
        "--history_path",
        type=str,
        default=CALCULATOR_CONFIG["history_file"],
        help="Path to the line history file"
    )
    parser.add_argument(
        "--no_history",
        action="store_true",
        default=not CALCULATOR_CONFIG["enable_history"],
        help="Do not load or save line history"
    )
    parser.add_argument(
        "--show_rpn",
        action="store_true",
        help="Also print the postfix (RPN) form of each expression"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def cli(argv=None):
    args = build_parser().parse_args(argv)

    # 设置日志
    logging.basicConfig(
        level=LOGGING_CONFIG["verbose_level"] if args.verbose else LOGGING_CONFIG["level"],
        format=LOGGING_CONFIG["format"]
    )
    return main(args)


if __name__ == "__main__":
    sys.exit(cli())
