"""utils/formatting.py"""
import math

from config.config import FORMAT_CONFIG


def format_number(value):
    """最短的十进制表示；有限整数值不带 .0（13.0 -> 13）"""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def format_rpn(token_sequence):
    """后缀序列 -> '2 3 2 ^ ^'"""
    parts = []
    for token in token_sequence:
        # 只有数值Token携带value
        if token.value is not None:
            parts.append(format_number(token.value))
        else:
            parts.append(token.name)
    return ' '.join(parts)


def format_outcome(outcome):
    """把 evaluate 的返回值（float 或 StoredConstant）格式化为输出行"""
    if hasattr(outcome, 'name'):
        return FORMAT_CONFIG["variable_template"].format(
            name=outcome.name, value=format_number(outcome.value))
    return FORMAT_CONFIG["result_template"].format(value=format_number(outcome))


def format_error(error):
    return FORMAT_CONFIG["error_template"].format(message=error)
