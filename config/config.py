"""配置文件"""

# 交互式命令行参数
CALCULATOR_CONFIG = {
    "prompt": ">> ",
    "welcome": "Welcome to this Scientific Calculator!",
    "history_file": "history.txt",
    "enable_history": True,
    "angle_unit": "degrees",  # 三角函数输入为角度
}

# 不能作为常量名的关键字
RESERVED_NAMES = frozenset({"export", "sin", "cos", "tg", "ctg", "help", "exit"})

# 结果显示
FORMAT_CONFIG = {
    "result_template": "Result = {value}",
    "variable_template": "Variable: {name}, Value: {value}",
    "error_template": "Error: {message}",
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "verbose_level": "DEBUG",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}

HELP_MSG = """
Scientific Calculator Help:
---------------------------
Available operations:
  Basic: + - * / ^
  Functions: sin(x) cos(x) tg(x) ctg(x)
  Parentheses: ( )
  Constants: export NAME = VALUE

Examples:
  3 + 5 * 2
  sin(45) ^ 2
  export PI = 3.1415
  2 * PI / 180

Special commands:
  help    - Show this message
  exit    - Quit the program
  export  - Define constants

Notes:
- Angles in degrees
- Use parentheses for explicit order
- Negative numbers: -5 + 3
- Ctrl+C to exit
"""


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert CALCULATOR_CONFIG["angle_unit"] == "degrees", "三角函数只支持角度制"
    assert CALCULATOR_CONFIG["prompt"], "提示符不能为空"
    assert {"sin", "cos", "tg", "ctg"} <= RESERVED_NAMES, "函数名必须是保留字"
    assert "{value}" in FORMAT_CONFIG["result_template"]
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    return True
