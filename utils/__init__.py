"""工具模块"""
from .formatting import format_number, format_rpn, format_outcome, format_error

__all__ = ['format_number', 'format_rpn', 'format_outcome', 'format_error']
