"""
hebo-eval command-line interface
"""

from .eval_cli import main, build_parser

__all__ = [
    'main',
    'build_parser',
]
