"""
CLI Command Modules

Command-line interface over the StringValue type.
"""

from unistr.cli import commands, config, output

__all__ = ['commands', 'config', 'output']
