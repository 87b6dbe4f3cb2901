"""Command implementations for the ulidgen CLI."""

from ulidgen.cli.commands.config_cmd import config
from ulidgen.cli.commands.generate import run_generate
from ulidgen.cli.commands.inspect import run_inspect

__all__ = ["config", "run_generate", "run_inspect"]
