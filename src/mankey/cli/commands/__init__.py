# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""CLI command modules for Mankey.

Each module exposes a ``register(subparsers)`` function that wires up
its argparse sub-commands and sets ``parser.set_defaults(func=handler)``.
"""

from . import cards, decks, mcp_cmd, models, notes, run, stats, tools_list
from .mcp_cmd import cmd_mcp
from .run import cmd_run
from .tools_list import cmd_tools

# All command modules with register() functions, in registration order.
COMMAND_MODULES = [
    mcp_cmd,
    run,
    tools_list,
    decks,
    notes,
    cards,
    models,
    stats,
]

__all__ = [
    "COMMAND_MODULES",
    "cmd_mcp",
    "cmd_run",
    "cmd_tools",
]
