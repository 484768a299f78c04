# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Output formatting for CLI commands.

Results always go to stdout as indented JSON; errors go to stderr.
"""

from __future__ import annotations

import json
import sys
from typing import Any


def output_result(data: Any) -> None:
    """Pretty-print a tool result as JSON."""
    print(json.dumps(data, indent=2, default=str))


def output_error(message: str) -> None:
    """Print error message to stderr."""
    print(f"Error: {message}", file=sys.stderr)


def output_issues(tool_name: str, issues: list[dict[str, str]]) -> None:
    """Print one line per validation issue to stderr."""
    print(f'Validation error for "{tool_name}":', file=sys.stderr)
    for issue in issues:
        print(f"  {issue['path']}: {issue['message']}", file=sys.stderr)
