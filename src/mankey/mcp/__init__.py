# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""MCP front end."""

from .server import create_server, dispatch, run

__all__ = ["create_server", "dispatch", "run"]
