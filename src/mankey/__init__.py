# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Mankey - MCP server and CLI for Anki via AnkiConnect.

Every AnkiConnect action is exposed as a named tool with a declarative
parameter schema. The same tools back two front ends:

  - an MCP (JSON-RPC over stdio) server, started with ``mankey`` or ``mankey mcp``
  - a command-line interface (``mankey run <tool> '<json>'``, ``mankey deck list``, ...)

The adapter layer in ``mankey.core`` carries the non-trivial behaviour:

  - schema      Field tree -> protocol-visible tool descriptor + argument validation
  - pagination  offset/limit windows over actions that return full result sets
  - batching    sequential chunking of id lists above the 100-id ceiling
  - queue       approximate review order merged from learning/review/new queries
"""

__version__ = "1.1.0"
