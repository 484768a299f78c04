# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Mankey CLI - AnkiConnect from the shell."""

from .main import app, main

__all__ = ["main", "app"]
