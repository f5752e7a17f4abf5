#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/utils/__init__.py
"""Shared utilities for gdoc2md."""
