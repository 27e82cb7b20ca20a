#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/utils/__init__.py
"""Utility modules: slugs, text substitution, highlighting, CSS and file I/O."""
