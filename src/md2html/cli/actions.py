"""Custom argparse Action classes for the md2html CLI.

Options accept defaults from ``MD2HTML_<DEST>`` environment variables. Options
that are neither given nor set in the environment stay ``None`` so that values
from a configuration file can fill them in afterwards.
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/md2html/cli/actions.py

import argparse
import logging
import os

from md2html.constants import ENV_PREFIX

_TRUE_VALUES = ("true", "1", "yes", "on")


def env_key_for(dest: str) -> str:
    """Environment variable name for an argument destination.

    Examples
    --------
    >>> env_key_for("out_dir")
    'MD2HTML_OUT_DIR'

    """
    return f"{ENV_PREFIX}{dest.upper().replace('-', '_')}"


def _dest_from_options(args: tuple) -> str | None:
    for option in args:
        if option.startswith("--"):
            return option[2:].replace("-", "_")
    for option in args:
        if option.startswith("-"):
            return option[1:]
    return None


class EnvironmentAwareAction(argparse.Action):
    """Store action that takes its default from the environment."""

    def __init__(self, *args, **kwargs):
        dest = kwargs.get("dest") or _dest_from_options(args)
        if dest:
            env_key = env_key_for(dest)
            env_value = os.environ.get(env_key)
            if env_value is not None:
                try:
                    converter = kwargs.get("type")
                    kwargs["default"] = converter(env_value) if converter is not None else env_value
                except (ValueError, TypeError, argparse.ArgumentTypeError) as e:
                    logging.warning(f"Invalid environment variable {env_key}={env_value}: {e}")

        super().__init__(*args, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        """Standard action processing."""
        setattr(namespace, self.dest, values)


class EnvironmentAwareBooleanAction(argparse._StoreTrueAction):
    """Boolean flag that takes its default from the environment."""

    def __init__(self, *args, **kwargs):
        dest = kwargs.get("dest") or _dest_from_options(args)
        if dest:
            env_value = os.environ.get(env_key_for(dest))
            if env_value is not None:
                kwargs["default"] = env_value.lower() in _TRUE_VALUES

        super().__init__(*args, **kwargs)


__all__ = ["EnvironmentAwareAction", "EnvironmentAwareBooleanAction", "env_key_for"]
