"""
Run configuration, resolved once at startup.

Sources, highest priority first: command-line flags, environment
variables, GitHub Actions inputs (INPUT_* variables set by the runner),
built-in defaults.
"""

import argparse
import os
from dataclasses import dataclass, field
from pathlib import Path

from toplangs.errors import ConfigurationError
from toplangs.svg import RenderOptions

DEFAULT_TOP_N = 5
DEFAULT_OUTPUT_PATH = "profile/top-langs.svg"


@dataclass(frozen=True)
class Config:
    token: str
    top_n: int = DEFAULT_TOP_N
    workspace: Path = field(default_factory=Path.cwd)
    output_path: str = DEFAULT_OUTPUT_PATH
    render: RenderOptions = field(default_factory=RenderOptions)
    fail_on_empty: bool = False
    verbose: bool = False

    @property
    def destination(self):
        return Path(self.workspace) / self.output_path


class _ArgumentParser(argparse.ArgumentParser):
    """Report bad flags as a ConfigurationError instead of exiting with 2."""

    def error(self, message):
        raise ConfigurationError(message)


def build_parser():
    parser = _ArgumentParser(
        prog="toplangs",
        description="Render your most-used GitHub languages as an SVG card.",
    )
    parser.add_argument("--top-n", help=f"languages shown before 'Other' (default {DEFAULT_TOP_N})")
    parser.add_argument("--workspace", help="base directory for the output (default: cwd)")
    parser.add_argument("--output", help=f"output path relative to the workspace (default {DEFAULT_OUTPUT_PATH})")
    parser.add_argument("--title", help="card title")
    parser.add_argument("--width", type=int, help="card width in pixels")
    parser.add_argument("--columns", type=int, help="legend columns")
    parser.add_argument("--fail-on-empty", action="store_true",
                        help="exit with an error instead of writing an empty chart")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def _first(*values):
    for value in values:
        if value not in (None, ""):
            return value
    return None


def _parse_top_n(raw):
    if raw is None:
        return DEFAULT_TOP_N
    try:
        top_n = int(str(raw).strip())
    except ValueError:
        raise ConfigurationError(f"TOP_N must be an integer, got {raw!r}") from None
    if top_n < 0:
        raise ConfigurationError(f"TOP_N must be non-negative, got {top_n}")
    return top_n


def load_config(argv=None, environ=None):
    """Build the run configuration from argv and the environment."""
    env = os.environ if environ is None else environ
    args = build_parser().parse_args(argv)

    token = _first(env.get("GITHUB_TOKEN", "").strip(), env.get("INPUT_GITHUB_TOKEN", "").strip())
    if not token:
        raise ConfigurationError("Missing GITHUB_TOKEN")

    top_n = _parse_top_n(_first(args.top_n, env.get("TOP_N"), env.get("INPUT_TOP_N")))
    workspace = Path(_first(args.workspace, env.get("WORKSPACE")) or Path.cwd())
    output_path = _first(args.output, env.get("OUTPUT_PATH")) or DEFAULT_OUTPUT_PATH

    render_kwargs = {}
    if args.title is not None:
        render_kwargs["title"] = args.title
    if args.width is not None:
        render_kwargs["width"] = args.width
    if args.columns is not None:
        render_kwargs["legend_columns"] = args.columns
    try:
        render = RenderOptions(**render_kwargs)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e

    return Config(
        token=token,
        top_n=top_n,
        workspace=workspace,
        output_path=output_path,
        render=render,
        fail_on_empty=args.fail_on_empty,
        verbose=args.verbose,
    )
