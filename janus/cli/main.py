#!/usr/bin/env python3
"""Janus - cross-domain project scaffolder."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import os
import sys
from typing import Callable

from janus import __version__
from janus.core import (
    HomeDirectoryError,
    JanusConfig,
    JanusError,
    ProjectScaffolder,
    TemplateLibrary,
    TemplateNotFoundError,
    TemplateRef,
    default_project_name,
    load_config,
    resolve_janus_home,
)
from janus.core.config import TEMPLATES_DIR
from janus.observability import initialize_tracing

EXAMPLES = """\
Examples:
  janus nextjs                   Create nextjs-app from template
  janus python flask             Create python-flask-app from template
  janus -o templates             List all local templates

Templates are stored at: {templates}
"""


def _configure_logging() -> None:
    level = os.environ.get("JANUS_LOG", "WARNING").upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING))


def _templates_hint() -> str:
    if os.environ.get("JANUS_TEMPLATES"):
        return os.environ["JANUS_TEMPLATES"]
    try:
        return str(resolve_janus_home() / TEMPLATES_DIR)
    except HomeDirectoryError:
        return f"~/.janus/{TEMPLATES_DIR}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="janus",
        description=f"Janus v{__version__} - Cross-domain Project Scaffolder",
        epilog=EXAMPLES.format(templates=_templates_hint()),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("domain", nargs="?", help="Template domain, e.g. python")
    parser.add_argument(
        "subdomain", nargs="?", default="", help="Optional template subdomain"
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"Janus v{__version__}",
    )
    parser.add_argument(
        "-o",
        dest="offline",
        metavar="templates",
        help="List available offline templates (janus -o templates)",
    )
    parser.add_argument(
        "--name",
        help="Project directory name; skips the interactive prompt",
    )
    parser.add_argument(
        "--templates-root",
        help="Templates folder (overrides JANUS_TEMPLATES and config.yaml)",
    )
    parser.add_argument(
        "--no-install",
        action="store_true",
        help="Skip dependency installation",
    )
    parser.add_argument(
        "--no-git",
        action="store_true",
        help="Skip git initialization",
    )
    return parser


def list_templates(library: TemplateLibrary) -> int:
    """Print the template library; a missing library is not an error."""
    root = library.root
    if not library.exists():
        print(f"No templates directory found at: {root}")
        print("Create the directory and add your templates to get started.")
        return 0

    try:
        templates = library.list_templates()
    except OSError as exc:
        print(
            f"[janus] Error reading templates directory: {exc}", file=sys.stderr
        )
        return 1

    if not templates:
        print("No templates found in:", root)
        return 0

    print(f"Available offline templates ({root}):")
    for ref in templates:
        if ref.subdomain:
            print(f"      - {ref.subdomain}")
        else:
            print(f"  • {ref.domain}")
    return 0


def prompt_project_name(default: str, input_fn: Callable[[str], str] = input) -> str:
    try:
        raw = input_fn(f"Enter your project name (default: {default}): ")
    except EOFError:
        raw = ""
    return raw.strip() or default


def scaffold_project(args: argparse.Namespace, config: JanusConfig) -> int:
    library = TemplateLibrary(config.templates_root)
    ref = TemplateRef(args.domain, args.subdomain or "")
    try:
        library.resolve(ref)
    except TemplateNotFoundError as exc:
        print(f"[janus] {exc}", file=sys.stderr)
        print("Available templates:")
        list_templates(library)
        return 1

    if args.name is not None:
        project_name = args.name.strip() or default_project_name(ref)
    else:
        project_name = prompt_project_name(default_project_name(ref))

    config = dataclasses.replace(
        config,
        install_dependencies=config.install_dependencies and not args.no_install,
        init_git=config.init_git and not args.no_git,
    )
    scaffolder = ProjectScaffolder(config)
    try:
        result = scaffolder.scaffold(ref, project_name)
    except JanusError as exc:
        print(f"[janus] {exc}", file=sys.stderr)
        return 1

    print("\n🎉 Project ready! Next steps:")
    for step in result.next_steps:
        print(f"  {step}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging()
    initialize_tracing("janus")

    if args.offline is not None and args.offline != "templates":
        print("[janus] Usage: janus -o templates", file=sys.stderr)
        return 2
    if args.offline is None and not args.domain:
        parser.print_help()
        return 0

    try:
        config = load_config(templates_root=args.templates_root)
    except JanusError as exc:
        print(f"[janus] {exc}", file=sys.stderr)
        return 1

    if args.offline is not None:
        return list_templates(TemplateLibrary(config.templates_root))
    return scaffold_project(args, config)


if __name__ == "__main__":
    sys.exit(main())
