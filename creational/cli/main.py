"""
Creational Patterns CLI — run the demo programs.

Commands:
    creational gui [--platform P]               — Abstract Factory: UI widgets
    creational database [--database D]          — Abstract Factory: DB connectors
    creational npc [--seed N]                   — Builder + Director: NPC
    creational characters [--archetype A]       — Builder: archetype characters
    creational shapes [--obround L H]           — Factory Method: game objects
    creational all                              — every demo in turn

Without a flag, the product family comes from the environment
(CREATIONAL_PLATFORM, CREATIONAL_DATABASE, CREATIONAL_ARCHETYPE).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from ..abstract_factory import database, gui
from ..builder import character, npc
from ..config import configure_logging, get_settings
from ..factory_method import shapes

logger = logging.getLogger(__name__)


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def format_header(title: str) -> str:
    """Format a demo title with an underline."""
    return f"{title}\n{'=' * len(title)}"


# =============================================================================
# CLI COMMANDS
# =============================================================================

def cmd_gui(args: argparse.Namespace) -> int:
    """Draw one widget family."""
    platform = getattr(args, "platform", None) or get_settings().platform
    print(format_header("Abstract Factory — GUI"))
    gui.run_demo(platform)
    return 0


def cmd_database(args: argparse.Namespace) -> int:
    """Connect and run a query through one database family."""
    vendor = getattr(args, "database", None) or get_settings().database
    query = getattr(args, "query", None) or database.DEFAULT_QUERY
    print(format_header("Abstract Factory — Database"))
    database.run_demo(vendor, query)
    return 0


def cmd_npc(args: argparse.Namespace) -> int:
    """Direct the hero NPC build."""
    print(format_header("Builder — NPC"))
    npc.run_demo(seed=getattr(args, "seed", None))
    return 0


def cmd_characters(args: argparse.Namespace) -> int:
    """Build one archetype character."""
    archetype = getattr(args, "archetype", None) or get_settings().archetype
    print(format_header("Builder — Characters"))
    try:
        character.run_demo(archetype, seed=getattr(args, "seed", None))
    except ValueError as e:
        print(f"ERROR: {e}")
        return 1
    return 0


def cmd_shapes(args: argparse.Namespace) -> int:
    """Create, draw and collide one of each game object."""
    obround = getattr(args, "obround", None) or (9.0, 2.0)
    print(format_header("Factory Method — Shapes"))
    shapes.run_demo(obround=tuple(obround))
    return 0


DEMOS = (cmd_gui, cmd_database, cmd_npc, cmd_characters, cmd_shapes)


def cmd_all(args: argparse.Namespace) -> int:
    """Run every demo, returning the first non-zero exit code."""
    status = 0
    for demo in DEMOS:
        result = demo(args)
        print()
        if result and not status:
            status = result
    return status


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="creational",
        description="Creational design pattern demos",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    # GUI command
    gui_parser = subparsers.add_parser(
        "gui",
        help="Abstract Factory: cross-platform UI widgets",
    )
    gui_parser.add_argument(
        "--platform",
        help="Widget family (windows, linux, macos)",
    )
    gui_parser.set_defaults(func=cmd_gui)

    # Database command
    db_parser = subparsers.add_parser(
        "database",
        help="Abstract Factory: database connections and commands",
    )
    db_parser.add_argument(
        "--database",
        help="Database family (mysql, postgres, oracle)",
    )
    db_parser.add_argument(
        "--query",
        help="Query to execute",
    )
    db_parser.set_defaults(func=cmd_database)

    # NPC command
    npc_parser = subparsers.add_parser(
        "npc",
        help="Builder: hero NPC assembled by a director",
    )
    npc_parser.add_argument(
        "--seed",
        type=int,
        help="Seed for reproducible dice rolls",
    )
    npc_parser.set_defaults(func=cmd_npc)

    # Characters command
    char_parser = subparsers.add_parser(
        "characters",
        help="Builder: self-assembling archetype characters",
    )
    char_parser.add_argument(
        "--archetype",
        help="Archetype to build (hero, rogue, mage)",
    )
    char_parser.add_argument(
        "--seed",
        type=int,
        help="Seed for reproducible dice rolls",
    )
    char_parser.set_defaults(func=cmd_characters)

    # Shapes command
    shapes_parser = subparsers.add_parser(
        "shapes",
        help="Factory Method: 2D game objects",
    )
    shapes_parser.add_argument(
        "--obround",
        nargs=2,
        type=float,
        metavar=("LENGTH", "HEIGHT"),
        help="Obround dimensions (default: 9 2)",
    )
    shapes_parser.set_defaults(func=cmd_shapes)

    # All command
    all_parser = subparsers.add_parser(
        "all",
        help="Run every demo",
    )
    all_parser.set_defaults(func=cmd_all)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else None)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except Exception as e:
        logger.exception("Demo %s failed", args.command)
        print("ERROR: Demo failed")
        print(f"Reason: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
