#!/usr/bin/env python3
"""
Claims service CLI
Entry point for all management commands
"""

import sys
from typing import Dict, List, Optional, Type

from claims_api.core.logging import setup_logging

from .commands.base import BaseCommand
from .commands import serve, validate

COMMANDS: Dict[str, Type[BaseCommand]] = {
    serve.Command.name: serve.Command,
    validate.Command.name: validate.Command,
}


class CLIManager:
    def __init__(self, commands: Optional[Dict[str, Type[BaseCommand]]] = None):
        self.available_commands = commands or COMMANDS

    def list_commands(self):
        print("Available commands:")
        print("=" * 40)
        for name, command_class in self.available_commands.items():
            print(f"  {name:<20} {command_class.description}")

    def run_command(self, command_name: str, args: List[str]) -> int:
        if command_name not in self.available_commands:
            print(f"Unknown command: {command_name}")
            print("Use 'python manage.py help' to see available commands.")
            return 1

        return self.available_commands[command_name]().run(args)


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    cli_manager = CLIManager()

    if not argv or argv[0] in ("help", "-h", "--help"):
        if len(argv) > 1 and argv[1] in cli_manager.available_commands:
            cli_manager.available_commands[argv[1]]().help()
            return 0
        print("Claims service CLI")
        print("Usage: python manage.py <command> [args...]")
        print()
        cli_manager.list_commands()
        return 0

    setup_logging()
    return cli_manager.run_command(argv[0], argv[1:])


if __name__ == "__main__":
    sys.exit(main())
