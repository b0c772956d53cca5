"""
Base command class for all CLI commands
"""

from abc import ABC, abstractmethod
from typing import List
import argparse


class BaseCommand(ABC):
    """Base class for all commands"""

    name = "command"
    description = "No description provided"

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog=f"manage.py {self.name}",
            description=self.description,
        )
        self.add_arguments(parser)
        return parser

    def add_arguments(self, parser: argparse.ArgumentParser):
        """Override to add command arguments"""
        pass

    @abstractmethod
    def handle(self, **kwargs) -> int:
        """Run the command and return its exit code"""
        pass

    def run(self, args: List[str]) -> int:
        parsed_args = self.parser.parse_args(args)
        return self.handle(**vars(parsed_args))

    def help(self):
        self.parser.print_help()

    def print_success(self, message: str):
        print(f"\033[92m✓ {message}\033[0m")

    def print_error(self, message: str):
        print(f"\033[91m✗ {message}\033[0m")
