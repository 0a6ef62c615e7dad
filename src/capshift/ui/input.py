"""
User input handling for the caption tool
Confirmation prompts shown before files are overwritten
"""

from rich.console import Console
from rich.prompt import Confirm


class UserInput:
    """Handle user input and validation"""

    def __init__(self, console: Console):
        self.console = console

    def confirm_overwrite(self, filename: str) -> bool:
        """Ask user to confirm file overwrite"""
        return Confirm.ask(f"Output file '{filename}' exists. Overwrite?", console=self.console)
