import sys

from typing import List, Optional, TextIO


class Printer:
    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None):
        self.out = out
        self.err = err

    def print(self, message: str):
        print(message, file=self.out or sys.stdout)

    def print_warning(self, message: str):
        print(f"Warning: {message}", file=self.err or sys.stderr)

    def print_error(self, message: str):
        print(f"Error: {message}", file=self.err or sys.stderr)


# Keeps everything in memory, useful for callers that report diagnostics
# after resolution instead of streaming them
class RecordingPrinter(Printer):
    def __init__(self):
        super().__init__()
        self.messages: List[str] = []
        self.warnings: List[str] = []
        self.errors: List[str] = []

    def print(self, message: str):
        self.messages.append(message)

    def print_warning(self, message: str):
        self.warnings.append(message)

    def print_error(self, message: str):
        self.errors.append(message)
