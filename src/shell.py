""" Interactive loop for trying out the lexer: type a line, see its tokens. """
import argparse
import logging
import sys

from constants import DEFAULT_TERMINATOR
from exceptions import CommandLineSyntaxError, ShellExit
from lexer import Tokenizer
from parser import parse_command_line

logger = logging.getLogger(__name__)

QUIT_WORDS = ("quit", "exit")


def read_command(prompt="prompt> "):
    """ Read a command with support for line continuation. """
    lines = []
    while True:
        line = input(prompt)
        if line.endswith("\\"):
            lines.append(line[:-1])
            prompt = "> "
        else:
            lines.append(line)
            break
    return "".join(lines)


def format_token(token) -> str:
    return f"{type(token).__name__}=[{token}]"


class Shell:
    def __init__(self, terminator=DEFAULT_TERMINATOR, retain_double_quotes=False,
                 show_commands=False):
        self.terminator = terminator
        self.retain_double_quotes = retain_double_quotes
        self.show_commands = show_commands
        self.tokenizer = Tokenizer()
        self.last_status = 0

    def process_line(self, line: str) -> int:
        """ Print the tokens (or commands) for one line. Returns 1 on a syntax error. """
        self.tokenizer.reset(line, self.terminator, self.retain_double_quotes)
        try:
            tokens = list(self.tokenizer)
            if self.show_commands:
                for cmd in parse_command_line(tokens):
                    print(repr(cmd))
            else:
                for token in tokens:
                    print(format_token(token))
        except CommandLineSyntaxError as e:
            print(f"Position {e.position}: {e.message}", file=sys.stderr)
            print(e.caret(), file=sys.stderr)
            return 1
        return 0

    def run(self):
        while True:
            try:
                line = read_command()
                if line.strip() in QUIT_WORDS:
                    raise ShellExit(0)
                self.last_status = self.process_line(line)

            except ShellExit as e:
                return e.status

            except EOFError:
                print()
                return 0

            except KeyboardInterrupt:
                print()


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Show how command lines are split into tokens"
    )
    parser.add_argument(
        "--terminator",
        metavar="CHAR",
        default=DEFAULT_TERMINATOR,
        help="Statement terminator, or 'none' to disable it (default: %(default)s)"
    )
    parser.add_argument(
        "--retain-double-quotes",
        action="store_true",
        help="Keep double quotes in the token text"
    )
    parser.add_argument(
        "--commands",
        action="store_true",
        help="Print the assembled commands instead of the raw tokens"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log lexer activity to stderr"
    )
    args = parser.parse_args(argv)

    terminator = None if args.terminator.lower() == "none" else args.terminator
    if terminator is not None and len(terminator) != 1:
        parser.error("--terminator must be a single character or 'none'")

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )
    logger.debug("starting with terminator=%r", terminator)

    sh = Shell(terminator, args.retain_double_quotes, args.commands)
    return sh.run()


if __name__ == "__main__":
    raise SystemExit(main())
