""" Assemble lexer tokens into commands. """
from typing import Optional

from command import Command
from constants import DEFAULT_TERMINATOR
from exceptions import CommandLineSyntaxError
from lexer import tokenize
from tokens import Token, StringToken, TerminatorToken, PipeToken, REDIRECT_TOKENS


def split_on_terminators(tokens: list[Token]) -> list[list[Token]]:
    """ Split statements where terminator tokens are found.

    Each statement keeps its terminator as the last token, so the caller
    can tell a finished statement from one still being typed.
    """
    statements = []
    current = []

    for tok in tokens:
        current.append(tok)
        if isinstance(tok, TerminatorToken):
            statements.append(current)
            current = []

    if current:
        statements.append(current)

    return statements


def parse_statement(tokens: list[Token]) -> Command|None:
    """ Parse a single statement. Returns None if it holds no command. """
    terminated = bool(tokens) and isinstance(tokens[-1], TerminatorToken)
    words = []
    redirects = []
    pipe = None

    for tok in tokens:
        if isinstance(tok, StringToken):
            words.append(tok.text)
        elif isinstance(tok, REDIRECT_TOKENS):
            if not words:
                raise CommandLineSyntaxError("Expected a command before redirection",
                                             tok.position, tok.line)
            redirects.append(tok)
        elif isinstance(tok, PipeToken):
            if not words:
                raise CommandLineSyntaxError("Expected a command before '|'",
                                             tok.position, tok.line)
            pipe = tok.command

    if not words:
        return None

    return Command(words[0], words[1:], redirects, pipe, terminated)


def parse_command_line(tokens: list[Token]) -> list[Command]:
    cmds = []
    for stmt_tokens in split_on_terminators(tokens):
        cmd = parse_statement(stmt_tokens)
        if cmd is not None:
            cmds.append(cmd)
    return cmds


def parse_line(line: str, terminator: Optional[str] = DEFAULT_TERMINATOR,
               retain_double_quotes: bool = False) -> list[Command]:
    return parse_command_line(tokenize(line, terminator, retain_double_quotes))
