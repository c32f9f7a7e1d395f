""" Tokens produced by the command-line lexer.

Each token records the line it came from and the offset where it started,
so a consumer can point back at the source when it reports a problem.
Neither takes part in equality: two tokens are equal when their payloads
are.
"""
from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class StringToken:
    """ A word, literal, or quoted value with quoting and escapes resolved. """
    text: str
    line: str = field(default="", compare=False)
    position: int = field(default=0, compare=False)

    def __str__(self):
        return self.text


@dataclass(frozen=True)
class TerminatorToken:
    char: str
    line: str = field(default="", compare=False)
    position: int = field(default=0, compare=False)

    def __str__(self):
        return self.char


@dataclass(frozen=True)
class PipeToken:
    """ Everything after '|', untouched, to be handed to the OS shell. """
    command: str
    line: str = field(default="", compare=False)
    position: int = field(default=0, compare=False)

    def __str__(self):
        return f"| {self.command}"


@dataclass(frozen=True)
class RedirectOutToken:
    left_fd: int
    filename: str
    append: bool = False
    line: str = field(default="", compare=False)
    position: int = field(default=0, compare=False)

    def __str__(self):
        op = ">>" if self.append else ">"
        return f"{self.left_fd}{op}{self.filename}"


@dataclass(frozen=True)
class FileDescriptorDupToken:
    """ N>&M: descriptor N writes wherever descriptor M writes. """
    left_fd: int
    right_fd: int
    line: str = field(default="", compare=False)
    position: int = field(default=0, compare=False)

    def __str__(self):
        return f"{self.left_fd}>&{self.right_fd}"


@dataclass(frozen=True)
class SessionRedirectToken:
    """ >+N or >>+N: send output to another session (None = current one). """
    session_id: Optional[int]
    append: bool = False
    line: str = field(default="", compare=False)
    position: int = field(default=0, compare=False)

    def __str__(self):
        op = ">>" if self.append else ">"
        target = "" if self.session_id is None else str(self.session_id)
        return f"{op}+{target}"


Token = Union[
    StringToken,
    TerminatorToken,
    PipeToken,
    RedirectOutToken,
    FileDescriptorDupToken,
    SessionRedirectToken,
]

REDIRECT_TOKENS = (RedirectOutToken, FileDescriptorDupToken, SessionRedirectToken)
