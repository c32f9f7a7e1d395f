""" Lexical analysis for command lines.

The rules roughly follow those of sh: words are split on whitespace,
single quotes protect everything up to the closing quote, double quotes
honor backslash escapes, and quoted and unquoted pieces that touch are
glued into one word. On top of that the lexer recognizes:

    ;          the statement terminator (configurable, may be disabled)
    | cmd      a pipe; everything after it is handed to the OS shell as-is
    [n]>file   output redirection, [n]>>file to append
    n>&m       descriptor duplication
    [n]>+[s]   output redirection to another session (s omitted: current)

The lexer only describes what was typed. Opening files, running the piped
command and switching sessions is up to whoever consumes the tokens.
"""
import logging
from typing import Iterator, Optional

from constants import DEFAULT_TERMINATOR, STDOUT_FD, CURRENT_SESSION, WORD_BREAK_CHARS, QUOTE_CHARS
from exceptions import CommandLineSyntaxError
from tokens import (
    Token,
    StringToken,
    TerminatorToken,
    PipeToken,
    RedirectOutToken,
    FileDescriptorDupToken,
    SessionRedirectToken,
)

logger = logging.getLogger(__name__)


class Tokenizer:
    """ Resettable scanner that hands out one token per call to next(). """
    def __init__(self, line: str = "", terminator: Optional[str] = None,
                 retain_double_quotes: bool = False):
        self.reset(line, terminator, retain_double_quotes)

    def reset(self, line: str, terminator: Optional[str] = None,
              retain_double_quotes: bool = False):
        """ Start scanning a new line, forgetting everything about the last one. """
        if terminator is not None and len(terminator) != 1:
            raise ValueError(f"terminator must be a single character, not {terminator!r}")

        self.line = line if line is not None else ""
        self.terminator = terminator
        self.retain_double_quotes = retain_double_quotes
        self.offset = 0
        self.token_count = 0
        logger.debug("reset: line=%r terminator=%r retain_double_quotes=%s",
                     self.line, terminator, retain_double_quotes)

    def __iter__(self) -> Iterator[Token]:
        token = self.next()
        while token is not None:
            yield token
            token = self.next()

    def next(self) -> Optional[Token]:
        """ Return the next token, or None once the end of the line is reached. """
        self._skip_whitespace()

        line = self.line
        if self.offset >= len(line):
            return None

        ch = line[self.offset]
        if ch == ">" or (ch.isdecimal() and line.startswith(">", self.offset + 1)):
            token = self._parse_redirection()
        elif ch == "|":
            token = self._parse_pipe()
        elif self._is_terminator(ch):
            token = TerminatorToken(ch, line, self.offset)
            self.offset += 1
        else:
            start = self.offset
            text = self._parse_string()
            if self.offset == start:
                # '<' and '&' end a word but cannot start one
                text = line[start]
                self.offset += 1
            token = StringToken(text, line, start)

        self.token_count += 1
        logger.debug("token %d: %r", self.token_count, token)
        return token

    # Helpers
    def _error(self, message: str, position: int) -> CommandLineSyntaxError:
        logger.debug("syntax error at %d: %s", position, message)
        return CommandLineSyntaxError(message, position, self.line)

    def _is_terminator(self, ch: str) -> bool:
        return self.terminator is not None and ch == self.terminator

    def _skip_whitespace(self):
        line = self.line
        while self.offset < len(line) and line[self.offset].isspace():
            self.offset += 1

    def _parse_pipe(self) -> PipeToken:
        start = self.offset
        self.offset += 1
        self._skip_whitespace()

        if self.offset >= len(self.line):
            raise self._error("Expected a command following '|'", start)

        token = PipeToken(self.line[self.offset:], self.line, start)
        self.offset = len(self.line)
        return token

    def _parse_redirection(self) -> Token:
        """
        Parse one of:  >  >>  n>  n>>  n>&m  >+  >+s  >>+s  n>+s
        next() only calls this when a '>' is at the offset or right after
        a single digit.
        """
        line = self.line
        start = self.offset
        left_fd = STDOUT_FD
        append = False

        if line[self.offset].isdecimal():
            left_fd = int(line[self.offset])
            self.offset += 1

        # the '>' itself
        self.offset += 1

        if line.startswith(">", self.offset):
            append = True
            self.offset += 1
        elif line.startswith("&", self.offset):
            self.offset += 1
            return FileDescriptorDupToken(left_fd, self._parse_number(), line, start)

        if line.startswith("+", self.offset):
            self.offset += 1
            session_id = CURRENT_SESSION
            if self.offset < len(line) and line[self.offset].isdecimal():
                session_id = self._parse_number()
            return SessionRedirectToken(session_id, append, line, start)

        filename = self._parse_string()
        if not filename:
            raise self._error("Expected a target filename following redirection", self.offset)

        return RedirectOutToken(left_fd, filename, append, line, start)

    def _parse_number(self) -> int:
        self._skip_whitespace()
        line = self.line
        start = self.offset
        while self.offset < len(line) and line[self.offset].isdecimal():
            self.offset += 1

        if self.offset == start:
            raise self._error("Expected a number following file descriptor "
                              "duplication token '>&'", self.offset - 1)

        return int(line[start:self.offset])

    def _parse_string(self) -> str:
        """
        Consume one word. Adjacent fragments are joined, so

            hello'scott'"!"

        is the single word helloscott!.
        """
        parts = []
        self._skip_whitespace()

        while self.offset < len(self.line):
            ch = self.line[self.offset]
            if ch == "'":
                parts.append(self._parse_single_quoted())
            elif ch == '"':
                parts.append(self._parse_double_quoted())
            else:
                fragment, stop = self._parse_bare()
                parts.append(fragment)
                # only a quote keeps the word going
                if stop not in QUOTE_CHARS:
                    break

        return "".join(parts)

    def _parse_single_quoted(self) -> str:
        """ Everything up to the closing quote, no escapes. """
        start = self.offset
        end = self.line.find("'", start + 1)
        if end < 0:
            raise self._error("Did not find a matching closing single quote", start)

        self.offset = end + 1
        return self.line[start + 1:end]

    def _parse_double_quoted(self) -> str:
        line = self.line
        chars = ['"'] if self.retain_double_quotes else []

        self.offset += 1
        while self.offset < len(line) and line[self.offset] != '"':
            ch = line[self.offset]
            if ch == "\\":
                self.offset += 1
                if self.offset < len(line):
                    chars.append(line[self.offset])
            else:
                chars.append(ch)
            self.offset += 1

        if self.offset >= len(line):
            self.offset = len(line)
            raise self._error("Did not find a matching closing double quote", self.offset)

        if self.retain_double_quotes:
            chars.append('"')
        self.offset += 1
        return "".join(chars)

    def _parse_bare(self) -> tuple[str, Optional[str]]:
        """
        Collect unquoted characters. Returns the text and the character that
        stopped the scan (None at end of line).

        A backslash escapes the next character, except in the first token of
        the line: commands are typed as \\go, \\echo and so on, and the
        backslash has to reach the dispatcher intact.
        """
        line = self.line
        chars = []
        escapes = self.token_count > 0

        while self.offset < len(line):
            ch = line[self.offset]
            if ch.isspace() or self._is_terminator(ch) or ch in WORD_BREAK_CHARS:
                return "".join(chars), ch
            if escapes and ch == "\\":
                self.offset += 1
                if self.offset < len(line):
                    chars.append(line[self.offset])
                    self.offset += 1
                continue
            chars.append(ch)
            self.offset += 1

        return "".join(chars), None


def tokenize(line: str, terminator: Optional[str] = DEFAULT_TERMINATOR,
             retain_double_quotes: bool = False) -> list[Token]:
    """ Return every token on the line. """
    return list(Tokenizer(line, terminator, retain_double_quotes))
