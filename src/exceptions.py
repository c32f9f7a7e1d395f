""" Exceptions raised by the lexer and the shell loop. """


class CommandLineSyntaxError(ValueError):
    """ Malformed command line, with the offset where the problem was found. """
    def __init__(self, message: str, position: int, line: str):
        super().__init__(message)
        self.message = message
        self.position = position
        self.line = line

    def caret(self) -> str:
        """ Return the line with a '^' marker under the offending position. """
        return f"{self.line}\n{' ' * max(self.position, 0)}^"


class ShellExit(Exception):
    def __init__(self, status=0):
        super().__init__(status)
        self.status = status
