DEFAULT_TERMINATOR = ";"
STDOUT_FD = 1
# session id carried by ">+" with no number: the session currently in use
CURRENT_SESSION = None
# characters that end a bare (unquoted) word
WORD_BREAK_CHARS = set("'\"|<>&")
QUOTE_CHARS = set("'\"")
