""" Command to be executed, as assembled from a token stream. """


class Command:
    """ A parsed command. Nothing here has been opened or run yet. """
    def __init__(self, name, args=None, redirects=None, pipe=None, terminated=False):
        self.name = name
        self.args = args if args is not None else []

        # RedirectOutToken / FileDescriptorDupToken / SessionRedirectToken,
        # in the order they were typed
        self.redirects = redirects if redirects is not None else []

        self.pipe = pipe              # shell command text or None
        self.terminated = terminated  # True if ended by the terminator

    def __eq__(self, other):
        if not isinstance(other, Command):
            return NotImplemented
        return (self.name, self.args, self.redirects, self.pipe, self.terminated) == \
            (other.name, other.args, other.redirects, other.pipe, other.terminated)

    def __repr__(self):
        return (f"Command({self.name!r}, {self.args!r}, redirects={self.redirects!r}, "
                f"pipe={self.pipe!r}, terminated={self.terminated!r})")
