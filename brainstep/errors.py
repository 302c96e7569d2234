class BrainfuckError(Exception):
    def __init__(self, message, position=None):
        self.message = message
        self.position = position
        if position is None:
            super().__init__(message)
        else:
            super().__init__('{} (instruction {})'.format(message, position))


class UnmatchedLoopEndError(BrainfuckError):
    def __init__(self, position):
        super().__init__("Unmatched ']'", position)


class InputError(BrainfuckError):
    pass


class OutputError(BrainfuckError):
    pass
