from enum import Enum


class Operation(Enum):
    ADD = '+'
    SUBTRACT = '-'
    READ = ','
    WRITE = '.'
    LEFT = '<'
    RIGHT = '>'
    LOOP_START = '['
    LOOP_END = ']'

    def __str__(self):
        return self.value


SYMBOLS = {op.value: op for op in Operation}


def parse(source):
    """Translate script text into a tuple of operations.

    Accepts bytes or str. Every character other than the eight commands is a
    comment and is dropped.
    """
    if isinstance(source, (bytes, bytearray)):
        source = source.decode('latin-1')

    return tuple(SYMBOLS[c] for c in source if c in SYMBOLS)


def to_source(operations):
    return ''.join(op.value for op in operations)
