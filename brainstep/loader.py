import sys


def load_script(path, stdin=None):
    """Raw bytes of the script at `path`; '-' reads the script from stdin."""
    if path == '-':
        stdin = stdin if stdin is not None else sys.stdin.buffer
        return stdin.read()

    with open(path, 'rb') as f:
        return f.read()
