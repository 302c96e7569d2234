from .operations import to_source


# SGR sequences, cleared with RESET
DONE = '\033[37m'
CURRENT_OP = '\033[1;30;106m'
HEAD_CELL = '\033[30;105m'
MODE = '\033[93m'
RESET = '\033[0m'


def highlight(style, text):
    return '{}{}{}'.format(style, text, RESET)


def render_program(operations, instruction_pointer, prefix='', color=False):
    """Program text with the current operation marked.

    Without color a caret line under the program points at the operation
    about to run. Past the end, the caret sits one column after the last
    operation.
    """
    source = to_source(operations)
    done = source[:instruction_pointer]
    current = source[instruction_pointer:instruction_pointer+1]
    rest = source[instruction_pointer+1:]

    if color:
        if current:
            current = highlight(CURRENT_OP, current)
        return '{}{}{}{}'.format(prefix, highlight(DONE, done) if done else '', current, rest)

    caret_line = ' ' * (len(prefix) + len(done)) + '^'
    return '{}{}{}{}\n{}'.format(prefix, done, current, rest, caret_line)


def render_tape(tape, prefix='', color=False):
    cells = []
    for (index, value) in enumerate(tape.cells):
        if index == tape.head:
            if color:
                cells.append(highlight(HEAD_CELL, value))
            else:
                cells.append('[{}]'.format(value))
        else:
            cells.append(str(value))

    return '{}{}{}'.format(prefix, '({}) '.format(tape.position).ljust(5), ' '.join(cells))


def render_state(machine, color=False):
    counter = '{}: '.format(machine.steps)
    prefix = ' ' * len(counter)

    mode = str(machine.mode)
    if color:
        mode = highlight(MODE, mode)

    lines = [
        render_program(machine.operations, machine.instruction_pointer, counter, color),
        render_tape(machine.tape, prefix, color),
        '{}mode: {}  loops: {}'.format(prefix, mode, machine.loop_stack),
    ]
    return '\n'.join(lines) + '\n'
