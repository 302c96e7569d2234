from .errors import BrainfuckError
from .loader import load_script
from .machine import Machine
from .operations import parse
from .trace import render_state

import argparse
import logging
import sys


logger = logging.getLogger(__name__)

END_MARKER = '[program finished]'


def run(machine, input_channel, output_channel, trace=None, color=False):
    """Step `machine` until it runs out of operations.

    With a `trace` stream, pending output is flushed and the machine state is
    rendered before every step and once more at the end.
    """
    while True:
        if trace is not None:
            output_channel.flush()
            trace.write(render_state(machine, color))
            trace.flush()

        if not machine.step(input_channel, output_channel):
            break

    if trace is not None:
        trace.write(render_state(machine, color))
        trace.flush()

    output_channel.flush()
    logger.debug('Finished after %d steps', machine.steps)
    if machine.open_loops > 0:
        logger.debug('%d loop(s) left open at end of program: %s', machine.open_loops, machine.loop_stack)


def build_argument_parser():
    arg_parser = argparse.ArgumentParser(prog='brainstep', description='Run a brainfuck program')
    arg_parser.add_argument('script', help="path of the script to run, or '-' for standard input")
    arg_parser.add_argument('-d', '--debug', action='store_true',
                            help='trace machine state to stderr before every step')
    return arg_parser


def main(argv=None, stdin=None, stdout=None, stderr=None):
    stdin = stdin if stdin is not None else sys.stdin.buffer
    stdout = stdout if stdout is not None else sys.stdout.buffer
    stderr = stderr if stderr is not None else sys.stderr

    args = build_argument_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING,
                        format='%(levelname)5s %(message)s', stream=stderr, force=True)

    try:
        operations = parse(load_script(args.script, stdin))
        logger.debug('Loaded %d operations from %s', len(operations), args.script)

        machine = Machine(operations)
        trace = stderr if args.debug else None
        run(machine, stdin, stdout, trace, color=trace is not None and trace.isatty())

        stdout.write('\n{}\n'.format(END_MARKER).encode())
        stdout.flush()
    except (BrainfuckError, OSError) as e:
        stderr.write('error: {}\n'.format(e))
        return 1

    return 0
