from .errors import InputError, OutputError, UnmatchedLoopEndError
from .operations import Operation
from .tape import Tape

from collections import namedtuple
import logging


logger = logging.getLogger(__name__)


class Normal(namedtuple('Normal', [])):
    def __str__(self):
        return 'normal'


class Skipping(namedtuple('Skipping', ['origin'])):
    def __str__(self):
        return 'skipping from {}'.format(self.origin)


NORMAL = Normal()


class Machine:
    """Executes a fixed operation sequence one step at a time.

    Loops are resolved while running. A `[` whose guard is zero switches the
    machine into `Skipping(origin)` mode, in which operations are scanned
    without side effects until the `]` that pops `origin` off the loop
    stack. Both modes push and pop the same stack, so nesting inside a
    skipped region stays balanced.
    """

    def __init__(self, operations):
        self.operations = tuple(operations)
        self.tape = Tape()
        self.instruction_pointer = 0
        self.loop_stack = []
        self.mode = NORMAL
        self.steps = 0

    @property
    def finished(self):
        return self.instruction_pointer >= len(self.operations)

    @property
    def open_loops(self):
        return len(self.loop_stack)

    @property
    def skipping(self):
        return isinstance(self.mode, Skipping)

    def step(self, input_channel, output_channel):
        if self.finished:
            return False

        self.steps += 1
        op = self.operations[self.instruction_pointer]

        if self.skipping:
            self._skip(op)
        elif not self._execute(op, input_channel, output_channel):
            # backward jump, the loop start is evaluated again next step
            return True

        self.instruction_pointer += 1
        return not self.finished

    def run(self, input_channel, output_channel):
        while self.step(input_channel, output_channel):
            pass

    def _execute(self, op, input_channel, output_channel):
        ip = self.instruction_pointer

        if op == Operation.ADD:
            self.tape.add(1)

        elif op == Operation.SUBTRACT:
            self.tape.subtract(1)

        elif op == Operation.LEFT:
            self.tape.shift_left(1)

        elif op == Operation.RIGHT:
            self.tape.shift_right(1)

        elif op == Operation.READ:
            try:
                data = input_channel.read(1)
            except OSError as e:
                raise InputError('Failed to read input: {}'.format(e), ip) from e

            if not data:
                raise InputError('Input exhausted', ip)
            self.tape.write(data[0])

        elif op == Operation.WRITE:
            try:
                output_channel.write(bytes([self.tape.read()]))
            except OSError as e:
                raise OutputError('Failed to write output: {}'.format(e), ip) from e

        elif op == Operation.LOOP_START:
            self.loop_stack.append(ip)
            if self.tape.read() == 0:
                logger.debug('Guard false at %d, skipping loop body', ip)
                self.mode = Skipping(ip)

        elif op == Operation.LOOP_END:
            start = self._pop_loop()
            if self.tape.read() != 0:
                self.instruction_pointer = start
                return False

        return True

    def _skip(self, op):
        if op == Operation.LOOP_START:
            self.loop_stack.append(self.instruction_pointer)

        elif op == Operation.LOOP_END:
            start = self._pop_loop()
            if start == self.mode.origin:
                logger.debug('Reached end of skipped loop %d at %d', start, self.instruction_pointer)
                self.mode = NORMAL

    def _pop_loop(self):
        if not self.loop_stack:
            raise UnmatchedLoopEndError(self.instruction_pointer)
        return self.loop_stack.pop()
