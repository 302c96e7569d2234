from brainstep.machine import Machine
from brainstep.operations import parse
from brainstep.tape import Tape
from brainstep.trace import HEAD_CELL, RESET, render_program, render_state, render_tape

from io import BytesIO
from unittest import TestCase


class TraceTest(TestCase):
    def test_render_program(self):
        self.assertEqual('+[-]\n ^', render_program(parse('+[-]'), 1))
        self.assertEqual('1: +-\n     ^', render_program(parse('+-'), 2, prefix='1: '))

    def test_render_tape(self):
        tape = Tape()
        tape.shift_left()
        tape.add(3)
        self.assertEqual('(-1) [3] 0', render_tape(tape))

        tape.shift_right(2)
        self.assertEqual('(1)  3 0 [0]', render_tape(tape))

    def test_render_initial_state(self):
        machine = Machine(parse('+[->+<]'))
        expected = ('0: +[->+<]\n'
                    '   ^\n'
                    '   (0)  [0]\n'
                    '   mode: normal  loops: []\n')
        self.assertEqual(expected, render_state(machine))

    def test_render_skipping_state(self):
        machine = Machine(parse('[[-]]'))
        machine.step(BytesIO(), BytesIO())
        machine.step(BytesIO(), BytesIO())

        rendered = render_state(machine)
        self.assertIn('mode: skipping from 0  loops: [0, 1]', rendered)
        self.assertTrue(rendered.startswith('2: [[-]]\n     ^\n'))

    def test_render_is_idempotent(self):
        machine = Machine(parse('++>+<[->+<]'))
        for i in range(7):
            machine.step(BytesIO(), BytesIO())

        cells = machine.tape.cells
        first = render_state(machine)
        second = render_state(machine)
        self.assertEqual(first, second)
        self.assertEqual(cells, machine.tape.cells)
        self.assertEqual(7, machine.steps)

        self.assertEqual(render_state(machine, color=True), render_state(machine, color=True))

    def test_render_color(self):
        machine = Machine(parse('+.'))
        rendered = render_state(machine, color=True)
        self.assertIn('\033[', rendered)
        self.assertNotIn('^', rendered)
        self.assertIn('(0)  {}0{}'.format(HEAD_CELL, RESET), rendered)
