from .errors import BrainfuckError, InputError, OutputError, UnmatchedLoopEndError
from .machine import Machine, NORMAL, Normal, Skipping
from .operations import Operation, parse
from .tape import Tape
