
import logging

from .api import RunOptions, RunResult, run_string
from .diagnostics import DIAGNOSTIC_MESSAGES, DIAGNOSTIC_PROGRAMS, DiagnosticPolicy, Halt, SubstituteDiagnostic
from .engine import Engine
from .errors import Fault, Outcome
from .program import DEFAULT_MEMORY_SIZE, LEGAL_CHARS, MIN_MEMORY_SIZE, check_brackets, filter_source

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Engine',
    'Outcome',
    'Fault',
    'DiagnosticPolicy',
    'SubstituteDiagnostic',
    'Halt',
    'DIAGNOSTIC_PROGRAMS',
    'DIAGNOSTIC_MESSAGES',
    'LEGAL_CHARS',
    'MIN_MEMORY_SIZE',
    'DEFAULT_MEMORY_SIZE',
    'filter_source',
    'check_brackets',
    'RunOptions',
    'RunResult',
    'run_string',
]
