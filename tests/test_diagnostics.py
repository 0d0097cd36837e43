#!/usr/bin/env python3
"""
Error handling: canned diagnostic programs, policies and fault records.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfi import DIAGNOSTIC_MESSAGES, DIAGNOSTIC_PROGRAMS, Engine, Halt, MIN_MEMORY_SIZE, Outcome, check_brackets
from bfi.diagnostics import DiagnosticPolicy


def run_collect(code, memory_size=MIN_MEMORY_SIZE, policy=None):
    output = []
    engine = Engine(write=output.append, memory_size=memory_size, policy=policy)
    outcome = engine.run(code)
    return engine, outcome, bytes(output)


def test_diagnostic_programs_are_balanced():
    for program in DIAGNOSTIC_PROGRAMS.values():
        assert check_brackets(program) is Outcome.OK


def test_diagnostic_programs_fit_minimum_memory():
    for outcome, program in DIAGNOSTIC_PROGRAMS.items():
        engine, result, output = run_collect(program)
        assert result is Outcome.OK
        assert output == DIAGNOSTIC_MESSAGES[outcome]


def test_unbalanced_brackets_print_message():
    for code in ["[", "]", "][", "+[[-]", "+[-]]", "]" + "+" * 10 + "["]:
        engine, outcome, output = run_collect(code)
        assert outcome is Outcome.SYNTAX_ERROR, code
        assert output == b"uneven brackets", code


def test_unbalanced_program_is_never_executed():
    _, _, output = run_collect("+++.[")
    assert output == b"uneven brackets"


def test_syntax_error_keeps_memory_when_run_without_reset():
    output = []
    engine = Engine(write=output.append, memory_size=8)
    engine.run("+++>++")
    assert engine.run("[", reset=False) is Outcome.SYNTAX_ERROR
    # The message starts from cell 1 holding 2, with cell 0 still 3.
    assert bytes(output) == b'uneven"brackets'


def test_syntax_error_message_can_itself_overflow():
    output = []
    engine = Engine(write=output.append, memory_size=MIN_MEMORY_SIZE)
    engine.run("+++>++")
    assert engine.run("[", reset=False) is Outcome.SYNTAX_ERROR
    assert engine.last_fault.outcome is Outcome.SYNTAX_ERROR
    assert bytes(output) == b"out of memory bounds u"


def test_five_moves_right_overflow_with_five_cells():
    _, outcome, output = run_collect(">>>>>")
    assert outcome is Outcome.RIGHT_OVERFLOW
    assert output == b"out of memory bounds u"


def test_halt_policy_resets_memory_on_overflow():
    engine, outcome, output = run_collect("+++>+>+>+>+>", policy=Halt())
    assert outcome is Outcome.RIGHT_OVERFLOW
    assert output == b""
    assert not engine.memory.any()
    assert engine.state.memory_pointer == 0
    assert engine.state.instruction_pointer == -1
    assert engine.running is False


def test_halt_policy_on_syntax_error():
    engine, outcome, output = run_collect("+.[", policy=Halt())
    assert outcome is Outcome.SYNTAX_ERROR
    assert output == b""


def test_custom_policy():
    class PrintBang(DiagnosticPolicy):
        def __init__(self):
            self.seen = []

        def handle(self, engine, outcome):
            self.seen.append(outcome)
            engine.reset()
            return "+" * 33 + "."

    policy = PrintBang()
    _, outcome, output = run_collect("<", policy=policy)
    assert outcome is Outcome.LEFT_OVERFLOW
    assert output == b"!"
    assert policy.seen == [Outcome.LEFT_OVERFLOW]


def test_fault_record_for_overflow():
    engine, _, _ = run_collect("+>>>>>")
    fault = engine.last_fault
    assert fault.outcome is Outcome.RIGHT_OVERFLOW
    assert fault.position == 5
    assert fault.memory_pointer == 5
    assert "RIGHT_OVERFLOW" in str(fault)
    assert "Hint:" in str(fault)


def test_fault_record_for_syntax_error():
    engine, _, _ = run_collect("+[[-]")
    fault = engine.last_fault
    assert fault.outcome is Outcome.SYNTAX_ERROR
    assert fault.position == 1
    assert "1 '[' never closed." in fault.message

    engine, _, _ = run_collect("+]")
    assert engine.last_fault.position == 1
    assert "1 extra ']'." in engine.last_fault.message


def test_fault_cleared_on_next_run():
    engine, _, _ = run_collect("<")
    assert engine.last_fault is not None
    engine.run("+")
    assert engine.last_fault is None


def test_replacement_with_uneven_brackets_halts():
    class Unbalanced(DiagnosticPolicy):
        def handle(self, engine, outcome):
            return "+[."

    engine, outcome, output = run_collect("<", policy=Unbalanced())
    assert outcome is Outcome.LEFT_OVERFLOW
    assert output == b""
    assert engine.running is False


def test_replacement_faulting_the_same_way_halts():
    class AlwaysLeft(DiagnosticPolicy):
        def __init__(self):
            self.calls = 0

        def handle(self, engine, outcome):
            self.calls += 1
            engine.reset()
            return "+.<"

    policy = AlwaysLeft()
    engine, outcome, output = run_collect("<", policy=policy)
    assert outcome is Outcome.LEFT_OVERFLOW
    assert output == b"\x01"
    assert policy.calls == 1
    assert engine.running is False
