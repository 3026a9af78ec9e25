import logging as lg
from enum import Enum

from temu.sasm.parser import Program, parse
from temu.runtime.cpu import CPU
from temu.runtime.state import InterpreterState
from temu.runtime.display import DisplaySink
from temu.runtime.controls import SourceProvider, RateControl


class RunState(Enum):
    IDLE = 'idle'
    RUNNING = 'running'
    HALTED = 'halted'


class Scheduler:
    '''
    Drives the CPU from an external heartbeat.

    The host calls tick() with the time elapsed since its previous call;
    once the accumulated time reaches the instruction interval exactly one
    instruction is executed. stop() takes effect at the next tick, an
    instruction is never interrupted.
    '''

    def __init__(
        self,
        source: SourceProvider,
        rate: RateControl,
        display: DisplaySink,
        state: InterpreterState | None = None
    ):
        self.source = source
        self.rate = rate
        self.display = display
        self.state = state if state is not None else InterpreterState()
        self.cpu = CPU(self.state, display)

        self._run_state = RunState.IDLE
        self._pc = 0
        self._interval = 1.0
        self._timer = 0.0

        self.refresh()

    @property
    def run_state(self) -> RunState:
        return self._run_state

    @property
    def running(self) -> bool:
        return self._run_state == RunState.RUNNING

    @property
    def pc(self) -> int:
        return self._pc

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def program(self) -> Program:
        return self.cpu.program

    def refresh(self):
        self.display.show_registers(self.state.registers.dump())
        self.display.show_memory(self.state.memory.dump())

    def start(self):
        self.display.log('CPU Started.')

        program = parse(self.source.source_text())

        for name in program.labels:
            self.display.log(f'Found label: {name}')

        self.cpu.load(program)
        self.display.log(f'Total instructions: {len(program)}')

        self._interval = 1.0 / max(self.rate.rate(), 1)
        self.display.log(f'Instruction delay set to: {self._interval} seconds')

        self._pc = 0
        self._run_state = RunState.RUNNING
        self.refresh()

    def stop(self):
        if not self.running:
            return

        self.display.log('CPU Stopped.')
        self._run_state = RunState.IDLE

    def halt(self):
        lg.debug(f'Halted @ {self._pc}')
        self._run_state = RunState.HALTED

    def reset(self):
        self.state.reset()
        self._pc = 0
        self._timer = 0.0
        self._run_state = RunState.IDLE
        self.refresh()

    def tick(self, elapsed: float) -> bool:
        ''' Returns True when an instruction slot was consumed '''
        if not self.running:
            return False

        self._timer += elapsed

        if self._timer < self._interval:
            return False

        self.execute_next()
        self._timer = 0.0
        return True

    def execute_next(self):
        if not 0 <= self._pc < len(self.program):
            self.display.log('Program finished.')
            self.halt()
            return

        next_pc = self.cpu.step(self._pc)

        if next_pc is None:
            self.halt()
        else:
            self._pc = next_pc

        self.refresh()
