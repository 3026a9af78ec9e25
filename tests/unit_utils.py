from pathlib import Path

import temu.sasm.parser as parser
import temu.runtime.cpu as cpu
from temu.runtime.state import InterpreterState
from temu.runtime.display import BufferedDisplay
from temu.runtime.controls import TextSource, FixedRate
from temu.runtime.scheduler import Scheduler


def find_file(filename: str) -> Path:
    return Path(__file__).parent / filename


def load_file(filename: str) -> str:
    return find_file(filename).read_text()


def load_program(name: str) -> str:
    return load_file(f'testdata/programs/{name}.tasm')


def make_cpu(source: str) -> cpu.CPU:
    proc = cpu.CPU(InterpreterState(), BufferedDisplay())
    proc.load(parser.parse(source))
    return proc


def run_cpu(proc: cpu.CPU, limit: int = 1000) -> int | None:
    ''' Steps from index 0 until halt or the end of the program '''
    index: int | None = 0

    for _ in range(limit):
        if index is None or not 0 <= index < len(proc.program):
            break

        index = proc.step(index)

    return index


def make_scheduler(source: str, rate: float = 1) -> Scheduler:
    return Scheduler(TextSource(source), FixedRate(rate), BufferedDisplay())


def run_ticks(scheduler: Scheduler, count: int) -> int:
    executed = 0

    for _ in range(count):
        if scheduler.tick(scheduler.interval):
            executed += 1

    return executed


def run_to_halt(scheduler: Scheduler, limit: int = 1000) -> int:
    ticks = 0

    while scheduler.running and ticks < limit:
        scheduler.tick(scheduler.interval)
        ticks += 1

    return ticks


def execute_source(source: str, limit: int = 1000) -> Scheduler:
    scheduler = make_scheduler(source)
    scheduler.start()
    run_to_halt(scheduler, limit)
    return scheduler
