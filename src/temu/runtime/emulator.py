import sys
import time
import logging as lg
from pathlib import Path

import click

from temu.common.hwconf import DEFAULT_RATE, FRAME_TIME, RATE_MIN, RATE_MAX
from temu.runtime.controls import FileSource, FixedRate
from temu.runtime.display import LoggingDisplay, format_registers, format_memory
from temu.runtime.scheduler import Scheduler


EXIT_HALT = 0
EXIT_TIMEOUT = 2
EXIT_KEYBOARD = 3
EXIT_EXEC_ERROR = 100


def drive(scheduler: Scheduler, timeout: float | None = None) -> bool:
    ''' Host loop; False if the run was stopped on timeout '''
    started = last = time.monotonic()

    while scheduler.running:
        now = time.monotonic()
        scheduler.tick(now - last)
        last = now

        if timeout is not None and now - started >= timeout:
            scheduler.stop()
            return False

        time.sleep(FRAME_TIME)

    return True


def print_state(display: LoggingDisplay):
    click.echo(format_registers(display.registers))
    click.echo(format_memory(display.memory))


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option(
    '-r', '--rate',
    type=click.FloatRange(RATE_MIN, RATE_MAX, clamp=True),
    default=DEFAULT_RATE, show_default=True,
    help='Instructions per second'
)
@click.option('-t', '--timeout', type=float, default=None, help='Stop after this many seconds')
@click.argument('source_filename', type=Path)
def run(verbose: bool, rate: float, timeout: float | None, source_filename: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info("TEMU")

    display = LoggingDisplay()
    scheduler = Scheduler(FileSource(source_filename), FixedRate(rate), display)

    try:
        scheduler.start()
        finished = drive(scheduler, timeout)

    except KeyboardInterrupt:
        scheduler.stop()
        lg.info('Execution halted by the user')
        print_state(display)
        sys.exit(EXIT_KEYBOARD)

    except (OSError, UnicodeDecodeError) as e:
        lg.error(f'Unable to load {source_filename}: {e}')
        sys.exit(EXIT_EXEC_ERROR)

    print_state(display)

    if not finished:
        lg.info('Execution stopped on timeout')
        sys.exit(EXIT_TIMEOUT)

    lg.info('Execution halted gracefully')
    sys.exit(EXIT_HALT)


if __name__ == '__main__':
    run()
