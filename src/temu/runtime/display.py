import logging as lg
from collections import deque
from typing import Deque, List, Sequence

from temu.common.hwconf import LOG_CAPACITY


class LogBuffer:
    ''' Append-only event log keeping the most recent lines '''
    lines: Deque[str]

    def __init__(self, capacity: int = LOG_CAPACITY):
        self.lines = deque(maxlen=capacity)

    def append(self, message: str):
        self.lines.append(message)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)

    def text(self) -> str:
        return '\n'.join(self.lines)


class DisplaySink:
    def show_registers(self, values: Sequence[int]):
        raise NotImplementedError()

    def show_memory(self, values: Sequence[int]):
        raise NotImplementedError()

    def log(self, message: str):
        raise NotImplementedError()


class BufferedDisplay(DisplaySink):
    registers: List[int]
    memory: List[int]
    events: LogBuffer

    def __init__(self, capacity: int = LOG_CAPACITY):
        self.registers = []
        self.memory = []
        self.events = LogBuffer(capacity)

    def show_registers(self, values: Sequence[int]):
        self.registers = list(values)

    def show_memory(self, values: Sequence[int]):
        self.memory = list(values)

    def log(self, message: str):
        self.events.append(message)


def format_registers(values: Sequence[int]) -> str:
    return '\n'.join(f'R{i}: {v}' for i, v in enumerate(values))


def format_memory(values: Sequence[int]) -> str:
    return '\n'.join(f'Addr {i}: {v}' for i, v in enumerate(values))


class LoggingDisplay(BufferedDisplay):
    ''' Buffered display mirrored to the logging module '''

    def show_registers(self, values: Sequence[int]):
        super().show_registers(values)
        lg.debug(' '.join(f'R{i}:{v:02X}' for i, v in enumerate(values)))

    def show_memory(self, values: Sequence[int]):
        super().show_memory(values)
        lg.debug(' '.join(f'{i:X}:{v:02X}' for i, v in enumerate(values)))

    def log(self, message: str):
        super().log(message)
        lg.info(message)
