from typing import List

from temu.common.hwconf import REGISTER_COUNT, MEMORY_SIZE, BYTE_MASK
from temu.common.errors import InvalidOperand, EmptyCallStack


class ByteBank:
    ''' Fixed block of unsigned bytes with bounds-checked access '''
    kind: str = 'index'
    cells: List[int]

    def __init__(self, size: int):
        self.cells = [0] * size

    def __len__(self) -> int:
        return len(self.cells)

    def check(self, index: int) -> int:
        if not 0 <= index < len(self.cells):
            raise InvalidOperand(f'Invalid {self.kind} {index}')

        return index

    def get(self, index: int) -> int:
        return self.cells[self.check(index)]

    def set(self, index: int, value: int):
        self.cells[self.check(index)] = value & BYTE_MASK

    def clear(self):
        self.cells = [0] * len(self.cells)

    def dump(self) -> List[int]:
        return list(self.cells)


class Registers(ByteBank):
    kind = 'register index'

    def __init__(self):
        super().__init__(REGISTER_COUNT)


class Memory(ByteBank):
    kind = 'memory address'

    def __init__(self):
        super().__init__(MEMORY_SIZE)


class CallStack:
    frames: List[int]
    max_depth: int

    def __init__(self):
        self.frames = []
        self.max_depth = 0

    def __len__(self) -> int:
        return len(self.frames)

    def push(self, addr: int):
        self.frames.append(addr)
        self.max_depth = max(self.max_depth, len(self.frames))

    def pop(self) -> int:
        if not self.frames:
            raise EmptyCallStack('Call stack is empty, cannot return.')

        return self.frames.pop()

    def clear(self):
        self.frames.clear()


class InterpreterState:
    registers: Registers
    memory: Memory
    stack: CallStack

    def __init__(self):
        self.registers = Registers()
        self.memory = Memory()
        self.stack = CallStack()

    def reset(self):
        self.registers.clear()
        self.memory.clear()
        self.stack.clear()
