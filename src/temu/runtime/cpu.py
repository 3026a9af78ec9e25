import logging as lg
from dataclasses import dataclass
from typing import Callable, Tuple

import temu.sasm.grammar as grammar
from temu.sasm.parser import Program
from temu.common.ops import Op, COMMANDS, JUMP_TYPES
from temu.common.errors import (
    ExecError, InvalidOperand, UnknownInstruction, EmptyCallStack, Halt
)
from temu.runtime.state import InterpreterState
from temu.runtime.display import DisplaySink


@dataclass(frozen=True)
class Instruction:
    op: Op
    operands: Tuple[str, ...]
    text: str


class CPU():
    state: InterpreterState
    program: Program
    display: DisplaySink
    index: int  # Index of the instruction being executed

    def __init__(self, state: InterpreterState, display: DisplaySink):
        self.state = state
        self.display = display
        self.program = Program()
        self.index = 0

    def load(self, program: Program):
        self.program = program

    # - Helpers - #

    def debug_dump(self):
        regs = self.state.registers.dump()
        mem = self.state.memory.dump()
        stack = self.state.stack

        state = [f'IX:{self.index}', f'SD:{len(stack)}', f'SM:{stack.max_depth}']
        state.extend([f'R{i}:{regs[i]:X}' for i in range(len(regs))])
        state.append('M:' + ' '.join(f'{v:02X}' for v in mem))

        lg.debug(' '.join(state))

    def operand(self, instr: Instruction, n: int) -> str:
        if n >= len(instr.operands):
            raise InvalidOperand(f'{instr.op.value} instruction is malformed: {instr.text}')

        return instr.operands[n]

    def integer(self, token: str, kind: str) -> int:
        value = grammar.parse_integer(token)

        if value is None:
            raise InvalidOperand(f'Invalid {kind} {token}')

        return value

    def reg(self, instr: Instruction, n: int) -> int:
        token = self.operand(instr, n)
        return self.state.registers.check(self.integer(token, 'register index'))

    def addr(self, instr: Instruction, n: int) -> int:
        token = self.operand(instr, n)
        return self.state.memory.check(self.integer(token, 'memory address'))

    def arithm_pair(self, instr: Instruction, op: Callable[[int, int], int]):
        a = self.reg(instr, 0)
        b = self.reg(instr, 1)
        c = self.reg(instr, 2)

        r = self.state.registers
        r.set(c, op(r.get(a), r.get(b)))

    # - Operations - #
    # Return the next index when control flow is redirected, None otherwise

    def noop(self, instr: Instruction):
        raise Halt('Program finished because of NOOP.')

    def jmp(self, instr: Instruction):
        return self.program.resolve(self.operand(instr, 0))

    def call(self, instr: Instruction):
        addr = self.program.resolve(self.operand(instr, 0))
        self.state.stack.push(self.index + 1)
        return addr

    def ret(self, instr: Instruction):
        return self.state.stack.pop()

    def imm(self, instr: Instruction):
        a = self.reg(instr, 0)
        token = self.operand(instr, 1)
        value = grammar.parse_integer(token)

        if value is None:
            raise InvalidOperand(f'Invalid immediate value in IMM instruction: {token}')

        self.state.registers.set(a, value)

    def rlod(self, instr: Instruction):
        a = self.reg(instr, 0)
        m = self.addr(instr, 1)
        self.state.registers.set(a, self.state.memory.get(m))

    def rstr(self, instr: Instruction):
        a = self.reg(instr, 0)
        m = self.addr(instr, 1)
        self.state.memory.set(m, self.state.registers.get(a))

    # - Arithmetic - #

    def add(self, instr: Instruction):
        self.arithm_pair(instr, lambda a, b: b + a)

    def sub(self, instr: Instruction):
        self.arithm_pair(instr, lambda a, b: b - a)

    def bor(self, instr: Instruction):
        self.arithm_pair(instr, lambda a, b: a | b)

    def xor(self, instr: Instruction):
        self.arithm_pair(instr, lambda a, b: a ^ b)

    def band(self, instr: Instruction):
        self.arithm_pair(instr, lambda a, b: a & b)

    def inv(self, instr: Instruction):
        a = self.reg(instr, 0)
        r = self.state.registers
        r.set(a, ~r.get(a))

    def rsh(self, instr: Instruction):
        a = self.reg(instr, 0)
        b = self.reg(instr, 1)
        r = self.state.registers
        r.set(b, r.get(a) >> 1)

    HANDLERS = {
        Op.NOOP: noop,
        Op.JMP: jmp,
        Op.CALL: call,
        Op.RET: ret,
        Op.IMM: imm,
        Op.RLOD: rlod,
        Op.RSTR: rstr,

        Op.ADD: add,
        Op.SUB: sub,
        Op.OR: bor,
        Op.XOR: xor,
        Op.AND: band,
        Op.NOT: inv,
        Op.RSH: rsh,
    }

    # -- Implementation -- #

    def decode(self, text: str) -> Instruction:
        command, operands = grammar.split_statement(text)
        name = command.upper()

        if name == Op.JMP.value:
            if not operands:
                raise InvalidOperand(f'JMP instruction is malformed: {text}')

            jmp_type = operands.pop(0)

            if jmp_type not in JUMP_TYPES:
                raise UnknownInstruction(f'Unknown jump type in JMP: {jmp_type}')

            op = JUMP_TYPES[jmp_type]
        elif name in COMMANDS:
            op = COMMANDS[name]
        else:
            raise UnknownInstruction(f'Unknown or invalid instruction: {text}')

        return Instruction(op, tuple(operands), text)

    def execute(self, instr: Instruction) -> int | None:
        lg.debug(f'Executing {instr.op.name} {" ".join(instr.operands)}')
        handler = self.HANDLERS[instr.op]
        return handler(self, instr)

    def step(self, index: int) -> int | None:
        '''
        Executes the line at index and returns the next index,
        or None when the run has to halt. Never raises.
        '''
        self.index = index
        text = self.program[index].strip()

        if not text:
            return index + 1

        self.display.log(f'Decoding: {text} at index {index}')

        if grammar.is_label(text):
            return index + 1

        try:
            target = self.execute(self.decode(text))

        except ExecError as e:
            self.display.log(f'Error: {e}')
            return index + 1

        except EmptyCallStack as e:
            self.display.log(f'Error: {e}')
            return None

        except Halt as e:
            self.display.log(str(e))
            return None

        finally:
            self.debug_dump()

        if target is None:
            return index + 1

        return target
