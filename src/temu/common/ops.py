from enum import Enum


class Op(Enum):
    # Control
    NOOP = 'NOOP'   # halt the run
    JMP = 'JMP'     # JMP 00 <label|index>
    CALL = 'CALL'   # JMP 10 <label|index>; push index + 1
    RET = 'RET'     # JMP 01; pop -> pc

    # Arithmetic
    ADD = 'ADD'     # R2 + R1 -> R3
    SUB = 'SUB'     # R2 - R1 -> R3
    OR = 'OR'       # R1 |  R2 -> R3
    XOR = 'XOR'     # R1 ^  R2 -> R3
    AND = 'AND'     # R1 &  R2 -> R3
    NOT = 'NOT'     # ~R1 -> R1
    RSH = 'RSH'     # R1 >> 1 -> R2

    # Data
    IMM = 'IMM'     # U2 -> R1
    RLOD = 'RLOD'   # M[U2] -> R1
    RSTR = 'RSTR'   # R1 -> M[U2]


# JMP <type> sub-operations
JUMP_TYPES = {
    '00': Op.JMP,
    '10': Op.CALL,
    '01': Op.RET,
}

# Plain commands; JMP is resolved through JUMP_TYPES
COMMANDS = {op.value: op for op in Op if op not in JUMP_TYPES.values()}
