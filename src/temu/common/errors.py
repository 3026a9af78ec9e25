class TemuError(Exception):
    pass


class ExecError(TemuError):
    ''' Recoverable: the instruction is abandoned, execution goes on '''
    pass


class InvalidOperand(ExecError):
    pass


class UnresolvedTarget(ExecError):
    pass


class UnknownInstruction(ExecError):
    pass


class EmptyCallStack(TemuError):
    pass


class Halt(TemuError):
    pass
