class RPNError(Exception):
    '''
    Recoverable calculator fault.

    Caught by the machine within the cycle that raised it; never ends the
    loop.
    '''
    message = 'ERROR'

    def __init__(self, message=None):
        super().__init__(message or type(self).message)


class StackOverflow(RPNError):
    message = 'STACK OVERFLOW!'


class StackUnderflow(RPNError):
    message = 'STACK UNDERFLOW!'


class DivisionByZero(RPNError):
    message = 'DIVISION BY ZERO!'
