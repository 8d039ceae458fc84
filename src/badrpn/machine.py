import logging
import sys

from . import fixed
from .decoder import Operator
from .stack import Stack
from .util import RPNError


logger = logging.getLogger(__name__)


class Machine:
    '''
    Fixed-point arithmetic stack machine (RPN calculator).

    Takes input events and runs them. Faults never escape a cycle: they are
    reported as they happen, and once the cycle is over the stack is
    collapsed down to the answer register.
    '''

    DEFAULT_PRECISION = 3
    DEFAULT_CAPACITY = 256

    # Each takes (left, right, scale).
    OPERATORS = {
        Operator.PLUS: fixed.add,
        Operator.MINUS: fixed.sub,
        Operator.MULTIPLY: fixed.mul,
        Operator.DIVIDE: fixed.div,
    }

    def __init__(self, precision=None, capacity=None, out=None):
        '''
        Create empty stack machine.

        :param precision: Number of fractional decimal digits kept.
        :param capacity: Maximum number of elements on the stack.
        :param out: Stream fault messages are written to; stdout by default.
        '''
        if precision is None:
            precision = type(self).DEFAULT_PRECISION
        if capacity is None:
            capacity = type(self).DEFAULT_CAPACITY
        self.precision = precision
        self.scale = fixed.scale(precision)
        self.stack = Stack(capacity)
        self.out = sys.stdout if out is None else out
        # Last operand popped by an operator, what the stack falls back to
        # after a fault.
        self.ans = 0
        self.failed = False
        self.halted = False

    @property
    def depth(self):
        return len(self.stack)

    def apply(self, event):
        '''
        Run one input event.

        Returns the new top of the stack, or None when there is nothing to
        display (quit, clear all).
        '''
        operator = event.operator
        if operator is Operator.QUIT:
            self.halted = True
            return None
        elif operator is Operator.CLEAR:
            self.clear()
            return None

        if operator.arithmetic:
            self.ans = self._pop()
        if event.push:
            self._push(event.number)
        if operator.arithmetic:
            # ans is always the left hand operand: 6 2/ is 3, 6 2 / is 0.333.
            other = self._pop()
            try:
                self._push(type(self).OPERATORS[operator](self.ans, other,
                                                          self.scale))
            except RPNError as e:
                self._fault(e)

        if self.failed:
            self.stack.reset(self.ans)
            self.failed = False
            logger.debug('stack reset to %s', list(self.stack))
        return self.stack.peek()

    def clear(self):
        '''
        Clear everything from the stack.
        '''
        self.stack.reset()

    def display(self):
        '''
        Render the top of the stack, with exactly precision decimals.
        '''
        return fixed.render(self.stack.peek(), self.precision)

    def _push(self, value):
        '''
        Push value, dropping it on overflow.
        '''
        try:
            self.stack.push(value)
        except RPNError as e:
            self._fault(e)

    def _pop(self):
        '''
        Pop the top of the stack, 1 on underflow.

        1 rather than 0, so a multiply or divide against it stays harmless.
        '''
        try:
            return self.stack.pop()
        except RPNError as e:
            self._fault(e)
            return 1

    def _fault(self, error):
        logger.debug('fault: %s (ans=%d)', error, self.ans)
        print('\nERROR: {}'.format(error), file=self.out, flush=True)
        self.failed = True
