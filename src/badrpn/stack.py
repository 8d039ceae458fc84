from collections import deque

from .util import StackOverflow, StackUnderflow


class Stack:
    '''
    Bounded operand stack of fixed-point values.

    Never grows past its capacity; a push on a full stack is refused rather
    than dropping the bottom element.
    '''

    def __init__(self, capacity):
        self.items = deque()
        self.capacity = capacity

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def push(self, value):
        if len(self.items) >= self.capacity:
            raise StackOverflow()
        self.items.append(value)

    def pop(self):
        try:
            return self.items.pop()
        except IndexError:
            raise StackUnderflow() from None

    def peek(self):
        '''
        Return the top of the stack, or 0 when empty.
        '''
        if not self.items:
            return 0
        return self.items[-1]

    def reset(self, initial=0):
        '''
        Leave just initial on the stack, or nothing at all if it is zero.
        '''
        self.items.clear()
        if initial:
            self.items.append(initial)
