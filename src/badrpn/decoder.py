from collections import namedtuple
from enum import Enum
from functools import reduce
import logging
import operator

import regex

from .fixed import tdiv


logger = logging.getLogger(__name__)


class Operator(Enum):
    '''
    What an input event asks the machine to do, besides pushing a literal.

    Values are the characters that terminate input with that operator.
    '''
    NONE = ''
    PLUS = '+'
    MINUS = '-'
    MULTIPLY = '*'
    DIVIDE = '/'
    QUIT = '\x1b'
    CLEAR = ';'

    @property
    def arithmetic(self):
        return self in ARITHMETIC


ARITHMETIC = frozenset({Operator.PLUS, Operator.MINUS,
                        Operator.MULTIPLY, Operator.DIVIDE})


# number: scaled fixed-point literal, 0 if none typed.
# push: a literal was typed and goes on the stack before operator runs.
InputEvent = namedtuple('InputEvent', 'number operator push')


class Literal:
    '''
    Number being typed, and how many of its digits are fractional.

    Remembers every accepted character so that erasing takes back the last
    one, whatever it was.
    '''

    def __init__(self, precision):
        self.precision = precision
        self.number = 0
        self.fractional = False
        self.places = 0
        self.typed = []
        # Set by the first digit, kept even if the digits are all erased.
        self.pushed = False

    def digit(self, char):
        '''
        Append digit; return False if dropped for exceeding the precision.
        '''
        if self.fractional and self.places >= self.precision:
            return False
        self.number = self.number * 10 + int(char)
        if self.fractional:
            self.places += 1
        self.typed.append(char)
        self.pushed = True
        return True

    def point(self):
        '''
        Enter fractional mode; return False if already in it.
        '''
        if self.fractional:
            return False
        self.fractional = True
        self.typed.append('.')
        return True

    def negate(self):
        '''
        Flip the sign of what has been typed so far. Digits typed afterwards
        are appended to the negated number as is, so 1_2 is -8.
        '''
        self.number = -self.number
        self.typed.append('_')

    def erase(self):
        '''
        Take back the last accepted character; return False if there was none.
        '''
        if not self.typed:
            return False
        char = self.typed.pop()
        if char == '_':
            self.number = -self.number
        elif char == '.':
            self.fractional = False
        else:
            self.number = tdiv(self.number, 10)
            if self.fractional:
                self.places -= 1
        return True

    def value(self):
        '''
        Return the literal scaled to full precision, however many fractional
        digits were actually typed.
        '''
        return self.number * 10 ** (self.precision - self.places)


class Decoder:
    '''
    Turns raw keystrokes into input events, one per terminated "line".

    Echoes accepted characters to echo, if given; a terminal already echoing
    its own input should pass None.
    '''
    # One named group per class of character. Anything unmatched is ignored.
    LEXEME = r'''
              (?<digit>[0-9])
              |
              # Only the first one counts
              (?<point>\.)
              |
              # Push whatever was typed
              (?<commit>[\x20\n\r])
              |
              # Unary minus, like dc
              (?<negate>_)
              |
              (?<operator>[+\-*/])
              |
              # Clear all; discards the partial literal too
              (?<clear>;)
              |
              # ESC
              (?<quit>\x1b)
              |
              # DEL, and BS for terminals that send it instead
              (?<erase>[\x7f\x08])
              '''
    # Default regex flags for matching characters
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)
    # Back over the character, blank it, back again.
    RUBOUT = '\b \b'
    # Terminators not repeated on commit; the cursor is already past them.
    SILENT = frozenset({None, '\n', '\r'})

    def __init__(self, precision=3, echo=None):
        self.precision = precision
        self.echo = echo

    def classify(self, char):
        '''
        Return the name of the character class of char, or None.
        '''
        match = regex.fullmatch(type(self).LEXEME, char,
                                flags=type(self).FLAGS)
        if match is None:
            return None
        return match.lastgroup

    def decode(self, keys):
        '''
        Read keys until one terminates the current input and return its event.

        Running out of keys counts as the quit command.

        :param keys: iterator of single characters, consumed as far as needed.
        '''
        literal = Literal(self.precision)
        for char in keys:
            kind = self.classify(char)
            if kind == 'digit':
                if literal.digit(char):
                    self._echo(char)
            elif kind == 'point':
                if literal.point():
                    self._echo(char)
            elif kind == 'negate':
                literal.negate()
                self._echo(char)
            elif kind == 'erase':
                if literal.erase():
                    self._echo(type(self).RUBOUT)
            elif kind == 'commit':
                return self._commit(literal, Operator.NONE, True, char)
            elif kind in ('operator', 'quit'):
                return self._commit(literal, Operator(char),
                                    literal.pushed, char)
            elif kind == 'clear':
                return self._commit(literal, Operator.CLEAR, False, char)
        return self._commit(literal, Operator.QUIT, literal.pushed, None)

    def events(self, keys):
        '''
        Yield events from keys, up to and including the one that quits.
        '''
        keys = iter(keys)
        while True:
            event = self.decode(keys)
            yield event
            if event.operator is Operator.QUIT:
                return

    def _commit(self, literal, operator, push, char):
        if not literal.typed and operator is Operator.NONE:
            # Empty line: nothing to push, not even a zero.
            event = InputEvent(0, Operator.NONE, False)
        else:
            if char not in type(self).SILENT:
                self._echo(char)
            event = InputEvent(literal.value(), operator, push)
        logger.debug('decoded %r from %r', event, ''.join(literal.typed))
        return event

    def _echo(self, text):
        if self.echo is not None:
            self.echo.write(text)
            self.echo.flush()
