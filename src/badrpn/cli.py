from os import isatty
import sys
from argparse import ArgumentParser, ArgumentTypeError, REMAINDER
import logging

from .decoder import Decoder
from .keys import LineKeys, TerminalKeys
from .machine import Machine
from .repl import interact


def _at_least(minimum):
    '''
    Return argparse type converting to int, refusing anything below minimum.
    '''
    def convert(text):
        try:
            value = int(text)
        except ValueError:
            raise ArgumentTypeError('not an integer: {!r}'.format(text))
        if value < minimum:
            raise ArgumentTypeError('must be at least {}'.format(minimum))
        return value
    return convert


class CLI:
    '''
    Command line interface to RPN system.
    '''

    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def dumper(self):
        '''
        Dump all decoded input events, without running them.
        '''
        decoder = Decoder(precision=self.args.precision)
        print('<operator>\t<push>\t<number>')
        with self._keys() as keys:
            for event in decoder.events(keys):
                print(event.operator.name,
                      event.push,
                      event.number,
                      sep='\t')
        return 0

    def executor(self):
        '''
        Run machine (RPN calculator).
        '''
        machine = Machine(precision=self.args.precision,
                          capacity=self.args.capacity)
        with self._keys() as keys:
            decoder = Decoder(precision=self.args.precision,
                              echo=sys.stdout if keys.echo else None)
            return interact(machine, decoder, keys)

    def raw_grammar(self):
        '''
        Print current internally defined character classes.
        '''
        print(Decoder.LEXEME)
        return 0

    def _keys(self):
        '''
        Pick keystroke source.

        Raw terminal if both stdin/out are a tty, unless asked not to, or given
        expressions. Lines otherwise.
        '''
        if self.args.expressions is not None:
            return LineKeys(self.args.expressions)
        if not self.args.line and sys.platform != 'win32' and \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            return TerminalKeys()
        return LineKeys(sys.stdin)

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Fixed-point RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=_at_least(0),
                                          default=Machine.DEFAULT_PRECISION,
                                          help='fractional decimal digits')
        self.argument_parser.add_argument('-n', '--capacity',
                                          type=_at_least(1),
                                          default=Machine.DEFAULT_CAPACITY,
                                          help='maximum stack depth')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-l', '--line',
                                       action='store_true',
                                       help='line buffered input, even on '
                                            'a terminal')
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.

        Returns exit status.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(
            level=logging.DEBUG if self.args.verbose else logging.WARNING,
            format=self.LOG_FORMAT,
            stream=sys.stderr)
        try:
            return self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)
