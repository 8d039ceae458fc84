'''
Keystroke sources.

Each is a context manager that holds whatever terminal state it needs for
exactly as long as the with block runs, and iterates over single characters.
'''

from os import isatty
import logging
import select

from prompt_toolkit.input import create_input


logger = logging.getLogger(__name__)


class TerminalKeys:
    '''
    Unbuffered, unechoed keystrokes straight from the terminal.

    Ctrl-C raises KeyboardInterrupt, since raw mode swallows the signal.
    Ctrl-D ends the stream.
    '''

    # Seconds to wait for the rest of an escape sequence before deciding the
    # user hit ESC on its own.
    ESCAPE_TIMEOUT = 0.05
    INTERRUPT = '\x03'
    EOF = '\x04'

    # We echo ourselves; the terminal won't.
    echo = True

    def __init__(self, stdin=None):
        self.input = create_input(stdin)
        self._raw = None

    def __enter__(self):
        self._raw = self.input.raw_mode()
        self._raw.__enter__()
        logger.debug('terminal in raw mode')
        return self

    def __exit__(self, *exc_info):
        try:
            return self._raw.__exit__(*exc_info)
        finally:
            self._raw = None
            logger.debug('terminal mode restored')

    def __iter__(self):
        fd = self.input.fileno()
        while True:
            select.select([fd], [], [])
            presses = self.input.read_keys()
            # The parser holds back a lone ESC until it knows no sequence
            # follows.
            if self.input.closed or \
               not select.select([fd], [], [], self.ESCAPE_TIMEOUT)[0]:
                presses.extend(self.input.flush_keys())
            for press in presses:
                # Arrow keys and friends: not ours, and not an ESC either.
                if len(press.data) != 1:
                    continue
                if press.data == self.INTERRUPT:
                    raise KeyboardInterrupt
                elif press.data == self.EOF:
                    return
                yield press.data
            if self.input.closed:
                return


class LineKeys:
    '''
    Keystrokes from lines of text: piped stdin, expressions, or a terminal
    that can't do raw mode.

    :param lines: iterable of lines, with or without trailing newlines.
    :param echo: Whether to echo input. Defaults to whether lines is a
                 stream that isn't a terminal.
    '''

    def __init__(self, lines, echo=None):
        if echo is None:
            try:
                echo = not isatty(lines.fileno())
            except (AttributeError, OSError, ValueError):
                echo = True
        self.lines = lines
        self.echo = echo

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return None

    def __iter__(self):
        for line in self.lines:
            yield from line
            if not line.endswith('\n'):
                yield '\n'
