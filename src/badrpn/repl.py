import sys

from .decoder import Operator


PROMPT = '[{}] > '
RESULT = ' >>> {}'


def interact(machine, decoder, keys, out=None):
    '''
    Prompt, decode, run and print until the machine halts or keys run out.

    :param keys: iterator of single characters.
    :returns: exit status, 0.
    '''
    out = sys.stdout if out is None else out
    keys = iter(keys)
    while not machine.halted:
        print(PROMPT.format(machine.depth), end='', file=out, flush=True)
        event = decoder.decode(keys)
        top = machine.apply(event)
        if top is not None:
            print(RESULT.format(machine.display()), file=out, flush=True)
        elif event.operator is Operator.CLEAR:
            print(file=out, flush=True)
    # Leave the shell prompt on a line of its own.
    print(file=out, flush=True)
    return 0
