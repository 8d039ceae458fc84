'''
Crude RPN calculator doing fixed point arithmetic, and only + - * /.

Reads raw keystrokes, so there's no enter key to wait for: operators apply
the moment they're typed.

- Digits and . type a number, _ flips its sign, DEL/backspace undoes.
- Space or enter pushes it.
- + - * / push whatever was typed, then apply to the top two.
- ; clears everything.
- ESC quits.

Numbers are fixed point, three decimals by default. Running off either end of
the stack, or dividing by zero, is reported and leaves just the last answer
on the stack.
'''

from .cli import CLI
from .decoder import Decoder, InputEvent, Operator
from .machine import Machine


__all__ = 'Machine', 'Decoder', 'InputEvent', 'Operator', 'CLI'
