'''
Input decoder tests
'''

from io import StringIO

from badrpn.decoder import Decoder, InputEvent, Literal, Operator

from pytest import mark


DEL = '\x7f'
ESC = '\x1b'


@mark.parametrize('typed, number', [
    ('12 ', 12000),
    ('12\n', 12000),
    ('12\r', 12000),
    ('12.5 ', 12500),
    ('12.3456 ', 12345),
    ('5. ', 5000),
    ('.25 ', 250),
    ('0 ', 0),
    ('1.2.3 ', 1230),
])
def test_literal_scaled_to_precision(decoder, typed, number):
    assert decoder.decode(iter(typed)) == InputEvent(number, Operator.NONE,
                                                     True)


@mark.parametrize('typed, number', [
    ('5_ ', -5000),
    # Nothing typed yet: negating zero changes nothing.
    ('_5 ', 5000),
    # -1, then a 2 appended: -10 + 2.
    ('1_2 ', -8000),
    ('5__ ', 5000),
    ('1.5_ ', -1500),
])
def test_negate(decoder, typed, number):
    assert decoder.decode(iter(typed)).number == number


def test_operators_terminate(decoder):
    keys = iter('2+3-4*5/')
    assert decoder.decode(keys) == InputEvent(2000, Operator.PLUS, True)
    assert decoder.decode(keys) == InputEvent(3000, Operator.MINUS, True)
    assert decoder.decode(keys) == InputEvent(4000, Operator.MULTIPLY, True)
    assert decoder.decode(keys) == InputEvent(5000, Operator.DIVIDE, True)


def test_bare_operator_pushes_nothing(decoder):
    assert decoder.decode(iter('+')) == InputEvent(0, Operator.PLUS, False)


def test_typed_zero_is_pushed(decoder):
    assert decoder.decode(iter('0+')) == InputEvent(0, Operator.PLUS, True)


@mark.parametrize('typed', [' ', '\n', 'xyz '])
def test_empty_line_is_noop(decoder, typed):
    assert decoder.decode(iter(typed)) == InputEvent(0, Operator.NONE, False)


def test_clear_discards_literal(decoder):
    event = decoder.decode(iter('12.5;'))
    assert event.operator is Operator.CLEAR
    assert not event.push


def test_quit(decoder):
    assert decoder.decode(iter(ESC)) == InputEvent(0, Operator.QUIT, False)
    assert decoder.decode(iter('7' + ESC)) == InputEvent(7000, Operator.QUIT,
                                                         True)


def test_end_of_input_quits(decoder):
    assert decoder.decode(iter('')) == InputEvent(0, Operator.QUIT, False)
    assert decoder.decode(iter('7')) == InputEvent(7000, Operator.QUIT, True)


def test_ignored_characters(decoder):
    assert decoder.decode(iter('x7a ')).number == 7000


def test_erase_in_reverse_order():
    literal = Literal(3)
    for char in '12':
        literal.digit(char)
    literal.point()
    literal.digit('5')
    assert literal.value() == 12500

    assert literal.erase()
    assert literal.fractional and literal.places == 0
    assert literal.value() == 12000

    assert literal.erase()
    assert not literal.fractional
    assert literal.value() == 12000

    assert literal.erase()
    assert literal.value() == 1000

    assert literal.erase()
    assert literal.value() == 0
    assert not literal.erase()


def test_erase_negation():
    literal = Literal(3)
    literal.digit('4')
    literal.negate()
    assert literal.value() == -4000
    literal.erase()
    assert literal.value() == 4000


def test_erase_while_decoding(decoder):
    assert decoder.decode(iter('12.5' + DEL * 3 + ' ')).number == 1000
    assert decoder.decode(iter(DEL + '5 ')).number == 5000


def test_erased_literal_still_pushes(decoder):
    # The digit is gone, but it was typed: a zero goes on the stack.
    assert decoder.decode(iter('5' + DEL + '+')) == InputEvent(0, Operator.PLUS,
                                                               True)
    assert decoder.decode(iter('5' + DEL + ESC)) == InputEvent(0, Operator.QUIT,
                                                               True)
    # Nothing left on the line though: still a no-op.
    assert decoder.decode(iter('5' + DEL + ' ')) == InputEvent(0, Operator.NONE,
                                                               False)


def test_erase_after_negation_truncates(decoder):
    # -8 loses its last digit by truncating toward zero: 0, not -1.
    assert decoder.decode(iter('1_2' + DEL + ' ')).number == 0


def test_excess_fraction_not_buffered(decoder):
    # The 5 was never taken, so erasing removes the 4.
    assert decoder.decode(iter('1.2345' + DEL + ' ')).number == 1230


def test_precision():
    assert Decoder(precision=0).decode(iter('1.5 ')).number == 1
    assert Decoder(precision=5).decode(iter('1.5 ')).number == 150000


def test_echo():
    out = StringIO()
    decoder = Decoder(echo=out)
    decoder.decode(iter('12+'))
    assert out.getvalue() == '12+'
    decoder.decode(iter('3\n'))
    assert out.getvalue() == '12+3'


def test_echo_skips_dropped_input():
    out = StringIO()
    decoder = Decoder(echo=out)
    decoder.decode(iter('1..2345 '))
    assert out.getvalue() == '1.234 '


def test_echo_rubout():
    out = StringIO()
    decoder = Decoder(echo=out)
    decoder.decode(iter(DEL + '5' + DEL + DEL + ' '))
    # Nothing left typed: the space isn't echoed either.
    assert out.getvalue() == '5\b \b'


def test_events_stop_at_quit(decoder):
    events = list(decoder.events('1 2+' + ESC + '3 '))
    assert events == [
        InputEvent(1000, Operator.NONE, True),
        InputEvent(2000, Operator.PLUS, True),
        InputEvent(0, Operator.QUIT, False),
    ]


@mark.parametrize('char, kind', [
    ('7', 'digit'),
    ('.', 'point'),
    (' ', 'commit'),
    ('\r', 'commit'),
    ('_', 'negate'),
    ('-', 'operator'),
    ('/', 'operator'),
    (';', 'clear'),
    (ESC, 'quit'),
    (DEL, 'erase'),
    ('\b', 'erase'),
    ('a', None),
    ('\t', None),
])
def test_classify(decoder, char, kind):
    assert decoder.classify(char) == kind


def test_arithmetic_operators():
    assert Operator.PLUS.arithmetic
    assert Operator.DIVIDE.arithmetic
    assert not Operator.NONE.arithmetic
    assert not Operator.QUIT.arithmetic
    assert not Operator.CLEAR.arithmetic
