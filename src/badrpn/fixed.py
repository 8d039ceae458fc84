'''
Fixed-point arithmetic on plain ints.

A value v at precision P stands for v / 10**P. Operands are always at full
precision, so multiplication and division only ever correct for one factor
of the scale.
'''

from .util import DivisionByZero


def scale(precision):
    '''
    Return the scale factor for precision, 10**precision.
    '''
    return 10 ** precision


def tdiv(dividend, divisor):
    '''
    Integer division truncating toward zero, not toward negative infinity.
    '''
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient


def add(left, right, scale):
    return left + right


def sub(left, right, scale):
    return left - right


def mul(left, right, scale):
    # Both operands carry the scale; drop one of them.
    return tdiv(left * right, scale)


def div(left, right, scale):
    if not right:
        raise DivisionByZero()
    return tdiv(left * scale, right)


def render(value, precision):
    '''
    Format fixed-point value with exactly precision fractional digits.

    Integer arithmetic only: no rounding, no float conversion.
    '''
    sign = '-' if value < 0 else ''
    whole, fraction = divmod(abs(value), scale(precision))
    if not precision:
        return '{}{}'.format(sign, whole)
    return '{}{}.{:0{}d}'.format(sign, whole, fraction, precision)
