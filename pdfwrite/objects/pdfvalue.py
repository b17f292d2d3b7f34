# A part of pdfwrite
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
#                    2026 pdfwrite authors
# MIT license -- See LICENSE.txt for details

"""
Boolean and numeric PDF objects.

PDF 1.7 reference, section 7.3.2 and 7.3.3.

Each kind of value is its own class, and each class only defines the
operators that make sense for it:

  - PdfBool has the logical operators &, |, ^ and ~
  - PdfInteger has arithmetic, floor division, modulo, the bitwise
    operators and shifts
  - PdfReal has arithmetic only

Anything else is missing from the class, so Python raises the usual
TypeError.  Values are immutable; every operator returns a new
instance of the same class.  The other operand may be another instance
of the same kind, or a plain Python value of the matching type.  Kinds
do not mix: PdfInteger(1) + PdfReal(1.0) is a TypeError, just as
the two would be different object types inside a PDF.
"""

import decimal
import math
import operator

from .pdfobject import PdfObject
from ..errors import PdfValueError


def format_real(value, precision=None, repr=repr, Decimal=decimal.Decimal):
    ''' Format a float in PDF fixed point notation.

        PDFs don't handle exponent notation.  With precision None,
        the shortest text that reads back as the same float is
        used, with at least one digit after the decimal point.
        Otherwise exactly precision fractional digits are written.
        Zero never carries a sign.
    '''
    if precision is None:
        text = repr(value)
        if 'e' in text:
            text = format(Decimal(text), 'f')
        if '.' not in text:
            text += '.0'
    else:
        text = '%.*f' % (precision, value)
    if text.startswith('-') and not text.strip('-0.'):
        text = text[1:]
    return text


# Marks a value left out of the constructor call; None is refused
_default = object()


def _apply(op, left, right):
    try:
        return op(left, right)
    except OverflowError:
        raise PdfValueError('Result of %s out of range' % op.__name__)


def _binary(op):
    def method(self, other):
        other = self._operand(other)
        if other is NotImplemented:
            return other
        return self._result(_apply(op, self._value, other))
    return method


def _reflected(op):
    def method(self, other):
        other = self._operand(other)
        if other is NotImplemented:
            return other
        return self._result(_apply(op, other, self._value))
    return method


def _shift_left(value, count):
    # Refuse before Python builds an arbitrarily large int
    if value and count >= 64:
        raise PdfValueError('Left shift leaves the 64 bit range')
    return value << count


def _unary(op):
    def method(self):
        return self._result(op(self._value))
    return method


class PdfValue(PdfObject):
    ''' Common base of PdfBool, PdfInteger and PdfReal.

        Holds the Python scalar in the read-only value attribute,
        and supplies comparison and hashing against other instances
        of the same kind and against plain scalars.
    '''

    __slots__ = ('_value',)

    default = None

    # Plain Python types accepted as the other operand
    operand_types = ()

    def __init__(self, value=_default):
        if value is _default:
            value = self.default
        elif isinstance(value, self._kind()):
            value = value._value
        self._value = self.check(value)

    @classmethod
    def _kind(cls):
        ''' The class that defines this kind of value, so
            subclasses (e.g. a PdfReal with another precision)
            still combine with their parent.
        '''
        for klass in cls.__mro__:
            if PdfValue in klass.__bases__:
                return klass
        raise TypeError('%s is not a PDF value kind' % cls.__name__)

    @classmethod
    def check(cls, value):
        raise NotImplementedError(cls.__name__)

    @property
    def value(self):
        return self._value

    def _operand(self, other, isinstance=isinstance, bool=bool):
        if isinstance(other, PdfValue):
            if isinstance(other, self._kind()):
                return other._value
            return NotImplemented
        if isinstance(other, self.operand_types):
            if isinstance(other, bool) and bool not in self.operand_types:
                return NotImplemented
            return other
        return NotImplemented

    def _result(self, value):
        return type(self)(value)

    def _compare(op):
        def method(self, other):
            other = self._operand(other)
            if other is NotImplemented:
                return other
            return op(self._value, other)
        return method

    __eq__ = _compare(operator.eq)
    __ne__ = _compare(operator.ne)
    __lt__ = _compare(operator.lt)
    __le__ = _compare(operator.le)
    __gt__ = _compare(operator.gt)
    __ge__ = _compare(operator.ge)

    del _compare

    def __hash__(self):
        return hash(self._value)

    def __bool__(self):
        return bool(self._value)

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self._value)


class PdfBool(PdfValue):
    ''' A PDF boolean:  true or false
    '''

    __slots__ = ()

    default = False
    operand_types = (bool,)

    @classmethod
    def check(cls, value):
        if not isinstance(value, bool):
            raise PdfValueError('PdfBool requires a bool, not %r' % (value,))
        return value

    @property
    def encoded(self):
        return 'true' if self._value else 'false'

    __and__ = __rand__ = _binary(operator.and_)
    __or__ = __ror__ = _binary(operator.or_)
    __xor__ = __rxor__ = _binary(operator.xor)

    def __invert__(self):
        return self._result(not self._value)


class PdfInteger(PdfValue):
    ''' A PDF integer object, limited to a signed 64 bit range.
        Every operator result is range checked as well.
    '''

    __slots__ = ()

    default = 0
    operand_types = (int,)

    min_value = -2 ** 63
    max_value = 2 ** 63 - 1

    @classmethod
    def check(cls, value):
        if isinstance(value, bool) or not isinstance(value, int):
            raise PdfValueError('PdfInteger requires an int, not %r'
                                % (value,))
        if not cls.min_value <= value <= cls.max_value:
            raise PdfValueError('PdfInteger value out of 64 bit range')
        return value

    @property
    def encoded(self):
        return str(self._value)

    __add__ = __radd__ = _binary(operator.add)
    __sub__ = _binary(operator.sub)
    __rsub__ = _reflected(operator.sub)
    __mul__ = __rmul__ = _binary(operator.mul)
    __floordiv__ = _binary(operator.floordiv)
    __rfloordiv__ = _reflected(operator.floordiv)
    __mod__ = _binary(operator.mod)
    __rmod__ = _reflected(operator.mod)

    __and__ = __rand__ = _binary(operator.and_)
    __or__ = __ror__ = _binary(operator.or_)
    __xor__ = __rxor__ = _binary(operator.xor)
    __lshift__ = _binary(_shift_left)
    __rlshift__ = _reflected(_shift_left)
    __rshift__ = _binary(operator.rshift)
    __rrshift__ = _reflected(operator.rshift)

    __neg__ = _unary(operator.neg)
    __pos__ = _unary(operator.pos)
    __abs__ = _unary(abs)
    __invert__ = _unary(operator.invert)

    # Like int / int, true division gives a real.

    def __truediv__(self, other):
        other = self._operand(other)
        if other is NotImplemented:
            return other
        return PdfReal(_apply(operator.truediv, self._value, other))

    def __rtruediv__(self, other):
        other = self._operand(other)
        if other is NotImplemented:
            return other
        return PdfReal(_apply(operator.truediv, other, self._value))

    def __int__(self):
        return self._value

    __index__ = __int__

    def __float__(self):
        return float(self._value)


class PdfReal(PdfValue):
    ''' A PDF real object.  NaN and infinities have no PDF
        representation and are refused.

        precision controls the output format (see format_real),
        and may be overridden on the class or on a subclass.
    '''

    __slots__ = ()

    default = 0.0
    operand_types = (int, float)

    precision = None

    @classmethod
    def check(cls, value):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise PdfValueError('PdfReal requires a float, not %r'
                                % (value,))
        try:
            value = float(value)
        except OverflowError:
            raise PdfValueError('PdfReal value out of float range')
        if not math.isfinite(value):
            raise PdfValueError('PdfReal cannot represent %r' % value)
        return value

    @property
    def encoded(self):
        return format_real(self._value, self.precision)

    __add__ = __radd__ = _binary(operator.add)
    __sub__ = _binary(operator.sub)
    __rsub__ = _reflected(operator.sub)
    __mul__ = __rmul__ = _binary(operator.mul)
    __truediv__ = _binary(operator.truediv)
    __rtruediv__ = _reflected(operator.truediv)

    __neg__ = _unary(operator.neg)
    __pos__ = _unary(operator.pos)
    __abs__ = _unary(abs)

    def __float__(self):
        return self._value
