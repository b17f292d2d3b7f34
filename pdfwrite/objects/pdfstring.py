# A part of pdfwrite
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
#                    2026 pdfwrite authors
# MIT license -- See LICENSE.txt for details

"""

================================
PdfString encoding
================================

PDF strings are described in the PDF 1.7 reference manual, section
7.3.4.  A string can be written either as a literal string, delimited
by parentheses, or as a hexadecimal string, delimited by angle
brackets.  This module only writes hexadecimal strings, which can
carry any byte without escapes.

Nibble order
============

Each byte is written as two upper case hex digits, but the LOW
nibble comes first:  the byte 0xAB is written as "BA", so

    PdfString(b'\\xab').encoded == '<BA>'

This is not the usual most-significant-digit-first order of a hex
dump.  Existing consumers of this output rely on it, so it is kept
exactly as is; anything that needs to read the string back must swap
the two digits of each pair.

Text strings
============

Section 7.9.2.2 of the reference describes text strings.  The
from_unicode() constructor stores text as UTF-16BE with a leading
byte order mark, which can represent any character.  The result is
hex encoded like any other byte string.
"""

import codecs

from .pdfobject import PdfObject
from ..errors import PdfValueError


class PdfString(PdfObject):
    """ A PdfString holds the raw bytes of a PDF string.  The
        bytes are written out as a hexadecimal string.  Like any
        PDF object, it could be indirect, but it defaults to being
        a direct object.
    """

    __slots__ = ('_value',)

    text_encoding = 'utf-16-be'
    text_bom = codecs.BOM_UTF16_BE

    # Two hex digits per byte value, low nibble first
    hex_pairs = tuple('%X%X' % (x & 0x0F, x >> 4) for x in range(256))

    def __init__(self, value=b''):
        if isinstance(value, PdfString):
            value = value._value
        elif isinstance(value, (bytes, bytearray, memoryview)):
            value = bytes(value)
        else:
            raise PdfValueError('PdfString requires bytes, not %r '
                                '(use PdfString.from_unicode for text)'
                                % type(value).__name__)
        self._value = value

    @property
    def value(self):
        return self._value

    @classmethod
    def from_bytes(cls, raw):
        return cls(raw)

    @classmethod
    def from_unicode(cls, source):
        """ Encode a text string as the bytes of a PDF text string.
        """
        if not isinstance(source, str):
            raise PdfValueError('from_unicode requires a str, not %r'
                                % type(source).__name__)
        return cls(cls.text_bom + source.encode(cls.text_encoding))

    @property
    def encoded(self):
        hex_pairs = self.hex_pairs
        return '<%s>' % ''.join([hex_pairs[x] for x in self._value])

    def __len__(self):
        return len(self._value)

    def __eq__(self, other):
        if isinstance(other, PdfString):
            return self._value == other._value
        return NotImplemented

    def __ne__(self, other):
        if isinstance(other, PdfString):
            return self._value != other._value
        return NotImplemented

    def __hash__(self):
        return hash(self._value)

    def __repr__(self):
        return 'PdfString(%r)' % (self._value,)
