# A part of pdfwrite
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
#                    2026 pdfwrite authors
# MIT license -- See LICENSE.txt for details

"""
This module converts plain Python values into PDF objects.
"""

from .pdfobject import PdfObject
from .pdfvalue import PdfBool, PdfInteger, PdfReal
from .pdfstring import PdfString
from ..errors import PdfValueError


# Searched in order; bool must come before int.
converters = [
    (bool, PdfBool),
    (int, PdfInteger),
    (float, PdfReal),
    (bytes, PdfString),
    (bytearray, PdfString),
    (memoryview, PdfString),
    (str, PdfString.from_unicode),
    ]


def make_object(obj, isinstance=isinstance):
    ''' Return obj if it is already a PdfObject, otherwise the
        PdfObject that represents it.
    '''
    if isinstance(obj, PdfObject):
        return obj
    for superclass, handler in converters:
        if isinstance(obj, superclass):
            return handler(obj)
    raise PdfValueError('No PDF object type for %r' % type(obj).__name__)
