# A part of pdfwrite
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
#                    2026 pdfwrite authors
# MIT license -- See LICENSE.txt for details

'''
Objects that can be written to PDF files.  Booleans, integers,
reals and strings are direct objects; any of them can be given
an identity by wrapping it in an IndirectObject.
'''
from .pdfobject import PdfObject
from .pdfvalue import PdfValue, PdfBool, PdfInteger, PdfReal, format_real
from .pdfstring import PdfString
from .pdfindirect import IndirectObject, PdfReference
from .convert import make_object

__all__ = """PdfObject PdfValue PdfBool PdfInteger PdfReal format_real
             PdfString IndirectObject PdfReference make_object""".split()
