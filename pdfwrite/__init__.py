# A part of pdfwrite
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
#                    2026 pdfwrite authors
# MIT license -- See LICENSE.txt for details

from .objects import (PdfObject, PdfBool, PdfInteger, PdfReal,
                      PdfString, IndirectObject, PdfReference, make_object)
from .header import PdfVersion, write_header
from .errors import (PdfError, PdfValueError, PdfOutputError,
                     PdfVersionError)

__version__ = '0.1'

__all__ = """PdfObject PdfBool PdfInteger PdfReal PdfString
             IndirectObject PdfReference make_object
             PdfVersion write_header
             PdfError PdfValueError PdfOutputError PdfVersionError""".split()
