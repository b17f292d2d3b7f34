# A part of pdfwrite
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
#                    2026 pdfwrite authors
# MIT license -- See LICENSE.txt for details

'''
PDF Exceptions and error handling
'''

import logging


fmt = logging.Formatter('[%(levelname)s] %(filename)s:%(lineno)d %(message)s')

handler = logging.StreamHandler()
handler.setFormatter(fmt)

log = logging.getLogger('pdfwrite')
log.setLevel(logging.WARNING)
log.addHandler(handler)


class PdfError(Exception):
    "Abstract base class of exceptions thrown by this module"

    def __init__(self, msg):
        Exception.__init__(self, msg)
        self.msg = msg

    def __str__(self):
        return self.msg


class PdfValueError(PdfError, ValueError):
    "Error thrown when a PDF object cannot hold the given value"


class PdfOutputError(PdfError):
    "Error thrown when an object cannot be serialized"


class PdfVersionError(PdfOutputError):
    "Error thrown on an unsupported PDF version"
