# A part of pdfwrite
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
#                    2026 pdfwrite authors
# MIT license -- See LICENSE.txt for details

"""
The file header that starts every PDF.

PDF 1.7 reference, section 7.5.2.  The first line of the file is
"%PDF-" followed by the version.  Files that hold binary data should
follow it with a comment line of at least four bytes above 127, so
that file transfer tools treat the file as binary.
"""

import enum

from .errors import PdfVersionError, log
from .streamer import get_writer


class PdfVersion(enum.Enum):
    PDF_1_7 = '1.7'


headers = {
    PdfVersion.PDF_1_7: '%PDF-1.7\n',
}

binary_marker_line = '%\xe2\xe3\xcf\xd3\n'

missing = [version.name for version in PdfVersion if version not in headers]
if missing:
    raise ImportError('No PDF header defined for %s' % ', '.join(missing))
del missing


def write_header(f, version=PdfVersion.PDF_1_7, binary_marker=False):
    ''' Write the header for version to f and return f.

        version may be a PdfVersion or its value string ('1.7').
        An unsupported version raises PdfVersionError before
        anything is written.
    '''
    try:
        version = PdfVersion(version)
    except ValueError:
        raise PdfVersionError('Unsupported PDF version: %r' % (version,))
    header = headers[version]
    if binary_marker:
        header += binary_marker_line
    log.debug('Writing PDF %s header' % version.value)
    get_writer(f)(header)
    return f
