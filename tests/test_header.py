#! /usr/bin/env python
# A part of pdfwrite
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
#                    2026 pdfwrite authors
# MIT license -- See LICENSE.txt for details

'''
Run from the directory above like so:
python -m tests.test_header
'''

import io

from pdfwrite import (PdfVersion, write_header, PdfVersionError,
                      PdfOutputError)
from pdfwrite.header import headers

import unittest


class TestHeader(unittest.TestCase):

    def test_pdf17(self):
        f = io.BytesIO()
        self.assertIs(write_header(f), f)
        self.assertEqual(f.getvalue(), b'%PDF-1.7\n')
        self.assertEqual(write_header(io.BytesIO(), PdfVersion.PDF_1_7)
                         .getvalue(), b'%PDF-1.7\n')
        self.assertEqual(write_header(io.BytesIO(), '1.7').getvalue(),
                         b'%PDF-1.7\n')

    def test_text_sink(self):
        self.assertEqual(write_header(io.StringIO()).getvalue(),
                         '%PDF-1.7\n')

    def test_binary_marker(self):
        f = write_header(io.BytesIO(), binary_marker=True)
        self.assertEqual(f.getvalue(), b'%PDF-1.7\n%\xe2\xe3\xcf\xd3\n')

    def test_unsupported_version(self):
        for version in ('1.4', '2.0', 1.7, None, 'PDF_1_7'):
            f = io.BytesIO()
            with self.assertRaises(PdfVersionError):
                write_header(f, version)
            self.assertEqual(f.getvalue(), b'')
        self.assertTrue(issubclass(PdfVersionError, PdfOutputError))

    def test_every_version_has_header(self):
        for version in PdfVersion:
            header = headers[version]
            self.assertEqual(header, '%%PDF-%s\n' % version.value)

    def test_logs_version(self):
        with self.assertLogs('pdfwrite', level='DEBUG') as cm:
            write_header(io.BytesIO())
        self.assertIn('1.7', cm.output[0])


def main():
    unittest.main()


if __name__ == '__main__':
    main()
