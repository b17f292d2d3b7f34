#! /usr/bin/env python
# encoding: utf-8
# A part of pdfwrite
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
#                    2026 pdfwrite authors
# MIT license -- See LICENSE.txt for details

'''
Run from the directory above like so:
python -m tests.test_pdfstring
'''


from pdfwrite import PdfString, PdfValueError

import unittest


def swap_decode(token):
    ''' Read back a hex string written low nibble first.
    '''
    body = token[1:-1]
    return bytes(int(body[i + 1] + body[i], 16)
                 for i in range(0, len(body), 2))


class TestHexEncoding(unittest.TestCase):

    def test_low_nibble_first(self):
        # Deliberately not the usual hex dump order: 0xAB -> "BA"
        self.assertEqual(PdfString(b'\xab').encoded, '<BA>')
        self.assertEqual(PdfString(b'\x01\x10').encoded, '<1001>')
        self.assertEqual(PdfString(b'\xff\x0a').encoded, '<FFA0>')
        self.assertEqual(PdfString(b'AB').encoded, '<1424>')

    def test_nullstring(self):
        self.assertEqual(PdfString(b'').encoded, '<>')
        self.assertEqual(PdfString().to_bytes(), b'<>')

    def test_all_bytes(self):
        raw = bytes(range(256))
        encoded = PdfString(raw).encoded
        self.assertEqual(len(encoded), 2 * len(raw) + 2)
        self.assertTrue(encoded.startswith('<'))
        self.assertTrue(encoded.endswith('>'))
        self.assertEqual(encoded, encoded.upper())
        self.assertEqual(swap_decode(encoded), raw)

    def test_binary_content(self):
        raw = b'\x00(\\)\r\n%\x80\xfe'
        s = PdfString(raw)
        self.assertEqual(swap_decode(s.encoded), raw)
        self.assertEqual(s.to_bytes(), s.encoded.encode('ascii'))

    def test_idempotent(self):
        s = PdfString(b'hello')
        self.assertEqual(s.to_bytes(), s.to_bytes())


class TestConstruction(unittest.TestCase):

    def test_byte_types(self):
        expected = PdfString(b'abc')
        self.assertEqual(PdfString(bytearray(b'abc')), expected)
        self.assertEqual(PdfString(memoryview(b'abc')), expected)
        self.assertEqual(PdfString.from_bytes(b'abc'), expected)
        self.assertEqual(PdfString(expected), expected)
        self.assertIs(type(PdfString(bytearray(b'abc')).value), bytes)

    def test_rejects_text(self):
        self.assertRaises(PdfValueError, PdfString, 'abc')
        self.assertRaises(PdfValueError, PdfString, 3)
        self.assertRaises(PdfValueError, PdfString.from_unicode, b'abc')

    def test_unicode(self):
        s = PdfString.from_unicode('A')
        self.assertEqual(s.value, b'\xfe\xff\x00A')
        self.assertEqual(s.encoded, '<EFFF0014>')
        s = PdfString.from_unicode('δΩ')
        self.assertEqual(swap_decode(s.encoded)[2:].decode('utf-16-be'),
                         'δΩ')

    def test_container_behaviour(self):
        s = PdfString(b'abc')
        self.assertEqual(len(s), 3)
        self.assertEqual(hash(s), hash(PdfString(b'abc')))
        self.assertNotEqual(s, PdfString(b'abd'))
        self.assertNotEqual(s, b'abc')
        self.assertEqual(repr(s), "PdfString(b'abc')")
        self.assertEqual(str(s), '<162636>')


def main():
    unittest.main()


if __name__ == '__main__':
    main()
