# A part of pdfwrite
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
#                    2026 pdfwrite authors
# MIT license -- See LICENSE.txt for details

import io

from ..streamer import get_writer


class PdfObject(object):
    ''' A PdfObject is anything that can write itself out as PDF
        object syntax.  It has an indirect attribute which defaults
        to False.

        Leaf objects only need to provide the encoded attribute,
        which is the complete token text.  Objects that are built
        out of other objects override serialize() instead, and
        hand the sink on to their parts.
    '''
    indirect = False

    __slots__ = ()

    @property
    def encoded(self):
        raise NotImplementedError(type(self).__name__)

    def serialize(self, f):
        ''' Write this object to f, which may be a binary or a
            text file-like object, and return f.
        '''
        get_writer(f)(self.encoded)
        return f

    def to_bytes(self):
        return self.serialize(io.BytesIO()).getvalue()

    __bytes__ = to_bytes

    def __str__(self):
        return self.encoded
