# A part of pdfwrite
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
#                    2026 pdfwrite authors
# MIT license -- See LICENSE.txt for details

"""
This module adapts output sinks for the serializers.

PDF object syntax is plain ASCII (plus the occasional Latin-1 byte in
a comment), so every object builds its tokens as str.  Binary sinks
get them encoded; text sinks get them as is.  Nothing is buffered:
each token goes to the sink as soon as it is produced, and any error
the sink raises goes straight back to the caller.
"""

import io


def get_writer(f, isinstance=isinstance, TextIOBase=io.TextIOBase):
    """ Return a function that writes one str token to f.
    """
    f_write = f.write
    if isinstance(f, TextIOBase):
        return f_write

    def write(s):
        f_write(s.encode('latin-1'))
    return write
