# A part of pdfwrite
# Copyright (C) 2006-2017 Patrick Maupin, Austin, Texas
#                    2026 pdfwrite authors
# MIT license -- See LICENSE.txt for details

import io

from .pdfobject import PdfObject
from .pdfvalue import PdfInteger
from .convert import make_object
from ..errors import PdfValueError, PdfOutputError, log
from ..streamer import get_writer

warn = log.warning


def check_number(value, what, isinstance=isinstance, bool=bool, int=int):
    ''' Object and generation numbers are non-negative integers.
    '''
    if isinstance(value, PdfInteger):
        value = value.value
    if isinstance(value, bool) or not isinstance(value, int):
        raise PdfValueError('%s must be an int, not %r' % (what, value))
    if value < 0:
        raise PdfValueError('%s must not be negative, got %d' % (what, value))
    return value


class PdfReference(PdfObject):
    ''' The "N G R" token that points at an indirect object.
    '''

    __slots__ = ('object_number', 'generation_number')

    def __init__(self, object_number, generation_number=0):
        self.object_number = check_number(object_number, 'Object number')
        self.generation_number = check_number(generation_number,
                                              'Generation number')

    @property
    def encoded(self):
        return '%d %d R' % (self.object_number, self.generation_number)

    def __eq__(self, other):
        if isinstance(other, PdfReference):
            return ((self.object_number, self.generation_number) ==
                    (other.object_number, other.generation_number))
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self):
        return hash((self.object_number, self.generation_number))

    def __repr__(self):
        return 'PdfReference(%d, %d)' % (self.object_number,
                                         self.generation_number)


class IndirectObject(PdfObject):
    ''' An IndirectObject gives another PDF object an identity:
        an object number and a generation number.  It writes the
        wrapped object framed by "N G obj" and "endobj".

        The numbers may be given to the constructor, or assigned
        later by whatever lays out the document.  This class only
        checks that they are non-negative integers; making them
        unique is the job of the document.

        Attributes that the wrapper does not have itself are
        looked up on the wrapped object, so an IndirectObject
        wrapping a PdfInteger still has a value attribute.
    '''
    indirect = True

    # Largest generation number a cross-reference entry can hold
    max_generation = 65535

    def __init__(self, obj, object_number=None, generation_number=0):
        obj = make_object(obj)
        if isinstance(obj, IndirectObject):
            raise PdfValueError('Cannot wrap an indirect object (%r) '
                                'in another one' % obj)
        self.obj = obj
        self.object_number = object_number
        self.generation_number = generation_number

    @classmethod
    def build(cls, obj_class, *args, **kwargs):
        ''' Construct the wrapped object from its own constructor
            arguments:

                IndirectObject.build(PdfInteger, -42, object_number=3)
        '''
        object_number = kwargs.pop('object_number', None)
        generation_number = kwargs.pop('generation_number', 0)
        return cls(obj_class(*args, **kwargs), object_number,
                   generation_number)

    @property
    def object_number(self):
        return self._object_number

    @object_number.setter
    def object_number(self, value):
        if value is not None:
            value = check_number(value, 'Object number')
            if not value:
                warn('Object number 0 is reserved for the head of the '
                     'free list; %r should be renumbered' % self.obj)
        self._object_number = value

    @property
    def generation_number(self):
        return self._generation_number

    @generation_number.setter
    def generation_number(self, value):
        value = check_number(value, 'Generation number')
        if value > self.max_generation:
            warn('Generation number %d of %r will not fit a '
                 'cross-reference entry' % (value, self.obj))
        self._generation_number = value

    @property
    def reference(self):
        if self._object_number is None:
            raise PdfOutputError('No object number assigned to %r'
                                 % self.obj)
        return PdfReference(self._object_number, self._generation_number)

    def serialize(self, f):
        object_number = self._object_number
        if object_number is None:
            raise PdfOutputError('Cannot write %r: no object number '
                                 'assigned' % self.obj)
        f_write = get_writer(f)
        f_write('%d %d obj\n' % (object_number, self._generation_number))
        self.obj.serialize(f)
        f_write('\nendobj\n')
        return f

    @property
    def encoded(self):
        return self.serialize(io.StringIO()).getvalue()

    def __getattr__(self, name):
        # Only called for names not found on the wrapper
        if name.startswith('_') or name == 'obj':
            raise AttributeError(name)
        return getattr(self.obj, name)

    def __repr__(self):
        return 'IndirectObject(%r, %r, %r)' % (self.obj, self._object_number,
                                               self._generation_number)
