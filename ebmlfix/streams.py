import io
import logging
import os


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around bytes/file object to
    uniform its properties: a Stream can be built from

     - a path (str or path-like) that is opened in binary mode
     - some bytes that are read from memory
     - an integer, that allocates a zero-filled buffer of that size to be
       written at given offsets (this is what the packing uses)
    '''
    def __init__(self, obj, flags='r'):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        if isinstance(obj, os.PathLike):
            obj = os.fspath(obj)

        self._type = type(obj)
        self.flags = flags
        self.obj = obj

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)

        if init_method is None:
            raise ValueError('\'%s\' is the wrong kind of object to build a stream' % self._type.__name__)

        init_method()

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.obj.close()

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self._type.__name__)

    def init_str(self):
        '''We think this is a path'''
        mode = 'wb' if 'w' in self.flags else 'rb'
        logger.debug('opening path \'%s\' with mode \'%s\'' % (self.obj, mode))
        self.obj = open(self.obj, mode)

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    def init_bytearray(self):
        self.obj = io.BytesIO(bytes(self.obj))

    def init_int(self):
        '''Allocate the buffer'''
        logger.debug('allocating %d bytes' % self.obj)
        self.obj = io.BytesIO(bytes(self.obj))

    def seek(self, offset):
        if not isinstance(offset, int):
            raise ValueError('\'%s\' is the wrong kind of offset to use' % offset.__class__.__name__)

        self.obj.seek(offset)

        return self

    def read_all(self):
        '''Returns all the data from the actual position up to the end.'''
        return self.obj.read()

    def write(self, data):
        return self.obj.write(data)

    def getvalue(self):
        return self.obj.getvalue()

