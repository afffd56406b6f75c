import mmap
import os
import logging


logger = logging.getLogger(__name__)


class Buffer(object):
    '''This is a simple wrapper around bytes-like/file objects to
    uniform their properties: all the parsing needs is a read-only
    memoryview of the whole content, and every chunk or record is a
    slice of it.

    The buffer is the owner of the data: views derived from it are valid
    only until close() is called.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a memoryview'''
        if isinstance(obj, os.PathLike):
            obj = os.fspath(obj)

        self._type = type(obj)
        self.obj = obj
        self._mmap = None
        self.view = None

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)

        if init_method is None:
            raise ValueError('\'%s\' is the wrong kind of object to use as buffer' % self._type.__name__)

        init_method()

    def __repr__(self):
        return '<%s(%s, %d bytes)>' % (self.__class__.__name__, self._type.__name__, len(self))

    def __len__(self):
        return len(self.view) if self.view is not None else 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def _set_view(self, obj):
        self.view = memoryview(obj).cast('B').toreadonly()

    def init_str(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\'' % self.obj)
        with open(self.obj, 'rb') as f:
            # an empty file cannot be mapped
            if os.fstat(f.fileno()).st_size == 0:
                self._set_view(b'')
                return

            self._mmap = mmap.mmap(f.fileno(), 0, access=mmap.ACCESS_READ)

        self._set_view(self._mmap)

    def init_bytes(self):
        '''We think these are raw bytes'''
        self._set_view(self.obj)

    init_bytearray = init_bytes
    init_memoryview = init_bytes
    init_mmap = init_bytes

    def close(self):
        '''Release the view and the memory map, if any.

        If some view derived from this buffer is still alive the mmap refuses
        to close and BufferError is raised.'''
        if self.view is not None:
            self.view.release()
            self.view = None

        if self._mmap is not None:
            self._mmap.close()
            self._mmap = None
