import logging
from typing import List, Optional

from ..exceptions import (
    RiffException,
    MissingChunk,
    NormalChunkNoSubchunks,
    ContainerChunkNoData,
    MalformedIdentifier,
)
from ..streams import Buffer
from .raw import RawChunk, iter_raw_chunks


logger = logging.getLogger(__name__)


def from_fourcc(raw: bytes) -> str:
    '''Validate a four character code: an alphanumeric prefix padded
    with spaces to the right.

        >>> from_fourcc(b'pdta')
        'pdta'
        >>> from_fourcc(b'ab  ')
        'ab  '

    while b'IN F' or b' abc' raise MalformedIdentifier.
    '''
    position = raw.find(b' ')
    if position == -1:
        position = len(raw)

    left, right = raw[:position], raw[position:]

    if not left or not left.isalnum() or right.strip(b' '):
        raise MalformedIdentifier()

    return raw.decode('ascii')


class RiffChunk(object):
    '''Validated chunk: a node of the tree built from the buffer.

    A container (RIFF or LIST) has only subchunks, a normal chunk has only
    data; asking the wrong thing raises an exception.'''

    def __init__(self, chunk_id: str, chunk_type: Optional[str] = None, subchunks=None, data=None, offset=0):
        self._chunk_id = chunk_id
        self._chunk_type = chunk_type
        self._subchunks = subchunks
        self._data = data
        self.offset = offset

    def __repr__(self):
        if self.is_container():
            return '<%s(%s [%s], %d subchunks)>' % (
                self.__class__.__name__, self._chunk_id, self._chunk_type, len(self._subchunks))

        return '<%s(%s, %d bytes)>' % (self.__class__.__name__, self._chunk_id, len(self._data))

    @classmethod
    def _from_raw_node(cls, raw: RawChunk) -> "RiffChunk":
        '''Validate a single chunk: a container comes back without its subchunks.'''
        chunk_id = from_fourcc(raw.chunk_id)

        if not raw.is_container:
            return cls(chunk_id, data=raw.data, offset=raw.offset)

        chunk_type = from_fourcc(raw.chunk_type)

        logger.debug('building container \'%s\' [%s]', chunk_id, chunk_type)

        return cls(chunk_id, chunk_type=chunk_type, subchunks=[], offset=raw.offset)

    @classmethod
    def from_raw(cls, raw: RawChunk) -> "RiffChunk":
        '''Build the tree rooted at the raw chunk.

        The containers still open are kept in an explicit stack, so the depth
        of the nesting is not limited by the interpreter's recursion limit.'''
        root = cls._from_raw_node(raw)

        if not root.is_container():
            return root

        stack = [(root, iter_raw_chunks(raw.data))]

        try:
            while stack:
                container, children = stack[-1]

                child_raw = next(children, None)
                if child_raw is None:
                    stack.pop()
                    continue

                child = cls._from_raw_node(child_raw)
                container._subchunks.append(child)

                if child.is_container():
                    stack.append((child, iter_raw_chunks(child_raw.data)))
        except RiffException as e:
            e.chain.extend(_.chunk_id() for _, _children in reversed(stack))
            raise

        return root

    @classmethod
    def new(cls, obj) -> "RiffChunk":
        '''Build the tree from the first chunk of the buffer, whatever follows
        it is ignored.

        A Buffer passed in stays owned by the caller, that closes it once the
        tree is dropped. Any other object (a path too) is wrapped into a Buffer
        kept alive by the chunks only: a file is unmapped when the tree is
        garbage collected, pass a Buffer to unmap it at a known point.'''
        buffer = obj if isinstance(obj, Buffer) else Buffer(obj)

        raw = next(iter_raw_chunks(buffer.view), None)
        if raw is None:
            raise MissingChunk()

        return cls.from_raw(raw)

    def chunk_id(self) -> str:
        return self._chunk_id

    def chunk_type(self) -> Optional[str]:
        return self._chunk_type

    def is_container(self) -> bool:
        return self._subchunks is not None

    def chunk_data(self) -> memoryview:
        if self.is_container():
            raise ContainerChunkNoData(chain=[self._chunk_id])

        return self._data

    def subchunks(self) -> List["RiffChunk"]:
        if not self.is_container():
            raise NormalChunkNoSubchunks(chain=[self._chunk_id])

        return self._subchunks

    def subchunk(self, chunk_id: str) -> Optional["RiffChunk"]:
        '''Returns the first child with the given identifier, if any.'''
        for subchunk in self.subchunks():
            if subchunk.chunk_id() == chunk_id:
                return subchunk

        return None

    def walk(self, depth=0):
        '''Depth-first generator of (depth, chunk) couples, starting from this chunk.'''
        stack = [(depth, self)]

        while stack:
            depth, chunk = stack.pop()
            yield depth, chunk

            if chunk.is_container():
                stack.extend((depth + 1, _) for _ in reversed(chunk._subchunks))
