'''
Decoding of the chunk headers, without any validation of the identifiers.

Each chunk starts with an header of 8 bytes

 1. 4 bytes of identifier
 2. 4 bytes little endian of length of the payload

the payload is padded to an even number of bytes, but the pad byte is not
counted into the length. The identifiers "RIFF" and "LIST" are special: the
payload starts with 4 bytes of type followed by the subchunks.
'''
import logging
import struct

from ..exceptions import TruncatedChunkData


logger = logging.getLogger(__name__)

HEADER_SIZE = 8
CONTAINER_IDS = (b'RIFF', b'LIST')

_header = struct.Struct('<4sI')


class RawChunk(object):
    '''Unvalidated chunk: identifiers are still raw bytes and the data
    is a slice of the memoryview it was decoded from.

    For a container chunk_type is the container identifier (RIFF or LIST)
    and chunk_id is the type stored at the start of the payload, for a
    normal chunk chunk_type is None.'''

    def __init__(self, chunk_id, data, chunk_type=None, offset=0):
        self.chunk_id = chunk_id
        self.data = data
        self.chunk_type = chunk_type
        self.offset = offset

    def __repr__(self):
        if self.is_container:
            return '<%s(%r [%r] @0x%x, %d bytes)>' % (
                self.__class__.__name__, self.chunk_id, self.chunk_type, self.offset, len(self.data))

        return '<%s(%r @0x%x, %d bytes)>' % (self.__class__.__name__, self.chunk_id, self.offset, len(self.data))

    @property
    def is_container(self):
        return self.chunk_type is not None


def iter_raw_chunks(data):
    '''Generator decoding the chunks one after the other.

    It stops as soon as there is no room for another header, while a chunk
    declaring more data than available raises TruncatedChunkData (that
    terminates the iteration too).

    Note that the offset is always rounded to an even value: an odd length chunk
    without the pad byte makes the next header misdecode.'''
    data = memoryview(data)
    offset = 0

    while offset + HEADER_SIZE <= len(data):
        chunk_id, length = _header.unpack_from(data, offset)
        start = offset + HEADER_SIZE
        end = start + length

        logger.debug('chunk %r at offset 0x%x with length %d', chunk_id, offset, length)

        if end > len(data):
            logger.debug('chunk %r ends at 0x%x, past the 0x%x available bytes', chunk_id, end, len(data))
            raise TruncatedChunkData()

        if chunk_id in CONTAINER_IDS:
            # the type identifier must fit into the declared length
            if length < 4:
                raise TruncatedChunkData()

            yield RawChunk(
                data[start:start + 4].tobytes(),
                data[start + 4:end],
                chunk_type=chunk_id,
                offset=offset,
            )
        else:
            yield RawChunk(chunk_id, data[start:end], offset=offset)

        offset = end + (end & 1)
