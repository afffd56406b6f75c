class SoundStructException(Exception):
    '''Base class to extend in order to throw exception in sfstruct.

    It takes an optional argument that represents the chain of the chunks
    that enclosed the failure, the innermost first.
    '''
    message = 'Parsing error'

    def __init__(self, chain=None):
        self.chain = chain if chain is not None else []
        super().__init__()

    def __str__(self):
        if not self.chain:
            return self.message

        return '%s (at %s)' % (self.message, '/'.join(reversed(self.chain)))


class RiffException(SoundStructException):
    pass


class Sf2Exception(SoundStructException):
    pass


class MissingChunk(SoundStructException):
    '''Raised by the RIFF layer when the buffer holds no chunk at all and by
    the SF2 layer when a required chunk (indicated by chunk_id) is absent.'''

    def __init__(self, chunk_id=None, chain=None):
        self.chunk_id = chunk_id
        super().__init__(chain=chain)

    @property
    def message(self):
        return 'Missing chunk' if self.chunk_id is None else f"Missing '{self.chunk_id}' chunk"


class NormalChunkNoSubchunks(RiffException):
    message = 'Normal chunks cannot have subchunks'


class ContainerChunkNoData(RiffException):
    message = 'Container chunks cannot have data'


class TruncatedChunkData(RiffException):
    message = 'Truncated chunk data'


class MalformedIdentifier(RiffException):
    message = 'Malformed identifier'


class InvalidRootChunk(Sf2Exception):
    message = 'Invalid root chunk'


class _ChunkIdException(Sf2Exception):

    def __init__(self, chunk_id, chain=None):
        self.chunk_id = chunk_id
        super().__init__(chain=chain)


class MalformedChunk(_ChunkIdException):

    @property
    def message(self):
        return f"Malformed '{self.chunk_id}' chunk"


class MissingTerminatorRecord(_ChunkIdException):

    @property
    def message(self):
        return f"Missing terminator record for '{self.chunk_id}' chunk"


class MalformedZstr(Sf2Exception):
    message = 'Malformed zero-terminated string'


class MalformedFixedstr(Sf2Exception):
    message = 'Malformed fixed-length string'


class MalformedVersionChunk(Sf2Exception):
    message = 'Malformed version chunk'
