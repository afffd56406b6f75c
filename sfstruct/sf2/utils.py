import logging

from ..core import RecordArray
from ..exceptions import (
    MissingChunk,
    MalformedChunk,
    MissingTerminatorRecord,
    MalformedZstr,
    MalformedFixedstr,
)


logger = logging.getLogger(__name__)


def str_from_zstr(data) -> str:
    '''Decode a zero-terminated UTF-8 string, the terminator is mandatory.'''
    raw = bytes(data)
    position = raw.find(b'\x00')

    if position == -1:
        raise MalformedZstr()

    try:
        return raw[:position].decode('utf-8')
    except UnicodeDecodeError as e:
        raise MalformedZstr() from e


def str_from_fixedstr(data) -> str:
    '''Decode a fixed-length string: only what precedes the first NUL byte (if any)
    is taken into account, some files (GeneralUser GS) have garbage after it.'''
    raw = bytes(data)
    position = raw.find(b'\x00')

    if position == -1:
        position = len(raw)

    try:
        return raw[:position].decode('utf-8')
    except UnicodeDecodeError as e:
        raise MalformedFixedstr() from e


def require_subchunk(chunk, chunk_id):
    subchunk = chunk.subchunk(chunk_id)

    if subchunk is None:
        raise MissingChunk(chunk_id=chunk_id)

    return subchunk


def cast_records(data, record_cls, chunk_id) -> RecordArray:
    '''Reinterpret the data as an array of records whose last element is the terminator.

    The terminator is identified by its position: it's required to exist and it's
    excluded from the returned array, even if its name is not the expected one.'''
    data = memoryview(data)
    size = record_cls.get_size()

    if len(data) % size:
        logger.debug('chunk \'%s\' has %d bytes, not a multiple of %d', chunk_id, len(data), size)
        raise MalformedChunk(chunk_id)

    if len(data) <= size:
        raise MissingTerminatorRecord(chunk_id)

    records = RecordArray(record_cls, data[:-size])

    terminator_name = getattr(record_cls, 'TERMINATOR_NAME', None)
    if terminator_name is not None:
        terminator = record_cls(data[-size:])
        name = terminator.get_name_field().value.split(b'\x00', 1)[0]
        if name != terminator_name:
            logger.warning(f'terminator of chunk \'{chunk_id}\' is named {name!r} instead of {terminator_name!r}')

    logger.debug('chunk \'%s\' contains %d %s', chunk_id, len(records), record_cls.__name__)

    return records
