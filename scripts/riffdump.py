#!/usr/bin/env python3
'''
Print the tree of chunks of a RIFF file (WAV, AVI, SoundFont...).

 $ riffdump.py GeneralUser.sf2
'''
import sys
import os
import logging

from sfstruct.riff import RiffChunk
from sfstruct.streams import Buffer
from sfstruct.exceptions import SoundStructException


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print('usage: %s <riff file>' % progname)
    sys.exit(1)


def dump_chunk(depth, chunk):
    indent = ' ' * depth
    if chunk.is_container():
        print(f'{indent}{chunk.chunk_id()} [{chunk.chunk_type()}] ({len(chunk.subchunks())} subchunks)')
    else:
        print(f'{indent}{chunk.chunk_id()} ({len(chunk.chunk_data())})')


def dump_tree(buffer):
    # the tree must be gone before the buffer is closed
    root = RiffChunk.new(buffer)

    for depth, chunk in root.walk():
        dump_chunk(depth, chunk)


if __name__ == '__main__':
    if len(sys.argv) < 2:
        usage(sys.argv[0])

    path = sys.argv[1]
    status = 0

    with Buffer(path) as buffer:
        try:
            dump_tree(buffer)
        except SoundStructException as e:
            logger.error(f'failed to parse \'{path}\': {e}')
            status = 1

    sys.exit(status)
