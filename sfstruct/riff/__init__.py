'''
# Resource Interchange File Format

Generic container format made of chunks: each chunk is tagged by a four
character code and has a length prefixed payload. The chunks with identifier
"RIFF" (the outermost) or "LIST" contain other chunks, so a file is a tree.

Reference at <https://www.loc.gov/preservation/digital/formats/fdd/fdd000025.shtml>.

    root = RiffChunk.new(path)
    for depth, chunk in root.walk():
        print('  ' * depth, chunk.chunk_id())
'''
from .raw import RawChunk, iter_raw_chunks, CONTAINER_IDS, HEADER_SIZE
from .chunk import RiffChunk, from_fourcc
