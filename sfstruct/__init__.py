"""
# sfstruct: SoundFont structures for humans.

Read-only parsing of RIFF files and of the SoundFont2 format built on top
of it. Nothing is copied out of the buffer the caller provides:

 1. the Buffer normalizes bytes, memory maps and paths into a single
    read-only memoryview

 2. the RIFF layer decodes the chunk headers and builds a tree of
    validated chunks whose data are slices of that memoryview

 3. the records (see core.Record) are fixed layout views over a slice,
    each field decoding its bytes only when accessed

 4. the SF2 layer navigates the tree and casts the chunks into arrays
    of records.

The user is responsible to keep the buffer open while using whatever
was derived from it.
"""
