from enum import Flag


class ChunkProperty(Flag):
    '''Properties of a chunk encoded by the case of the letters of its type.'''
    NONE           = 0
    CRITICAL       = 1 << 0
    PUBLIC         = 1 << 1
    RESERVED_VALID = 1 << 2
    SAFE_TO_COPY   = 1 << 3
