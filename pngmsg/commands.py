'''
Operations on PNG files stored on disk: they only read, write and present
what the codec in pngmsg.png does.
'''
import logging

from pngmsg.png import ChunkType, PNGChunk, PNGFile
from pngmsg.png.utils import format_chunk


logger = logging.getLogger(__name__)


def load_png(path) -> PNGFile:
    with open(path, 'rb') as f:
        contents = f.read()

    logger.debug('read %d bytes from \'%s\'' % (len(contents), path))

    return PNGFile.parse(contents)


def save_png(path, png: PNGFile) -> None:
    data = png.pack()

    with open(path, 'wb') as f:
        f.write(data)

    logger.debug('written %d bytes to \'%s\'' % (len(data), path))


def encode(path, chunk_type: str, message: str) -> PNGChunk:
    '''Append a chunk with the message to the end of the file.'''
    png = load_png(path)

    chunk = PNGChunk.from_data(ChunkType.from_str(chunk_type), message.encode('utf-8'))
    png.append_chunk(chunk)

    save_png(path, png)

    return chunk


def decode(path, chunk_type: str) -> str:
    png = load_png(path)

    chunk = png.chunk_by_type(chunk_type)
    if chunk is None:
        return f'Chunk type: `{chunk_type}` not found.'

    return f'[i] Chunk found: {format_chunk(chunk)}\n[i] Secret message: {chunk.data_as_string()}.'


def remove(path, chunk_type: str) -> PNGChunk:
    '''Remove the first chunk with the given type, ChunkNotFound is raised
    and the file left untouched when there is none.'''
    png = load_png(path)

    chunk = png.remove_first_chunk(chunk_type)

    save_png(path, png)

    return chunk


def print_chunks(path) -> str:
    png = load_png(path)

    return '\n'.join([format_chunk(chunk) for chunk in png.get_chunks()])
