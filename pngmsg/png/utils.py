def format_properties(chunk_type):
    return ' '.join([
        'critical' if chunk_type.is_critical() else 'ancillary',
        'public' if chunk_type.is_public() else 'private',
        'reserved-valid' if chunk_type.is_reserved_bit_valid() else 'reserved-invalid',
        'safe-to-copy' if chunk_type.is_safe_to_copy() else 'unsafe-to-copy',
    ])


def format_chunk(chunk):
    '''Multiline description of the chunk, the data is shown only when it's text.'''
    try:
        data = repr(chunk.data_as_string())
    except UnicodeDecodeError:
        data = f'<{chunk.length.value} bytes of binary data>'

    return f'''Chunk {{
  Type:       {chunk.chunk_type}
  Properties: {format_properties(chunk.chunk_type)}
  Length:     {chunk.length.value}
  CRC:        0x{chunk.crc.value:08x}
  Data:       {data}
}}'''
