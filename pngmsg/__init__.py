"""
# pngmsg: hide messages into PNG files.

A PNG file is a signature followed by a sequence of chunks: besides the
standard ones the format allows private chunks, that decoders are free to
ignore, so a message can be stored into one of them without touching the image.

The format is described with a small "ORM" for binary data, where a format is
a class whose attributes are its fields, in order.

Two basic main operations are defined for the file format and its sub components:

 1. unpack(): reading the binary data and build a high-level representation
    of that. The chunk itself knows how many bytes needs to read to finalize
    the representation.

 2. pack(): encode the high-level representation into binary data; the
    attribute "raw" returns the same data without a stream.

Unpacking and packing back untouched data must give exactly the same bytes.
"""
