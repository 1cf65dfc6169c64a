"""
WAV file format encoding.
Serializes a WaveFile model to a byte sink and patches the RIFF length.
"""

import io
import logging
import os
import struct
from typing import BinaryIO, Union

from riffwave.chunks import DataChunk, FormatChunk, HeaderChunk, WaveFile


logger = logging.getLogger(__name__)

HEADER_STRUCT = struct.Struct('<4sI4s')
FORMAT_STRUCT = struct.Struct('<4sIHHIIHH')
DATA_PREFIX_STRUCT = struct.Struct('<4sI')

# Offset of the RIFF file length field
FILE_LENGTH_OFFSET = 4

# "RIFF" header + "fmt " chunk + "data" id and size
HEADER_SIZE = HEADER_STRUCT.size + FORMAT_STRUCT.size + DATA_PREFIX_STRUCT.size


def encode_header(header: HeaderChunk) -> bytes:
    """Encode the 12-byte RIFF header."""
    return HEADER_STRUCT.pack(header.chunk_id, header.file_length, header.riff_type)


def encode_format(fmt: FormatChunk) -> bytes:
    """Encode the 24-byte ``fmt `` chunk, id and size included."""
    return FORMAT_STRUCT.pack(
        fmt.chunk_id,
        fmt.chunk_size,
        fmt.tag,
        fmt.channels,
        fmt.sample_rate,
        fmt.avg_bytes_per_sec,
        fmt.block_align,
        fmt.bits_per_sample,
    )


def encode_data(data: DataChunk) -> bytes:
    """Encode the ``data`` chunk: id, byte size, then every sample as <i16."""
    samples = struct.pack(f'<{len(data.samples)}h', *data.samples)
    return DATA_PREFIX_STRUCT.pack(data.chunk_id, data.chunk_size) + samples


def _patch_file_length(sink: BinaryIO) -> int:
    """Rewrite the RIFF length field from the sink's actual size.

    Returns the total size of the sink in bytes.
    """
    sink.flush()
    total = sink.seek(0, os.SEEK_END)
    sink.seek(FILE_LENGTH_OFFSET)
    sink.write(struct.pack('<I', total - 8))
    sink.seek(0, os.SEEK_END)
    sink.flush()
    return total


def write_wav(wave: WaveFile, sink: BinaryIO) -> int:
    """
    Write a complete WAV file to a binary sink.

    Chunks are written in order with a 0 placeholder for the file length,
    then the sink is seeked back to offset 4 and the placeholder is replaced
    with ``total - 8``. The sink is assumed to be empty and positioned at 0.

    Sinks that cannot seek get the whole stream assembled in memory first
    and receive it in a single write.

    Args:
        wave: Model to encode. Its header ``file_length`` is updated.
        sink: Writable binary file object

    Returns:
        Total number of bytes written
    """
    if not sink.seekable():
        buf = io.BytesIO()
        total = write_wav(wave, buf)
        sink.write(buf.getvalue())
        sink.flush()
        return total

    wave.header.file_length = 0
    sink.write(encode_header(wave.header))
    sink.write(encode_format(wave.format))
    sink.write(encode_data(wave.data))
    logger.debug(f"Wrote chunks: fmt={wave.format.chunk_size} bytes, data={wave.data.chunk_size} bytes")

    total = _patch_file_length(sink)
    wave.header.file_length = total - 8
    return total


def save_wav(wave: WaveFile, path: Union[str, os.PathLike]) -> int:
    """
    Create or truncate ``path`` and write the WAV file to it.

    I/O errors propagate unchanged; a failed save may leave a truncated
    file behind.

    Returns:
        Total file size in bytes
    """
    with open(path, 'wb') as f:
        total = write_wav(wave, f)
    logger.info(f"File size is {wave.header.file_length} ({path})")
    return total


def wav_bytes(wave: WaveFile) -> bytes:
    """Encode the WAV file into memory and return its bytes."""
    buf = io.BytesIO()
    write_wav(wave, buf)
    return buf.getvalue()
