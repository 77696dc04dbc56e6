import binascii
import logging
from contextlib import contextmanager
from typing import Iterator, TextIO, Tuple

log = logging.getLogger(__name__)


def read_lines(stream: TextIO) -> str:
    """Read every line of `stream` and join them with '\\n'.

    Line terminators ('\\n' or '\\r\\n') are dropped, so a trailing newline at
    the end of the stream does not survive.
    """
    lines = []
    for line in stream:
        if line.endswith('\n'):
            line = line[:-1]
        if line.endswith('\r'):
            line = line[:-1]
        lines.append(line)
    return '\n'.join(lines)


def read_text_file(path: str) -> str:
    with open(path, 'r', encoding='ascii', newline='') as f:
        return read_lines(f)


def load_hex_file(path: str, name: str = 'key') -> bytearray:
    """Load a hex-encoded file into a mutable buffer the caller must wipe.

    Raises OSError if the file can't be read and ValueError if its contents
    are not strict hex (even length, no whitespace inside).
    """
    try:
        text = read_text_file(path)
    except UnicodeDecodeError as e:
        raise ValueError(f"{name} file '{path}' is not hex text") from e
    try:
        data = bytearray(binascii.unhexlify(text))
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"invalid {name} hex in '{path}': {e}") from e
    log.debug("Loaded %d-byte %s from '%s'", len(data), name, path)
    return data


def wipe(buf: bytearray) -> None:
    for i in range(len(buf)):
        buf[i] = 0


@contextmanager
def key_material(key_path: str, tweak_path: str) -> Iterator[Tuple[bytearray, bytearray]]:
    """Yield (key, tweak) buffers and zero both on every exit path."""
    key = bytearray()
    tweak = bytearray()
    try:
        key = load_hex_file(key_path, 'key')
        tweak = load_hex_file(tweak_path, 'tweak')
        yield key, tweak
    finally:
        wipe(key)
        wipe(tweak)
