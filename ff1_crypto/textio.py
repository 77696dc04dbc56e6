"""Text shaping around the cipher: newline handling, padding and line wrapping."""

PAD_CHAR = '0'


def strip_newlines(data: str) -> str:
    return data.replace('\n', '')


def pad_right(data: str, size: int, fill: str = PAD_CHAR) -> str:
    """Right-pad `data` with `fill` up to `size` characters. size <= 0 disables padding."""
    if size > 0 and len(data) < size:
        return data + fill * (size - len(data))
    return data


def wrap_lines(data: str, width: int) -> str:
    """Split `data` into `width`-character lines, each terminated by '\\n'.

    width <= 0 returns `data` unchanged.
    """
    if width <= 0:
        return data
    return ''.join(data[i:i + width] + '\n' for i in range(0, len(data), width))


def prepare_input(data: str, decrypt: bool, padding: int = 0) -> str:
    # Only ciphertext is unwrapped; plaintext keeps its newlines and is
    # rejected by the codec if it has any.
    if decrypt:
        data = strip_newlines(data)
    return pad_right(data, padding)
