from ff1_crypto.textio import pad_right, prepare_input, strip_newlines, wrap_lines


def test_pad_right_fills_with_zeros():
    assert pad_right("ab", 6) == "ab0000"


def test_pad_right_ignores_short_or_disabled_size():
    assert pad_right("abcdef", 4) == "abcdef"
    assert pad_right("ab", 0) == "ab"
    assert pad_right("ab", -3) == "ab"


def test_wrap_lines_terminates_every_line():
    assert wrap_lines("abcdefg", 3) == "abc\ndef\ng\n"
    assert wrap_lines("abcdef", 3) == "abc\ndef\n"


def test_wrap_lines_disabled():
    assert wrap_lines("abcdef", 0) == "abcdef"


def test_wrap_lines_empty_input():
    assert wrap_lines("", 4) == ""


def test_strip_newlines():
    assert strip_newlines("ab\ncd\n") == "abcd"


def test_prepare_input_strips_newlines_only_when_decrypting():
    assert prepare_input("ab\ncd", decrypt=True) == "abcd"
    assert prepare_input("ab\ncd", decrypt=False) == "ab\ncd"


def test_prepare_input_pads_after_stripping():
    assert prepare_input("ab\ncd", decrypt=True, padding=6) == "abcd00"
