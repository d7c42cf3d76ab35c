"""Size-bounded string copy and concatenation.

These follow the semantics of buffer-size-limited copying: ``size`` is the
full size of the destination buffer including its terminating NUL, so at
most ``size - 1`` characters are kept. Strings end at their first NUL.
Both functions return the resulting string together with the length the
result would have had without truncation; truncation happened when that
length is at least ``size``.
"""

from __future__ import annotations

from typing import AnyStr


def _until_nul(text: AnyStr) -> AnyStr:
    nul = "\0" if isinstance(text, str) else b"\0"
    index = text.find(nul)
    return text if index < 0 else text[:index]


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def strlcpy(src: AnyStr, size: int) -> tuple[AnyStr, int]:
    """Copy ``src`` into a buffer of ``size``; return (copy, len(src))."""
    _check_size(size)
    src = _until_nul(src)
    copied = src[: max(size - 1, 0)]
    return copied, len(src)


def strlcat(dst: AnyStr, src: AnyStr, size: int) -> tuple[AnyStr, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size``.

    Returns the combined string and ``min(size, len(dst)) + len(src)``.
    If ``dst`` already fills the buffer it is returned unchanged.
    """
    _check_size(size)
    dst = _until_nul(dst)
    src = _until_nul(src)
    dlen = min(len(dst), size)
    room = size - dlen
    if room == 0:
        return dst, dlen + len(src)
    return dst[:dlen] + src[: room - 1], dlen + len(src)