from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def _check_needle(needle: str) -> None:
    if not isinstance(needle, str) or len(needle) != 1:
        raise ValueError(f"needle must be a single character, got {needle!r}")


def _keep(curr: str, prev: str | None, needle: str) -> bool:
    return curr != needle or prev is None or prev != curr


def has_runs(text: Sequence[str], needle: str) -> bool:
    """Return True if two adjacent items of ``text`` both equal ``needle``."""
    _check_needle(needle)
    return any(
        text[idx] == needle and text[idx - 1] == needle for idx in range(1, len(text))
    )


def squeeze(text: str, needle: str) -> str:
    """
    Collapse every run of ``needle`` in ``text`` into a single occurrence.

    Only the exact needle character is affected ("goodbye" with "o" gives
    "godbye"); other doubled letters and different-case variants pass through.
    Returns a new string and leaves ``text`` as it was.
    """
    _check_needle(needle)
    out: list[str] = []
    prev: str | None = None
    for curr in text:
        if _keep(curr, prev, needle):
            out.append(curr)
            prev = curr
    return "".join(out)


def squeeze_in_place(chars: MutableSequence[str], needle: str) -> None:
    """Squeeze ``chars`` (e.g. ``list("heeelo")``) without copying it first."""
    _check_needle(needle)
    prev: str | None = None
    write = 0
    for read in range(len(chars)):
        curr = chars[read]
        if not _keep(curr, prev, needle):
            continue
        if write != read:
            chars[write] = curr
        write += 1
        prev = curr
    del chars[write:]
