"""Case-folding tokenizer that splits text into runs of Unicode letters."""

from __future__ import annotations

from itertools import groupby
from typing import Iterator, List


def iter_tokens(text: str) -> Iterator[str]:
    """Yield maximal runs of letter characters from case-folded ``text``.

    Letters are the Unicode categories accepted by :meth:`str.isalpha`
    (Lu, Ll, Lt, Lm, Lo). Everything else, including digits, punctuation,
    whitespace and combining marks, only separates tokens.
    """
    folded = text.casefold()
    for is_letter, run in groupby(folded, key=str.isalpha):
        if is_letter:
            yield "".join(run)


def normalize_and_tokenize(text: str) -> List[str]:
    """Return the tokens of ``text`` in order of appearance."""
    return list(iter_tokens(text))


__all__ = ["iter_tokens", "normalize_and_tokenize"]
