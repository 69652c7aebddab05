"""Display-name profanity check."""

from __future__ import annotations

from typing import Callable

from better_profanity import profanity

ProfanityCheck = Callable[[str], bool]


def default_profanity_check() -> ProfanityCheck:
    """Return a predicate backed by better-profanity's default word list."""

    profanity.load_censor_words()
    return profanity.contains_profanity


__all__ = ["ProfanityCheck", "default_profanity_check"]
