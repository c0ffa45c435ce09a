"""Fixed fallback content used when the upstream generator fails."""

from __future__ import annotations

DEFAULT_WORD = "CAMERA"


def padding_clue(word: str) -> str:
    """Synthetic clue appended when the generator returned fewer than five."""

    return f"This object starts with the letter {word[0]}"


def fallback_clues(word: str) -> list[str]:
    """Clue set served when the clue call fails.

    The first three clues describe a camera whatever `word` is; only the last
    two are derived from the word.
    """

    return [
        "I am something you might use every day",
        "People interact with me to capture moments",
        "I have a special eye-like feature",
        f"I start with the letter {word[0]}",
        f"I am {len(word)} letters long",
    ]
