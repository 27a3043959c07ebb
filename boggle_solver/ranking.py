from typing import Iterable


def rank_words(words: Iterable[str]) -> list[str]:
    """Longest words first; alphabetical among words of the same length."""
    return sorted(set(words), key=lambda word: (-len(word), word))
