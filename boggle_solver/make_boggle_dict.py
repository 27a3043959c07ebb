#!/usr/bin/env python
"""Filter a word list to just the words that can appear on a Boggle board."""

import fileinput

from boggle_solver.trie import MINIMUM_WORD_LENGTH, is_dictionary_word


def is_boggle_word(word: str, min_length: int = MINIMUM_WORD_LENGTH):
    if not is_dictionary_word(word, min_length):
        return False
    # The only Q face is "QU".
    size = len(word)
    for i, let in enumerate(word):
        if let == "Q" and (i + 1 >= size or word[i + 1] != "U"):
            return False
    return True


def main():
    for line in fileinput.input():
        word = line.strip().upper()
        if is_boggle_word(word):
            print(word)


if __name__ == "__main__":
    main()
