from typing import Iterable, Self

LETTER_A = ord("A")
NUM_LETTERS = 26

MINIMUM_WORD_LENGTH = 4


def letter_index(char: str) -> int | None:
    i = ord(char) - LETTER_A
    if 0 <= i < NUM_LETTERS:
        return i
    return None


class PyTrie:
    _children: list[Self | None]
    _is_word: bool
    _num_children: int

    def __init__(self):
        self._is_word = False
        self._num_children = 0
        self._children = [None] * NUM_LETTERS

    def descend(self, char: str) -> Self | None:
        """Follow one letter, or return None if no word continues this way."""
        i = letter_index(char)
        if i is None:
            return None
        return self._children[i]

    def is_word(self):
        return self._is_word

    def has_children(self):
        return self._num_children > 0

    # ---

    def set_is_word(self):
        self._is_word = True

    def add_word(self, word: str) -> Self:
        node = self
        for char in word:
            i = letter_index(char)
            assert i is not None, word
            child = node._children[i]
            if child is None:
                child = node._children[i] = PyTrie()
                node._num_children += 1
            node = child
        node.set_is_word()
        return node

    def size(self):
        return (1 if self.is_word() else 0) + sum(c.size() for c in self._children if c)

    def num_nodes(self):
        return 1 + sum(c.num_nodes() for c in self._children if c)

    def find_word(self, word: str):
        node = self
        for char in word:
            node = node.descend(char)
            if node is None:
                return None
        return node

    @staticmethod
    def create_from_wordlist(words: Iterable[str]) -> Self:
        """words should already be upper-case and filtered, see load_word_list."""
        trie = PyTrie()
        for word in words:
            trie.add_word(word)
        return trie


def is_dictionary_word(word: str, min_length: int = MINIMUM_WORD_LENGTH):
    if len(word) < min_length:
        return False
    return all("A" <= let <= "Z" for let in word)


def load_word_list(dict_input: str, min_length: int = MINIMUM_WORD_LENGTH) -> list[str]:
    """Read one word per line, dropping short words and non-letters."""
    words = []
    with open(dict_input) as f:
        for line in f:
            word = line.strip().upper()
            if is_dictionary_word(word, min_length):
                words.append(word)
    return words


def make_py_trie(dict_input: str, min_length: int = MINIMUM_WORD_LENGTH):
    return PyTrie.create_from_wordlist(load_word_list(dict_input, min_length))
