"""Standard command-line arguments shared across tools."""

import argparse

from boggle_solver.timings import Timings
from boggle_solver.trie import MINIMUM_WORD_LENGTH, PyTrie, load_word_list


def add_standard_args(
    parser: argparse.ArgumentParser, *, random_seed=False, processes=False
):
    parser.add_argument(
        "--dictionary",
        type=str,
        default="wordlists/sowpods.txt",
        help="Path to dictionary file with one word per line.",
    )
    parser.add_argument(
        "--min_length",
        type=int,
        default=MINIMUM_WORD_LENGTH,
        help="Shortest word to report.",
    )

    if random_seed:
        parser.add_argument(
            "--random_seed",
            help="Explicitly set the random seed.",
            type=int,
            default=-1,
        )
    if processes:
        parser.add_argument(
            "--processes",
            type=int,
            default=1,
            help="Search from each starting cell in a pool of this many processes.",
        )


def get_trie_from_args(args: argparse.Namespace, timings: Timings | None = None):
    timings = timings or Timings()
    with timings.time("read word list from file:"):
        words = load_word_list(args.dictionary, args.min_length)
    with timings.time("insert all the words into a new trie"):
        t = PyTrie.create_from_wordlist(words)
    return t
