#!/usr/bin/env python
"""Find all the words on a 4x4 Boggle board.

Read a board from stdin (or files):

$ python -m boggle_solver.solve
A B C D
E F G H
I J K L
M N QU O
<C-d>

or roll a random one:

$ python -m boggle_solver.solve --random --timing
"""

import argparse
import fileinput
import random
import sys
import time

from boggle_solver.args import add_standard_args, get_trie_from_args
from boggle_solver.board import Board, BoardError
from boggle_solver.boggler import Boggler, find_words_parallel
from boggle_solver.ranking import rank_words
from boggle_solver.timings import Timings


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        prog="Boggle solver",
        description="Find every word that can be traced on a 4x4 Boggle board.",
    )
    add_standard_args(parser, random_seed=True, processes=True)
    parser.add_argument(
        "--random",
        action="store_true",
        help="Roll a random board instead of reading one.",
    )
    parser.add_argument(
        "--timing",
        action="store_true",
        help="Print how long each step took.",
    )
    parser.add_argument(
        "files", metavar="FILE", nargs="*", help="File containing the board, or stdin"
    )
    args = parser.parse_args(argv)
    if args.random_seed >= 0:
        random.seed(args.random_seed)

    global_start_s = time.perf_counter()
    timings = Timings()

    try:
        trie = get_trie_from_args(args, timings)
    except OSError as e:
        sys.exit(f"Unable to read word list {args.dictionary}: {e.strerror}")
    except UnicodeDecodeError as e:
        sys.exit(f"Unable to read word list {args.dictionary}: {e}")

    if args.random:
        with timings.time("generate a random board"):
            board = Board.random()
    else:
        try:
            text = "".join(fileinput.input(args.files))
        except (OSError, UnicodeDecodeError) as e:
            sys.exit(f"Unable to read board: {e}")
        try:
            board = Board.from_text(text)
        except BoardError as e:
            sys.exit(str(e))

    print("Board")
    print("-----")
    print(board, end="")

    with timings.time("find all words once the trie has been created"):
        if args.processes > 1:
            words = find_words_parallel(
                trie, board, args.processes, args.min_length, progress=args.timing
            )
        else:
            words = Boggler(trie, args.min_length).find_words(board)
    results = rank_words(words)

    print(f"There are {len(results)} possible words.")
    for word in results:
        print(word)

    timings.record("total", global_start_s)
    if args.timing:
        print()
        print("Timings")
        print("-------")
        print("\n".join(timings.format()))


if __name__ == "__main__":
    main()
