import multiprocessing

from tqdm import tqdm

from boggle_solver.board import BOARD_SIZE, Board
from boggle_solver.neighbors import Position
from boggle_solver.trie import MINIMUM_WORD_LENGTH, PyTrie


def bit(pos: Position) -> int:
    x, y = pos
    return 1 << (y * BOARD_SIZE + x)


class Boggler:
    """Finds every dictionary word that can be traced on a board."""

    _trie: PyTrie

    def __init__(self, trie: PyTrie, min_length: int = MINIMUM_WORD_LENGTH):
        self._trie = trie
        self._min_length = min_length
        self._board = None
        self._words = None
        self._paths = None
        self._seq = []
        assert not self._trie.is_word()

    def find_words(self, board: Board) -> set[str]:
        self._start(board, collect_paths=False)
        for pos in board.positions():
            self.do_dfs(pos, self._trie, "", 0)
        return self._words

    def find_words_from(self, board: Board, pos: Position) -> set[str]:
        """Only the words whose paths start at pos."""
        self._start(board, collect_paths=False)
        self.do_dfs(pos, self._trie, "", 0)
        return self._words

    def find_paths(self, board: Board) -> dict[str, list[Position]]:
        """Map each word to the first path found that spells it."""
        self._start(board, collect_paths=True)
        for pos in board.positions():
            self.do_dfs(pos, self._trie, "", 0)
        return self._paths

    def _start(self, board: Board, collect_paths: bool):
        self._board = board
        self._words = set()
        self._paths = {} if collect_paths else None
        self._seq = []

    def do_dfs(self, pos: Position, t: PyTrie, word: str, used: int):
        tile = self._board.value_at(*pos)
        # "QU" is two letters, so walk the trie one character at a time.
        for char in tile:
            t = t.descend(char)
            if t is None:
                return

        word += tile
        used |= bit(pos)
        if self._paths is not None:
            self._seq.append(pos)

        if t.is_word() and len(word) >= self._min_length:
            self._words.add(word)
            if self._paths is not None and word not in self._paths:
                self._paths[word] = [*self._seq]

        if t.has_children():
            for n in self._board.neighbors(*pos):
                if not used & bit(n):
                    self.do_dfs(n, t, word, used)

        if self._paths is not None:
            self._seq.pop()


def search_init(trie: PyTrie, board: Board, min_length: int):
    # Stash per-process state on the worker function to avoid a global.
    search_worker.boggler = Boggler(trie, min_length)
    search_worker.board = board


def search_worker(pos: Position) -> set[str]:
    boggler: Boggler = search_worker.boggler
    return boggler.find_words_from(search_worker.board, pos)


def find_words_parallel(
    trie: PyTrie,
    board: Board,
    processes: int,
    min_length: int = MINIMUM_WORD_LENGTH,
    progress: bool = False,
) -> set[str]:
    """Search from each start cell in a separate task and merge the results."""
    positions = [*board.positions()]
    pool = None
    if processes > 1:
        pool = multiprocessing.Pool(
            processes, search_init, (trie, board, min_length)
        )
        it = pool.imap_unordered(search_worker, positions)
    else:
        search_init(trie, board, min_length)
        it = (search_worker(pos) for pos in positions)

    words = set()
    try:
        for found in tqdm(it, total=len(positions), disable=not progress):
            words.update(found)
    finally:
        if pool:
            pool.terminate()
            pool.join()
    return words
