"""
Word Ladder Solver
==================

Shortest ladder between two dictionary words by breadth-first search.

The graph is implicit: nodes are dictionary words, an edge joins two words
that differ in exactly one position. Neighbours are expanded position by
position, left to right, and within a position by letter a -> z. With that
fixed order the first shortest path found is always the same one.

The search keeps a predecessor array instead of a queue of full paths,
so memory stays O(n) and the ladder is rebuilt by walking back from the
target. Neighbours come from a per-position bucket index, so expanding a
word costs its degree rather than a scan of the whole dictionary.
"""

import logging
import time
from collections import Counter
from typing import Dict, List, Optional

import numpy as np
from numba import jit

from .dictionary import Dictionary


logger = logging.getLogger(__name__)


# ============================================================================
# CONSTANTS
# ============================================================================

FOUND = 1
UNREACHABLE = 0
ABORTED = -1

FIRST_LETTER = 97  # 'a'
LAST_LETTER = 122  # 'z'



# ============================================================================
# POSITION INDEX
# ============================================================================

def build_position_index(chars: np.ndarray):
    """
    Group words that agree everywhere except at one position.

    For every position p, words with the same letters outside p share a
    bucket. Two words in one bucket differ only at p, so the bucket of a
    word at p holds exactly its neighbours through position p.

    Args:
        chars: shape (n, L) array of char codes

    Returns:
        (bucket_of, order, starts):
        - bucket_of[p, i]: bucket of word i at position p
        - order[p]: word rows sorted by bucket, then by letter at p
        - starts[p, b]: offset of bucket b in order[p] (starts[p, b + 1] ends it)
    """
    n, length = chars.shape
    bucket_of = np.zeros((length, n), dtype=np.int32)
    order = np.zeros((length, n), dtype=np.int32)
    starts = np.zeros((length, n + 1), dtype=np.int32)

    for p in range(length):
        rest = np.delete(chars, p, axis=1)
        if rest.shape[1]:
            _, ids = np.unique(rest, axis=0, return_inverse=True)
            ids = ids.reshape(-1)
        else:
            ids = np.zeros(n, dtype=np.int64)
        bucket_of[p] = ids
        order[p] = np.lexsort((chars[:, p], ids))
        starts[p, 1:] = np.cumsum(np.bincount(ids, minlength=n))

    return bucket_of, order, starts


# ============================================================================
# NUMBA-ACCELERATED SEARCH
# ============================================================================

@jit(nopython=True, cache=True)
def neighbor_indices(chars: np.ndarray, bucket_of: np.ndarray, order: np.ndarray,
                     starts: np.ndarray, idx: int) -> np.ndarray:
    """
    Indices of all words one substitution away from word ``idx``.

    Only substitutions with a letter a-z count. The result is ordered by
    (position, letter), the order in which candidates would be generated
    by trying every letter at every position.

    Args:
        chars: shape (n, L) array of char codes
        bucket_of, order, starts: position index from build_position_index
        idx: row of the word to expand

    Returns:
        Array of row indices
    """
    length = chars.shape[1]
    total = 0
    for p in range(length):
        b = bucket_of[p, idx]
        total += starts[p, b + 1] - starts[p, b]

    found = np.empty(total, dtype=np.int32)
    count = 0
    for p in range(length):
        b = bucket_of[p, idx]
        for k in range(starts[p, b], starts[p, b + 1]):
            j = order[p, k]
            if j == idx:
                continue
            c = chars[j, p]
            if c < FIRST_LETTER or c > LAST_LETTER:
                continue
            found[count] = j
            count += 1

    return found[:count]


@jit(nopython=True, cache=True)
def bfs_predecessors(chars: np.ndarray, bucket_of: np.ndarray, order: np.ndarray,
                     starts: np.ndarray, start: int, target: int, max_expansions: int):
    """
    Breadth-first search from ``start`` until ``target`` is dequeued.

    Args:
        chars: shape (n, L) array of char codes
        bucket_of, order, starts: position index from build_position_index
        start: row of the start word
        target: row of the target word
        max_expansions: stop after expanding this many nodes (-1: no limit)

    Returns:
        (parents, status) where parents[i] is the predecessor row of i
        (-1 for start and unvisited rows) and status is FOUND,
        UNREACHABLE or ABORTED
    """
    n = chars.shape[0]
    parents = np.full(n, -1, dtype=np.int32)
    visited = np.zeros(n, dtype=np.bool_)
    queue = np.empty(n, dtype=np.int32)
    head = 0
    tail = 0

    queue[tail] = start
    tail += 1
    visited[start] = True
    expansions = 0

    while head < tail:
        node = queue[head]
        head += 1
        if node == target:
            return parents, FOUND

        expansions += 1
        if max_expansions >= 0 and expansions > max_expansions:
            return parents, ABORTED

        for nb in neighbor_indices(chars, bucket_of, order, starts, node):
            if not visited[nb]:
                visited[nb] = True
                parents[nb] = node
                queue[tail] = nb
                tail += 1

    return parents, UNREACHABLE


# ============================================================================
# SOLVER
# ============================================================================

class LadderSolver:
    """
    Solver bound to one dictionary.

    The position index is built on first use and reused for every search.

    Args:
        dictionary: Shared, read-only word list
        max_expansions: Default search cap for every solve (None: no cap)
    """

    def __init__(self, dictionary: Dictionary, max_expansions: Optional[int] = None):
        self.dictionary = dictionary
        self.max_expansions = max_expansions
        self._index = None

    @property
    def index(self):
        if self._index is None:
            self._index = build_position_index(self.dictionary.chars)
        return self._index

    def solve(self, start: str, target: str) -> List[str]:
        """
        Shortest ladder from ``start`` to ``target``.

        Returns:
            List of lowercase words from start to target, [start] when both
            are the same word, [] when there is no ladder, either word is
            unknown, or the search hit max_expansions
        """
        dictionary = self.dictionary
        start_idx = dictionary.index(start)
        target_idx = dictionary.index(target)
        if start_idx < 0 or target_idx < 0:
            logger.debug("Not solving %r -> %r: word not in dictionary", start, target)
            return []

        words = dictionary.words
        if start_idx == target_idx:
            return [words[start_idx]]

        limit = -1 if self.max_expansions is None else self.max_expansions
        parents, status = bfs_predecessors(dictionary.chars, *self.index,
                                           start_idx, target_idx, limit)

        if status == ABORTED:
            logger.warning("Search %s -> %s gave up after %d expansions",
                           words[start_idx], words[target_idx], self.max_expansions)
            return []
        if status == UNREACHABLE:
            logger.debug("No ladder from %s to %s", words[start_idx], words[target_idx])
            return []

        ladder = []
        node = target_idx
        while node != -1:
            ladder.append(words[node])
            node = parents[node]
        ladder.reverse()
        logger.debug("Ladder %s", " -> ".join(ladder))
        return ladder

    def neighbors(self, word: str) -> List[str]:
        """Dictionary words one substitution away, in expansion order."""
        idx = self.dictionary.index(word)
        if idx < 0:
            return []
        words = self.dictionary.words
        return [words[i] for i in neighbor_indices(self.dictionary.chars, *self.index, idx)]


def solve(start: str, target: str, dictionary: Dictionary,
          max_expansions: Optional[int] = None) -> List[str]:
    """
    Shortest ladder from ``start`` to ``target`` in ``dictionary``.

    Args:
        max_expansions: Optional cap on expanded nodes; when hit the search
            gives up and returns an empty ladder
    """
    return LadderSolver(dictionary, max_expansions).solve(start, target)


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================

def benchmark(solver: LadderSolver, n_pairs: int = 500,
              rng: Optional[np.random.Generator] = None,
              verbose: bool = True) -> Dict:
    """
    Solve random word pairs and collect ladder statistics.

    Args:
        solver: LadderSolver instance
        n_pairs: Number of random pairs to solve
        rng: numpy Generator for pair selection
        verbose: Print progress

    Returns:
        Dict with results; ladder lengths count words, so a one-step
        ladder has length 2
    """
    lengths = []
    dist = Counter()
    unreachable = []

    t0 = time.time()
    for i in range(n_pairs):
        if verbose and i % 100 == 0:
            elapsed = time.time() - t0
            rate = i / elapsed if elapsed > 0 else 0
            print(f"[{i}/{n_pairs}] {rate:.1f} pairs/s")

        start, target = solver.dictionary.random_distinct_pair(rng)
        ladder = solver.solve(start, target)
        if ladder:
            lengths.append(len(ladder))
            dist[len(ladder)] += 1
        else:
            unreachable.append((start, target))

    elapsed = time.time() - t0

    return {
        'total': n_pairs,
        'solved': len(lengths),
        'average': sum(lengths) / len(lengths) if lengths else 0.0,
        'longest': max(lengths) if lengths else 0,
        'distribution': dict(sorted(dist.items())),
        'unreachable': len(unreachable),
        'unreachable_pairs': unreachable[:10],
        'time': elapsed,
        'rate': n_pairs / elapsed if elapsed > 0 else 0.0,
    }


def print_results(results: Dict):
    """Print benchmark results."""
    print("\n" + "=" * 60)
    print("BENCHMARK RESULTS")
    print("=" * 60)
    print(f"Pairs tried: {results['total']}")
    print(f"Solved: {results['solved']}")
    print(f"Average ladder: {results['average']:.4f} words")
    print(f"Longest ladder: {results['longest']} words")
    print(f"Unreachable: {results['unreachable']}")
    print(f"Time: {results['time']:.1f}s ({results['rate']:.1f} pairs/sec)")
    print("\nDistribution:")
    for n, count in results['distribution'].items():
        pct = 100 * count / results['total']
        bar = "█" * int(pct / 2)
        print(f"  {n}: {count:5d} ({pct:5.2f}%) {bar}")
    if results['unreachable_pairs']:
        pairs = [f"{a}->{b}" for a, b in results['unreachable_pairs']]
        print(f"\nUnreachable: {pairs}")
    print("=" * 60)
