# trie.py
# Prefix tree mapping lowercase character paths to learned word keys.
# Each terminal carries the (frequency, recency) score of its word and every
# node keeps the best score found in its subtree, so a capped lookup can
# walk the strongest branches first and stay cheap on short prefixes.

from __future__ import annotations
import heapq
from typing import Dict, Iterator, List, Optional, Set, Tuple

WordId = str
Score = Tuple[int, int]

DEFAULT_LOOKUP_CAP = 48


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode
    word: key of the WordEntry ending here, None for inner nodes
    score: (frequency, recency) of that word, None for inner nodes
    best: highest score anywhere in this subtree
    """

    __slots__ = ("children", "word", "score", "best")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.word: Optional[WordId] = None
        self.score: Optional[Score] = None
        self.best: Optional[Score] = None

    def refresh_best(self) -> None:
        scores = [c.best for c in self.children.values() if c.best is not None]
        if self.score is not None:
            scores.append(self.score)
        self.best = max(scores) if scores else None


class Trie:
    """
    PrefixIndex for the learning dictionary.
     - insert/remove are idempotent at the index level
     - lookup walks the prefix, then expands the subtree best-first by
       (frequency, recency) until `cap` ids are found
    Not thread safe on its own; the dictionary serialises access.
    """

    def __init__(self, cap: int = DEFAULT_LOOKUP_CAP) -> None:
        if cap < 1:
            raise ValueError("lookup cap must be at least 1")
        self._root = TrieNode()
        self._size = 0
        self.cap = cap

    # insertion/removal -----------------------------------------------------
    def insert(self, word: str, frequency: int = 0, recency: int = 0) -> bool:
        """
        Add a terminal for word.lower(), or refresh its score if present.
        Returns True when a new terminal was created, False if it existed.
        """
        if not word:
            return False

        key = word.lower()
        score = (frequency, recency)
        path: List[TrieNode] = [self._root]
        for ch in key:
            nxt = path[-1].children.get(ch)
            if nxt is None:
                nxt = path[-1].children[ch] = TrieNode()
            path.append(nxt)

        node = path[-1]
        created = node.word is None
        old = node.score
        if created:
            node.word = key
            self._size += 1
        node.score = score
        if old is not None and score < old:
            for n in reversed(path):
                n.refresh_best()
        else:
            for n in path:
                if n.best is None or score > n.best:
                    n.best = score
        return created

    def remove(self, word: str) -> bool:
        """Drop the terminal for `word`, prune empty branches, fix subtree scores."""
        if not word:
            return False

        key = word.lower()
        path: List[TrieNode] = [self._root]
        for ch in key:
            nxt = path[-1].children.get(ch)
            if nxt is None:
                return False
            path.append(nxt)

        node = path[-1]
        if node.word is None:
            return False
        node.word = None
        node.score = None
        self._size -= 1

        # bottom-up: prune nodes left carrying nothing, recompute the rest
        for depth in range(len(key), -1, -1):
            cur = path[depth]
            if depth and cur.word is None and not cur.children:
                del path[depth - 1].children[key[depth - 1]]
                continue
            cur.refresh_best()
        return True

    # search/traversal ---------------------------------------------------------
    def lookup(self, prefix: str, cap: Optional[int] = None) -> Set[WordId]:
        """
        Return ids of words starting with `prefix` (case-insensitive).
        Empty prefix yields nothing. At most `cap` ids are returned, the
        highest (frequency, recency) words first; ties go to the smaller key.
        """
        if not prefix:
            return set()

        key = prefix.lower()
        node = self._find(key)
        if node is None or node.best is None:
            return set()

        limit = cap if cap is not None else self.cap
        out: Set[WordId] = set()
        # (-freq, -recency, path, kind, node); kind 0 = terminal, 1 = subtree
        heap = [(-node.best[0], -node.best[1], key, 1, node)]
        while heap and len(out) < limit:
            _, _, path, kind, cur = heapq.heappop(heap)
            if kind == 0:
                out.add(cur.word)
                continue
            if cur.score is not None:
                heapq.heappush(heap, (-cur.score[0], -cur.score[1], path, 0, cur))
            for ch, child in cur.children.items():
                if child.best is not None:
                    heapq.heappush(heap, (-child.best[0], -child.best[1], path + ch, 1, child))
        return out

    def _find(self, key: str) -> Optional[TrieNode]:
        node = self._root
        for ch in key:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    # convenience/debugging -----------------------------------------------------
    def words(self) -> Iterator[WordId]:
        """
        Yield every stored key.
        (Slow: O(N) walk. For inspection, not runtime.)
        """
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node.word is not None:
                yield node.word
            stack.extend(node.children.values())

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: str) -> bool:
        """Simple membership check."""
        if not word:
            return False
        node = self._find(word.lower())
        return node is not None and node.word is not None
