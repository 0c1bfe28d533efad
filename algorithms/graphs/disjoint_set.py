"""
disjoint_set.py — Union-Find over node ids
===========================================
Path compression on `find`, union by rank on `union`.
"""

from typing import Dict, Iterable


class DisjointSet:

    def __init__(self, items: Iterable[str] = ()):
        self.parent: Dict[str, str] = {}
        self.rank:   Dict[str, int] = {}
        for item in items:
            self.make_set(item)

    def make_set(self, item: str) -> None:
        self.parent[item] = item
        self.rank[item]   = 0

    def find(self, item: str) -> str:
        root = item
        while self.parent[root] != root:
            root = self.parent[root]
        # compress
        while self.parent[item] != root:
            self.parent[item], item = root, self.parent[item]
        return root

    def union(self, a: str, b: str) -> bool:
        """Merge the sets of a and b.  False if they were already one set."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.rank[ra] < self.rank[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        if self.rank[ra] == self.rank[rb]:
            self.rank[ra] += 1
        return True

    def connected(self, a: str, b: str) -> bool:
        return self.find(a) == self.find(b)
