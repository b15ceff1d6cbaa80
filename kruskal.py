import logging
import sys

from typing import Iterable, NamedTuple, Optional

logger = logging.getLogger(__name__)


class UnionFind:
    def __init__(self, n_verts: int) -> None:
        self.vertices = [i for i in range(n_verts)]
        self.ranks = [0] * n_verts

    def _check(self, index: int) -> None:
        # negative indices would silently wrap around in a list
        if not 0 <= index < len(self.vertices):
            raise IndexError(f'vertex {index} out of range [0, {len(self.vertices)})')

    def find(self, index: int) -> int:
        self._check(index)
        root = index

        while self.vertices[root] != root:
            root = self.vertices[root]

        # compress the whole path, not just the start
        while self.vertices[index] != root:
            self.vertices[index], index = root, self.vertices[index]

        return root

    def unite(self, i: int, j: int) -> bool:
        i = self.find(i)
        j = self.find(j)
        if i == j:
            return False

        if self.ranks[i] < self.ranks[j]:
            self.vertices[i] = j
        elif self.ranks[i] > self.ranks[j]:
            self.vertices[j] = i
        else:
            self.vertices[j] = i
            self.ranks[i] += 1
        return True

    def connected(self, i: int, j: int) -> bool:
        return self.find(i) == self.find(j)


class Edge(NamedTuple):
    u: int
    v: int
    weight: int

    @classmethod
    def from_line(cls, s: str) -> 'Edge':
        parts = s.split()
        return Edge(*[int(token) for token in parts])

    @property
    def key(self) -> tuple[int, int]:
        '''Endpoints in canonical order, so (u, v) and (v, u) compare equal'''
        return (min(self.u, self.v), max(self.u, self.v))

    def __repr__(self):
        return f'({self.u}-{self.v}: {self.weight})'

    __str__ = __repr__


def build_mst(n_verts: int, edges: Iterable[Edge]) -> list[Edge]:
    '''
    Kruskal's algorithm. Returns the accepted edges in acceptance order.

    Edges are sorted by weight with a stable sort, so equal weights keep
    their input order. A disconnected graph yields a spanning forest.
    '''
    uf = UnionFind(n_verts)
    mst = []

    for edge in sorted(edges, key=lambda e: e.weight):
        if uf.unite(edge.u, edge.v):
            logger.debug('accepted %s', edge)
            mst.append(edge)
        else:
            logger.debug('rejected %s (cycle)', edge)

    return mst


def total_weight(edges: Iterable[Edge]) -> int:
    return sum(e.weight for e in edges)


def main(argv: Optional[list[str]] = None) -> int:
    import argparse

    import graphio

    parser = argparse.ArgumentParser(prog='kruskal',
                                     description="Compute an MST with Kruskal's algorithm")
    parser.add_argument('filename')
    parser.add_argument('-b', '--binary', action='store_true',
                        help='read the graph in the binary format')
    parser.add_argument('-v', '--verbose', action='store_true')

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        nvertices, edges = graphio.read_graph(args.filename, binary=args.binary)
    except (OSError, graphio.GraphFormatError) as e:
        logger.error('%s', e)
        return 1

    mst = build_mst(nvertices, edges)

    print('Final MST sum:', total_weight(mst))
    if args.verbose:
        print(mst)
    return 0


if __name__ == '__main__':
    sys.exit(main())
