import argparse
import logging
import random
import sys

from typing import Optional

import numpy as np

import graphio
from kruskal import Edge

logger = logging.getLogger(__name__)

DEFAULT_DENSITY = 0.5
DEFAULT_MIN_WEIGHT = 1
DEFAULT_MAX_WEIGHT = 100


def generate_graph(nvertices: int,
                   density: float=DEFAULT_DENSITY,
                   min_weight: int=DEFAULT_MIN_WEIGHT,
                   max_weight: int=DEFAULT_MAX_WEIGHT,
                   seed: Optional[int]=None,
                   connected: bool=True) -> tuple[int, list[Edge]]:
    '''
    Random simple graph (no self-loops, no parallel edges).

    With connected=True a random spanning path is laid down first, so the
    result is connected even when density asks for fewer than n-1 edges.
    '''
    if not 0 <= density <= 1:
        raise ValueError('density must be in [0, 1]')
    if min_weight < 1 or max_weight < min_weight:
        raise ValueError('weights must satisfy 1 <= min_weight <= max_weight')

    rng = random.Random(seed)
    max_edges = nvertices * (nvertices-1) // 2
    total_edges = int(density * max_edges)

    adj_matrix = np.zeros((nvertices, nvertices), dtype=int)

    def place(i: int, j: int) -> None:
        # Only bother filling upper triangle for undirected graphs
        i, j = min(i, j), max(i, j)
        adj_matrix[i, j] = rng.randint(min_weight, max_weight)

    placed = 0
    if connected and nvertices > 1:
        order = list(range(nvertices))
        rng.shuffle(order)
        for a, b in zip(order, order[1:]):
            place(a, b)
        placed = nvertices - 1

    while placed < total_edges:
        # keep trying until an unoccupied spot is found
        i = rng.randint(0, nvertices-2)
        j = rng.randint(i+1, nvertices-1) # ensure no self-loops
        if adj_matrix[i, j] == 0:
            place(i, j)
            placed += 1

    edges = [Edge(int(i), int(j), int(adj_matrix[i, j]))
             for i, j in zip(*np.nonzero(adj_matrix))]
    logger.debug('generated %d vertices, %d edges', nvertices, len(edges))
    return nvertices, edges


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog='GraphGen',
                                     description='Generate graphs for MST experiments')
    parser.add_argument('nvertices', type=int)
    parser.add_argument('-o', '--outfile', default='graph.txt')
    parser.add_argument('-d', '--density', default=DEFAULT_DENSITY, type=float)
    parser.add_argument('--min-weight', default=DEFAULT_MIN_WEIGHT, type=int)
    parser.add_argument('--max-weight', default=DEFAULT_MAX_WEIGHT, type=int)
    parser.add_argument('-s', '--seed', default=None, type=int)
    parser.add_argument('-b', '--binary', action='store_true')
    parser.add_argument('--allow-disconnected', action='store_true')
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        nvertices, edges = generate_graph(args.nvertices,
                                          args.density,
                                          args.min_weight,
                                          args.max_weight,
                                          seed=args.seed,
                                          connected=not args.allow_disconnected)
    except ValueError as e:
        logger.error('%s', e)
        return 1

    if not args.quiet:
        print(f'Generating a graph on {nvertices} vertices...')
        print(f'  Density: {args.density} ({len(edges)} edges)')
        print(f'  Edge weights between: [{args.min_weight}, {args.max_weight}]')

    graphio.write_graph(args.outfile, nvertices, edges, binary=args.binary)
    return 0


if __name__ == '__main__':
    sys.exit(main())
