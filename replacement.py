## Single edge removal and replacement on a minimum spanning tree

import logging
import sys

from typing import Iterable, NamedTuple, Optional, Sequence

from kruskal import Edge, build_mst, total_weight

logger = logging.getLogger(__name__)

EXAMPLE_VERTICES = 5
EXAMPLE_EDGES = [
    Edge(0, 1, 2),
    Edge(0, 3, 6),
    Edge(1, 2, 3),
    Edge(1, 3, 8),
    Edge(1, 4, 5),
    Edge(2, 4, 7),
    Edge(3, 4, 9),
]


class Replacement(NamedTuple):
    removed: Edge
    remaining: list[Edge]
    components: list[set[int]]
    replacement: Optional[Edge]

    @property
    def new_tree(self) -> Optional[list[Edge]]:
        if self.replacement is None:
            return None
        return self.remaining + [self.replacement]


def find_components(n_verts: int, edges: Iterable[Edge]) -> list[set[int]]:
    '''
    Partition [0, n_verts) into the connected components of the given edges.

    Components are listed in order of their smallest vertex. Vertices
    touched by no edge come out as singletons.
    '''
    adj = [[] for _ in range(n_verts)]
    for edge in edges:
        if not (0 <= edge.u < n_verts and 0 <= edge.v < n_verts):
            raise IndexError(f'edge {edge} has a vertex outside [0, {n_verts})')
        adj[edge.u].append(edge.v)
        adj[edge.v].append(edge.u)

    visited = [False] * n_verts
    components = []

    for start in range(n_verts):
        if visited[start]:
            continue

        # iterative dfs, deep graphs would overflow the recursion limit
        visited[start] = True
        comp = {start}
        stack = [start]
        while stack:
            node = stack.pop()
            for nbr in adj[node]:
                if not visited[nbr]:
                    visited[nbr] = True
                    comp.add(nbr)
                    stack.append(nbr)

        components.append(comp)

    logger.debug('found %d components', len(components))
    return components


def find_replacement_edge(all_edges: Iterable[Edge],
                          tree_edges: Iterable[Edge],
                          components: Sequence[set[int]]) -> Optional[Edge]:
    '''
    Find the cheapest edge outside the tree that joins the two components.

    Only defined for exactly two components, anything else gives None.
    Ties go to the edge seen first in all_edges. The removed edge itself is
    a valid answer if it is still the cheapest crossing edge.
    '''
    if len(components) != 2:
        logger.debug('%d components, no replacement applies', len(components))
        return None

    c1, c2 = components
    used = {e.key for e in tree_edges}

    best = None
    for edge in all_edges:
        if edge.key in used:
            continue

        if (edge.u in c1 and edge.v in c2) or (edge.u in c2 and edge.v in c1):
            if best is None or edge.weight < best.weight:
                best = edge

    return best


def remove_tree_edge(tree: Sequence[Edge], index: int=0) -> tuple[Edge, list[Edge]]:
    if not 0 <= index < len(tree):
        raise IndexError(f'tree has {len(tree)} edges, cannot remove edge {index}')

    return tree[index], list(tree[:index]) + list(tree[index + 1:])


def replace_edge(n_verts: int,
                 all_edges: Sequence[Edge],
                 tree: Sequence[Edge],
                 index: int=0) -> Replacement:
    removed, remaining = remove_tree_edge(tree, index)
    components = find_components(n_verts, remaining)
    best = find_replacement_edge(all_edges, remaining, components)
    logger.debug('removed %s, replacement %s', removed, best)

    return Replacement(removed, remaining, components, best)


def print_edges(edges: Iterable[Edge]) -> None:
    for edge in edges:
        print(f'  {edge}')


def main(argv: Optional[list[str]] = None) -> int:
    import argparse

    import graphio

    parser = argparse.ArgumentParser(prog='replacement',
                                     description='Remove one MST edge and find its cheapest replacement')
    parser.add_argument('filename', nargs='?',
                        help='graph file to load, the built-in example graph is used if omitted')
    parser.add_argument('-b', '--binary', action='store_true',
                        help='read the graph in the binary format')
    parser.add_argument('-r', '--remove',
                        default=0,
                        help='position in the MST of the edge to remove',
                        type=int)
    parser.add_argument('-v', '--verbose', action='store_true')

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.filename is None:
        nvertices, edges = EXAMPLE_VERTICES, EXAMPLE_EDGES
    else:
        try:
            nvertices, edges = graphio.read_graph(args.filename, binary=args.binary)
        except (OSError, graphio.GraphFormatError) as e:
            logger.error('%s', e)
            return 1

    print('Building MST.')
    mst = build_mst(nvertices, edges)

    print('\nMST edges:')
    print_edges(mst)
    print('Total weight:', total_weight(mst))

    try:
        result = replace_edge(nvertices, edges, mst, args.remove)
    except IndexError as e:
        logger.error('%s', e)
        return 1

    print(f'\nRemoving edge: {result.removed}')

    print('\nEdges after removal:')
    print_edges(result.remaining)

    print(f'\nComponents formed: {len(result.components)}')
    for (i, comp) in enumerate(result.components):
        print(f'  Component {i + 1}: {sorted(comp)}')

    if result.replacement is None:
        print("\nCouldn't find replacement edge")
        return 0

    print(f'\nReplacement edge: {result.replacement}')

    print('\nNew MST:')
    print_edges(result.new_tree)
    print('New total weight:', total_weight(result.new_tree))
    return 0


if __name__ == '__main__':
    sys.exit(main())
