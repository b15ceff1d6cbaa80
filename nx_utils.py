import networkx as nx
import random

from typing import Any, Callable, Iterable

import graphio
from kruskal import Edge

def arbitrary_weight(low: int, high: int, seed: int=0) -> Callable[[Any, Any], int]:
    rng = random.Random(seed)
    return lambda _a, _b: rng.randint(low, high)

def to_networkx(n_verts: int, edges: Iterable[Edge]) -> nx.MultiGraph:
    # MultiGraph, since parallel edges are legal input
    g = nx.MultiGraph()
    g.add_nodes_from(range(n_verts))
    for edge in edges:
        g.add_edge(edge.u, edge.v, weight=edge.weight)
    return g

def from_networkx(g: nx.Graph,
                  decide_weight: Callable[[Any, Any], int]=None,
                  nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> tuple[int, list[Edge]]:
    edges = []

    for (a, b, data) in g.edges(data=True):
        if decide_weight is not None:
            w = decide_weight(a, b)
        else:
            w = data['weight']
        # Convert edge names to index
        edges.append(Edge(nodename_to_idx(a), nodename_to_idx(b), w))

    return g.number_of_nodes(), edges

def to_output_file(g: nx.Graph,
                   decide_weight: Callable[[Any, Any], int],
                   fname: str,
                   binary: bool=False,
                   nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> None:
    nvertices, edges = from_networkx(g, decide_weight, nodename_to_idx)
    graphio.write_graph(fname, nvertices, edges, binary=binary)

def hypercube_idx(node: Iterable[int]) -> int:
    node = list(node)
    return sum(node[-i-1]* 2**i for i in range(len(node)))
