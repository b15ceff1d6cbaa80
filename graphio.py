'''
File format:

<nvertices> <nedges>
<v1> <v2> <w>
<v1> <v2> <w>
...

The binary format stores the same integers, in the same order, as
little-endian 4-byte signed ints.
'''
import logging
import sys

from typing import Iterable, Optional

from kruskal import Edge

logger = logging.getLogger(__name__)

INT_SIZE = 4


class GraphFormatError(ValueError):
    pass


def to_bin(num: int) -> bytes:
    return int(num).to_bytes(length=INT_SIZE, byteorder='little', signed=True)


def _parse_ints(line: str, count: int, lineno: int) -> list[int]:
    parts = line.split()
    if len(parts) != count:
        raise GraphFormatError(f'line {lineno}: expected {count} integers, got {line.strip()!r}')
    try:
        return [int(token) for token in parts]
    except ValueError:
        raise GraphFormatError(f'line {lineno}: non-integer token in {line.strip()!r}') from None


def _check_edge(edge: Edge, nvertices: int, where: str) -> None:
    if not (0 <= edge.u < nvertices and 0 <= edge.v < nvertices):
        raise GraphFormatError(f'{where}: edge {edge} has a vertex outside [0, {nvertices})')


def read_text_graph(fname: str) -> tuple[int, list[Edge]]:
    with open(fname, 'r') as f:
        nvertices, nedges = _parse_ints(f.readline(), 2, 1)

        edges = []
        for lineno, line in enumerate(f, start=2):
            if not line.strip():
                continue
            edge = Edge(*_parse_ints(line, 3, lineno))
            _check_edge(edge, nvertices, f'line {lineno}')
            edges.append(edge)

    if len(edges) != nedges:
        raise GraphFormatError(f'header declares {nedges} edges, found {len(edges)}')

    return nvertices, edges


def read_binary_graph(fname: str) -> tuple[int, list[Edge]]:
    with open(fname, 'rb') as f:
        data = f.read()

    if len(data) % INT_SIZE != 0:
        raise GraphFormatError(f'file size {len(data)} is not a multiple of {INT_SIZE}')

    nums = [int.from_bytes(data[i:i + INT_SIZE], byteorder='little', signed=True)
            for i in range(0, len(data), INT_SIZE)]

    if len(nums) < 2:
        raise GraphFormatError('missing header')

    nvertices, nedges = nums[0], nums[1]
    body = nums[2:]
    if len(body) != 3 * nedges:
        raise GraphFormatError(f'header declares {nedges} edges, found {len(body) / 3:g}')

    edges = []
    for i in range(nedges):
        edge = Edge(*body[3 * i:3 * i + 3])
        _check_edge(edge, nvertices, f'edge {i}')
        edges.append(edge)

    return nvertices, edges


def read_graph(fname: str, binary: bool=False) -> tuple[int, list[Edge]]:
    if binary:
        nvertices, edges = read_binary_graph(fname)
    else:
        nvertices, edges = read_text_graph(fname)

    logger.debug('read %d vertices and %d edges from %s', nvertices, len(edges), fname)
    return nvertices, edges


def write_graph(fname: str, nvertices: int, edges: Iterable[Edge], binary: bool=False) -> None:
    edges = list(edges)

    if binary:
        with open(fname, 'wb') as f:
            f.write(to_bin(nvertices))
            f.write(to_bin(len(edges)))

            for edge in edges:
                f.write(to_bin(edge.u))
                f.write(to_bin(edge.v))
                f.write(to_bin(edge.weight))
    else:
        with open(fname, 'w') as f:
            f.write(f'{nvertices} {len(edges)}\n')

            for edge in edges:
                f.write(f'{edge.u} {edge.v} {edge.weight}\n')


def text_to_bin(infile_name: str, outfile_name: str) -> None:
    nvertices, edges = read_text_graph(infile_name)
    write_graph(outfile_name, nvertices, edges, binary=True)


def main(argv: Optional[list[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(prog='gconverter',
                                     description='Convert between graph formats')
    parser.add_argument('-i', '--infile', required=True)
    parser.add_argument('-o', '--outfile', required=True)

    args = parser.parse_args(argv)

    try:
        text_to_bin(args.infile, args.outfile)
    except (OSError, GraphFormatError) as e:
        logger.error('%s', e)
        return 1
    return 0


if __name__ == '__main__':
    logging.basicConfig()
    sys.exit(main())
