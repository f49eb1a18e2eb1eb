# --- alphabet.py ---
# Recover the ordering of an unknown alphabet from a list of words that is
# already sorted in that alphabet.
#
#   Input:  bca, aaa, acb, ddb, dca
#   Output: b, a, d, c

import time
from functools import cmp_to_key
from typing import Dict, List, Sequence, Tuple

from utils import WARNING, resolve_sink, is_word_list, vlog
from graph import PrecedenceGraph, count_loops


def get_unique_char_set(words, sink=None) -> List[str]:
    """Every distinct symbol used in ``words``, sorted by code point."""
    if not is_word_list(words):
        resolve_sink(sink)(WARNING, "get_unique_char_set - Input words are not strings or invalid.")
        return []
    return sorted(set(''.join(words)))


def get_ordered_char_set(words, sink=None) -> List[List[str]]:
    """
    Precedence chains implied by a sorted word list.

    Words are bucketed by first symbol, keeping the order in which each
    symbol first shows up; that key order is one chain. Every bucket with
    more than one word is searched the same way one symbol further in. Chains shorter than two symbols say nothing and are dropped.

    For ['bca', 'aaa', 'acb', 'ddb', 'dca']:
        level 1: b: [bca]  a: [aaa, acb]  d: [ddb, dca]   -> [b, a, d]
        level 2: a: [aa]   c: [cb]                        -> [a, c]
                 d: [db]   c: [ca]                        -> [d, c]
    """
    if not is_word_list(words):
        resolve_sink(sink)(WARNING, "get_ordered_char_set - Input words are not strings or invalid.")
        return []
    return _ordered_chains(words)


def _ordered_chains(words: Sequence[str]) -> List[List[str]]:
    chains = []
    # Stack entries: (words sharing a prefix, length of that prefix).
    stack: List[Tuple[List[str], int]] = [(list(words), 0)]
    while stack:
        group, depth = stack.pop()
        buckets: Dict[str, List[str]] = {}
        for word in group:
            # Exhausted words carry no symbol to order.
            if len(word) > depth:
                buckets.setdefault(word[depth], []).append(word)

        if len(buckets) > 1:
            chains.append(list(buckets))
        # Reversed so buckets are searched in first-appearance order.
        for bucket in reversed(list(buckets.values())):
            if len(bucket) > 1:
                stack.append((bucket, depth + 1))
    return chains


def extract_alphabet_chars(words, sink=None) -> List[str]:
    """
    Derive the alphabet from a sorted word list.

    Steps:
      1) unique symbols become graph vertices
      2) each precedence chain becomes a run of edges
             b -> a -> d
                  |  /
                  c
      3) the longest root-to-end path is the alphabet: [b, a, d, c]

    Always returns the best candidate found. A loop in the graph means the
    input was not sorted; more than one root, or a path that misses some
    symbol, means the input did not pin the order down. Both are reported
    to ``sink`` as warnings rather than raised.
    """
    sink = resolve_sink(sink)
    if not is_word_list(words):
        sink(WARNING, "extract_alphabet_chars - Input words are not strings or invalid.")
        return []

    t0 = time.time()
    unique_chars = get_unique_char_set(words, sink)
    ordered_chars = get_ordered_char_set(words, sink)
    vlog(f"{len(unique_chars)} symbols, {len(ordered_chars)} precedence chains")

    graph = PrecedenceGraph(sink)
    if unique_chars:
        graph.add_vertices(unique_chars)
    for chain in ordered_chars:
        graph.create_daisy_chain_edges(chain)

    # Paths come back shortest first, so the candidate is the last one.
    paths = graph.get_paths()
    alphabet_chars = paths[-1] if paths else []
    vlog(f"{len(paths)} candidate paths", t0)

    if count_loops(paths) != 0:
        sink(WARNING, "extract_alphabet_chars - Input list of words are not alphabetically sorted. "
                      "The derived order of the alphabet may be wrong.")

    if not graph.is_fully_connected() or sorted(alphabet_chars) != unique_chars:
        sink(WARNING, "extract_alphabet_chars - Input list of words do not have enough information "
                      "to derive the complete order of the alphabet.")
    return alphabet_chars


def compare_words(a: str, b: str, alphabet: Sequence[str]) -> int:
    """Three-way compare under ``alphabet``; unknown symbols sort last."""
    return _compare(a, b, _rank(alphabet))


def _rank(alphabet):
    return {ch: i for i, ch in enumerate(alphabet)}


def _compare(a, b, rank):
    for x, y in zip(a, b):
        if x == y:
            continue
        kx = (0, rank[x]) if x in rank else (1, ord(x))
        ky = (0, rank[y]) if y in rank else (1, ord(y))
        return -1 if kx < ky else 1
    return (len(a) > len(b)) - (len(a) < len(b))


def sort_words(words: Sequence[str], alphabet: Sequence[str]) -> List[str]:
    rank = _rank(alphabet)
    return sorted(words, key=cmp_to_key(lambda a, b: _compare(a, b, rank)))


def is_sorted(words: Sequence[str], alphabet: Sequence[str]) -> bool:
    rank = _rank(alphabet)
    return all(_compare(a, b, rank) <= 0 for a, b in zip(words, words[1:]))
