import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import random
from itertools import product

import pytest

from alphabet import (
    get_unique_char_set,
    get_ordered_char_set,
    extract_alphabet_chars,
    compare_words,
    sort_words,
    is_sorted,
)
from utils import WARNING, ERROR

EXAMPLE = ['bca', 'aaa', 'acb', 'ddb', 'dca']
NOT_SORTED_MSG = 'not alphabetically sorted'
NOT_ENOUGH_MSG = 'do not have enough information'


@pytest.fixture
def events():
    return []


@pytest.fixture
def sink(events):
    return lambda level, msg: events.append((level, msg))


def messages(events, level=WARNING):
    return [msg for lvl, msg in events if lvl == level]


def test_get_unique_char_set():
    assert sorted(get_unique_char_set(EXAMPLE)) == ['a', 'b', 'c', 'd']


def test_get_unique_char_set_skips_empty_words():
    assert get_unique_char_set(['', 'ba', '']) == ['a', 'b']


def test_get_ordered_char_set():
    assert get_ordered_char_set(EXAMPLE) == [['b', 'a', 'd'], ['a', 'c'], ['d', 'c']]


def test_get_ordered_char_set_prefix_words():
    # 'ab' is exhausted one level before 'abc' and 'abd' are told apart
    assert get_ordered_char_set(['ab', 'abc', 'abd', 'b']) == [['a', 'b'], ['c', 'd']]


def test_get_ordered_char_set_single_group():
    assert get_ordered_char_set(['aaa', 'aab']) == [['a', 'b']]
    assert get_ordered_char_set(['abc']) == []
    assert get_ordered_char_set(['', '']) == []


def test_get_ordered_char_set_keeps_first_appearance_order():
    assert get_ordered_char_set(['zx', 'y', 'zw']) == [['z', 'y'], ['x', 'w']]


def test_get_ordered_char_set_long_shared_prefix():
    prefix = 'a' * 1500
    assert get_ordered_char_set([prefix + 'b', prefix + 'c']) == [['b', 'c']]


def test_extract_long_shared_prefix(events, sink):
    prefix = 'x' * 1500
    words = ['a', prefix + 'b', prefix + 'c']
    # a < x and b < c are unrelated; the later of two equal-length paths wins
    assert extract_alphabet_chars(words, sink) == ['b', 'c']
    assert any(NOT_ENOUGH_MSG in msg for msg in messages(events))


@pytest.mark.parametrize('bad', [[], None, 'abc', ['a', 1], ('a', None), 42])
def test_invalid_words_return_empty(bad, events, sink):
    assert get_unique_char_set(bad, sink) == []
    assert get_ordered_char_set(bad, sink) == []
    assert extract_alphabet_chars(bad, sink) == []
    assert len(messages(events)) == 3
    assert all('not strings or invalid' in msg for msg in messages(events))


def test_extract_alphabet_chars(events, sink):
    assert extract_alphabet_chars(EXAMPLE, sink) == ['b', 'a', 'd', 'c']
    assert events == []


def test_extract_alphabet_chars_short_list(events, sink):
    assert extract_alphabet_chars(['bca', 'aaa', 'acb'], sink) == ['b', 'a', 'c']
    assert events == []


def test_extract_accepts_tuple(sink):
    assert extract_alphabet_chars(tuple(EXAMPLE), sink) == ['b', 'a', 'd', 'c']


def test_extract_not_enough_information(events, sink):
    assert extract_alphabet_chars(['ab', 'cd'], sink) == ['a', 'c']
    assert len(messages(events)) == 1
    assert NOT_ENOUGH_MSG in messages(events)[0]


def test_extract_not_sorted(events, sink):
    # a < b < c from first letters, then c < b from the 'a' words
    result = extract_alphabet_chars(['ac', 'ab', 'b', 'c'], sink)
    assert result == ['a', 'b', 'c', 'b']
    warnings = messages(events)
    assert any(NOT_SORTED_MSG in msg for msg in warnings)
    assert any(NOT_ENOUGH_MSG in msg for msg in warnings)
    assert any('Detecting a loop' in msg for msg in warnings)


def test_extract_every_symbol_on_a_cycle(events, sink):
    # a < b from first letters, b < a from the 'a' words: no root to start from
    assert extract_alphabet_chars(['ab', 'aa', 'b'], sink) == []
    assert len(messages(events)) == 1
    assert NOT_ENOUGH_MSG in messages(events)[0]


def test_extract_only_empty_words(events, sink):
    assert extract_alphabet_chars(['', ''], sink) == []
    assert any(NOT_ENOUGH_MSG in msg for msg in messages(events))


def test_extract_duplicate_constraints_reported(events, sink):
    # 'zz' < 'zy' and 'zy' < 'yx' both say z < y
    words = ['zz', 'zy', 'yx', 'xw', 'w']
    assert extract_alphabet_chars(words, sink) == ['z', 'y', 'x', 'w']
    assert messages(events) == []
    assert len(messages(events, ERROR)) == 1


def test_round_trip():
    words = ['zz', 'zy', 'yx', 'xw', 'w']
    alphabet = extract_alphabet_chars(words, lambda level, msg: None)
    shuffled = [words[i] for i in (3, 0, 4, 2, 1)]
    assert sort_words(shuffled, alphabet) == words
    assert is_sorted(words, alphabet)


def test_round_trip_example():
    alphabet = extract_alphabet_chars(EXAMPLE)
    assert sort_words(sorted(EXAMPLE), alphabet) == EXAMPLE


def test_compare_words():
    alphabet = ['b', 'a', 'd', 'c']
    assert compare_words('bca', 'aaa', alphabet) == -1
    assert compare_words('dca', 'ddb', alphabet) == 1
    assert compare_words('ab', 'ab', alphabet) == 0
    assert compare_words('a', 'ab', alphabet) == -1
    assert compare_words('ab', 'a', alphabet) == 1


def test_compare_words_unknown_symbols_sort_last():
    alphabet = ['b', 'a']
    assert compare_words('az', 'ab', alphabet) == 1
    assert compare_words('x', 'y', alphabet) == -1


def test_is_sorted():
    assert is_sorted(EXAMPLE, ['b', 'a', 'd', 'c'])
    assert not is_sorted(EXAMPLE, ['a', 'b', 'c', 'd'])
    assert is_sorted([], ['a'])


@pytest.mark.parametrize('seed, size', [(1, 3), (7, 5), (42, 8), (2024, 12)])
def test_round_trip_generated(seed, size):
    rng = random.Random(seed)
    alphabet = list('abcdefghijklmnopqrstuvwxyz'[:size])
    rng.shuffle(alphabet)
    # Every two-symbol word, listed in alphabet order
    words = [''.join(p) for p in product(alphabet, repeat=2)]
    derived = extract_alphabet_chars(words, lambda level, msg: None)
    assert derived == alphabet
    shuffled = words[:]
    rng.shuffle(shuffled)
    assert sort_words(shuffled, derived) == words
