import argparse
import time
import requests
from colorama import Fore

import utils
from utils import log_with_time, vlog
from alphabet import extract_alphabet_chars, is_sorted, sort_words


# Seconds to wait on a word-list download
REQUEST_TIMEOUT = 10
# Lines starting with this are skipped in word-list files
COMMENT_PREFIX = "#"


def parse_word_list(text):
    """Split ``text`` into words, one per line, keeping file order."""
    words = []
    for line in text.splitlines():
        w = line.strip()
        if not w or w.startswith(COMMENT_PREFIX):
            continue
        words.append(w)
    return words


def load_word_list(path):
    t0 = time.time()
    with open(path, "r", encoding="utf-8") as f:
        words = parse_word_list(f.read())
    vlog(f"Loaded {len(words)} words from {path}", t0)
    return words


def fetch_word_list(url):
    t0 = time.time()
    log_with_time("⟳ Downloading word list…")
    resp = requests.get(url, timeout=REQUEST_TIMEOUT)
    resp.raise_for_status()
    words = parse_word_list(resp.text)
    vlog(f"Word list downloaded ({len(words)} words)", t0)
    log_with_time(f"✅ {len(words)} words")
    return words


def verify_order(words, alphabet):
    """Report whether ``words`` is sorted under ``alphabet``."""
    if is_sorted(words, alphabet):
        log_with_time("Word list is consistent with the derived alphabet.", color=Fore.GREEN)
        return True
    resorted = sort_words(words, alphabet)
    first = next(i for i, (a, b) in enumerate(zip(words, resorted)) if a != b)
    log_with_time(
        f"Word list is not sorted under the derived alphabet; first mismatch at line {first + 1}: "
        f"'{words[first]}' (expected '{resorted[first]}')",
        color=Fore.RED,
    )
    return False


def run_solver(argv=None):
    parser = argparse.ArgumentParser(description="Derive the alphabet order of a sorted word list")
    parser.add_argument(
        "words",
        nargs="*",
        help="Sorted words (used when no --file or --url is given); put them after -- if any starts with -",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--file", type=str, default=None, help="Path to a word list, one word per line")
    source.add_argument("--url", type=str, default=None, help="URL of a word list, one word per line")
    parser.add_argument("--verify", action="store_true", help="Check the words re-sort to the same order under the result")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    args = parser.parse_args(argv)

    utils.start_time = time.time()
    utils.VERBOSE = args.verbose

    if args.file:
        try:
            words = load_word_list(args.file)
        except FileNotFoundError:
            log_with_time(f"Could not find word list: {args.file}", color=Fore.RED)
            return []
        except (OSError, UnicodeDecodeError) as e:
            log_with_time(f"Error loading word list: {e}", color=Fore.RED)
            return []
    elif args.url:
        try:
            words = fetch_word_list(args.url)
        except requests.RequestException as e:
            log_with_time(f"Error downloading word list: {e}", color=Fore.RED)
            return []
    else:
        words = args.words

    if not words:
        log_with_time("No words supplied.", color=Fore.RED)
        return []

    alphabet = extract_alphabet_chars(words)
    if not alphabet:
        log_with_time("Could not derive an alphabet.", color=Fore.RED)
        return []

    log_with_time(f"Alphabet ({len(alphabet)} symbols): {' '.join(alphabet)}", color=Fore.GREEN)
    if args.verify:
        verify_order(words, alphabet)
    return alphabet
