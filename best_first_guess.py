#!/usr/bin/python3

'''
Distle best-first-guess solver
==============================

Start with a dictionary containing N eligible words of lengths between
MIN and MAX. Assume all N words are equally likely as a target.

Q: What is the optimal first guess? That is, what first guess will
   ON AVERAGE leave the fewest possible remaining words to guess?
A: Guessing G splits the dictionary into groups of words sharing the same
   transforms from G. A target in a group of size k leaves k words, so the
   average is sum(k^2) / N. That needs N edit-distance tables per guess,
   O(N^2 * L^2) for the whole dictionary. Slow in Python, but tractable
   for a few thousand words.

usage: best_first_guess.py [wordlist.txt] [min_len] [max_len] > results.csv
 e.g.: best_first_guess.py /usr/share/dict/american-english 3 5 > results.csv
'''

from distle.__main__ import eligible_words
from distle.player import expected_remaining
import sys

if len(sys.argv) == 4:
    dictfn = sys.argv[1]
    minlen, maxlen = int(sys.argv[2]), int(sys.argv[3])
else:
    raise SystemExit(f"usage: {sys.argv[0]} [wordlist] [min_len] [max_len]")

with open(dictfn) as df:
    words = sorted(set(eligible_words(df, minlen, maxlen)))
print('guess,avg_words_left_after_first_guess')
for guess in words:
    print(f"Trying {guess}...", file=sys.stderr)
    sys.stdout.flush()
    print(f'"{guess}",{expected_remaining(guess, words)}')
