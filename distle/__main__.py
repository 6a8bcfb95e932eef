#!/usr/bin/python3

import argparse
import logging
import os
import random
import time
from enum import Enum
from colorama import Back, Fore, Style
try:
    from unidecode import unidecode
except ImportError:
    unidecode = None

from .algorithms import LETTERS, Transforms, edit_distance_table, transformation_list
from .player import DistlePlayer, GameState, incorporate_feedback


EMPH = Fore.BLUE + Style.BRIGHT
RESET = Style.RESET_ALL

TransformColors = Enum('TransformColors', {
    Transforms.Replace.value: Back.YELLOW,
    Transforms.Transpose.value: Back.MAGENTA,
    Transforms.Insert.value: Back.GREEN,
    Transforms.Delete.value: Back.RED,
})


def colored_transforms(transforms):
    return ''.join(TransformColors[t].value + t for t in transforms) + RESET


def transforms_legend():
    return ', '.join(f"{colored_transforms(t.value)}={t.name}" for t in Transforms)


def eligible_words(df, min_length, max_length, strip_diacritics=False):
    if strip_diacritics and not unidecode:
        raise NotImplementedError("unidecode module required for strip_diacritics")
    for line in df:
        word = line.strip()

        # Need to do this before checking length, because unidecode can change it,
        # as in unidecode('buß') -> 'buss'.
        if strip_diacritics:
            word = unidecode(word)

        if min_length <= len(word) <= max_length:
            # No non-letter characters, or mixed case (latter are likely proper nouns)
            if all(c.lower() in LETTERS for c in word) and word in (word.upper(), word.lower()):
                yield word.lower()


def feedback_of_guess(guess, target):
    table = edit_distance_table(guess, target)
    return table[-1][-1], transformation_list(guess, target, table)


def autoplay(player, words, target, max_guesses):
    '''
    Play one game of `player` against `target`, yielding
    (guess, distance, transforms) for every round. The last round has
    distance 0 if the player found the target.
    '''
    known = set(words)
    player.start_new_game(known, max_guesses)
    for _ in range(max_guesses):
        guess = player.make_guess()
        if guess not in known:
            raise ValueError(f"Player guessed {guess!r}, which is not in the dictionary")
        distance, transforms = feedback_of_guess(guess, target)
        yield guess, distance, transforms
        if guess == target:
            break
        player.get_feedback(guess, distance, transforms)


def show_round(ii, guess, distance, transforms):
    print(f"Guess {ii}: {EMPH}{guess}{RESET} (distance {EMPH}{distance}{RESET}) {colored_transforms(transforms)}")


def parse_args(args=None):
    p = argparse.ArgumentParser()
    p.add_argument('-d', '--dict', default='/usr/share/dict/words', type=lambda fn: argparse.FileType()(os.path.join('/usr/share/dict', fn)),
                   help='Wordlist to use, either an absolute path or a path relative to /usr/share/dict. Default %(default)s.')
    p.add_argument('-g', '--guesses', default=10, type=int,
                   help='Maximum number of guesses to allow')
    p.add_argument('-m', '--min-length', default=3, type=int,
                   help='Shortest dictionary word to use')
    p.add_argument('-M', '--max-length', default=8, type=int,
                   help='Longest dictionary word to use')
    p.add_argument('-n', '--nonsense', action='store_true',
                   help='Allow nonsense guesses. (Default is to only allow known words.)')
    p.add_argument('-a', '--analyzer', action='count', default=0,
                   help='Analyze remaining possible words, and show their number after each guess. If repeated (cheater mode!), it will show you all the remaining possible words when there are fewer than 100')
    p.add_argument('-A', '--auto', action='store_true',
                   help='Let the computer player guess instead of you.')
    p.add_argument('-G', '--games', type=int,
                   help='Benchmark the computer player over this many games, and show a summary.')
    p.add_argument('-s', '--seed', type=int,
                   help='Seed for choosing the secret word(s).')
    p.add_argument('-t', '--timer', action='store_true',
                   help='Show time taken after every guess.')
    p.add_argument('-v', '--verbose', action='count', default=0,
                   help='Log what the computer player is thinking. Repeat for more detail.')
    p.add_argument('--test', help=argparse.SUPPRESS)
    if unidecode:
        p.add_argument('-D', '--strip-diacritics', action='store_true',
                       help='EXPERIMENTAL: Strip diacritics from words (should allow playing with Spanish/French wordlists)')
    args = p.parse_args(args)
    if not unidecode:
        args.strip_diacritics = False
    if args.min_length > args.max_length:
        p.error("--min-length must not exceed --max-length")
    if args.games is not None and args.games < 1:
        p.error("--games must be at least 1")
    return p, args


def play_human(args, words, target):
    known = set(words)
    state = GameState(set(words), args.guesses)
    guesses = []
    start_at = last_at = time.time()
    while len(guesses) < args.guesses:
        if args.analyzer == 1 or (args.analyzer == 2 and len(state.candidates) >= 100):
            print(f"There are {EMPH}{len(state.candidates)}{RESET} possible words remaining.")
        elif args.analyzer >= 2:
            print(f"There are {EMPH}{len(state.candidates)}{RESET} possible words remaining: {', '.join(sorted(state.candidates))}")

        try:
            while True:
                guess = input("Your guess? ").strip().lower()
                if not guess or any(c not in LETTERS for c in guess):
                    print("Must be a word consisting only of letters. Try again.")
                elif not args.nonsense and guess not in known:
                    print(f"Hmmm, I don't know the word {EMPH}{guess}{RESET}. Try again.")
                else:
                    break  # Okay
        except (KeyboardInterrupt, EOFError):
            print()
            print("Interrupted, giving up...")
            break

        distance, transforms = feedback_of_guess(guess, target)
        guesses.append((guess, distance, transforms))

        now = time.time()
        total = now - start_at
        last = now - last_at
        last_at = now

        print()
        for ii, g in enumerate(guesses, 1):
            show_round(ii, *g)
        if args.timer:
            print(f"Last guess took {EMPH}{last:.2f}{RESET} seconds, {EMPH}{len(guesses)}{RESET} guess{'es' if len(guesses)!=1 else ''}"
                  f" in {EMPH}{total:.2f}{RESET} s ({EMPH}{total/len(guesses):.2f} s/guess{RESET}).")
        print()

        if guess == target:
            break

        # Narrow possible words from guess
        if args.analyzer:
            incorporate_feedback(state, guess, distance, transforms)

    return [g for g, _, _ in guesses]


def play_auto(args, words, target):
    guesses = []
    last_at = time.time()
    for ii, (guess, distance, transforms) in enumerate(autoplay(DistlePlayer(), words, target, args.guesses), 1):
        guesses.append(guess)
        show_round(ii, guess, distance, transforms)
        if args.timer:
            now = time.time()
            print(f"  ...took {EMPH}{now - last_at:.2f}{RESET} seconds.")
            last_at = now
    return guesses


def benchmark(args, words, rng):
    player = DistlePlayer()
    targets = [args.test] if args.test else [rng.choice(words) for _ in range(args.games)]
    solved = []
    failed = []
    start_at = time.time()
    for target in targets:
        rounds = list(autoplay(player, words, target, args.guesses))
        if rounds and rounds[-1][0] == target:
            solved.append(len(rounds))
        else:
            failed.append(target)
    total = time.time() - start_at

    n = len(targets)
    print(f"Solved {EMPH}{len(solved)}{RESET} of {EMPH}{n}{RESET} games "
          f"({EMPH}{100 * len(solved) / n:.1f}%{RESET}).")
    if solved:
        print(f"Average guesses when solved: {EMPH}{sum(solved) / len(solved):.2f}{RESET}, "
              f"worst {EMPH}{max(solved)}{RESET}.")
    if failed:
        print(f"Not solved within {args.guesses} guesses: {', '.join(failed)}")
    if args.timer:
        print(f"Took {EMPH}{total:.2f}{RESET} s ({EMPH}{total / n:.2f} s/game{RESET}).")
    return solved, failed


def main(args=None):
    p, args = parse_args(args)
    logging.basicConfig(level=(logging.WARNING, logging.INFO, logging.DEBUG)[min(args.verbose, 2)],
                        format='%(levelname)s: %(name)s: %(message)s')

    words = sorted(set(eligible_words(args.dict, args.min_length, args.max_length, args.strip_diacritics)))
    if not words:
        p.error(f"No {args.min_length}-{args.max_length} letter words found in {args.dict.name}")
    rng = random.Random(args.seed)

    if args.test:
        target = args.test.strip().lower()
        if target not in words:
            p.error(f"Need a known {args.min_length}-{args.max_length} letter word to test, not {target!r}")
        args.test = target

    if args.games:
        benchmark(args, words, rng)
        return

    if args.test:
        print(f"I've chosen the word {target} which you specified to test with!")
    else:
        target = rng.choice(words)
        print(f"I've chosen a {EMPH}{len(target)}{RESET}-letter word from {EMPH}{len(words)}{RESET} possibilities.")
    print(f"{'I' if args.auto else 'You'} have {EMPH}{args.guesses}{RESET} guesses to guess it correctly.")
    if not args.auto and not args.nonsense:
        print("All your guesses must be words that I know!")
    print(f"After each guess you'll see the edit distance and transforms: {transforms_legend()}")
    print()

    if args.auto:
        guesses = play_auto(args, words, target)
    else:
        guesses = play_human(args, words, target)

    print()
    if guesses and guesses[-1] == target:
        print(f"Correct! {EMPH}{target}{RESET} in {len(guesses)} guess{'es' if len(guesses)!=1 else ''}.")
    else:
        print(f"Sorry, the correct word was: {EMPH}{target}{RESET}")
    print()


if __name__ == '__main__':
    main()
