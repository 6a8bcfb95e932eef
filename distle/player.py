'''
Distle player: tracks which dictionary words are still consistent with the
feedback received so far, and picks the guess expected to split them best.
'''

import logging
import math
from collections import Counter, defaultdict
from dataclasses import dataclass, field

from .algorithms import Transforms, length_after_transforms, transformation_list


log = logging.getLogger(__name__)

# Bounds on the entropy step of select_guess, which builds one edit-distance
# table per (guess, sampled candidate) pair.
GUESS_POOL_SIZE = 25
EVAL_SAMPLE_SIZE = 150


class DistleError(RuntimeError):
    pass


class NoCandidatesError(DistleError):
    pass


@dataclass
class GameState:
    candidates: set
    max_guesses: int
    guessed: list = field(default_factory=list)
    history: list = field(default_factory=list)   # (guess, distance, transforms)

    @property
    def last_distance(self):
        return self.history[-1][1] if self.history else 0


def surprise(word, distance=0):
    # Negative log-likelihood of a word of this length sitting at this
    # distance from the guess, if letters were uniformly random.
    n = len(word)
    return math.lgamma(n + 1) - n * math.log(26) + distance * math.log(25)


def _letter_counts(words):
    by_length = Counter()
    containing = Counter()
    positional = {}
    for word in words:
        by_length[len(word)] += 1
        containing.update(set(word))
        slots = positional.setdefault(len(word), [Counter() for _ in word])
        for ii, l in enumerate(word):
            slots[ii][l] += 1
    return by_length, containing, positional


def rank_guesses(state):
    '''
    Unguessed candidates, best first, by how many other candidates share
    their length, their letters and their letters' positions.
    '''
    by_length, containing, positional = _letter_counts(state.candidates)
    guessed = set(state.guessed)
    distance = state.last_distance

    def key(word):
        slots = positional[len(word)]
        score = (by_length[len(word)]
                 + sum(containing[l] for l in set(word))
                 + sum(slots[ii][l] for ii, l in enumerate(word)))
        return (-score, surprise(word, distance), word)

    return sorted((w for w in state.candidates if w not in guessed), key=key)


def partition(guess, words):
    groups = defaultdict(list)
    for word in words:
        groups[tuple(transformation_list(guess, word))].append(word)
    return groups


def entropy(groups):
    total = sum(len(g) for g in groups.values())
    result = 0.0
    for g in groups.values():
        p = len(g) / total
        result -= p * math.log2(p)
    return result


def expected_remaining(guess, words):
    '''
    Average number of words still possible after guessing `guess`, if the
    secret is drawn uniformly from `words`.
    '''
    words = list(words)
    if not words:
        return 0.0
    return sum(len(g) ** 2 for g in partition(guess, words).values()) / len(words)


def _sample(words):
    words = sorted(words)
    step = max(1, math.ceil(len(words) / EVAL_SAMPLE_SIZE))
    return words[::step]


def select_guess(state):
    ranked = rank_guesses(state)
    if not ranked:
        log.error("No unguessed candidates left after %d guesses", len(state.guessed))
        raise NoCandidatesError(
            f"No candidate words left after {len(state.guessed)} guesses; "
            "feedback was inconsistent with the dictionary")

    best = ranked[0]
    if len(ranked) > 2:
        sample = _sample(state.candidates)
        best_entropy = -1.0
        for guess in ranked[:GUESS_POOL_SIZE]:
            ent = entropy(partition(guess, sample))
            if ent > best_entropy:
                best, best_entropy = guess, ent
        log.debug("Guess %r splits %d sampled candidates with entropy %.3f bits",
                  best, len(sample), best_entropy)

    state.guessed.append(best)
    log.debug("Guess %d is %r, from %d candidates", len(state.guessed), best, len(state.candidates))
    return best


def incorporate_feedback(state, guess, distance, transforms):
    transforms = list(transforms)
    try:
        for t in transforms:
            Transforms(t)
    except ValueError:
        log.warning("Ignoring feedback for %r with unknown transforms %r", guess, transforms)
        return
    if len(transforms) != distance:
        log.warning("Ignoring feedback for %r: %d transforms but edit distance %d",
                    guess, len(transforms), distance)
        return

    state.history.append((guess, distance, transforms))

    # Each I/D changes the length by one, so most words can be skipped
    # without building a table.
    length = length_after_transforms(guess, transforms)
    before = len(state.candidates)
    state.candidates.intersection_update([
        w for w in state.candidates
        if len(w) == length and transformation_list(guess, w) == transforms
    ])
    log.debug("Feedback %s for %r left %d of %d candidates",
              ''.join(transforms), guess, len(state.candidates), before)

    if not state.candidates:
        log.error("No candidate words are consistent with feedback %s for %r",
                  ''.join(transforms), guess)


class DistlePlayer:
    '''
    Plays Distle through the three calls a game driver makes: start_new_game,
    make_guess each round, and get_feedback after every wrong guess.
    '''

    def __init__(self):
        self.state = None

    def start_new_game(self, dictionary, max_guesses):
        self.state = GameState(set(dictionary), max_guesses)

    def make_guess(self):
        if self.state is None:
            raise DistleError("start_new_game() must be called before make_guess()")
        return select_guess(self.state)

    def get_feedback(self, guess, edit_distance, transforms):
        if self.state is None:
            raise DistleError("start_new_game() must be called before get_feedback()")
        incorporate_feedback(self.state, guess, edit_distance, transforms)

    @property
    def candidates(self):
        return self.state.candidates if self.state is not None else set()
