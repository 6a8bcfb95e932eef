import math

from distle.algorithms import transformation_list
from distle.player import (DistleError, DistlePlayer, GameState, NoCandidatesError, entropy, expected_remaining,
                           incorporate_feedback, partition, rank_guesses, select_guess, surprise)

words = {'cat', 'bat', 'act', 'cart', 'cast', 'coat', 'dog', 'god', 'dig', 'hack', 'back', 'black',
         'house', 'horse', 'mouse', 'hose', 'shoe', 'heart', 'earth', 'hater'}


def _feedback(guess, target):
    transforms = transformation_list(guess, target)
    return len(transforms), transforms


def test_feedback_keeps_only_matching_words():
    for target in words:
        for guess in words - {target}:
            state = GameState(set(words), 10)
            distance, transforms = _feedback(guess, target)
            incorporate_feedback(state, guess, distance, transforms)

            # Target should always remain after guess
            assert target in state.candidates
            assert guess not in state.candidates
            assert all(transformation_list(guess, w) == transforms for w in state.candidates)


def test_feedback_is_idempotent():
    state = GameState(set(words), 10)
    distance, transforms = _feedback('house', 'horse')
    incorporate_feedback(state, 'house', distance, transforms)
    after_first = set(state.candidates)
    assert after_first == {'horse', 'mouse'}
    incorporate_feedback(state, 'house', distance, transforms)
    assert state.candidates == after_first


def test_feedback_never_grows():
    state = GameState({'cat', 'dog'}, 10)
    incorporate_feedback(state, 'mouse', *_feedback('mouse', 'house'))
    assert state.candidates == set()


def test_malformed_feedback_is_ignored():
    state = GameState(set(words), 10)
    incorporate_feedback(state, 'cat', 2, ['R'])
    incorporate_feedback(state, 'cat', 1, ['X'])
    assert state.candidates == words
    assert state.history == []


def test_select_never_repeats():
    state = GameState({'cat', 'bat', 'dog'}, 10)
    guesses = [select_guess(state) for _ in range(3)]
    assert sorted(guesses) == ['bat', 'cat', 'dog']
    assert state.guessed == guesses
    try:
        select_guess(state)
    except NoCandidatesError:
        pass
    else:
        assert False, "expected NoCandidatesError"


def test_select_from_empty_raises():
    state = GameState(set(), 10)
    try:
        select_guess(state)
    except NoCandidatesError:
        pass
    else:
        assert False, "expected NoCandidatesError"


def test_select_is_deterministic():
    a = select_guess(GameState(set(words), 10))
    b = select_guess(GameState(set(words), 10))
    assert a == b
    assert a in words


def test_rank_guesses_skips_guessed():
    state = GameState(set(words), 10, guessed=['house'])
    ranked = rank_guesses(state)
    assert 'house' not in ranked
    assert sorted(ranked) == sorted(words - {'house'})


def test_partition_and_entropy():
    groups = partition('a', ['a', 'b', 'ab'])
    assert groups == {(): ['a'], ('R',): ['b'], ('I',): ['ab']}
    assert math.isclose(entropy(groups), math.log2(3))
    assert entropy({('R',): ['b', 'c']}) == 0.0
    assert expected_remaining('a', ['a', 'b', 'ab']) == 1.0
    assert expected_remaining('a', ['b', 'c']) == 2.0
    assert expected_remaining('a', []) == 0.0


def test_surprise():
    assert surprise('cat', 2) > surprise('cat', 1)
    assert math.isclose(surprise('ab', 0), math.log(2) - 2 * math.log(26))


def test_player_solves_every_word():
    player = DistlePlayer()
    for target in sorted(words):
        player.start_new_game(words, len(words))
        for _ in range(len(words)):
            guess = player.make_guess()
            assert guess in words
            if guess == target:
                break
            player.get_feedback(guess, *_feedback(guess, target))
            assert target in player.candidates
        assert guess == target


def test_player_does_not_touch_dictionary():
    dictionary = set(words)
    player = DistlePlayer()
    player.start_new_game(dictionary, 6)
    guess = player.make_guess()
    player.get_feedback(guess, *_feedback(guess, 'dog' if guess != 'dog' else 'cat'))
    assert dictionary == words


def test_player_needs_a_game():
    player = DistlePlayer()
    assert player.candidates == set()
    try:
        player.make_guess()
    except DistleError:
        pass
    else:
        assert False, "expected DistleError"
