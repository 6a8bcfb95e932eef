from io import StringIO
from unittest import SkipTest

from distle.__main__ import eligible_words

_dict = '''apple
BANANA
Don't
McDonald
cat
zz
strawberry
banana
'''


def test_eligible_words():
    assert list(eligible_words(StringIO(_dict), 3, 6)) == ['apple', 'banana', 'cat', 'banana']


def test_eligible_words_by_length():
    assert list(eligible_words(StringIO(_dict), 2, 2)) == ['zz']
    assert list(eligible_words(StringIO(_dict), 10, 12)) == ['strawberry']
    assert list(eligible_words(StringIO(_dict), 9, 9)) == []


def test_accented_words():
    try:
        import unidecode  # noqa: F401
    except ImportError:
        raise SkipTest("unidecode not installed")
    df = StringIO('sijú\nábaco\nabañar\nsímbolo\nsimetría\n')
    assert list(eligible_words(df, 4, 8, strip_diacritics=True)) == ['siju', 'abaco', 'abanar', 'simbolo', 'simetria']
    df.seek(0)
    assert list(eligible_words(df, 4, 8)) == []
