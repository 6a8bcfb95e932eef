from enum import Enum


LETTERS = 'abcdefghijklmnopqrstuvwxyz'


# Wire labels, in tie-break priority order.
Transforms = Enum('Transforms', {
    'Replace': 'R',
    'Transpose': 'T',
    'Insert': 'I',
    'Delete': 'D',
})

REPLACE, TRANSPOSE, INSERT, DELETE = (t.value for t in Transforms)


def _transposable(source, target, row, col):
    return (row > 1 and col > 1
            and source[row - 1] == target[col - 2]
            and source[row - 2] == target[col - 1])


def edit_distance_table(source, target):
    '''
    Fill the (len(source)+1) x (len(target)+1) table of minimal edit costs
    between every prefix of source and every prefix of target.

    A transposition always costs 1. With mismatched characters at (row, col)
    that is the same as charging the substitution cost, and with matched
    characters the diagonal move is never worse, so the two conventions fill
    identical tables.
    '''
    rows, cols = len(source), len(target)
    table = [[0] * (cols + 1) for _ in range(rows + 1)]
    for row in range(rows + 1):
        table[row][0] = row
    for col in range(cols + 1):
        table[0][col] = col

    for row in range(1, rows + 1):
        for col in range(1, cols + 1):
            cost = 0 if source[row - 1] == target[col - 1] else 1
            best = min(table[row - 1][col] + 1,
                       table[row][col - 1] + 1,
                       table[row - 1][col - 1] + cost)
            if _transposable(source, target, row, col):
                best = min(best, table[row - 2][col - 2] + 1)
            table[row][col] = best

    return table


def edit_distance(source, target):
    if source == target:
        return 0
    return edit_distance_table(source, target)[len(source)][len(target)]


def transformation_list(source, target, table=None):
    '''
    One minimal, top-down sequence of transforms turning source into target,
    e.g. ['R', 'R', 'T', 'I'].

    When several sequences are minimal, ties are broken in the order
    Replace, Transpose, Insert, Delete.
    '''
    if table is None:
        table = edit_distance_table(source, target)

    transforms = []
    row, col = len(source), len(target)
    while row > 0 or col > 0:
        if row > 0 and col > 0 and source[row - 1] == target[col - 1]:
            row -= 1
            col -= 1
            continue

        # The table already holds the minimum here, so only look for a
        # predecessor it could have come from.
        here = table[row][col] - 1
        if row > 0 and col > 0 and table[row - 1][col - 1] == here:
            transforms.append(REPLACE)
            row -= 1
            col -= 1
        elif _transposable(source, target, row, col) and table[row - 2][col - 2] == here:
            transforms.append(TRANSPOSE)
            row -= 2
            col -= 2
        elif col > 0 and table[row][col - 1] == here:
            transforms.append(INSERT)
            col -= 1
        else:
            transforms.append(DELETE)
            row -= 1

    return transforms


def length_after_transforms(guess, transforms):
    return len(guess) + transforms.count(INSERT) - transforms.count(DELETE)
