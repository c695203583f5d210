# wordlehelper

A small helper for Wordle. You tell it what you have learned so far and it
lists every word from a word list that still fits.

## What you can tell it

The word has five letters, one slot for each. You can give it:

- **Known letters at known positions** (green tiles), as a five-character
  pattern such as `cr..e`, with `.` for each slot you do not know.
- **Letters that do not occur** (grey tiles). These are kept out of the
  unknown slots only; a letter you have placed in the pattern is still kept.
- **Letters that occur somewhere** (yellow tiles). Each one must appear
  somewhere in the word.
- **Letters that are not at a given position** (also yellow tiles). For each
  of the five positions you can name letters that cannot stand there.

You must give at least something to go on: one known letter, some letters
that occur somewhere, or at least five letters that do not occur. With less
than that the search is refused.

Unknown slots are filled from the lower-case letters `a` to `z`, and words
are compared exactly as written, so keep the word list and the letters you
give in lower case. Matches come out in alphabetical order.

## Installing

```
pip install .
```

The package depends on nothing outside the standard library.

## From the command line

```
wordle-helper WORDS [-p PATTERN] [-x LETTERS] [-i LETTERS] [-n POS=LETTERS ...]
```

- `WORDS` is a plain text file with one word per line.
- `-p`, `--pattern`: five characters, letters or `.`; letters are turned to
  lower case. Defaults to `.....`.
- `-x`, `--exclude`: letters that do not occur, at most 30.
- `-i`, `--include`: letters that occur somewhere.
- `-n`, `--not-at`: letters that are not at position `POS` (1 to 5). Give it
  once per position; repeating a position adds to its letters.

For example:

```
wordle-helper words.txt -p "cr..e" -x "tsn" -i "a" -n 3=a
```

The matching words are printed to standard output, one per line. A line
saying how many words were loaded and a closing `Total N generated,` line go
to standard error. The exit status is 1 if the word list cannot be read or
the search is refused for lack of information, and 0 otherwise.

Run `wordle-helper --help` to see the options.

## From Python

`wordlehelper.solver` holds the search:

- `load_word_list(path)` reads a word list file into a frozen set of words.
- `expand_pattern(pattern, excluded="")` yields, in alphabetical order, every
  word made by filling the `.` slots of a five-character pattern with the
  lower-case letters not in `excluded`. A pattern of any other length raises
  `ValueError`.
- `Query(pattern, excluded, includes, not_at)` holds what you know;
  `not_at` is a tuple of five strings, one per position. `Query.validate()`
  raises `InsufficientInformationError` (a `ValueError`) when there is too
  little to search on, and `Query.accepts(word)` tells whether a word passes
  the position bans and contains every required letter.
- `search(words, query)` validates the query and returns, sorted, the words
  from `words` that fit the pattern and the excluded letters and that the
  query accepts.

```python
from wordlehelper.solver import Query, search

words = {"crane", "crate", "grace"}
search(words, Query(pattern="cr..e", excluded="t"))  # ['crane']
```

`wordlehelper.slots` models the five letter slots as you type into them.
`LetterSlot` is one slot: `press(key)` with a letter fills it (shown in upper
case), `"delete"` or `"backspace"` empties it, `"tab"` or `"space"` empties it
and asks to move on, and any other key leaves the shown letter but stops it
from counting. `lower()` gives the slot's letter in lower case, or `None`.
`SlotRow` is the row of five with a focus that moves to the next slot after a
letter, tab or space; `pattern()` gives the pattern that `expand_pattern` and
`Query` take, and `clear()` empties every slot.

## What it does not do

There is no graphical window; the package is used from the command line or
from Python. It ships no word list: you supply your own file.

## Running the tests

```
pip install .[test]
pytest
```