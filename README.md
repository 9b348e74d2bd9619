# ojkit

A collection of solved programming puzzles: short kata-style functions, and
classic online-judge problems that read a whole input and print an answer.
It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

The package has three modules of puzzles and one command line module.

### `ojkit.sequences`

Functions over lists, matrices and binary trees:

```python
from ojkit.sequences import two_sum, snail, josephus_survivor, queue_time, delete_nth

two_sum([3, 3], 6)                        # [0, 1]
snail([[1, 2, 3], [4, 5, 6], [7, 8, 9]])  # [1, 2, 3, 6, 9, 8, 7, 4, 5]
josephus_survivor(7, 3)                   # survivor of the circle 0..7, every 3rd removed
queue_time([5, 3, 4], 1)                  # 12
delete_nth([1, 1, 3, 3, 7, 2, 2, 2, 2], 3)
```

Also: `matrix_addition`, `real_numbers`, `solve`, `tidy_number`,
`move_zeroes`, `pick_peaks` (returning a `PeaksResult` with `pos` and
`peaks` lists) and `sum_tree_values` over a tree of `Node` objects.
`josephus_survivor` and `queue_time` raise `ValueError` for counts below 1.

### `ojkit.text`

Functions over strings and numbers written as text:

```python
from ojkit.text import Kata, format_duration, increment_string, ip_to_int32, uint32_to_ip

format_duration(3662)        # "1 hour, 1 minute and 2 seconds"
increment_string("foo099")   # "foo100"
ip_to_int32("128.32.10.1")   # 2149583361
uint32_to_ip(2149583361)     # "128.32.10.1"

kata = Kata()
secret_text = kata.encrypt("Business")
kata.decrypt(secret_text)    # "Business"
```

Also: `scramble`, `next_bigger`, `count_deaf_rats`, `remove_duplicate_ids`,
`duplicate_encoder`, `stock_summary` and `whitespace_number`. Invalid input
raises `ValueError`: `Kata` on characters outside its alphabet,
`format_duration` on negative seconds, `count_deaf_rats` on a town with no
piper.

### `ojkit.judge`

The judge problems as plain functions that take parsed input and return
results: `count_non_decreasing_pairs`, `beiju_text`, `hand_game`,
`dream_stack`, `text_entropy`, `translate`, `distinct_words`,
`count_concatenations`, `best_tracks` and `anagram_deletions`. A
`LockManager` grants or denies shared (`"S"`) and exclusive (`"X"`) lock
requests through its `request(command, transaction, item)` method, which
answers `"GRANTED"`, `"DENIED"` or `"IGNORED"` (for a transaction already
refused once).

## Command line

The judge problems can be run as a judge runs them: input on standard input,
answer on standard output.

```
ojkit PROBLEM < input.txt
```

| Problem      | Input                                                                 | Output per case                          |
|--------------|-----------------------------------------------------------------------|------------------------------------------|
| `pairs`      | number of cases; each a length and that many integers                 | number of non-decreasing pairs           |
| `beiju`      | number of lines, then the lines (`[` Home, `]` End, `<` Backspace)     | the typed text                           |
| `hands`      | step count and player count                                           | the winning player                       |
| `dreams`     | number of commands, then `Sleep name`, `Kick` or `Test` lines          | the current dream for each `Test`        |
| `entropy`    | texts ending in `****END_OF_TEXT****`, all ending in `****END_OF_INPUT****` | word count, entropy, relative entropy |
| `locks`      | number of cases; lines `S t i` or `X t i`, each case ending with `#`   | `GRANTED`, `DENIED` or `IGNORED`         |
| `dictionary` | `english foreign` lines, a blank line, then words to look up           | the English word, or `eh`                |
| `words`      | any text                                                              | distinct lower-case words, sorted        |
| `concat`     | number of cases; each `m n`, then m prefix lines and n suffix lines   | `Case k: count`                          |
| `tracks`     | repeated: capacity, track count, track lengths                        | chosen tracks and `sum:total`            |
| `anagrams`   | a case count, then pairs of sizes each followed by both lists          | number of deletions                      |

`ojkit --help` lists the problems. Malformed input makes the command print
an error to standard error and exit with status 1. From Python the same is
available as `ojkit.cli.run(problem, text)`, which takes the whole input as a
string and returns the output as a string.