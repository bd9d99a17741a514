# numdiffer

Library building blocks for comparing two files that are expected to be
nearly identical: a line-level diff, a record of how the lines of the two
files pair up, decimal arithmetic for absolute and relative errors between
numbers, and a small bit vector. It has no dependencies beyond the standard
library.

## Modules

### `numdiffer.analyze`

A line diff based on Myers' O(ND) algorithm, searching from both ends at
once.

- `diff_lines(lines0, lines1, minimal=False, speed_large_files=False)`
  compares two sequences of hashable lines and returns a list of `Change`
  hunks in forward order.
- `diff_equivs(equivs0, equivs1, minimal=False, speed_large_files=False)`
  does the same for sequences of equivalence-class numbers.
- `build_script(changed0, changed1)` turns per-line change flags of the two
  files into a list of `Change` hunks.
- `Change` is a frozen dataclass with `line0`, `line1` (first affected lines,
  origin 0), `deleted` and `inserted`.

Without `minimal`, heuristics limit the cost on large inputs with many
differences; the script stays correct but may be longer than necessary.
`speed_large_files` enables an extra heuristic that accepts a diagonal which
has made a lot of progress.

### `numdiffer.discard`

- `discard_confusing_lines(equivs0, equivs1, minimal)` sets aside lines whose
  class never occurs in the other file (and very common lines inside runs of
  such lines). It returns, per file, the kept classes, the original index of
  each kept line and a changed flag per original line.
- `shift_boundaries(equivs0, equivs1, changed0, changed1)` slides runs of
  changed lines over identical lines, in place, so that runs merge.

### `numdiffer.flags`

- `FlagTable` is an ordered sequence of `LineSource` entries (`FIRST` = 1,
  `SECOND` = 2, `BOTH` = 3). It supports `append`, `extend`, iteration,
  `len()`, and `str()` which gives the entries as digits, or
  `<The array is empty>`.
- `notedown_script(changes, len0, len1)` returns a new `FlagTable` saying, for
  each step, whether the next line is read from the first file, the second,
  or both. Within a hunk, changed lines are paired first, then lines only in
  the second file, then lines only in the first.

### `numdiffer.arith`

Decimal arithmetic on complex values; every operation uses the current
`decimal` context.

- `make_context(iscale)` returns a `decimal.Context` with `iscale`
  significant digits; use it with `decimal.localcontext`.
- `Complex(re, im)` holds two `Decimal` parts and supports `-` and `abs()`.
- `cabs(z)`, `csub(z1, z2)` compute the modulus and the difference.
- `smart_cmp(z1, z2, flag)` is an ordering filter: always true for a zero
  flag, otherwise both parts must be `>=` (positive flag) or `<=` (negative
  flag).
- `relative_error(z1, z2, formula=RelErrFormula.CLASSIC)` divides the
  absolute error by the smaller modulus (`CLASSIC`), the first
  (`FIRST_FILE`) or the second (`SECOND_FILE`). A zero divisor gives zero
  for equal numbers and infinity otherwise.
- `format_number(value, precision)` writes a number in scientific notation
  with `precision` decimals, rounding half away from zero, e.g.
  `format_number(Decimal("12345"), 2)` gives `"1.23e+4"`; infinity is
  written `Inf`.

### `numdiffer.bitvector`

`BitVector(size)` is a vector of bits kept in whole bytes, so `len()` is
always a multiple of 8. It has `get`, `get_range` (positions past the end
come back as `None`), `set`, `set_range`, `set_range_to` (writing past the
end enlarges the vector), `flip_range` (returns how many bits were flipped),
`to_string` (highest bit leftmost) and `clear`.

### `numdiffer.buffers`

- `buffer_lcm(a, b, lcm_max)` returns the least common multiple of two
  buffer sizes, a default of 8192 when both are zero, and `a` when the
  multiple exceeds `lcm_max`.
- `block_read(fd, nbytes)` reads from a file descriptor, retrying short
  reads, and returns fewer bytes only at end of file.

## Example

    from numdiffer.analyze import diff_lines
    from numdiffer.flags import notedown_script

    old = ["a", "b", "c", "d"]
    new = ["a", "x", "c", "d", "e"]

    changes = diff_lines(old, new)
    for change in changes:
        print(change)

    print(notedown_script(changes, len(old), len(new)))

## What it does not do

This is a library only. It has no command-line program, does not open or
read the files being compared, does not split lines into fields, does not
parse numbers out of text, and does not apply error thresholds or print a
report of differences. Those steps are left to the caller, who can feed the
pieces above with their own reading and parsing.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest