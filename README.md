# y2k

An interpreter for an esoteric language whose programs live in the
modification timestamps of files. Each `*.y2k` file contributes the digits
of its modification time in nanoseconds.

## Installing

```
pip install .
```

This installs the `y2k` command. There are no runtime dependencies.

## Running a program

Point the interpreter at a directory of `*.y2k` files:

```
y2k path/to/program-dir
```

The files are read in name order (`0.y2k`, `1.y2k`, ...). Every timestamp
after the first loses its leading digit window, so a file can begin with a
digit that a timestamp could not otherwise start with (such as `0`). Files
whose modification time is later than 999999999999999999 nanoseconds
(September 2001) are skipped, as are files without the `.y2k` ending.

You can also point it at a single file:

```
y2k path/to/program.y2k
```

A single file with an old enough timestamp is read by its timestamp. A
newer one is read as a raw program file (see below).

Any further arguments become variables for the program. Arguments that
contain a letter become string variables; the rest become numeric ones.
They are stored from the highest variable id down: 9, 8, ... when one digit
is read at a time, 99, 98, ... with two.

```
y2k path/to/program-dir 15
```

With `-d 2` or more, timestamps are given a leading `0` when they are read.

### Options

| Option | Default | Meaning |
|---|---|---|
| `-d N` | `1` | Number of digits read at a time (at least 1) |
| `-debug` | off | Print each interpreter step |
| `-export` | off | Turn a raw file into a set of timestamp-only files |
| `-outdir DIR` | `./y2k-out` | Where `-export` writes its files; it is created if missing |

The long options may also be written with two dashes (`--debug`). When no
program is given, a usage message is printed. Errors while reading or
running a program are printed to standard error and the command exits with
status 1.

## Raw files

A raw file holds the program's digits as text. Spaces are ignored, lines
are joined, and everything after a `#` on a line is a comment:

```
9 1 1 8   # print one character: "h"
```

Exporting writes `0.y2k`, `1.y2k`, ... into the output directory and sets
their access and modification times so that they encode the same program:

```
y2k -export program.txt -outdir out
```

The first file holds 18 digits and every later one 17, behind a leading
`8`. The last chunk is padded with trailing zeros. Each written file is
reported on standard output.

## Commands

Each command is picked by one digit window:

| Value | Command |
|---|---|
| 9 | print literal text or a variable |
| 8 | create a variable (1 string, 2 int, 3 float, 9 copy of another variable) |
| 7 | modify a variable (1 add, 2 subtract, 3 multiply, 4 divide, 5 power, 9 set) |
| 6 | condition or loop (1 `=`, 2 `<`, 3 `>`, 4 divisible); a loop ends at `1999` and an if ends at `2000` |
| 5 | meta: parse the rest with a new debug flag and digit window |
| 4 | continue: stop the current block |

Literal text maps each digit window to a character of the table
`" abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890!@#$%^&*()+-<>.,"`
by its index, so `1` is `a` and `8` is `h`.

## Using it from Python

```python
from y2k.interpreter import Y2K

Y2K(digits=1).parse("9118")   # prints "h"
```

`Y2K` takes `digits`, `debug`, a `variables` store (`y2k.variables.VarStore`)
and an `output` text stream (standard output when left out).
`Y2K.from_cli_arg` adds a variable the way extra command-line arguments do.
Raw files are handled by `y2k.raw.read_raw_file` and
`y2k.raw.export_raw_to_timestamp_files`, and timestamps are collected by
`y2k.utils.get_timestamps`.

## What it does not do

The language has no input command: a program only sees the values given as
command-line arguments. Programs that are run from timestamps depend on a
filesystem that keeps modification times to the nanosecond.