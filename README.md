# parityworkers

`parityworkers` starts a number of worker threads. Each worker draws a set
number of random integers in the range 0 to 2147483647. The integers are
unique within that worker. The worker files each integer into a shared pool
of even numbers or a shared pool of odd numbers, and each pool has its own
lock. When all workers have finished, the command prints each pool in
ascending order with one line per position.

## Installation

```
pip install .
```

## Configuration

The settings come from a plain-text file whose name must end in `.txt`. Each
setting goes on its own line as `key = value`. The key, the `=` and the value
must be separated by spaces:

```
numbers_per_thread = 5
thread_num = 3
```

How a line is read:

- Only the first three space-separated words of a line count.
- Each of those words has tabs and line-break characters trimmed from both
  ends.
- Any other line is ignored.
- If a key appears more than once, the last occurrence wins.

A value is read the way C's `atoi` reads one. Leading whitespace and one sign
are accepted, and the digits that follow are used. Anything after the digits
is ignored, so `5abc` reads as 5. Text with no digits reads as 0. The result
is clamped to the 32-bit signed range.

Both values must be greater than 0 and below 2147483647.

## Usage

```
parityworkers -f path/to/config.txt
parityworkers --file path/to/config.txt
parityworkers -h
```

Sample output:

```
EVEN
Position 1:	104
Position 2:	88210
...

ODD
Position 1:	37
...
```

If a pool is empty, the command prints `There are no EVEN numbers` or
`There are no ODD numbers` for that pool.

The command exits with status 0 when it prints the lists. It exits with
status 1 in the following cases, and prints a message for each:

| Cause | Message | Stream |
| --- | --- | --- |
| `-h` or `--help` is given | the usage text | standard output |
| the number of arguments is wrong | `Incorrect number of arguments` | standard output |
| `-f` or `--file` is given without a path | `Root config file is required` | standard output |
| the flag is not recognised | `Invalid argument: Use -h or --help for usage information` | standard output |
| the file name does not end in `.txt` | `Incorrect extension file (must be .txt)` | standard output |
| a value is missing or not positive | `Invalid or missing configuration value (expected format: key = value)` | standard output |
| a value is 2147483647 or more | `Value exceeds maximum allowed integer (INT_MAX)` | standard output |
| the file cannot be opened | `Error opening file: ...` | standard error |

## Library use

You can also drive the program from Python. `parityworkers.cli.run` takes the
arguments without the program name. It also accepts an output stream and,
optionally, a factory that returns one `random.Random` per worker. It returns
the exit status:

```python
import io
import random
from parityworkers.cli import run

out = io.StringIO()
status = run(["-f", "config.txt"], out, rng_factory=lambda: random.Random(42))
print(status, out.getvalue())
```

The building blocks can be used on their own:

- `parityworkers.args.parse_args` checks the arguments and returns the
  configuration path. For a help flag it raises `HelpRequested`.
- `parityworkers.config.load_config` reads and checks a configuration file
  and returns a `Config` with `nb_per_thread` and `thread_num`.
- `parityworkers.config.parse_lines` and `parityworkers.config.validate`
  parse and check the settings separately.
- `parityworkers.generator.generate` runs the workers and returns a
  `NumberPool` whose `even` and `odd` lists hold the numbers.
- `parityworkers.report.final_list` formats one pool with a label.

Bad input raises `parityworkers.errors.ParityError`. Its `kind` is an
`ErrorKind`, and its message is the text shown in the table above.

## Running the tests

```
pip install .[test]
pytest
```