# hotrace

`hotrace` reads a dictionary of key/value pairs from standard input and then
answers lookups against it, one per line.

## Input format

Standard input is split into two sections by an empty line:

1. **Pairs**: lines alternate between a key and its value. A key that appears
   again replaces the earlier value.
2. **Searches**: after the empty line, every non-empty line is a key to look
   up. Empty lines in this section are ignored.

For each search, the stored value is printed. If the key is unknown,
`<key>: Not found.` is printed instead.

If input ends in the middle of the pairs section, `Unexpected EOF` is written
to standard error and the command exits with status 1. If a key is followed by
an empty line instead of a value, `Unexpected empty line` is written to
standard error, that key is dropped, and the lines that follow are answered as
searches.

Lines are handled as bytes; no text decoding takes place. A last line without
a trailing newline is still read.

## Usage

Install the package, then pipe data into the `hotrace` command:

```sh
pip install .
printf 'apple\nred\nbanana\nyellow\n\napple\ncherry\nbanana\n' | hotrace
```

Output:

```
red
cherry: Not found.
yellow
```

The command takes no options other than `-h`/`--help`.

## Library use

The pieces are available from Python as well:

```python
import io
from hotrace.hashmap import HashMap
from hotrace.lines import read_lines
from hotrace.cli import parse_pairs, run_searches

table = HashMap(1024)
stream = io.BytesIO(b"key\nvalue\n\nkey\nmissing\n")
lines = read_lines(stream)
parse_pairs(lines, table, io.StringIO())
out = io.BytesIO()
run_searches(lines, table, out)
print(out.getvalue().decode())
# value
# missing: Not found.
```

- `hotrace.lines.read_lines(stream)` yields the lines of a binary stream
  without their newlines.
- `hotrace.hashmap.HashMap(size)` stores byte-string keys and values (strings
  are encoded as UTF-8), bucketed by the 32-bit djb2a hash
  (`hotrace.hashmap.djb2a_hash`). It supports `insert`, `get` (returning
  `None` for unknown keys), `clear`, `len()` and `in`. The default size is
  1,048,576 buckets.
- `hotrace.cli.parse_pairs` raises `hotrace.cli.UnexpectedEOF` when the input
  runs out inside the pairs section; `hotrace.cli.format_result` builds a
  single output line.

## Running the tests

```sh
pip install ".[test]"
pytest
```