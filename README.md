# rctools

A few small utilities with no dependencies:

- `rctools.hash_map.HashMap` is a separately chained hash map. You supply the hash
  function and a three-way key comparison.
- `rctools.hash_support` provides the djb2 string hash `string_hash`, the byte-wise
  string comparison `string_compare`, and the exceptions the map raises:
  `HashMapError`, `KeyNotFoundError` and `NoMoreEntriesError`.
- `rctools.timeutil` converts between time units, reads the system and steady clocks,
  and formats nanosecond time points as fixed-width strings.
- `rctools.strings` provides `split`, `split_last` and `strndup`.

This is a library only. It has no command-line interface.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Hash map

```python
from rctools.hash_map import HashMap
from rctools.hash_support import string_hash, string_compare, KeyNotFoundError

counts = HashMap(10, string_hash, string_compare)
counts.set("one", 1)
counts.set("two", 2)

assert counts.get("one") == 1
assert "two" in counts            # same as counts.key_exists("two")
assert len(counts) == 2

counts.unset("two")               # removing a missing key is not an error
try:
    counts.get("two")
except KeyNotFoundError:
    pass

for key, value in counts.items():
    print(key, value)
```

How the map behaves:

- `HashMap(initial_capacity, key_hasher, key_compare)` raises `ValueError` if
  `initial_capacity` is below 1. It raises `TypeError` if either function is not
  callable.
- `key_hasher(key)` returns an integer, which the map reduces to an unsigned 64-bit
  value.
- `key_compare(a, b)` returns zero when the keys are equal.
- `set` raises `ValueError` for a `None` key or a `None` value. `get` and `unset`
  raise `ValueError` for a `None` key.
- `key_exists(None)` returns `False`.
- `get` raises `KeyNotFoundError` for a missing key. This exception is also a
  `KeyError`.
- `capacity()` returns the number of buckets. The map doubles it whenever the number
  of entries reaches three quarters of it. It never shrinks, not even after `clear()`.
- Iterating over the map yields its keys. `items()` yields `(key, value)` pairs. Both
  follow bucket order.

You can also step through the entries one at a time:

```python
key, value = counts.next_key_and_data(None)   # first entry
key, value = counts.next_key_and_data(key)    # the entry after it
```

At the end, `next_key_and_data` raises `NoMoreEntriesError`, which is also a
`LookupError`. If the key you pass is not in the map, it raises `KeyNotFoundError`.

`string_hash` accepts `str`, `bytes` or `bytearray`. It encodes a `str` as UTF-8 and
stops at the first NUL byte. It treats each byte as a signed char and returns an
unsigned 64-bit djb2 hash. `string_compare` compares the same bytes and returns -1, 0
or 1.

## Time

```python
from rctools import timeutil

now = timeutil.system_time_now()                  # nanoseconds since the Unix epoch
tick = timeutil.steady_time_now()                 # monotonic clock, nanoseconds
print(timeutil.time_point_as_nanoseconds_string(now))
print(timeutil.time_point_as_seconds_string(now))
print(timeutil.ns_to_ms(timeutil.s_to_ns(2)))     # 2000
```

The conversion functions are:

- `s_to_ns`, `ms_to_ns` and `us_to_ns`, which multiply.
- `ns_to_s`, `ns_to_ms` and `ns_to_us`, which divide. Integer input is truncated
  toward zero. Float input is divided exactly.

The two formatting functions take an integer that fits in a signed 64-bit value.
Otherwise they raise `TypeError` or `ValueError`.

- `time_point_as_nanoseconds_string` gives 19 zero-padded digits.
- `time_point_as_seconds_string` gives 10 zero-padded digits, a `.`, and 9 fraction
  digits.

Negative values get a leading `-`:

```python
timeutil.time_point_as_nanoseconds_string(42)      # '0000000000000000042'
timeutil.time_point_as_seconds_string(-1500000000) # '-0000000001.500000000'
```

## Strings

```python
from rctools.strings import split, split_last, strndup

split("hello/world", "/")        # ['hello', 'world']
split("/a//b/", "/")             # ['a', 'b']  (empty tokens are dropped)
split_last("a/b/c", "/")         # ['a/b', 'c']
split_last("/abc", "/")          # ['abc']
split_last("", "/")              # []
strndup("hello", 3)              # 'hel'
strndup("ab\0cd", 5)             # 'ab'  (stops at a NUL character)
```

The delimiter must be a single character. Otherwise these functions raise
`ValueError`. `strndup` raises `ValueError` for a negative length.

## Running the tests

```
pytest
```