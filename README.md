# ymcommon

A small collection of general-purpose building blocks. The package has no dependencies outside the standard library.

## Modules

- `ymcommon.assertion`: `ymassert(condition, error_type, message, *args)` raises `error_type` when `condition` is false. `error_type` must be a subclass of `YmAssertError`. The message is a `str.format` template filled with `args`, prefixed with `Assert @ "<file>:<line>": ` for the caller's location, and cut to 127 characters. `YmAssertError.what()` returns the message.
- `ymcommon.ymutils`:
  - `bounded(value)` returns `value` unchanged, or raises `NullPtrError` if it is `None`.
  - `is_empty(s)` is true for `None` and `""`.
  - `binary_search(seq, value, compare)` searches an ascending sequence. It returns the index of a match, or `len(seq)` if nothing matches.
- `ymcommon.verbogroup`: the `VerboGroup` and `VG` enums. `VG` members pack a group number and an 8-bit sub-group mask as `(group << 8) | mask`. Examples are `VG.GENERAL`, `VG.TEXT_LOGGER_BASIC` and `VG.RNG_PRNG`. The helpers `get_group(vg)`, `get_mask(vg)` and `n_groups()` read these values back.
- `ymcommon.timer`: `Timer` measures the nanoseconds since it was created or last `reset()`. Read the value with `elapsed()`. The clock can be injected.
- `ymcommon.logger`:
  - `Logger` owns at most one output file. `open_outfile()` opens it and never overwrites an existing file. It returns `True` only if that call opened the file.
  - With `FilenameMode.APPEND_TIME_STAMP`, which is the default, a `_YYYY_mm_dd_HH_MM_SS` stamp goes in before the extension. `FilenameMode.KEEP_ORIGINAL` uses the name as given.
  - `close_outfile()` closes the file. `is_outfile_opened()`, `outfile` and `opened_path` report the current state.
- `ymcommon.fileio`: `read_file(filename)` returns a file's whole text with line endings unchanged. It raises `OSError` on failure.
- `ymcommon.rng`:
  - `Prng` is a 64-bit permuted LCG. Its methods are `gen_u64`, `gen_u32`, `gen_f32`, `gen_f64`, `jump(n)` and `set_seed`. Calling the instance returns `gen_u64()`.
  - `Trng` XORs a `Prng` output with a high-resolution counter. It has the same `gen_*` methods.
- `ymcommon.datalogger`:
  - `DataLogger(depth)` keeps the latest `depth` readings of registered callables in a ring buffer.
  - Register a callable with `add_entry(name, read)` and record a row with `acquire_all()`. `clear()` removes every registered entry.
  - `dump(filename)` writes a CSV header and the buffered rows, oldest first. It returns `False` if the file already exists or cannot be opened.
- `ymcommon.publisher`: `Publisher` delivers payloads to `Subscriber` objects, which implement `receive(payload)`. The publisher holds its subscribers by weak reference. `subscribe` ignores `None` and duplicates. `publish` drops subscribers that have been collected.
- `ymcommon.threadsafeproxy`: `ThreadSafeProxy(obj)` guards an object with a lock. Use it as a context manager to get the object while holding the lock, or call `call(fn)` to run `fn(obj)` under the lock.
- `ymcommon.nameable`: the `Nameable` dataclass has a mutable `name`. `PermaNameable` is frozen.

## Install

```
pip install .
```

## Examples

```python
from ymcommon.rng import Prng

rng = Prng(seed=1234)
print(rng.gen_u64(), rng.gen_f64())
rng.jump(1000)  # skip ahead 1000 steps
```

```python
from ymcommon.datalogger import DataLogger

counter = {"n": 0}
box = DataLogger(8)
box.add_entry("n", lambda: counter["n"])
for _ in range(3):
    counter["n"] += 1
    box.acquire_all()
box.dump("blackbox.csv")  # False if the file already exists
```

```python
from ymcommon.publisher import Publisher, Subscriber

class Printer(Subscriber):
    def receive(self, payload):
        print(payload)
        return True

pub = Publisher()
printer = Printer()
pub.subscribe(printer)
pub.publish("hello")
```

## What it does not do

- The verbosity groups in `ymcommon.verbogroup` are plain values. The package has no text logger that filters messages by them.
- The package has no helpers that convert strings into range-checked integers or floats.
- It has no command-line program.

## Tests

```
pip install .[test]
pytest
```