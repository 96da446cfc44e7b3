# chtestkit

Building blocks for code and tests that work with a columnar database's
native client protocol: error types, packet codes, deep comparison of nested
values, formatting helpers, timing helpers, deterministic test-value
generators and a throwaway loopback listener. It has no dependencies beyond
the standard library.

## Modules

- `chtestkit.errors`
  - `ErrorCodes`: an `IntEnum` of server error codes known by name
    (`TABLE_ALREADY_EXISTS = 57`, `UNKNOWN_TABLE = 60`, `SYNTAX_ERROR = 62`, ...).
  - `Error` (a `RuntimeError`) and its subclasses `ValidationError`,
    `ProtocolError`, `UnimplementedError`, `InternalAssertionError`,
    `OpenSSLError` and `LZ4Error`.
  - `ServerExceptionInfo`: a dataclass with `code`, `name`, `display_text`,
    `stack_trace` and an optional `nested` exception.
  - `ServerException` (also available as `ServerError`): wraps a
    `ServerExceptionInfo`; its `code` and `exception` properties expose it,
    and `str()` gives its `display_text`.
- `chtestkit.protocol`: `IntEnum`s `ServerCodes` and `ClientCodes` for packet
  types, `CompressionState` and `Stages`.
- `chtestkit.sequences`: `slice_vector(sequence, begin, length)` returns up to
  `length` items from `begin`, an empty list when `begin` is past the end, and
  raises `ValueError` for negative arguments.
- `chtestkit.compare`
  - `is_container(value)`: true for sized iterables other than `str`,
    `bytes` and `bytearray`.
  - `compare_recursive(left, right)` and
    `compare_containers_recursive(left, right)`: deep element-wise comparison
    returning a `ComparisonResult`, which is truthy on success and carries a
    `message` describing the first mismatch (size, position, values).
- `chtestkit.formatting`
  - `uuid_to_string(first, second)`: canonical `8-4-4-4-12` text of a UUID
    given as two unsigned 64-bit halves.
  - `version_number(major, minor, patch=0, revision=0)`: one integer that
    orders like the version.
  - `format_container`, `format_optional` (`NULL` for `None`), `format_pair`
    (`{ a, b }`) and `format_duration(count, unit=1)` (e.g. `5ms` for a unit
    of `Fraction(1, 1000)`; unknown units get a `?` prefix).
  - `get_env_or_default(env, default=None, result_type=str)`: reads an
    environment variable, falls back to `default`, converts with
    `result_type`, and raises `LookupError` when neither is available.
- `chtestkit.timing`: `Timer` (`start`, `restart`, `elapsed()` as a
  `timedelta` at microsecond resolution), `MeasuresCollector` (`add(name)`
  records the result of the measuring function; `results` lists the
  `(name, value)` pairs) and `collect(measure)`.
- `chtestkit.generators`
  - Fixed sample sets: `make_numbers`, `make_bools`, `make_strings`,
    `make_fixed_strings(size)`, `make_uuids` (pairs of 64-bit halves),
    `make_dates`, `make_dates32`, `make_date_times`,
    `make_date_time64s(scale, values_size=200)`, `make_int128s`,
    `make_decimals(precision, scale)`, `make_ipv4s`, `make_ipv6s`.
  - `make_ipv4(ip)` (the integer's bytes taken little-endian) and
    `make_ipv6(*bytes)` (16 bytes, or the last 6 with the rest zero).
  - Combinators: `foo_bar_generator`, `generate_vector`,
    `same_value_generator`, `alternate_generators`, `concat_sequences`.
  - `RandomGenerator(seed=0, value_min=0, value_max=2**64 - 1)`: seeded
    uniform values, integers when both bounds are integers, floats otherwise.
  - `FromVectorGenerator(data)`: picks items of `data` at seeded random
    positions; raises `ValueError` for empty data.
- `chtestkit.tcp_server`: `LocalTcpServer(port)` binds and listens on
  `127.0.0.1` without accepting connections; `start`, `stop`, and use as a
  context manager. `start` raises `RuntimeError` if the socket cannot be set
  up or bound.

## Examples

```python
from chtestkit.compare import compare_recursive

result = compare_recursive([[1, 2, 3], [4, 5, 6]], [[1, 2, 3], [4, 5, 7]])
if not result:
    print(result.message)
```

```python
from chtestkit.formatting import uuid_to_string

uuid_to_string(0x0102030405060708, 0x090A0B0C0D0E0F10)
# '01020304-0506-0708-090a-0b0c0d0e0f10'
```

```python
from chtestkit.errors import ErrorCodes, ServerException

try:
    ...
except ServerException as exc:
    if exc.code != ErrorCodes.TABLE_ALREADY_EXISTS:
        raise
```

```python
from chtestkit.tcp_server import LocalTcpServer

with LocalTcpServer(19978):
    ...  # TCP connections to 127.0.0.1:19978 are queued but never served
```

## What this package does not do

It is not a database client. It opens no connections to a server, speaks no
wire protocol, and has no column types, blocks, compression or TLS support;
the error classes and protocol codes are provided for code that implements
those parts.

## Running the tests

```
pip install -e ".[test]"
pytest
```