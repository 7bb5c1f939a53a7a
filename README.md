# wfrest

Building blocks for writing REST services in Python: a JSON value type that
keeps member order and serialises in a fixed, exact format, a lenient base64
codec, microsecond timestamps, a shrinkable string view, cached thread ids
for logging, and request aspects (before/after hooks).

The package has no runtime dependencies.

## Install

```
pip install wfrest
```

For running the tests:

```
pip install "wfrest[test]"
pytest
```

## Modules

- `wfrest.jsonvalue`: `Json`, a mutable JSON value (null, boolean, number,
  string, array or object). Numbers are stored as floats. Indexing a missing
  object member gives a placeholder that becomes a real member once a value
  is assigned or pushed through it; indexing an existing member or element
  gives a view that shares the enclosing document. `Json.parse(source)`
  accepts a str, bytes, a readable file object or a path; invalid text gives
  a value whose `is_valid()` is False. Also `dump(spaces)`, `push_back(...)`,
  `erase(key)`, `has(key)`, `size()`, `empty()`, `clear()`, `copy()`,
  `get()`, `key()`, `type_str()` and the `is_*()` checks; iteration runs over
  members or elements, forwards or with `reversed()`.
- `wfrest.jsoncontainers`: `JsonObject(pairs)` from a mapping or key/value
  pairs, and `JsonArray(items)` where each item becomes exactly one element.
- `wfrest.jsonfmt`: `dump_value(value, spaces)` serialises plain Python data
  (dicts, lists, str, numbers, bools, None); `escape_string(text)` and
  `format_number(number)` (`%.15g`).
- `wfrest.base64codec`: `encode(data)` turns bytes into padded base64 text;
  `decode(encoded)` stops at the first `=` or non-alphabet character and
  returns the whole bytes decoded so far.
- `wfrest.timestamp`: `Timestamp`, an immutable count of microseconds since
  the epoch, with `now()`, `invalid()`, `valid()`, `to_str()`,
  `to_format_str(fmt)`, ordering, and arithmetic (an int adds microseconds,
  a float adds seconds, and the difference of two timestamps is in seconds).
- `wfrest.stringpiece`: `StringPiece`, a view over str or bytes with
  `remove_prefix`, `remove_suffix`, `shrink`, `starts_with`, `compare`,
  ordering and hashing; `string_piece_hash(piece)` is the base-131
  polynomial hash wrapped to 64 bits.
- `wfrest.sysinfo`: `tid()` and `tid_str()` give the calling thread's native
  id, cached per thread; `tid_str()` is right-aligned in five columns with a
  trailing space.
- `wfrest.aspect`: the abstract `Aspect` base class with `before(req, resp)`
  and `after(req, resp)`, and `GlobalAspect.get_instance()`, the single
  process-wide holder of `aspect_list`.

## Examples

Building JSON:

```python
from wfrest.jsonvalue import Json

doc = Json()
doc["test"] = 123
doc["json"] = "test json"
print(doc.dump())   # {"test":123,"json":"test json"}
print(doc.dump(4))  # indented with four spaces
```

Parsing JSON:

```python
from wfrest.jsonvalue import Json

numbers = Json.parse('{"numbers": [1, 2, 3]}')["numbers"]
print(numbers.size())  # 3

broken = Json.parse('{"strings": ["extra", "comma", ]}')
print(broken.is_valid())  # False
```

Containers:

```python
from wfrest.jsoncontainers import JsonArray, JsonObject

print(JsonArray([1, [2, 3]]).dump())        # [1,[2,3]]
print(JsonObject([("a", True)]).dump())     # {"a":true}
```

Base64:

```python
from wfrest.base64codec import decode, encode

text = encode(b"hello")
assert decode(text) == b"hello"
```

Registering a global aspect:

```python
from wfrest.aspect import Aspect, GlobalAspect

class LogAspect(Aspect):
    def before(self, req, resp):
        print("before")
        return True

    def after(self, req, resp):
        print("after")
        return True

GlobalAspect.get_instance().aspect_list.append(LogAspect())
```

## What this package does not do

There is no HTTP server, router or request/response type here: aspects are
hooks with no server to run them, and `req` and `resp` are whatever the
caller passes. The package also has no compression helpers and no
error-code table; failures are reported with ordinary Python exceptions
(`TypeError`, `ValueError`, `IndexError`). There is no command-line program.