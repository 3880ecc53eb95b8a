# corekit

A toolbox of small helpers for services and command-line tools. It uses only
the standard library.

## Modules

- `corekit.convert` – total conversion of any value to fixed-width numbers,
  booleans and strings. Values that cannot be read become `0`, `False` or `""`;
  values outside the target range are clamped to its bounds:
  `to_int8("1024") == 127`, `to_uint8(-5) == 0`, `to_string(12345.0) == "12345"`.
  Functions: `to_byte`, `to_int`, `to_int8`, `to_int16`, `to_int32`, `to_int64`,
  `to_uint`, `to_uint8`, `to_uint16`, `to_uint32`, `to_uint64`, `to_float32`,
  `to_float64`, `to_bool`, `to_string`.
- `corekit.typecheck` – `compare` (returns -1, 0 or 1, comparing as the type of
  the first value), `is_number`, `is_integer`, `is_float`, `is_slice`, `is_map`,
  `is_nil`, and `convert_slice`, which converts every element of a sequence to a
  given `Kind` and raises `ValueError` on bad input.
- `corekit.maps` – `Map`, a `dict` with typed getters (`get_int`, `get_string`,
  `get_float64`, `get_map`, `get_slice`, `get_bytes`, …), `increase`, `delete`,
  and `as_json` / `as_pretty_json` (sorted keys; empty bytes when the map cannot
  be encoded). `new_map` merges mappings into a `Map` with string keys;
  `decode_json` reads a JSON object, turning every number into a float.
- `corekit.ordered_map` – `OrderedMap`, which keeps insertion order and can be
  reordered with `sort` (by value), `sort_keys` or `reverse`.
- `corekit.scheme` – the frozen dataclasses `GroupVersion`, `GroupKind`,
  `GroupVersionKind`, `GroupResource`, `GroupVersionResource`, the tuple type
  `GroupVersions`, the `ObjectKind` interface with `EmptyObjectKind` /
  `EMPTY_OBJECT_KIND`, and the parsers `parse_group_version`, `parse_group_kind`,
  `parse_group_resource`, `parse_kind_arg`, `parse_resource_arg` and
  `from_api_version_and_kind`.
- `corekit.selection` – the `Operator` string enumeration for selectors.
- `corekit.meta` – API object metadata: `TypeMeta`, `ListMeta`, `ObjectMeta`
  with its `Extend` field and `before_create` / `before_update` / `after_find`
  hooks, and the request option types `ListOptions`, `ExportOptions`,
  `GetOptions`, `DeleteOptions`, `CreateOptions`, `PatchOptions`,
  `UpdateOptions`, `AuthorizeOptions` and `TableOptions`, each with `to_dict`.
- `corekit.negotiate` – the `Encoder` and `Decoder` interfaces, a
  `JSONSerializer`, a `ClientNegotiator` returned by
  `new_simple_client_negotiator`, and `NegotiateError`.
- `corekit.rands` – thread-safe `rand_int`, `rand_int64`, `rand_bool`,
  `rand_string` and `rand_hex_string` (not suitable for secrets).
- `corekit.jsontime` – `Time`, serialised as `"YYYY-MM-DD HH:MM:SS"`, with
  `to_time` (parses in the local time zone), `now`, `Time.value` and `Time.scan`.
- `corekit.terminal` – `terminal_size(stream)` returns `(columns, lines)` and
  raises `OSError` when the stream is not a terminal.

## Installing

```
pip install .
```

## Examples

```python
from corekit.maps import new_map
from corekit.scheme import parse_group_version

m = new_map({"count": "3", "name": "demo"})
m.get_int("count")        # 3
m.increase("count", 2)    # "3" is a string, so the value stays "3"

gv = parse_group_version("apps/v1")
gv.with_kind("Deployment").to_api_version_and_kind()   # ("apps/v1", "Deployment")
```

```python
from corekit.ordered_map import OrderedMap

om = OrderedMap()
om.put("b", 2)
om.put("a", 1)
om.sort_keys()
om.keys()                 # ["a", "b"]
```

## What it does not do

corekit is a library only; it has no command of its own. It does not store
anything: the `ObjectMeta` hooks only move extended fields to and from their
JSON shadow string, and `Time.value` / `Time.scan` only produce and accept
`datetime` values; connecting them to a database is left to the caller.

## Running the tests

```
pip install ".[test]"
pytest
```