# keyhouse

Building blocks for a key management service: an AES-256-GCM codec, the
`ClientCoding` interface with a trivial test coding, master key providers,
error codes, and helpers for a control plane (response envelopes, alias
checks, authorization backends and health evaluation).

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Encrypting data with AES-256-GCM

`keyhouse.aes256gcm.Aes256GcmItem` holds a 32-byte key and a counter of the
encryptions made with it.

```python
from keyhouse.aes256gcm import Aes256GcmItem

item = Aes256GcmItem.generate()
ciphertext = item.encode_data(b"exampleplaintext")   # 12-byte nonce + ciphertext + 16-byte tag
assert item.decode_data(ciphertext) == b"exampleplaintext"

# store and reload the key material
restored = Aes256GcmItem.from_source(item.into_source())
assert restored.decode_data(ciphertext) == b"exampleplaintext"

# deterministic keys derived from a seed and an epoch (HKDF-SHA256,
# salted with the epoch as 8 big-endian bytes)
seed = Aes256GcmItem.generate_seed()
epoch_key = Aes256GcmItem.generate_epoch(seed, 0)
assert epoch_key == Aes256GcmItem.generate_epoch(seed, 0)
```

`encode_data_with_iv` and `decode_data_with_iv` take a caller-supplied
12-byte nonce, which is then not prepended to the output. `encode_self` and
`decode_self` serialise the item as its raw key.

A `ValueError` is raised for a key that is not 32 bytes, a nonce that is not
12 bytes, input shorter than nonce plus tag, and any ciphertext that fails
authentication.

## Codings and regions

`keyhouse.coding` defines:

- `ClientCoding`, the abstract interface every client coding implements
  (`generate`, `generate_seed`, `generate_epoch`, `from_source`,
  `into_source`, `encode_data`, `decode_data`, `encode_data_with_iv`,
  `decode_data_with_iv`);
- `Region`, an immutable wrapper around an opaque region name in bytes;
- `NullCoding`, an insecure reversible coding for tests. Its source is a
  fixed 32-byte value; `from_source` raises `ValueError` for anything else.

## Master keys

`keyhouse.master_key.MasterKeyProvider` is an asynchronous interface with
`encode(key_id, data)` and `decode(key_id, data)`. `MockMasterKey` is an
insecure implementation for tests whose two methods are inverses:

```python
import asyncio
from keyhouse.master_key import MockMasterKey

provider = MockMasterKey()
wrapped = asyncio.run(provider.encode("key-id", b"data"))
assert asyncio.run(provider.decode("key-id", wrapped)) == b"data"
```

## Control plane helpers

`keyhouse.platform`:

- `PlatformResponse`, the JSON envelope with `error_code`, `message`,
  `apply_url` and `data`; built with `ok`, `error` (code 1) or `auth_error`,
  and serialised with `to_dict` or `to_json`;
- `PlatformError`, an exception carrying a `PlatformResponse`;
- `verify_alias`, which raises `PlatformError` unless the alias consists only
  of letters, digits, `_`, `.` and `-`;
- `info_message`, the JSON greeting `hello <username>`;
- `parse_log_path`, which extracts the keyring, customer key and secret
  aliases from a `/api/keyrings/...` path;
- `strip_bearer`, which removes a leading `Bearer ` from a token.

`keyhouse.auth`:

- `ControlPlaneAuth`, the abstract authentication and authorization backend;
- `AuthorizationResult` (`authorized` and an optional `apply_url`) and
  `KeychainMetadata` (`owners` and `level`);
- `MockAuth`, an in-memory backend: every token authenticates as
  `test-user`, a keyring is authorized when its alias is in the list given at
  construction or added with `create_keychain`, and metadata is always owner
  `test` at level `L3`.

`keyhouse.health`:

- `evaluate_health(last_contact_ms, now_ms, max_refresh_rate_ms)` returns a
  `HealthResponse` that reports the store online while its last contact is
  within twice the maximum refresh interval, and raises `ValueError` if the
  last contact lies in the future;
- `EtcdContact`, a thread-safe record of the last contact, with `touch` and
  `health`, both defaulting to the current time.

## Error codes

`keyhouse.errors.ErrorCode` enumerates the numeric codes of the key service;
`ErrorCode.from_primitive` turns any unrecognised number into
`ErrorCode.UNKNOWN`, and `str()` gives names such as `UnknownAlias`.

## What this package does not do

It provides no running service: there is no data-plane RPC server or client,
no HTTP control plane, no storage of keyrings, customer keys or secrets, no
connection to a backing store, and no command-line entry point. The pieces
above are what such a service would be built from.