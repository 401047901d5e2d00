# kernelkit

Building blocks for writing an interactive computing kernel in Python.

## Modules

- `kernelkit.authentication`: signs and verifies the four frames of a
  message (header, parent header, metadata, content) with an HMAC.
  `make_authentication(scheme, key)` returns a `NoAuthentication` for the
  scheme `none` and an `HmacAuthentication` for any of `hmac-md5`,
  `hmac-sha1`, `hmac-ripemd160`, `hmac-blake2b512`, `hmac-blake2s256`,
  `hmac-sha224`, `hmac-sha256`, `hmac-sha384` and `hmac-sha512`. An unknown
  scheme, or one the local `hashlib` does not provide, raises `ValueError`.
  Signatures are lower-case hexadecimal strings.
- `kernelkit.configuration`: `load_configuration(file_name)` reads a JSON
  connection file into a `Configuration` dataclass (transport, ip, the five
  ports as strings, signature scheme and key). Missing or mistyped fields
  raise `ValueError`; the key is only read when a signature scheme is set.
- `kernelkit.helper`: builders for reply payloads
  (`create_successful_reply`, `create_error_reply`, `create_complete_reply`,
  `create_inspect_reply`, `create_is_complete_reply`, `create_info_reply`),
  command-line helpers (`extract_filename` returns the argument after `-f`,
  `should_print_version` looks for `--version`) and
  `print_starting_message(config)`, which returns a banner showing the
  connection settings.
- `kernelkit.history`: `HistoryManager` answers history requests of the
  `tail`, `range` and `search` kinds through `process_request(content)`.
  `make_in_memory_history_manager()` returns an `InMemoryHistoryManager`.
  Search patterns are globs where `*` matches any run of characters and `?`
  a single one.
- `kernelkit.messenger`: `ControlMessenger`, an abstract channel whose
  `send_to_shell(message)` sends a request to the shell and returns its reply.
- `kernelkit.guid`: `new_guid()` returns 32 random lower-case hex digits.
- `kernelkit.strings`: `hex_string(data)` encodes bytes as hexadecimal.
- `kernelkit.system`: `get_user_name()` returns the name of the user running
  the process, or `"unspecified user"`.

## Install

```
pip install .
```

## Signing messages

```python
from kernelkit.authentication import make_authentication

key = "secret"
auth = make_authentication("hmac-sha256", key)
signature = auth.sign(b"{}", b"{}", b"{}", b'{"code": "1"}')
assert auth.verify(signature.encode(), b"{}", b"{}", b"{}", b'{"code": "1"}')
```

## Reading a connection file

```python
from kernelkit.configuration import load_configuration
from kernelkit.helper import print_starting_message

config = load_configuration("connection.json")
print(print_starting_message(config))
```

## Keeping history

```python
from kernelkit.history import make_in_memory_history_manager

history = make_in_memory_history_manager()
history.store_inputs(0, 1, "print(3)")
history.store_inputs(0, 2, "a = 3")
reply = history.get_tail(1, True, False)
# {"history": [["0", "2", "a = 3"]], "status": "ok"}
```

## What it does not do

kernelkit has no transport: it opens no sockets, runs no server, heartbeat
or message loop, and has no command to start a kernel. It also has no
interpreter class or code execution; you supply the language back end and
the wiring, and use these modules for signing, configuration, replies and
history. `ControlMessenger` is abstract and has no concrete implementation
here.

## Tests

```
pip install .[test]
pytest
```