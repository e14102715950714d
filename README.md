# minitalk

Send a text message from one process to another using only the two user signals. Each signal carries one bit. `SIGUSR1` is 0 and `SIGUSR2` is 1. The bits of each byte go least significant first, and a NUL byte ends the message. The text goes over the wire as UTF-8.

The server and client wait for signals with `signal.sigwaitinfo` and `signal.sigtimedwait`. Python offers those only on some POSIX systems, Linux among them.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

Start a server. It prints its process id and then waits for messages until it is interrupted:

```
minitalk-server
Server_PID = [12345]
```

From another terminal, send it a message:

```
minitalk-client 12345 "hello there"
```

The server prints:

```
[Client_67890]:
"hello there"
```

### Handshake mode

The server and the client both accept `--handshake`. Use it on both sides or on neither.

```
minitalk-server --handshake
minitalk-client --handshake 12345 "hello there"
```

In this mode the server serves one client at a time. The client keeps sending a connection signal, once a second, and shows `Sending...` until the server answers. Then it sends the message. It prints `Message Sent!` once the server confirms that the whole message arrived. While a session is open, the server ignores signals from other processes.

### Client arguments

The client takes a server pid and a non-empty message, optionally preceded by `--handshake`. It reads the pid the way `atoi` does, so leading whitespace, a sign and trailing non-digits are accepted. If the arguments are wrong, the pid is not positive, or the server cannot be signalled, the client exits quietly with status 0 and sends nothing more.

## Library

- `minitalk.protocol`
  - `encode_bits(message)` yields the message's bits, including its terminator.
  - `bit_to_signal` and `signal_to_bit` convert between bits and `SIGUSR1`/`SIGUSR2`.
  - `Assembler.feed(bit)` returns the finished message as bytes once a NUL byte completes it, and `None` otherwise.
- `minitalk.server`
  - `BasicServer.handle(signum, sender)` decodes one bit and answers every signal with `SIGUSR2`.
  - `HandshakeServer.handle(signum, sender)` implements the one-client-at-a-time session described above.
  - Both handlers take an optional `send` callable (default `os.kill`) and an output stream.
  - `serve(handler, out)` prints the pid, blocks the two signals and passes each one to the handler.
- `minitalk.client`
  - `send_basic(pid, message)` sends the message to a basic server and returns the number of bits sent.
  - `send_handshake(pid, message, out)` does the same with a handshake server and writes its progress to `out`.
  - Both raise `ValueError` for a non-positive pid or an empty message.

Helpers used by the above, also usable on their own:

- `minitalk.chars`: ASCII character tests and case conversion.
- `minitalk.memory`: byte-buffer operations such as `memset`, `memmove`, `memcmp` and `calloc`.
- `minitalk.cstrings`: string routines that treat `"\0"` as the end of a string, and `parse_int`, which parses like `atoi` and wraps to 32 bits.
- `minitalk.textops`: `substr`, `strjoin`, `strtrim`, `split`, `itoa`, `strmapi` and `striteri`.
- `minitalk.output`: writes characters, strings, lines and numbers to text streams.
- `minitalk.linkedlist`: `LinkedList`, a singly linked list made of `Node` links.
- `minitalk.cfmt`: `format_printf` and `printf`, which support `%c %s %p %d %i %u %x %X %%`.
- `minitalk.linereader`: `LineReader`, which reads lines from file descriptors and keeps a buffer for each descriptor, and `iter_lines`.

## What it does not do

The server only prints each message as it arrives. It does not store messages, queue clients or reply with any content. It sends no encryption and does no authentication. Any process allowed to signal the server can send to it.