# netlab

Small simulations of classic computer-network techniques. Each one is a
module you can import and a command you can run. There are no third-party
dependencies.

| Module                     | Topic                                           |
|----------------------------|-------------------------------------------------|
| `netlab.packets`           | Splitting a message into packets, out-of-order delivery, reassembly |
| `netlab.crc`               | Cyclic redundancy check over strings of `0`/`1` |
| `netlab.hamming`           | Hamming(7,4) encoding and single-bit correction |
| `netlab.distance_vector`   | Distance-vector routing tables                  |
| `netlab.leaky_bucket`      | Leaky-bucket traffic shaping                    |
| `netlab.filetransfer`      | A minimal TCP file server and client            |

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Commands

Every command takes its input as arguments; `--help` lists them.

### netlab-packets

Splits a message into numbered packets (3 characters each by default),
shuffles them and reassembles them by sequence number. Without a message on
the command line it asks for one with `Msg: `.

    netlab-packets "A computer network is a set of devices" --seed 1
    netlab-packets hello world --size 4

Options: `--size N` characters per packet, `--seed N` to make the delivery
order repeatable.

### netlab-crc

Computes the checksum and codeword; `--error POS` flips the bit at a
zero-based position and reports whether the error is detected.

    $ netlab-crc 11010011101100 1011 --error 5
    Modified data: 11010011101100000
    Checksum: 100
    Final codeword: 11010011101100100
    Data with error: 11010111101100100
    Error detected in the received data.

A position outside the codeword prints
`Invalid position! Error insertion failed.` and exits with status 1.

### netlab-hamming

Encodes four data bits; given a seven-bit received code as well, it finds and
corrects a single-bit error. Codes are written with position 7 on the left and
position 1 on the right.

    $ netlab-hamming 1011 1011111
    Hamming: 1010101
    Error at 6
    Code: 1111111

### netlab-distance-vector

Reads the number of nodes followed by the cost matrix (whitespace separated)
from a file, or from standard input when no file is given, and prints each
router's table. Use `999` for a missing link.

    $ echo "3  0 1 999  1 0 1  999 1 0" | netlab-distance-vector

    Router 1:
    Dest	Via	Dist
    1	1	0
    2	2	1
    3	2	2
    ...

### netlab-leaky-bucket

Packets are given as `TIME:SIZE` in increasing time order; `--bucket-size`
and `--rate` are required.

    $ netlab-leaky-bucket 1:5 2:6 3:8 4:6 --bucket-size 12 --rate 2
    Time 1
    Inserted 5 bytes
    Sent 2 bytes
    In bucket: 3
    ...
    Time 3
    Dropped 8 bytes
    Sent 2 bytes
    In bucket: 5
    ...

### netlab-file-server and netlab-file-client

    netlab-file-server [--host ADDR] [--port PORT]
    netlab-file-client [--host ADDR] [--port PORT]

Both default to port 65535; the server binds all addresses, the client
connects to `127.0.0.1`. The client prompts with `>` for file names and prints
each file's contents, or `404` when the server cannot read it. Enter `q` (or
end input) to quit.

## Library use

```python
from netlab.crc import crc_remainder, append_checksum, flip_bit, detect_error
from netlab.hamming import encode, syndrome, correct
from netlab.packets import Packet, split_message, shuffle_packets, reassemble
from netlab.distance_vector import Route, compute_routes, format_routes
from netlab.leaky_bucket import Tick, simulate

crc_remainder("11010011101100", "1011")      # '100'
append_checksum("11010011101100", "1011")    # '11010011101100100'
detect_error(flip_bit("11010011101100100", 5), "1011")   # True

encode("1011")                               # '1010101'
syndrome("1011111")                          # 6
correct("1011111")                           # ('1111111', 6)

packets = split_message("hello world")       # [Packet(seq=1, data='hel'), ...]
reassemble(shuffle_packets(packets))         # 'hello world'

tables = compute_routes([[0, 1, 999], [1, 0, 1], [999, 1, 0]])
tables[0][2]                                 # Route(destination=2, via=1, distance=2)

ticks = simulate([(1, 5), (2, 6), (3, 8), (4, 6)], bucket_size=12, rate=2)
ticks[2]                                     # Tick(time=3, inserted=0, dropped=8, sent=2, in_bucket=5)
```

Invalid input raises `ValueError` (bits other than `0`/`1`, wrong lengths,
non-square matrices, a negative cycle, non-increasing arrival times);
`flip_bit` raises `IndexError` for a position outside the codeword.
`compute_routes` and `format_routes` use zero-based router indices in `Route`
and print them one-based.

### File transfer

```python
from netlab.filetransfer import FileClient, serve

# in one process
serve("", 65535)

# in another
with FileClient("127.0.0.1", 65535) as client:
    data = client.request("notes.txt")   # bytes
```

The client sends a file name ending in a NUL byte; the server answers
`OK <length>\n` followed by the file's bytes, or `404\n`. `request` raises
`FileNotFoundError` on `404`, `ValueError` for the name `q` or a name holding
a NUL, and `ConnectionError` if the reply is cut short or malformed. Closing
the client sends `q`. `serve_connection(conn)` answers requests on an already
connected socket.

## What it does not do

The file server accepts a single client and exits when that client quits; it
does not serve several clients at once. It has no authentication and no
restriction on which paths may be read: any file readable from the server's
working directory, relative or absolute, is sent.