"""Example client that compresses a file and sends it over the wire.

The codebook is not part of the compressed stream, thus it is written to
`hamlet.code` which the server reads as well.

Run the client using (be sure to run the server first!):

```sh
python examples/client-server/server.py
# In another terminal
python examples/client-server/client.py
```

"""

from contextlib import contextmanager
import socket

import huffman_code

HOST = "127.0.0.1"  # localhost
PORT = 5007
CODEBOOK_PATH = "hamlet.code"

@contextmanager
def makefile(s: socket.socket):
    file = s.makefile(mode="wb", buffering=0)
    try:
        yield file
    finally:
        file.close()


def write_codebook(file_path: str) -> None:
    with (
        open(file_path, mode="rb") as f_in,
        open(CODEBOOK_PATH, mode="w", newline="") as f_out,
    ):
        huffman_code.make_codebook(f_in=f_in, f_out=f_out)


def send_hamlet(host: str, port: int) -> None:
    write_codebook("hamlet.txt")

    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.connect((host, port))

        # A socket isn't seekable, so the encoding is sent at once.
        with (
            open("hamlet.txt", mode="rb") as f_in,
            open(CODEBOOK_PATH, mode="r", newline="") as f_code,
            makefile(s) as f_out,
        ):
            num_bits = huffman_code.encode(f_in=f_in, f_code=f_code, f_out=f_out)

    print(f"Hamlet was successfully encoded ({num_bits} bits) and sent to the server.")


def main():
    send_hamlet(HOST, PORT)


if __name__ == "__main__":
    main()
