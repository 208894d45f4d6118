"""Example HTTP server that decodes a compressed stream of bytes.

Decoding uses the codebook that the client wrote to `hamlet.code`.

Run the server using:

```sh
python examples/client-server/server.py
```

"""

from contextlib import contextmanager
import io
import socket
from concurrent.futures import ThreadPoolExecutor

import huffman_code

HOST = "localhost"
PORT = 5007
NUM_CLIENTS = 10
CODEBOOK_PATH = "hamlet.code"


@contextmanager
def makefile(s: socket.socket):
    file = s.makefile(mode="rb", buffering=0)
    try:
        yield file
    finally:
        file.close()


def handle_conn(conn: socket.socket, addr) -> None:
    decoded_text = io.BytesIO()

    with conn:
        print("Connected by", addr)

        # The codebook is read per connection, as the client rewrites it
        # before every transfer.
        with (
            open(CODEBOOK_PATH, mode="r", newline="") as f_code,
            makefile(conn) as f_in,
        ):
            huffman_code.decode(f_in=f_in, f_code=f_code, f_out=decoded_text)

        print(decoded_text.getvalue().decode("utf-8", errors="replace"))

    print("Done handling", addr)


def main() -> None:
    # Listen for incoming connections.
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind((HOST, PORT))
        s.listen()

        # Serve requests indefinitely, each within its own thread.
        with ThreadPoolExecutor(max_workers=NUM_CLIENTS) as executor:
            while True:
                conn, addr = s.accept()
                executor.submit(handle_conn, conn, addr)


if __name__ == "__main__":
    main()
