"""

```sh
python -m cProfile -o perf_test.prof experiments/profiling.py
snakeviz perf_test.prof
```

"""
import huffman_code


make_codebook = huffman_code.make_codebook
encode = huffman_code.encode
decode = huffman_code.decode


FILE_PATH_TEXT = "larger_than_memory_file.txt"
FILE_PATH_CODE = "larger_than_memory_file.code"
FILE_PATH_BYTES = "larger_than_memory_file.raw"


def write_large_file(N):
    with open(FILE_PATH_TEXT, "w") as f:
        for _ in range(N):
            f.write(500 * "a" + 300 * "b" + 200 * "c")


if __name__ == "__main__":
    print("Write large file.")
    N = 10**4  # ~10MB
    write_large_file(N=N)

    print("Creating codebook.")
    with (
        open(FILE_PATH_TEXT, mode="rb", buffering=0) as f_in,
        open(FILE_PATH_CODE, mode="w", newline="") as f_out
    ):
        make_codebook(f_in=f_in, f_out=f_out)

    print("Encoding large file.")
    with (
        open(FILE_PATH_TEXT, mode="rb", buffering=0) as f_in,
        open(FILE_PATH_CODE, mode="r", newline="") as f_code,
        open(FILE_PATH_BYTES, mode="wb", buffering=0) as f_out
    ):
        encode(f_in=f_in, f_code=f_code, f_out=f_out)

    print("Decoding large file.")
    with (
        open(FILE_PATH_BYTES, mode="rb", buffering=0) as f_in,
        open(FILE_PATH_CODE, mode="r", newline="") as f_code,
        open(FILE_PATH_TEXT, mode="wb") as f_out
    ):
        decode(f_in=f_in, f_code=f_code, f_out=f_out)
