"""Huffman codebooks: building, persisting and applying prefix codes.

A `HuffmanCode` wraps a Huffman tree, which is built either from a
frequency table (`HuffmanCode.from_frequencies()`) or from a previously
saved codebook (`HuffmanCode.from_codebook()`). Symbols are byte values,
i.e. integers between 0 and 255.

The codebook format is plain text consisting of line pairs:

    - line 1: the symbol as a decimal integer, e.g. `97`.
    - line 2: the code of the symbol as a string of "0" (left) and "1"
      (right) characters, e.g. `1101`.

There is no header or count; a codebook is read until the input is
exhausted. The pairs are written in the (left-first, depth-first) leaf
order of the tree.

Tree construction is deterministic. Nodes are ordered by their frequency
and ties are broken by insertion order: leaves are created in ascending
symbol order and every merged node is created after all nodes before
it. Hence the same frequency table always results in the same codebook.

The compressed format written by `encode()` is byte aligned:

    - 1 byte: the number of zero bits (0-7) padding the final byte.
    - Y bytes: the concatenated codes of all symbols, most significant
      bit first.

Decoding is done by walking the tree bit by bit, emitting a symbol
every time a leaf is reached and starting again from the root.

"""

import argparse
import contextlib
import heapq
import io
import logging
import os
import sys
import typing as t
from collections import Counter
from collections.abc import Mapping
from enum import Enum


logger = logging.getLogger(__name__)

# Line terminator written after every codebook line. Open codebook files
# using `newline=""` to prevent it from being translated.
CODEBOOK_NEWLINE = "\n"

# Number of bytes in front of the compressed payload. Currently the
# header only stores the number of padding bits of the final byte.
PADDING_HEADER_SIZE = 1
MAX_PADDING_BITS = 7
# Header of a stream that was never closed, e.g. because encoding
# failed. It is rejected when reading.
UNFINISHED_HEADER = b"\xff"

# Symbols are written as single bytes when decoding.
MAX_SYMBOL = 255

_SYMBOL_CHARS = frozenset("0123456789")
_CODE_CHARS = frozenset("01")


class Direction(Enum):
    """Code values for directions (left or right) in Huffman tree."""
    LEFT = 0
    RIGHT = 1


class HuffmanError(Exception):
    """Base class of all errors raised by this module."""


class EmptyFrequencyTableError(HuffmanError, ValueError):
    """The frequency table contains no symbol with a positive count."""


class MalformedCodebookError(HuffmanError, ValueError):
    """The codebook is not a valid, prefix-free list of line pairs."""

    def __init__(self, msg: str, lineno: t.Optional[int] = None) -> None:
        if lineno is not None:
            msg = f"line {lineno}: {msg}"
        super().__init__(msg)
        self.lineno = lineno


class CorruptTreeError(HuffmanError, RuntimeError):
    """Decoding walked into a part of the tree that doesn't exist."""


class IncompleteTrailingCodeError(HuffmanError, EOFError):
    """The bits ran out in the middle of a code."""

    def __init__(self, msg: str, symbols_written: int) -> None:
        super().__init__(msg)
        self.symbols_written = symbols_written


class UnknownSymbolError(HuffmanError, KeyError):
    """The symbol to encode has no code in the Huffman tree."""


class BitSource(t.Protocol):
    def has_next_bit(self) -> bool: ...

    def next_bit(self) -> int: ...


class BitSink(t.Protocol):
    def write_bit(self, bit: int) -> None: ...


FrequencyTable = t.Union[t.Mapping[int, int], t.Sequence[int]]


class TreeNode:
    def __init__(
        self,
        symbol: t.Optional[int] = None,
        freq: int = 0,
        left: t.Optional["TreeNode"] = None,
        right: t.Optional["TreeNode"] = None,
        order: int = 0,
    ) -> None:
        self.symbol = symbol
        self.freq = freq
        self.left = left
        self.right = right
        # Creation sequence number, only used to break frequency ties.
        self.order = order

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __lt__(self, other):
        return (self.freq, self.order) < (other.freq, other.order)

    def __str__(self):
        return self.__repr__()

    def __repr__(self):
        return (
            "TreeNode("
                f"symbol={self.symbol}, freq={self.freq},"
                f" left={self.left}, right={self.right}"
            ")"
        )


def _get_freq_table(f_in: t.BinaryIO, buffering: int) -> dict[int, int]:
    if buffering < 1:
        raise ValueError("`buffering` must be at least 1.")

    # Iterating over `bytes` yields the byte values, i.e. the symbols.
    freq_table = Counter()
    while (data := f_in.read(buffering)):
        freq_table.update(data)

    return freq_table


def _iter_frequencies(
    frequencies: FrequencyTable,
) -> t.Iterator[tuple[int, int]]:
    """Yields `(symbol, freq)` pairs in ascending symbol order.

    The frequencies are either given as a mapping from symbol to
    frequency, or as a sequence indexed by symbol.

    """
    if isinstance(frequencies, Mapping):
        items = frequencies.items()
    else:
        items = enumerate(frequencies)

    # Validate before sorting, as symbols of mixed types can't be sorted.
    items = list(items)
    for symbol, freq in items:
        if not isinstance(symbol, int) or not 0 <= symbol <= MAX_SYMBOL:
            raise ValueError(
                f"Symbols must be integers between 0 and {MAX_SYMBOL}: {symbol!r}"
            )
        if freq < 0:
            raise ValueError(f"Negative frequency for symbol {symbol}: {freq}")

    yield from sorted(items)


def _get_huffman_tree(frequencies: FrequencyTable) -> TreeNode:
    """Constructs a Huffman tree.

    The two least frequent nodes are merged into a new node, with the
    node removed first as its left child, until one node remains. Among
    nodes of equal frequency the one created first is removed first.

    Raises:
        EmptyFrequencyTableError: No symbol has a positive frequency.

    """
    heap = []
    for symbol, freq in _iter_frequencies(frequencies):
        # Symbols that don't occur don't get a code.
        if freq == 0:
            continue
        heap.append(TreeNode(symbol=symbol, freq=freq, order=len(heap)))

    if not heap:
        raise EmptyFrequencyTableError(
            "Can't construct a Huffman tree without any positive frequency."
        )

    num_leaves = len(heap)
    order = num_leaves
    heapq.heapify(heap)
    while len(heap) != 1:
        least_freq1, least_freq2 = heapq.heappop(heap), heapq.heappop(heap)
        heapq.heappush(
            heap,
            TreeNode(
                freq=least_freq1.freq + least_freq2.freq,
                left=least_freq1,
                right=least_freq2,
                order=order,
            ),
        )
        order += 1

    logger.debug("Constructed Huffman tree with %d leaves.", num_leaves)

    # Return root node.
    return heap[0]


def _iter_codebook(root: TreeNode) -> t.Iterator[tuple[int, str]]:
    """Yields the `(symbol, code)` pair of every leaf, left to right.

    The code is represented as a string of zeros "0" and ones "1". A
    tree consisting of a single leaf results in the empty code.

    """
    left, right = str(Direction.LEFT.value), str(Direction.RIGHT.value)

    # Push the right child first, so the left subtree is visited first.
    stack = [(root, "")]
    while stack:
        node, code = stack.pop()

        # Reached a leaf node.
        if node.is_leaf:
            yield node.symbol, code
            continue

        if node.right is not None:
            stack.append((node.right, code + right))
        if node.left is not None:
            stack.append((node.left, code + left))


def _insert_code(
    root: t.Optional[TreeNode],
    symbol: int,
    code: str,
    lineno: int,
) -> TreeNode:
    """Inserts a leaf for `symbol` at the path given by `code`.

    Missing internal nodes on the path are created along the way.

    Returns:
        The root of the tree, which is newly created if `root` is None.

    Raises:
        MalformedCodebookError: The code is not prefix-free with respect
            to the codes that were inserted before.

    """
    if root is None:
        root = TreeNode()

    node = root
    last = len(code) - 1
    for i, char in enumerate(code):
        direction = Direction(int(char))
        child = node.left if direction is Direction.LEFT else node.right

        if child is None:
            child = TreeNode(symbol=symbol) if i == last else TreeNode()
            if direction is Direction.LEFT:
                node.left = child
            else:
                node.right = child
        elif i == last or child.symbol is not None:
            # Either this code is a prefix of (or equal to) an earlier
            # code, or an earlier code is a prefix of this one.
            raise MalformedCodebookError(
                f"Code {code!r} of symbol {symbol} conflicts with an earlier"
                " code, the codebook isn't prefix-free.",
                lineno,
            )

        node = child

    return root


def _get_buffering_size(stream: t.IO) -> int:
    # https://github.com/python/cpython/blob/v3.11.0/Lib/_pyio.py#L248
    buffering = io.DEFAULT_BUFFER_SIZE
    try:
        bs = os.fstat(stream.fileno()).st_blksize
    except (OSError, AttributeError):
        pass
    else:
        if bs > 1:
            buffering = bs

    return buffering


def _check_buffering(buffering: int, stream: t.IO) -> int:
    if buffering < 0:
        return _get_buffering_size(stream)
    elif buffering == 0:
        raise ValueError("`buffering` can't be zero.")
    return buffering


class HuffmanCode:
    """A prefix code given by a Huffman tree.

    Use `from_frequencies()` to construct an optimal code for a frequency
    table, or `from_codebook()` to load a code that was stored using
    `save()`. Once constructed the tree is never modified, thus a
    `HuffmanCode` can be shared between threads.

    """

    def __init__(self, root: TreeNode) -> None:
        self.root = root
        # The tree is never modified, so the bits of every code are only
        # computed once.
        self._huffman_code = {
            symbol: tuple(int(char) for char in code)
            for symbol, code in _iter_codebook(root)
        }

    @classmethod
    def from_frequencies(cls, frequencies: FrequencyTable) -> "HuffmanCode":
        """Constructs an optimal code for the given frequencies.

        Args:
            frequencies: Either a mapping from symbol to frequency, or a
                sequence where `frequencies[symbol]` is the frequency of
                `symbol`. Symbols with frequency zero don't get a code.

        Raises:
            EmptyFrequencyTableError: No symbol has a positive frequency.
            ValueError: A symbol isn't a byte value or a frequency is
                negative.

        """
        return cls(_get_huffman_tree(frequencies))

    @classmethod
    def from_codebook(cls, f_in: t.Iterable[str]) -> "HuffmanCode":
        """Reconstructs a code from a codebook written by `save()`.

        Unlike the rest of the module, the codebook is untrusted input
        and is validated while reading it. The only codebook that may
        contain an empty code is the codebook of a single symbol.

        Args:
            f_in: A text stream, or any iterable of lines. Trailing line
                terminators are ignored.

        Raises:
            MalformedCodebookError: A symbol isn't a byte value,
                a code isn't a non-empty string of "0" and "1",
                a symbol doesn't have a code, a symbol occurs more than
                once, the codes aren't prefix-free or the codebook is
                empty.

        """
        root = None
        symbols = set()
        lines = enumerate((line.rstrip("\r\n") for line in f_in), start=1)
        for lineno, symbol_line in lines:
            try:
                code_lineno, code = next(lines)
            except StopIteration:
                raise MalformedCodebookError(
                    f"Symbol {symbol_line!r} doesn't have a code.", lineno
                ) from None

            if not symbol_line or not _SYMBOL_CHARS.issuperset(symbol_line):
                raise MalformedCodebookError(
                    f"Invalid symbol: {symbol_line!r}", lineno
                )
            symbol = int(symbol_line)
            if symbol > MAX_SYMBOL:
                raise MalformedCodebookError(
                    f"Symbol {symbol} doesn't fit in a byte.", lineno
                )
            if symbol in symbols:
                raise MalformedCodebookError(
                    f"Symbol {symbol} occurs more than once.", lineno
                )

            if not _CODE_CHARS.issuperset(code):
                raise MalformedCodebookError(
                    f"Invalid code for symbol {symbol}: {code!r}", code_lineno
                )
            if root is not None and root.is_leaf:
                raise MalformedCodebookError(
                    "An empty code is only valid for a single symbol.",
                    code_lineno - 2,
                )
            if not code:
                if root is not None:
                    raise MalformedCodebookError(
                        "An empty code is only valid for a single symbol.",
                        code_lineno,
                    )
                root = TreeNode(symbol=symbol)
            else:
                root = _insert_code(root, symbol, code, code_lineno)

            symbols.add(symbol)

        if root is None:
            raise MalformedCodebookError("The codebook is empty.")

        logger.debug("Loaded codebook with %d symbols.", len(symbols))
        return cls(root)

    def codebook(self) -> list[tuple[int, str]]:
        """Returns the `(symbol, code)` pairs in the order of `save()`."""
        return list(_iter_codebook(self.root))

    def code_table(self) -> dict[int, str]:
        """Maps every symbol to its code, a string of "0" and "1"."""
        return dict(_iter_codebook(self.root))

    def save(self, f_out: t.TextIO) -> None:
        """Writes the codebook to the given text stream."""
        num_symbols = 0
        for symbol, code in _iter_codebook(self.root):
            f_out.write(f"{symbol}{CODEBOOK_NEWLINE}{code}{CODEBOOK_NEWLINE}")
            num_symbols += 1

        logger.debug("Saved codebook with %d symbols.", num_symbols)

    def encode(self, data: t.Iterable[int], bits: BitSink) -> int:
        """Writes the code of every symbol in `data` to `bits`.

        Returns:
            The number of bits written.

        Raises:
            UnknownSymbolError: A symbol in `data` doesn't have a code.
            HuffmanError: The tree consists of a single symbol, whose
                code is empty, and thus nothing can be encoded.

        """
        if self.root.is_leaf:
            raise HuffmanError(
                "Can't encode using the empty code of a single-symbol tree."
            )

        huffman_code = self._huffman_code

        num_bits = 0
        for symbol in data:
            try:
                code = huffman_code[symbol]
            except KeyError:
                raise UnknownSymbolError(symbol) from None

            for bit in code:
                bits.write_bit(bit)
            num_bits += len(code)

        return num_bits

    def translate(
        self,
        bits: BitSource,
        f_out: t.BinaryIO,
        strict: bool = True,
    ) -> int:
        """Decodes the given bits, writing every symbol as a byte.

        Every symbol is written as soon as its code is complete, thus
        when an error is raised all symbols preceding it are written.

        Args:
            bits: The bits to decode, read until `has_next_bit()` is
                False.
            f_out: Binary stream to which the symbols are written.
            strict: Whether to raise when the bits end in the middle of
                a code. Otherwise the incomplete code is logged and
                dropped.

        Returns:
            The number of symbols written.

        Raises:
            CorruptTreeError: A code leads to a child that doesn't exist.
                This happens for codebooks that don't describe a full
                tree or when decoding using a single-symbol tree.
            IncompleteTrailingCodeError: The bits ended in the middle of
                a code (only when `strict`).

        """
        root = self.root
        if root.is_leaf:
            if bits.has_next_bit():
                raise CorruptTreeError(
                    "Can't decode bits using a single-symbol tree."
                )
            return 0

        num_symbols = 0
        num_bits = 0
        node = root
        while bits.has_next_bit():
            bit = bits.next_bit()
            num_bits += 1
            if bit == Direction.LEFT.value:
                node = node.left
            else:
                node = node.right

            if node is None:
                raise CorruptTreeError(
                    f"Invalid code received at bit {num_bits}, after"
                    f" {num_symbols} symbols."
                )

            # Reached a leaf node, emit and go back to the root.
            if node.is_leaf:
                f_out.write(bytes((node.symbol,)))
                num_symbols += 1
                node = root

        if node is not root:
            msg = (
                f"Bits ended in the middle of a code, after {num_symbols}"
                " symbols."
            )
            if strict:
                raise IncompleteTrailingCodeError(msg, num_symbols)
            logger.warning(msg)

        return num_symbols


class BitOutputStream:
    """Packs bits into bytes, most significant bit first.

    The output starts with a header byte containing the number of zero
    bits that pad the final byte, which is only known once `close()` is
    called. For a seekable `f_out` the header is patched afterwards and
    full chunks of `buffering` bytes are written as soon as possible,
    otherwise the entire output is kept in memory until `close()`.

    When used as a context manager, an exception leaving the block calls
    `abort()` instead of `close()`, so that a failed encoding doesn't
    result in a decodable prefix. The given stream is not closed by
    either.

    """

    def __init__(self, f_out: t.BinaryIO, buffering: int = -1) -> None:
        self.f_out = f_out
        self.buffering = _check_buffering(buffering, f_out)
        self.closed = False

        self._buffer = bytearray()
        self._byte = 0
        self._num_bits = 0

        self._seekable = f_out.seekable()
        if self._seekable:
            self._header_pos = f_out.tell()
            # Stays invalid unless `close()` patches it, so output that is
            # abandoned halfway can't be decoded.
            f_out.write(UNFINISHED_HEADER)

    def write_bit(self, bit: int) -> None:
        if bit not in (0, 1):
            raise ValueError(f"A bit is either 0 or 1, got: {bit!r}")

        self._byte = (self._byte << 1) | bit
        self._num_bits += 1
        if self._num_bits == 8:
            self._buffer.append(self._byte)
            self._byte = 0
            self._num_bits = 0

            if self._seekable and len(self._buffer) >= self.buffering:
                self.f_out.write(self._buffer)
                self._buffer = bytearray()

    def write_bits(self, code: str) -> None:
        """Writes a code given as a string of "0" and "1"."""
        for char in code:
            if char not in _CODE_CHARS:
                raise ValueError(f"A bit is either '0' or '1', got: {char!r}")
            self.write_bit(int(char))

    def close(self) -> None:
        if self.closed:
            return

        padding = (8 - self._num_bits) % 8
        if self._num_bits:
            self._buffer.append(self._byte << padding)

        if self._seekable:
            self.f_out.write(self._buffer)
            end = self.f_out.tell()
            self.f_out.seek(self._header_pos)
            self.f_out.write(bytes((padding,)))
            self.f_out.seek(end)
        else:
            self.f_out.write(bytes((padding,)))
            self.f_out.write(self._buffer)

        self._buffer = bytearray()
        self.closed = True

    def abort(self) -> None:
        """Discards the buffered bits without finishing the output.

        A seekable `f_out` keeps the bytes that were already written,
        preceded by `UNFINISHED_HEADER`, thus it can't be decoded.

        """
        self._buffer = bytearray()
        self.closed = True

    def __enter__(self) -> "BitOutputStream":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if exc_type is None:
            self.close()
        else:
            self.abort()


class BitInputStream:
    """Reads the bits written by a `BitOutputStream` one at a time.

    The stream is read in chunks of `buffering` bytes. One chunk is read
    ahead so that the final byte, and thus where the padding starts, is
    known.

    """

    def __init__(self, f_in: t.BinaryIO, buffering: int = -1) -> None:
        self.f_in = f_in
        self.buffering = _check_buffering(buffering, f_in)

        # Every finished encoding has a header, even when it has no bits.
        header = f_in.read(PADDING_HEADER_SIZE)
        if len(header) != PADDING_HEADER_SIZE:
            raise ValueError("Missing header, the encoding is incomplete.")
        self._padding = header[0]
        if self._padding > MAX_PADDING_BITS:
            raise ValueError(f"Invalid padding in header: {self._padding}")

        self._chunk = f_in.read(self.buffering)
        self._next_chunk = f_in.read(self.buffering) if self._chunk else b""
        if self._padding and not self._chunk:
            raise ValueError("Header specifies padding but there are no bits.")

        # Position of the next bit: byte in chunk, bit in byte (0 = MSB).
        self._pos = 0
        self._bit = 0

    def has_next_bit(self) -> bool:
        last = len(self._chunk) - 1
        if self._pos < last or (self._pos == last and self._next_chunk):
            return True
        elif self._pos > last:
            return False

        # Within the final byte the padding bits are not part of the
        # encoding.
        return self._bit < 8 - self._padding

    def next_bit(self) -> int:
        if not self.has_next_bit():
            raise EOFError("No more bits in the input stream.")

        bit = (self._chunk[self._pos] >> (7 - self._bit)) & 1
        self._bit += 1
        if self._bit == 8:
            self._bit = 0
            self._pos += 1
            if self._pos == len(self._chunk) and self._next_chunk:
                self._chunk = self._next_chunk
                self._next_chunk = self.f_in.read(self.buffering)
                self._pos = 0

        return bit


def make_codebook(
    f_in: t.BinaryIO,
    f_out: t.Optional[t.TextIO] = None,
    buffering: int = -1,
) -> HuffmanCode:
    """Writes the codebook of an optimal code for the bytes in `f_in`.

    Args:
        f_in: Binary stream whose byte frequencies determine the code.
        f_out: Text stream for the codebook. Defaults to STDOUT.
        buffering: Number of bytes to read at once. Negative values
            choose the block size of the underlying device.

    Returns:
        The constructed code.

    Raises:
        EmptyFrequencyTableError: `f_in` is empty.

    """
    buffering = _check_buffering(buffering, f_in)
    if f_out is None:
        f_out = sys.stdout

    huffman_code = HuffmanCode.from_frequencies(
        _get_freq_table(f_in, buffering=buffering)
    )
    huffman_code.save(f_out)
    return huffman_code


def encode(
    f_in: t.BinaryIO,
    f_code: t.Iterable[str],
    f_out: t.Optional[t.BinaryIO] = None,
    buffering: int = -1,
) -> int:
    """Encodes the bytes in `f_in` using the codebook given by `f_code`.

    When `f_out` is not seekable, e.g. a pipe or socket, the encoding is
    kept in memory until all input is encoded because the padding
    header can only be written at the end.

    Returns:
        The number of bits in the encoding, excluding header and
        padding.

    """
    buffering = _check_buffering(buffering, f_in)
    if f_out is None:
        # Use the underlying binary buffer of stdout.
        f_out = sys.stdout.buffer

    huffman_code = HuffmanCode.from_codebook(f_code)

    num_bits = 0
    with BitOutputStream(f_out, buffering=buffering) as bits:
        while (data := f_in.read(buffering)):
            num_bits += huffman_code.encode(data, bits)

    logger.debug("Encoded input into %d bits.", num_bits)
    return num_bits


def decode(
    f_in: t.BinaryIO,
    f_code: t.Iterable[str],
    f_out: t.Optional[t.BinaryIO] = None,
    buffering: int = -1,
    strict: bool = True,
) -> int:
    """Decodes a binary stream containing the output of `encode()`.

    To reduce memory consumption and improve performance, pass an
    unbuffered binary stream as `f_in`. This function already buffers
    the stream so there is no reason to buffer it elsewhere as well. For
    example::

        with open("file_path", mode="rb", buffering=0) as f_in:
            decode(f_in=f_in, f_code=...)

    Returns:
        The number of decoded symbols.

    """
    if f_out is None:
        f_out = sys.stdout.buffer

    huffman_code = HuffmanCode.from_codebook(f_code)
    bits = BitInputStream(f_in, buffering=buffering)
    return huffman_code.translate(bits, f_out, strict=strict)


def main(argv: t.Optional[t.Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Huffman codebook creation, encoding or decoding of a given file/stream."
    )
    parser.add_argument(
        "type",
        choices=["codebook", "encode", "decode"],
        help="To create a codebook, encode or decode.",
    )
    parser.add_argument(
        "-i", "--input", required=False,
        help="Input stream. Defaults to STDIN if not specified."
    )
    parser.add_argument(
        "-o", "--output", required=False,
        help="Output stream. Defaults to STDOUT if not specified."
    )
    parser.add_argument(
        "-c", "--codebook", required=False,
        help="Codebook to encode or decode with."
    )
    parser.add_argument(
        "--lenient", action="store_true",
        help="Ignore an incomplete code at the end of the input when decoding."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log debug information to STDERR."
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.type != "codebook" and args.codebook is None:
        parser.error(f"the following arguments are required for {args.type}: -c/--codebook")

    with contextlib.ExitStack() as stack:
        if args.input is None:
            f_in = sys.stdin.buffer
        else:
            f_in = stack.enter_context(open(args.input, mode="rb", buffering=0))

        try:
            if args.type == "codebook":
                if args.output is None:
                    f_out = sys.stdout
                else:
                    f_out = stack.enter_context(open(args.output, mode="w", newline=""))
                make_codebook(f_in=f_in, f_out=f_out)
                return 0

            f_code = stack.enter_context(open(args.codebook, mode="r", newline=""))
            if args.output is None:
                f_out = sys.stdout.buffer
            else:
                f_out = stack.enter_context(open(args.output, mode="wb"))

            if args.type == "encode":
                encode(f_in=f_in, f_code=f_code, f_out=f_out)
            else:
                decode(f_in=f_in, f_code=f_code, f_out=f_out, strict=not args.lenient)
        except (HuffmanError, ValueError) as e:
            print(f"{parser.prog}: error: {e}", file=sys.stderr)
            return 1

    return 0


__all__ = [
    "BitInputStream",
    "BitOutputStream",
    "BitSink",
    "BitSource",
    "CorruptTreeError",
    "EmptyFrequencyTableError",
    "HuffmanCode",
    "HuffmanError",
    "IncompleteTrailingCodeError",
    "MalformedCodebookError",
    "TreeNode",
    "UnknownSymbolError",
    "decode",
    "encode",
    "make_codebook",
]


if __name__ == "__main__":
    sys.exit(main())
