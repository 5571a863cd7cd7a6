# squeezebench

A small set of lossless byte compressors and a benchmark that compares how well
they shrink sequences of integers.

## What is in the package

- `squeezebench.encoders`
  - `Compressor`: abstract interface with `compress(data)` and `decompress(data)`,
    both taking and returning `bytes`.
  - `Encoder`: abstract interface with `encode_int(num)`, which returns bytes, and
    `decode_int(stream)`, which reads one integer from a binary stream.
  - `CompactVLQ`: little-endian base-128 varint. It rejects negative numbers.
  - `VLQ`: base-128 varint. Decoding fails once a value runs past 42 bits.
  - `AsciiEncoder`: writes numbers up to 16255 in one or two bytes and raises
    `ValueError("too big number")` for anything larger.
  - `IntsEncoder`: turns a list of integers into bytes and back, using `CompactVLQ`
    unless another encoder is given.
- `squeezebench.huffman.HuffmanCompressor`: static Huffman coding. The frequency
  table is stored at the start of the output.
- `squeezebench.lz77.LZ77Compressor`: LZ77 with a sliding window of 512 bytes
  by default. Pass `window_size=` to change it.
- `squeezebench.mixed.MixedCompressor`: an LZ77 pass with a 64-byte window,
  whose output is then compressed with Huffman coding.
- `squeezebench.arithmetic.ArithmeticCompressor`: arithmetic coding in chunks of
  50 bytes, using `mpmath` floats with 166 bits of precision by default. Pass
  `precision=` and `chunk_size=` to change these. It is experimental and
  seldom beats the other compressors.
- `squeezebench.seed`: `seed_random`, `seed_equally` and `seed_by_ratio`. Each
  returns a description and a function that produces a fresh list of integers
  on every call.
- `squeezebench.priority_queue`: `QueueItem` and the min-heap `PriorityQueue`
  that the Huffman tree is built with.
- `squeezebench.utils`: small helpers, among them `find_last_index`,
  `read_logfile` and `save_logfile`.
- `squeezebench.cli`: `compression_ratio`, `run`, `format_row` and the
  `main` entry point of the benchmark command.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the benchmark

```
squeezebench
squeezebench --tests-count 20
```

The benchmark goes through many kinds of input sequence. For each kind it
generates `--tests-count` inputs (250 by default) and compresses every one with
the Huffman, LZ77 and mixed compressors. It then prints one table row with the
average space saving of each compressor, as a percentage of the encoded input
size:

```
| huffman% | lz77% | mixed% | description of the input |
```

Three kinds of input are used:

- Inputs skewed towards small values (`seed_by_ratio` with ratios 0.96, 0.9 and 0.7).
- Fully random inputs (`seed_random`). Inputs of these first two kinds are sorted
  before they are compressed.
- Cyclic inputs, in which every value from 1 to the maximum repeats three times
  in order (`seed_equally`).

The arithmetic compressor is not part of the benchmark.

## Using the compressors in code

```python
from squeezebench.encoders import IntsEncoder
from squeezebench.huffman import HuffmanCompressor
from squeezebench.lz77 import LZ77Compressor

data = IntsEncoder().encode([1, 1, 2, 3, 3, 3, 1, 2])

huffman = HuffmanCompressor()
packed = huffman.compress(data)
assert huffman.decompress(packed) == data

lz = LZ77Compressor()
assert lz.decompress(lz.compress(data)) == data
```

To measure a single compressor on your own data:

```python
from squeezebench.cli import compression_ratio
from squeezebench.mixed import MixedCompressor

saving = compression_ratio(MixedCompressor(), [5, 5, 5, 5, 6, 6, 7])
print(f"{saving:.2f}% smaller")
```

Errors are raised as exceptions, mostly `ValueError`. Examples are a number
too large for `AsciiEncoder`, a negative number given to `CompactVLQ`, empty
input given to `HuffmanCompressor`, and a truncated or corrupt compressed stream.

## Limitations

- There is no command for compressing or decompressing files. `squeezebench`
  only runs the benchmark. The compressors work on `bytes` in memory.
- `HuffmanCompressor` gives a single distinct symbol an empty code. Input made
  of one repeated byte therefore decompresses to empty output.
- `LZ77Compressor` writes a following byte of 0 to mean "no byte". A zero byte
  that comes right after a match is lost when the data is decompressed. Integer
  lists encoded by `IntsEncoder` contain zero bytes only when they hold the value 0.
- `ArithmeticCompressor` is limited by its float precision. With long chunks or
  many distinct symbols, it may not reproduce the input exactly.