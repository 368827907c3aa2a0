# matpair

Tools for working with batches of integer matrix pairs stored as plain text:
generate random pairs, multiply every pair in one or more files, and record how
long each file took.

## File format

A pair file starts with the number of pairs, followed by each pair as two
matrices, A then B. Each matrix is written as its row and column counts and
then its values, one row per line, each value followed by a space:

```
1
2 3
1 2 3 
4 5 6 
3 2
7 8 
9 10 
11 12 
```

Values are read as whitespace-separated tokens, so line breaks in the input
are not significant. Result files hold one product matrix per pair, in the
same matrix layout.

## Commands

### Generating pairs

```
matpair-generate [-o OUTPUT] [-n COUNT] [-s SIZE] [--seed SEED]
```

Writes `COUNT` pairs of random `SIZE` x `SIZE` matrices with values from 0 to
10. The defaults are one pair of 5000 x 5000 matrices written to
`pair_rand_5000.txt`, seeded from the current time. A negative count or a size
below 1 is reported as an error.

```
matpair-generate -n 10 -s 100 -o pairs.txt --seed 42
```

### Multiplying pairs

```
matpair-multiply [--log LOG] FILE [FILE ...]
matpair-multiply-parallel [--log LOG] [-w WORKERS] FILE [FILE ...]
```

Files come in pairs: an input file followed by the file the products are
written to. An odd number of files, or fewer than two, is a usage error.

```
matpair-multiply pairs.txt result.txt
matpair-multiply small.txt small_result.txt large.txt large_result.txt
```

`matpair-multiply-parallel` takes the same arguments but splits the rows of
each A matrix across worker processes (`-w`, default: the CPU count) and joins
the partial products in order.

Both commands print progress and write the time spent on each file, followed
by a final `Total: <n> ms` line, to the log file (`log.txt` in the current
directory unless `--log` says otherwise). A file that cannot be opened is
reported and skipped; the remaining files are still processed. Malformed input
or mismatched matrix dimensions stop the run with exit status 1.

## Library use

```python
from matpair.multiply import multiply_matrices, transpose, row_partition
from matpair.parallel import parallel_multiply

a = [[1, 2], [3, 4]]
b = [[5, 6], [7, 8]]

multiply_matrices(a, b)          # [[19, 22], [43, 50]]
transpose(a)                     # [[1, 3], [2, 4]]
row_partition(5, 2)              # [(0, 3), (3, 2)]

if __name__ == "__main__":
    parallel_multiply(a, b, 2)   # same product, rows split over 2 processes
```

`parallel_multiply` starts worker processes, so scripts that call it should
guard the call with `if __name__ == "__main__":`. Multiplying matrices whose
inner dimensions differ raises `matpair.multiply.DimensionMismatchError`.

Reading and writing the text format:

```python
from matpair.matrix_io import iter_tokens, read_count, read_matrix, write_matrix
from matpair.multiply import multiply_matrices

with open("pairs.txt") as src, open("result.txt", "w") as dst:
    tokens = iter_tokens(src)
    for _ in range(read_count(tokens)):
        a = read_matrix(tokens)
        b = read_matrix(tokens)
        write_matrix(dst, multiply_matrices(a, b))
```

`format_matrix` returns the same text as a string. Truncated or malformed
input raises `matpair.matrix_io.MatrixFormatError`.

Random matrices come from `matpair.generator.generate_matrix(rows, cols, rng)`
and whole pair files from `write_pair_file(path, count, size, rng)`, where
`rng` is an optional `random.Random`.

To time a batch from Python, use `matpair.runner.run(paths, log_path,
multiply)`, which returns one `FileTiming` (input path, output path, number of
pairs, elapsed milliseconds) per processed file; `process_file` handles a
single input/output pair.

## Limits

The parallel command spreads work over processes on the local machine only;
there is no distribution across several hosts. Matrices are held in memory as
Python lists, so very large inputs are slow and memory-hungry.