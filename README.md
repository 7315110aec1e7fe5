# mpctool

Building blocks for secure multi-party computation protocols, in pure Python.

A *block* is a 128-bit value held as a Python `int` in `range(0, 2**128)`.
Its byte form (`block_to_bytes`) is little-endian: low 64-bit word first,
then the high word.

## Modules

- `mpctool.block` – block helpers and shared constants: `make_block`,
  `get_lsb`, `sigma`, `set_bit`, `block_to_bytes`, `block_from_bytes`,
  `format_block`, `xor_blocks`, `cmp_blocks`, and `sse_trans` for
  transposing a bit matrix. Constants include `ZERO_BLOCK`,
  `ALL_ONE_BLOCK`, `AES_BATCH_SIZE`, `PUBLIC`, `ALICE`, `BOB` and `FIX_KEY`.
- `mpctool.utils` – conversions between integers, bytes, blocks and bit
  lists (`int_to_bool`, `bool_to_int`, `to_bool`, `from_bool`,
  `bool_to_block`, `block_to_bool`), `file_exists`, timing with
  `clock_start` / `time_from` (microseconds), `parse_party_and_port`, and
  the `EmpError` exception.
- `mpctool.aes` – AES-128: `expand_key` returns the eleven round keys,
  `AESKey` encrypts and decrypts lists of blocks in ECB mode,
  `opt_key_schedule` expands several keys and `para_enc` encrypts
  consecutive groups of blocks, one key per group.
- `mpctool.prp` – `PRP`, AES under a fixed key (zero by default) used as a
  random permutation.
- `mpctool.crh` – correlation-robust hashes built on `PRP`: `CRH`
  (`pi(x) ^ x`), `CCRH` (the same applied to `sigma(x)`) and `TCCRH`
  (tweakable, `pi(pi(x) ^ i) ^ pi(x)`). Each has `h` for one block and
  `hn` for a list.
- `mpctool.mitccrh` – `MITCCRH`, which derives a fresh batch of AES keys
  from a start point (`set_s`) and a gate id (`renew_ks`) and hashes
  groups of blocks with `hash` / `hash_cir`.
- `mpctool.prg` – `PRG`, AES in counter mode under a seed-derived key,
  with `reseed`, `random_block`, `random_data`, `random_bool`, and calling
  the generator for one 64-bit word. Without a seed it draws one from
  `os.urandom`.
- `mpctool.f2k` – GF(2^128) modulo x^128 + x^7 + x^2 + x + 1:
  `mul128` (carry-less product as `(low, high)`), `reduce`,
  `reduce_reflect`, `gfmul`, `gfmul_reflect`, `vector_inn_prdt_sum_red`,
  `vector_inn_prdt_sum_no_red`, `uni_hash_coeff_gen` (powers of a seed),
  `vector_self_xor`, and `GaloisFieldPacking`.
- `mpctool.hashing` – `Hash`, incremental SHA-256 that resets after each
  `digest`, with `put_block`, `hash_once`, `hash_for_block` (first 16
  digest bytes as a block) and `kdf` for anything with a `to_bin` method,
  such as a curve point.
- `mpctool.ecgroup` – NIST P-256: `Group` (`get_rand_bn`,
  `get_generator`, `mul_gen`) and `Point` (`add`, `mul`, `inv`,
  `to_bin`, `size`, `from_bin`, equality). `Point(group)` with no
  coordinates is the point at infinity.
- `mpctool.threadpool` – `ThreadPool`, a fixed set of worker threads;
  `enqueue` returns a `concurrent.futures.Future`, and `shutdown` (also
  run on leaving a `with` block) finishes queued work and joins the
  threads.
- `mpctool.execution` – the abstract `CircuitExecution` and
  `ProtocolExecution` interfaces and the `Party` enum.
- `mpctool.plain` – `PlainCircExec` and `PlainProt`, which evaluate a
  circuit in the clear and can record every gate to a text file;
  `setup_plain_prot` and `finalize_plain_prot` create and close them.

## Installation

```
pip install .
```

## Examples

```python
from mpctool.block import make_block
from mpctool.prg import PRG
from mpctool.crh import CRH

prg = PRG(seed=make_block(0, 1))
blocks = prg.random_block(4)

crh = CRH()
digests = crh.hn(blocks)
```

```python
from mpctool.f2k import gfmul
from mpctool.block import make_block

product = gfmul(make_block(0, 2), make_block(0, 3))
```

Evaluating a small circuit in the clear and recording it:

```python
from mpctool.execution import Party
from mpctool.plain import setup_plain_prot, finalize_plain_prot

prot = setup_plain_prot(True, "and.txt")
circ = prot.circ_exec
a, = prot.feed(Party.ALICE, [True])
b, = prot.feed(Party.BOB, [False])
out = prot.reveal(Party.PUBLIC, [circ.and_gate(a, b)])
finalize_plain_prot(prot)
```

The recorded file starts with a line holding the gate and wire counts and a
line with the numbers of Alice's inputs, Bob's inputs and outputs, followed
by one line per gate (`2 1 <in> <in> <out> AND`, `... XOR`,
`1 1 <in> <out> INV`).

## What it does not do

The package has no network channels, no garbling or oblivious-transfer
protocol, and no library of ready-made circuits such as arithmetic on
integers or floats; the only execution backend is the plain one in
`mpctool.plain`. It is also written for clarity rather than speed: AES runs
through the `cryptography` library, but field and curve arithmetic are
plain Python integers and are not constant-time.

## Running the tests

```
pip install ".[test]"
pytest
```