"""
Byte string hashing by folding the 2-to-1 Poseidon compression into a tree.

The input is split into 32-byte big endian words which are reduced level by
level. A level is compressed four words at a time (two narrow compressions
followed by a third on their results) whenever its length padded to pairs is
divisible by four, and two words at a time otherwise. Missing words at the end
of a level are zeros.
"""
from typing import List, Sequence

from jubsig.exceptions import ArityMismatch
from jubsig.poseidon import INPUTS, poseidon
from jubsig.util import WORD_SIZE, frombytes, tobytes32

WIDE_INPUTS = INPUTS**2


def compress(words: Sequence[int]) -> int:
  """Compress exactly two field words into one."""
  if len(words) != INPUTS:
    raise ArityMismatch(f"compress expected exactly {INPUTS} words, got {len(words)}")
  return poseidon(words)


def compress_wide(words: Sequence[int]) -> int:
  """Compress exactly four words: each consecutive pair first, then the two results."""
  if len(words) != WIDE_INPUTS:
    raise ArityMismatch(f"compress_wide expected exactly {WIDE_INPUTS} words, got {len(words)}")
  return compress([compress(words[i:i + INPUTS]) for i in range(0, WIDE_INPUTS, INPUTS)])


def split_words(data: bytes) -> List[int]:
  """Big endian integers of consecutive 32-byte chunks (the last may be shorter)."""
  return [frombytes(data[i:i + WORD_SIZE]) for i in range(0, len(data), WORD_SIZE)]


def fold(words: Sequence[int]) -> List[int]:
  """Reduce one tree level, returning the words of the next level."""
  padded = -(-len(words) // INPUTS) * INPUTS
  if padded % WIDE_INPUTS == 0:
    width, func = WIDE_INPUTS, compress_wide
  else:
    width, func = INPUTS, compress
  n = len(words)
  return [
    func([words[i + j] if i + j < n else 0 for j in range(width)])
    for i in range(0, padded, width)
  ]


def digest_int(data: bytes) -> int:
  """The tree digest of data as a field element"""
  if not data:
    return compress([0] * INPUTS)
  # A single word is still compressed once (with a zero partner)
  acc = fold(split_words(bytes(data)))
  while len(acc) > 1:
    acc = fold(acc)
  return acc[0]


def digest(data: bytes) -> bytes:
  """32 byte big endian tree digest of data (which may be empty)."""
  return tobytes32(digest_int(data))
