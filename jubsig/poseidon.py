"""
Poseidon permutation and 2-to-1 compression over the BLS12-381 scalar field.

Parameters: width 3 (one capacity element and two inputs), x**5 S-box, 8 full
rounds and 56 partial rounds. Round constants and the Cauchy MDS matrix come
from the Grain LFSR of the Poseidon reference parameter script, so the tables
are reproducible from the parameters alone and are derived on first use.

https://eprint.iacr.org/2019/458
"""
from functools import lru_cache
from typing import List, Sequence, Tuple

from jubsig.elliptic.scalar import p
from jubsig.exceptions import ArityMismatch

WIDTH = 3
INPUTS = WIDTH - 1
ALPHA = 5
FULL_ROUNDS = 8
PARTIAL_ROUNDS = 56
FIELD_BITS = p.bit_length()


class Grain:
  """The self-shrinking Grain LFSR used to sample Poseidon constants"""

  def __init__(self, field=1, sbox=0, n=FIELD_BITS, t=WIDTH, rf=FULL_ROUNDS, rp=PARTIAL_ROUNDS):
    # 80 bit state: field type, S-box type, field size, width, round counts and 30 set bits
    init = f"{field:02b}{sbox:04b}{n:012b}{t:012b}{rf:010b}{rp:010b}" + 30 * "1"
    self.state = [int(b) for b in init]
    for _ in range(160):
      self._clock()

  def _clock(self) -> int:
    s = self.state
    bit = s[62] ^ s[51] ^ s[38] ^ s[23] ^ s[13] ^ s[0]
    s.pop(0)
    s.append(bit)
    return bit

  def bit(self) -> int:
    # Self-shrinking: a pair (1, b) outputs b, a pair (0, b) is discarded
    while not self._clock():
      self._clock()
    return self._clock()

  def bits(self, n: int) -> int:
    """An n bit integer, most significant bit first"""
    val = 0
    for _ in range(n):
      val = val << 1 | self.bit()
    return val

  def field_element(self) -> int:
    """Uniform element below p by rejection sampling"""
    while True:
      val = self.bits(FIELD_BITS)
      if val < p: return val


@lru_cache(maxsize=None)
def parameters() -> Tuple[Tuple[int, ...], Tuple[Tuple[int, ...], ...]]:
  """Round constants (one per state word per round) and the MDS matrix"""
  grain = Grain()
  rounds = FULL_ROUNDS + PARTIAL_ROUNDS
  constants = tuple(grain.field_element() for _ in range(rounds * WIDTH))
  # Cauchy matrix 1 / (x_i + y_j) with all 2t sampled values distinct
  while True:
    vals = [grain.bits(FIELD_BITS) % p for _ in range(2 * WIDTH)]
    if len(set(vals)) != len(vals): continue
    xs, ys = vals[:WIDTH], vals[WIDTH:]
    if any((x + y) % p == 0 for x in xs for y in ys): continue
    mds = tuple(tuple(pow(x + y, -1, p) for y in ys) for x in xs)
    return constants, mds


def permute(state: Sequence[int]) -> List[int]:
  """The Poseidon permutation on a state of WIDTH field elements."""
  if len(state) != WIDTH:
    raise ArityMismatch(f"Poseidon state must have {WIDTH} elements, got {len(state)}")
  constants, mds = parameters()
  state = [x % p for x in state]
  half = FULL_ROUNDS // 2
  for r in range(FULL_ROUNDS + PARTIAL_ROUNDS):
    state = [(x + c) % p for x, c in zip(state, constants[r * WIDTH:(r + 1) * WIDTH])]
    if r < half or r >= half + PARTIAL_ROUNDS:
      state = [pow(x, ALPHA, p) for x in state]
    else:
      state[0] = pow(state[0], ALPHA, p)
    state = [sum(m * x for m, x in zip(row, state)) % p for row in mds]
  return state


def poseidon(inputs: Sequence[int]) -> int:
  """Hash exactly two field elements into one (capacity word first, output word 0)."""
  if len(inputs) != INPUTS:
    raise ArityMismatch(f"Poseidon expected exactly {INPUTS} inputs, got {len(inputs)}")
  return permute([0, *inputs])[0]
