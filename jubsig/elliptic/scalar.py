from __future__ import annotations

from functools import cached_property

# Field prime (BLS12-381 scalar field, which is the base field of Jubjub)
p = 0x73eda753299d7d483339d80809a1d80553bda402fffe5bfeffffffff00000001

# Precalculate commonly needed parts of the prime
p2 = (p - 1) // 2

# p - 1 = 2**S * T with T odd (needed by Tonelli-Shanks)
S = ((p - 1) & -(p - 1)).bit_length() - 1
T = (p - 1) >> S

# Multiplicative generator of the field
GENERATOR = 7


class fe:
  """A prime field element modulo the BLS12-381 scalar prime p"""
  def __init__(self, x: int): self.val = x % p
  def __hash__(self): return self.val
  def __repr__(self): return value_name(self)
  def __str__(self): return bytes(self).hex()
  def __bytes__(self): return self.val.to_bytes(32, 'little')
  def __int__(self): return self.val
  def bit(self, n: int): return bool(self.val & 1 << n)

  def __eq__(self, other):
    # Note: if we return NotImplemented, Python does object comparison and returns False
    if not isinstance(other, fe): raise TypeError(f"Cannot compare fe with {other!r}")
    return self.val == other.val

  def __neg__(self): return fe(-self.val)
  def __add__(self, o: fe): return fe(self.val + o.val)
  def __sub__(self, o: fe): return fe(self.val - o.val)
  def __mul__(self, o: fe): return fe(self.val * o.val)

  def __truediv__(self, o: fe) -> fe:
    """Division mod p"""
    if o == zero: raise ZeroDivisionError("Division by zero in the field")
    return self if o == one else fe(self.val * o.inv.val)

  def __pow__(self, s: int) -> fe:
    # Use faster cached .sq for x**2 because it is a very common operation
    return self.sq if s == 2 else fe(pow(self.val, s, p))

  @cached_property
  def inv(self) -> fe: return self**-1

  @cached_property
  def is_odd(self) -> bool: return self.bit(0)

  # Legendre symbol:
  # -  0 if n is zero
  # -  1 if n is a non-zero square
  # - -1 if n is not a square
  @cached_property
  def chi(self) -> fe:
    """Legendre symbol"""
    return self**p2

  @cached_property
  def sq(self) -> fe:
    """Squared"""
    return self * self

  @cached_property
  def is_square(self) -> bool: return self == zero or self.chi == one

  @cached_property
  def sqrt(self) -> fe:
    """The even square root. Raises ValueError if there is none."""
    if not self.is_square: raise ValueError('Not a square!')
    if self == zero: return zero
    # Tonelli-Shanks, p is congruent to 1 modulo 2**32 so no shortcut applies
    m, c = S, ROOT_OF_UNITY
    t, root = self**T, self**((T + 1) // 2)
    while t != one:
      # Find the least i such that t**(2**i) == 1
      i, t2 = 0, t
      while t2 != one:
        t2 = t2.sq
        i += 1
      b = c**(1 << m - i - 1)
      m, c = i, b.sq
      t, root = t * c, root * b
    assert root.sq == self
    return -root if root.is_odd else root


zero, one, minus1 = fe(0), fe(1), fe(-1)

# Primitive 2**S-th root of unity (used in implementation of fe.sqrt)
ROOT_OF_UNITY = fe(GENERATOR)**T


def value_name(s: fe) -> str:
  """Return variable names rather than fe(...) for any constants defined here"""
  for name, val in globals().items():
    if isinstance(val, fe) and s == val:
      return name
  for name, val in globals().items():
    if isinstance(val, fe) and s == -val:
      return f"-{name}"
  return f"fe({s.val})"
