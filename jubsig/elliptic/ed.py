from __future__ import annotations

from functools import cached_property
from typing import Optional

from .scalar import fe, minus1, one, p, zero
from .util import tointsign, tobytes

# Twisted Edwards curve: a x2 + y2 = 1 + d x2 y2
# Jubjub constants:
a, d = minus1, -fe(10240) / fe(10241)

# Prime subgroup order and cofactor
q = 0x0e7db4ea6533afa906673b0101343b00a6682093ccc81082d0970e5ed6f72cb7
COFACTOR = 8

# Points are represented as tuples (X, Y, Z, T) of extended
# coordinates, with x = X/Z, y = Y/Z, x*y = T/Z

class EdPoint:
  def __init__(self, x: fe, y: fe, z: fe = one, t: Optional[fe] = None):
    # Expand to projective coordinates for faster adds
    self.X = x
    self.Y = y
    self.Z = z
    self.T = x * y if t is None else t

  @staticmethod
  def from_bytes(b) -> EdPoint:
    """Read a compressed point (y little endian, sign of x on the high bit)"""
    val, sign = tointsign(b)
    if val >= p: raise ValueError("Not a canonical Jubjub point encoding")
    return EdPoint.from_y(fe(val), sign)

  @staticmethod
  def from_y(y: fe, negative=False) -> EdPoint:
    """Restore from a y coordinate and an is_negative flag"""
    x2 = (y.sq - one) / (d * y.sq + one)
    if not x2.is_square: raise ValueError("Not a curve point on Jubjub")
    if x2 == zero and negative: raise ValueError("Not a canonical Jubjub point encoding")
    P = EdPoint(x2.sqrt, y)
    return P if P.is_negative == negative else -P

  def __repr__(self): return point_name(self)
  def __str__(self): return bytes(self).hex()
  def __bytes__(self): return tobytes(self.y.val + (self.is_negative << 255))
  def __hash__(self): return self.y.val

  @cached_property
  def norm(self) -> EdPoint:
    """Return a normalized point, with Z=1."""
    return EdPoint(self.x, self.y)

  @cached_property
  def is_negative(self) -> bool:
    """Return the parity of the x coordinate, aka the sign."""
    return self.x.is_odd

  @cached_property
  def is_on_curve(self) -> bool:
    x2, y2 = self.x.sq, self.y.sq
    return a * x2 + y2 == one + d * x2 * y2

  @cached_property
  def is_low_order(self) -> bool: return COFACTOR * self == ZERO

  @cached_property
  def is_prime_group(self) -> bool: return not self.is_low_order and q * self == ZERO

  @cached_property
  def x(self) -> fe: return self.X / self.Z

  @cached_property
  def y(self) -> fe: return self.Y / self.Z

  def __add__(self, othr: EdPoint) -> EdPoint:
    if not isinstance(othr, EdPoint): return NotImplemented
    A = (self.Y - self.X) * (othr.Y - othr.X)
    B = (self.Y + self.X) * (othr.Y + othr.X)
    C = fe(2) * self.T * othr.T * d
    D = fe(2) * self.Z * othr.Z
    E, F, G, H = B - A, D - C, D + C, B + A
    return EdPoint(E * F, G * H, F * G, E * H)

  def __sub__(self, othr: EdPoint) -> EdPoint:
    return self + -othr

  def __neg__(self) -> EdPoint:
    return EdPoint(-self.X, self.Y, self.Z, -self.T)

  def __mul__(self, s: int) -> EdPoint:
    """Multiply the point by scalar (secret key)."""
    if not isinstance(s, int): return NotImplemented
    Q = ZERO  # Neutral element
    P = self
    # Modulo the full group order (cofactor * q) so that low order components survive
    s %= COFACTOR * q
    while s > 0:
      if s & 1: Q += P
      P += P
      s >>= 1
    return Q.norm

  def __rmul__(self, s: int) -> EdPoint:
    return self * s

  def __eq__(self, othr):
    if not isinstance(othr, EdPoint): raise TypeError(f"EdPoints cannot be compared with {type(othr)}")
    # x1 / z1 == x2 / z2  <==>  x1 * z2 == x2 * z1
    return (
      (self.X * othr.Z - othr.X * self.Z) == zero and
      (self.Y * othr.Z - othr.Y * self.Z) == zero
    )

# Neutral element
ZERO = EdPoint(zero, one)

# Base point (prime group generator)
G = EdPoint(
  fe(0x11dafe5d23e1218086a365b99fbf3d3be72f6afd7d1f72623e6b071492d1122b),
  fe(0x1d523cf1ddab1a1793132e78c866c0c33e26ba5cc220fed7cc3f870e59d292aa),
)

# The point of order two
T2 = EdPoint(zero, minus1)


def point_name(P: EdPoint) -> str:
  """Return variable names rather than xy coordinates for any constants defined here"""
  for name, val in globals().items():
    if isinstance(val, EdPoint) and P == val:
      return name
  return f"EdPoint({P.x!r}, {P.y!r})"
