import re

WORD_SIZE = 32


def tobytes32(x: int) -> bytes:
  """Fixed width 32 byte big endian encoding of a non-negative integer."""
  if x < 0 or x.bit_length() > 8 * WORD_SIZE:
    raise ValueError(f"Integer does not fit in {WORD_SIZE} bytes")
  return x.to_bytes(WORD_SIZE, "big")

def frombytes(b) -> int:
  return int.from_bytes(b, "big")

def words(*values: int) -> bytes:
  """Each integer as 32 bytes, concatenated"""
  return b"".join(tobytes32(v) for v in values)

def fromhex(s: str, size: int = None) -> bytes:
  """Decode hex with an optional 0x prefix and any whitespace."""
  s = re.sub(r"\s+", "", s)
  if s[:2].lower() == "0x":
    s = s[2:]
  try:
    data = bytes.fromhex(s)
  except ValueError:
    raise ValueError("Invalid hex string") from None
  if size is not None and len(data) != size:
    raise ValueError(f"Expected {size} bytes of hex, got {len(data)}")
  return data
