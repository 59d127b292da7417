from secrets import randbelow

from jubsig.elliptic import EdPoint, G, q
from jubsig.exceptions import MalformedKeyError
from jubsig.util import frombytes, fromhex, tobytes32


def generate_sk() -> int:
  """A uniformly random secret scalar in 1..q-1"""
  return 1 + randbelow(q - 1)


def public_key(sk: int) -> EdPoint:
  if not 0 < sk < q:
    raise MalformedKeyError("Secret key out of range")
  return sk * G


def encode_sk(sk: int) -> str:
  """Secret key as 64 hex digits (32 bytes big endian)"""
  return tobytes32(sk).hex()


def encode_pk(pk: EdPoint) -> str:
  """Public key as hex of the 32-byte compressed point"""
  return bytes(pk).hex()


def decode_sk(keystr: str) -> int:
  try:
    sk = frombytes(fromhex(keystr, 32))
  except ValueError as e:
    raise MalformedKeyError(f"Unable to parse secret key: {e}") from None
  if not 0 < sk < q:
    raise MalformedKeyError("Unable to parse secret key: out of range")
  return sk


def decode_pk(keystr: str) -> EdPoint:
  try:
    pk = EdPoint.from_bytes(fromhex(keystr, 32))
  except ValueError as e:
    raise MalformedKeyError(f"Unable to parse public key: {e}") from None
  if not pk.is_prime_group:
    raise MalformedKeyError("Unable to parse public key: not in the prime order subgroup")
  return pk
