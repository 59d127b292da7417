"""
Deterministic EdDSA over Jubjub with the Poseidon tree digest as its hash.

A signature over message chunks m is a point R and a scalar s such that
8 * s * G == 8 * (e * A + R), where A is the public key and the challenge
e = H(R.x || R.y || A.x || A.y || m) mod q. Coordinates are hashed as 32-byte
big endian words and the message chunks are appended as is.
"""
import logging
from typing import Sequence, Tuple

from jubsig.btree import digest, digest_int
from jubsig.elliptic import COFACTOR, ZERO, EdPoint, G, q, tobytes, toint
from jubsig.util import tobytes32, words

logger = logging.getLogger(__name__)

# Domain separation for nonce derivation ("‑" is U+2011 NON-BREAKING HYPHEN)
NONCE_TAG = "TokamakAuth‑EDDSA‑NONCE‑v1".encode().rjust(32, b"\0")

# Retries happen only if R is the neutral element or s is zero (probability ~2**-250)
MAX_ATTEMPTS = 16

Signature = Tuple[EdPoint, int]


def challenge(R: EdPoint, A: EdPoint, msg: Sequence[bytes]) -> int:
  """Fiat-Shamir challenge e = H(R.x || R.y || A.x || A.y || msg) mod q"""
  return digest_int(words(R.x.val, R.y.val, A.x.val, A.y.val) + b"".join(msg)) % q


def nonce(sk: int, A: EdPoint, msg: Sequence[bytes], attempt: int = 0) -> int:
  """Deterministic secret nonce r, bound to the secret key, public key and message."""
  seed = digest(NONCE_TAG + tobytes32(sk))
  # Only retries carry a counter, keeping the first attempt compatible with other implementations
  counter = tobytes32(attempt) if attempt else b""
  return digest_int(NONCE_TAG + counter + seed + words(A.x.val, A.y.val) + b"".join(msg)) % q


def sign(sk: int, msg: Sequence[bytes]) -> Signature:
  """
  Sign a message given as a sequence of byte chunks.

  The chunks are hashed concatenated, so the verifier must use identical
  chunk contents in the same order.

  :param sk: secret scalar in range 1..q-1
  :returns: (R, s) where R is the randomizer point and s the signature scalar
  :raises ValueError: if the secret key is out of range
  """
  if isinstance(sk, bool) or not isinstance(sk, int) or not 0 < sk < q:
    raise ValueError("Secret key must be an integer in range 1..q-1")
  if isinstance(msg, (bytes, bytearray, memoryview)):
    raise TypeError("Message must be a sequence of byte chunks, not bytes")
  msg = list(msg)
  A = sk * G
  for attempt in range(MAX_ATTEMPTS):
    r = nonce(sk, A, msg, attempt)
    R = r * G
    s = (r + challenge(R, A, msg) * sk) % q
    if R != ZERO and s != 0:
      return R, s
    logger.warning("Degenerate signature on attempt %d, deriving a new nonce", attempt)
  raise RuntimeError("Unable to produce a signature")


def valid_point(P) -> bool:
  """A curve point other than the neutral element"""
  try:
    return isinstance(P, EdPoint) and P != ZERO and P.is_on_curve
  except (TypeError, ZeroDivisionError):
    return False  # Z = 0 is not a projective point


def verify(msg: Sequence[bytes], A: EdPoint, R: EdPoint, s: int) -> bool:
  """
  Check a signature with cofactored verification.

  Returns False for a neutral or invalid public key or randomizer, an empty
  message or a scalar outside 0..q-1. Never raises.
  """
  if not valid_point(A) or not valid_point(R): return False
  if not msg: return False
  if isinstance(s, bool) or not isinstance(s, int) or not 0 <= s < q: return False
  try:
    e = challenge(R, A, msg)
  except TypeError:
    return False  # Message chunks are not bytes-like
  logger.debug("verify R=(%x, %x) A=(%x, %x) e=%x", R.x.val, R.y.val, A.x.val, A.y.val, e)
  return COFACTOR * (s * G) == COFACTOR * (e * A + R)


def encode_signature(R: EdPoint, s: int) -> bytes:
  """64 bytes: compressed R followed by s little endian"""
  return bytes(R) + tobytes(s)


def decode_signature(signature: bytes) -> Signature:
  """Parse 64 signature bytes, raising ValueError if the encoding is invalid."""
  if len(signature) != 64:
    raise ValueError("Invalid signature length")
  try:
    R = EdPoint.from_bytes(signature[:32])
  except ValueError:
    raise ValueError("Invalid R point on signature")
  return R, toint(signature[32:])


def sign_bytes(sk: int, msg: Sequence[bytes]) -> bytes:
  return encode_signature(*sign(sk, msg))


def verify_bytes(pk: bytes, msg: Sequence[bytes], signature: bytes) -> bool:
  """Verify with a 32-byte compressed public key and a 64-byte signature. Never raises."""
  try:
    A = EdPoint.from_bytes(pk)
    R, s = decode_signature(signature)
  except (TypeError, ValueError):
    return False
  return verify(msg, A, R, s)
