import logging
from secrets import token_bytes

import pytest

import jubsig
from jubsig import eddsa
from jubsig.btree import digest, digest_int
from jubsig.elliptic import T2, ZERO, EdPoint, G, fe, q
from jubsig.util import tobytes32, words

MSG = [bytes([0x01, 0x02, 0x03]), bytes([0x04, 0x05, 0x06])]

# Known answer: message, public key and signature produced by an independent implementation
KAT_MSG = "574968d8fd65d58c8aa51a4b51769548691c2db9d80535f6bb0078ff2ad79c42"
KAT_PK = "433ff67b87411274686509c4cf9c44b74363885a3652ab4af91e145da426f602"
KAT_SIG = (
  "84d688d16f616c8c2eb479ecc500b0da294cab9bdf12b39268ac5d7f18e577c3"
  "25edfc914d097ec8021678a0f890445e919e6167e05b829870af830431af5a01"
)


def test_nonce_tag():
  assert len(eddsa.NONCE_TAG) == 32
  assert eddsa.NONCE_TAG.startswith(b"TokamakAuth\xe2\x80\x91EDDSA")
  assert eddsa.NONCE_TAG.endswith(b"NONCE\xe2\x80\x91v1")


def test_sign_and_verify():
  sk = jubsig.generate_sk()
  pk = jubsig.public_key(sk)
  msg = [token_bytes(40), b"", token_bytes(3)]
  R, s = jubsig.sign(sk, msg)
  assert 0 < s < q
  assert R != ZERO
  assert jubsig.verify(msg, pk, R, s)

  # Wrong message, key, randomizer or scalar
  assert not jubsig.verify([token_bytes(40)], pk, R, s)
  assert not jubsig.verify(msg, jubsig.public_key(jubsig.generate_sk()), R, s)
  assert not jubsig.verify(msg, pk, R + G, s)
  assert not jubsig.verify(msg, pk, R, (s + 1) % q)


def test_tampered_message():
  sk = 123456789
  R, s = eddsa.sign(sk, [bytes([1, 2, 3])])
  A = sk * G
  assert eddsa.verify([bytes([1, 2, 3])], A, R, s)
  assert not eddsa.verify([bytes([1, 2, 4])], A, R, s)


def test_deterministic():
  sk = 123456789
  R, s = eddsa.sign(sk, MSG)
  assert eddsa.sign(sk, MSG) == (R, s)
  assert eddsa.sign(sk, [MSG[0]]) != (R, s)
  assert eddsa.sign(sk + 1, MSG) != (R, s)
  assert eddsa.verify(MSG, sk * G, R, s)


def test_derivation_layout():
  sk = 123456789
  A = sk * G
  seed = digest(eddsa.NONCE_TAG + tobytes32(sk))
  r = digest_int(eddsa.NONCE_TAG + seed + words(A.x.val, A.y.val) + b"".join(MSG)) % q
  R = r * G
  e = digest_int(words(R.x.val, R.y.val, A.x.val, A.y.val) + b"".join(MSG)) % q
  assert eddsa.nonce(sk, A, MSG) == r
  assert eddsa.challenge(R, A, MSG) == e
  assert eddsa.sign(sk, MSG) == (R, (r + e * sk) % q)


def test_known_signature():
  R, s = eddsa.sign(123456789, MSG)
  assert bytes(R).hex() == "069abb46865fcef89d282a28446fd7d65ebd17eb1bfd2580ec846c5544bb906f"
  assert s == 0x0052fac8ded4c043f91a767bb09fafe418a023e3ff5b0213e11152fae4509d93
  assert bytes(jubsig.public_key(123456789)).hex() == "9ede403565f3084091b1d966889c36bb406243ef60f9027f8388c485e123a6a1"
  assert eddsa.sign_bytes(123456789, MSG).hex() == (
    "069abb46865fcef89d282a28446fd7d65ebd17eb1bfd2580ec846c5544bb906f"
    "939d50e4fa5211e113025bffe323a018e4af9fb07b761af943c0d4dec8fa5200"
  )


def test_chunks_are_concatenated():
  sk = jubsig.generate_sk()
  R, s = eddsa.sign(sk, [b"ab", b"c"])
  assert eddsa.verify([b"abc"], sk * G, R, s)
  assert eddsa.verify([b"a", b"", b"bc"], sk * G, R, s)


def test_verify_rejects():
  sk = jubsig.generate_sk()
  A = sk * G
  R, s = eddsa.sign(sk, MSG)
  assert not eddsa.verify(MSG, ZERO, R, s)
  assert not eddsa.verify(MSG, A, ZERO, s)
  assert not eddsa.verify([], A, R, s)
  assert not eddsa.verify(MSG, A, R, q)
  assert not eddsa.verify(MSG, A, R, s + q)
  assert not eddsa.verify(MSG, A, R, -1)
  assert not eddsa.verify(MSG, A, R, s - q)
  assert not eddsa.verify(MSG, A, R, float(s))
  assert not eddsa.verify(MSG, A, R, True)
  # Not points or not on the curve
  assert not eddsa.verify(MSG, None, R, s)
  assert not eddsa.verify(MSG, A, bytes(R), s)
  assert not eddsa.verify(MSG, EdPoint(fe(1), fe(2)), R, s)
  assert not eddsa.verify(MSG, EdPoint(1, 2), R, s)
  assert not eddsa.verify(MSG, A, EdPoint(fe(1), fe(1), fe(0), fe(0)), s)
  # Chunks must be bytes-like
  assert not eddsa.verify([1, 2, 3], A, R, s)
  assert not eddsa.verify(b"\x01\x02\x03", A, R, s)


def test_cofactored_verification():
  sk = jubsig.generate_sk()
  A = sk * G
  R, s = eddsa.sign(sk, MSG)
  # Changing R changes the challenge
  assert R + T2 != R
  assert not eddsa.verify(MSG, A, R + T2, s)
  # A low order component on R is cleared by the cofactor once s matches the new challenge
  e = eddsa.challenge(R + T2, A, MSG)
  r = (s - eddsa.challenge(R, A, MSG) * sk) % q
  assert eddsa.verify(MSG, A, R + T2, (r + e * sk) % q)


def test_sign_invalid():
  for sk in (0, q, -1, q + 5, 1.5, True, "1"):
    with pytest.raises(ValueError):
      eddsa.sign(sk, MSG)
  with pytest.raises(TypeError):
    eddsa.sign(1, b"message")
  with pytest.raises(TypeError):
    eddsa.sign(1, [1, 2])


def test_sign_retries(mocker):
  real_nonce = eddsa.nonce
  calls = []

  def nonce(sk, A, msg, attempt=0):
    calls.append(attempt)
    # A zero nonce makes R the neutral element
    return 0 if attempt == 0 else real_nonce(sk, A, msg, attempt)

  mocker.patch("jubsig.eddsa.nonce", side_effect=nonce)
  sk = 987654321
  R, s = eddsa.sign(sk, MSG)
  assert calls == [0, 1]
  assert R != ZERO
  assert eddsa.verify(MSG, sk * G, R, s)
  # Retries mix in the attempt number
  assert real_nonce(sk, sk * G, MSG, 1) != real_nonce(sk, sk * G, MSG, 0)


def test_sign_gives_up(mocker):
  mocker.patch("jubsig.eddsa.nonce", return_value=0)
  with pytest.raises(RuntimeError):
    eddsa.sign(1, MSG)


def test_signature_encoding():
  sk = jubsig.generate_sk()
  R, s = eddsa.sign(sk, MSG)
  sig = eddsa.encode_signature(R, s)
  assert len(sig) == 64
  assert sig[:32] == bytes(R)
  assert int.from_bytes(sig[32:], "little") == s
  assert eddsa.decode_signature(sig) == (R, s)
  assert eddsa.sign_bytes(sk, MSG) == sig
  assert eddsa.verify_bytes(bytes(sk * G), MSG, sig)

  with pytest.raises(ValueError):
    eddsa.decode_signature(sig[:63])
  with pytest.raises(ValueError) as exc:
    eddsa.decode_signature(bytes([0xFF]) * 32 + sig[32:])
  assert "Invalid R point" in str(exc.value)


def test_verify_bytes_never_raises():
  sk = jubsig.generate_sk()
  pk = bytes(sk * G)
  sig = eddsa.sign_bytes(sk, MSG)
  assert not eddsa.verify_bytes(pk[:31], MSG, sig)
  assert not eddsa.verify_bytes(pk, MSG, sig[:-1])
  assert not eddsa.verify_bytes(pk, MSG, sig[:32] + bytes([0xFF]) * 32)
  assert not eddsa.verify_bytes(bytes([0xFF]) * 32, MSG, sig)
  assert not eddsa.verify_bytes("not bytes", MSG, sig)
  assert not eddsa.verify_bytes(bytes(ZERO), MSG, sig)
  assert not eddsa.verify_bytes(pk, [], sig)


def test_verify_debug_logging(caplog):
  sk = jubsig.generate_sk()
  R, s = eddsa.sign(sk, MSG)
  with caplog.at_level(logging.DEBUG, logger="jubsig.eddsa"):
    assert eddsa.verify(MSG, sk * G, R, s)
  assert f"R=({R.x.val:x}, {R.y.val:x})" in caplog.text
  caplog.clear()
  with caplog.at_level(logging.DEBUG, logger="jubsig.eddsa"):
    assert not eddsa.verify([], sk * G, R, s)
  assert not caplog.text


def test_known_answer_decoding():
  pk = EdPoint.from_bytes(bytes.fromhex(KAT_PK))
  R, s = eddsa.decode_signature(bytes.fromhex(KAT_SIG))
  assert pk.is_on_curve and R.is_on_curve
  assert pk != ZERO and R != ZERO
  assert 0 <= s < q
  assert bytes(pk).hex() == KAT_PK
  assert eddsa.encode_signature(R, s).hex() == KAT_SIG


def test_known_answer_verify():
  assert eddsa.verify_bytes(bytes.fromhex(KAT_PK), [bytes.fromhex(KAT_MSG)], bytes.fromhex(KAT_SIG))
