"""Deterministic EdDSA signatures over Jubjub using a Poseidon tree digest"""
from importlib.metadata import PackageNotFoundError, version

from jubsig.btree import digest
from jubsig.eddsa import sign, sign_bytes, verify, verify_bytes
from jubsig.keys import generate_sk, public_key

try:
  __version__ = version("jubsig")
except PackageNotFoundError:
  __version__ = "0.0.0"
