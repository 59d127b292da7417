from jubsig import eddsa, keys
from jubsig.cli.inputs import read_inputs, single
from jubsig.util import fromhex


def main_sign(args):
  sk = keys.decode_sk(single(args.identities, "secret key (-i)"))
  msg = read_inputs(args.files)
  print(eddsa.sign_bytes(sk, msg).hex())


def main_verify(args):
  pk = keys.decode_pk(single(args.pubkeys, "public key (-k)"))
  signature = fromhex(single(args.signatures, "signature (-s)"), 64)
  msg = read_inputs(args.files)
  if not eddsa.verify_bytes(bytes(pk), msg, signature):
    raise ValueError("Signature mismatch")
  print("Signature OK")
