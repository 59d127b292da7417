import sys

from jubsig import keys
from jubsig.cli.inputs import single
from jubsig.exceptions import CliArgError


def main_keygen(args):
  if args.files:
    raise CliArgError("keygen takes no files")
  sk = keys.generate_sk()
  pk = keys.public_key(sk)
  if sys.stdout.isatty():
    sys.stderr.write(" 🔑  Secret key (keep it safe):\n")
  print(keys.encode_sk(sk))
  if sys.stdout.isatty():
    sys.stderr.write(" 📢  Public key:\n")
  print(keys.encode_pk(pk))


def main_pubkey(args):
  if args.files:
    raise CliArgError("pubkey takes no files")
  sk = keys.decode_sk(single(args.identities, "secret key (-i)"))
  print(keys.encode_pk(keys.public_key(sk)))
