from secrets import token_bytes
from time import perf_counter

from tqdm import tqdm

from jubsig import btree, eddsa, keys
from jubsig.exceptions import CliArgError


def main_bench(args):
  try:
    rounds = int(args.rounds)
  except ValueError:
    raise CliArgError(f"Invalid number of rounds: {args.rounds}") from None
  if rounds < 1:
    raise CliArgError("At least one round is needed")

  sk = keys.generate_sk()
  pk = keys.public_key(sk)
  msg = [token_bytes(32), token_bytes(100)]
  data = token_bytes(32 * 64)

  signtotal = verifytotal = digesttotal = 0.0
  for _ in tqdm(range(rounds), desc="Benchmark", unit="round", leave=False):
    t0 = perf_counter()
    R, s = eddsa.sign(sk, msg)
    t1 = perf_counter()
    if not eddsa.verify(msg, pk, R, s):
      raise ValueError("Benchmark signature did not verify")
    t2 = perf_counter()
    btree.digest(data)
    t3 = perf_counter()
    signtotal += t1 - t0
    verifytotal += t2 - t1
    digesttotal += t3 - t2

  print(f"Ran {rounds} cycles of signing, verifying and hashing {len(data)} bytes.\n")
  print(f"Average signing      {1e3 * signtotal / rounds:8.1f} ms")
  print(f"Average verification {1e3 * verifytotal / rounds:8.1f} ms")
  print(f"Average digest       {1e3 * digesttotal / rounds:8.1f} ms")
