import logging
import sys
from typing import NoReturn

import colorama

from jubsig.cli.args import argparse
from jubsig.cli.bench import main_bench
from jubsig.cli.digest import main_digest
from jubsig.cli.keygen import main_keygen, main_pubkey
from jubsig.cli.sign import main_sign, main_verify

modes = {
  "keygen": main_keygen,
  "pubkey": main_pubkey,
  "sign": main_sign,
  "verify": main_verify,
  "digest": main_digest,
  "bench": main_bench,
}


def main() -> NoReturn:
  """
  The main CLI entry point.

  Consider calling jubsig.sign, jubsig.verify or other modules directly if you use from Python code.

  System exit codes:
  * 0 The requested function was completed successfully
  * 1 CLI argument error
  * 2 Interrupted
  * 3 I/O error (broken pipe)
  * 10 Normal errors: invalid keys, unreadable files, signature mismatch

  :raises SystemExit: on normal exit or any expected error, including KeyboardInterrupt
  :raises Exception: on unexpected error (report a bug), or on any error with `--debug`
  """
  colorama.init()
  # CLI argument processing
  args = argparse()

  # Run the mode-specific main function
  if args.debug:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    modes[args.mode](args)  # --debug makes us not catch errors
    sys.exit(0)
  try:
    modes[args.mode](args)  # Normal run
  except ValueError as e:
    sys.stderr.write(f"Error: {e}\n")
    sys.exit(10)
  except OSError as e:
    if isinstance(e, BrokenPipeError):
      sys.stderr.write('I/O error (broken pipe)\n')
      sys.exit(3)
    sys.stderr.write(f"Error: {e}\n")
    sys.exit(10)
  except KeyboardInterrupt:
    sys.stderr.write("Interrupted.\n")
    sys.exit(2)
  sys.exit(0)

if __name__ == "__main__":
  main()
