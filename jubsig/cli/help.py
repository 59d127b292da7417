import sys
from typing import NoReturn

import jubsig

T = "\x1B[1;44m"  # titlebar (white on blue)
H = "\x1B[1;37m"  # heading (bright white)
C = "\x1B[0;34m"  # command (dark blue)
F = "\x1B[1;34m"  # flag (light blue)
D = "\x1B[1;30m"  # dark / syntax markup
N = "\x1B[0m"     # normal color

usage = dict(
  keygen=f"{C}jubsig {F}keygen {D}—{N} create a new secret key and show its public key\n",
  pubkey=f"{C}jubsig {F}pubkey -i {N}seckey {D}—{N} show the public key of a secret key\n",
  sign=f"{C}jubsig {F}sign -i {N}seckey {D}[{N}file{D}]…{N}\n",
  verify=f"{C}jubsig {F}verify -k {N}pubkey {F}-s {N}signature {D}[{N}file{D}]…{N}\n",
  digest=f"{C}jubsig {F}digest {D}[{N}file{D}]… —{N} Poseidon tree digest of each input\n",
  bench=f"{C}jubsig {F}bench {D}[{F}-n {N}rounds{D}] —{N} time signing, verification and hashing\n",
)

usagetext = dict(
  sign=f"""\
Sign a message. Each file given is one chunk of the message, in the order
given, and standard input is read when no files are given or {F}-{N} is used.
Prints the 64-byte signature in hex (randomizer point, then the scalar).

  {F}-i {N}seckey         Secret key as 64 hex digits, or a file containing it
""",
  verify=f"""\
Verify a signature over the same chunks that were signed. Exits with status
10 if the signature does not match.

  {F}-k {N}pubkey         Public key as 64 hex digits, or a file containing it
  {F}-s {N}signature      Signature as 128 hex digits, or a file containing it
""",
  digest=f"""\
Hash each file (or standard input) with the Poseidon tree digest and print
the 32-byte result in hex.
""",
  bench=f"""\
  {F}-n {N}rounds         Number of signatures to time (default 3)
""",
)

cmdhelp = {k: f"{usage[k]}\n{usagetext.get(k, '')}".rstrip("\n") + "\n" for k in usage}

introduction = f"""\
{T}{f"Jubsig {jubsig.__version__} - Poseidon EdDSA signatures on Jubjub":78}{N}
"""

shorthelp = f"""\
{introduction}
{"".join(usage.values())}
Getting started: create a key with {C}jubsig {F}keygen{N}, keep the secret key safe
and share the public key. Sign with {F}sign{N} and check signatures with {F}verify{N}.

  {F}--debug{N}           Show diagnostics and do not catch errors
  {F}--help --version{N}  Useful information. Help applies to subcommands too.
"""

exampleshelp = f"""\
{H}Examples:{N}

  - {C}jubsig {F}keygen{N}
  - {C}jubsig {F}sign -i {N}secret.key header.bin body.bin
  - {C}jubsig {F}verify -k {N}433ff67b… {F}-s {N}84d688d1… header.bin body.bin
  - {C}echo -n {N}hello {C}| jubsig {F}digest{N}
"""

allcommands = '\n\n'.join(cmdhelp.values())

fullhelp = f"""\
{introduction}
{allcommands}

{exampleshelp}"""

def print_help(modehelp: str = None, error: str = None) -> NoReturn:
  stream = sys.stderr if error else sys.stdout
  if modehelp is None: stream.write(shorthelp)
  elif (h := cmdhelp.get(modehelp)): stream.write(h)
  else: stream.write(fullhelp)
  if error:
    stream.write(f"\n{error}\n")
    sys.exit(1)
  sys.exit(0)

def print_version() -> NoReturn:
  print(f"Jubsig {jubsig.__version__}")
  sys.exit(0)
