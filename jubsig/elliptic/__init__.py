# A plain Python submodule for Jubjub twisted Edwards curve math

# Jubjub is the twisted Edwards curve -x2 + y2 = 1 + d x2 y2 defined over the
# scalar field of BLS12-381, so its coordinates are native field elements in
# proof systems over that curve. Parameters follow the Zcash Sapling protocol.
# https://zips.z.cash/protocol/protocol.pdf

# Not constant time, not zeroing buffers after use. Intended for reference and
# interoperability rather than for handling high value keys.

# Public symbols are imported here. These are very low level primitives.
# Lower case constants are scalars (int or fe), upper case are EdPoints.

from .ed import COFACTOR, T2, ZERO, EdPoint, G, q
from .scalar import fe, minus1, one, p, zero
from .util import tobytes, toint, tointsign
