from dataclasses import dataclass
import numpy as np

@dataclass(frozen=True)
class IntFormat:
    name: str
    bits: int           # width in bits (incl. sign bit)
    # Derived (two's complement):
    min: int            # most negative representable value = -2^(bits-1)
    max: int            # most positive representable value = 2^(bits-1) - 1

    def contains(self, x: int) -> bool:
        return self.min <= x <= self.max

def _derive(name: str, dtype) -> IntFormat:
    info = np.iinfo(dtype)
    # iinfo bounds are numpy scalars; keep Python ints so comparisons with
    # arbitrary-precision intermediates never wrap
    return IntFormat(name=name, bits=int(info.bits), min=int(info.min), max=int(info.max))

# Signed fixed-width formats. int64 is the storage type of Rational; int8 is
# used to check the approximation search on small bounds.
_REGISTRY = {
    "int8":    np.int8,
    "int64":   np.int64,
}

DEFAULT_INT_FORMAT = "int64"

def get_int_format(name: str) -> IntFormat:
    key = (name or DEFAULT_INT_FORMAT).lower()
    try:
        dtype = _REGISTRY[key]
    except KeyError:
        raise NotImplementedError(f"Format '{name}' not implemented. Supported formats {_REGISTRY.keys()}")
    return _derive(key, dtype)

INT64 = get_int_format("int64")
