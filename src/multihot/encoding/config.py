"""
Encoder Configuration

Typed configuration for multi-hot encoders. The out-of-range policy is
the only behavioural switch: everything else (shape, saturation) is
fixed by the encoding itself.
"""

from dataclasses import dataclass
from enum import IntEnum
from numbers import Integral

from torch import dtype as torch_dtype, uint8

from multihot.encoding.errors import InvalidDimension


class OutOfRangePolicy(IntEnum):
	"""
	What to do with a category index outside [0, dimension).

	RAISE: fail the whole call with OutOfRangeIndex (default)
	SKIP: drop the index; the row loses that category
	CLAMP: fold negatives into column 0 and overflow into the last column
	"""
	RAISE = 0
	SKIP = 1
	CLAMP = 2


def check_dimension(dimension: int) -> int:
	"""Return dimension as a plain int, or raise InvalidDimension."""
	# bool is an int subclass; True would silently mean a width of 1
	if isinstance(dimension, bool) or not isinstance(dimension, Integral) or dimension <= 0:
		raise InvalidDimension(dimension)
	return int(dimension)


@dataclass(frozen=True)
class EncoderConfig:
	"""
	Configuration for a MultiHotEncoder.

	Attributes:
		dimension: Vocabulary size, i.e. output width
		policy: Handling of out-of-range indices
		dtype: Output tensor dtype (uint8 by default, float32 for model input)
	"""
	dimension: int
	policy: OutOfRangePolicy = OutOfRangePolicy.RAISE
	dtype: torch_dtype = uint8

	def __post_init__(self):
		object.__setattr__(self, "dimension", check_dimension(self.dimension))
		# Accept plain ints for the policy, e.g. from a JSON config
		object.__setattr__(self, "policy", OutOfRangePolicy(self.policy))
