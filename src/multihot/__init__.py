"""multihot - multi-hot feature encoding for dense models."""

from multihot.logger import Logger, create_logger
from multihot.encoding import (
	encode,
	decode,
	one_hot,
	encode_chunked,
	MultiHotEncoder,
	OneHotEncoder,
	EncoderConfig,
	OutOfRangePolicy,
	EncodingError,
	InvalidDimension,
	OutOfRangeIndex,
	EncoderType,
	create_encoder,
)
from multihot.text import Vocabulary

__version__ = "0.1.0"

__all__ = [
	'Logger', 'create_logger',
	'encode', 'decode', 'one_hot', 'encode_chunked',
	'MultiHotEncoder', 'OneHotEncoder',
	'EncoderConfig', 'OutOfRangePolicy',
	'EncodingError', 'InvalidDimension', 'OutOfRangeIndex',
	'EncoderType', 'create_encoder',
	'Vocabulary',
]
