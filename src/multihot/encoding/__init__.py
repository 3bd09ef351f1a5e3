"""
Multi-hot feature encoding.

Turns variable-length sequences of category indices (e.g. the word ids
of a review) into fixed-width binary rows a dense model can consume:

	Vocabulary:  "a great great film" → [1, 6, 20, 20, 19]   (text → ids)
	Encoder:     [[1, 6, 20, 20, 19], ...] → [[0,1,0,...], ...]   (ids → bits)

Available encoders:
- MULTI_HOT: one column per category, 1 if present anywhere in the row
- ONE_HOT: exactly one category per row (class labels)

Usage:
	from multihot.encoding import create_encoder, EncoderType

	enc = create_encoder(EncoderType.MULTI_HOT, dimension=10000)
	x = enc(sequences)  # [N, 10000] uint8
"""

from enum import IntEnum
from typing import Type

from multihot.encoding.chunked import encode_chunked
from multihot.encoding.config import EncoderConfig, OutOfRangePolicy, check_dimension
from multihot.encoding.errors import EncodingError, InvalidDimension, OutOfRangeIndex
from multihot.encoding.multi_hot import MultiHotEncoder, OneHotEncoder, decode, encode, one_hot


class EncoderType(IntEnum):
	"""Available feature encoders."""
	MULTI_HOT = 0  # Sequences of indices → saturating binary rows
	ONE_HOT = 1    # Single labels → one 1 per row


class EncoderFactory:
	"""Factory for creating feature encoders."""

	_TYPE_TO_CLASS: dict[EncoderType, Type[MultiHotEncoder]] = {
		EncoderType.MULTI_HOT: MultiHotEncoder,
		EncoderType.ONE_HOT: OneHotEncoder,
	}

	@classmethod
	def create(cls, encoder_type: EncoderType, **kwargs) -> MultiHotEncoder:
		"""
		Create a feature encoder.

		Args:
			encoder_type: Which encoding to use
			**kwargs: Encoder parameters (dimension, policy, dtype, logger)

		Returns:
			Encoder instance
		"""
		encoder_class = cls._TYPE_TO_CLASS.get(encoder_type)
		if encoder_class is None:
			raise ValueError(f"Unknown encoder type: {encoder_type}")

		return encoder_class(**kwargs)


def create_encoder(
	encoder_type: EncoderType = EncoderType.MULTI_HOT,
	**kwargs,
) -> MultiHotEncoder:
	"""Convenience function to create a feature encoder."""
	return EncoderFactory.create(encoder_type, **kwargs)


__all__ = [
	# Functions
	"encode",
	"decode",
	"one_hot",
	"encode_chunked",
	"check_dimension",
	# Encoders
	"MultiHotEncoder",
	"OneHotEncoder",
	# Configuration
	"EncoderConfig",
	"OutOfRangePolicy",
	# Errors
	"EncodingError",
	"InvalidDimension",
	"OutOfRangeIndex",
	# Factory
	"EncoderFactory",
	"EncoderType",
	"create_encoder",
]
