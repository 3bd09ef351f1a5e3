"""
Encoding errors.

All errors raised by the encoders derive from EncodingError, which is
itself a ValueError so callers that already guard against bad input
values keep working.
"""


class EncodingError(ValueError):
	"""Base class for invalid encoder input."""


class InvalidDimension(EncodingError):
	"""Raised when the vocabulary size is not a positive integer."""

	def __init__(self, dimension):
		self.dimension = dimension
		super().__init__(f"dimension must be a positive integer, got {dimension!r}")


class OutOfRangeIndex(EncodingError):
	"""Raised when a category index falls outside [0, dimension)."""

	def __init__(self, index: int, dimension: int, row: int | None = None):
		self.index = index
		self.dimension = dimension
		self.row = row
		where = f" in sequence {row}" if row is not None else ""
		super().__init__(
			f"index {index}{where} is outside [0, {dimension})"
		)
