"""
Multi-Hot Encoder — map sequences of category indices to binary rows.

One row per sequence, one column per category in the vocabulary:

	encode([[0, 2, 2], [1]], dimension=4)
	→ [[1, 0, 1, 0],
	   [0, 1, 0, 0]]

Values saturate: a category repeated in a sequence still sets a single 1.
The output width is always `dimension`, whatever the largest index seen.

Cost is one rows × dimension allocation plus one scatter over the
concatenated indices, so marking is linear in total input length rather
than in rows × dimension. Vocabularies are large (thousands) while each
sequence is short, so this is the term that matters.

Usage:
	from multihot.encoding import encode, decode, MultiHotEncoder

	x = encode(train_sequences, dimension=10000, dtype=float32)
	words = decode(x)  # sorted distinct indices per row

	enc = MultiHotEncoder(dimension=10000, policy=OutOfRangePolicy.SKIP)
	x = enc(train_sequences)
"""

from numbers import Integral
from typing import Callable, Iterable, Optional

import numpy as np
from torch import dtype as torch_dtype, from_numpy, uint8, zeros, Tensor
from torch.nn import Module

from multihot.encoding.config import check_dimension, EncoderConfig, OutOfRangePolicy
from multihot.encoding.errors import EncodingError, OutOfRangeIndex


def _as_indices(sequence, row: Optional[int] = None, name: Optional[str] = None) -> np.ndarray:
	"""
	Normalize one sequence (list, tuple, ndarray, tensor) to a 1-D integer array.

	The integer dtype is kept as given (uint64, or object for Python ints
	beyond int64) so range checks see the real values; the int64 cast
	happens only after out-of-range indices are dealt with.
	"""
	name = name or f"sequence {row}"
	if isinstance(sequence, Tensor):
		sequence = sequence.detach().cpu().numpy()
	elif np.isscalar(sequence):
		raise EncodingError(f"{name} must be a sequence of indices, got scalar {sequence!r}")
	elif not isinstance(sequence, np.ndarray):
		sequence = list(sequence)

	try:
		indices = np.asarray(sequence)
	except ValueError as e:
		# ragged nesting
		raise EncodingError(f"{name} must be one-dimensional") from e
	if indices.size == 0:
		return np.empty(0, dtype=np.int64)
	if indices.ndim != 1:
		raise EncodingError(f"{name} must be one-dimensional, got shape {indices.shape}")
	if indices.dtype == object:
		if not all(isinstance(i, Integral) and not isinstance(i, bool) for i in indices):
			raise EncodingError(f"{name} must contain integer indices, got object")
	elif indices.dtype == np.bool_ or not np.issubdtype(indices.dtype, np.integer):
		raise EncodingError(f"{name} must contain integer indices, got {indices.dtype}")
	return indices


def _out_of_range(indices: np.ndarray, dimension: int) -> np.ndarray:
	"""Boolean mask of indices outside [0, dimension), on the uncast values."""
	return np.asarray((indices < 0) | (indices >= dimension), dtype=bool)


def encode(
	sequences: Iterable,
	dimension: int,
	policy: OutOfRangePolicy = OutOfRangePolicy.RAISE,
	dtype: torch_dtype = uint8,
	logger: Optional[Callable[[str], None]] = None,
) -> Tensor:
	"""
	Multi-hot encode a batch of category-index sequences.

	Args:
		sequences: Iterable of sequences of ints (lists, arrays or 1-D tensors).
			Inner sequences may be empty and may repeat indices.
		dimension: Vocabulary size; the output width
		policy: What to do with indices outside [0, dimension), including
			integers too large for int64
		dtype: Output dtype
		logger: Optional logging function, told how many indices were
			skipped or clamped

	Returns:
		[len(sequences), dimension] tensor of 0/1

	Raises:
		InvalidDimension: dimension is not a positive int
		OutOfRangeIndex: an index is out of range and policy is RAISE
		EncodingError: a sequence holds non-integer values
	"""
	dimension = check_dimension(dimension)
	policy = OutOfRangePolicy(policy)

	rows = [_as_indices(seq, row) for row, seq in enumerate(sequences)]
	if not rows:
		return zeros((0, dimension), dtype=dtype)

	n_bad = 0
	for row, indices in enumerate(rows):
		bad = _out_of_range(indices, dimension)
		if bad.any():
			if policy == OutOfRangePolicy.RAISE:
				raise OutOfRangeIndex(int(indices[bad][0]), dimension, row=row)
			n_bad += int(bad.sum())
			if policy == OutOfRangePolicy.SKIP:
				indices = indices[~bad]
			else:
				clamped = np.empty(len(indices), dtype=np.int64)
				clamped[~bad] = indices[~bad].astype(np.int64)
				clamped[bad] = np.where(np.asarray(indices[bad] < 0, dtype=bool), 0, dimension - 1)
				indices = clamped
		rows[row] = indices.astype(np.int64, copy=False)

	if n_bad and logger is not None:
		verb = "Skipped" if policy == OutOfRangePolicy.SKIP else "Clamped"
		logger(f"{verb} {n_bad} out-of-range indices (dimension={dimension})")

	lengths = np.fromiter((len(r) for r in rows), dtype=np.int64, count=len(rows))
	cols = np.concatenate(rows)
	row_ids = np.repeat(np.arange(len(rows), dtype=np.int64), lengths)

	matrix = zeros((len(rows), dimension), dtype=dtype)
	matrix[from_numpy(row_ids), from_numpy(cols)] = 1
	return matrix


def decode(matrix) -> list[list[int]]:
	"""
	Recover the distinct category indices of each row.

	Args:
		matrix: [rows, dimension] tensor or ndarray

	Returns:
		One ascending list of column indices per row (non-zero cells)
	"""
	if isinstance(matrix, Tensor):
		matrix = matrix.detach().cpu().numpy()
	matrix = np.asarray(matrix)
	if matrix.ndim != 2:
		raise EncodingError(f"expected a 2-D matrix, got shape {matrix.shape}")
	return [np.flatnonzero(row).tolist() for row in matrix]


def one_hot(labels: Iterable[int], num_classes: int, dtype: torch_dtype = uint8) -> Tensor:
	"""
	One-hot encode class labels: a multi-hot encoding with one index per row.

	Out-of-range labels always raise; there is no sensible skip for a target.
	"""
	return encode(([label] for label in _as_indices(labels, name="labels").tolist()), num_classes, dtype=dtype)


class MultiHotEncoder(Module):
	"""
	Multi-hot encoder with a fixed vocabulary size and policy.

	Thin stateful wrapper over encode()/decode() so the encoding can be
	composed into a pipeline or passed around as a single object. It holds
	no mutable state; two calls with the same input return equal tensors.

	Usage:
		enc = MultiHotEncoder(dimension=10000, dtype=float32)
		x_train = enc(train_sequences)          # [N, 10000]
		row = enc.encode_sequence([1, 14, 22])  # [10000]
	"""

	def __init__(
		self,
		dimension: int,
		policy: OutOfRangePolicy = OutOfRangePolicy.RAISE,
		dtype: torch_dtype = uint8,
		logger: Optional[Callable[[str], None]] = None,
	):
		super().__init__()
		self.config = EncoderConfig(dimension=dimension, policy=policy, dtype=dtype)
		self._logger = logger

	@classmethod
	def from_config(cls, config: EncoderConfig, logger: Optional[Callable[[str], None]] = None) -> "MultiHotEncoder":
		return cls(config.dimension, policy=config.policy, dtype=config.dtype, logger=logger)

	@property
	def dimension(self) -> int:
		return self.config.dimension

	@property
	def policy(self) -> OutOfRangePolicy:
		return self.config.policy

	def forward(self, sequences: Iterable) -> Tensor:
		return self.encode_batch(sequences)

	def encode_batch(self, sequences: Iterable) -> Tensor:
		"""[N, dimension] encoding of N sequences."""
		return encode(
			sequences,
			self.config.dimension,
			policy=self.config.policy,
			dtype=self.config.dtype,
			logger=self._logger,
		)

	def encode_sequence(self, sequence) -> Tensor:
		"""[dimension] encoding of a single sequence."""
		return self.encode_batch([sequence])[0]

	def decode(self, matrix) -> list[list[int]]:
		if not isinstance(matrix, Tensor):
			matrix = np.asarray(matrix)
		if matrix.ndim == 2 and matrix.shape[-1] != self.config.dimension:
			raise EncodingError(
				f"matrix width {matrix.shape[-1]} does not match dimension {self.config.dimension}"
			)
		return decode(matrix)

	def __repr__(self) -> str:
		return (
			f"MultiHotEncoder(dimension={self.config.dimension}, "
			f"policy={self.config.policy.name}, dtype={self.config.dtype})"
		)


class OneHotEncoder(MultiHotEncoder):
	"""Encoder for single class labels; out-of-range labels always raise."""

	def __init__(
		self,
		dimension: int,
		dtype: torch_dtype = uint8,
		logger: Optional[Callable[[str], None]] = None,
	):
		super().__init__(dimension, policy=OutOfRangePolicy.RAISE, dtype=dtype, logger=logger)

	def encode_batch(self, labels: Iterable[int]) -> Tensor:
		return one_hot(labels, self.config.dimension, dtype=self.config.dtype)

	def encode_sequence(self, label: int) -> Tensor:
		return self.encode_batch([label])[0]

	def __repr__(self) -> str:
		return f"OneHotEncoder(dimension={self.config.dimension}, dtype={self.config.dtype})"
