"""
Chunked multi-hot encoding.

A full encoding holds rows × dimension cells at once; for 25k reviews
against a 10k vocabulary that is 250M cells. encode_chunked walks the
input lazily and yields bounded blocks instead, so a caller can stream
them into a model or onto disk.

Usage:
	for block in encode_chunked(reviews, dimension=10000, chunk_size=2048):
		model_step(block.float())
"""

from itertools import islice
from typing import Iterable, Iterator

from torch import Tensor

from multihot.encoding.config import check_dimension
from multihot.encoding.multi_hot import encode


def encode_chunked(
	sequences: Iterable,
	dimension: int,
	chunk_size: int = 1024,
	**encode_kwargs,
) -> Iterator[Tensor]:
	"""
	Encode sequences in blocks of at most chunk_size rows.

	Concatenating the yielded blocks along dim 0 gives exactly
	encode(sequences, dimension, **encode_kwargs). Validation runs per
	block, so earlier blocks may already have been yielded when a later
	one raises OutOfRangeIndex; its row number is relative to that block.

	Args:
		sequences: Any iterable of index sequences (generators are consumed lazily)
		dimension: Vocabulary size
		chunk_size: Maximum rows per yielded block
		**encode_kwargs: Forwarded to encode() (policy, dtype, logger)

	Yields:
		[<= chunk_size, dimension] tensors
	"""
	if chunk_size <= 0:
		raise ValueError(f"chunk_size must be positive, got {chunk_size}")
	dimension = check_dimension(dimension)
	return _iter_chunks(iter(sequences), dimension, chunk_size, encode_kwargs)


def _iter_chunks(it: Iterator, dimension: int, chunk_size: int, encode_kwargs: dict) -> Iterator[Tensor]:
	while True:
		chunk = list(islice(it, chunk_size))
		if not chunk:
			return
		yield encode(chunk, dimension, **encode_kwargs)
