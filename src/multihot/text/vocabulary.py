"""
Word vocabulary for multi-hot text features.

Maps raw text to the integer sequences the multi-hot encoder consumes.
Ids are assigned by descending word frequency, so capping the vocabulary
at num_words keeps the most common words, the usual setup for bag-of-words
sentiment models:

	vocab = Vocabulary(num_words=10000).fit(train_texts)
	x_train = encode(vocab.encode_batch(train_texts), dimension=vocab.size)

Reserved ids:
	0  <pad>    padding
	1  <start>  optional start-of-document marker
	2  <unk>    word not in the vocabulary (or cut by num_words)
"""

import re
from collections import Counter
from typing import Callable, Iterable, Optional


class Vocabulary:
	"""
	Frequency-ranked word → id mapping with reserved low ids.

	Features:
	- Optional cap on the number of ids (num_words)
	- Deterministic ids: ties in frequency are broken alphabetically
	- Unknown and capped-out words map to <unk>
	"""

	PAD_TOKEN = "<pad>"
	START_TOKEN = "<start>"
	UNK_TOKEN = "<unk>"

	PAD_ID = 0
	START_ID = 1
	UNK_ID = 2

	_WORD_RE = re.compile(r"[\w']+")

	def __init__(
		self,
		num_words: Optional[int] = None,
		lowercase: bool = True,
		index_from: int = 3,
		logger: Optional[Callable[[str], None]] = None,
	):
		"""
		Args:
			num_words: Only ids below this bound are emitted (None = keep every word)
			lowercase: Lowercase text before splitting
			index_from: Id of the most frequent word; lower ids are reserved
			logger: Optional logging function
		"""
		if index_from <= self.UNK_ID:
			raise ValueError(f"index_from must be > {self.UNK_ID}, got {index_from}")
		if num_words is not None and num_words <= index_from:
			raise ValueError(f"num_words must be > index_from ({index_from}), got {num_words}")

		self._num_words = num_words
		self._lowercase = lowercase
		self._index_from = index_from
		self._log = logger

		self._word_to_id: dict[str, int] = {}
		self._id_to_word: dict[int, str] = {}
		self._is_fitted = False

	@property
	def is_fitted(self) -> bool:
		return self._is_fitted

	@property
	def size(self) -> int:
		"""Encoder dimension that covers every id this vocabulary can emit."""
		if self._num_words is not None:
			return self._num_words
		return self._index_from + len(self._word_to_id)

	@property
	def word_index(self) -> dict[str, int]:
		return dict(self._word_to_id)

	def __len__(self) -> int:
		return len(self._word_to_id)

	def tokenize(self, text: str) -> list[str]:
		"""Split text into word tokens."""
		if self._lowercase:
			text = text.lower()
		return self._WORD_RE.findall(text)

	def fit(self, texts: Iterable[str]) -> "Vocabulary":
		"""
		Build the vocabulary from a corpus. Refitting replaces the old mapping.

		Args:
			texts: Training documents

		Returns:
			self, for chaining
		"""
		counts: Counter = Counter()
		for text in texts:
			counts.update(self.tokenize(text))

		ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
		if self._num_words is not None:
			ranked = ranked[:self._num_words - self._index_from]

		self._word_to_id = {word: self._index_from + rank for rank, (word, _) in enumerate(ranked)}
		self._id_to_word = {i: w for w, i in self._word_to_id.items()}
		self._is_fitted = True

		if self._log:
			self._log(f"Vocabulary: {len(counts):,} distinct words, kept {len(self._word_to_id):,} (size={self.size})")
		return self

	def _check_fitted(self) -> None:
		if not self._is_fitted:
			raise RuntimeError("Vocabulary not fitted. Call fit() first.")

	def encode(self, text: str, add_start: bool = False) -> list[int]:
		"""Map a document to word ids; unknown words become <unk>."""
		self._check_fitted()
		ids = [self._word_to_id.get(word, self.UNK_ID) for word in self.tokenize(text)]
		if add_start:
			ids.insert(0, self.START_ID)
		return ids

	def encode_batch(self, texts: Iterable[str], add_start: bool = False) -> list[list[int]]:
		return [self.encode(text, add_start=add_start) for text in texts]

	def decode(self, ids: Iterable[int]) -> str:
		"""Map ids back to space-joined words (lossy: case and punctuation are gone)."""
		self._check_fitted()
		reserved = {
			self.PAD_ID: self.PAD_TOKEN,
			self.START_ID: self.START_TOKEN,
			self.UNK_ID: self.UNK_TOKEN,
		}
		words = []
		for i in ids:
			i = int(i)
			words.append(reserved.get(i) or self._id_to_word.get(i, self.UNK_TOKEN))
		return " ".join(words)

	def __repr__(self) -> str:
		return f"Vocabulary(words={len(self._word_to_id)}, size={self.size}, num_words={self._num_words})"
