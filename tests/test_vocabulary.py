"""
Tests for the word Vocabulary and its hand-off to the multi-hot encoder.

Run with: pytest tests/test_vocabulary.py
"""

import pytest

from multihot import Vocabulary, encode, decode


CORPUS = [
	"A great film, a GREAT cast.",
	"The plot was dull; the cast was great.",
	"Dull dull dull",
]


def test_ids_ranked_by_frequency():
	vocab = Vocabulary().fit(CORPUS)
	index = vocab.word_index
	# dull: 4, great: 3, a/cast/the/was: 2 each (alphabetical), film/plot: 1
	assert index["dull"] == 3
	assert index["great"] == 4
	assert [index[w] for w in ("a", "cast", "the", "was")] == [5, 6, 7, 8]
	assert [index[w] for w in ("film", "plot")] == [9, 10]
	assert len(vocab) == 8
	assert vocab.size == 11


def test_lowercase_off():
	vocab = Vocabulary(lowercase=False).fit(["Great great"])
	assert set(vocab.word_index) == {"Great", "great"}


def test_num_words_caps_ids():
	vocab = Vocabulary(num_words=5).fit(CORPUS)
	assert vocab.size == 5
	assert len(vocab) == 2
	for ids in vocab.encode_batch(CORPUS, add_start=True):
		assert all(0 <= i < 5 for i in ids)


def test_unknown_and_start():
	vocab = Vocabulary().fit(CORPUS)
	ids = vocab.encode("great unseen", add_start=True)
	assert ids == [Vocabulary.START_ID, vocab.word_index["great"], Vocabulary.UNK_ID]


def test_decode():
	vocab = Vocabulary().fit(CORPUS)
	ids = vocab.encode("the dull plot", add_start=True) + [Vocabulary.PAD_ID, 999]
	assert vocab.decode(ids) == "<start> the dull plot <pad> <unk>"


def test_unfitted_raises():
	vocab = Vocabulary()
	assert not vocab.is_fitted
	with pytest.raises(RuntimeError):
		vocab.encode("anything")
	with pytest.raises(RuntimeError):
		vocab.decode([3])


def test_invalid_bounds():
	with pytest.raises(ValueError):
		Vocabulary(index_from=2)
	with pytest.raises(ValueError):
		Vocabulary(num_words=3)


def test_refit_replaces_mapping():
	vocab = Vocabulary().fit(["alpha"])
	vocab.fit(["beta beta"])
	assert vocab.word_index == {"beta": 3}


def test_fit_logs_summary():
	messages = []
	Vocabulary(num_words=6, logger=messages.append).fit(CORPUS)
	assert len(messages) == 1
	assert "size=6" in messages[0]


def test_bag_of_words_pipeline():
	"""Capped vocabulary output always encodes without range errors."""
	vocab = Vocabulary(num_words=6).fit(CORPUS)
	sequences = vocab.encode_batch(CORPUS, add_start=True)
	x = encode(sequences, dimension=vocab.size)

	assert tuple(x.shape) == (len(CORPUS), 6)
	# Every review starts with <start>
	assert x[:, Vocabulary.START_ID].tolist() == [1, 1, 1]
	# "Dull dull dull" has only dull, plus the start marker
	assert decode(x)[2] == [Vocabulary.START_ID, vocab.word_index["dull"]]


if __name__ == "__main__":
	import sys
	sys.exit(pytest.main([__file__, "-v"]))
