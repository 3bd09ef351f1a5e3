"""Text → index-sequence preprocessing for multi-hot features."""

from multihot.text.vocabulary import Vocabulary

__all__ = [
	"Vocabulary",
]
