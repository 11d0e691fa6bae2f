import math
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

from .config import DEFAULT_THRESHOLD
from .document_loader import Document, DocumentLoader, DocumentSource
from .logging_config import LoggerMixin
from .validation import ParameterValidator, validate_inputs
from .word_frequency import build_frequency_map


@dataclass(frozen=True)
class SimilarityResult:
    """Outcome of comparing two documents."""

    similarity_percent: float
    flagged: bool
    threshold: float = DEFAULT_THRESHOLD
    # (word, count in first, count in second), largest dot-product contribution first
    shared_words: Tuple[Tuple[str, int, int], ...] = ()

    def to_dict(self) -> Dict[str, object]:
        return {
            'similarity_percent': self.similarity_percent,
            'flagged': self.flagged,
            'threshold': self.threshold,
        }

    def summary(self) -> str:
        """Result line as shown to users, e.g. ``Similarity: 89.44%``."""
        return f"Similarity: {self.similarity_percent:.2f}%"

    def verdict(self) -> str:
        if self.flagged:
            return "Plagiarism detected between the files."
        return "No plagiarism detected between the files."


def dot_product(map_a: Mapping[str, int], map_b: Mapping[str, int]) -> int:
    # Words missing from map_b contribute nothing
    return sum(count * map_b.get(word, 0) for word, count in map_a.items())


def squared_magnitude(frequency_map: Mapping[str, int]) -> int:
    return sum(count * count for count in frequency_map.values())


def magnitude(frequency_map: Mapping[str, int]) -> float:
    """Euclidean norm of a frequency vector."""
    return math.sqrt(squared_magnitude(frequency_map))


def cosine_similarity(map_a: Mapping[str, int], map_b: Mapping[str, int]) -> float:
    """
    Cosine of the angle between two word-frequency vectors, in [0, 1].

    Returns 0.0 when either vector is empty. The sums stay integers until the
    final division, so the result does not depend on argument order and a map
    compared with itself gives exactly 1.0.
    """
    squared_a = squared_magnitude(map_a)
    squared_b = squared_magnitude(map_b)
    if squared_a == 0 or squared_b == 0:
        return 0.0

    similarity = dot_product(map_a, map_b) / math.sqrt(squared_a * squared_b)
    return min(1.0, max(0.0, similarity))


def compute_similarity(document_a: str, document_b: str) -> float:
    """Word-frequency cosine similarity of two texts, in [0, 1]."""
    return cosine_similarity(build_frequency_map(document_a), build_frequency_map(document_b))


def is_plagiarism(similarity_percent: float, threshold: float = DEFAULT_THRESHOLD) -> bool:
    """True when ``similarity_percent`` reaches ``threshold`` (inclusive)."""
    return similarity_percent >= threshold


def shared_words(map_a: Mapping[str, int], map_b: Mapping[str, int]) -> List[Tuple[str, int, int]]:
    """Words present in both maps, ordered by their share of the dot product."""
    common = [(word, count, map_b[word]) for word, count in map_a.items() if map_b.get(word, 0) > 0]
    common.sort(key=lambda item: (-item[1] * item[2], item[0]))
    return common


class WordFrequencySimilarityCalculator(LoggerMixin):
    """
    Compares two documents by the cosine similarity of their word counts
    and flags the pair when the percentage reaches the threshold.
    """

    @validate_inputs(threshold=ParameterValidator.validate_threshold)
    def __init__(self, threshold: float = DEFAULT_THRESHOLD, loader: Optional[DocumentLoader] = None):
        """
        Args:
            threshold: Flagging cutoff as a percentage (0-100)
            loader: Reader used for path and file-like inputs

        Raises:
            ParameterValidationError: If the threshold is outside 0-100
        """
        self.threshold = threshold
        self.loader = loader or DocumentLoader()

    def compare_documents(self, document_a: Document, document_b: Document) -> SimilarityResult:
        with self.log_operation("compare_documents",
                                source=f"{document_a.display_name} <-> {document_b.display_name}",
                                threshold=self.threshold) as operation:
            map_a = build_frequency_map(document_a.text)
            map_b = build_frequency_map(document_b.text)

            if not map_a or not map_b:
                empty = [doc.display_name for doc, counts in ((document_a, map_a), (document_b, map_b)) if not counts]
                self.logger.info(f"No words found in {', '.join(empty)}; similarity is 0")

            similarity_percent = cosine_similarity(map_a, map_b) * 100
            flagged = is_plagiarism(similarity_percent, self.threshold)
            operation.extra['similarity'] = similarity_percent

            self.logger.debug(
                f"Vocabulary sizes {len(map_a)} and {len(map_b)}, similarity {similarity_percent:.2f}%"
            )
            return SimilarityResult(
                similarity_percent=similarity_percent,
                flagged=flagged,
                threshold=self.threshold,
                shared_words=tuple(shared_words(map_a, map_b)),
            )

    def compare_texts(self, text_a: str, text_b: str) -> SimilarityResult:
        return self.compare_documents(Document(text_a, label="first"), Document(text_b, label="second"))

    def compare(self, source_a: DocumentSource, source_b: DocumentSource) -> SimilarityResult:
        """
        Read both sources and compare them.

        Raises:
            InputUnreadableError: If either source cannot be read; no
                similarity is computed in that case
        """
        document_a = self.loader.load(source_a, label="first")
        document_b = self.loader.load(source_b, label="second")
        return self.compare_documents(document_a, document_b)


def compare(source_a: DocumentSource, source_b: DocumentSource,
            threshold: float = DEFAULT_THRESHOLD) -> SimilarityResult:
    """Compare two paths, file-like objects or ``Document`` instances."""
    return WordFrequencySimilarityCalculator(threshold=threshold).compare(source_a, source_b)


def compare_files(path_a, path_b, threshold: float = DEFAULT_THRESHOLD) -> SimilarityResult:
    return WordFrequencySimilarityCalculator(threshold=threshold).compare(path_a, path_b)


def compare_texts(text_a: str, text_b: str, threshold: float = DEFAULT_THRESHOLD) -> SimilarityResult:
    """Compare two strings of text directly; never touches the filesystem."""
    return WordFrequencySimilarityCalculator(threshold=threshold).compare_texts(text_a, text_b)
