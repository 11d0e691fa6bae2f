"""
Core comparison logic.

- Tokenization and word counting
- Cosine similarity and the plagiarism threshold
- Reading inputs from paths or uploaded files
- Logging, settings and validation support
"""

from .word_frequency import tokenize, build_frequency_map
from .cosine_similarity import (
    SimilarityResult, WordFrequencySimilarityCalculator,
    compute_similarity, cosine_similarity, is_plagiarism,
    compare, compare_files, compare_texts
)
from .document_loader import Document, DocumentLoader
from .config import DEFAULT_THRESHOLD, DetectorSettings, load_settings
from .logging_config import setup_logging, get_logger, LoggerMixin, ProductionLogger
from .validation import (
    ValidationError, FileValidationError, InputUnreadableError,
    ParameterValidationError, FileValidator, ParameterValidator,
    validate_inputs
)

__all__ = [
    'tokenize',
    'build_frequency_map',
    'SimilarityResult',
    'WordFrequencySimilarityCalculator',
    'compute_similarity',
    'cosine_similarity',
    'is_plagiarism',
    'compare',
    'compare_files',
    'compare_texts',
    'Document',
    'DocumentLoader',
    'DEFAULT_THRESHOLD',
    'DetectorSettings',
    'load_settings',
    'setup_logging',
    'get_logger',
    'LoggerMixin',
    'ProductionLogger',
    'ValidationError',
    'FileValidationError',
    'InputUnreadableError',
    'ParameterValidationError',
    'FileValidator',
    'ParameterValidator',
    'validate_inputs'
]
