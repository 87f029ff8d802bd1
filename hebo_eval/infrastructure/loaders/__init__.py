"""Test case loaders."""

from .test_case_loader import TestCaseLoader, TranscriptTokenizer, TranscriptElement, LoadResult

__all__ = [
    'TestCaseLoader',
    'TranscriptTokenizer',
    'TranscriptElement',
    'LoadResult',
]
