"""
hebo-eval Core Package

Evaluates AI agents against expected conversation transcripts.

Architecture:
- Domain: assertion grammar, n-gram / LCS / ROUGE similarity, scoring
- Application: evaluation use case with bounded concurrency
- Infrastructure: transcript loader, HTTP agents, reporting, factories
- Presentation: the hebo-eval CLI
"""

__version__ = "0.7.0"
