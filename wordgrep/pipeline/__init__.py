from .core import build_filter, grep_words, rank_words, analyse_corpus

__all__ = ["build_filter", "grep_words", "rank_words", "analyse_corpus"]
