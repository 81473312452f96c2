from pdfsummary.summarization.base import BaseSummarizer
from pdfsummary.summarization.factory import SummarizerFactory
from pdfsummary.summarization.summarizer import Summarizer

__all__ = ["BaseSummarizer", "Summarizer", "SummarizerFactory"]
