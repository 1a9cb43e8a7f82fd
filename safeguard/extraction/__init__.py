"""
Safeguard Feature Extraction Module
Converts transcripts and audio statistics into the 17-dimensional feature vector
"""

from .lexicon import Lexicon, DEFAULT_LEXICON, tokenize
from .feature_engine import FeatureExtractor
from .acoustic_engine import AcousticEngine
from .linguistic_engine import LinguisticEngine

__all__ = ['FeatureExtractor', 'AcousticEngine', 'LinguisticEngine', 'Lexicon', 'DEFAULT_LEXICON', 'tokenize']
