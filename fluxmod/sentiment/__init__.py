"""Polarity-lexicon sentiment scoring."""
