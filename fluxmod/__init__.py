"""fluxmod — rule-based text classification for the Flux social platform.

Moderation (banned-term matching), sentiment (polarity word scoring) and
caption suggestions, backed by an immutable lexicon snapshot.
"""

__version__ = "0.1.0"
