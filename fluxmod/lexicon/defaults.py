"""Built-in term lists, in the same shape as a YAML lexicon file."""

from __future__ import annotations

DEFAULT_LEXICON_DATA: dict = {
    "version": "1.0.0",
    "moderation": {
        "spam": ["spam", "scam", "banned_word"],
        "profanity": ["fuck", "shit", "bitch", "asshole", "bastard", "cunt"],
        "hate_speech": ["subhuman", "kill yourself"],
        "violence": ["i will kill you", "shoot you", "bomb threat"],
    },
    "sentiment": {
        "positive": ["great", "awesome", "amazing", "love", "excellent", "fantastic"],
        "negative": ["bad", "terrible", "hate", "awful", "horrible", "worst"],
    },
}
