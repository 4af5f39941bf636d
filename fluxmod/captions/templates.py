"""Caption template catalog."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CaptionTemplate:
    """A caption and the lowercase keywords that make it relevant."""

    text: str
    triggers: frozenset[str] = frozenset()

    def matches(self, normalized_context: str) -> bool:
        return any(trigger in normalized_context for trigger in self.triggers)


# Order matters: it is both the ranking for matched templates and the
# padding order when too few templates match.
DEFAULT_CATALOG: tuple[CaptionTemplate, ...] = (
    CaptionTemplate(
        text="Feeling inspired by today's flow! 🌊",
        triggers=frozenset({"inspir", "flow", "motivat"}),
    ),
    CaptionTemplate(
        text="Where ideas become reality. #FluxApp",
        triggers=frozenset({"idea", "dream", "creat", "imagin"}),
    ),
    CaptionTemplate(
        text="Just another day in the stream of thoughts. ✨",
        triggers=frozenset({"today", "thought", "monday", "routine"}),
    ),
    CaptionTemplate(
        text="Just launched something new. Here's to the next chapter! 🚀",
        triggers=frozenset({"launch", "ship", "release"}),
    ),
    CaptionTemplate(
        text="Grateful for the people who make the journey worth it. 🙏",
        triggers=frozenset({"thank", "grateful", "team", "friend"}),
    ),
    CaptionTemplate(
        text="Sunsets, snapshots, and good vibes only. 🌅",
        triggers=frozenset({"travel", "trip", "sunset", "weekend", "vacation"}),
    ),
)
