"""Localized unit words used to recognize durations in speech."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from glass_timer.types import UnitKind

# Keys of the string resource catalog
_REQUIRED_RESOURCES = ("hour", "minute", "second", "a")
_OPTIONAL_ARTICLES = ("an",)


@dataclass(frozen=True, slots=True)
class LocalizedUnitTable:
    """Unit prefixes and article words for a single locale.

    A token names a unit when it starts with that unit's prefix, so
    "hour" matches both "hour" and "hours". Article words ("a") stand
    in for the quantity one.
    """

    hour_prefix: str
    minute_prefix: str
    second_prefix: str
    article_words: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        for kind in UnitKind:
            if not self.prefix(kind):
                raise ValueError(f"Empty prefix for unit: {kind.name.lower()}")
        # Accept any iterable of words but always store a frozenset
        object.__setattr__(self, "article_words", frozenset(self.article_words))

    def prefix(self, kind: UnitKind) -> str:
        """Return the prefix configured for a unit kind."""
        if kind is UnitKind.HOUR:
            return self.hour_prefix
        if kind is UnitKind.MINUTE:
            return self.minute_prefix
        return self.second_prefix

    def classify(self, token: str) -> UnitKind | None:
        """Return the unit a token names, testing hour, minute, second in order."""
        for kind in UnitKind:
            if token.startswith(self.prefix(kind)):
                return kind
        return None

    def is_article(self, token: str) -> bool:
        """Check if a token is an article meaning one."""
        return token in self.article_words


def unit_table_from_resources(resources: Mapping[str, str]) -> LocalizedUnitTable:
    """
    Build a unit table from a localized string resource catalog.

    Example:
        unit_table_from_resources({
            "hour": "Stunde",
            "minute": "Minute",
            "second": "Sekunde",
            "a": "eine",
        })
    """
    missing = [key for key in _REQUIRED_RESOURCES if not resources.get(key)]
    if missing:
        raise ValueError(f"Missing unit resources: {', '.join(missing)}")

    articles: Iterable[str] = [resources["a"]] + [
        resources[key] for key in _OPTIONAL_ARTICLES if resources.get(key)
    ]
    return LocalizedUnitTable(
        hour_prefix=resources["hour"],
        minute_prefix=resources["minute"],
        second_prefix=resources["second"],
        article_words=frozenset(articles),
    )


DEFAULT_UNIT_TABLE = unit_table_from_resources(
    {"hour": "hour", "minute": "minute", "second": "second", "a": "a"}
)
