"""Voice phrase to duration parsing."""

import logging
import re
from collections.abc import Sequence

from glass_timer.types import Millis
from glass_timer.units import DEFAULT_UNIT_TABLE, LocalizedUnitTable

logger = logging.getLogger(__name__)

_QUANTITY_PATTERN = re.compile(r"\+?[0-9]+")
_MAX_MILLIS = 2**63 - 1
# Counts longer than this saturate the total for any unit
_MAX_QUANTITY_DIGITS = len(str(_MAX_MILLIS))


def _quantity(token: str, table: LocalizedUnitTable) -> int | None:
    """Read a quantifier token as a count, or None if it is not one."""
    if _QUANTITY_PATTERN.fullmatch(token):
        digits = token.lstrip("+").lstrip("0")
        if len(digits) > _MAX_QUANTITY_DIGITS:
            return _MAX_MILLIS
        return int(digits or "0")
    if table.is_article(token):
        return 1
    return None


def parse_voice_duration(
    utterance: str, table: LocalizedUnitTable = DEFAULT_UNIT_TABLE
) -> Millis:
    """Extract a duration in milliseconds from a spoken phrase.

    Each unit word ("minutes") is quantified by the word right before
    it, either a number ("5 minutes") or an article ("a minute").
    Every unit occurrence adds independently. Words that cannot be
    quantified add nothing, and a phrase with no duration gives 0.

    Args:
        utterance: Recognizer output, words separated by single spaces
        table: Unit words for the utterance's locale

    Returns:
        Total duration in milliseconds
    """
    words = utterance.split(" ")
    total = 0

    # The first word has nothing before it to quantify it
    for i in range(1, len(words)):
        kind = table.classify(words[i])
        if kind is None:
            continue

        count = _quantity(words[i - 1], table)
        if count is None:
            logger.debug("No quantity for %s before %r", kind.name, words[i])
            continue

        total = min(total + count * kind.millis, _MAX_MILLIS)

    logger.debug("Parsed %r as %dms", utterance, total)
    return total


def first_hypothesis_duration(
    hypotheses: Sequence[str] | None, table: LocalizedUnitTable = DEFAULT_UNIT_TABLE
) -> Millis:
    """Parse the best recognizer hypothesis. Returns 0 when there is none."""
    if not hypotheses:
        return 0
    return parse_voice_duration(hypotheses[0], table)
