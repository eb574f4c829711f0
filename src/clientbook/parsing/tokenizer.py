"""Prefix-tagged argument tokenizer.

Splits ``1 name/John Doe tag/friend tag/vip`` into a preamble (``1``)
and per-prefix value lists. A prefix only counts at the start of the
argument string or right after whitespace, so ``a/b`` inside a value
is left alone.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from clientbook.parsing.errors import MESSAGE_DUPLICATE_FIELDS, ParseError

PREFIX_NAME = "name/"
PREFIX_PHONE = "phone/"
PREFIX_EMAIL = "email/"
PREFIX_ADDRESS = "address/"
PREFIX_TAG = "tag/"
PREFIX_PREFERENCE = "pref/"
PREFIX_FREQUENCY = "freq/"
PREFIX_PRIORITY = "priority/"


@dataclass
class ArgumentMap:
    """Preamble plus every value seen for each prefix, in input order."""

    preamble: str = ""
    values: dict[str, list[str]] = field(default_factory=dict)

    def has(self, prefix: str) -> bool:
        return prefix in self.values

    def value(self, prefix: str) -> str | None:
        """Last value given for *prefix*, or None if it never appeared."""
        found = self.values.get(prefix)
        return found[-1] if found else None

    def all_values(self, prefix: str) -> list[str]:
        return list(self.values.get(prefix, []))

    def verify_no_duplicates(self, *prefixes: str) -> None:
        """Raise one ParseError naming every single-valued prefix given twice."""
        duplicated = [p for p in prefixes if len(self.values.get(p, [])) > 1]
        if duplicated:
            raise ParseError(MESSAGE_DUPLICATE_FIELDS + " ".join(duplicated))


def tokenize(args: str, *prefixes: str) -> ArgumentMap:
    """Split *args* on the given *prefixes*."""
    if not prefixes:
        return ArgumentMap(preamble=args.strip())

    alternatives = "|".join(re.escape(p) for p in sorted(prefixes, key=len, reverse=True))
    pattern = re.compile(rf"(?:^|(?<=\s))({alternatives})")
    matches = list(pattern.finditer(args))

    result = ArgumentMap()
    if not matches:
        result.preamble = args.strip()
        return result

    result.preamble = args[: matches[0].start()].strip()
    for i, match in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(args)
        value = args[match.end() : end].strip()
        result.values.setdefault(match.group(1), []).append(value)
    return result
