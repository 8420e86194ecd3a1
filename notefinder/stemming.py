"""Paice/Husk stemmer with a default rule set for English."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable

_RULE_RE = re.compile(r"[a-zA-Z]*\*?[0-9][a-zA-z]*[.>]")
_SUFFIX_RE = re.compile(r"[a-zA-Z]+")
_DIGIT_RE = re.compile(r"[0-9]")
_APPEND_RE = re.compile(r"[0-9][a-zA-Z]+")

_VOWELS = frozenset("AEIOUaeiou")

DEFAULT_RULES = """
ai*2.
a*1.
bb1.
city3s.
ci2>
cn1t>
dd1.
dei3y>
deec2ss.
dee1.
de2>
dooh4>
e1>
feil1v.
fi2>
gni3>
gai3y.
ga2>
gg1.
ht*2.
hsiug5ct.
hsi3>
i*1.
i1y>
ji1d.
juf1s.
ju1d.
jo1d.
jeh1r.
jrev1t.
jsim2t.
jn1d.
j1s.
lbaifi6.
lbai4y.
lba3>
lbi3.
lib2l>
lc1.
lufi4y.
luf3>
lu2.
lai3>
lau3>
la2>
ll1.
mui3.
mu*2.
msi3>
mm1.
nois4j>
noix4ct.
noi3>
nai3>
na2>
nee0.
ne2>
nn1.
pihs4>
pp1.
re2>
rae0.
ra2.
ro2>
ru2>
rr1.
rt1>
rei3y>
sei3y>
sis2.
si2>
ssen4>
ss0.
suo3>
su*2.
s*1>
s0.
tacilp4y.
ta2>
tnem4>
tne3>
tna3>
tpir2b.
tpro2b.
tcud1.
tpmus2.
tpec2iv.
tulo2v.
tsis0.
tsi3>
tt1.
uqi3.
ugo1.
vis3j>
vie0.
vi2>
ylb1>
yli3y>
ylp0.
yl2>
ygo1.
yhp1.
ymo1.
ypo1.
yti3>
yte3>
ytl2.
yrtsi5.
yra3>
yro3>
yfi3.
ycn2t>
yca3>
zi2>
zy1s.
end0.
"""


@dataclass(frozen=True)
class Rule:
    """One stemming rule.

    ``suffix`` is stored reversed, as written in the rule text.
    """

    suffix: str
    intact: bool
    strip: int
    append: str
    cont: bool


def valid_rule(text: str) -> str | None:
    """Return the first rule found in ``text``, or None."""
    match = _RULE_RE.search(text)
    if match is None or not match.group(0):
        return None
    return match.group(0)


def parse_rule(text: str) -> Rule | None:
    """Parse a rule such as ``nois4j>``; return None if there is none."""
    rule_text = valid_rule(text)
    if rule_text is None:
        return None
    suffix_match = _SUFFIX_RE.search(rule_text)
    append_match = _APPEND_RE.search(rule_text)
    return Rule(
        suffix=suffix_match.group(0) if suffix_match else "",
        intact="*" in rule_text,
        strip=int(_DIGIT_RE.search(rule_text).group(0)),
        append=append_match.group(0)[1:] if append_match else "",
        cont=rule_text.endswith(">"),
    )


def _is_consonant(word: str, offset: int) -> bool:
    negate = False
    while True:
        ch = word[offset]
        if ch in _VOWELS:
            result = False
        elif ch in "yY":
            if offset == 0:
                result = True
            else:
                # 'y' is a consonant exactly when the letter before it is not.
                negate = not negate
                offset -= 1
                continue
        else:
            result = True
        return result != negate


def _has_vowel(word: str) -> bool:
    return any(not _is_consonant(word, i) for i in range(len(word)))


def valid_stem(word: str) -> bool:
    """Check the Paice/Husk acceptability condition for a stem."""
    if not _has_vowel(word):
        return False
    if len(word) >= 3:
        return True
    if not _is_consonant(word, 0):
        return len(word) > 1 and _is_consonant(word, 1)
    return False


class RuleTable:
    """Rules grouped by the last letter of the suffix they act on."""

    def __init__(self, lines: Iterable[str]) -> None:
        self.table: dict[str, list[Rule]] = {}
        for line in lines:
            rule = parse_rule(line)
            if rule is None:
                continue
            if not rule.suffix:
                raise ValueError(f"rule without a suffix: {line!r}")
            self.table.setdefault(rule.suffix[0], []).append(rule)

    def stem(self, word: str) -> str:
        """Return the stem of ``word``, lower-cased."""
        stem = word.lower()
        if len(stem) <= 3:
            return stem

        intact = True
        cont = True
        while cont:
            rules = self.table.get(stem[-1])
            if rules is None:
                break
            current = stem
            for rule in rules:
                if len(stem) <= len(rule.suffix):
                    continue
                if not stem.endswith(rule.suffix[::-1]):
                    continue
                if rule.strip == 0:
                    break
                if rule.intact and not intact:
                    continue
                candidate = stem[: len(stem) - rule.strip] + rule.append
                if not valid_stem(candidate):
                    continue
                cont = rule.cont
                current = candidate
                intact = False
                break
            if current == stem:
                break
            stem = current
        return stem


@lru_cache(maxsize=None)
def default_rule_table() -> RuleTable:
    """Return the shared rule table built from the default English rules."""
    return RuleTable(DEFAULT_RULES.split("\n"))