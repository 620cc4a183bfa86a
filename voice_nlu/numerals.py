"""
Spelled-out number conversion.

Runs of number words ("twenty-one", "vingt et un", "zweihundert fünfzig",
"one hundred and five") are collapsed into digit strings. A run is split
wherever the next word cannot extend the number, so "two three" stays two
numbers and "sixty ten" is not accepted in English.

Articles ("a", "un", "ein") are only read as one inside a compound that the
language allows ("vingt et un"), before a multiplier ("a hundred") or before
one of the article nouns ("a dozen"); everywhere else they are left alone.

Dish and drink names built from number words ("mille-feuille", "pizza
quattro stagioni", "thousand island") are listed per language as numeral
idioms and never converted.
"""

import re
from typing import List, Optional, Tuple

from .lexicon import LexiconTables
from .matching import compile_alternation


class _Number:
    """Accumulator for one spoken number."""

    def __init__(self):
        self.total = 0      # thousands part
        self.group = 0      # hundreds part
        self.small = 0      # below the last multiplier
        self.last: Optional[int] = None
        self.after_multiplier = False

    @property
    def value(self) -> int:
        return self.total + self.group + self.small


class NumeralConverter:
    """Converts number words to digits for one language variant."""

    def __init__(self, tables: LexiconTables):
        self.units = dict(tables.number_units)
        self.multipliers = dict(tables.number_multipliers)
        self.articles = dict(tables.number_articles)
        self.article_nouns = tables.article_nouns
        self.connectors = dict(tables.number_connectors)
        self.compound_teens = tables.compound_teens
        self._idioms = compile_alternation(tables.numeral_idioms)

        vocabulary = (
            list(self.units) + list(self.multipliers) + list(self.articles) + list(self.connectors)
        )
        self._token = compile_alternation(vocabulary, whole_word=True)
        if self._token is None:
            self._run = None
            return
        word = self._token.pattern
        self._run = re.compile(rf"{word}(?:[\s-]+{word})*", re.IGNORECASE)
        self._next_word = re.compile(r"[\s-]+(\w+)")

    # -------------------------------------------------------------------------
    # Rules
    # -------------------------------------------------------------------------

    def _can_add(self, last: Optional[int], value: int) -> bool:
        if last is None:
            return True
        if last >= 100:
            return value < last
        if last >= 20 and last % 10 == 0:
            return value < (20 if self.compound_teens else 10)
        if last == 10 and self.compound_teens:
            return value < 10
        return False

    def _connector_allowed(self, connector: str, number: Optional[_Number], following: Optional[str]) -> bool:
        if number is None or following is None:
            return False
        rule = self.connectors[connector]
        after = rule.get("after")
        if after == "multiplier" and not number.after_multiplier:
            return False
        if after == "tens":
            last = number.last
            if last is None or not (20 <= last < 100 and last % 10 == 0):
                return False
        before = rule.get("before")
        if before is not None:
            return following in before
        value = self.units.get(following)
        if value is None and self.articles.get(following):
            value = 1
        return value is not None and self._can_add(number.last, value)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def convert(self, text: str) -> str:
        if not text or self._run is None:
            return text
        if self._idioms is None:
            return self._convert_span(text)
        # names such as "mille-feuille" or "quattro stagioni" keep their words
        pieces = []
        position = 0
        for idiom in self._idioms.finditer(text):
            pieces.append(self._convert_span(text[position:idiom.start()]))
            pieces.append(idiom.group(0))
            position = idiom.end()
        pieces.append(self._convert_span(text[position:]))
        return "".join(pieces)

    def _convert_span(self, text: str) -> str:
        pieces = []
        position = 0
        for run in self._run.finditer(text):
            pieces.append(text[position:run.start()])
            following = self._next_word.match(text, run.end())
            next_word = following.group(1).lower() if following else None
            pieces.append(self._convert_run(run.group(0), next_word))
            position = run.end()
        pieces.append(text[position:])
        return "".join(pieces)

    def _split(self, run: str) -> Tuple[List[str], List[str]]:
        tokens, separators = [], []
        position = 0
        for match in self._token.finditer(run):
            separators.append(run[position:match.start()])
            tokens.append(match.group(0))
            position = match.end()
        return tokens, separators

    def _convert_run(self, run: str, next_word: Optional[str]) -> str:
        tokens, separators = self._split(run)
        lowered = [token.lower() for token in tokens]
        # (first token index, text) of each output piece
        output: List[Tuple[int, str]] = []
        number: Optional[_Number] = None
        start = 0

        def flush():
            nonlocal number
            if number is not None:
                output.append((start, str(number.value)))
                number = None

        def begin(index):
            nonlocal number, start
            flush()
            number = _Number()
            start = index

        for index, word in enumerate(lowered):
            following = lowered[index + 1] if index + 1 < len(lowered) else None

            if word in self.units:
                value = self.units[word]
                if number is None or not self._can_add(number.last, value):
                    begin(index)
                number.small += value
                number.last = value
                number.after_multiplier = False

            elif word in self.multipliers:
                factor = self.multipliers[word]
                if factor < 1000:
                    if number is None or number.group or number.small >= 100:
                        begin(index)
                    number.group += (number.small or 1) * factor
                    number.small = 0
                else:
                    if number is None or number.total:
                        begin(index)
                    number.total = (number.group + number.small or 1) * factor
                    number.group = number.small = 0
                number.last = factor
                number.after_multiplier = True

            elif word in self.articles:
                if (
                    self.articles[word]
                    and number is not None
                    and self._can_add(number.last, 1)
                ):
                    number.small += 1
                    number.last = 1
                    number.after_multiplier = False
                elif following in self.multipliers:
                    begin(index)
                    number.small = 1
                    number.last = None
                elif following is None and next_word in self.article_nouns:
                    flush()
                    output.append((index, "1"))
                else:
                    flush()
                    output.append((index, tokens[index]))

            else:  # connector
                if not self._connector_allowed(word, number, following):
                    flush()
                    output.append((index, tokens[index]))

        flush()

        result = []
        for position, (index, piece) in enumerate(output):
            if position:
                result.append(separators[index])
            result.append(piece)
        return "".join(result)
