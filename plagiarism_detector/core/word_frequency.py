import re
from collections import Counter
from typing import Iterator

# Word separators: ASCII whitespace, the information separators and the
# Unicode space/line/paragraph separators, except the no-break spaces
# (U+00A0, U+2007, U+202F). Those and U+0085 stay inside a token and are
# stripped with the other non-alphanumeric characters.
_WORD_SEPARATORS = re.compile(
    '[\t\n\x0b\x0c\r\x1c-\x1f \u1680\u2000-\u2006\u2008-\u200a\u2028\u2029\u205f\u3000]+'
)

# Applied after lowercasing, so only lowercase letters need to survive
_NON_ALPHANUMERIC = re.compile(r'[^a-z0-9]')


def tokenize(text: str) -> Iterator[str]:
    """
    Yield normalized words from ``text`` in order of appearance.

    Separator-delimited tokens are lowercased and stripped of everything
    except ASCII letters and digits; tokens left empty are skipped.
    """
    for token in _WORD_SEPARATORS.split(text):
        word = _NON_ALPHANUMERIC.sub('', token.lower())
        if word:
            yield word


def build_frequency_map(text: str) -> Counter:
    """Count how often each normalized word occurs in ``text``."""
    return Counter(tokenize(text))
