"""Recognition of path-prefix routing rules.

Only the single-literal form ``PathPrefix(`/foo`)`` is understood. Backtick,
single and double quotes are accepted as long as both sides match.
"""

import re

PATH_PREFIX_RULE = re.compile(r"""^PathPrefix\(\s*([`'"])(.*)\1\s*\)$""")


def parse_path_prefix(rule: str) -> str | None:
    """Return the literal of a single path-prefix rule, or None for any other shape."""
    match = PATH_PREFIX_RULE.match(rule.strip())
    if match is None:
        return None
    prefix = match.group(2)
    quote = match.group(1)
    # A quote of the same kind inside means several literals, e.g. PathPrefix(`/a`, `/b`)
    if quote in prefix:
        return None
    return prefix
