"""
Token linkification for a single line of text.

Rewrites emails, absolute URLs, www-prefixed URLs and bare domains into
markdown link syntax. Passes run in a fixed order and each one re-scans
the line produced by the previous pass. Text already inside a markdown
link is never rewritten again.
"""

import re


# Existing markdown links: [label](target)
LINK_RE = re.compile(r"\[[^\]\n]*\]\([^)\s]*\)")

PATTERNS = {
    "email": re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}"),
    "url": re.compile(r"https?://[^\s\]]+"),
    "www": re.compile(r"\bwww\.[^\s\]]+"),
    # label.tld or label.tld.tld (e.g. example.co.uk), never right after "@"
    "domain": re.compile(r"(?<!@)\b[A-Za-z0-9-]+\.[A-Za-z]{2,}(?:\.[A-Za-z]{2,})?\b"),
}


def linkify(line: str) -> str:
    """
    Rewrite every recognizable token in a line into a markdown link.

    Args:
        line: One raw line of input (no newline characters).

    Returns:
        The line with emails, URLs and domains wrapped as markdown links.
    """
    line = linkify_emails(line)
    line = linkify_urls(line)
    line = linkify_www(line)
    return linkify_domains(line)


def linkify_emails(line: str) -> str:
    return _sub_outside_links(
        PATTERNS["email"],
        lambda m: f"[{m.group(0)}](mailto:{m.group(0)})",
        line,
    )


def linkify_urls(line: str) -> str:
    return _sub_outside_links(
        PATTERNS["url"],
        lambda m: f"[{m.group(0)}]({m.group(0)})",
        line,
    )


def linkify_www(line: str) -> str:
    return _sub_outside_links(
        PATTERNS["www"],
        lambda m: f"[{m.group(0)}](http://{m.group(0)})",
        line,
    )


def linkify_domains(line: str) -> str:
    """
    Wrap bare domains such as ``example.com`` as ``http://`` links.

    A domain is left alone when the line already contains it as ``[domain]``
    or ``@domain`` anywhere. This is a plain substring check over the whole
    line, so a second bare copy of an already-linked domain stays bare too.
    """
    def _replace(match):
        domain = match.group(0)
        if f"[{domain}]" in line or f"@{domain}" in line:
            return domain
        return f"[{domain}](http://{domain})"

    return _sub_outside_links(PATTERNS["domain"], _replace, line)


def _sub_outside_links(pattern, repl, line: str) -> str:
    """Apply ``pattern.sub`` only to the parts of ``line`` outside markdown links."""
    parts = []
    last = 0
    for link in LINK_RE.finditer(line):
        parts.append(pattern.sub(repl, line[last:link.start()]))
        parts.append(link.group(0))
        last = link.end()
    parts.append(pattern.sub(repl, line[last:]))
    return "".join(parts)
