"""Text substitution helpers for formula files."""

import re


def replace_first(pattern: re.Pattern[str], string: str, template: str) -> str:
    """Replace only the first match of a pattern.

    Args:
        pattern: Compiled regular expression
        string: Text to patch
        template: Replacement template; may reference groups as ``\\g<n>``

    Returns:
        The text with the first match replaced, or the unchanged text if
        nothing matched

    """
    return pattern.sub(template, string, count=1)


def escape_replacement(value: str) -> str:
    """Escape a literal value for use inside a replacement template."""
    return value.replace("\\", "\\\\")


def expand_placeholders(template: str, values: dict[str, str]) -> str:
    """Substitute ``#{key}`` placeholders with literal values.

    Example:
        >>> expand_placeholders("v#{version}.tgz", {"version": "1.2.0"})
        'v1.2.0.tgz'

    """
    for key, value in values.items():
        template = template.replace(f"#{{{key}}}", value)
    return template
