"""String helpers: slug generation and template formatting."""

import re
from collections.abc import Mapping
from typing import Any, Optional

from ..errors import ConfigurationError, StructureTypeError, TemplateKeyError
from ..policies import ErrorPolicy, resolve_policy

# {name} or {}; names are letters, digits, '_' and '$'
PLACEHOLDER_PATTERN = re.compile(r"\{[a-zA-Z_$]?[0-9a-zA-Z_$]*\}")


def slugify(text: str, strict: bool = False, policy: Optional[ErrorPolicy] = None) -> str:
    """Slugify a string.

    Spaces become dashes, the first dot is removed, and the result is
    lowercased. Nothing else is touched.

    Args:
        text: Text to slugify
        strict: Raise StructureTypeError for non-string input
        policy: Explicit error policy (overrides ``strict``)

    Returns:
        The slug; ``""`` for non-string input in permissive mode

    Example:
        >>> slugify("Release Notes v1.2.3")
        'release-notes-v12.3'
    """
    if not isinstance(text, str):
        error = StructureTypeError(f"slugify expects a string, got {type(text).__name__}")
        return resolve_policy(policy, strict).handle(error, "slugify", text, "")
    return text.replace(" ", "-").replace(".", "", 1).lower()


def format_template(template: str, *args: Any, strict: bool = False,
                    policy: Optional[ErrorPolicy] = None, **kwargs: Any) -> str:
    """Format a string with given parameters.

    Placeholders are ``{}`` or ``{name}``. Two calling conventions exist and
    cannot be mixed in one call:

    - named: a single mapping argument, or keyword arguments; each
      ``{name}`` is looked up by name (``{}`` looks up the empty name).
      A single list or tuple argument is named too, looked up by
      numeric placeholder: ``format_template("{1}{0}", ["a", "b"])``
      gives ``"ba"``
    - positional: any other positional arguments; every placeholder,
      named or not, consumes the next value in order

    A missing value, or ``None``, is substituted with an empty string.

    Args:
        template: The template to format
        *args: Positional values, or a single mapping or sequence of named values
        strict: Raise TemplateKeyError for missing values
        policy: Explicit error policy (overrides ``strict``)
        **kwargs: Named values

    Returns:
        The formatted string

    Raises:
        ConfigurationError: If positional and keyword values are both given

    Example:
        >>> format_template("Other {} are {}", "people", "good plumbers")
        'Other people are good plumbers'
        >>> format_template("/{categ}/{isbn}", {"categ": "books", "isbn": "034038204X"})
        '/books/034038204X'
    """
    policy = resolve_policy(policy, strict)

    if args and kwargs:
        raise ConfigurationError(
            "format_template takes positional values or named values, not both"
        )

    if kwargs:
        named: Optional[Mapping] = kwargs
    elif len(args) == 1 and isinstance(args[0], Mapping):
        named = args[0]
    elif len(args) == 1 and isinstance(args[0], (list, tuple)):
        named = {str(index): value for index, value in enumerate(args[0])}
    else:
        named = None

    if named is not None:
        def substitute(match):
            name = match.group(0)[1:-1]
            value = named.get(name)
            if value is None:
                return policy.handle(TemplateKeyError(name), "format", template, "")
            return str(value)
    else:
        remaining = iter(args)

        def substitute(match):
            value = next(remaining, None)
            if value is None:
                return policy.handle(TemplateKeyError(match.group(0)[1:-1]), "format", template, "")
            return str(value)

    return PLACEHOLDER_PATTERN.sub(substitute, template)
