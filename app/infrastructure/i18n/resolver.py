"""Message resolution: key lookup, plural selection and interpolation.

Templates use ":name" placeholders and an optional pipe-separated plural
grammar:

    "apple|apples"                        singular / plural
    "{0} none|{1} one|[2,*] :count many"  exact and range markers

resolve() never raises for missing keys or missing placeholder values; the
key or the literal ":name" token stays visible in the output instead.
"""

import math
import re
from decimal import Decimal
from typing import Any, List, Optional, Tuple, Union

from infrastructure.i18n.models import (
    Catalog,
    NoVariables,
    ScalarVariable,
    VariableMap,
    Variables,
    as_variables,
    is_number,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

Count = Union[int, float, Decimal]

PLACEHOLDER_PATTERN = re.compile(r":([A-Za-z0-9_]+)")
MARKER_PATTERN = re.compile(r"^\s*(?:\{(\d+)\}|\[(\d+),(\d+|\*)\])")
PLURAL_SEPARATOR = "|"


def format_value(value: Any) -> str:
    """Render a substituted value as text.

    Numbers use their plain decimal form ("3", not "3.0"; no exponent).
    """
    if is_number(value):
        if isinstance(value, float) and math.isfinite(value):
            if value.is_integer():
                return str(int(value))
            return format(Decimal(repr(value)), "f")
        if isinstance(value, Decimal):
            return format(value, "f")
    return str(value)


def first_placeholder(template: str) -> Optional[str]:
    """Return the name of the first placeholder in a template, if any."""
    match = PLACEHOLDER_PATTERN.search(template)
    return match.group(1) if match else None


def _parse_variant(segment: str) -> Tuple[Optional[Tuple[int, Optional[int]]], str]:
    """Split a plural variant into its (low, high) marker and its text.

    Exact markers "{N}" become (N, N); "[A,*]" becomes (A, None).
    """
    match = MARKER_PATTERN.match(segment)
    if not match:
        return None, segment.strip()

    exact, start, end = match.groups()
    text = segment[match.end() :].strip()
    if exact is not None:
        return (int(exact), int(exact)), text
    return (int(start), None if end == "*" else int(end)), text


def select_plural(template: str, count: Count) -> str:
    """Select the plural variant of a template for a count.

    The first variant whose marker matches wins. A two-variant template
    without markers is a plain singular/plural pair. Otherwise the last
    variant is used.

    Args:
        template: Template containing "|"-separated variants.
        count: Count used for selection.

    Returns:
        Selected variant with its marker stripped and whitespace trimmed.
    """
    variants = [_parse_variant(segment) for segment in template.split(PLURAL_SEPARATOR)]

    if not any(marker for marker, _ in variants):
        if len(variants) == 2:
            return variants[0][1] if count == 1 else variants[1][1]
        return variants[-1][1]

    for marker, text in variants:
        if marker is None:
            continue
        low, high = marker
        if count >= low and (high is None or count <= high):
            return text
    return variants[-1][1]


def _bind_shorthand(
    template: str, variables: Variables, count: Optional[Count]
) -> Tuple[Variables, Optional[Count]]:
    """Bind a bare scalar to the first placeholder of the template.

    A numeric scalar given without a count also becomes the count.
    """
    match variables:
        case ScalarVariable(value=value):
            if count is None:
                if not is_number(value):
                    return variables, count
                count = value
            name = first_placeholder(template)
            if name is None:
                return variables, count
            return VariableMap(values={name: value}), count
        case VariableMap() | NoVariables():
            return variables, count


def interpolate(
    template: str,
    variables: Variables,
    count: Optional[Count] = None,
    key: str = "",
) -> str:
    """Substitute ":name" placeholders in a template.

    Args:
        template: Template text.
        variables: Normalized variables.
        count: Optional count, used for ":count" when no variable supplies it.
        key: Translation key (for diagnostics only).

    Returns:
        Interpolated text. Unresolved placeholders are kept literally.
    """
    missing: List[str] = []

    def replace(token: "re.Match[str]") -> str:
        name = token.group(1)
        match variables:
            case VariableMap(values=values) if name in values:
                return format_value(values[name])
            case ScalarVariable(value=value):
                return format_value(value)
            case VariableMap() | NoVariables():
                pass
        if name == "count" and count is not None:
            return format_value(count)
        missing.append(name)
        return token.group(0)

    result = PLACEHOLDER_PATTERN.sub(replace, template)
    for name in missing:
        logger.warning("missing_placeholder_value", placeholder=name, key=key)
    return result


def resolve(
    catalog: Optional[Catalog],
    key: str,
    variables: Any = None,
    count: Optional[Count] = None,
) -> str:
    """Resolve a dotted key into a rendered message.

    Args:
        catalog: Catalog to look the key up in (None behaves as empty).
        key: Dotted key (e.g., "auth.failed").
        variables: Mapping of placeholder values, a single scalar, or None.
        count: Optional count driving plural selection.

    Returns:
        Rendered message, or the key itself when no template exists.
    """
    template = catalog.get(key) if catalog is not None else None
    if template is None:
        logger.debug("translation_key_missing", key=key)
        return key

    normalized, count = _bind_shorthand(template, as_variables(variables), count)

    if count is not None and PLURAL_SEPARATOR in template:
        template = select_plural(template, count)

    return interpolate(template, normalized, count, key=key)
