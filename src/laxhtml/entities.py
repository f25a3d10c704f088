"""HTML character reference (entity) decoding.

Decodes named references (&amp;, &nbsp;) and numeric references (&#60;,
&#x3C;) in attribute values. Unrecognized sequences pass through unchanged.
"""

import html.entities
import re

# Python's complete HTML5 entity table. Keys ending in ";" are the canonical
# forms; the handful listed without a semicolon are the legacy references
# browsers still accept bare (&amp, &lt, &copy ...).
_HTML5_ENTITIES = html.entities.html5

NAMED_ENTITIES = {key[:-1]: value for key, value in _HTML5_ENTITIES.items() if key.endswith(";")}
LEGACY_ENTITIES = {key: value for key, value in _HTML5_ENTITIES.items() if not key.endswith(";")}

# HTML5 numeric character reference replacements
NUMERIC_REPLACEMENTS = {
    0x00: "\ufffd",  # NULL
    0x80: "\u20ac",  # EURO SIGN
    0x82: "\u201a",  # SINGLE LOW-9 QUOTATION MARK
    0x83: "\u0192",  # LATIN SMALL LETTER F WITH HOOK
    0x84: "\u201e",  # DOUBLE LOW-9 QUOTATION MARK
    0x85: "\u2026",  # HORIZONTAL ELLIPSIS
    0x86: "\u2020",  # DAGGER
    0x87: "\u2021",  # DOUBLE DAGGER
    0x88: "\u02c6",  # MODIFIER LETTER CIRCUMFLEX ACCENT
    0x89: "\u2030",  # PER MILLE SIGN
    0x8a: "\u0160",  # LATIN CAPITAL LETTER S WITH CARON
    0x8b: "\u2039",  # SINGLE LEFT-POINTING ANGLE QUOTATION MARK
    0x8c: "\u0152",  # LATIN CAPITAL LIGATURE OE
    0x8e: "\u017d",  # LATIN CAPITAL LETTER Z WITH CARON
    0x91: "\u2018",  # LEFT SINGLE QUOTATION MARK
    0x92: "\u2019",  # RIGHT SINGLE QUOTATION MARK
    0x93: "\u201c",  # LEFT DOUBLE QUOTATION MARK
    0x94: "\u201d",  # RIGHT DOUBLE QUOTATION MARK
    0x95: "\u2022",  # BULLET
    0x96: "\u2013",  # EN DASH
    0x97: "\u2014",  # EM DASH
    0x98: "\u02dc",  # SMALL TILDE
    0x99: "\u2122",  # TRADE MARK SIGN
    0x9a: "\u0161",  # LATIN SMALL LETTER S WITH CARON
    0x9b: "\u203a",  # SINGLE RIGHT-POINTING ANGLE QUOTATION MARK
    0x9c: "\u0153",  # LATIN SMALL LIGATURE OE
    0x9e: "\u017e",  # LATIN SMALL LETTER Z WITH CARON
    0x9f: "\u0178",  # LATIN CAPITAL LETTER Y WITH DIAERESIS
}

_REFERENCE_PATTERN = re.compile(r"&(?:#([xX])([0-9a-fA-F]+)|#([0-9]+)|([A-Za-z][A-Za-z0-9]*))(;?)")


def decode_numeric_entity(digits, is_hex=False):
    """Decode the digits of a numeric reference to a single character.

    Out-of-range code points and surrogates become U+FFFD.
    """
    codepoint = int(digits, 16 if is_hex else 10)
    if codepoint in NUMERIC_REPLACEMENTS:
        return NUMERIC_REPLACEMENTS[codepoint]
    if codepoint > 0x10FFFF or 0xD800 <= codepoint <= 0xDFFF:
        return "\ufffd"
    return chr(codepoint)


def _decode_named(match, text, in_attribute):
    name = match.group(4)
    if match.group(5) and name in NAMED_ENTITIES:
        return NAMED_ENTITIES[name]
    if name not in LEGACY_ENTITIES:
        return match.group(0)
    # Bare legacy reference: in attributes, "&amp=" and friends stay literal
    if in_attribute:
        end = match.end()
        if end < len(text) and text[end] == "=":
            return match.group(0)
    return LEGACY_ENTITIES[name]


def decode_entities(text, in_attribute=True):
    """Decode all character references in ``text``.

    Args:
        text: Raw attribute value (or text run)
        in_attribute: Apply the attribute-value rules for bare legacy names

    Returns:
        Text with references decoded; unknown references are left as written.
    """
    if "&" not in text:
        return text

    def replace(match):
        if match.group(2) is not None:
            return decode_numeric_entity(match.group(2), is_hex=True)
        if match.group(3) is not None:
            return decode_numeric_entity(match.group(3))
        return _decode_named(match, text, in_attribute)

    return _REFERENCE_PATTERN.sub(replace, text)
