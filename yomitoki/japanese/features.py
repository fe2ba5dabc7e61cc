"""
Decoding of per-token feature annotations.

MeCab emits one comma-delimited feature string per token. With an
IPADIC-style dictionary the fields are::

    0 part of speech        5 conjugation form
    1 POS subdivision 1     6 base form
    2 POS subdivision 2     7 reading
    3 POS subdivision 3     8 pronunciation
    4 conjugation type

Unknown words usually carry only the first seven fields. The format has
no quoting or escaping, so a plain split is exact. Field 8 is a reading
only in this IPADIC layout: UniDic rows run to 17 fields or more and
hold the written form at index 8.
"""

from typing import List, Optional

# Position of the kana field appended by to_kana.
READING_INDEX = 8

# Fields of a known word in the IPADIC layout.
IPADIC_FIELD_COUNT = 9


def decode_feature(raw: str) -> List[str]:
    """
    Split a feature annotation into its fields.

    Args:
        raw: The comma-delimited feature string of one token.

    Returns:
        List[str]: The fields in order. An empty string yields ``['']``.

    Example:
        >>> decode_feature("名詞,一般,*,*,*,*,*,猫,ネコ")[8]
        'ネコ'
    """
    return raw.split(",")


def reading_of(fields: List[str]) -> Optional[str]:
    """Return the kana field of a decoded feature, or None if absent."""
    if len(fields) > READING_INDEX:
        return fields[READING_INDEX]
    return None


__all__ = ["IPADIC_FIELD_COUNT", "READING_INDEX", "decode_feature", "reading_of"]
