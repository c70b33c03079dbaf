from typing import Literal

SourceFormat = Literal["csv", "json"]

_BOM = "\ufeff"


def detect_format(text: str) -> SourceFormat:
    """Classify raw upload text by its first significant character.

    Content beginning with ``{`` or ``[`` is routed to JSON, everything else
    to CSV. This is a sniff, not validation: malformed JSON still goes to
    the JSON decoder.
    """
    head = text.lstrip(_BOM + " \t\r\n")
    if head.startswith(("{", "[")):
        return "json"
    return "csv"
