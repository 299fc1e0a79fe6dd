"""Strict http(s) URL pattern used by the built-in hypertext matcher.

Group 1 of ``STRICT_URL_REGEX`` is the URL itself. The surrounding groups
consume one leading non-domain character (or the line start) and one trailing
non-path character (or the line end) so that URLs glued to other words are
not picked up.
"""

from __future__ import annotations

import re

_PROTOCOL = r"(https?:\/\/)"
_DOMAIN_CHARS = r"[\da-z\.-]+"
_NEGATED_DOMAIN_CHARS = r"[^\da-z\.-]+"
_DOMAIN_BODY = "(" + _DOMAIN_CHARS + ")"
_TLD = r"([a-z\.]{2,6})"
_IP = r"((\d{1,3}\.){3}\d{1,3})"
_LOCALHOST = r"(localhost)"
_PORT = r"(:\d{1,5})"
_HOST = "((" + _DOMAIN_BODY + r"\." + _TLD + ")|" + _IP + "|" + _LOCALHOST + ")" + _PORT + "?"
_PATH = r"(\/[\/\w\.\-%~]*)*"
_QUERY_HASH_CHARS = r"[0-9\w\[\]\(\)\/\?\!#@$%&'*+,:;~\=\.\-]*"
_QUERY = r"(\?" + _QUERY_HASH_CHARS + ")?"
_HASH = "(#" + _QUERY_HASH_CHARS + ")?"
_NEGATED_PATH_CHARS = r"[^\/\w\.\-%]+"
_BODY = _HOST + _PATH + _QUERY + _HASH
_START = "(?:^|" + _NEGATED_DOMAIN_CHARS + ")("
_END = ")($|" + _NEGATED_PATH_CHARS + ")"

STRICT_URL_REGEX = re.compile(_START + _PROTOCOL + _BODY + _END)

# Capture group holding the URL in STRICT_URL_REGEX.
STRICT_URL_MATCH_INDEX = 1
