"""Text helpers for titles, names and keywords."""

import os
import re

CLIP_LONG_NAME = 300
ELLIPSIS = "…"

_WORD_RE = re.compile(r"[^\W\d_](?:[^\W\d_]|['-])*")
_FILE_SPLIT_RE = re.compile(r"[\W_]+")

# Words in camera file names that never make a good title.
_FILE_STOPWORDS = {
    "img", "image", "dsc", "dscn", "dscf", "dji", "gopr", "pxl", "mvimg",
    "vid", "mov", "pano", "photo", "pic", "sam", "wp", "edited", "copy",
    "jpg", "jpeg", "heic", "png", "raw", "cr2", "nef", "dng", "tif", "tiff",
}

# Lowercase words kept lowercase inside titles.
_SMALL_WORDS = {"a", "an", "and", "as", "at", "by", "for", "in", "of", "on", "or", "the", "to", "with"}


def shorten(s, size, suffix=ELLIPSIS):
    """Clip s to at most size characters, cutting at a word boundary where possible."""
    if len(s) <= size:
        return s
    if size <= len(suffix):
        return s[:size]

    cut = s[:size - len(suffix)]
    if not s[len(cut)].isspace():
        space = cut.rfind(" ")
        if space > size // 2:
            cut = cut[:space]

    return cut.rstrip(" ,;:/-") + suffix


def title(s):
    """Capitalize words; small words stay lowercase unless they come first."""
    result = []
    for i, word in enumerate(s.split()):
        if i > 0 and word.lower() in _SMALL_WORDS:
            result.append(word.lower())
        elif word[:1].islower():
            result.append(word[:1].upper() + word[1:])
        else:
            result.append(word)
    return " ".join(result)


def join_names(names, short=False):
    """Join person names as "A & B" or "A, B & C".

    With short=True first names are used, unless two neighbours share
    the same first name. A family name common to all is added once.
    """
    count = len(names)
    if count == 0:
        return ""
    if count == 1:
        return names[0]

    family_name = ""
    i = names[0].rfind(" ")
    if i > 1 and len(names[0]) - i > 2:
        family_name = names[0][i:]
        if not all(name.endswith(family_name) for name in names[1:]):
            family_name = ""

    if short:
        short_names = [name.split(" ", 1)[0] for name in names]
        for i in range(1, count):
            if short_names[i] == short_names[i - 1]:
                short_names[i - 1], short_names[i] = names[i - 1], names[i]
        names = short_names

    if count == 2:
        result = " & ".join(names)
    else:
        result = f"{', '.join(names[:-1])} & {names[-1]}"

    if family_name and not result.endswith(family_name):
        result += family_name

    return result


def words(s):
    return _WORD_RE.findall(s or "")


def unique_words(items):
    """Lowercase, deduplicate and sort words with at least two characters."""
    return sorted({word.lower() for word in items if len(word) > 1})


def file_title(name):
    """Derive a title from a file name or path, or "" if it carries no words."""
    base = os.path.basename(name.rstrip("/\\"))
    base, ext = os.path.splitext(base)
    if not base and ext:
        base = ext

    parts = []
    for part in _FILE_SPLIT_RE.split(base):
        if not part or part.isdigit():
            continue
        if part.lower() in _FILE_STOPWORDS:
            continue
        if len(part) < 2 or not any(char.isalpha() for char in part):
            continue
        # IMG1234, DSC01234 and similar camera counters.
        if re.fullmatch(r"[A-Za-z]{1,5}\d{3,}", part):
            continue
        parts.append(part)

    result = " ".join(parts)
    if len(result) < 3:
        return ""

    return title(result)


def plural(n, singular, plural_form):
    return f"{n} {singular if n == 1 else plural_form}"
