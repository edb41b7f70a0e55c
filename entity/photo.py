"""Photo entity and its title and description heuristics."""

import os
import time
from datetime import datetime, timezone

from core.errors import PhotoError, TitleKeptError
from entity.cell import Cell
from entity.labels import Label, Labels
from entity.src import SRC_AUTO, src_priority, src_string
from internal.logging import get_logger
from rnd import generate_uid, is_uid
from utils import fs, txt

PHOTO_UID_PREFIX = "p"

_TITLE_TRIM = "_&|{}<>: \n\r\t\\"


class Photo:
    """A photo record. Persistence is left to a PhotoStore."""

    def __init__(self, name, uid="", original_name="", title="", title_src=SRC_AUTO,
                 description="", description_src=SRC_AUTO, taken_at=None, taken_at_local=None,
                 taken_src=SRC_AUTO, cell=None, subjects=None, labels=None, keywords=""):
        self.uid = uid or generate_uid(PHOTO_UID_PREFIX)
        self.name = name
        self.original_name = original_name
        self.title = title
        self.title_src = title_src
        self.description = description
        self.description_src = description_src
        self.taken_at = taken_at or datetime.now(timezone.utc)
        self.taken_at_local = taken_at_local
        self.taken_src = taken_src
        self.cell = cell
        self.subjects = list(subjects or [])
        self.labels = Labels(labels or [])
        self.keywords = keywords
        self._log = get_logger()

    def __str__(self):
        return self.uid if is_uid(self.uid) else repr(self.name)

    def has_id(self):
        return is_uid(self.uid, PHOTO_UID_PREFIX)

    def has_title(self):
        return self.title != ""

    def no_title(self):
        return self.title == ""

    def location_loaded(self):
        return self.cell is not None and not self.cell.unknown

    def year(self):
        return self.taken_at.strftime("%Y")

    def subject_names(self):
        return list(self.subjects)

    def subject_keywords(self):
        return txt.words(" ".join(self.subjects))

    def set_title(self, title, source):
        """Change the title unless a higher priority source already set one."""
        title = title.strip(_TITLE_TRIM).replace('"', "'")
        title = txt.shorten(title, txt.CLIP_LONG_NAME)

        if title == "":
            return

        if src_priority(source) < src_priority(self.title_src) and self.has_title():
            return

        self.title = title
        self.title_src = source

    def update_title(self, labels):
        """Update the title based on people, location, labels and file name."""
        if self.title_src != SRC_AUTO and self.has_title():
            raise TitleKeptError(f"photo: {self} keeps existing {src_string(self.title_src)} title", uid=self.uid)

        names = ""
        start = time.monotonic()
        old_title = self.title
        file_title = self.file_title()

        people = self.subject_names()
        self.update_description(people)
        if 0 < len(people) < 4:
            names = txt.join_names(people, short=True)
            self._log.debug(f"photo: {self} title based on {txt.plural(len(people), 'person', 'people')}", names=names)

        self._update_title_by_location_and_names(names)

        if self.no_title():
            if names:
                if len(names) <= 35 and self.taken_src != SRC_AUTO:
                    self.set_title(f"{names} / {self.year()}", SRC_AUTO)
                else:
                    self.set_title(names, SRC_AUTO)
            elif not file_title and labels and labels[0].priority >= -1 and labels[0].uncertainty <= 85 and labels[0].name:
                if self.taken_src != SRC_AUTO:
                    self.set_title(f"{txt.title(labels[0].name)} / {self.year()}", SRC_AUTO)
                else:
                    self.set_title(txt.title(labels[0].name), SRC_AUTO)
            elif file_title and byte_len(file_title) <= 20 and self.taken_at_local is not None and self.taken_src != SRC_AUTO:
                self.set_title(f"{file_title} / {self.taken_at_local.strftime('%Y')}", SRC_AUTO)
            elif file_title:
                self.set_title(file_title, SRC_AUTO)
            elif self.taken_src != SRC_AUTO:
                self.set_title(f"{self.name} / {self.year()}", SRC_AUTO)
            else:
                self.set_title(self.name, SRC_AUTO)

        if self.title != old_title:
            self._log.debug(f"photo: {self} has new title", title=self.title,
                            elapsed_ms=round((time.monotonic() - start) * 1000, 3))

    def _update_title_by_location_and_names(self, names):
        if not self.location_loaded():
            return
        loc = self.cell

        if not names:
            self._update_title_by_location()
        elif len(names) > 35:
            self.set_title(names, SRC_AUTO)
        elif len(names) > 20 and (loc.no_city() or loc.long_city()):
            self.set_title(f"{names} / {self.year()}", SRC_AUTO)
        elif len(names) > 20:
            self.set_title(f"{names} / {loc.city}", SRC_AUTO)
        elif not loc.no_city() and not loc.long_city():
            self.set_title(f"{names} / {loc.city} / {self.year()}", SRC_AUTO)
        elif not loc.no_state():
            self.set_title(f"{names} / {loc.state} / {self.year()}", SRC_AUTO)
        else:
            self.set_title(f"{names} / {self.year()}", SRC_AUTO)

        self._log.debug(f"photo: {self} title based on location", title=self.title, cell=repr(loc))

    def _update_title_by_location(self):
        loc = self.cell
        components = [c for c in (loc.state, loc.city, loc.district, loc.street, loc.name) if c]

        if len(components) > 3 and byte_len(components[-1]) > 24:
            components = components[:-1]

        components = unique_title_components(components)

        if len(components) > 3:
            components = components[1:]

        components.append(self.year())
        self.set_title(" / ".join(components), SRC_AUTO)

    def update_description(self, people):
        """List people in the description when there are too many for the title."""
        if self.description_src != SRC_AUTO:
            return

        if len(people) > 3:
            self.description = txt.join_names(people, short=False)
        else:
            self.description = ""

    def file_title(self):
        """Title based on the file name and/or path, or ""."""
        if not fs.is_generated(self.name):
            title = txt.file_title(self.name)
            if title:
                return title

        if self.original_name:
            title = txt.file_title(self.original_name)
            if title and not fs.is_generated(self.original_name):
                return title

            title = txt.file_title(os.path.dirname(self.original_name))
            if title:
                return title

        return ""

    def update_and_save_title(self, store):
        """Update title and keywords, then save the photo to the store."""
        if not self.has_id():
            raise PhotoError("cannot save photo without id", uid=self.uid)

        labels = self.labels.sort_by_relevance()

        try:
            self.update_title(labels)
        except TitleKeptError as exc:
            self._log.info(str(exc))

        keywords = txt.unique_words(txt.words(self.keywords))
        keywords.extend(labels.keywords())
        self.keywords = ", ".join(txt.unique_words(keywords))

        try:
            store.index_keywords(self)
        except Exception as exc:
            self._log.error(f"photo: {self} keyword index failed", error=exc)

        store.save(self)

    def to_dict(self):
        return {
            "uid": self.uid,
            "name": self.name,
            "original_name": self.original_name,
            "title": self.title,
            "title_src": src_string(self.title_src),
            "description": self.description,
            "taken_at": self.taken_at.isoformat(),
            "keywords": self.keywords,
            "cell": self.cell.to_dict() if self.cell else None,
        }

    @classmethod
    def from_dict(cls, d):
        """Build a photo from JSON metadata, as posted to the title endpoint."""
        cell = d.get("cell")
        return cls(
            d["name"],
            uid=d.get("uid", ""),
            original_name=d.get("original_name", ""),
            title=d.get("title", ""),
            title_src=d.get("title_src", SRC_AUTO),
            description=d.get("description", ""),
            description_src=d.get("description_src", SRC_AUTO),
            taken_at=_parse_time(d.get("taken_at")),
            taken_at_local=_parse_time(d.get("taken_at_local")),
            taken_src=d.get("taken_src", SRC_AUTO),
            cell=Cell.from_dict(cell) if cell else None,
            subjects=d.get("subjects"),
            labels=[Label.from_dict(label) for label in d.get("labels", [])],
            keywords=d.get("keywords", ""),
        )


def byte_len(s):
    """UTF-8 length; file titles and place names are limited in bytes."""
    return len(s.encode("utf-8"))


def unique_title_components(components):
    """Drop repeated components and components contained in another one."""
    components = list(dict.fromkeys(components))
    result = []
    for i, short in enumerate(components):
        if not any(i != j and short in long for j, long in enumerate(components)):
            result.append(short)
    return result


def _parse_time(value):
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
