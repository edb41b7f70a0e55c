"""Persistence sink for photo entities."""

import threading

from utils.txt import words


class PhotoStore:
    """Interface the surrounding application implements on top of its database."""

    def save(self, photo):
        raise NotImplementedError

    def index_keywords(self, photo):
        raise NotImplementedError


class MemoryStore(PhotoStore):
    """In-process store keyed by photo uid."""

    def __init__(self):
        self._lock = threading.Lock()
        self._photos = {}
        self._index = {}

    def save(self, photo):
        with self._lock:
            self._photos[photo.uid] = photo.to_dict()

    def index_keywords(self, photo):
        terms = set(words(photo.keywords)) | set(word.lower() for word in photo.subject_keywords())
        with self._lock:
            for uids in self._index.values():
                uids.discard(photo.uid)
            for term in terms:
                self._index.setdefault(term.lower(), set()).add(photo.uid)

    def get(self, uid):
        with self._lock:
            return self._photos.get(uid)

    def search(self, keyword):
        with self._lock:
            return sorted(self._index.get(keyword.lower(), ()))

    def __len__(self):
        return len(self._photos)
