"""Classification labels supplied by the image classifier."""

from utils.txt import words


class Label:
    __slots__ = ("name", "source", "uncertainty", "priority", "categories")

    def __init__(self, name, source="image", uncertainty=0, priority=0, categories=None):
        self.name = name
        self.source = source
        self.uncertainty = uncertainty
        self.priority = priority
        self.categories = list(categories or [])

    @classmethod
    def from_dict(cls, d):
        return cls(
            d["name"],
            source=d.get("source", "image"),
            uncertainty=d.get("uncertainty", 0),
            priority=d.get("priority", 0),
            categories=d.get("categories"),
        )


class Labels(list):
    """Labels ordered by relevance, best first."""

    def sort_by_relevance(self):
        self.sort(key=lambda label: (-label.priority, label.uncertainty))
        return self

    def keywords(self):
        """Words of confident labels and their categories."""
        result = []
        for label in self:
            if label.uncertainty >= 100:
                continue
            result.extend(word.lower() for word in words(label.name))
            for category in label.categories:
                result.extend(word.lower() for word in words(category))
        return result
