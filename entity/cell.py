"""Resolved photo location."""

UNKNOWN_ID = "zz"
LONG_CITY = 16


class Cell:
    """Place a photo was taken, as resolved by reverse geocoding."""

    __slots__ = ("id", "name", "street", "district", "city", "state", "country")

    def __init__(self, id=UNKNOWN_ID, name="", street="", district="", city="", state="", country=""):
        self.id = id
        self.name = name
        self.street = street
        self.district = district
        self.city = city
        self.state = state
        self.country = country

    @property
    def unknown(self):
        return self.id == UNKNOWN_ID

    def no_city(self):
        return self.city == ""

    def long_city(self):
        return len(self.city) > LONG_CITY

    def no_state(self):
        return self.state == ""

    def to_dict(self):
        return {slot: getattr(self, slot) for slot in self.__slots__}

    @classmethod
    def from_dict(cls, d):
        """Build a resolved cell; without an id it still counts as a known location."""
        fields = {key: value for key, value in d.items() if key in cls.__slots__}
        fields.setdefault("id", "")
        return cls(**fields)

    def __repr__(self):
        return f"Cell({self.id!r}, city={self.city!r}, state={self.state!r})"


UNKNOWN_CELL = Cell()
