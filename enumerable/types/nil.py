from __future__ import annotations


class NilType:
    """The empty placeholder: returned by find on no match and used by zip to pad short sequences."""

    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "nil"
    def __bool__(self): return False
    def __len__(self): return 0

    def __hash__(self):
        return hash(NilType)

    # Comparisons: Nil sorts before everything else, and is equal only to Nil
    def __eq__(self, other):
        return isinstance(other, NilType)

    def __lt__(self, other):
        return not isinstance(other, NilType)

    def __le__(self, other):
        return True  # Nil <= anything

    def __gt__(self, other):
        return False

    def __ge__(self, other):
        return isinstance(other, NilType)


Nil = NilType()
