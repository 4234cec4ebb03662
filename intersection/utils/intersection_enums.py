from enum import IntEnum

class SetKind(IntEnum):
    HASH = 1
    SORTED = 2
    INSERTION = 3
    ARRAY = 4
