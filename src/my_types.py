from enum import Enum


class Type(Enum):
    """
    Value categories of the language:
    - INT / REAL: numeric, REAL dominates when mixed
    - TEXT / BOOL: only compatible with themselves
    - NULL: type of the `nulo` literal
    - ERROR: marker left behind by a reported problem
    """
    INT = 'inteiro'
    REAL = 'real'
    TEXT = 'texto'
    BOOL = 'booleano'
    NULL = 'nulo'
    ERROR = 'erro'

    def __str__(self):
        return self.value

    def is_numeric(self) -> bool:
        return self in (Type.INT, Type.REAL)

    def is_compatible_with(self, other: 'Type') -> bool:
        """Identical types, or any two numeric types"""
        if self is other:
            return True
        return self.is_numeric() and other.is_numeric()

    @staticmethod
    def promote(left: 'Type', right: 'Type') -> 'Type':
        """Result type of an arithmetic operation"""
        if left is Type.ERROR or right is Type.ERROR:
            return Type.ERROR
        if left is Type.REAL or right is Type.REAL:
            return Type.REAL
        return left

    @staticmethod
    def from_name(name: str) -> 'Type':
        """Map a declared type keyword to a Type"""
        return _DECLARABLE.get(name, Type.ERROR)

    @staticmethod
    def of_value(value) -> 'Type':
        """Type of a literal's Python value"""
        if value is None:
            return Type.NULL
        # bool before int: bool is an int subclass
        if isinstance(value, bool):
            return Type.BOOL
        if isinstance(value, int):
            return Type.INT
        if isinstance(value, float):
            return Type.REAL
        if isinstance(value, str):
            return Type.TEXT
        return Type.ERROR


_DECLARABLE = {
    'inteiro': Type.INT,
    'real': Type.REAL,
    'texto': Type.TEXT,
    'booleano': Type.BOOL,
}

# Basic type constants
INT = Type.INT
REAL = Type.REAL
TEXT = Type.TEXT
BOOL = Type.BOOL
NULL = Type.NULL
ERROR = Type.ERROR
