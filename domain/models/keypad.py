from dataclasses import dataclass
from enum import Enum


class Operator(str, Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


class Key(str, Enum):
    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    POINT = "."
    CLEAR = "C"
    NEGATE = "±"
    PERCENT = "%"
    DIVIDE = "÷"
    MULTIPLY = "×"
    SUBTRACT = "-"
    ADD = "+"
    EQUALS = "="
    DECORATIVE = "🖩"

    @property
    def is_digit(self) -> bool:
        return self.value.isdigit()

    @property
    def operator(self) -> Operator | None:
        return _KEY_OPERATORS.get(self)

    @classmethod
    def parse(cls, token: "str | Key") -> "Key | None":
        """Resolve a key symbol ("÷") or name ("divide"); None if unknown."""
        if isinstance(token, Key):
            return token
        try:
            return cls(token)
        except ValueError:
            pass
        return _KEY_ALIASES.get(token.strip().lower())


_KEY_OPERATORS = {
    Key.ADD: Operator.ADD,
    Key.SUBTRACT: Operator.SUBTRACT,
    Key.MULTIPLY: Operator.MULTIPLY,
    Key.DIVIDE: Operator.DIVIDE,
}

_KEY_ALIASES = {
    "clear": Key.CLEAR,
    "c": Key.CLEAR,
    "negate": Key.NEGATE,
    "sign": Key.NEGATE,
    "percent": Key.PERCENT,
    "divide": Key.DIVIDE,
    "/": Key.DIVIDE,
    "multiply": Key.MULTIPLY,
    "*": Key.MULTIPLY,
    "x": Key.MULTIPLY,
    "subtract": Key.SUBTRACT,
    "minus": Key.SUBTRACT,
    "add": Key.ADD,
    "plus": Key.ADD,
    "equals": Key.EQUALS,
    "point": Key.POINT,
    "decimal": Key.POINT,
    "decorative": Key.DECORATIVE,
    "calculator": Key.DECORATIVE,
}


@dataclass
class KeypadState:
    current_entry: str = ""
    pending_operator: Operator | None = None
    pending_operand: float | None = None
