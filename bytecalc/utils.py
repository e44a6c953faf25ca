import enum


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def caret_line(text_before: str, pad: int = 0) -> str:
    return " " * (len(text_before) + pad) + "^"
