from enum import IntEnum, auto


class ParseErrno(IntEnum):
    INVALID_CHARACTER = auto()
    NOT_ENOUGH_INPUT = auto()
    TRAILING_CHARACTERS = auto()


class ModeParseError(ValueError):
    def __init__(self, message: str, errno: ParseErrno, char: str | None = None, position: int | None = None):
        super(ModeParseError, self).__init__(message)
        self.errno = errno
        self.char = char
        self.position = position

    @staticmethod
    def invalidCharacter(char: str, position: int) -> "ModeParseError":
        return ModeParseError(f"invalid character {char!r} at position {position}", ParseErrno.INVALID_CHARACTER,
                              char, position)

    @staticmethod
    def notEnoughInput(position: int) -> "ModeParseError":
        return ModeParseError("not enough input", ParseErrno.NOT_ENOUGH_INPUT, position=position)

    @staticmethod
    def trailingCharacters(char: str, position: int) -> "ModeParseError":
        return ModeParseError("trailing characters", ParseErrno.TRAILING_CHARACTERS, char, position)

    def __str__(self):
        return f"ModeParseError:({ParseErrno(self.errno).name}: {self.args[0]})"

    def __repr__(self):
        return self.__str__()
