from umask.errors import ModeParseError
from umask.flags import CLASS_CELLS, Class, ExtraPermission, Permission

MODE_LENGTH = 9


class ModeTokenizer:
    """Reads a 9 character ``rwxrwxrwx`` string into permission bits.

    Each cell parser looks at the character at its position and returns the
    bits it matched.
    """

    @staticmethod
    def nextChar(string: str, position: int) -> str:
        if position >= len(string):
            raise ModeParseError.notEnoughInput(position)
        return string[position]

    @staticmethod
    def tokenizeRead(string: str, position: int, cls: Class) -> int:
        char = ModeTokenizer.nextChar(string, position)
        if char == "r":
            return cls.value & Permission.READ.value
        elif char == "-":
            return 0
        raise ModeParseError.invalidCharacter(char, position)

    @staticmethod
    def tokenizeWrite(string: str, position: int, cls: Class) -> int:
        char = ModeTokenizer.nextChar(string, position)
        if char == "w":
            return cls.value & Permission.WRITE.value
        elif char == "-":
            return 0
        raise ModeParseError.invalidCharacter(char, position)

    @staticmethod
    def tokenizeExec(string: str, position: int, cls: Class, extra: ExtraPermission, special: str) -> int:
        char = ModeTokenizer.nextChar(string, position)
        exe = cls.value & Permission.EXEC.value
        if char == "x":
            return exe
        elif char == "-":
            return 0
        elif char == special:
            return extra.value | exe
        elif char == special.upper():
            return extra.value
        raise ModeParseError.invalidCharacter(char, position)

    @staticmethod
    def tokenize(string: str) -> int:
        if not isinstance(string, str):
            raise TypeError(f"Expected str, got {type(string).__name__}")

        value = 0
        position = 0
        for cls, extra, special in CLASS_CELLS:
            value |= ModeTokenizer.tokenizeRead(string, position, cls)
            value |= ModeTokenizer.tokenizeWrite(string, position + 1, cls)
            value |= ModeTokenizer.tokenizeExec(string, position + 2, cls, extra, special)
            position += 3

        if len(string) > MODE_LENGTH:
            raise ModeParseError.trailingCharacters(string[MODE_LENGTH], MODE_LENGTH)
        return value
