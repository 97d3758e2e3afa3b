from __future__ import annotations

from dataclasses import dataclass

from umask.flags import CLASS_CELLS, Class, ExtraPermission, Permission
from umask.metadata import MetadataProvider, PathArg, defaultProvider
from umask.tokenizer import ModeTokenizer

# ~ flips every bit of the underlying 32 bit word, not only the 12 meaningful ones
WORD_MASK = 0xFFFFFFFF

INT_FORMAT_CODES = "bcdoxXn"


@dataclass(frozen=True)
class Mode:
    value: int = 0

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Mode value must be an int, not {type(self.value).__name__}")
        if self.value < 0:
            raise ValueError(f"Mode value must not be negative: {self.value}")
        # IntFlag members are ints, store the plain value
        object.__setattr__(self, "value", int(self.value))

    @staticmethod
    def new() -> Mode:
        return Mode(0)

    @staticmethod
    def all() -> Mode:
        return Mode(Class.ALL.value)

    @staticmethod
    def tryFrom(path: PathArg, provider: MetadataProvider | None = None) -> Mode:
        if provider is None:
            provider = defaultProvider()
        return Mode(provider.getMode(path))

    @staticmethod
    def parse(string: str) -> Mode:
        return Mode(ModeTokenizer.tokenize(string))

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __and__(self, other: Mode) -> Mode:
        if not isinstance(other, Mode):
            return NotImplemented
        return Mode(self.value & other.value)

    def __or__(self, other: Mode) -> Mode:
        if not isinstance(other, Mode):
            return NotImplemented
        return Mode(self.value | other.value)

    # in place forms rebind the name, shared instances never change
    def __iand__(self, other: Mode) -> Mode:
        return self.__and__(other)

    def __ior__(self, other: Mode) -> Mode:
        return self.__or__(other)

    def __invert__(self) -> Mode:
        return Mode(self.value ^ WORD_MASK)

    def isExe(self) -> bool:
        return (self.value & Permission.EXEC.value) != 0

    def has(self, other: Mode) -> bool:
        return self.value & other.value == other.value

    def hasExtra(self, extra: ExtraPermission) -> bool:
        return (self.value & int(extra)) == int(extra)

    def withClassPerm(self, cls: Class, perm: Permission) -> Mode:
        # disjoint class and permission masks add nothing
        return Mode(self.value | (int(cls) & int(perm)))

    def withoutClassPerm(self, cls: Class, perm: Permission) -> Mode:
        return Mode(self.value & ~(int(cls) & int(perm)))

    def withMode(self, other: Mode) -> Mode:
        return Mode(self.value | other.value)

    def withoutMode(self, other: Mode) -> Mode:
        return Mode(self.value & ~other.value)

    def withExtra(self, extra: ExtraPermission) -> Mode:
        return Mode(self.value | int(extra))

    def withoutExtra(self, extra: ExtraPermission) -> Mode:
        return Mode(self.value & ~int(extra))

    def withoutAnyExtra(self) -> Mode:
        return self.withoutExtra(ExtraPermission.ALL)

    def __str__(self) -> str:
        s = ""
        for cls, extra, special in CLASS_CELLS:
            s += "r" if self.has(Mode.new().withClassPerm(cls, Permission.READ)) else "-"
            s += "w" if self.has(Mode.new().withClassPerm(cls, Permission.WRITE)) else "-"
            exe = self.has(Mode.new().withClassPerm(cls, Permission.EXEC))
            if self.hasExtra(extra):
                s += special if exe else special.upper()
            else:
                s += "x" if exe else "-"
        return s

    def __format__(self, formatSpec: str) -> str:
        if formatSpec and formatSpec[-1] in INT_FORMAT_CODES:
            return format(self.value, formatSpec)
        return format(str(self), formatSpec)

    def __repr__(self) -> str:
        return f"Mode('{self}')"


USER_READ = Mode.new().withClassPerm(Class.USER, Permission.READ)
USER_WRITE = Mode.new().withClassPerm(Class.USER, Permission.WRITE)
USER_EXEC = Mode.new().withClassPerm(Class.USER, Permission.EXEC)
GROUP_READ = Mode.new().withClassPerm(Class.GROUP, Permission.READ)
GROUP_WRITE = Mode.new().withClassPerm(Class.GROUP, Permission.WRITE)
GROUP_EXEC = Mode.new().withClassPerm(Class.GROUP, Permission.EXEC)
OTHERS_READ = Mode.new().withClassPerm(Class.OTHERS, Permission.READ)
OTHERS_WRITE = Mode.new().withClassPerm(Class.OTHERS, Permission.WRITE)
OTHERS_EXEC = Mode.new().withClassPerm(Class.OTHERS, Permission.EXEC)
ALL_READ = Mode.new().withClassPerm(Class.ALL, Permission.READ)
ALL_WRITE = Mode.new().withClassPerm(Class.ALL, Permission.WRITE)
ALL_EXEC = Mode.new().withClassPerm(Class.ALL, Permission.EXEC)
