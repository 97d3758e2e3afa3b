from enum import IntFlag
from typing import Tuple


class Class(IntFlag):
    USER = 0o700
    GROUP = 0o070
    OTHERS = 0o007
    ALL = USER | GROUP | OTHERS


class Permission(IntFlag):
    READ = 0o444
    WRITE = 0o222
    EXEC = 0o111


class ExtraPermission(IntFlag):
    STICKY = 0o1000
    SETGID = 0o2000
    SETUID = 0o4000
    ALL = SETUID | SETGID | STICKY


# display order, with the extra bit overlaid on each class's exec cell
CLASS_CELLS: Tuple[Tuple[Class, ExtraPermission, str], ...] = (
    (Class.USER, ExtraPermission.SETUID, "s"),
    (Class.GROUP, ExtraPermission.SETGID, "s"),
    (Class.OTHERS, ExtraPermission.STICKY, "t"),
)
