from __future__ import annotations

import logging
import os
import sys
from typing import Dict, List, Mapping, TextIO

from umask.metadata import MetadataProvider
from umask.mode import Mode

logger = logging.getLogger(__name__)

FLAGS_VAR = "UMASK_LS_FLAGS"


class Ls:
    def __init__(self, argv: List[str], out: TextIO | None = None, env: Mapping[str, str] | None = None,
                 provider: MetadataProvider | None = None):
        if env is None:
            env = os.environ
        self.out = out if out is not None else sys.stdout
        self.provider = provider

        self.showDotFlag: bool = False
        self.reverseFlag: bool = False
        self.plainFlag: bool = False
        self.octalFlag: bool = False
        self.verboseFlag: bool = False

        self.argv = env.get(FLAGS_VAR, "").split() + list(argv)
        self.parseFlags()

    def printf(self, string: str) -> int:
        self.out.write(string)
        return len(string)

    def parseFlags(self) -> None:
        while len(self.argv):
            arg = self.argv[0]
            if arg.startswith("-") and len(arg) > 1:
                for char in arg[1:]:
                    if char == "a":
                        self.showDotFlag = True
                    elif char == "r":
                        self.reverseFlag = True
                    elif char == "p":
                        self.plainFlag = True
                    elif char == "o":
                        self.octalFlag = True
                    elif char == "v":
                        self.verboseFlag = True
                    else:
                        continue
                self.argv = self.argv[1:]
            else:
                break

    def formatEntry(self, mode: Mode, name: str) -> str:
        if self.plainFlag:
            mode = mode.withoutAnyExtra()
        if self.octalFlag:
            return f"{mode}  {int(mode) & 0o7777:04o}  {name}"
        return f"{mode}  {name}"

    def listDirectory(self, path: str) -> List[str]:
        lines: List[str] = []
        for name in sorted(os.listdir(path), reverse=self.reverseFlag):
            if name.startswith(".") and not self.showDotFlag:
                continue
            try:
                mode = Mode.tryFrom(os.path.join(path, name), self.provider)
            except OSError as e:
                logger.warning("Skipping %s: %s", name, e)
                continue
            lines.append(self.formatEntry(mode, name))
        return lines

    def run(self) -> int:
        paths: List[str] = ["."]
        if len(self.argv) > 0:
            paths = self.argv

        notFoundFiles: List[str] = []
        foundFiles: Dict[str, List[str]] = {}

        for path in sorted(paths):
            try:
                foundFiles[path] = self.listDirectory(path)
            except OSError as e:
                logger.debug("Cannot list %s: %s", path, e)
                notFoundFiles.append(f"{path} not found\n")

        for entry in notFoundFiles:
            self.printf(entry)

        for index, (path, lines) in enumerate(foundFiles.items()):
            if len(notFoundFiles) > 0 or index > 0:
                self.printf("\n")
            if len(paths) > 1:
                self.printf(f"{path}:\n")
            else:
                self.printf(f"Current dir: {os.path.abspath(path)}\n")
            for line in lines:
                self.printf(line + "\n")

        return 1 if notFoundFiles else 0


def main(argv: List[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    ls = Ls(argv)
    logging.basicConfig(level=logging.DEBUG if ls.verboseFlag else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    return ls.run()


if __name__ == "__main__":
    sys.exit(main())
