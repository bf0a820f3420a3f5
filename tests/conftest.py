from io import StringIO
from pathlib import Path

import pytest

from typedini import IniDocument, IniParser

EXAMPLE = """\
[Section1]
var1 = 42
var2 = hello
var3 = 3,14
"""


def parse(text: str) -> IniDocument:
    return IniParser.readstream(StringIO(text))


@pytest.fixture
def example_doc() -> IniDocument:
    return parse(EXAMPLE)


@pytest.fixture
def write_ini(tmp_path: Path):
    def _write(text: str, name: str = "example.ini", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode(encoding))
        return path
    return _write
