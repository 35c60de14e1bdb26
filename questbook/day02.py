"""Runic words: counting words in text and marking runic symbols on a grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from questbook import helpers
from questbook.helpers import Point

PART1_WORDS = ("LOR", "LL", "SI", "OR", "EN", "ON", "UM")
PART1_TEXT = (
    "LOREM IPSUM DOLOR SIT AMET, CONSECTETUR ADIPISCING ELIT, SED DO EIUSMOD TEMPOR INCIDIDUNT "
    "UT LABORE ET DOLORE MAGNA ALIQUA. UT ENIM AD MINIM VENIAM, QUIS NOSTRUD EXERCITATION ULLAMCO "
    "LABORIS NISI UT ALIQUIP EX EA COMMODO CONSEQUAT. DUIS AUTE IRURE DOLOR IN REPREHENDERIT IN "
    "VOLUPTATE VELIT ESSE CILLUM DOLORE EU FUGIAT NULLA PARIATUR. EXCEPTEUR SINT OCCAECAT "
    "CUPIDATAT NON PROIDENT, SUNT IN CULPA QUI OFFICIA DESERUNT MOLLIT ANIM ID EST LABORUM."
)

PART2_WORDS = (
    "RLZ", "HRHZ", "G", "CT", "DCC", "OW", "LXLQ", "QXS", "ENS", "MGUU", "VUL", "U", "IQSZTWLQLJ",
    "SRJITALTAM", "DR", "CC", "NBLR", "WXVAPEAUJM", "TGSSQZPJNI", "E", "Y", "YEG", "CPJ", "MJ", "XW",
    "PITF", "UYUCEJBSRS", "DSSG", "WOW", "OO", "WP", "UOB", "GT", "A", "DPDVINCYYQ", "JW", "SXLE",
    "KJWV", "PKNW", "ZMNJHSVPWW", "RBY", "IFQF", "AXHIDHBYEW", "SM", "ECWJZXYPLY", "EOB", "QF",
    "VAGCFZRJUK",
)

PART3_WORDS = (
    "VUU", "QGW", "NG", "VNPCCPZCEJ", "MX", "XH", "BTYD", "SHLX", "XI", "ABTW", "EQJNTYVVXM", "LOL",
    "MCT", "HV", "BUURUPZFKP", "K", "KUT", "LX", "KGDT", "G", "JDQL", "R", "NV", "HUCP", "XOGC", "DT",
    "XSO", "ZMEJ", "B", "MPWFMMMKAI", "URP", "JGZECVSPMW", "EYED", "OO", "HK", "ATOOEYDSOQ", "H",
    "LATL", "ASUC", "QJQAEVGUDR", "QN", "WZ", "RYI", "SGB", "FU", "RHMW", "LO", "MSIQIBYDGZ", "KG",
    "SQWUMWZKHH", "BAM", "YJNQ", "CCS", "YZDHFEVEEL", "RA", "PN", "S", "EA", "AYSEMKGCIT", "CZ",
    "ZJOESISAVM", "MHA", "OTP", "XMMT", "J", "Y", "RPAJIPUVJE", "JZMA", "WRWNHSHZQS", "NU",
    "ZRZKAHGBBL", "LZOVFCFTLL", "RGW", "PWTWRRKDRD", "AHNM", "NLB", "DCXENOOMNU", "MIZN", "WYIG", "X",
    "YK", "LTVBWTGLNF", "QVP", "EQO", "JBN", "AHP", "Q", "GGV", "CEVYJRNGQR", "DYER", "EKQ", "QQ",
    "UTJO",
)

_MARK = "\033[31;4m"
_RESET = "\033[0m"

BoolMap = list[list[bool]]


@dataclass
class FindResult:
    """Whether a word was found and the distinct cells it covers."""

    found: bool = False
    symbol_locations: list[Point] = field(default_factory=list)


def split(text: str) -> list[str]:
    """Split ``text`` on spaces, dropping empty tokens."""
    return helpers.split(text, " ")


def reverse(word: str) -> str:
    """Return ``word`` reversed."""
    return word[::-1]


def _runs(x: int, y: int, length: int, width: int, height: int) -> Iterator[list[tuple[int, int]]]:
    """Yield the cell runs a word starting at (x, y) may occupy."""
    yield [((x + i) % width, y) for i in range(length)]
    yield [((x - i) % width, y) for i in range(length)]
    if y <= height - length:
        yield [(x, y + i) for i in range(length)]
    if y >= length - 1:
        yield [(x, y - i) for i in range(length)]


def find_word_on_grid(grid: Sequence[str], word: str) -> FindResult:
    """Find every placement of ``word`` on ``grid``.

    Words read right or left (wrapping around the row) and up or down
    (without wrapping). The covered cells come back sorted and distinct.
    """
    if not word:
        raise ValueError("word must not be empty")
    if not grid:
        return FindResult()
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must all have the same length")
    height = len(grid)

    found = False
    cells: set[Point] = set()
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char != word[0]:
                continue
            for run in _runs(x, y, len(word), width, height):
                if all(grid[py][px] == letter for (px, py), letter in zip(run, word)):
                    found = True
                    cells.update(Point(px, py) for px, py in run)
    return FindResult(found, sorted(cells))


def create_map(w: int, h: int) -> BoolMap:
    """Return an all-false map indexed ``[x][y]``."""
    return [[False] * h for _ in range(w)]


def points_to_map(points: Iterable[Point], w: int, h: int) -> BoolMap:
    """Return a map marking each of ``points``."""
    result = create_map(w, h)
    for point in points:
        result[point.x][point.y] = True
    return result


def or_map(map1: BoolMap, map2: BoolMap, w: int, h: int) -> BoolMap:
    """Return the cell-wise union of two maps."""
    return [[map1[x][y] or map2[x][y] for y in range(h)] for x in range(w)]


def count_points(grid_map: BoolMap, w: int, h: int) -> int:
    """Count the marked cells within ``w`` by ``h``."""
    return sum(1 for x in range(w) for y in range(h) if grid_map[x][y])


def render_map(grid_map: BoolMap, grid: Sequence[str]) -> str:
    """Render ``grid`` with the cells marked in ``grid_map`` highlighted."""
    width = len(grid_map)
    height = len(grid_map[0]) if grid_map else 0
    rows = [
        "".join((_MARK if grid_map[x][y] else _RESET) + grid[y][x] for x in range(width)) + "\n"
        for y in range(height)
    ]
    return "\n" + "".join(rows)


def part1() -> int:
    """Count (token, word) pairs where the word appears in the inscription token."""
    return sum(1 for token in split(PART1_TEXT) for word in PART1_WORDS if word in token)


def _with_reversals(words: Iterable[str]) -> list[str]:
    result = []
    for word in words:
        result.append(word)
        backwards = reverse(word)
        if len(word) > 1 and backwards != word:
            result.append(backwards)
    return result


def _covered_symbols(token: str, words: Iterable[str]) -> int:
    marked: set[int] = set()
    for word in words:
        start = token.find(word)
        while start != -1:
            marked.update(range(start, start + len(word)))
            start = token.find(word, start + 1)
    return len(marked)


def part2(lines: Iterable[str]) -> int:
    """Count the symbols covered by runic words read either way in each token."""
    words = _with_reversals(PART2_WORDS)
    return sum(_covered_symbols(token, words) for line in lines for token in split(line))


def part3(lines: Sequence[str]) -> int:
    """Count the grid cells covered by any runic word placement."""
    grid = list(lines)
    height = len(grid)
    width = len(grid[0]) if grid else 0
    covered = create_map(width, height)
    for word in PART3_WORDS:
        result = find_word_on_grid(grid, word)
        if result.found:
            covered = or_map(covered, points_to_map(result.symbol_locations, width, height), width, height)
    return count_points(covered, width, height)