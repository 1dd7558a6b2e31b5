"""Title search over a colon-separated article index."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

DEFAULT_DATA_FILE = "wikiData.dat"


@dataclass(eq=False)
class WikiEntry:
    """One indexed article: its title, namespace and page id."""

    title: str
    namespace: str
    page_id: str

    @classmethod
    def from_raw(cls, raw: str) -> "WikiEntry":
        """Build an entry from a ``namespace:id:title`` line."""
        fields = raw.split(":")
        padded = fields + [""] * (3 - len(fields))
        return cls(title=padded[2], namespace=padded[0], page_id=padded[1])

    def _key(self) -> tuple:
        return (int(self.namespace), int(self.page_id))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WikiEntry):
            return NotImplemented
        return (self.namespace, self.page_id) == (other.namespace, other.page_id)

    def __hash__(self) -> int:
        return hash((self.namespace, self.page_id))

    def __lt__(self, other: "WikiEntry") -> bool:
        if not isinstance(other, WikiEntry):
            return NotImplemented
        return self._key() < other._key()

    def describe(self) -> str:
        """Return a multi-line description of the entry."""
        return f"Title: {self.title}\nNamespace: {self.namespace}\nID: {self.page_id}"


def split_row(line: str) -> List[str]:
    """Split an index line into its colon-separated fields."""
    return line.split(":")


def parse_title(raw: str) -> str:
    """Return the third colon-separated segment of a raw line, or ''."""
    fields = raw.split(":")
    return fields[2] if len(fields) >= 3 else ""


def load_entries(path) -> List[WikiEntry]:
    """Read entries from an index file, lower-casing their titles."""
    entries: List[WikiEntry] = []
    with open(path, encoding="utf-8") as handle:
        for number, line in enumerate(handle, start=1):
            line = line.rstrip("\n")
            if not line:
                continue
            fields = split_row(line)
            if len(fields) < 3:
                raise ValueError(f"line {number}: expected namespace:id:title")
            entries.append(
                WikiEntry(title=fields[2].lower(), namespace=fields[0], page_id=fields[1])
            )
    return entries


def search_string(entries: Iterable[WikiEntry], term: str) -> List[WikiEntry]:
    """Return the entries whose title contains ``term``, ignoring its case."""
    needle = term.lower()
    return [
        WikiEntry(entry.title, entry.namespace, entry.page_id)
        for entry in entries
        if needle in entry.title
    ]


def _sorted_intersection(first: Sequence[WikiEntry], second: Sequence[WikiEntry]) -> List[WikiEntry]:
    result: List[WikiEntry] = []
    left = iter(first)
    right = iter(second)
    a = next(left, None)
    b = next(right, None)
    while a is not None and b is not None:
        if a < b:
            a = next(left, None)
        elif b < a:
            b = next(right, None)
        else:
            result.append(a)
            a = next(left, None)
            b = next(right, None)
    return result


def search(entries: Sequence[WikiEntry], terms: Sequence[str]) -> List[WikiEntry]:
    """Return the entries whose titles contain every term."""
    if not terms:
        return []
    results = search_string(entries, terms[0])
    for term in terms[1:]:
        results = _sorted_intersection(search_string(entries, term), results)
    return results


def format_results(entries: Sequence[WikiEntry]) -> str:
    """Render search results as an aligned table."""
    if not entries:
        return "\nNo results found\n\n"
    longest = max(len(entry.title) for entry in entries)
    lines = ["\nSearch Results:\n------------------\n"]
    for entry in entries:
        ns_label = "[NS] ".rjust(8 + longest - len(entry.title))
        id_label = "[ID] ".rjust(18 - len(entry.namespace))
        lines.append(f"{entry.title}{ns_label}{entry.namespace}{id_label}{entry.page_id}\n")
    lines.append("\n")
    return "".join(lines)


def _split_terms(line: str) -> List[str]:
    terms = line.split(" ")
    if terms and terms[-1] == "":
        terms.pop()
    return terms


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Search article titles in an index file.")
    parser.add_argument("data", nargs="?", default=DEFAULT_DATA_FILE, help="index file")
    args = parser.parse_args(argv)

    try:
        entries = load_entries(args.data)
    except OSError:
        print("File failed to load")
        return 1
    except ValueError as exc:
        print(f"File failed to load: {exc}", file=sys.stderr)
        return 1
    print("wikiData loaded successfully!\n")

    while True:
        print("Input Search Term: ", end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            print()
            break
        print()
        terms = _split_terms(line.rstrip("\n"))
        start = time.perf_counter()
        results = search(entries, terms)
        print(format_results(results), end="")
        elapsed = time.perf_counter() - start
        print(f"The program took {elapsed:f} seconds to execute")
    return 0