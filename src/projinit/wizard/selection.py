"""
Selection lists for the wizard stages.

Each stage holds a typed ``SelectionList`` of one item variant, so the stage
handlers always read the entry kind they expect.
"""

from collections.abc import Iterable, Set
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from projinit.catalog.models import DEFAULT_LIBRARY_DESCRIPTION, OptionCatalog


class ListEntry(Protocol):
    """What a selection list needs from its items."""

    @property
    def label(self) -> str: ...

    @property
    def description(self) -> str: ...


@dataclass(frozen=True)
class LanguageEntry:
    """A language on the first stage."""

    name: str
    template_count: int

    @property
    def label(self) -> str:
        return self.name

    @property
    def description(self) -> str:
        noun = "template" if self.template_count == 1 else "templates"
        return f"{self.template_count} {noun}"


@dataclass(frozen=True)
class FrameworkEntry:
    """A starter template for the chosen language."""

    language: str
    name: str
    summary: str

    @property
    def label(self) -> str:
        return self.name

    @property
    def description(self) -> str:
        return self.summary


@dataclass(frozen=True)
class LibraryEntry:
    """An optional library, rendered as a checkbox row."""

    name: str
    summary: str = DEFAULT_LIBRARY_DESCRIPTION
    checked: bool = False

    @property
    def label(self) -> str:
        mark = "x" if self.checked else " "
        return f"[{mark}] {self.name}"

    @property
    def description(self) -> str:
        return self.summary


T = TypeVar("T", bound=ListEntry)

# Rows per item: label line plus description line.
ITEM_HEIGHT = 2


class SelectionList(Generic[T]):
    """Ordered items with a single highlighted index.

    Cursor movement is clamped, it never wraps. Width and height only affect
    rendering and are independent of the item count.
    """

    def __init__(self, items: Iterable[T] = (), width: int = 0, height: int = 0):
        self._items: list[T] = list(items)
        self._index = 0
        self.width = width
        self.height = height

    @property
    def items(self) -> list[T]:
        return list(self._items)

    @property
    def index(self) -> int:
        return self._index

    def __len__(self) -> int:
        return len(self._items)

    def selected(self) -> T | None:
        """The highlighted item, or None when the list is empty."""
        if not self._items:
            return None
        return self._items[self._index]

    def select(self, index: int) -> None:
        if not self._items:
            self._index = 0
            return
        self._index = max(0, min(index, len(self._items) - 1))

    def select_label(self, label: str) -> bool:
        """Highlight the first item whose label matches, ignoring case."""
        wanted = label.strip().lower()
        for i, item in enumerate(self._items):
            if item.label.lower() == wanted:
                self._index = i
                return True
        return False

    def move_next(self) -> None:
        self.select(self._index + 1)

    def move_previous(self) -> None:
        self.select(self._index - 1)

    def move_first(self) -> None:
        self.select(0)

    def move_last(self) -> None:
        self.select(len(self._items) - 1)

    def page_down(self) -> None:
        self.select(self._index + self.per_page())

    def page_up(self) -> None:
        self.select(self._index - self.per_page())

    def set_items(self, items: Iterable[T]) -> None:
        """Replace the items, keeping the highlighted index where possible."""
        self._items = list(items)
        self.select(self._index)

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def per_page(self) -> int:
        return max(1, self.height // ITEM_HEIGHT)

    def visible_items(self) -> list[tuple[int, T]]:
        """Items on the page that contains the highlighted index."""
        per_page = self.per_page()
        start = (self._index // per_page) * per_page
        return list(enumerate(self._items))[start : start + per_page]


def unique_strings(values: Iterable[str]) -> list[str]:
    """Drop blank and case-insensitive duplicate values, first one wins."""
    seen: set[str] = set()
    result = []
    for value in values:
        key = value.strip().lower()
        if not key or key in seen:
            continue
        seen.add(key)
        result.append(value)
    return result


def sort_strings(values: Iterable[str]) -> list[str]:
    """Sort case-insensitively."""
    return sorted(values, key=str.lower)


def build_language_list(catalog: OptionCatalog, default_language: str = "") -> SelectionList[LanguageEntry]:
    """Build the language stage list, highlighting the default if present."""
    names = sort_strings(unique_strings(catalog.languages()))
    entries = [LanguageEntry(name, len(catalog.frameworks_for(name))) for name in names]
    languages = SelectionList(entries)
    if default_language:
        languages.select_label(default_language)
    return languages


def build_framework_list(
    catalog: OptionCatalog,
    language: str,
    default_framework: str = "",
) -> SelectionList[FrameworkEntry]:
    """Build the framework stage list scoped to one language."""
    names = sort_strings(unique_strings(catalog.frameworks_for(language)))
    entries = [
        FrameworkEntry(language, name, catalog.framework_description(language, name))
        for name in names
    ]
    frameworks = SelectionList(entries)
    if default_framework:
        frameworks.select_label(default_framework)
    return frameworks


def build_library_items(
    catalog: OptionCatalog,
    language: str,
    framework: str,
    selected: Set[str],
) -> list[LibraryEntry]:
    """Checkbox entries for a (language, framework) pair.

    ``selected`` is keyed by exact library name.
    """
    names = sort_strings(unique_strings(lib.name for lib in catalog.libraries_for(language, framework)))
    return [
        LibraryEntry(
            name=name,
            summary=catalog.library_description(language, framework, name),
            checked=name in selected,
        )
        for name in names
    ]


def selected_libraries(selected: Iterable[str]) -> tuple[str, ...]:
    """Freeze selected library names into display order."""
    return tuple(sort_strings(unique_strings(selected)))
