"""
Unit tests for selection lists and the list builders.
"""

from projinit.catalog import FrameworkOption, LibraryOption, OptionCatalog
from projinit.wizard.selection import (
    FrameworkEntry,
    LanguageEntry,
    LibraryEntry,
    SelectionList,
    build_framework_list,
    build_language_list,
    build_library_items,
    selected_libraries,
    sort_strings,
    unique_strings,
)


def make_list(count: int, height: int = 8) -> SelectionList[LanguageEntry]:
    return SelectionList([LanguageEntry(f"lang-{i}", 1) for i in range(count)], height=height)


# =============================================================================
# SelectionList
# =============================================================================


class TestSelectionList:
    """Tests for cursor movement and item replacement."""

    def test_empty_list_has_no_selection(self):
        empty: SelectionList[LanguageEntry] = SelectionList()
        assert empty.selected() is None
        empty.move_next()
        empty.move_last()
        assert empty.index == 0

    def test_move_next_clamps_at_end(self):
        items = make_list(3)
        for _ in range(10):
            items.move_next()
        assert items.index == 2
        assert items.selected().name == "lang-2"

    def test_move_previous_clamps_at_start(self):
        items = make_list(3)
        items.move_previous()
        assert items.index == 0

    def test_first_and_last(self):
        items = make_list(5)
        items.move_last()
        assert items.index == 4
        items.move_first()
        assert items.index == 0

    def test_paging_uses_two_rows_per_item(self):
        items = make_list(20, height=8)
        assert items.per_page() == 4
        items.page_down()
        assert items.index == 4
        items.page_down()
        items.page_up()
        assert items.index == 4

    def test_visible_items_follow_highlight(self):
        items = make_list(10, height=6)
        items.select(7)
        visible = [index for index, _ in items.visible_items()]
        assert visible == [6, 7, 8]

    def test_size_is_independent_of_items(self):
        items = make_list(2)
        items.set_size(60, 30)
        assert (items.width, items.height) == (60, 30)
        assert len(items) == 2

    def test_set_items_preserves_index(self):
        items = SelectionList([LibraryEntry("a"), LibraryEntry("b"), LibraryEntry("c")])
        items.select(1)
        items.set_items([LibraryEntry("a"), LibraryEntry("b", checked=True), LibraryEntry("c")])
        assert items.index == 1
        assert items.selected().checked is True

    def test_set_items_clamps_when_shrinking(self):
        items = make_list(5)
        items.move_last()
        items.set_items([LanguageEntry("only", 1)])
        assert items.index == 0
        assert items.selected().name == "only"

    def test_select_label_ignores_case(self):
        items = SelectionList([LanguageEntry("Go", 2), LanguageEntry("Node.js", 3)])
        assert items.select_label("node.JS")
        assert items.index == 1
        assert not items.select_label("Rust")
        assert items.index == 1

    def test_items_returns_copy(self):
        items = make_list(2)
        items.items.clear()
        assert len(items) == 2


class TestEntries:
    def test_language_description(self):
        assert LanguageEntry("Go", 1).description == "1 template"
        assert LanguageEntry("Go", 3).description == "3 templates"

    def test_library_label_shows_checkbox(self):
        assert LibraryEntry("zap").label == "[ ] zap"
        assert LibraryEntry("zap", checked=True).label == "[x] zap"
        assert LibraryEntry("zap").description == "optional package"

    def test_framework_entry(self):
        entry = FrameworkEntry("Go", "Cobra", "CLI app structure")
        assert entry.label == "Cobra"
        assert entry.description == "CLI app structure"


# =============================================================================
# Helpers
# =============================================================================


class TestStringHelpers:
    def test_unique_first_occurrence_wins(self):
        assert unique_strings(["Go", "go", " ", "Rust", "GO"]) == ["Go", "Rust"]

    def test_sort_is_case_insensitive(self):
        assert sort_strings(["node.js", "Bun", "go", "PHP"]) == ["Bun", "go", "node.js", "PHP"]

    def test_selected_libraries_sorted(self):
        assert selected_libraries({"zap", "Air", "viper"}) == ("Air", "viper", "zap")


class TestBuilders:
    def test_language_list_sorted_with_default(self, default_catalog):
        languages = build_language_list(default_catalog, "python")
        labels = [item.label for item in languages.items]
        assert labels == sorted(labels, key=str.lower)
        assert languages.selected().name == "Python"

    def test_language_list_unknown_default_keeps_first(self, default_catalog):
        languages = build_language_list(default_catalog, "Cobol")
        assert languages.index == 0

    def test_framework_list_includes_vanilla(self, small_catalog):
        frameworks = build_framework_list(small_catalog, "Go", "cobra")
        assert [f.name for f in frameworks.items] == ["Cobra", "Vanilla"]
        assert frameworks.selected().name == "Cobra"
        assert frameworks.items[1].description == "minimal starter"

    def test_framework_list_for_unknown_language(self, small_catalog):
        frameworks = build_framework_list(small_catalog, "Rust")
        assert [f.name for f in frameworks.items] == ["Vanilla"]
        assert frameworks.items[0].description == "minimal starter"

    def test_library_items_reflect_selection(self, small_catalog):
        items = build_library_items(small_catalog, "Go", "Cobra", {"zap"})
        assert [(i.name, i.checked) for i in items] == [("viper", False), ("zap", True)]
        assert items[0].description == "configuration loading"
        assert items[1].description == "optional package"

    def test_library_items_empty_for_vanilla(self, small_catalog):
        assert build_library_items(small_catalog, "Go", "Vanilla", set()) == []

    def test_no_case_duplicates_in_lists(self):
        catalog = OptionCatalog.from_frameworks(
            [
                FrameworkOption(language="Go", name="Cobra"),
                FrameworkOption(language="go", name="cobra"),
                FrameworkOption(
                    language="Go",
                    name="Cobra",
                    libraries=(LibraryOption(name="Zap"), LibraryOption(name="zap")),
                ),
            ]
        )
        languages = build_language_list(catalog)
        frameworks = build_framework_list(catalog, "GO")
        libraries = build_library_items(catalog, "Go", "Cobra", set())
        assert [i.label for i in languages.items] == ["Go"]
        assert [i.label for i in frameworks.items] == ["Cobra", "Vanilla"]
        assert [i.name for i in libraries] == ["Zap"]
