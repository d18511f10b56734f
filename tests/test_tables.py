"""
Tests for the symbol tables
"""
import pytest

from canto_braille.tables import (
    DEFAULT_TABLES,
    CHECKED_TONE_3,
    NUMBER_PREFIX,
    Collision,
    SymbolKind,
    SymbolTable,
    known_collisions,
)


class TestSymbolTables:
    @pytest.mark.unit
    def test_sizes(self):
        assert len(DEFAULT_TABLES.initials.forward) == 19
        assert len(DEFAULT_TABLES.finals.forward) == 54
        assert len(DEFAULT_TABLES.digits.forward) == 10

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "table,cell,symbol",
        [
            ("initials", "⠏", "b"),
            ("initials", "⠛", "ng"),
            ("initials", "⠟", "gw"),
            ("finals", "⠏", "aap"),
            ("finals", "⠛", "ang"),
            ("finals", "⠹", "yu"),
            ("tones", "⠀", "1"),
            ("tones", "⠄", "4"),
            ("digits", "⠚", "0"),
            ("punctuation", "⠿", "。"),
            ("punctuation", "⠠⠶", "["),
        ],
    )
    def test_lookup(self, table, cell, symbol):
        assert getattr(DEFAULT_TABLES, table).lookup(cell) == symbol

    @pytest.mark.unit
    def test_missing(self):
        assert DEFAULT_TABLES.initials.lookup("⠃") is None
        assert DEFAULT_TABLES.finals.reverse_lookup("ng") is None
        assert DEFAULT_TABLES.tones.reverse_lookup("9") is None

    @pytest.mark.unit
    def test_initial_and_final_share_cells(self):
        # Resolved by the decoder, not a table conflict
        for cell in DEFAULT_TABLES.initials.forward:
            assert cell in DEFAULT_TABLES.finals

    @pytest.mark.unit
    def test_reverse_inverts_forward(self):
        shadowed = {
            (collision.kind, collision.shadowed)
            for collision in known_collisions()
            if collision.direction == "reverse"
        }

        for table in DEFAULT_TABLES.all_tables:
            for key_cells, symbol in table.forward.items():
                if (table.kind, key_cells) in shadowed:
                    assert table.reverse_lookup(symbol) != key_cells
                else:
                    assert table.reverse_lookup(symbol) == key_cells

    @pytest.mark.unit
    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_TABLES.initials.forward["⠃"] = "x"  # type: ignore[index]

        with pytest.raises(TypeError):
            DEFAULT_TABLES.finals.reverse["x"] = "⠃"  # type: ignore[index]

    @pytest.mark.unit
    def test_special_cells(self):
        assert NUMBER_PREFIX == "⠼"
        assert CHECKED_TONE_3 == "⠐"
        assert DEFAULT_TABLES.tones.lookup(CHECKED_TONE_3) == "3"


class TestCollisions:
    @pytest.mark.unit
    def test_known_collisions(self):
        assert set(known_collisions()) == {
            Collision(SymbolKind.TONE, "forward", "⠄", "4", "9"),
            Collision(SymbolKind.TONE, "reverse", "3", "⠈", "⠐"),
            Collision(SymbolKind.PUNCTUATION, "reverse", "「", "⠦", "⠷"),
            Collision(SymbolKind.PUNCTUATION, "reverse", "」", "⠴⠀", "⠻⠀"),
            Collision(SymbolKind.PUNCTUATION, "reverse", "**", "⠸", "⠵⠀"),
        }

    @pytest.mark.unit
    def test_first_definition_wins(self):
        table = SymbolTable.from_entries(
            SymbolKind.DIGIT, [("⠁", "1"), ("⠁", "2"), ("⠃", "1")]
        )

        assert dict(table.forward) == {"⠁": "1", "⠃": "1"}
        assert dict(table.reverse) == {"1": "⠁"}
        assert table.collisions == (
            Collision(SymbolKind.DIGIT, "forward", "⠁", "1", "2"),
            Collision(SymbolKind.DIGIT, "reverse", "1", "⠁", "⠃"),
        )


class TestMaximalMunch:
    @pytest.mark.unit
    def test_key_lengths(self):
        assert DEFAULT_TABLES.punctuation.key_lengths == (5, 3, 2, 1)

    @pytest.mark.unit
    def test_longest_window_wins(self):
        punctuation = DEFAULT_TABLES.punctuation

        assert punctuation.match("⠄⠄⠄⠄⠄", 0) == ("⠄⠄⠄⠄⠄", "……")
        assert punctuation.match("⠄⠄⠄⠄", 0) == ("⠄⠄⠄", "⋯")
        assert punctuation.match("⠶⠄⠀", 0) == ("⠶⠄⠀", "]")
        assert punctuation.match("⠶⠀", 0) == ("⠶⠀", ")")
        assert punctuation.match("⠶⠏", 0) == ("⠶", "(")
        assert punctuation.match("⠏⠃", 0) is None

    @pytest.mark.unit
    def test_match_at_offset(self):
        assert DEFAULT_TABLES.punctuation.match("⠏⠃⠿", 2) == ("⠿", "。")

    @pytest.mark.unit
    def test_match_symbol(self):
        punctuation = DEFAULT_TABLES.punctuation

        assert punctuation.match_symbol("……x", 0) == ("……", "⠄⠄⠄⠄⠄")
        assert punctuation.match_symbol("**", 0) == ("**", "⠸")
        assert punctuation.match_symbol("a。", 1) == ("。", "⠿")
        assert punctuation.match_symbol("abc", 0) is None
