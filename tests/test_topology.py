"""Unit tests for the unit and peer tables."""

import pytest
from cadoku.core.topology import ALL_UNITS, BOXES, CELLS, COLS, PEERS, ROWS, UNITS, box_of


class TestUnits:
    """Tests for per-cell units."""

    @pytest.mark.parametrize("cell", range(CELLS))
    def test_three_units_of_nine(self, cell):
        """Every cell has a row, column and box of 9 distinct cells containing it."""
        units = UNITS[cell]
        assert len(units) == 3
        for unit in units:
            assert len(unit) == 9
            assert len(set(unit)) == 9
            assert cell in unit

    def test_unit_kinds(self):
        """Units are ordered row, column, box."""
        assert UNITS[40] == (ROWS[4], COLS[4], BOXES[4])
        assert UNITS[80][2] == (60, 61, 62, 69, 70, 71, 78, 79, 80)

    def test_box_numbering(self):
        assert box_of(0) == 0
        assert box_of(8) == 2
        assert box_of(30) == 3
        assert box_of(80) == 8

    def test_all_units_partition_grid(self):
        """Rows, columns and boxes each cover every cell exactly once."""
        assert len(ALL_UNITS) == 27
        for group in (ROWS, COLS, BOXES):
            cells = sorted(c for unit in group for c in unit)
            assert cells == list(range(CELLS))


class TestPeers:
    """Tests for per-cell peer lists."""

    @pytest.mark.parametrize("cell", range(CELLS))
    def test_peers_are_union_of_units(self, cell):
        peers = PEERS[cell]
        assert len(peers) == 20
        assert len(set(peers)) == len(peers)
        assert cell not in peers
        union = set(UNITS[cell][0]) | set(UNITS[cell][1]) | set(UNITS[cell][2])
        assert set(peers) == union - {cell}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
