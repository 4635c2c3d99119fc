import logging

import pytest

from mstage.config import GraphBuildConfig
from mstage.errors import InvalidNodeCount
from mstage.graph.builder import (
    MultistageGraph,
    build_graph,
    parse_edge_lines,
    parse_node_count,
    parse_stage_lines,
)


class TestParseNodeCount:
    @pytest.mark.parametrize("value,expected", [("4", 4), (" 12 ", 12), (2, 2), (7.0, 7), ("3.0", 3)])
    def test_valid_counts(self, value, expected):
        assert parse_node_count(value) == expected

    @pytest.mark.parametrize("value", ["", "abc", "1", "0", "-3", 1, "2.5", None, True, float("nan")])
    def test_invalid_counts_raise(self, value):
        with pytest.raises(InvalidNodeCount) as exc_info:
            parse_node_count(value)
        assert exc_info.value.min_nodes == 2
        assert ">= 2" in str(exc_info.value)

    def test_invalid_count_is_value_error(self):
        with pytest.raises(ValueError):
            parse_node_count("x")

    def test_custom_minimum(self):
        cfg = GraphBuildConfig(min_nodes=5)
        assert parse_node_count("5", cfg) == 5
        with pytest.raises(InvalidNodeCount):
            parse_node_count("4", cfg)


class TestParseEdgeLines:
    def test_edges_appended_in_input_order(self):
        adjacency, skipped = parse_edge_lines("1 3 4\n1 2 1\n2 3 2", 3)
        assert adjacency == [[], [(3, 4), (2, 1)], [(3, 2)], []]
        assert skipped == ()

    def test_arena_has_n_plus_one_slots(self):
        adjacency, _ = parse_edge_lines("", 6)
        assert len(adjacency) == 7
        assert all(entries == [] for entries in adjacency)

    def test_zero_endpoint_dropped(self):
        adjacency, skipped = parse_edge_lines("0 2 5\n1 2 3", 4)
        assert (2, 5) not in adjacency[0]
        assert adjacency[0] == []
        assert adjacency[1] == [(2, 3)]
        assert skipped == ("0 2 5",)

    def test_zero_destination_dropped(self):
        adjacency, skipped = parse_edge_lines("1 0 5", 4)
        assert adjacency[1] == []
        assert skipped == ("1 0 5",)

    def test_zero_endpoint_allowed_by_config(self):
        cfg = GraphBuildConfig(allow_zero_node=True)
        adjacency, skipped = parse_edge_lines("0 2 5", 4, cfg)
        assert adjacency[0] == [(2, 5)]
        assert skipped == ()

    @pytest.mark.parametrize(
        "line",
        [
            "1 2",  # missing weight
            "1",
            "1 5 3",  # v > N
            "5 1 3",  # u > N
            "a 2 3",
            "1 2 x",
            "1.5 2 3",
            "-1 2 3",
            "1 2 inf",
            "1_0 2 3",  # digit separator
            "1 ٢ 3",  # non-ASCII digit
            "0x1 2 3",
        ],
    )
    def test_malformed_lines_skipped(self, line):
        adjacency, skipped = parse_edge_lines(line, 4)
        assert sum(len(entries) for entries in adjacency) == 0
        assert skipped == (line,)

    def test_python_only_number_forms_skipped(self):
        graph = build_graph("12", "1_0 12 5\n1 ١٢ 3", "")
        assert graph.edge_count == 0
        assert graph.skipped_lines == ("1_0 12 5", "1 ١٢ 3")

    def test_weights_keep_numeric_type(self):
        adjacency, _ = parse_edge_lines("1 2 1.5\n2 3 -2\n1 3 1e1", 3)
        assert adjacency[1] == [(2, 1.5), (3, 10.0)]
        assert adjacency[2] == [(3, -2)]
        assert isinstance(adjacency[2][0][1], int)

    def test_integral_float_node_ids_accepted(self):
        adjacency, _ = parse_edge_lines("1.0 2.0 3", 2)
        assert adjacency[1] == [(2, 3)]

    def test_extra_tokens_ignored(self):
        adjacency, skipped = parse_edge_lines("1 2 3 99 extra", 2)
        assert adjacency[1] == [(2, 3)]
        assert skipped == ()

    def test_blank_lines_and_whitespace_tolerated(self):
        text = "\n   1   2   3  \n\n\t2 3 4\n"
        adjacency, skipped = parse_edge_lines(text, 3)
        assert adjacency[1] == [(2, 3)]
        assert adjacency[2] == [(3, 4)]
        assert skipped == ()

    def test_parallel_edges_kept(self):
        adjacency, _ = parse_edge_lines("1 2 5\n1 2 3", 2)
        assert adjacency[1] == [(2, 5), (2, 3)]

    def test_skipped_lines_logged_as_warning(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="mstage"):
            parse_edge_lines("0 2 5", 4)
        records = [r for r in caplog.records if "Skipping edge line" in r.getMessage()]
        assert len(records) == 1
        assert records[0].levelno == logging.WARNING
        assert "node id 0" in records[0].getMessage()

    def test_skipped_lines_logged_at_debug_when_configured(self, caplog):
        cfg = GraphBuildConfig(warn_on_skipped_edges=False)
        with caplog.at_level(logging.DEBUG, logger="mstage"):
            parse_edge_lines("1 9 5", 4, cfg)
        records = [r for r in caplog.records if "Skipping edge line" in r.getMessage()]
        assert [r.levelno for r in records] == [logging.DEBUG]
        assert "outside [1, 4]" in records[0].getMessage()


class TestParseStageLines:
    def test_groups_in_order(self):
        assert parse_stage_lines("1\n2 3\n4 5 6") == [[1], [2, 3], [4, 5, 6]]

    def test_non_positive_tokens_filtered(self):
        assert parse_stage_lines("0\n1 2\n-4 5 3") == [[], [1, 2], [5, 3]]

    def test_non_numeric_tokens_dropped(self):
        assert parse_stage_lines("1 a 2\nb") == [[1, 2], []]

    def test_no_partition_check(self):
        # Duplicates and ids above N are passed through untouched.
        assert parse_stage_lines("1 1\n99") == [[1, 1], [99]]

    @pytest.mark.parametrize("text", [None, "", "   \n  \n"])
    def test_empty_input(self, text):
        assert parse_stage_lines(text) == []


class TestBuildGraph:
    def test_build_returns_graph(self, diamond4: MultistageGraph):
        assert diamond4.num_nodes == 4
        assert diamond4.max_node == 4
        assert diamond4.edge_count == 5
        assert diamond4.adjacency[1] == ((2, 1), (3, 4))
        assert diamond4.stages == ((1,), (2, 3), (4,))
        assert list(diamond4.node_ids()) == [0, 1, 2, 3, 4]

    def test_edges_iterates_in_adjacency_order(self, diamond4: MultistageGraph):
        assert list(diamond4.edges()) == [
            (1, 2, 1),
            (1, 3, 4),
            (2, 3, 2),
            (2, 4, 6),
            (3, 4, 3),
        ]

    def test_invalid_count_produces_no_graph(self):
        with pytest.raises(InvalidNodeCount):
            build_graph("1", "1 2 3", "1")

    def test_each_build_is_fresh(self):
        first = build_graph("3", "1 2 1", "1\n2")
        second = build_graph("3", "2 3 1", "2\n3")
        assert first.adjacency[1] == ((2, 1),)
        assert second.adjacency[1] == ()
        assert second.adjacency[2] == ((3, 1),)

    def test_stages_optional(self):
        graph = build_graph(2, "1 2 1")
        assert graph.stages == ()

    def test_skipped_lines_recorded(self):
        graph = build_graph("4", "0 2 5\n1 2 1\n3 9 1")
        assert graph.skipped_lines == ("0 2 5", "3 9 1")
        assert graph.edge_count == 1

    def test_graph_is_frozen(self, diamond4: MultistageGraph):
        with pytest.raises(AttributeError):
            diamond4.num_nodes = 10  # type: ignore[misc]

    def test_nested_collections_are_immutable(self, diamond4: MultistageGraph):
        with pytest.raises(AttributeError):
            diamond4.adjacency[1].append((4, 1))  # type: ignore[attr-defined]
        with pytest.raises(TypeError):
            diamond4.stages[0] = (9,)  # type: ignore[index]

    def test_to_dict(self):
        graph = build_graph("3", "1 2 1\n0 1 1", "1\n2 3")
        assert graph.to_dict() == {
            "num_nodes": 3,
            "edges": [[1, 2, 1]],
            "stages": [[1], [2, 3]],
            "skipped_lines": ["0 1 1"],
        }
