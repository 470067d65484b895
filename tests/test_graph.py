"""Tests for graph traversal, validation and declarative building."""

import pytest

from noisegraph.exceptions import GraphCycleError, InvalidConfigurationError, MissingSourceError
from noisegraph.graph import MODULE_TYPES, GraphSpec, NodeSpec, build_graph, iter_modules, validate_graph
from noisegraph.modules import Add, Const, Curve, Perlin, ScaleBias, Select
from noisegraph.settings import PerlinSettings
from noisegraph.types import NoiseQuality


def _chain(depth: int) -> tuple[ScaleBias, Const]:
    leaf = Const(1.0)
    top = leaf
    for _ in range(depth):
        sb = ScaleBias(bias=1.0)
        sb.set_source(0, top)
        top = sb
    return top, leaf


class TestIterModules:
    """Tests for iter_modules."""

    def test_single_module(self, one: Const) -> None:
        """A generator yields only itself."""
        assert list(iter_modules(one)) == [one]

    def test_depth_first_slot_order(self, zero: Const, one: Const) -> None:
        """Root comes first, then slot 0's subtree before slot 1's."""
        left = ScaleBias()
        left.set_source(0, zero)
        add = Add()
        add.set_source(0, left)
        add.set_source(1, one)
        assert list(iter_modules(add)) == [add, left, zero, one]

    def test_shared_module_yielded_once(self, one: Const) -> None:
        """Diamond-shaped graphs do not repeat modules."""
        add = Add()
        add.set_source(0, one)
        add.set_source(1, one)
        assert list(iter_modules(add)) == [add, one]

    def test_skips_unset_slots(self, one: Const) -> None:
        """Unset slots are not an error while iterating."""
        add = Add()
        add.set_source(1, one)
        assert list(iter_modules(add)) == [add, one]

    def test_cycle_terminates(self) -> None:
        """Cycles do not loop forever."""
        a = ScaleBias()
        b = ScaleBias()
        a.set_source(0, b)
        b.set_source(0, a)
        assert list(iter_modules(a)) == [a, b]


class TestValidateGraph:
    """Tests for validate_graph."""

    def test_counts_distinct_modules(self, one: Const) -> None:
        """Returns how many modules the graph holds."""
        add = Add()
        add.set_source(0, one)
        add.set_source(1, one)
        assert validate_graph(add) == 2

    def test_missing_source(self, one: Const) -> None:
        """Unset slots anywhere in the graph are reported."""
        sb = ScaleBias()
        add = Add()
        add.set_source(0, one)
        add.set_source(1, sb)
        with pytest.raises(MissingSourceError):
            validate_graph(add)

    def test_self_loop(self) -> None:
        """A module feeding itself is a cycle."""
        sb = ScaleBias()
        sb.set_source(0, sb)
        with pytest.raises(GraphCycleError):
            validate_graph(sb)

    def test_longer_cycle(self, one: Const) -> None:
        """Cycles through several modules are found."""
        a = Add()
        b = ScaleBias()
        c = ScaleBias()
        a.set_source(0, one)
        a.set_source(1, b)
        b.set_source(0, c)
        c.set_source(0, a)
        with pytest.raises(GraphCycleError):
            validate_graph(a)

    def test_diamond_is_not_cycle(self, one: Const) -> None:
        """Reconverging paths are valid."""
        left = ScaleBias()
        right = ScaleBias()
        left.set_source(0, one)
        right.set_source(0, one)
        add = Add()
        add.set_source(0, left)
        add.set_source(1, right)
        assert validate_graph(add) == 4

    def test_deep_graph(self) -> None:
        """Very deep chains validate without recursion limits."""
        top, _ = _chain(5000)
        assert validate_graph(top) == 5001


class TestBuildGraph:
    """Tests for build_graph."""

    def test_builds_from_mapping(self) -> None:
        """A plain dict describes a wired graph."""
        root = build_graph(
            {
                "root": "terrain",
                "nodes": {
                    "base": {"type": "const", "settings": {"value": 0.5}},
                    "terrain": {
                        "type": "scale_bias",
                        "sources": ["base"],
                        "settings": {"scale": 2.0, "bias": 1.0},
                    },
                },
            }
        )
        assert isinstance(root, ScaleBias)
        assert root.evaluate(0.0, 0.0, 0.0) == 2.0

    def test_builds_from_model(self) -> None:
        """GraphSpec instances are accepted directly."""
        spec = GraphSpec(root="n", nodes={"n": NodeSpec(type="perlin", settings={"octave_count": 2})})
        root = build_graph(spec)
        assert isinstance(root, Perlin)
        assert root.settings.octave_count == 2

    def test_generator_settings(self) -> None:
        """Generator nodes get a validated settings record."""
        root = build_graph(
            {"root": "p", "nodes": {"p": {"type": "perlin", "settings": {"quality": "best", "seed": 3}}}}
        )
        assert isinstance(root.settings, PerlinSettings)
        assert root.settings.quality == NoiseQuality.BEST
        assert root.settings.seed == 3

    def test_shared_node_created_once(self) -> None:
        """A node named twice is one shared module."""
        root = build_graph(
            {
                "root": "sum",
                "nodes": {
                    "c": {"type": "const", "settings": {"value": 3.0}},
                    "sum": {"type": "add", "sources": ["c", "c"]},
                },
            }
        )
        assert root.source(0) is root.source(1)
        assert root.evaluate(1.0, 2.0, 3.0) == 6.0

    def test_selector_control_slot(self) -> None:
        """The third source of a selector is its control."""
        root = build_graph(
            {
                "root": "sel",
                "nodes": {
                    "a": {"type": "const", "settings": {"value": -5.0}},
                    "b": {"type": "const", "settings": {"value": 5.0}},
                    "ctl": {"type": "const", "settings": {"value": 0.0}},
                    "sel": {
                        "type": "select",
                        "sources": ["a", "b", "ctl"],
                        "settings": {"lower_bound": -0.5, "upper_bound": 0.5},
                    },
                },
            }
        )
        assert isinstance(root, Select)
        assert root.evaluate(0.0, 0.0, 0.0) == 5.0

    def test_curve_control_points(self) -> None:
        """Curve nodes take their control points as pairs."""
        root = build_graph(
            {
                "root": "curve",
                "nodes": {
                    "c": {"type": "const", "settings": {"value": 0.0}},
                    "curve": {
                        "type": "curve",
                        "sources": ["c"],
                        "settings": {"control_points": [[-1, -1], [0, 0.5], [0.5, 0.7], [1, 1]]},
                    },
                },
            }
        )
        assert isinstance(root, Curve)
        assert root.evaluate(0.0, 0.0, 0.0) == 0.5

    def test_every_registered_type_constructs(self) -> None:
        """Each registered type name builds with default settings."""
        for name, module_type in MODULE_TYPES.items():
            spec = {"root": "n", "nodes": {"n": {"type": name}}}
            source_count = module_type().source_count
            if source_count:
                spec["nodes"]["c"] = {"type": "const"}
                spec["nodes"]["n"]["sources"] = ["c"] * source_count
            assert isinstance(build_graph(spec), module_type)

    def test_unknown_type(self) -> None:
        """Unknown module types are configuration errors."""
        with pytest.raises(InvalidConfigurationError, match="unknown module type"):
            build_graph({"root": "n", "nodes": {"n": {"type": "fractal"}}})

    def test_missing_root(self) -> None:
        """The root must name a defined node."""
        with pytest.raises(InvalidConfigurationError, match="Root node"):
            build_graph({"root": "missing", "nodes": {"n": {"type": "const"}}})

    def test_undefined_source(self) -> None:
        """Sources must name defined nodes."""
        with pytest.raises(InvalidConfigurationError, match="undefined node"):
            build_graph({"root": "n", "nodes": {"n": {"type": "invert", "sources": ["ghost"]}}})

    def test_wrong_source_count(self) -> None:
        """The number of sources must match the module's arity."""
        with pytest.raises(InvalidConfigurationError, match="needs 2 sources"):
            build_graph(
                {
                    "root": "sum",
                    "nodes": {"c": {"type": "const"}, "sum": {"type": "add", "sources": ["c"]}},
                }
            )

    def test_bad_generator_settings(self) -> None:
        """Invalid generator settings surface as configuration errors."""
        with pytest.raises(InvalidConfigurationError):
            build_graph({"root": "p", "nodes": {"p": {"type": "perlin", "settings": {"octave_count": 0}}}})

    def test_bad_constructor_argument(self) -> None:
        """Unknown keyword settings are configuration errors."""
        with pytest.raises(InvalidConfigurationError, match="Node 'sb'"):
            build_graph(
                {
                    "root": "sb",
                    "nodes": {
                        "c": {"type": "const"},
                        "sb": {"type": "scale_bias", "sources": ["c"], "settings": {"gain": 2}},
                    },
                }
            )

    def test_malformed_description(self) -> None:
        """Structurally invalid descriptions are configuration errors."""
        with pytest.raises(InvalidConfigurationError):
            build_graph({"nodes": {}})

    def test_cycle_rejected(self) -> None:
        """Nodes that reference each other in a loop are rejected."""
        with pytest.raises(GraphCycleError):
            build_graph(
                {
                    "root": "a",
                    "nodes": {
                        "a": {"type": "invert", "sources": ["b"]},
                        "b": {"type": "abs", "sources": ["a"]},
                    },
                }
            )
