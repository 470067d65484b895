"""Graph-level helpers: traversal, validation and declarative building."""

from typing import Any, Iterator, Mapping

import structlog
from pydantic import BaseModel, Field, ValidationError

from .exceptions import GraphCycleError, InvalidConfigurationError
from .module import NoiseModule
from .modules import (
    Abs,
    Add,
    Billow,
    Blend,
    Checkerboard,
    Clamp,
    Const,
    Curve,
    Exponent,
    Invert,
    Max,
    Min,
    Multiply,
    Perlin,
    RidgedMulti,
    RotatePoint,
    ScaleBias,
    ScalePoint,
    Select,
    Simplex,
    TranslatePoint,
    Voronoi,
)
from .settings import (
    BillowSettings,
    ModuleSettings,
    PerlinSettings,
    RidgedMultiSettings,
    SimplexSettings,
    VoronoiSettings,
)

logger = structlog.get_logger()


MODULE_TYPES: dict[str, type[NoiseModule]] = {
    # Generators
    "billow": Billow,
    "checkerboard": Checkerboard,
    "const": Const,
    "perlin": Perlin,
    "ridged_multi": RidgedMulti,
    "simplex": Simplex,
    "voronoi": Voronoi,
    # Modifiers
    "abs": Abs,
    "clamp": Clamp,
    "curve": Curve,
    "exponent": Exponent,
    "invert": Invert,
    "scale_bias": ScaleBias,
    # Transformers
    "rotate_point": RotatePoint,
    "scale_point": ScalePoint,
    "translate_point": TranslatePoint,
    # Combiners
    "add": Add,
    "max": Max,
    "min": Min,
    "multiply": Multiply,
    # Selectors
    "blend": Blend,
    "select": Select,
}

# Generators configured through a settings record rather than keyword args.
_SETTINGS_TYPES: dict[type[NoiseModule], type[ModuleSettings]] = {
    Billow: BillowSettings,
    Perlin: PerlinSettings,
    RidgedMulti: RidgedMultiSettings,
    Simplex: SimplexSettings,
    Voronoi: VoronoiSettings,
}


def iter_modules(root: NoiseModule) -> Iterator[NoiseModule]:
    """Iterate over each module reachable from root once (depth-first).

    Unset slots are skipped and cycles do not cause repeats.

    Yields:
        NoiseModule instances, root first.
    """
    seen: set[int] = set()
    pending = [root]
    while pending:
        module = pending.pop()
        if id(module) in seen:
            continue
        seen.add(id(module))
        yield module
        # Reversed so that slot 0 is visited first.
        for source in reversed(module.sources):
            if source is not None:
                pending.append(source)


def validate_graph(root: NoiseModule) -> int:
    """Check that a graph can be evaluated.

    Walks every path from root without recursion, so deep graphs are fine.

    Args:
        root: Module the graph is evaluated from.

    Returns:
        Number of distinct modules in the graph.

    Raises:
        MissingSourceError: If any reachable module has an unset slot.
        GraphCycleError: If a module is reachable from its own sources.
    """
    on_path: set[int] = {id(root)}
    finished: set[int] = set()
    stack: list[tuple[NoiseModule, Iterator[int]]] = [
        (root, iter(range(root.source_count)))
    ]

    while stack:
        module, indices = stack[-1]
        for index in indices:
            source = module.source(index)
            key = id(source)
            if key in on_path:
                raise GraphCycleError(
                    f"{type(source).__name__} is reachable from itself via "
                    f"{type(module).__name__} slot {index}"
                )
            if key not in finished:
                on_path.add(key)
                stack.append((source, iter(range(source.source_count))))
                break
        else:
            stack.pop()
            on_path.discard(id(module))
            finished.add(id(module))

    logger.debug("graph_validated", root=type(root).__name__, modules=len(finished))
    return len(finished)


class NodeSpec(BaseModel):
    """One module in a declarative graph description."""

    type: str = Field(description="Module type name, e.g. 'perlin' or 'scale_bias'")
    sources: list[str] = Field(
        default_factory=list,
        description="Names of source nodes, in slot order",
    )
    settings: dict[str, Any] = Field(
        default_factory=dict,
        description="Settings record fields or constructor arguments",
    )


class GraphSpec(BaseModel):
    """Declarative description of a module graph."""

    root: str = Field(description="Name of the node to evaluate")
    nodes: dict[str, NodeSpec] = Field(default_factory=dict)


def _create_module(name: str, node: NodeSpec) -> NoiseModule:
    module_type = MODULE_TYPES.get(node.type)
    if module_type is None:
        raise InvalidConfigurationError(
            f"Node '{name}' has unknown module type '{node.type}'. "
            f"Known types: {sorted(MODULE_TYPES)}"
        )

    settings_type = _SETTINGS_TYPES.get(module_type)
    try:
        if settings_type is not None:
            return module_type(settings_type(**node.settings))
        return module_type(**node.settings)
    except TypeError as e:
        raise InvalidConfigurationError(f"Node '{name}': {e}") from e


def build_graph(spec: GraphSpec | Mapping[str, Any]) -> NoiseModule:
    """Build a module graph from a declarative description.

    Nodes referenced by several others are created once and shared.

    Example:
        root = build_graph({
            "root": "terrain",
            "nodes": {
                "base": {"type": "perlin", "settings": {"octave_count": 4}},
                "terrain": {
                    "type": "scale_bias",
                    "sources": ["base"],
                    "settings": {"scale": 0.5},
                },
            },
        })

    Args:
        spec: GraphSpec or a mapping with the same shape.

    Returns:
        The root module, fully wired and validated.

    Raises:
        InvalidConfigurationError: If the description is malformed.
        GraphCycleError: If the nodes reference each other in a cycle.
    """
    if not isinstance(spec, GraphSpec):
        try:
            spec = GraphSpec.model_validate(spec)
        except ValidationError as e:
            raise InvalidConfigurationError(str(e)) from e

    if spec.root not in spec.nodes:
        raise InvalidConfigurationError(f"Root node '{spec.root}' is not defined")

    modules = {name: _create_module(name, node) for name, node in spec.nodes.items()}

    for name, node in spec.nodes.items():
        module = modules[name]
        if len(node.sources) != module.source_count:
            raise InvalidConfigurationError(
                f"Node '{name}' ({node.type}) needs {module.source_count} sources, "
                f"got {len(node.sources)}"
            )
        for index, source_name in enumerate(node.sources):
            if source_name not in modules:
                raise InvalidConfigurationError(
                    f"Node '{name}' references undefined node '{source_name}'"
                )
            module.set_source(index, modules[source_name])

    root = modules[spec.root]
    validate_graph(root)
    logger.debug("graph_built", root=spec.root, nodes=len(modules))
    return root
