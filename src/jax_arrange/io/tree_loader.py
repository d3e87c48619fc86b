"""XML loader for tree descriptions.

This module parses a tree description file into a TreeModel:

    <tree size="30" depth="4">
      <dna>
        <branch angle_x="12" angle_z="80" scale="0.85"/>
        <branch angle_x="35" angle_z="200" scale="0.7"/>
      </dna>
      <table>
        <stage transform="leaf" label="green"/>
        <stage transform="branch" label="saddlebrown"/>
      </table>
    </tree>

Stage order is the depth order of the table: the first stage is used at
the leaves. Transform names are looked up in `DEPTH_TRANSFORMS`.
"""

import logging
from typing import Dict, List, Optional

from lxml import etree

from jax_arrange.branching import DEPTH_TRANSFORMS
from jax_arrange.core import BranchDescriptor, DepthEntry, DepthTransform, TreeModel

logger = logging.getLogger(__name__)


def load_tree(path: str, transforms: Optional[Dict[str, DepthTransform]] = None) -> TreeModel:
    """Load an XML tree description.

    Args:
        path: Path to the XML file.
        transforms: Name -> depth transform lookup. Defaults to the built-in
            `DEPTH_TRANSFORMS`.

    Returns:
        TreeModel: The parsed tree.
    """
    tree = etree.parse(path)
    model = parse_tree(tree.getroot(), transforms)
    logger.info(
        "loaded tree from %s: depth=%d, %d branches per node, %d table stages",
        path, model.depth, len(model.dna), len(model.table),
    )
    return model


def load_tree_string(text, transforms: Optional[Dict[str, DepthTransform]] = None) -> TreeModel:
    """Parse an XML tree description held in a string or bytes."""
    if isinstance(text, str):
        text = text.encode("utf-8")
    return parse_tree(etree.fromstring(text), transforms)


def parse_tree(root, transforms: Optional[Dict[str, DepthTransform]] = None) -> TreeModel:
    if transforms is None:
        transforms = DEPTH_TRANSFORMS

    if root.tag != "tree":
        raise ValueError(f"Expected a <tree> root element, found <{root.tag}>")

    size = _float_attr(root, "size")
    depth = _int_attr(root, "depth")
    if depth < 0:
        raise ValueError(f"<tree> depth must be non-negative, got {depth}")

    dna: List[BranchDescriptor] = []
    for branch in root.findall("./dna/branch"):
        dna.append(BranchDescriptor(
            angle_x=_float_attr(branch, "angle_x"),
            angle_z=_float_attr(branch, "angle_z"),
            scale=_float_attr(branch, "scale"),
        ))
    if not dna:
        raise ValueError("<dna> must contain at least one <branch>")

    table: List[DepthEntry] = []
    for stage in root.findall("./table/stage"):
        name = _attr(stage, "transform")
        if name not in transforms:
            raise ValueError(
                f"Unknown transform '{name}' in <stage> (line {stage.sourceline}); "
                f"expected one of {sorted(transforms)}"
            )
        table.append(DepthEntry(transform=transforms[name], label=_attr(stage, "label")))
    if not table:
        raise ValueError("<table> must contain at least one <stage>")

    return TreeModel(size=size, depth=depth, dna=tuple(dna), table=tuple(table))


def _attr(elem, name: str) -> str:
    value = elem.get(name)
    if value is None:
        raise ValueError(f"<{elem.tag}> (line {elem.sourceline}) is missing attribute '{name}'")
    return value


def _float_attr(elem, name: str) -> float:
    value = _attr(elem, name)
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"<{elem.tag}> attribute '{name}' is not a number: {value!r}")


def _int_attr(elem, name: str) -> int:
    value = _attr(elem, name)
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"<{elem.tag}> attribute '{name}' is not an integer: {value!r}")
