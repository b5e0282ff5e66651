"""Mesh case descriptions loaded from YAML."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.fv_ops import interpolate_faces, mean_registry
from ..core.field import FaceField
from ..core.mesh import MeshStructure, build_nonuniform_mesh, build_uniform_mesh
from ..utils.io import read_yaml_file
from ..utils.logging import get_logger
from ..utils.registry import Registry

logger = get_logger(__name__)

mesh_registry = Registry("mesh type")


@mesh_registry.register("uniform")
def _uniform_from_config(mesh_cfg: Dict[str, Any]) -> MeshStructure:
    counts = _require(mesh_cfg, "counts")
    lengths = mesh_cfg.get("lengths", [1.0] * len(counts))
    return build_uniform_mesh(len(counts), counts, lengths)


@mesh_registry.register("nonuniform", "graded")
def _nonuniform_from_config(mesh_cfg: Dict[str, Any]) -> MeshStructure:
    faces = _require(mesh_cfg, "faces")
    return build_nonuniform_mesh(len(faces), faces)


def _require(mesh_cfg: Dict[str, Any], key: str) -> List:
    if key not in mesh_cfg:
        raise KeyError(f"mesh entry requires '{key}'")
    value = mesh_cfg[key]
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"mesh '{key}' must be a list with one entry per axis, got {value!r}")
    return list(value)


@dataclass
class MeshCase:
    """How to build a mesh and which face interpolation to apply."""

    mesh: Dict[str, Any]
    scheme: str = "arithmetic"
    source: Optional[Path] = None
    extras: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]], source: Optional[Path] = None) -> "MeshCase":
        where = f" in {source}" if source is not None else ""
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"mesh case{where} must be a mapping with a 'mesh' entry, got {data!r}")
        data = dict(data)
        mesh_cfg = data.pop("mesh", None)
        interp_cfg = data.pop("interpolation", None) or {}
        if not isinstance(interp_cfg, dict):
            raise ValueError(f"'interpolation'{where} must be a mapping, got {interp_cfg!r}")
        if mesh_cfg is None:
            # bare mesh mapping
            mesh_cfg, data = data, {}
        if not isinstance(mesh_cfg, dict):
            raise ValueError(f"'mesh'{where} must be a mapping, got {mesh_cfg!r}")
        if not mesh_cfg:
            raise KeyError(f"case{where} requires a 'mesh' entry")
        mesh_cfg = dict(mesh_cfg)
        mtype = str(mesh_cfg.get("type", "uniform"))
        if mtype not in mesh_registry:
            raise ValueError(f"Unknown mesh type '{mtype}', expected one of {mesh_registry.keys()}")
        mesh_cfg["type"] = mesh_registry.canonical(mtype)
        scheme = str(interp_cfg.get("scheme", "arithmetic"))
        if scheme not in mean_registry:
            raise ValueError(f"Unknown interpolation scheme '{scheme}', expected one of {mean_registry.keys()}")
        scheme = mean_registry.canonical(scheme)
        return cls(mesh=mesh_cfg, scheme=scheme, source=source, extras=data)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "MeshCase":
        case_path = Path(path)
        return cls.from_dict(read_yaml_file(case_path), source=case_path)

    @property
    def mesh_type(self) -> str:
        return self.mesh["type"]

    def build(self) -> MeshStructure:
        factory = mesh_registry.get(self.mesh_type)
        mesh = factory(self.mesh)
        logger.info("built %r from %s", mesh, self.source or "mapping")
        return mesh

    def face_values(self, mesh: MeshStructure, field) -> FaceField:
        return interpolate_faces(mesh, field, self.scheme)
