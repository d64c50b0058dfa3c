"""Textured triangle meshes and their JSON, compressed and binary file formats."""

from __future__ import annotations

import json
import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

import lz4.block

from a4engine.matrices import Matrix3

FILE_VERSION = 1
MAX_DECOMPRESSED_SIZE = 10_000_000

_U8 = struct.Struct("<B")
_U32 = struct.Struct("<I")
_I32 = struct.Struct("<i")
_VERTEX = struct.Struct("<8f")

PathLike = Union[str, Path]


class ModelError(Exception):
    """Raised when a model cannot be saved, loaded or decoded."""


@dataclass(frozen=True)
class ModelVertex:
    """A vertex: position, texture coordinates and RGBA colour in [0, 1]."""

    pos: tuple[float, float] = (0.0, 0.0)
    uv: tuple[float, float] = (0.0, 0.0)
    color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)


@dataclass
class Model:
    """A mesh of vertices, optional triangle indices and an optional texture path."""

    texture: str = ""
    vertices: list[ModelVertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    def is_valid(self) -> bool:
        """A model needs vertices; texture and indices are optional."""
        return bool(self.vertices)

    def transformed_positions(self, matrix: Matrix3) -> list[tuple[float, float]]:
        """Return every vertex position with ``matrix`` applied."""
        return [matrix.transform_point(vertex.pos) for vertex in self.vertices]

    def to_json(self) -> dict[str, Any]:
        """Return the model as a JSON-ready document."""
        doc: dict[str, Any] = {"version": FILE_VERSION}
        if self.texture:
            doc["texture"] = self.texture
        if self.indices:
            doc["indices"] = list(self.indices)

        vertices = []
        for vertex in self.vertices:
            r, g, b, a = vertex.color
            color: dict[str, float] = {"r": r, "g": g, "b": b}
            if a != 1.0:
                color["a"] = a
            vertices.append(
                {
                    "pos": {"x": vertex.pos[0], "y": vertex.pos[1]},
                    "uv": {"u": vertex.uv[0], "v": vertex.uv[1]},
                    "color": color,
                }
            )
        doc["vertices"] = vertices
        return doc

    @classmethod
    def from_json(cls, doc: dict[str, Any]) -> Model:
        """Build a model from a document produced by :meth:`to_json`."""
        try:
            version = int(doc["version"])
            if version > FILE_VERSION:
                raise ModelError(
                    f"model file has unsupported version {version} "
                    f"(current version is {FILE_VERSION})"
                )
            texture = doc.get("texture", "")
            indices = [int(i) for i in doc.get("indices", [])]
            vertices = []
            for entry in doc["vertices"]:
                pos_doc = entry["pos"]
                pos = (float(pos_doc["x"]), float(pos_doc["y"]))
                uv = (0.0, 0.0)
                if "uv" in entry:
                    uv = (float(entry["uv"]["u"]), float(entry["uv"]["v"]))
                color = (1.0, 1.0, 1.0, 1.0)
                if "color" in entry:
                    c = entry["color"]
                    color = (
                        float(c["r"]),
                        float(c["g"]),
                        float(c["b"]),
                        float(c.get("a", 1.0)),
                    )
                vertices.append(ModelVertex(pos=pos, uv=uv, color=color))
        except (KeyError, TypeError, ValueError) as exc:
            if isinstance(exc, ModelError):
                raise
            raise ModelError(f"malformed model document: {exc}") from exc
        return cls(texture=texture, vertices=vertices, indices=indices)

    def save(self, path: PathLike) -> None:
        """Write the model; the extension (.model, .cmodel, .bmodel) picks the format."""
        path = Path(path)
        suffix = path.suffix
        if suffix == ".model":
            path.write_text(json.dumps(self.to_json(), indent=4), encoding="utf-8")
        elif suffix == ".cmodel":
            path.write_bytes(self._to_compressed())
        elif suffix == ".bmodel":
            path.write_bytes(self._to_binary())
        else:
            raise ModelError(f"unknown extension {suffix!r}")

    @classmethod
    def load(cls, path: PathLike) -> Model:
        """Read a model; the extension (.model, .cmodel, .bmodel) picks the format."""
        path = Path(path)
        suffix = path.suffix
        if suffix == ".model":
            return cls._from_json_text(path.read_text(encoding="utf-8"))
        if suffix == ".cmodel":
            return cls._from_compressed(path.read_bytes(), path)
        if suffix == ".bmodel":
            return cls._from_binary(path.read_bytes())
        raise ModelError(f"unknown extension {suffix!r}")

    @classmethod
    def _from_json_text(cls, text: str) -> Model:
        try:
            doc = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ModelError(f"invalid model JSON: {exc}") from exc
        if not isinstance(doc, dict):
            raise ModelError("model JSON must be an object")
        return cls.from_json(doc)

    def _to_compressed(self) -> bytes:
        payload = json.dumps(self.to_json(), separators=(",", ":")).encode("utf-8")
        compressed = lz4.block.compress(payload, store_size=False)
        return _U32.pack(len(payload)) + compressed

    @classmethod
    def _from_compressed(cls, data: bytes, path: Path) -> Model:
        if len(data) < _U32.size:
            raise ModelError(f"failed to load model file {path}: file is truncated")
        (size,) = _U32.unpack_from(data)
        if size > MAX_DECOMPRESSED_SIZE:
            raise ModelError(
                f"failed to load model file {path}: decompressed size is too big "
                f"({size}), is the file corrupt?"
            )
        try:
            payload = lz4.block.decompress(data[_U32.size:], uncompressed_size=size)
        except lz4.block.LZ4BlockError as exc:
            raise ModelError(f"failed to load model file {path}: corrupt file") from exc
        try:
            text = payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ModelError(f"failed to load model file {path}: corrupt file") from exc
        return cls._from_json_text(text)

    def _to_binary(self) -> bytes:
        texture = self.texture.encode("utf-8")
        parts = [_U8.pack(FILE_VERSION), _U32.pack(len(texture)), texture]
        parts.append(_U32.pack(len(self.indices)))
        parts.extend(_I32.pack(index) for index in self.indices)
        parts.append(_U32.pack(len(self.vertices)))
        parts.extend(
            _VERTEX.pack(*vertex.pos, *vertex.uv, *vertex.color)
            for vertex in self.vertices
        )
        return b"".join(parts)

    @classmethod
    def _from_binary(cls, data: bytes) -> Model:
        reader = _Reader(data)
        (version,) = reader.unpack(_U8)
        if version > FILE_VERSION:
            raise ModelError(
                f"model file has unsupported version {version} "
                f"(current version is {FILE_VERSION})"
            )
        (path_length,) = reader.unpack(_U32)
        try:
            texture = reader.take(path_length).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ModelError("texture path is not valid UTF-8") from exc

        (index_count,) = reader.unpack(_U32)
        indices = [reader.unpack(_I32)[0] for _ in range(index_count)]

        (vertex_count,) = reader.unpack(_U32)
        vertices = []
        for _ in range(vertex_count):
            px, py, u, v, r, g, b, a = reader.unpack(_VERTEX)
            vertices.append(ModelVertex(pos=(px, py), uv=(u, v), color=(r, g, b, a)))
        return cls(texture=texture, vertices=vertices, indices=indices)


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = data
        self._offset = 0

    def take(self, count: int) -> bytes:
        end = self._offset + count
        if end > len(self._data):
            raise ModelError("model file is truncated")
        chunk = self._data[self._offset:end]
        self._offset = end
        return chunk

    def unpack(self, layout: struct.Struct) -> tuple:
        return layout.unpack(self.take(layout.size))