import json
import struct

import pytest

from a4engine.matrices import Matrix3
from a4engine.model import Model, ModelError, ModelVertex


@pytest.fixture
def sample_model():
    return Model(
        texture="assets/tile.png",
        vertices=[
            ModelVertex(pos=(0.0, 0.0), uv=(0.0, 0.0), color=(1.0, 0.5, 0.25, 1.0)),
            ModelVertex(pos=(16.0, 0.0), uv=(1.0, 0.0), color=(0.0, 1.0, 0.0, 0.5)),
            ModelVertex(pos=(0.0, 16.0), uv=(0.0, 1.0), color=(0.0, 0.0, 1.0, 1.0)),
        ],
        indices=[0, 1, 2],
    )


def test_is_valid_requires_vertices(sample_model):
    assert sample_model.is_valid()
    assert not Model().is_valid()
    assert not Model(texture="x.png", indices=[0, 1, 2]).is_valid()


def test_to_json_layout(sample_model):
    doc = sample_model.to_json()
    assert list(doc) == ["version", "texture", "indices", "vertices"]
    assert doc["version"] == 1
    assert doc["texture"] == "assets/tile.png"
    assert doc["indices"] == [0, 1, 2]
    first = doc["vertices"][0]
    assert first["pos"] == {"x": 0.0, "y": 0.0}
    assert first["uv"] == {"u": 0.0, "v": 0.0}
    assert first["color"] == {"r": 1.0, "g": 0.5, "b": 0.25}
    assert doc["vertices"][1]["color"]["a"] == 0.5


def test_to_json_omits_empty_texture_and_indices():
    doc = Model(vertices=[ModelVertex(pos=(1.0, 2.0))]).to_json()
    assert "texture" not in doc
    assert "indices" not in doc
    assert len(doc["vertices"]) == 1


def test_json_round_trip(sample_model):
    assert Model.from_json(sample_model.to_json()) == sample_model


def test_from_json_defaults():
    model = Model.from_json({"version": 1, "vertices": [{"pos": {"x": 3, "y": 4}}]})
    assert model.texture == ""
    assert model.indices == []
    assert model.vertices == [ModelVertex(pos=(3.0, 4.0))]


def test_from_json_alpha_defaults_to_one():
    model = Model.from_json(
        {
            "version": 1,
            "vertices": [
                {"pos": {"x": 0, "y": 0}, "color": {"r": 0.5, "g": 0.5, "b": 0.5}}
            ],
        }
    )
    assert model.vertices[0].color == (0.5, 0.5, 0.5, 1.0)


def test_from_json_rejects_newer_version():
    with pytest.raises(ModelError):
        Model.from_json({"version": 2, "vertices": []})


def test_from_json_rejects_missing_vertices():
    with pytest.raises(ModelError):
        Model.from_json({"version": 1})


@pytest.mark.parametrize("suffix", [".model", ".cmodel", ".bmodel"])
def test_file_round_trip(tmp_path, sample_model, suffix):
    path = tmp_path / f"mesh{suffix}"
    sample_model.save(path)
    assert Model.load(path) == sample_model


def test_regular_file_is_indented_json(tmp_path, sample_model):
    path = tmp_path / "mesh.model"
    sample_model.save(path)
    text = path.read_text(encoding="utf-8")
    assert json.loads(text) == sample_model.to_json()
    assert '\n    "version": 1' in text


def test_compressed_header_holds_json_size(tmp_path, sample_model):
    path = tmp_path / "mesh.cmodel"
    sample_model.save(path)
    data = path.read_bytes()
    (size,) = struct.unpack_from("<I", data)
    expected = json.dumps(sample_model.to_json(), separators=(",", ":")).encode()
    assert size == len(expected)


def test_binary_layout(tmp_path):
    model = Model(texture="ab", vertices=[ModelVertex(pos=(1.0, 2.0))], indices=[7])
    path = tmp_path / "mesh.bmodel"
    model.save(path)
    data = path.read_bytes()
    assert data[0] == 1
    assert struct.unpack_from("<I", data, 1) == (2,)
    assert data[5:7] == b"ab"
    assert struct.unpack_from("<Ii", data, 7) == (1, 7)
    assert struct.unpack_from("<I", data, 15) == (1,)
    assert struct.unpack_from("<8f", data, 19) == (1.0, 2.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0)
    assert len(data) == 19 + 32


def test_binary_rejects_newer_version(tmp_path):
    path = tmp_path / "mesh.bmodel"
    path.write_bytes(bytes([2]) + struct.pack("<III", 0, 0, 0))
    with pytest.raises(ModelError):
        Model.load(path)


def test_binary_truncated(tmp_path):
    path = tmp_path / "mesh.bmodel"
    path.write_bytes(bytes([1]) + struct.pack("<III", 0, 0, 3))
    with pytest.raises(ModelError):
        Model.load(path)


def test_compressed_rejects_oversized(tmp_path):
    path = tmp_path / "mesh.cmodel"
    path.write_bytes(struct.pack("<I", 10_000_001) + b"\x00" * 8)
    with pytest.raises(ModelError):
        Model.load(path)


def test_compressed_rejects_corrupt_payload(tmp_path):
    path = tmp_path / "mesh.cmodel"
    path.write_bytes(struct.pack("<I", 100) + b"\xff\xff\xff\xff")
    with pytest.raises(ModelError):
        Model.load(path)


def test_regular_rejects_invalid_json(tmp_path):
    path = tmp_path / "mesh.model"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ModelError):
        Model.load(path)


def test_unknown_extension(tmp_path, sample_model):
    with pytest.raises(ModelError):
        sample_model.save(tmp_path / "mesh.obj")
    with pytest.raises(ModelError):
        Model.load(tmp_path / "mesh.obj")


def test_transformed_positions(sample_model):
    positions = sample_model.transformed_positions(Matrix3.translate((10.0, 20.0)))
    assert positions == [(10.0, 20.0), (26.0, 20.0), (10.0, 36.0)]


def test_transformed_positions_identity(sample_model):
    positions = sample_model.transformed_positions(Matrix3.identity())
    assert positions == [v.pos for v in sample_model.vertices]