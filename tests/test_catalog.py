"""Tests for the quad library and the built-in catalog."""
import pytest
import yaml

from quad_taste.catalog.default_catalog import build_default_quads, load_quad_library
from quad_taste.catalog.library import AS_ATTRIBUTES, Quad, QuadLibrary
from quad_taste.core.config import CatalogConfig
from quad_taste.core.errors import CatalogError, QuadNotFoundError
from quad_taste.core.taxonomy import ATTRIBUTE_AXES, Axis, Category, CATEGORY_ORDER


def _images(quad_id):
    return tuple(f"{quad_id}_{i}_AS5_VD5_MP5.jpg" for i in range(1, 5))


# ── Quad ────────────────────────────────────────────────────────────


class TestQuad:

    def test_category_coerced_from_string(self):
        quad = Quad("EA-100", "exterior_architecture", _images("EA-100"))
        assert quad.category is Category.EXTERIOR_ARCHITECTURE
        assert quad.has_attributes is False

    def test_requires_four_images(self):
        with pytest.raises(CatalogError, match="expected 4 images"):
            Quad("EA-100", Category.EXTERIOR_ARCHITECTURE, ("a.jpg", "b.jpg", "c.jpg"))

    def test_unknown_category(self):
        with pytest.raises(CatalogError, match="unknown category"):
            Quad("XX-001", "attic", _images("XX-001"))

    def test_attribute_length_checked(self):
        with pytest.raises(CatalogError, match="needs 4 values"):
            Quad(
                "EA-100", Category.EXTERIOR_ARCHITECTURE, _images("EA-100"),
                attributes={axis: (1, 2, 3) for axis in ATTRIBUTE_AXES},
            )

    def test_partial_attributes_rejected(self):
        with pytest.raises(CatalogError, match="missing attributes"):
            Quad(
                "EA-100", Category.EXTERIOR_ARCHITECTURE, _images("EA-100"),
                attributes={Axis.WARMTH: (1, 2, 3, 4)},
            )

    def test_openness_has_no_attribute_source(self):
        with pytest.raises(CatalogError, match="no per-image attributes"):
            Quad(
                "EA-100", Category.EXTERIOR_ARCHITECTURE, _images("EA-100"),
                attributes={Axis.OPENNESS: (1, 2, 3, 4)},
            )

    def test_attributes_are_read_only(self, warmth_quad):
        with pytest.raises(TypeError):
            warmth_quad.attributes[Axis.WARMTH] = (0, 0, 0, 0)

    def test_attribute_vector(self, warmth_quad):
        vector = warmth_quad.attribute_vector(3)
        assert list(vector) == [9.0, 9.0, 8.0, 9.0]

    def test_from_dict_derives_attributes_from_style_codes(self):
        quad = Quad.from_dict({
            "quad_id": "KT-100",
            "category": "kitchens",
            "images": [
                "KT-100_1_AS1_VD1_MP1.jpg",
                "KT-100_2_AS3_VD2_MP2.jpg",
                "KT-100_3_AS6.jpg",
                "KT-100_4_AS9_VD9_MP9.jpg",
            ],
        })
        assert quad.attributes[Axis.WARMTH] == (2, 5, 6, 9)
        assert quad.attributes[Axis.TRADITION] == (1, 3, 6, 9)

    def test_from_dict_without_codes_has_no_attributes(self):
        quad = Quad.from_dict({
            "quad_id": "KT-100",
            "category": "kitchens",
            "images": ["KT-100-1", "KT-100-2", "KT-100-3", "KT-100-4"],
        })
        assert quad.has_attributes is False


# ── QuadLibrary ─────────────────────────────────────────────────────


class TestQuadLibrary:

    def test_lookup(self, library):
        quad = library.lookup("KT-003")
        assert quad.category is Category.KITCHENS

    def test_lookup_missing(self, library):
        with pytest.raises(QuadNotFoundError, match="ZZ-001"):
            library.lookup("ZZ-001")

    def test_lookup_missing_is_key_error(self, library):
        with pytest.raises(KeyError):
            library.lookup("ZZ-001")

    def test_get_missing_returns_none(self, library):
        assert library.get("ZZ-001") is None

    def test_list_by_category_in_catalog_order(self, library):
        quads = library.list_by_category(Category.GUEST_BEDROOMS)
        assert [q.quad_id for q in quads][:3] == ["GB-001", "GB-002", "GB-003"]
        assert len(quads) == 12

    def test_list_by_category_accepts_string(self, library):
        assert len(library.list_by_category("primary_bathrooms")) == 14

    def test_index_of(self, library):
        assert library.index_of("EA-001") == 0
        assert library.index_of("LS-001") == 12

    def test_duplicate_ids_rejected(self, warmth_quad):
        with pytest.raises(CatalogError, match="Duplicate quad id"):
            QuadLibrary([warmth_quad, warmth_quad])

    def test_contains_and_len(self, warmth_quad):
        library = QuadLibrary([warmth_quad])
        assert "LS-900" in library
        assert "LS-901" not in library
        assert len(library) == 1

    def test_yaml_round_trip(self, library, tmp_path):
        path = tmp_path / "quads.yaml"
        path.write_text(yaml.dump(library.to_dict()))

        loaded = QuadLibrary.from_yaml(path)
        assert len(loaded) == len(library)
        assert loaded.lookup("OL-012") == library.lookup("OL-012")

    def test_yaml_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            QuadLibrary.from_yaml(tmp_path / "nope.yaml")

    def test_yaml_empty_catalog(self, tmp_path):
        path = tmp_path / "quads.yaml"
        path.write_text("quads: []\n")
        with pytest.raises(CatalogError, match="no quads"):
            QuadLibrary.from_yaml(path)

    def test_yaml_entry_missing_field(self, tmp_path):
        path = tmp_path / "quads.yaml"
        path.write_text(yaml.dump({"quads": [{"category": "kitchens", "images": []}]}))
        with pytest.raises(CatalogError, match="missing field"):
            QuadLibrary.from_yaml(path)


# ── Built-in catalog ────────────────────────────────────────────────


class TestDefaultCatalog:

    def test_size_and_category_counts(self, library):
        assert len(library) == 110
        counts = library.category_counts()
        assert counts[Category.PRIMARY_BATHROOMS] == 14
        assert all(counts[c] == 12 for c in CATEGORY_ORDER if c is not Category.PRIMARY_BATHROOMS)

    def test_catalog_follows_category_order(self, library):
        seen = []
        for quad in library:
            if not seen or seen[-1] is not quad.category:
                seen.append(quad.category)
        assert seen == list(CATEGORY_ORDER)

    def test_images_encode_style_codes(self, library):
        quad = library.lookup("EA-001")
        assert quad.images == (
            "EA-001_1_AS1_VD2_MP2.jpg",
            "EA-001_2_AS3_VD3_MP4.jpg",
            "EA-001_3_AS6_VD6_MP5.jpg",
            "EA-001_4_AS8_VD7_MP7.jpg",
        )

    def test_attributes_follow_as_table(self, library):
        quad = library.lookup("EA-001")
        assert quad.attributes[Axis.WARMTH] == tuple(AS_ATTRIBUTES[c][Axis.WARMTH] for c in (1, 3, 6, 8))

    def test_base_url_prefix(self):
        quads = build_default_quads("https://cdn.example.com/taste/", "png")
        assert quads[0].images[0] == "https://cdn.example.com/taste/EA-001_1_AS1_VD2_MP2.png"

    def test_load_quad_library_is_shared(self):
        config = CatalogConfig(image_base_url="https://cdn.example.com")
        assert load_quad_library(config) is load_quad_library(config)

    def test_load_quad_library_from_yaml(self, warmth_quad, tmp_path):
        path = tmp_path / "quads.yaml"
        path.write_text(yaml.dump(QuadLibrary([warmth_quad]).to_dict()))
        library = load_quad_library(CatalogConfig(path=str(path)))
        assert [q.quad_id for q in library] == ["LS-900"]
