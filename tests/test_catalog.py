"""Tests for catalog loading and category helpers."""

import pytest
import yaml

from costkit.catalog import filtered_categories, get_catalog, initial_selections, load_catalog, unknown_keys


def test_packaged_catalog_loads():
    catalog = get_catalog()
    assert catalog.policy.base_cost == 5
    assert catalog.categories["template"].costs["E-commerce"] == 5
    assert catalog.categories["inspiration"].conditional


def test_multi_select_categories():
    multi = {k for k, spec in get_catalog().categories.items() if spec.multi}
    assert multi == {"sections", "stickyElements"}


def test_every_priced_component_has_a_label():
    catalog = get_catalog()
    keys = {k for k, spec in catalog.categories.items() if spec.priced}
    keys |= set(catalog.addons) | {"base", "promptComplexity"}
    missing = keys - set(catalog.labels)
    assert not missing


def test_missing_categories_key_raises(tmp_path):
    path = tmp_path / "catalog.yaml"
    path.write_text("policy: {}\n")
    with pytest.raises(ValueError, match="categories"):
        load_catalog(path)


def test_invalid_catalog_raises(tmp_path):
    path = tmp_path / "catalog.yaml"
    path.write_text("categories:\n  template:\n    costs: {SaaS: lots}\n")
    with pytest.raises(ValueError):
        load_catalog(path)


def test_initial_selections():
    initial = initial_selections()
    assert initial["sections"] == []
    assert initial["stickyElements"] == []
    assert initial["template"] is None
    assert initial["customColors"]["primary"] == "#3b82f6"
    assert "persistent" not in initial


def test_initial_selections_copy_field_defaults():
    initial = initial_selections()
    initial["customColors"]["primary"] = "#000000"
    assert get_catalog().categories["customColors"].fields["primary"] == "#3b82f6"


def test_filtered_categories():
    everything = filtered_categories()
    assert "persistent" not in everything
    assert "customColors" not in everything
    assert everything[0] == "template"

    technical = filtered_categories("technical")
    assert "accessibility" in technical
    assert "template" not in technical

    assert filtered_categories("nonexistent") == []


def test_unknown_keys():
    assert unknown_keys({"template": "SaaS", "flavour": "mint"}) == ["flavour"]


def _write_catalog(tmp_path, mutate):
    raw = get_catalog().model_dump()
    mutate(raw)
    path = tmp_path / "catalog.yaml"
    path.write_text(yaml.safe_dump(raw), encoding="utf-8")
    return path


def test_modified_copy_of_packaged_catalog_loads(tmp_path):
    path = _write_catalog(tmp_path, lambda raw: None)
    assert load_catalog(path).policy == get_catalog().policy


def test_broken_yaml_raises_value_error(tmp_path):
    path = tmp_path / "catalog.yaml"
    path.write_text("categories: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid catalog YAML"):
        load_catalog(path)


def test_non_mapping_catalog_raises(tmp_path):
    path = tmp_path / "catalog.yaml"
    path.write_text("- categories\n", encoding="utf-8")
    with pytest.raises(ValueError, match="categories"):
        load_catalog(path)


def test_empty_prompt_tiers_rejected(tmp_path):
    path = _write_catalog(tmp_path, lambda raw: raw["policy"].update(prompt_tiers=[]))
    with pytest.raises(ValueError):
        load_catalog(path)


def test_bounded_last_prompt_tier_rejected(tmp_path):
    def mutate(raw):
        raw["policy"]["prompt_tiers"] = [{"max_words": 10, "cost": 0}]

    with pytest.raises(ValueError, match="last prompt tier"):
        load_catalog(_write_catalog(tmp_path, mutate))


def test_empty_cost_tiers_rejected(tmp_path):
    path = _write_catalog(tmp_path, lambda raw: raw["policy"]["generation"].update(tiers=[]))
    with pytest.raises(ValueError):
        load_catalog(path)


def test_bounded_last_cost_tier_rejected(tmp_path):
    def mutate(raw):
        raw["policy"]["refinement"]["tiers"] = [{"max_cost": 7, "label": "Simple"}]

    with pytest.raises(ValueError, match="last cost tier"):
        load_catalog(_write_catalog(tmp_path, mutate))


def test_inverted_clamp_range_rejected(tmp_path):
    path = _write_catalog(tmp_path, lambda raw: raw["policy"]["generation"].update(min_cost=50, max_cost=5))
    with pytest.raises(ValueError, match="exceeds max_cost"):
        load_catalog(path)
