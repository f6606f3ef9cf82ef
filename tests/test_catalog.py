"""Tests for the form catalog and county reference data."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from petitionkit.catalog.counties import (
    CALIFORNIA_COUNTIES,
    county_display,
    normalize_county,
)
from petitionkit.catalog.forms import FormCatalog, FormCategory, FormDescriptor


class TestCounties:
    """Tests for county normalization."""

    def test_all_58_counties(self) -> None:
        assert len(CALIFORNIA_COUNTIES) == 58
        assert len(set(CALIFORNIA_COUNTIES)) == 58

    @pytest.mark.parametrize(
        "value",
        ["los-angeles", "Los Angeles", "  LOS ANGELES ", "los_angeles", "Los Angeles County"],
    )
    def test_normalize_variants(self, value: str) -> None:
        assert normalize_county(value) == "los-angeles"

    def test_unknown_county(self) -> None:
        with pytest.raises(ValueError):
            normalize_county("Cook")

    def test_display(self) -> None:
        assert county_display("san-luis-obispo") == "SAN LUIS OBISPO"
        assert county_display("kern") == "KERN"


class TestFormDescriptor:
    """Tests for form descriptor parsing."""

    def test_camel_case_keys(self) -> None:
        form = FormDescriptor.model_validate(
            {
                "code": "XX-1",
                "name": "Test Form",
                "category": "civil",
                "estimatedTime": "5 minutes",
                "requiredDocuments": ["ID", "Lease"],
            }
        )
        assert form.category is FormCategory.CIVIL
        assert form.estimated_time == "5 minutes"
        assert form.required_documents == ("ID", "Lease")
        assert form.display_name == "XX-1 - Test Form"

    def test_unknown_category_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FormDescriptor(code="XX-1", name="Test", category="traffic")

    def test_immutable(self) -> None:
        form = FormDescriptor(code="XX-1", name="Test", category="civil")
        with pytest.raises(ValidationError):
            form.code = "XX-2"

    def test_category_display_names(self) -> None:
        assert FormCategory.FAMILY.display_name == "Family Law"
        assert FormCategory.PROBATE.display_name == "Probate"


class TestFormCatalog:
    """Tests for catalog lookup and loading."""

    def test_default_catalog(self, catalog: FormCatalog) -> None:
        assert len(catalog) == 8
        assert [form.code for form in catalog][:2] == ["FL-100", "FL-200"]
        assert "FL-100" in catalog
        assert "fl-100" in catalog
        assert "ZZ-999" not in catalog

    def test_get(self, catalog: FormCatalog) -> None:
        form = catalog.get("fl-100")
        assert form.name == "Petition for Dissolution, Legal Separation, or Nullity"
        assert form.category is FormCategory.FAMILY
        assert form.required_documents == ("ID", "Marriage Certificate")
        assert form.fields["case"] == ("marriageDate", "separationDate", "county")

    def test_get_unknown(self, catalog: FormCatalog) -> None:
        with pytest.raises(KeyError):
            catalog.get("ZZ-999")

    def test_by_category(self, catalog: FormCatalog) -> None:
        codes = [form.code for form in catalog.by_category("family")]
        assert codes == ["FL-100", "FL-200", "ADOPT-200"]
        criminal = catalog.by_category(FormCategory.CRIMINAL)
        assert [form.code for form in criminal] == ["CR-180"]

    def test_duplicate_codes_rejected(self) -> None:
        form = FormDescriptor(code="XX-1", name="Test", category="civil")
        with pytest.raises(ValueError):
            FormCatalog([form, form])

    def test_shipped_yaml_matches_default(
        self, config_dir: Path, catalog: FormCatalog
    ) -> None:
        loaded = FormCatalog.load(config_dir / "forms.yaml")
        assert list(loaded) == list(catalog)

    def test_load_custom_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "forms.yaml"
        with open(path, "w") as f:
            yaml.dump(
                {"forms": [{"code": "T-1", "name": "Test", "category": "probate"}]}, f
            )
        loaded = FormCatalog.load(path)
        assert len(loaded) == 1
        assert loaded.get("T-1").required_documents == ("ID",)

    def test_load_missing_or_empty_falls_back(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty.yaml"
        empty.write_text("")
        assert len(FormCatalog.load(empty)) == 8
        assert len(FormCatalog.load(tmp_path / "missing.yaml")) == 8
