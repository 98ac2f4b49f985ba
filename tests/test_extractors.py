"""Tests for the three mage-init dependency extractors."""

from __future__ import annotations

import pytest

from magedeps.exceptions import ExtractionError, FragmentSyntaxError, ShapeMismatchError
from magedeps.extractor.extractors import (
    extract_data_bind,
    extract_data_mage_init,
    extract_x_magento_init,
)


class TestExtractDataMageInit:
    def test_single_module(self):
        assert extract_data_mage_init('{"Module/Name": {}}') == ["Module/Name"]

    def test_multiple_modules_keep_order(self):
        value = '{"collapsible": {"active": true}, "Magento_Ui/js/modal/modal": {}}'
        assert extract_data_mage_init(value) == ["collapsible", "Magento_Ui/js/modal/modal"]

    def test_options_are_not_dependencies(self):
        value = '{"Vendor_Module/js/widget": {"url": "/checkout", "nested": {"a": 1}}}'
        assert extract_data_mage_init(value) == ["Vendor_Module/js/widget"]

    def test_invalid_javascript(self):
        with pytest.raises(FragmentSyntaxError):
            extract_data_mage_init("{not: valid:: json}")

    def test_computed_key(self):
        with pytest.raises(ShapeMismatchError):
            extract_data_mage_init("{[dynamic]: {}}")


class TestExtractDataBind:
    def test_ignores_other_bindings(self):
        value = "mageInit: {'Module/A': {}}, click: doSomething"
        assert extract_data_bind(value) == ["Module/A"]

    def test_mage_init_not_first(self):
        value = "visible: isVisible, mageInit: {'Module/A': {}, 'Module/B': {}}"
        assert extract_data_bind(value) == ["Module/A", "Module/B"]

    def test_missing_mage_init(self):
        with pytest.raises(ShapeMismatchError):
            extract_data_bind("text: mageInitLabel")

    def test_mage_init_not_an_object(self):
        with pytest.raises(ShapeMismatchError):
            extract_data_bind("mageInit: config")

    def test_invalid_javascript(self):
        with pytest.raises(ExtractionError):
            extract_data_bind("mageInit: {'Module/A': {}")


class TestExtractXMagentoInit:
    def test_single_selector(self):
        body = '{"*": {"Module/A": {}, "Module/B": {}}}'
        assert extract_x_magento_init(body) == ["Module/A", "Module/B"]

    def test_multiple_selectors(self):
        body = """
        {
            "#product_addtocart_form": {"Magento_Catalog/js/validate-product": {}},
            ".swatch-opt": {"Magento_Swatches/js/swatch-renderer": {"jsonConfig": {}}}
        }
        """
        assert extract_x_magento_init(body) == [
            "Magento_Catalog/js/validate-product",
            "Magento_Swatches/js/swatch-renderer",
        ]

    def test_selector_key_discarded(self):
        assert extract_x_magento_init('{"*": {}}') == []

    def test_selector_value_not_an_object(self):
        with pytest.raises(ShapeMismatchError):
            extract_x_magento_init('{"*": "Module/A"}')

    def test_invalid_javascript(self):
        with pytest.raises(FragmentSyntaxError):
            extract_x_magento_init('{"*": {"Module/A": {}}')
