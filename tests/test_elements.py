"""Tests for the element classification registry."""

import pytest

from html_json_converter.elements import (
    DEFAULT_ELEMENTS,
    HTML5_VOID_ELEMENTS,
    ElementRegistry,
    ElementType,
    ElementTypeConfig,
)
from html_json_converter.exceptions import ConfigurationError


class TestDefaults:

    @pytest.mark.parametrize("tag", HTML5_VOID_ELEMENTS)
    def test_void_elements(self, registry, tag):
        config = registry.get_element_config(tag)
        assert config.type is ElementType.VOID
        assert config.allow_children is False
        assert config.allow_attributes is True

    @pytest.mark.parametrize("tag", ["script", "style", "textarea", "title"])
    def test_raw_text_elements(self, registry, tag):
        assert registry.get_element_type(tag) is ElementType.RAW_TEXT

    @pytest.mark.parametrize("tag", ["svg", "math"])
    def test_foreign_elements(self, registry, tag):
        assert registry.get_element_type(tag) is ElementType.FOREIGN

    def test_normal_element(self, registry):
        config = registry.get_element_config("div")
        assert config == ElementTypeConfig(ElementType.NORMAL, True, True)

    def test_lookup_is_case_insensitive(self, registry):
        assert registry.get_element_type("IMG") is ElementType.VOID
        assert registry.get_element_type("Script") is ElementType.RAW_TEXT

    def test_unknown_tag_defaults_to_normal(self, registry):
        config = registry.get_element_config("my-widget")
        assert config.type is ElementType.NORMAL
        assert config.allow_children is True
        assert config.allow_attributes is True
        assert "my-widget" not in registry

    def test_seeded_with_full_tag_set(self, registry):
        assert len(registry) == len(DEFAULT_ELEMENTS)
        assert len(DEFAULT_ELEMENTS) > 100


class TestRegistration:

    def test_register_element(self, registry):
        registry.register_element("My-Icon", ElementTypeConfig(ElementType.VOID, False, True))
        assert registry.get_element_type("my-icon") is ElementType.VOID
        assert "MY-ICON" in registry

    def test_register_overwrites_default(self, registry):
        registry.register_element("div", ElementTypeConfig(ElementType.RAW_TEXT))
        assert registry.get_element_type("div") is ElementType.RAW_TEXT

    def test_register_accepts_dict_form(self, registry):
        registry.register_element("x-code", {"type": "raw-text"})
        assert registry.get_element_type("x-code") is ElementType.RAW_TEXT

    def test_register_elements_later_entry_wins(self, registry):
        registry.register_elements({
            "X-Tag": ElementTypeConfig(ElementType.VOID, False, True),
            "x-tag": ElementTypeConfig(ElementType.RAW_TEXT),
        })
        assert registry.get_element_type("x-tag") is ElementType.RAW_TEXT

    def test_remove_falls_back_to_normal_not_seed(self, registry):
        registry.remove_element("IMG")
        assert registry.get_element_type("img") is ElementType.NORMAL
        assert "img" not in registry

    def test_remove_unknown_tag_is_noop(self, registry):
        registry.remove_element("never-registered")
        assert len(registry) == len(DEFAULT_ELEMENTS)

    def test_reset_restores_defaults(self, registry):
        registry.register_element("x-tag", {"type": "void"})
        registry.register_element("div", {"type": "void"})
        registry.remove_element("img")

        registry.reset()

        assert "x-tag" not in registry
        assert registry.get_element_type("div") is ElementType.NORMAL
        assert registry.get_element_type("img") is ElementType.VOID
        assert len(registry) == len(DEFAULT_ELEMENTS)

    def test_registries_are_independent(self):
        first = ElementRegistry()
        second = ElementRegistry()
        first.register_element("p", {"type": "void"})
        assert second.get_element_type("p") is ElementType.NORMAL


class TestElementTypeConfig:

    def test_from_dict_void_disallows_children_by_default(self):
        config = ElementTypeConfig.from_dict({"type": "void"})
        assert config == ElementTypeConfig(ElementType.VOID, False, True)

    def test_from_dict_explicit_flags(self):
        config = ElementTypeConfig.from_dict(
            {"type": "foreign", "allow_children": True, "allow_attributes": False})
        assert config.type is ElementType.FOREIGN
        assert config.allow_attributes is False

    def test_from_dict_defaults_to_normal(self):
        assert ElementTypeConfig.from_dict({}).type is ElementType.NORMAL

    def test_from_dict_unknown_type(self):
        with pytest.raises(ConfigurationError, match="Unknown element type 'bogus'"):
            ElementTypeConfig.from_dict({"type": "bogus"})

    def test_to_dict(self):
        config = ElementTypeConfig(ElementType.RAW_TEXT)
        assert config.to_dict() == {
            "type": "raw-text",
            "allow_children": True,
            "allow_attributes": True,
        }
        assert ElementTypeConfig.from_dict(config.to_dict()) == config
