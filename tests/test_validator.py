"""Tests for keyword validation and search URL construction."""

from urllib.parse import parse_qs, urlsplit

import pytest

from amazon_scraper.scraper import InvalidInput
from amazon_scraper.scraper.urls import AmazonUrlBuilder
from amazon_scraper.scraper.validator import KeywordValidator, validate_keyword


class TestValidateKeyword:
    @pytest.mark.parametrize("keyword", [
        "usb charger",
        "usb-c",
        "iphone_15",
        "A",
        "x" * 50,
        "laptop stand 2024",
    ])
    def test_valid_keywords_unchanged(self, keyword):
        assert validate_keyword(keyword) == keyword

    def test_trims_whitespace(self):
        assert validate_keyword("  usb charger \t") == "usb charger"

    @pytest.mark.parametrize("keyword", [
        "usb@charger",
        "usb;rm -rf",
        "<script>",
        "café",
        "a/b",
        "q&a",
    ])
    def test_disallowed_characters(self, keyword):
        with pytest.raises(InvalidInput, match="invalid characters"):
            validate_keyword(keyword)

    @pytest.mark.parametrize("keyword", [None, "", "   "])
    def test_missing_keyword(self, keyword):
        with pytest.raises(InvalidInput, match="required"):
            validate_keyword(keyword)

    def test_too_long(self):
        with pytest.raises(InvalidInput, match="at most 50 characters"):
            validate_keyword("x" * 51)

    def test_trailing_newline_trimmed(self):
        assert validate_keyword("charger\n") == "charger"

    def test_validator_custom_max_length(self):
        validator = KeywordValidator(max_length=5)
        assert validator.validate("cable") == "cable"
        with pytest.raises(InvalidInput, match="at most 5 characters"):
            validator.validate("cables")


class TestAmazonUrlBuilder:
    def test_encodes_space(self):
        url = AmazonUrlBuilder().build("usb charger")
        assert url == "https://www.amazon.com/s?k=usb%20charger"

    def test_query_decodes_back(self):
        url = AmazonUrlBuilder().build("usb charger")
        assert parse_qs(urlsplit(url).query)["k"] == ["usb charger"]

    def test_hyphen_and_underscore_kept(self):
        url = AmazonUrlBuilder().build("usb-c_hub")
        assert url.endswith("?k=usb-c_hub")
