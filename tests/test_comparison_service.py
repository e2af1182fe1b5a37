import logging

from addresscompare.domain.types import ComparisonResult, describe
from addresscompare.service_layer.comparison import compare_addresses


def test_equivalent_after_normalization():
    r = compare_addresses("123 Main St.", "123  MAIN   ST")
    assert r == ComparisonResult(
        match=True,
        match_percentage=100.0,
        details="Addresses are considered matching with 100% similarity",
    )


def test_street_abbreviation_is_different():
    r = compare_addresses("123 Main Street", "123 Main St")
    assert r.match is False
    assert r.match_percentage == 73.33
    assert r.details == "Addresses are different with 73.33% similarity"


def test_punctuation_only_inputs_compare_as_empty():
    r = compare_addresses("...", "#,-")
    assert r.match is True
    assert r.match_percentage == 100.0


def test_argument_order_does_not_matter():
    a, b = "77 Sunset Blvd Apt 3", "77 Sunset Boulevard #3"
    assert compare_addresses(a, b) == compare_addresses(b, a)


def test_describe_formats_percentages():
    assert describe(True, 90.0) == "Addresses are considered matching with 90% similarity"
    assert describe(False, 45.5) == "Addresses are different with 45.5% similarity"


def test_debug_log_omits_raw_addresses(caplog):
    with caplog.at_level(logging.DEBUG, logger="addresscompare.service_layer.comparison"):
        compare_addresses("9 Secret Lane", "9 Secret Ln")
    assert "similarity=" in caplog.text
    assert "Secret" not in caplog.text
