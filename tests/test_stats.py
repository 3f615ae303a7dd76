import pytest

from ticketstats.processing.stats import mean, median


def test_mean():
    prices = [100, 200, 300, 401]
    assert mean(prices) * len(prices) == pytest.approx(sum(prices))


def test_median_odd_is_middle_element():
    assert median([300, 100, 200]) == 200.0


def test_median_even_averages_central_elements():
    assert median([400, 100, 300, 200]) == 250.0


def test_median_even_keeps_fraction():
    assert median([151, 150]) == 150.5


def test_median_legacy_integer_division_truncates():
    assert median([151, 150], legacy_integer_division=True) == 150.0
    assert median([100, 200, 300, 400], legacy_integer_division=True) == 250.0


def test_median_single_value():
    assert median([42]) == 42.0


@pytest.mark.parametrize("func", [mean, median])
def test_empty_sample_raises(func):
    with pytest.raises(ValueError):
        func([])
