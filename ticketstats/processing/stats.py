from collections.abc import Sequence


def mean(values: Sequence[int]) -> float:
    if not values:
        raise ValueError("mean of an empty sample")
    return sum(values) / len(values)


def median(values: Sequence[int], legacy_integer_division: bool = False) -> float:
    """Median of a numeric sample.

    For an even sample size the two central values are averaged. With legacy_integer_division
    the average is floor-divided (151 and 150 give 150.0 instead of 150.5), matching older reports.
    """
    if not values:
        raise ValueError("median of an empty sample")
    ordered = sorted(values)
    middle = len(ordered) // 2
    if len(ordered) % 2:
        return float(ordered[middle])
    lower, upper = ordered[middle - 1], ordered[middle]
    if legacy_integer_division:
        return float((lower + upper) // 2)
    return (lower + upper) / 2
