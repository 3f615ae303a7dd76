import logging

import pytest

from ticketstats.logging_config import resolve_level, setup_logging


@pytest.mark.parametrize("level, expected", [("debug", logging.DEBUG), (" Warning ", logging.WARNING),
                                             (logging.ERROR, logging.ERROR)])
def test_resolve_level(level, expected):
    assert resolve_level(level) == expected


def test_unknown_level_name_raises():
    with pytest.raises(ValueError, match="Unknown log level 'verbose'"):
        setup_logging("verbose")
