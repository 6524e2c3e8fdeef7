import pytest

from incdash.app.utils.formatting import format_brl


@pytest.mark.parametrize('value, expected', [
    (1200, 'R$ 1.200,00'),
    (0, 'R$ 0,00'),
    (5.5, 'R$ 5,50'),
    (1234567.891, 'R$ 1.234.567,89'),
    (-5.5, '-R$ 5,50'),
    (-0.001, 'R$ 0,00'),
    (999.999, 'R$ 1.000,00'),
])
def test_format_brl(value, expected):
    assert format_brl(value) == expected
